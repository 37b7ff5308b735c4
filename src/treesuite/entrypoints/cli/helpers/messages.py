"""Terminal message helpers for the TREESUITE CLI.

Small helpers for rendering user-visible lines with emoji->ASCII fallbacks.
Messages write to stderr so stdout can carry the JSON report.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def glyph(choice: tuple[str, str]) -> str:
    """Return the emoji of *choice* if stderr can encode it, else its fallback.

    Args:
        choice: ``(emoji, ascii_fallback)`` pair.
    """
    emoji, fallback = choice
    encoding = getattr(click.get_text_stream("stderr"), "encoding", None) or "ascii"
    try:
        emoji.encode(encoding)
    except (UnicodeEncodeError, LookupError):
        return fallback
    return emoji


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  12 passed, 0 failed.``
    """
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Emit a red, bold error line to stderr."""
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
