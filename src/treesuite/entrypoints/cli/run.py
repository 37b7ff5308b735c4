"""``treesuite run``: execute a test package tree.

Behavior
- The tree is referenced as ``module:attribute`` (argument or ``TREESUITE_TESTS``).
- Results are rendered to **stderr**; ``--json`` writes the final report to
  **stdout** so it can be piped into other tools.
- Exit status is 0 when every test passed, 1 when any test failed.

Failure modes
- Missing/unloadable reference or unknown ``--select`` package ->
  ``ClickException`` with guidance.
- A setup or finally hook raising -> the run is aborted and reported as a
  ``ClickException``; the traceback is in the log/flight recorder.
"""

from __future__ import annotations

import json
import logging

import click
from rich.console import Console

from treesuite import config
from treesuite.bootstrap import build_sink, build_walker
from treesuite.domain.errors import PackageNotFoundError
from treesuite.domain.package import TestPackage

from .helpers import error, success, warn

logger = logging.getLogger(__name__)

MISSING_TESTS_REF_MSG = (
    "No test package given.\n\n"
    "Pass a reference as argument or set TREESUITE_TESTS, e.g.:\n"
    "  treesuite run mypkg.tests:TESTS\n"
    "  export TREESUITE_TESTS='mypkg.tests:TESTS'"
)


def _load(ref: str | None) -> tuple[str, TestPackage]:
    if not ref:
        try:
            ref = config.get_tests_ref()
        except config.TestsRefNotSetError as e:
            raise click.ClickException(MISSING_TESTS_REF_MSG) from e
    try:
        return ref, config.load_tests(ref)
    except config.InvalidTestsRefError as e:
        raise click.ClickException(str(e)) from e


@click.command()
@click.argument("ref", required=False, metavar="MODULE:ATTRIBUTE")
@click.option(
    "--path",
    "-p",
    "path",
    envvar=config.PATH_ENV_VAR,
    show_envvar=True,
    help="Name of the root package, used as prefix of every result key "
    "(defaults to the attribute name).",
)
@click.option(
    "--select",
    "-s",
    "select",
    envvar=config.SELECT_ENV_VAR,
    show_envvar=True,
    help="Dotted path of a subpackage to run instead of the whole tree. "
    "Hooks of the enclosing packages still apply.",
)
@click.option(
    "--json",
    "as_json",
    is_flag=True,
    help="Write the final report as JSON to stdout.",
)
@click.option(
    "--headless",
    is_flag=True,
    help="Do not render results; only log them.",
)
@click.option(
    "--failures-only",
    is_flag=True,
    help="Only render a line for failing tests.",
)
@click.pass_context
def run(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    ref: str | None,
    path: str | None,
    select: str | None,
    as_json: bool,
    headless: bool,
    failures_only: bool,
) -> None:
    """Run every test of a package tree."""
    ref, root = _load(ref)
    path = path or config.default_path(ref)

    console = Console(stderr=True, no_color=ctx.color is False)
    sink = build_sink(headless=headless, console=console, show_passed=not failures_only)
    walker = build_walker(sink=sink)

    logger.info("Loaded %s (%d tests)", ref, root.count_tests())
    try:
        report = walker.run(root, path, select=select)
    except PackageNotFoundError as e:
        raise click.ClickException(str(e)) from e
    except Exception as e:  # pylint: disable=broad-except
        raise click.ClickException(
            f"Run aborted by a failing hook: {type(e).__name__}: {e}"
        ) from e

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2, default=repr))

    if report.executed == 0:
        warn("No tests were executed.")
    elif report.failed:
        error(f"{report.failed} of {report.executed} tests failed.")
        ctx.exit(1)
    else:
        success(f"All {report.executed} tests passed.")
