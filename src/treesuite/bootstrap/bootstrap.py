"""Wire sinks and the serializer into a package walker."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from treesuite.adapters.console import ConsoleSink
from treesuite.adapters.serializer import JsonSerializer
from treesuite.adapters.sinks import CompositeSink, LoggingSink, NullSink
from treesuite.service_layer.walker import PackageWalker

if TYPE_CHECKING:
    from rich.console import Console

    from treesuite.interfaces.serializer import Serializer
    from treesuite.interfaces.sink import PresentationSink

logger = logging.getLogger(__name__)


def build_sink(
    *, headless: bool = False, console: Console | None = None, show_passed: bool = True
) -> PresentationSink:
    """Build the presentation sink for a run.

    Args:
        headless: When True, nothing is rendered and run events only reach the
            log.
        console: Console the results are rendered to (ignored when headless).
        show_passed: Whether passing tests get a console line of their own.

    Returns:
        A sink that always logs and, unless headless, also renders to the
        console.
    """
    if headless:
        return LoggingSink()
    return CompositeSink(
        [LoggingSink(), ConsoleSink(console=console, show_passed=show_passed)]
    )


def build_walker(
    sink: PresentationSink | None = None, serializer: Serializer | None = None
) -> PackageWalker:
    """Build a package walker with injected collaborators.

    Args:
        sink: Presentation sink; defaults to a :class:`NullSink`.
        serializer: Serializer for structural assertions; defaults to
            :class:`JsonSerializer`.
    """
    sink = sink or NullSink()
    serializer = serializer or JsonSerializer()
    logger.debug(
        "Building walker with sink=%s, serializer=%s",
        type(sink).__name__,
        type(serializer).__name__,
    )
    return PackageWalker(serializer=serializer, sink=sink)
