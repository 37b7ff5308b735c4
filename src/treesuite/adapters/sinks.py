"""Headless and logging presentation sinks."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from treesuite.interfaces.sink import PresentationSink

if TYPE_CHECKING:
    from treesuite.interfaces.report import Report, TestOutcome

logger = logging.getLogger(__name__)


class NullSink(PresentationSink):
    """Sink that ignores every event (headless operation)."""

    def on_test_start(self, name: str) -> None:
        pass

    def on_test_finish(self, name: str, outcome: TestOutcome) -> None:
        pass

    def on_run_finish(self, report: Report) -> None:
        pass


class LoggingSink(PresentationSink):
    """Sink that writes run events to the standard logging system.

    Test starts are logged at DEBUG, passing tests at INFO, failing tests at
    WARNING, and the final report at INFO.

    Args:
        log: Logger to write to. Defaults to this module's logger.
    """

    def __init__(self, log: logging.Logger | None = None) -> None:
        self._logger = log or logger

    def on_test_start(self, name: str) -> None:
        self._logger.debug("Running %s", name)

    def on_test_finish(self, name: str, outcome: TestOutcome) -> None:
        if outcome.passed:
            self._logger.info("%s passed", name)
        elif isinstance(outcome.detail, bool):
            self._logger.warning("%s failed", name)
        else:
            self._logger.warning("%s failed: %s", name, outcome.detail)

    def on_run_finish(self, report: Report) -> None:
        self._logger.info(
            "Run finished: executed=%d, passed=%d, failed=%d",
            report.executed,
            report.passed,
            report.failed,
        )
        self._logger.debug("Details: %s", dict(report.details))


class CompositeSink(PresentationSink):
    """Sink that forwards every event to several sinks, in order."""

    def __init__(self, sinks: Iterable[PresentationSink]) -> None:
        self.sinks = tuple(sinks)

    def on_test_start(self, name: str) -> None:
        for sink in self.sinks:
            sink.on_test_start(name)

    def on_test_finish(self, name: str, outcome: TestOutcome) -> None:
        for sink in self.sinks:
            sink.on_test_finish(name, outcome)

    def on_run_finish(self, report: Report) -> None:
        for sink in self.sinks:
            sink.on_run_finish(report)
