"""Presentation sink interface.

The walker reports progress to a presentation sink: a collaborator that may
render results somewhere (a terminal, a log, a web page) or ignore them
entirely. The engine produces the same report with or without a sink.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .report import Report, TestOutcome


class PresentationSink(abc.ABC):
    """Receiver of structured run events."""

    @abc.abstractmethod
    def on_test_start(self, name: str) -> None:
        """Called right before a test's setup hooks run.

        Args:
            name: Fully-qualified name of the test about to run.
        """

    @abc.abstractmethod
    def on_test_finish(self, name: str, outcome: TestOutcome) -> None:
        """Called once a test's outcome is final, before its finally hooks.

        Args:
            name: Fully-qualified name of the finished test.
            outcome: The recorded outcome.
        """

    @abc.abstractmethod
    def on_run_finish(self, report: Report) -> None:
        """Called once after the whole run completed.

        Args:
            report: Snapshot of the final aggregate report.
        """
