"""Rich console presentation sink.

Renders one line per finished test and a summary table once the run is over.
Output goes to stderr by default so stdout stays free for machine-readable
reports (e.g. ``treesuite run --json``).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from treesuite.interfaces.sink import PresentationSink

if TYPE_CHECKING:
    from treesuite.interfaces.report import Report, TestOutcome


def describe_detail(detail: Any) -> str:
    """Return a one-line description of a failure detail.

    Args:
        detail: The recorded detail value: a bool, a message or an
            ``{"expected": ..., "actual": ...}`` mapping.

    Returns:
        An empty string for plain booleans, the message itself, or
        ``"expected <e>, got <a>"`` for comparisons.
    """
    if isinstance(detail, bool):
        return ""
    if isinstance(detail, dict):
        return f"expected {detail['expected']!r}, got {detail['actual']!r}"
    return str(detail)


class ConsoleSink(PresentationSink):
    """Sink that renders progress and results to a rich console.

    Args:
        console: Console to render to. Defaults to a stderr console.
        show_passed: When False, only failing tests get a line of their own.
    """

    def __init__(self, console: Console | None = None, show_passed: bool = True) -> None:
        self.console = console or Console(stderr=True)
        self.show_passed = show_passed

    def on_test_start(self, name: str) -> None:
        # lines are written on finish; starts only matter for live displays
        pass

    def on_test_finish(self, name: str, outcome: TestOutcome) -> None:
        if outcome.passed:
            if self.show_passed:
                self.console.print(f"[green]PASS[/green] {escape(name)}")
            return
        line = f"[bold red]FAIL[/bold red] {escape(name)}"
        if description := describe_detail(outcome.detail):
            line += f" [dim]-[/dim] {escape(description)}"
        self.console.print(line)

    def on_run_finish(self, report: Report) -> None:
        table = Table(title="Test summary", show_header=True, header_style="bold")
        table.add_column("Executed", justify="right")
        table.add_column("Passed", justify="right", style="green")
        table.add_column("Failed", justify="right", style="red")
        table.add_row(str(report.executed), str(report.passed), str(report.failed))
        self.console.print(table)
