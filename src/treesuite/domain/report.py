"""Aggregate report of a run.

The report is mutated only by the walker while a run is in progress. Callers
never see the live object; they get :class:`~treesuite.interfaces.report.Report`
snapshots instead.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from treesuite.interfaces.report import Report, TestOutcome, copy_detail

if TYPE_CHECKING:
    from .suite import Suite


def detail_key(path: str, name: str) -> str:
    """Return the fully-qualified detail key of a test.

    Example:
        ``detail_key("tests.subpackage", "eachNumber")`` returns
        ``"tests.subpackage.eachNumber"``.
    """
    return f"{path}.{name}"


def detail_value(suite: Suite) -> Any:
    """Return the detail value recorded for a finished suite.

    The plain result comes first; a failure message replaces it, and a failed
    comparison replaces the message with the ``expected``/``actual`` pair.
    """
    value: Any = bool(suite.result)
    if suite.message:
        value = suite.message
    if not suite.result and suite.has_comparison:
        value = {"expected": suite.expected, "actual": suite.actual}
    return value


@dataclass
class AggregateReport:
    """Mutable counters and details of a run."""

    executed: int = 0
    passed: int = 0
    failed: int = 0
    details: dict[str, Any] = field(default_factory=dict)

    def record(self, path: str, name: str, suite: Suite) -> TestOutcome:
        """Count a finished test and store its detail.

        Args:
            path: Dotted path of the test's package.
            name: Test name within the package.
            suite: The test's suite holding the final outcome.

        Returns:
            The recorded outcome.
        """
        passed = bool(suite.result)
        if passed:
            self.passed += 1
        else:
            self.failed += 1
        key = detail_key(path, name)
        value = detail_value(suite)
        self.details[key] = value
        return TestOutcome(key=key, name=name, passed=passed, detail=value)

    def snapshot(self) -> Report:
        """Return an immutable deep copy of the current state.

        Detail values that cannot be copied are shared, see
        :func:`~treesuite.interfaces.report.copy_detail`.
        """
        return Report(
            executed=self.executed,
            passed=self.passed,
            failed=self.failed,
            details=MappingProxyType(
                {key: copy_detail(value) for key, value in self.details.items()}
            ),
        )
