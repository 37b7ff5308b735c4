"""Read-only result DTOs passed across the presentation boundary."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any


def copy_detail(value: Any) -> Any:
    """Return a deep copy of a detail value, keeping uncopyable leaves as is.

    Comparison details hold whatever a test compared, which may include locks,
    generators or open files. Such leaves are shared with the source instead of
    copied; mappings and lists around them are still copied.
    """
    try:
        return copy.deepcopy(value)
    except (TypeError, copy.Error):
        if isinstance(value, dict):
            return {key: copy_detail(item) for key, item in value.items()}
        if isinstance(value, list):
            return [copy_detail(item) for item in value]
        return value


@dataclass(frozen=True, slots=True)
class TestOutcome:
    """Final outcome of a single test.

    Attributes:
        key: Fully-qualified detail key (``package.path.testName``).
        name: Test name within its package.
        passed: Whether the test passed.
        detail: The detail value recorded for the test: a ``bool``, a message
            string or an ``{"expected": ..., "actual": ...}`` mapping.
    """

    __test__ = False  # keep pytest from collecting this class

    key: str
    name: str
    passed: bool
    detail: Any


@dataclass(frozen=True, slots=True)
class Report:
    """Immutable snapshot of an aggregate report.

    ``details`` is a read-only view over a private deep copy, in the order the
    tests were executed.
    """

    executed: int = 0
    passed: int = 0
    failed: int = 0
    details: Mapping[str, Any] = field(
        default_factory=lambda: MappingProxyType({})
    )

    def to_dict(self) -> dict[str, Any]:
        """Return a plain, independently mutable ``dict`` copy of the report."""
        return {
            "executed": self.executed,
            "passed": self.passed,
            "failed": self.failed,
            "details": {
                key: copy_detail(value) for key, value in self.details.items()
            },
        }
