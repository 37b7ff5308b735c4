"""Per-test assertion suite.

Every test receives a fresh :class:`Suite` and declares its outcome through it.
Passing assertions may be repeated (the latest one stands), but the first
failure latches: once ``abort`` is set every later call is ignored, so the first
failure is the one reported.

Hooks and tests may also hang their own fixtures on the suite as plain
attributes (``suite.numbers = [1, 2, 3]``); finally hooks see the same object.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .equality import is_composite, loose_equals, strict_equals, to_number

if TYPE_CHECKING:
    from treesuite.interfaces.serializer import Serializer

logger = logging.getLogger(__name__)


class _Unset:
    """Marker for comparison values that were never recorded."""

    def __repr__(self) -> str:
        return "<unset>"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


class Suite:  # pylint: disable=too-many-instance-attributes
    """Assertion surface handed to a single test.

    Args:
        serializer: Serializer used by the structural assertions
            (``assert_equals`` and ``assert_not_equals``).

    Attributes:
        result: ``None`` until an assertion ran, then ``True`` or ``False``.
        message: Failure message, if one was given.
        expected: Expected value of the first failed comparison, else ``UNSET``.
        actual: Actual value of the first failed comparison, else ``UNSET``.
        abort: Set by the first failure; later calls are no-ops.
    """

    def __init__(self, serializer: Serializer) -> None:
        self.serializer = serializer
        self.result: bool | None = None
        self.message: str | None = None
        self.expected: Any = UNSET
        self.actual: Any = UNSET
        self.abort = False

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(result={self.result!r}, "
            f"message={self.message!r}, abort={self.abort!r})"
        )

    @property
    def has_comparison(self) -> bool:
        """Whether both an expected and an actual value were recorded."""
        return self.expected is not UNSET and self.actual is not UNSET

    # --- outcome primitives ---

    def passed(self) -> None:
        """Finish the test with a positive result."""
        self._set_result(True)

    def failed(self, message: str | None = None) -> None:
        """Finish the test with a negative result.

        Args:
            message: Optional explanation. Strings are stored verbatim; any
                other truthy value is stored as its ``str()``, so
                ``failed(42)`` records the message ``"42"``.
        """
        self._set_result(False, message)

    # --- assertions ---

    def assert_true(self, condition: Any) -> None:
        """Pass if *condition* is truthy."""
        self._set_result(bool(condition))

    def assert_false(self, condition: Any) -> None:
        """Pass if *condition* is falsy."""
        self._set_result(not condition)

    def assert_same(self, expected: Any, actual: Any) -> None:
        """Pass if both values are loosely equal.

        Objects compare by identity, primitives with type coercion, so
        ``assert_same(1, "1")`` passes and ``assert_same([1], [1])`` fails.
        """
        self._set_result(loose_equals(expected, actual), (expected, actual))

    def assert_not_same(self, expected: Any, actual: Any) -> None:
        """Pass if both values are strictly unequal.

        Note the asymmetry with :meth:`assert_same`: the comparison is strict,
        so ``assert_not_same(1, "1")`` passes as well.
        """
        self._set_result(not strict_equals(expected, actual))

    def assert_equals(self, expected: Any, actual: Any, delta: Any = None) -> None:
        """Pass if both values are structurally equal.

        Composite values are serialized before comparing. With a truthy *delta*
        the values are compared numerically and pass when they differ by less
        than *delta*.

        Args:
            expected: Expected value.
            actual: Actual value.
            delta: Allowed difference when comparing floats.
        """
        if is_composite(expected):
            expected = self.serializer.dumps(expected)
        if is_composite(actual):
            actual = self.serializer.dumps(actual)
        if delta:
            result = abs(to_number(expected) - to_number(actual)) < delta
        else:
            result = strict_equals(expected, actual)
        self._set_result(result, (expected, actual))

    def assert_not_equals(self, expected: Any, actual: Any) -> None:
        """Pass if the serialized forms of both values differ."""
        self.assert_not_same(
            self.serializer.dumps(expected), self.serializer.dumps(actual)
        )

    # camelCase names, used by packages ported from the browser suites
    assertTrue = assert_true
    assertFalse = assert_false
    assertSame = assert_same
    assertNotSame = assert_not_same
    assertEquals = assert_equals
    assertNotEquals = assert_not_equals

    # --- internals ---

    def _set_result(
        self, result: bool, payload: str | tuple[Any, Any] | None = None
    ) -> None:
        if self.abort:
            logger.debug("Ignoring result %s after first failure", result)
            return
        self.result = result
        if result:
            return
        self.abort = True
        if not payload:
            return
        if isinstance(payload, tuple):
            self.expected, self.actual = payload
        else:
            self.message = str(payload)
