"""Test package tree model.

A test package is a node in a tree of tests. Each node may carry a ``setup``
hook, a ``finally`` hook, a collection of tests and any number of named child
packages. Packages are usually written as plain nested mappings::

    TESTS = {
        "setup": lambda suite: setattr(suite, "numbers", [1, 2, 3]),
        "tests": {
            "hasNumbers": lambda suite: suite.assert_true(suite.numbers),
        },
        "finally": lambda suite: delattr(suite, "numbers"),
        "subpackage": {
            "tests": [test_first_number, test_second_number],
        },
    }

and turned into an immutable tree once with :meth:`TestPackage.from_mapping`.
Every key other than the three reserved ones is a child package.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any

from .errors import InvalidPackageError

if TYPE_CHECKING:
    from .suite import Suite

Hook = Callable[["Suite"], Any]
TestFunc = Callable[["Suite"], Any]

SETUP_KEY = "setup"
TESTS_KEY = "tests"
FINALLY_KEY = "finally"
RESERVED_KEYS = frozenset({SETUP_KEY, TESTS_KEY, FINALLY_KEY})


@dataclass(frozen=True, slots=True)
class TestCase:
    """A named test function.

    The function receives the test's :class:`~treesuite.domain.suite.Suite` and
    may be a coroutine function.
    """

    __test__ = False  # keep pytest from collecting this class

    name: str
    func: TestFunc


@dataclass(frozen=True, slots=True)
class HookChain:
    """Setup and finalizer hooks accumulated along a branch of the tree.

    ``setups`` run in ancestor-to-current order before each test; ``finalizers``
    run in current-to-ancestor order after each test.
    """

    setups: tuple[Hook, ...] = ()
    finalizers: tuple[Hook, ...] = ()

    def extend(self, setup: Hook | None, finalizer: Hook | None) -> HookChain:
        """Return a new chain including a package's own hooks.

        The setup hook is appended and the finalizer prepended. ``self`` is left
        untouched.
        """
        if setup is None and finalizer is None:
            return self
        return HookChain(
            setups=(self.setups + (setup,)) if setup is not None else self.setups,
            finalizers=(
                (finalizer,) + self.finalizers
                if finalizer is not None
                else self.finalizers
            ),
        )


@dataclass(frozen=True, slots=True)
class TestPackage:
    """Immutable node of the test package tree."""

    __test__ = False  # keep pytest from collecting this class

    setup: Hook | None = None
    finalizer: Hook | None = None
    tests: tuple[TestCase, ...] = ()
    children: Mapping[str, TestPackage] = field(
        default_factory=lambda: MappingProxyType({})
    )

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any], path: str = "") -> TestPackage:
        """Build a package tree from nested mappings.

        Args:
            mapping: Package mapping using the reserved keys ``setup``,
                ``tests`` and ``finally``; every other key names a child package.
            path: Dotted path of the mapping, used in error messages only.

        Returns:
            The root of the immutable package tree.

        Raises:
            InvalidPackageError: If a hook or test is not callable, ``tests`` is
                neither a mapping nor a sequence, or a child is not a mapping.
        """
        if isinstance(mapping, TestPackage):
            return mapping
        if not isinstance(mapping, Mapping):
            raise InvalidPackageError(
                path, f"expected a mapping, got {type(mapping).__name__}"
            )

        setup = _hook(mapping.get(SETUP_KEY), SETUP_KEY, path)
        finalizer = _hook(mapping.get(FINALLY_KEY), FINALLY_KEY, path)
        tests = _tests(mapping.get(TESTS_KEY), path)
        children = {
            str(key): cls.from_mapping(child, _join(path, str(key)))
            for key, child in mapping.items()
            if key not in RESERVED_KEYS
        }
        return cls(
            setup=setup,
            finalizer=finalizer,
            tests=tests,
            children=MappingProxyType(children),
        )

    def count_tests(self) -> int:
        """Return the number of tests in this package and all descendants."""
        return len(self.tests) + sum(
            child.count_tests() for child in self.children.values()
        )


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _hook(value: Any, key: str, path: str) -> Hook | None:
    if value is None:
        return None
    if not callable(value):
        raise InvalidPackageError(path, f"'{key}' hook is not callable")
    return value


def _tests(value: Any, path: str) -> tuple[TestCase, ...]:
    if value is None:
        return ()
    if isinstance(value, Mapping):
        items: list[tuple[str, Any]] = [(str(k), v) for k, v in value.items()]
    elif isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        items = [(_func_name(func), func) for func in value]
    else:
        raise InvalidPackageError(
            path, f"'tests' must be a mapping or a sequence, got {type(value).__name__}"
        )

    tests = []
    for name, func in items:
        if not callable(func):
            raise InvalidPackageError(path, f"test '{name}' is not callable")
        tests.append(TestCase(name=name, func=func))
    return tuple(tests)


def _func_name(func: Any) -> str:
    if hasattr(func, "__name__"):
        return func.__name__
    if hasattr(func, "func") and hasattr(func.func, "__name__"):
        return func.func.__name__
    return repr(func)
