"""Configuration utilities for TREESUITE.

This module centralizes small helpers and constants related to locating the test
package tree to run.

A tree is referenced as ``module:attribute`` (e.g. ``tests.fixtures.sample:TESTS``),
either on the command line or through the ``TREESUITE_TESTS`` environment
variable. The attribute may be a :class:`~treesuite.domain.package.TestPackage`,
a plain package mapping, or a zero-argument callable returning either.
"""

import importlib
import os
from typing import Any

from treesuite.domain.errors import InvalidPackageError, TreesuiteError
from treesuite.domain.package import TestPackage

TESTS_ENV_VAR = "TREESUITE_TESTS"  # pragma: no mutate
PATH_ENV_VAR = "TREESUITE_PATH"  # pragma: no mutate
SELECT_ENV_VAR = "TREESUITE_SELECT"  # pragma: no mutate


class TestsRefNotSetError(TreesuiteError):
    """Raised when the TREESUITE_TESTS environment variable is not set."""

    __test__ = False  # keep pytest from collecting this class


class InvalidTestsRefError(TreesuiteError):
    """Raised when a ``module:attribute`` reference cannot be loaded."""

    def __init__(self, ref: str, reason: str) -> None:
        super().__init__(f"Cannot load tests from '{ref}': {reason}")
        self.ref = ref
        self.reason = reason


def get_tests_ref() -> str:
    """Get the test tree reference from the environment.

    Returns:
        The value of the `TREESUITE_TESTS` environment variable.

    Raises:
        TestsRefNotSetError: If `TREESUITE_TESTS` is not set.
    """
    if not (ref := os.environ.get(TESTS_ENV_VAR)):
        raise TestsRefNotSetError
    return ref


def default_path(ref: str) -> str:
    """Derive the default root package path from a reference.

    The attribute name is used, so ``pkg.tests:TESTS`` runs as ``TESTS``.
    """
    return ref.rpartition(":")[2]


def load_tests(ref: str) -> TestPackage:
    """Import and build the test tree a reference points to.

    Args:
        ref: Reference of the form ``module:attribute``. The attribute may be
            dotted to reach into nested objects.

    Returns:
        The root of the test package tree.

    Raises:
        InvalidTestsRefError: If the reference is malformed, the module cannot
            be imported, the attribute is missing or the value is not a valid
            package.
    """
    module_name, sep, attr_path = ref.partition(":")
    if not sep or not module_name or not attr_path:
        raise InvalidTestsRefError(ref, "expected 'module:attribute'")

    try:
        target: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise InvalidTestsRefError(ref, f"cannot import module '{module_name}'") from e

    for attr in attr_path.split("."):
        try:
            target = getattr(target, attr)
        except AttributeError as e:
            raise InvalidTestsRefError(ref, f"no attribute '{attr}'") from e

    if callable(target) and not isinstance(target, TestPackage):
        target = target()

    try:
        return TestPackage.from_mapping(target)
    except InvalidPackageError as e:
        raise InvalidTestsRefError(ref, str(e)) from e
