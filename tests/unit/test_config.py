"""Unit tests for locating and loading test package trees."""

import pytest

from treesuite import config
from treesuite.domain.package import TestPackage

SAMPLE_REF = "tests.fixtures.packages:SAMPLE_TESTS"


def test_get_tests_ref(monkeypatch):
    """The reference is read from TREESUITE_TESTS."""
    monkeypatch.setenv("TREESUITE_TESTS", SAMPLE_REF)
    assert config.get_tests_ref() == SAMPLE_REF


@pytest.mark.parametrize("value", [None, ""])
def test_get_tests_ref_missing(monkeypatch, value):
    """A missing or empty TREESUITE_TESTS raises TestsRefNotSetError."""
    if value is None:
        monkeypatch.delenv("TREESUITE_TESTS", raising=False)
    else:
        monkeypatch.setenv("TREESUITE_TESTS", value)
    with pytest.raises(config.TestsRefNotSetError):
        config.get_tests_ref()


def test_default_path():
    """The default root path is the attribute name."""
    assert config.default_path(SAMPLE_REF) == "SAMPLE_TESTS"
    assert config.default_path("pkg:outer.inner") == "outer.inner"


def test_load_tests_from_mapping():
    """A mapping attribute is turned into a package tree."""
    package = config.load_tests(SAMPLE_REF)
    assert isinstance(package, TestPackage)
    assert package.count_tests() == 11


def test_load_tests_from_factory():
    """A callable attribute is called to produce the tree."""
    package = config.load_tests("tests.fixtures.packages:make_async_tests")
    assert [t.name for t in package.tests] == ["passes", "raises"]


def test_load_tests_invalid_tree():
    """A tree that cannot be built is reported as an invalid reference."""
    with pytest.raises(config.InvalidTestsRefError, match="'tests' must be a mapping"):
        config.load_tests("tests.fixtures.packages:broken_tests")


def test_load_tests_dotted_attribute():
    """Dotted attributes reach into nested objects."""
    package = config.load_tests("tests.fixtures.packages:TREES.asynchronous")
    assert package.count_tests() == 2


@pytest.mark.parametrize(
    ("ref", "reason"),
    [
        ("no_colon", "expected 'module:attribute'"),
        (":attr", "expected 'module:attribute'"),
        ("module:", "expected 'module:attribute'"),
        ("tests.fixtures.does_not_exist:X", "cannot import module"),
        ("tests.fixtures.packages:MISSING", "no attribute 'MISSING'"),
    ],
)
def test_load_tests_invalid(ref, reason):
    """Bad references raise InvalidTestsRefError with a reason."""
    with pytest.raises(config.InvalidTestsRefError) as excinfo:
        config.load_tests(ref)
    assert excinfo.value.ref == ref
    assert reason in excinfo.value.reason
