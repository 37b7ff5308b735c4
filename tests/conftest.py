"""Global pytest fixtures for TREESUITE."""

import logging
from pathlib import Path

import pytest

# pylint: disable=unused-argument

pytest_plugins = [
    "tests.fixtures.packages",
]

TESTS_ROOT = Path(__file__).parent.resolve()

# top-level test directory -> default mark
DIRECTORY_MARKERS = {"unit": "unit", "functional": "functional", "e2e": "e2e"}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the default mark of each item's top-level test directory."""
    for item in items:
        try:
            relative = item.path.resolve().relative_to(TESTS_ROOT)
        except ValueError:
            continue
        marker_name = DIRECTORY_MARKERS.get(relative.parts[0])
        if marker_name is None:
            continue
        if not any(marker.name == marker_name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, marker_name))


@pytest.fixture(autouse=True)
def _reset_root_logger():
    """Restore the root logger after tests that configure logging via the CLI."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    manager = logging.Logger.manager
    levels = {
        name: lgr.level
        for name, lgr in manager.loggerDict.items()
        if isinstance(lgr, logging.Logger)
    }
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
    # -L/--logger-level sets levels on named loggers; undo them too
    for name, lgr in list(manager.loggerDict.items()):
        if isinstance(lgr, logging.Logger):
            lgr.setLevel(levels.get(name, logging.NOTSET))
