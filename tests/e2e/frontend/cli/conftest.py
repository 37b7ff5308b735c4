"""Fixtures for end-to-end tests of the ``treesuite`` command."""

import pytest
from click.testing import CliRunner

# pylint: disable=redefined-outer-name


@pytest.fixture
def runner():
    """Return a CliRunner whose flight recorder writes to the working directory."""
    return CliRunner(env={"TREESUITE_LOG_PATH": "treesuite.log"})


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem so flight-recorder files stay local."""
    with runner.isolated_filesystem():
        yield
