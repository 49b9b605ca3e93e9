import copy

import pytest

import consolekit
from consolekit import BufferedIO


@pytest.fixture(autouse=True)
def restore_options():
    """Tests may change global options; put them back afterwards."""
    original = copy.deepcopy(consolekit.options)
    yield
    consolekit.options.clear()
    consolekit.options.update(original)  # type: ignore


@pytest.fixture
def io() -> BufferedIO:
    return BufferedIO()
