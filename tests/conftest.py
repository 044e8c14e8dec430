import pytest

from numvec import config


@pytest.fixture(autouse=True)
def fresh_config():
    """Every test starts from the built-in defaults."""
    config.reset()
    yield
    config.reset()
