"""pytest fixtures for buffer generation.

Load with ``pytest_plugins = ["tensorparam.pytest_plugin"]`` in a root conftest.
"""

import pytest

from .config import get_config, make_rng


def pytest_report_header(config):
    seed = get_config().seed
    return f"tensorparam seed: {seed if seed is not None else 'random'}"


@pytest.fixture
def rng():
    """Random generator seeded from TENSORPARAM_SEED when it is set."""
    return make_rng()
