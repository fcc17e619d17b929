"""Process-wide settings for buffer generation and test naming."""

import os
from dataclasses import dataclass
from typing import Optional

import numpy as np

SEED_ENV = "TENSORPARAM_SEED"
WARN_UNNAMED_ENV = "TENSORPARAM_WARN_UNNAMED"


@dataclass
class TestUtilConfig:
    """Configuration for the test utilities."""
    __test__ = False  # not a pytest test class

    seed: Optional[int] = None  # None draws fresh entropy for every generator
    warn_on_unnamed: bool = True  # Warn when a parameter has no registered name

    @classmethod
    def from_env(cls) -> "TestUtilConfig":
        """
        Build a configuration from ``TENSORPARAM_*`` environment variables.

        Returns:
            Configuration with seed and warning settings applied
        """
        seed = None
        raw_seed = os.environ.get(SEED_ENV, "").strip()
        if raw_seed:
            try:
                seed = int(raw_seed)
            except ValueError:
                raise ValueError(f"{SEED_ENV} must be an integer, got {raw_seed!r}") from None

        warn_on_unnamed = os.environ.get(WARN_UNNAMED_ENV, "1") != "0"
        return cls(seed=seed, warn_on_unnamed=warn_on_unnamed)


# Global configuration instance
_global_config = TestUtilConfig.from_env()


def get_config() -> TestUtilConfig:
    """Get the global configuration."""
    return _global_config


def set_config(config: TestUtilConfig) -> TestUtilConfig:
    """Replace the global configuration and return the previous one."""
    global _global_config
    previous = _global_config
    _global_config = config
    return previous


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a random generator from ``seed`` or the configured seed."""
    if seed is None:
        seed = _global_config.seed
    return np.random.default_rng(seed)
