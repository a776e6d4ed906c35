"""Shared pytest configuration and path setup for test modules."""

import sys
from pathlib import Path

import pytest

# Ensure repo root and src/ are on sys.path for all tests
_ROOT = Path(__file__).resolve().parents[1]
_SRC = _ROOT / "src"
for p in (str(_ROOT), str(_SRC)):
    if p not in sys.path:
        sys.path.insert(0, p)


class FixedUniform:
    """Uniform source that replays a fixed list of values, cycling."""

    def __init__(self, *values: float):
        self.values = list(values)
        self.calls = 0

    def random(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@pytest.fixture
def fixed_uniform():
    """Factory for deterministic uniform sources."""
    return FixedUniform


@pytest.fixture
def restore_config():
    """Restore the global runtime config after a test mutates it.

    The process-wide default generator is dropped on both sides so a seed set
    inside the test takes effect from its first draw.
    """
    from sdpnoise.core.utils.config import get_config
    from sdpnoise.core.utils.random import reset_default_rng

    cfg = get_config()
    saved = (cfg.log_level, cfg.mask_sensitive_fields, cfg.rng_seed)
    reset_default_rng()
    yield cfg
    cfg.log_level, cfg.mask_sensitive_fields, cfg.rng_seed = saved
    reset_default_rng()
