"""Shared utility helpers used across the core library."""

from .random import (
    create_rng,
    default_rng,
    reset_default_rng,
    reseed_rng,
    resolve_rng,
    split_rng,
    draw_open_unit,
)
from .config import (
    RuntimeConfig,
    get_config,
    configure,
)
from .logging import (
    PrivacyFilter,
    get_logger,
    configure_logging,
)
from .param_validation import (
    ensure,
    ensure_type,
    validate_count,
    validate_epsilon_sensitivity,
    validate_positive,
)

__all__ = [
    "create_rng",
    "default_rng",
    "reset_default_rng",
    "reseed_rng",
    "resolve_rng",
    "split_rng",
    "draw_open_unit",
    "RuntimeConfig",
    "get_config",
    "configure",
    "PrivacyFilter",
    "get_logger",
    "configure_logging",
    "ensure",
    "ensure_type",
    "validate_count",
    "validate_epsilon_sensitivity",
    "validate_positive",
]
