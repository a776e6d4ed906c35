"""Entry point for the core library components."""

from __future__ import annotations

from .exceptions import (
    BudgetExceededError,
    InvalidParameterError,
    NoiseEngineError,
    NotCalibratedError,
)
from .privacy import (
    CompositionResult,
    PrivacyAccountant,
    PrivacyBudget,
    PrivacyEvent,
    Sensitivity,
    parallel_max,
    sequential_sum,
    split_budget,
)
from .utils import (
    RuntimeConfig,
    configure,
    create_rng,
    get_config,
    get_logger,
    split_rng,
)

__all__ = [
    "BudgetExceededError",
    "InvalidParameterError",
    "NoiseEngineError",
    "NotCalibratedError",
    "CompositionResult",
    "PrivacyAccountant",
    "PrivacyBudget",
    "PrivacyEvent",
    "Sensitivity",
    "parallel_max",
    "sequential_sum",
    "split_budget",
    "RuntimeConfig",
    "configure",
    "create_rng",
    "get_config",
    "get_logger",
    "split_rng",
]
