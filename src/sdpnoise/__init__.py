"""Laplace noise engine for epsilon-differentially private counts."""

from __future__ import annotations

from .core import (
    BudgetExceededError,
    CompositionResult,
    InvalidParameterError,
    NoiseEngineError,
    NotCalibratedError,
    PrivacyAccountant,
    PrivacyBudget,
    Sensitivity,
    create_rng,
    split_rng,
)
from .mechanisms import (
    LaplaceMechanism,
    laplace_scale,
    sample_laplace_batch,
    sample_laplace_noise,
)
from .queries import (
    CountQuery,
    NoisyCount,
    QueryGroup,
    QuerySequence,
    apply_parallel_composition,
    apply_sequential_composition,
)

__version__ = "0.1.0"

__all__ = [
    "BudgetExceededError",
    "CompositionResult",
    "InvalidParameterError",
    "NoiseEngineError",
    "NotCalibratedError",
    "PrivacyAccountant",
    "PrivacyBudget",
    "Sensitivity",
    "create_rng",
    "split_rng",
    "LaplaceMechanism",
    "laplace_scale",
    "sample_laplace_batch",
    "sample_laplace_noise",
    "CountQuery",
    "NoisyCount",
    "QueryGroup",
    "QuerySequence",
    "apply_parallel_composition",
    "apply_sequential_composition",
]
