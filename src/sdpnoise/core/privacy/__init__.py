"""Privacy budgets, composition bookkeeping and accounting."""

from .budget import PrivacyBudget, Sensitivity
from .composition import (
    CompositionResult,
    parallel_max,
    sequential_sum,
    split_budget,
)
from .privacy_accountant import PrivacyAccountant, PrivacyEvent

__all__ = [
    "PrivacyBudget",
    "Sensitivity",
    "CompositionResult",
    "parallel_max",
    "sequential_sum",
    "split_budget",
    "PrivacyAccountant",
    "PrivacyEvent",
]
