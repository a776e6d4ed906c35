"""
Privacy-loss budget and sensitivity value objects.
"""
# 说明：隐私预算 (epsilon) 与敏感度 (sensitivity) 的不可变值对象。
# - PrivacyBudget：epsilon 必须为有限正实数；split(n) 给出顺序组合下的均分预算
# - Sensitivity：单条记录增删导致查询结果变化的上界，必须为有限正实数

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

from sdpnoise.core.utils.param_validation import validate_count, validate_positive


@dataclass(frozen=True)
class PrivacyBudget:
    """Total allowable privacy loss for a set of queries."""

    epsilon: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "epsilon", validate_positive(self.epsilon, "epsilon"))

    def split(self, num_queries: int) -> "PrivacyBudget":
        """Equal share of this budget for each of ``num_queries`` sequential queries."""
        n = validate_count(num_queries, "num_queries", allow_zero=False)
        return PrivacyBudget(self.epsilon / n)

    def __float__(self) -> float:
        return self.epsilon

    def to_dict(self) -> Dict[str, float]:
        return {"epsilon": float(self.epsilon)}


@dataclass(frozen=True)
class Sensitivity:
    """Bound on how much one record can change a query's output."""

    value: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", validate_positive(self.value, "sensitivity"))

    def __float__(self) -> float:
        return self.value
