"""
Composition bookkeeping for the Laplace mechanism.

Responsibilities
  - Report the overall privacy loss of a set of releases under basic
    sequential composition (sum) and parallel composition (max).
  - Split a total budget evenly across sequential queries.

Limitations
  - Only basic (pure epsilon) composition; the split is always equal.
"""
# 说明：组合规则的记账部分，只计算总隐私损失，不负责加噪。
# - sequential_sum：同一或重叠数据上的多次查询，总 epsilon 为各次之和
# - parallel_max：不相交分区上的查询，总 epsilon 为各次最大值
# - split_budget：顺序组合下的均分预算 epsilon_total / num_queries

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from sdpnoise.core.utils.param_validation import validate_count, validate_positive


@dataclass(frozen=True)
class CompositionResult:
    """Overall privacy loss of a composed set of releases."""

    epsilon: float = 0.0
    detail: Dict[str, Any] = field(default_factory=dict)

    def __add__(self, other: "CompositionResult") -> "CompositionResult":
        # 两组结果再次顺序组合：epsilon 相加，detail 右侧覆盖左侧同名键
        return CompositionResult(
            epsilon=self.epsilon + other.epsilon,
            detail={**self.detail, **other.detail},
        )

    @classmethod
    def zero(cls, *, detail: Optional[Dict[str, Any]] = None) -> "CompositionResult":
        return cls(0.0, detail=detail or {})

    def to_dict(self) -> Dict[str, Any]:
        return {"epsilon": float(self.epsilon), "detail": dict(self.detail)}


def sequential_sum(epsilons: Iterable[float]) -> CompositionResult:
    """Basic sequential composition: privacy losses add up."""
    values = [validate_positive(eps, "epsilon") for eps in epsilons]
    return CompositionResult(
        epsilon=sum(values),
        detail={"rule": "sequential", "num_queries": len(values)},
    )


def parallel_max(epsilons: Iterable[float]) -> CompositionResult:
    """Parallel composition over disjoint partitions: the largest loss wins."""
    values = [validate_positive(eps, "epsilon") for eps in epsilons]
    return CompositionResult(
        epsilon=max(values, default=0.0),
        detail={"rule": "parallel", "num_queries": len(values)},
    )


def split_budget(total_epsilon: float, num_queries: int) -> float:
    """Per-query epsilon when ``total_epsilon`` is shared by ``num_queries`` queries."""
    total = validate_positive(total_epsilon, "total_epsilon")
    n = validate_count(num_queries, "num_queries", allow_zero=False)
    return total / n
