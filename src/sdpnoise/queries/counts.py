"""
Noisy count releases under parallel and sequential composition.

Responsibilities
  - Normalise query inputs (``CountQuery`` or ``(true_count, sensitivity)``
    tuples) and validate them before any randomness is consumed.
  - Parallel composition: queries over disjoint partitions each receive the
    full budget.
  - Sequential composition: repeated queries over the same partition share
    the budget evenly.
  - Optionally charge the composed cost to a ``PrivacyAccountant``.

Usage Context
  - One query per county released at one instant is a ``QueryGroup``; the
    same county queried once a day for a week is a ``QuerySequence``.

Limitations
  - Disjointness of a parallel group is assumed, not verified.
  - The sequential split is always equal.
"""
# 说明：在组合规则下发布带噪计数。
# - apply_parallel_composition：不相交分区上的查询各自使用完整 total_epsilon，总损失为 total_epsilon（取最大值而非求和）
# - apply_sequential_composition：同一分区上的重复查询均分 total_epsilon，总损失为各次之和即 total_epsilon
# - 所有参数在抽取随机数之前完成校验；带噪结果可能为负数，保持原样不做截断

from __future__ import annotations

import numbers
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional, Sequence, Tuple, Union

from sdpnoise.core.exceptions import InvalidParameterError
from sdpnoise.core.privacy.composition import CompositionResult, parallel_max, sequential_sum, split_budget
from sdpnoise.core.privacy.privacy_accountant import PrivacyAccountant
from sdpnoise.core.utils.logging import get_logger
from sdpnoise.core.utils.param_validation import coerce_positive_real, raise_if_violations, validate_positive
from sdpnoise.core.utils.random import resolve_rng
from sdpnoise.mechanisms.laplace import sample_laplace_noise

logger = get_logger(__name__)


@dataclass(frozen=True)
class CountQuery:
    """A true count and the sensitivity bound of the query that produced it."""

    true_count: float
    sensitivity: float = 1.0
    label: Optional[str] = None


@dataclass(frozen=True)
class NoisyCount:
    """One released value: the true count plus a single Laplace draw.

    The value may be negative; it is never clamped.
    """

    value: float
    epsilon: float
    sensitivity: float
    label: Optional[str] = None

    @property
    def scale(self) -> float:
        return self.sensitivity / self.epsilon

    def __float__(self) -> float:
        return self.value

    def to_dict(self) -> dict:
        return {
            "label": self.label,
            "value": float(self.value),
            "epsilon": float(self.epsilon),
            "sensitivity": float(self.sensitivity),
            "scale": float(self.scale),
        }


QueryLike = Union[CountQuery, Tuple[Any, ...]]


def _normalize_query(query: QueryLike, index: int) -> Tuple[Optional[CountQuery], List[str]]:
    if isinstance(query, CountQuery):
        true_count, sensitivity, label = query.true_count, query.sensitivity, query.label
    elif isinstance(query, (tuple, list)) and len(query) in (2, 3):
        true_count, sensitivity = query[0], query[1]
        label = query[2] if len(query) == 3 else None
    else:
        return None, [f"query[{index}] must be a CountQuery or (true_count, sensitivity[, label]) tuple"]

    problems: List[str] = []
    if isinstance(true_count, bool) or not isinstance(true_count, numbers.Real):
        problems.append(f"query[{index}].true_count must be a real number, got {true_count!r}")
    sens, problem = coerce_positive_real(sensitivity, f"query[{index}].sensitivity")
    if problem:
        problems.append(problem)
    if problems:
        return None, problems
    return CountQuery(true_count=float(true_count), sensitivity=sens, label=label), []


def normalize_queries(queries: Iterable[QueryLike]) -> Tuple[CountQuery, ...]:
    """Validate every query up front and report all problems together."""
    normalized: List[CountQuery] = []
    problems: List[str] = []
    for index, query in enumerate(queries):
        item, issues = _normalize_query(query, index)
        problems.extend(issues)
        if item is not None:
            normalized.append(item)
    raise_if_violations(problems)
    return tuple(normalized)


def _release(
    queries: Sequence[CountQuery],
    per_query_epsilon: float,
    rng: Any,
) -> List[NoisyCount]:
    return [
        NoisyCount(
            value=q.true_count + sample_laplace_noise(per_query_epsilon, q.sensitivity, rng=rng),
            epsilon=per_query_epsilon,
            sensitivity=q.sensitivity,
            label=q.label,
        )
        for q in queries
    ]


def apply_parallel_composition(
    queries: Iterable[QueryLike],
    total_epsilon: float,
    *,
    rng: Optional[Any] = None,
    accountant: Optional[PrivacyAccountant] = None,
) -> List[NoisyCount]:
    """Release each query with the full ``total_epsilon``.

    Valid only when the queries cover disjoint partitions of the data; the
    group as a whole then costs ``total_epsilon``, not the sum.
    """
    total = validate_positive(total_epsilon, "total_epsilon")
    normalized = normalize_queries(queries)
    if not normalized:
        return []
    if accountant is not None:
        accountant.ensure_within_budget(total)
    source = resolve_rng(rng)
    released = _release(normalized, total, source)
    logger.info("parallel release of %d queries at eps=%s", len(released), total)
    if accountant is not None:
        accountant.spend(
            total,
            description="parallel composition",
            metadata={"rule": "parallel", "num_queries": len(released), "per_query_epsilon": total},
        )
    return released


def apply_sequential_composition(
    queries: Iterable[QueryLike],
    total_epsilon: float,
    *,
    rng: Optional[Any] = None,
    accountant: Optional[PrivacyAccountant] = None,
) -> List[NoisyCount]:
    """Release each query with ``total_epsilon / len(queries)``.

    Valid for any number of repeated or overlapping queries on the same
    partition; the per-query losses add up to ``total_epsilon``.
    """
    total = validate_positive(total_epsilon, "total_epsilon")
    normalized = normalize_queries(queries)
    if not normalized:
        raise InvalidParameterError("sequential composition requires at least one query")
    per_query = split_budget(total, len(normalized))
    if accountant is not None:
        accountant.ensure_within_budget(total)
    source = resolve_rng(rng)
    released = _release(normalized, per_query, source)
    logger.info(
        "sequential release of %d queries at eps=%s (%s each)", len(released), total, per_query
    )
    if accountant is not None:
        accountant.spend(
            total,
            description="sequential composition",
            metadata={"rule": "sequential", "num_queries": len(released), "per_query_epsilon": per_query},
        )
    return released


@dataclass(frozen=True)
class QueryGroup:
    """Queries over disjoint partitions evaluated at one instant."""

    queries: Tuple[CountQuery, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "queries", normalize_queries(self.queries))

    def __len__(self) -> int:
        return len(self.queries)

    def per_query_epsilon(self, total_epsilon: float) -> float:
        return validate_positive(total_epsilon, "total_epsilon")

    def guarantee(self, total_epsilon: float) -> CompositionResult:
        per_query = self.per_query_epsilon(total_epsilon)
        return parallel_max(per_query for _ in self.queries)

    def release(
        self,
        total_epsilon: float,
        *,
        rng: Optional[Any] = None,
        accountant: Optional[PrivacyAccountant] = None,
    ) -> List[NoisyCount]:
        return apply_parallel_composition(self.queries, total_epsilon, rng=rng, accountant=accountant)


@dataclass(frozen=True)
class QuerySequence:
    """Repeated queries over the same or overlapping partition."""

    queries: Tuple[CountQuery, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "queries", normalize_queries(self.queries))

    def __len__(self) -> int:
        return len(self.queries)

    def per_query_epsilon(self, total_epsilon: float) -> float:
        total = validate_positive(total_epsilon, "total_epsilon")
        if not self.queries:
            raise InvalidParameterError("sequential composition requires at least one query")
        return split_budget(total, len(self.queries))

    def guarantee(self, total_epsilon: float) -> CompositionResult:
        per_query = self.per_query_epsilon(total_epsilon)
        return sequential_sum(per_query for _ in self.queries)

    def release(
        self,
        total_epsilon: float,
        *,
        rng: Optional[Any] = None,
        accountant: Optional[PrivacyAccountant] = None,
    ) -> List[NoisyCount]:
        return apply_sequential_composition(self.queries, total_epsilon, rng=rng, accountant=accountant)
