"""
Privacy budget tracking.

Provides an accountant that records epsilon spending events, enforces an
optional global epsilon cap, and exposes serialisable audit metadata.
"""
# 说明：隐私预算记账器，负责跟踪与约束 epsilon 花费。
# 职责：
# - PrivacyEvent：记录单次隐私花费事件及其审计元数据（组合规则、查询数等）
# - PrivacyAccountant：维护总预算、累计花费与事件列表，提供超额检测与序列化
# 约定：
# - 组合发布在加噪之前调用 ensure_within_budget()，加噪之后调用 spend()，
#   因此预算不足时不会消耗任何随机数

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from sdpnoise.core.exceptions import BudgetExceededError, InvalidParameterError
from sdpnoise.core.utils.logging import get_logger
from sdpnoise.core.utils.param_validation import validate_positive

logger = get_logger(__name__)


@dataclass(frozen=True)
class PrivacyEvent:
    """Record for a single privacy allocation."""

    epsilon: float
    description: Optional[str] = None
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "epsilon": float(self.epsilon),
            "description": self.description,
            "metadata": dict(self.metadata),
        }


class PrivacyAccountant:
    """Track cumulative privacy usage and guard against exceeding allocations."""

    def __init__(
        self,
        total_epsilon: Optional[float] = None,
        *,
        name: Optional[str] = None,
        slack: float = 1e-12,
    ):
        """
        Args:
            total_epsilon: Optional global epsilon budget (None -> unbounded).
            name: Optional identifier used in logs or serialization.
            slack: Numerical tolerance when checking residual budget.
        """
        self.name = name or "PrivacyAccountant"
        self.total_epsilon: Optional[float] = (
            validate_positive(total_epsilon, "total_epsilon") if total_epsilon is not None else None
        )
        self.slack = float(slack)
        if self.slack < 0:
            raise InvalidParameterError("slack must be non-negative")
        self._events: List[PrivacyEvent] = []
        self._spent = 0.0

    @property
    def spent(self) -> float:
        return self._spent

    @property
    def remaining(self) -> Optional[float]:
        """Remaining epsilon when bounded, otherwise None."""
        if self.total_epsilon is None:
            return None
        return max(self.total_epsilon - self._spent, 0.0)

    @property
    def events(self) -> Tuple[PrivacyEvent, ...]:
        return tuple(self._events)

    def can_spend(self, epsilon: float) -> bool:
        """Check availability without mutating internal state."""
        try:
            epsilon = validate_positive(epsilon, "epsilon")
        except InvalidParameterError:
            return False
        if self.total_epsilon is None:
            return True
        return self._spent + epsilon <= self.total_epsilon + self.slack

    def ensure_within_budget(self, epsilon: float) -> None:
        epsilon = validate_positive(epsilon, "epsilon")
        if self.total_epsilon is None:
            return
        if self._spent + epsilon > self.total_epsilon + self.slack:
            raise BudgetExceededError(
                f"privacy budget exceeded: requested eps={epsilon} while remaining eps={self.remaining}"
            )

    def spend(
        self,
        epsilon: float,
        *,
        description: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None,
    ) -> PrivacyEvent:
        """Record a privacy-spending event and update the cumulative total."""
        epsilon = validate_positive(epsilon, "epsilon")
        self.ensure_within_budget(epsilon)
        event = PrivacyEvent(epsilon=epsilon, description=description, metadata=dict(metadata or {}))
        self._events.append(event)
        self._spent += epsilon
        logger.debug("%s spent eps=%s (total %s)", self.name, epsilon, self._spent)
        return event

    def reset(self) -> None:
        # 清空历史事件并将累计花费归零；仅适用于明确的新会话或测试场景
        self._events.clear()
        self._spent = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "total_epsilon": self.total_epsilon,
            "spent": float(self._spent),
            "remaining": self.remaining,
            "events": [event.to_dict() for event in self._events],
        }

    def __repr__(self) -> str:
        return f"<PrivacyAccountant name={self.name} spent={self._spent} total={self.total_epsilon}>"
