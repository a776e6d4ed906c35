"""
Reusable validation helpers.
"""
# 说明：参数验证辅助函数，用于在库内部统一进行轻量级参数检查与转换。
# 职责：
# - ensure / ensure_type：条件断言与类型检查
# - coerce_positive_real：将输入转换为有限正实数，失败时返回问题描述而不是立即抛出，
#   以便调用方把多个参数的问题合并为一次 InvalidParameterError
# - raise_if_violations：汇总问题列表并统一抛出

from __future__ import annotations

import math
import numbers
from typing import Any, List, Optional, Sequence, Tuple, Type

from ..exceptions import InvalidParameterError


def ensure(condition: bool, message: str, *, error: Type[Exception] = InvalidParameterError) -> None:
    if not condition:
        raise error(message)


def ensure_type(value: Any, expected: Tuple[type, ...], *, label: str = "value") -> None:
    if not isinstance(value, expected):
        names = ", ".join(t.__name__ for t in expected)
        raise InvalidParameterError(f"{label} must be instance of {names}")


def coerce_positive_real(value: Any, label: str) -> Tuple[Optional[float], Optional[str]]:
    """Return ``(number, None)`` for a finite positive real, else ``(None, problem)``."""
    if isinstance(value, (str, bytes)) or value is None:
        return None, f"{label} must be a real number, got {value!r}"
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None, f"{label} must be a real number, got {value!r}"
    if math.isnan(numeric) or math.isinf(numeric):
        return None, f"{label} must be finite, got {numeric}"
    if numeric <= 0:
        return None, f"{label} must be strictly positive, got {numeric}"
    return numeric, None


def raise_if_violations(violations: Sequence[str]) -> None:
    problems: List[str] = [v for v in violations if v]
    if problems:
        raise InvalidParameterError("; ".join(problems), violations=problems)


def validate_positive(value: Any, label: str) -> float:
    numeric, problem = coerce_positive_real(value, label)
    raise_if_violations([problem] if problem else [])
    return numeric  # type: ignore[return-value]


def validate_epsilon_sensitivity(epsilon: Any, sensitivity: Any) -> Tuple[float, float]:
    """Validate both parameters independently and report every violation."""
    eps, eps_problem = coerce_positive_real(epsilon, "epsilon")
    sens, sens_problem = coerce_positive_real(sensitivity, "sensitivity")
    raise_if_violations([p for p in (eps_problem, sens_problem) if p])
    return eps, sens  # type: ignore[return-value]


def validate_count(value: Any, label: str = "count", *, allow_zero: bool = True) -> int:
    # bool 是 int 的子类，这里显式排除
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidParameterError(f"{label} must be an int, got {value!r}")
    lower = 0 if allow_zero else 1
    ensure(value >= lower, f"{label} must be >= {lower}, got {value}")
    return int(value)
