"""
Exception hierarchy shared by the noise engine.
"""
# 说明：噪声引擎统一的异常类型。
# - NoiseEngineError：所有库内异常的基类
# - InvalidParameterError：epsilon / sensitivity 非正、输入非数值、空查询序列等参数错误
# - NotCalibratedError：机制在 calibrate() 之前被使用
# - BudgetExceededError：记账器中的花费超过预算上限

from __future__ import annotations

from typing import Iterable, Optional, Tuple


class NoiseEngineError(Exception):
    """Base exception for noise engine errors."""


class InvalidParameterError(NoiseEngineError, ValueError):
    """Raised when an input parameter is invalid.

    ``violations`` lists every problem found, so a call with both a bad
    epsilon and a bad sensitivity reports both at once.
    """

    def __init__(self, message: str, violations: Optional[Iterable[str]] = None):
        super().__init__(message)
        self.violations: Tuple[str, ...] = tuple(violations) if violations is not None else (message,)


class NotCalibratedError(NoiseEngineError):
    """Raised when an operation requires prior calibration."""


class BudgetExceededError(NoiseEngineError):
    """Raised when an allocation would exceed the configured privacy budget."""
