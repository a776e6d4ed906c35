"""
Laplace mechanism for pure epsilon-differential privacy.

Responsibilities:
    * calibrate the Laplace scale from epsilon and sensitivity
    * sample zero-mean Laplace noise by inverse-CDF from an injected
      uniform source
    * add noise to scalars, sequences, and arrays through a mechanism object
"""
# 说明：实现纯 epsilon-DP 的拉普拉斯机制。
# 主要职责：
# 1) 由 epsilon 与敏感度 sensitivity 计算噪声尺度 scale = sensitivity / epsilon
# 2) 从 (0, 1) 开区间抽取均匀随机数 r，经逆 CDF 得到 Laplace(0, scale) 噪声：
#    -scale * sign(r - 0.5) * ln(1 - 2|r - 0.5|)
# 3) 随机源由调用方显式传入，不使用全局随机状态
# 4) 参数非法时在消耗任何随机数之前抛出 InvalidParameterError

from __future__ import annotations

import json
import math
from typing import Any, Dict, List, Optional, Tuple

import numpy as np

from sdpnoise.core.exceptions import InvalidParameterError, NotCalibratedError
from sdpnoise.core.utils.logging import get_logger
from sdpnoise.core.utils.param_validation import (
    validate_count,
    validate_epsilon_sensitivity,
    validate_positive,
)
from sdpnoise.core.utils.random import draw_open_unit, resolve_rng

logger = get_logger(__name__)


def laplace_scale(epsilon: float, sensitivity: float) -> float:
    """Noise scale ``sensitivity / epsilon``; both must be strictly positive."""
    eps, sens = validate_epsilon_sensitivity(epsilon, sensitivity)
    return sens / eps


def laplace_inverse_cdf(r: float, scale: float) -> float:
    """Inverse CDF of Laplace(0, scale) evaluated at ``r`` in (0, 1)."""
    scale = validate_positive(scale, "scale")
    if not 0.0 < r < 1.0:
        raise InvalidParameterError(f"r must lie in the open interval (0, 1), got {r}")
    u = r - 0.5
    # 1 - 2|u| == 2 * min(r, 1 - r)；直接用 r 计算可避免极小 r 时 r - 0.5 舍入到 -0.5
    return -scale * math.copysign(1.0, u) * math.log(2.0 * min(r, 1.0 - r))


def expected_absolute_error(epsilon: float, sensitivity: float) -> float:
    """Mean absolute noise E|X| of Laplace(0, b), which equals b."""
    return laplace_scale(epsilon, sensitivity)


def _draw(scale: float, rng: Any) -> float:
    return laplace_inverse_cdf(draw_open_unit(rng), scale)


def sample_laplace_noise(epsilon: float, sensitivity: float, *, rng: Optional[Any] = None) -> float:
    """Draw one zero-mean Laplace perturbation with scale ``sensitivity / epsilon``.

    ``rng`` is a numpy Generator, any object with a ``random()`` method, or a
    seed for :func:`numpy.random.default_rng`. Parameters are validated
    before any randomness is consumed.
    """
    scale = laplace_scale(epsilon, sensitivity)
    source = resolve_rng(rng)
    noise = _draw(scale, source)
    logger.debug("laplace draw scale=%s", scale, extra={"noise": noise})
    return noise


def sample_laplace_batch(
    count: int,
    epsilon: float,
    sensitivity: float,
    *,
    rng: Optional[Any] = None,
) -> List[float]:
    """Draw ``count`` independent Laplace perturbations, in draw order."""
    n = validate_count(count, "count")
    eps, sens = validate_epsilon_sensitivity(epsilon, sensitivity)
    source = resolve_rng(rng)
    return [sample_laplace_noise(eps, sens, rng=source) for _ in range(n)]


class LaplaceMechanism:
    """Pure epsilon-DP Laplace mechanism with an explicit calibration step."""

    def __init__(
        self,
        epsilon: float = 1.0,
        sensitivity: float = 1.0,
        rng: Optional[Any] = None,
        name: Optional[str] = None,
    ):
        self.epsilon, self.sensitivity = validate_epsilon_sensitivity(epsilon, sensitivity)
        self.name: str = name or self.__class__.__name__
        self.scale: Optional[float] = None
        self._rng = resolve_rng(rng)
        self._calibrated = False
        self._meta: Dict[str, Any] = {}

    # Calibration lifecycle ---------------------------------------------------
    def calibrate(self, sensitivity: Optional[float] = None) -> "LaplaceMechanism":
        """Refresh the sensitivity (if provided) and compute the Laplace scale."""
        if sensitivity is not None:
            self.sensitivity = validate_positive(sensitivity, "sensitivity")
        self.scale = laplace_scale(self.epsilon, self.sensitivity)
        self._meta["distribution"] = "laplace"
        self._calibrated = True
        return self

    @property
    def calibrated(self) -> bool:
        return self._calibrated

    def require_calibrated(self) -> None:
        if not self._calibrated or self.scale is None:
            raise NotCalibratedError("mechanism not calibrated; call calibrate() first")

    def reset_calibration(self) -> None:
        self._calibrated = False

    def reseed(self, seed: Optional[Any]) -> None:
        """Replace the random source with one built from ``seed``."""
        self._rng = resolve_rng(seed)

    # Noise -------------------------------------------------------------------
    def randomise(self, value: Any) -> Any:
        """Add Laplace noise element-wise to numeric inputs."""
        self.require_calibrated()
        arr, was_scalar = self._coerce_numeric(value)
        noise = sample_laplace_batch(arr.size, self.epsilon, self.sensitivity, rng=self._rng)
        result = arr + np.asarray(noise, dtype=float).reshape(arr.shape)
        return self._restore_numeric_like(value, result, was_scalar)

    def add_noise(self, value: Any) -> Any:
        """Alias for randomise."""
        return self.randomise(value)

    # Serialization -----------------------------------------------------------
    def serialize(self) -> Dict[str, Any]:
        """JSON serialisable snapshot; the random source is never included."""
        return {
            "class": f"{self.__class__.__module__}.{self.__class__.__qualname__}",
            "mechanism": "laplace",
            "name": self.name,
            "epsilon": self.epsilon,
            "sensitivity": self.sensitivity,
            "scale": self.scale,
            "calibrated": bool(self._calibrated),
            "meta": dict(self._meta),
        }

    @classmethod
    def deserialize(cls, data: Dict[str, Any]) -> "LaplaceMechanism":
        if "epsilon" not in data:
            raise InvalidParameterError("serialized data missing 'epsilon' field")
        inst = cls(
            epsilon=data["epsilon"],
            sensitivity=data.get("sensitivity", 1.0),
            rng=None,
            name=data.get("name"),
        )
        inst._meta = dict(data.get("meta", {}))
        inst._calibrated = bool(data.get("calibrated", False))
        # scale 由 epsilon 与 sensitivity 重新计算
        inst.scale = laplace_scale(inst.epsilon, inst.sensitivity) if inst._calibrated else None
        return inst

    def to_json(self) -> str:
        return json.dumps(self.serialize(), default=str)

    @classmethod
    def from_json(cls, text: str) -> "LaplaceMechanism":
        return cls.deserialize(json.loads(text))

    # Helpers -----------------------------------------------------------------
    @staticmethod
    def _coerce_numeric(value: Any) -> Tuple[np.ndarray, bool]:
        if isinstance(value, (str, bytes)):
            raise InvalidParameterError("value must be numeric, sequence, or ndarray")
        try:
            arr = np.asarray(value, dtype=float)
        except (TypeError, ValueError) as exc:
            raise InvalidParameterError("value must be numeric, sequence, or ndarray") from exc
        return arr, arr.ndim == 0

    @staticmethod
    def _restore_numeric_like(original: Any, value: np.ndarray, was_scalar: bool) -> Any:
        if was_scalar:
            return float(value)
        if isinstance(original, np.ndarray):
            return value
        if isinstance(original, tuple):
            return tuple(value.tolist())
        if isinstance(original, list):
            return value.tolist()
        return value

    def __repr__(self) -> str:
        return (
            f"<{self.__class__.__name__} name={self.name} "
            f"eps={self.epsilon} sensitivity={self.sensitivity} calibrated={self._calibrated}>"
        )
