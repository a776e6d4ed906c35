"""
Utility metrics comparing released counts with the true counts.
"""
from typing import Any, Sequence, Union

import numpy as np


def _to_numpy(data: Any) -> np.ndarray:
    return np.asarray(data, dtype=float)


def mean_absolute_error(p: Union[Sequence, np.ndarray], q: Union[Sequence, np.ndarray]) -> float:
    """Mean absolute difference; compare with the Laplace scale."""
    return float(np.mean(np.abs(_to_numpy(p) - _to_numpy(q))))


def max_abs_error(p: Union[Sequence, np.ndarray], q: Union[Sequence, np.ndarray]) -> float:
    """Maximum absolute error (L-infinity distance)."""
    return float(np.max(np.abs(_to_numpy(p) - _to_numpy(q))))


def negative_fraction(values: Union[Sequence, np.ndarray]) -> float:
    """Share of released counts that came out negative."""
    arr = _to_numpy(values)
    return float(np.mean(arr < 0)) if arr.size else 0.0
