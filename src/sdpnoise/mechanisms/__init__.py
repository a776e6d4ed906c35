"""Additive-noise mechanisms."""
from .laplace import (
    LaplaceMechanism,
    expected_absolute_error,
    laplace_inverse_cdf,
    laplace_scale,
    sample_laplace_batch,
    sample_laplace_noise,
)

__all__ = [
    "LaplaceMechanism",
    "expected_absolute_error",
    "laplace_inverse_cdf",
    "laplace_scale",
    "sample_laplace_batch",
    "sample_laplace_noise",
]
