"""
Property-based tests for the Laplace noise engine.
"""
# 说明：拉普拉斯噪声引擎的属性测试。
# 覆盖：
# - 任意合法参数下 scale = sensitivity / epsilon
# - 非正参数一律抛出 InvalidParameterError
# - 逆 CDF 关于 r = 0.5 的奇对称性，以及 r > 0.5 时噪声为正
# - 相同种子下采样完全可复现；批量采样长度与 count 一致

import math

import numpy as np
import pytest
from hypothesis import given, strategies as st

from sdpnoise.core.exceptions import InvalidParameterError
from sdpnoise.mechanisms import laplace_inverse_cdf, laplace_scale, sample_laplace_batch, sample_laplace_noise
from strategies import epsilons, non_positive, open_units, seeds, sensitivities


@given(epsilons(), sensitivities())
def test_scale_is_sensitivity_over_epsilon(epsilon, sensitivity):
    assert laplace_scale(epsilon, sensitivity) == pytest.approx(sensitivity / epsilon)


@given(non_positive(), sensitivities())
def test_non_positive_epsilon_rejected(epsilon, sensitivity):
    with pytest.raises(InvalidParameterError):
        sample_laplace_noise(epsilon, sensitivity)


@given(epsilons(), non_positive())
def test_non_positive_sensitivity_rejected(epsilon, sensitivity):
    with pytest.raises(InvalidParameterError):
        sample_laplace_noise(epsilon, sensitivity)


@given(st.floats(min_value=1e-6, max_value=1 - 1e-6), sensitivities())
def test_inverse_cdf_odd_symmetry(r, scale):
    assert laplace_inverse_cdf(r, scale) == pytest.approx(-laplace_inverse_cdf(1.0 - r, scale), rel=1e-6, abs=1e-9)


@given(open_units(), sensitivities())
def test_inverse_cdf_sign_follows_r(r, scale):
    noise = laplace_inverse_cdf(r, scale)
    assert math.isfinite(noise)
    if r > 0.5:
        assert noise > 0
    elif r < 0.5:
        assert noise < 0
    else:
        assert noise == 0


@given(seeds(), epsilons(), sensitivities())
def test_seeded_sampling_is_reproducible(seed, epsilon, sensitivity):
    first = sample_laplace_noise(epsilon, sensitivity, rng=np.random.default_rng(seed))
    second = sample_laplace_noise(epsilon, sensitivity, rng=np.random.default_rng(seed))
    assert first == second


@given(st.integers(min_value=0, max_value=50), seeds())
def test_batch_length_matches_count(count, seed):
    draws = sample_laplace_batch(count, 1.0, 1.0, rng=np.random.default_rng(seed))
    assert len(draws) == count
    assert all(isinstance(d, float) for d in draws)
