"""
Unit tests for PrivacyBudget and Sensitivity value objects.
"""
# 说明：隐私预算与敏感度值对象的单元测试。
# 覆盖：
# - 非正、非有限值在构造时被拒绝
# - split(n) 给出顺序组合下的均分预算，n 必须为正整数
# - float() 转换与字典导出

import pytest

from sdpnoise.core.exceptions import InvalidParameterError
from sdpnoise.core.privacy import PrivacyBudget, Sensitivity


@pytest.mark.parametrize("eps", [0, -1, float("nan"), float("inf")])
def test_budget_rejects_invalid_epsilon(eps) -> None:
    with pytest.raises(InvalidParameterError):
        PrivacyBudget(eps)


@pytest.mark.parametrize("value", [0, -1])
def test_sensitivity_rejects_non_positive(value) -> None:
    with pytest.raises(InvalidParameterError):
        Sensitivity(value)


def test_budget_split_is_even() -> None:
    per_day = PrivacyBudget(1.0).split(7)
    assert per_day.epsilon == pytest.approx(1 / 7)
    assert isinstance(per_day, PrivacyBudget)


@pytest.mark.parametrize("n", [0, -2, 2.5])
def test_budget_split_rejects_bad_counts(n) -> None:
    with pytest.raises(InvalidParameterError):
        PrivacyBudget(1.0).split(n)


def test_value_objects_convert_to_float() -> None:
    assert float(PrivacyBudget(2)) == 2.0
    assert float(Sensitivity(3)) == 3.0
    assert PrivacyBudget(0.5).to_dict() == {"epsilon": 0.5}
