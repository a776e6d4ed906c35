"""
Unit tests for composition bookkeeping.
"""
# 说明：组合规则记账部分的单元测试。
# 覆盖：
# - sequential_sum：总 epsilon 为各次之和
# - parallel_max：总 epsilon 为最大值，空输入为 0
# - split_budget：均分预算，查询数为 0 时抛出 InvalidParameterError
# - CompositionResult 相加与字典导出

import pytest

from sdpnoise.core.exceptions import InvalidParameterError
from sdpnoise.core.privacy import CompositionResult, parallel_max, sequential_sum, split_budget


def test_sequential_sum_adds_losses() -> None:
    result = sequential_sum([0.1, 0.2, 0.3])
    assert result.epsilon == pytest.approx(0.6)
    assert result.detail == {"rule": "sequential", "num_queries": 3}


def test_parallel_max_takes_largest() -> None:
    result = parallel_max([1.0, 1.0, 0.5])
    assert result.epsilon == 1.0
    assert result.detail["rule"] == "parallel"


def test_parallel_max_empty_is_zero() -> None:
    assert parallel_max([]).epsilon == 0.0


def test_rules_reject_non_positive_epsilon() -> None:
    with pytest.raises(InvalidParameterError):
        sequential_sum([0.1, 0.0])
    with pytest.raises(InvalidParameterError):
        parallel_max([-1.0])


def test_split_budget() -> None:
    assert split_budget(1.0, 7) == pytest.approx(1 / 7)
    assert split_budget(2.0, 1) == 2.0
    with pytest.raises(InvalidParameterError):
        split_budget(1.0, 0)
    with pytest.raises(InvalidParameterError):
        split_budget(0.0, 3)


def test_composition_result_addition() -> None:
    week = sequential_sum([0.5] * 2)
    county = parallel_max([1.0, 1.0])
    combined = week + county
    assert combined.epsilon == pytest.approx(2.0)
    assert combined.to_dict()["epsilon"] == pytest.approx(2.0)
    assert CompositionResult.zero().epsilon == 0.0
