"""
Unit tests for the PrivacyAccountant helper.
"""
# 说明：针对隐私预算记账器的单元测试。
# 覆盖：
# - spend 的基础花费记账、剩余额度计算与事件历史记录
# - can_spend 的事前可用性检查与 BudgetExceededError 超额保护行为
# - 无界预算（total_epsilon=None）场景以及 reset 对状态清空的效果
# - 非法参数（负 epsilon、负 slack）的 InvalidParameterError 处理

import pytest

from sdpnoise.core.exceptions import BudgetExceededError, InvalidParameterError
from sdpnoise.core.privacy import PrivacyAccountant


def test_spend_updates_spent_and_remaining() -> None:
    accountant = PrivacyAccountant(total_epsilon=1.0)
    event = accountant.spend(0.2, description="county counts")

    assert event.description == "county counts"
    assert accountant.spent == pytest.approx(0.2)
    assert accountant.remaining == pytest.approx(0.8)
    assert len(accountant.events) == 1


def test_can_spend_prevents_overflow() -> None:
    accountant = PrivacyAccountant(total_epsilon=0.5)
    accountant.spend(0.4)
    assert accountant.can_spend(0.1)
    assert accountant.can_spend(0.11) is False
    assert accountant.can_spend(-1) is False

    with pytest.raises(BudgetExceededError):
        accountant.spend(0.2)
    assert accountant.spent == pytest.approx(0.4)


def test_slack_absorbs_rounding() -> None:
    accountant = PrivacyAccountant(total_epsilon=1.0)
    for _ in range(7):
        accountant.spend(1 / 7)
    assert accountant.remaining == pytest.approx(0.0, abs=1e-12)


def test_unbounded_accountant_allows_arbitrary_events() -> None:
    accountant = PrivacyAccountant()
    accountant.spend(5.0)
    accountant.spend(1.0)
    assert accountant.remaining is None
    assert len(accountant.events) == 2


def test_reset_clears_history() -> None:
    accountant = PrivacyAccountant(total_epsilon=1.0)
    accountant.spend(0.3)
    accountant.reset()
    assert accountant.spent == 0.0
    assert accountant.events == ()


def test_invalid_parameters() -> None:
    with pytest.raises(InvalidParameterError):
        PrivacyAccountant(total_epsilon=0)
    with pytest.raises(InvalidParameterError):
        PrivacyAccountant(total_epsilon=1.0, slack=-1)
    with pytest.raises(InvalidParameterError):
        PrivacyAccountant().spend(-0.1)


def test_to_dict_lists_events() -> None:
    accountant = PrivacyAccountant(total_epsilon=2.0, name="week")
    accountant.spend(1.0, metadata={"rule": "parallel"})
    payload = accountant.to_dict()
    assert payload["name"] == "week"
    assert payload["spent"] == 1.0
    assert payload["remaining"] == 1.0
    assert payload["events"][0]["metadata"] == {"rule": "parallel"}
