"""
Unit tests for logging utilities.
"""
# 说明：日志配置与隐私脱敏过滤相关的单元测试。
# 覆盖：
# - get_logger(...)：获取挂载 PrivacyFilter 的 logger
# - true_count / noise 等敏感字段在启用掩码时被替换为 ***，普通消息内容仍然可见
# - 关闭 mask_sensitive_fields 后字段原样保留

import logging

from sdpnoise.core.utils import PrivacyFilter, configure_logging, get_logger


def test_logger_masks_true_count(caplog, restore_config) -> None:
    restore_config.mask_sensitive_fields = True
    configure_logging(level="INFO")
    logger = get_logger("sdpnoise.test")
    with caplog.at_level(logging.INFO, logger="sdpnoise.test"):
        logger.info("released county", extra={"true_count": 123, "noise": 0.5})
    assert "released county" in caplog.text
    record = caplog.records[-1]
    assert record.true_count == "***"
    assert record.noise == "***"


def test_logger_keeps_fields_when_masking_disabled(caplog, restore_config) -> None:
    restore_config.mask_sensitive_fields = False
    logger = get_logger("sdpnoise.test.unmasked")
    with caplog.at_level(logging.INFO, logger="sdpnoise.test.unmasked"):
        logger.info("released county", extra={"true_count": 123})
    assert caplog.records[-1].true_count == 123


def test_get_logger_installs_single_filter() -> None:
    logger = get_logger("sdpnoise.test.filters")
    get_logger("sdpnoise.test.filters")
    assert sum(isinstance(f, PrivacyFilter) for f in logger.filters) == 1
