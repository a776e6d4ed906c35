"""
Logging helpers that keep true counts out of log output.
"""
# 说明：轻量级日志工具，统一 logger 获取入口，并默认对真实计数等敏感字段做掩码。
# 职责：
# - PrivacyFilter：根据运行时配置对日志记录中的 true_count / noise / payload 字段进行脱敏
# - configure_logging(...)：初始化 logging 基本配置并为根 logger 挂载隐私过滤器
# - get_logger(...)：按名称获取 logger，必要时自动完成日志系统初始化
# 约定：
# - 日志级别优先级：显式参数 level > 环境变量 SDPNOISE_LOG_LEVEL > 运行时配置的 log_level

from __future__ import annotations

import logging
import os
from typing import Optional

from .config import get_config

SENSITIVE_FIELDS = ("true_count", "noise", "payload")


class PrivacyFilter(logging.Filter):
    """Mask record attributes that would reveal true counts or raw noise."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not get_config().mask_sensitive_fields:
            return True
        # 保留字段结构但隐藏具体内容：已知真实值与噪声即可还原原始计数
        for attr in SENSITIVE_FIELDS:
            if hasattr(record, attr):
                setattr(record, attr, "***")
        return True


def configure_logging(level: Optional[str] = None) -> None:
    log_level = level or os.environ.get("SDPNOISE_LOG_LEVEL", get_config().log_level)
    logging.basicConfig(
        level=log_level,
        format="[%(levelname)s] %(name)s %(asctime)s | %(message)s",
    )
    root = logging.getLogger()
    if not any(isinstance(f, PrivacyFilter) for f in root.filters):
        root.addFilter(PrivacyFilter())


def get_logger(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        configure_logging()
    # 子 logger 的记录不经过根 logger 的过滤器，因此在此处也挂载一份
    if not any(isinstance(f, PrivacyFilter) for f in logger.filters):
        logger.addFilter(PrivacyFilter())
    return logger
