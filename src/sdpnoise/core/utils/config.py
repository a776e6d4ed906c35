"""
Runtime configuration utilities.

Holds the handful of process-level options the noise engine reads
(log level, log masking, default RNG seed) and lets them be overridden
from ``SDPNOISE_*`` environment variables or at runtime.
"""
# 说明：运行时配置管理，集中保存噪声引擎读取的少量进程级选项。
# 职责：
# - RuntimeConfig：日志级别、日志敏感字段掩码开关、默认随机种子等配置项
# - load_from_env(...)：按统一前缀 SDPNOISE_ 从环境变量加载并解析配置值
# - get_config() / configure(...)：读取或更新全局配置单例
# 约定：
# - 布尔类环境变量使用 {"1", "true", "yes"}（大小写不敏感）视为 True
# - RNG_SEED 环境变量会被解析为整数
# - 未知配置键在 update(...) 中会触发 AttributeError

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

_ENV_FIELDS = {
    "LOG_LEVEL": "log_level",
    "MASK_SENSITIVE_FIELDS": "mask_sensitive_fields",
    "RNG_SEED": "rng_seed",
}


@dataclass
class RuntimeConfig:
    log_level: str = field(default_factory=lambda: os.environ.get("SDPNOISE_LOG_LEVEL", "INFO"))
    mask_sensitive_fields: bool = True
    rng_seed: Optional[int] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    def update(self, **kwargs: Any) -> None:
        for key, value in kwargs.items():
            if not hasattr(self, key):
                raise AttributeError(f"unknown config option '{key}'")
            setattr(self, key, value)

    def load_from_env(self, prefix: str = "SDPNOISE_") -> None:
        # 从带前缀的环境变量加载配置；未设置的变量保持当前值不变
        for key, attr in _ENV_FIELDS.items():
            env_key = f"{prefix}{key}"
            if env_key not in os.environ:
                continue
            value: Any = os.environ[env_key]
            if key == "MASK_SENSITIVE_FIELDS":
                value = value.lower() in {"1", "true", "yes"}
            elif key == "RNG_SEED":
                value = int(value)
            setattr(self, attr, value)


_GLOBAL_CONFIG = RuntimeConfig()


def get_config() -> RuntimeConfig:
    return _GLOBAL_CONFIG


def configure(**kwargs: Any) -> RuntimeConfig:
    _GLOBAL_CONFIG.update(**kwargs)
    return _GLOBAL_CONFIG
