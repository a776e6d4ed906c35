"""
Random number generation helpers.

Responsibilities
  - Centralize RNG creation and seeding.
  - Accept any injected uniform source (numpy Generator, ``random.Random``,
    or any object exposing ``random()``) without touching global state.
  - Provide reproducible splits for multi-threaded workloads.

Limitations
  - Reproducibility relies on numpy Generator behavior.
  - The process-wide default generator is not meant to be shared across
    threads; give each thread its own source via ``split_rng``.
"""
# 说明：随机数生成辅助工具。噪声引擎只依赖一个 [0, 1) 均匀随机源，
# 该随机源必须显式传入，或取自进程级默认生成器（每次运行只创建一次），绝不使用全局 np.random 状态。
# 职责：
# - create_rng / reseed_rng：封装 numpy Generator 的创建与重置；seed 为 None 时使用系统熵
# - default_rng：按配置中的 rng_seed 惰性构建并复用的进程级生成器，调用之间不会重新播种
# - resolve_rng：把调用方传入的随机源规范化为带 random() 方法的对象
# - split_rng：从单一 RNG 派生多个独立生成器，供多线程各自使用
# - draw_open_unit：从开区间 (0, 1) 中抽取均匀随机数

from __future__ import annotations

import threading
from typing import Any, List, Optional

import numpy as np

from .config import get_config

_DEFAULT_RNG: Optional[np.random.Generator] = None
_DEFAULT_SEED: Optional[int] = None
_DEFAULT_LOCK = threading.Lock()


def create_rng(seed: Optional[Any] = None) -> np.random.Generator:
    """Create a numpy Generator from a seed, SeedSequence, or existing generator.

    ``None`` seeds a fresh generator from OS entropy.
    """
    if isinstance(seed, np.random.Generator):
        return seed
    return np.random.default_rng(seed)


def default_rng() -> np.random.Generator:
    """Process-wide generator used when no random source is passed.

    Built lazily from the runtime config's ``rng_seed`` (OS entropy when
    unset) and reused by every later call. It is rebuilt only when the
    configured seed changes or after :func:`reset_default_rng`.
    """
    global _DEFAULT_RNG, _DEFAULT_SEED
    seed = get_config().rng_seed
    with _DEFAULT_LOCK:
        if _DEFAULT_RNG is None or seed != _DEFAULT_SEED:
            _DEFAULT_RNG = np.random.default_rng(seed)
            _DEFAULT_SEED = seed
        return _DEFAULT_RNG


def reset_default_rng() -> None:
    """Drop the process-wide generator; the next use rebuilds it from config."""
    global _DEFAULT_RNG, _DEFAULT_SEED
    with _DEFAULT_LOCK:
        _DEFAULT_RNG = None
        _DEFAULT_SEED = None


def reseed_rng(rng: np.random.Generator, seed: Optional[int]) -> np.random.Generator:
    """Replace RNG state with a new seed; returns the generator for chaining."""
    # 保持对象标识不变，仅替换底层状态
    rng.bit_generator.state = np.random.default_rng(seed).bit_generator.state
    return rng


def split_rng(rng: np.random.Generator, num: int) -> List[np.random.Generator]:
    """Split an RNG into ``num`` independent generators."""
    if num <= 0:
        raise ValueError("num must be positive")
    seeds = rng.bit_generator.seed_seq.spawn(num)
    return [np.random.default_rng(seed) for seed in seeds]


def resolve_rng(source: Optional[Any] = None) -> Any:
    """Return an object with a ``random()`` method drawing from [0, 1)."""
    if source is None:
        return default_rng()
    if isinstance(source, np.random.Generator):
        return source
    if callable(getattr(source, "random", None)):
        return source
    return create_rng(source)


def draw_open_unit(rng: Any) -> float:
    """Draw one uniform value from the open interval (0, 1)."""
    # random() 的取值区间为 [0, 1)；0.0 会使逆 CDF 发散，遇到时重新抽取
    r = float(rng.random())
    while r == 0.0:
        r = float(rng.random())
    return r
