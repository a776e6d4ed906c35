"""Noisy count releases under parallel and sequential composition."""
from .counts import (
    CountQuery,
    NoisyCount,
    QueryGroup,
    QuerySequence,
    apply_parallel_composition,
    apply_sequential_composition,
    normalize_queries,
)

__all__ = [
    "CountQuery",
    "NoisyCount",
    "QueryGroup",
    "QuerySequence",
    "apply_parallel_composition",
    "apply_sequential_composition",
    "normalize_queries",
]
