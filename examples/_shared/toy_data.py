"""
Toy count tables for the composition examples.
"""
from typing import Dict, List, Optional

import numpy as np


def build_county_counts(
    n_counties: int,
    mean_count: float = 40.0,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, int]:
    """
    One count per county, e.g. new cases recorded on a single day.

    Counties partition the population, so these counts are disjoint.
    """
    if rng is None:
        rng = np.random.default_rng()
    counts = rng.poisson(mean_count, size=n_counties)
    return {f"county_{i + 1:02d}": int(c) for i, c in enumerate(counts)}


def build_daily_counts(
    counties: List[str],
    n_days: int = 7,
    mean_count: float = 40.0,
    rng: Optional[np.random.Generator] = None,
) -> Dict[str, List[int]]:
    """
    One count per county per day.

    Each county's daily counts describe the same people repeatedly, so
    within a county they must be released under sequential composition.
    """
    if rng is None:
        rng = np.random.default_rng()
    return {
        county: [int(c) for c in rng.poisson(mean_count, size=n_days)]
        for county in counties
    }
