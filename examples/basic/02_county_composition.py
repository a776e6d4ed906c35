"""
Example 02: County Counts Under Parallel and Sequential Composition.

Goal:
    Release one day of per-county counts in parallel (counties are
    disjoint, so each county gets the full epsilon), then release a week of
    daily counts per county sequentially (the same county is queried seven
    times, so its epsilon is split across days).

Usage:
    python examples/basic/02_county_composition.py --epsilon 1.0
"""
import sys
from pathlib import Path

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, metrics, toy_data
from sdpnoise import (
    CountQuery,
    PrivacyAccountant,
    QueryGroup,
    QuerySequence,
    create_rng,
)
from sdpnoise.core.privacy import parallel_max


def main(argv=None):
    args = cli.parse_args("County Composition", argv)
    generator = create_rng(args.seed)
    epsilon = args.epsilon
    n_counties = 5 if args.quick else 20
    n_days = 7

    # 1. One day, all counties: parallel composition
    day_counts = toy_data.build_county_counts(n_counties, rng=generator)
    group = QueryGroup(tuple(CountQuery(count, 1.0, county) for county, count in day_counts.items()))
    day_release = group.release(epsilon, rng=generator)

    # 2. One week per county: sequential composition, one accountant per county
    week_counts = toy_data.build_daily_counts(list(day_counts), n_days=n_days, rng=generator)
    week_release = {}
    accountants = {}
    for county, counts in week_counts.items():
        accountant = PrivacyAccountant(total_epsilon=epsilon, name=county)
        sequence = QuerySequence(tuple(CountQuery(c, 1.0, f"day_{d + 1}") for d, c in enumerate(counts)))
        week_release[county] = sequence.release(epsilon, rng=generator, accountant=accountant)
        accountants[county] = accountant

    # 3. Counties are disjoint, so the week as a whole costs the largest county spend
    week_guarantee = parallel_max(acc.spent for acc in accountants.values())

    true_week = [c for counts in week_counts.values() for c in counts]
    noisy_week = [r.value for released in week_release.values() for r in released]

    result = {
        "name": "basic/02_county_composition",
        "config": {
            "seed": args.seed,
            "epsilon": epsilon,
            "n_counties": n_counties,
            "n_days": n_days,
        },
        "outputs": {
            "day_release": [r.to_dict() for r in day_release],
            "week_release": {
                county: [r.to_dict() for r in released] for county, released in week_release.items()
            },
            "accountants": {county: acc.to_dict() for county, acc in accountants.items()},
        },
        "metrics": {
            "day_scale": day_release[0].scale,
            "week_scale": week_release[next(iter(week_release))][0].scale,
            "day_mae": metrics.mean_absolute_error([r.value for r in day_release], list(day_counts.values())),
            "week_mae": metrics.mean_absolute_error(noisy_week, true_week),
            "week_max_abs_error": metrics.max_abs_error(noisy_week, true_week),
            "day_guarantee_epsilon": group.guarantee(epsilon).epsilon,
            "week_guarantee_epsilon": week_guarantee.epsilon,
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "02_county_composition.json")
    result["artifacts"]["json"] = str(out_path)

    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
