"""
Example 01: Laplace Noise Basics.

Goal:
    Perturb a single count, draw a batch of noise, run the mechanism
    lifecycle (Init -> Calibrate -> Randomise -> Serialize) and compare the
    empirical spread of the noise with Laplace theory.

Usage:
    python examples/basic/01_laplace_noise.py --epsilon 0.5 --quick
"""
import sys
from pathlib import Path

import numpy as np

project_root = Path(__file__).resolve().parents[2]
src_root = project_root / "src"
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))
if str(src_root) not in sys.path:
    sys.path.insert(0, str(src_root))

from examples._shared import cli, io, metrics
from sdpnoise import LaplaceMechanism, create_rng, laplace_scale, sample_laplace_batch, sample_laplace_noise


def main(argv=None):
    args = cli.parse_args("Laplace Noise Basics", argv)

    # 1. One random source for the whole run
    generator = create_rng(args.seed)

    epsilon = args.epsilon
    sensitivity = 1.0  # counting people: one person changes a count by at most 1
    scale = laplace_scale(epsilon, sensitivity)

    # 2. A single noisy count
    true_count = 100
    noisy_count = true_count + sample_laplace_noise(epsilon, sensitivity, rng=generator)

    # 3. Many draws, compared with mean 0 and variance 2 * scale^2
    n_draws = 10_000 if args.quick else 100_000
    draws = np.asarray(sample_laplace_batch(n_draws, epsilon, sensitivity, rng=generator))

    # 4. Mechanism lifecycle on a small table of counts
    mech = LaplaceMechanism(epsilon=epsilon, sensitivity=sensitivity, rng=generator)
    mech.calibrate()
    table = [12, 0, 3, 57]
    noisy_table = mech.randomise(table)
    restored = LaplaceMechanism.deserialize(mech.serialize())

    result = {
        "name": "basic/01_laplace_noise",
        "config": {
            "seed": args.seed,
            "epsilon": epsilon,
            "sensitivity": sensitivity,
            "n_draws": n_draws,
        },
        "outputs": {
            "true_count": true_count,
            "noisy_count": noisy_count,
            "table": table,
            "noisy_table": noisy_table,
            "serialized": restored.serialize(),
        },
        "metrics": {
            "scale": scale,
            "empirical_mean": float(draws.mean()),
            "empirical_variance": float(draws.var()),
            "theoretical_variance": 2 * scale ** 2,
            "mean_abs_noise": float(np.abs(draws).mean()),
            "table_mae": metrics.mean_absolute_error(noisy_table, table),
            "negative_fraction": metrics.negative_fraction(noisy_table),
        },
        "artifacts": {},
    }

    out_path = io.write_json(result, Path(args.outdir) / "01_laplace_noise.json")
    result["artifacts"]["json"] = str(out_path)

    return result


if __name__ == "__main__":
    res = main()
    io.print_summary(res)
