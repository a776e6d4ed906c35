"""
Master runner for all examples.
"""
import argparse
import subprocess
import sys
from pathlib import Path

# Add project root to sys.path
sys.path.append(str(Path(__file__).resolve().parent.parent))

from examples.registry import EXAMPLES


def main():
    parser = argparse.ArgumentParser(description="Run sdp-noise examples.")
    parser.add_argument("--quick", action="store_true", help="Run examples in quick mode")
    parser.add_argument("--seed", type=int, default=0, help="Global random seed")
    parser.add_argument("--epsilon", type=float, default=1.0, help="Privacy-loss budget passed to every example")
    parser.add_argument("--outdir", type=str, default="./_outputs", help="Output directory base")
    parser.add_argument("--include-tags", type=str, help="Comma-separated tags to include (e.g., 'laplace')")
    parser.add_argument("--fail-fast", action="store_true", help="Stop on first failure")

    args = parser.parse_args()

    include_tags = set(args.include_tags.split(",")) if args.include_tags else set()

    passed = []
    failed = []
    skipped = []

    print(f"Running examples with seed={args.seed}, epsilon={args.epsilon}, quick={args.quick}")
    print("-" * 60)

    for entry in EXAMPLES:
        path_str = entry["path"]
        full_path = Path(__file__).parent / path_str

        if include_tags and not include_tags.intersection(entry["tags"]):
            skipped.append((path_str, "Tag mismatch"))
            continue

        if not full_path.exists():
            failed.append((path_str, "File not found"))
            print(f"[FAIL] {path_str} (File not found)")
            if args.fail_fast:
                break
            continue

        cmd = [
            sys.executable, str(full_path),
            "--seed", str(args.seed),
            "--epsilon", str(args.epsilon),
            "--outdir", args.outdir,
        ]
        if args.quick:
            cmd.append("--quick")

        print(f"[RUN ] {path_str} ...", end="", flush=True)
        # 子进程中运行以隔离各示例的全局状态
        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode == 0:
            print(" [PASS]")
            passed.append(path_str)
        else:
            print(" [FAIL]")
            print(f"  Exit Code: {result.returncode}")
            print("  Stderr:")
            print(result.stderr)
            failed.append((path_str, "Runtime Error"))
            if args.fail_fast:
                break

    print("-" * 60)
    print(f"Summary: {len(passed)} Passed, {len(failed)} Failed, {len(skipped)} Skipped")
    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
