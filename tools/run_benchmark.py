#!/usr/bin/env python3
"""
Tactics Benchmark Runner

Runs the tactical position suite at several depths, with and without
alpha-beta pruning, and reports correctness, node counts and whether the
two searches agree on every score.

Usage:
    python tools/run_benchmark.py [--depths 1,2,3] [--verbose] [--log-file FILE]
"""

import sys
import argparse
import time
from pathlib import Path

from tqdm import tqdm

sys.path.insert(0, str(Path(__file__).parent.parent))

from openclaw.evaluation.material import MaterialEvaluator
from openclaw.log import setup_logger
from openclaw.utils.suites import TACTICS_POSITIONS, evaluate_position


def format_time(seconds: float) -> str:
    """Format time"""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        minutes = int(seconds // 60)
        secs = seconds % 60
        return f"{minutes}m {secs:.0f}s"


def run_benchmark(depths: list[int], verbose: bool = False):
    """
    Run the tactics suite at multiple depths.

    Args:
        depths: List of depths to test
        verbose: If True, print detailed results for each position
    """
    evaluator = MaterialEvaluator()

    print("=" * 80)
    print("TACTICS BENCHMARK - OpenClaw")
    print("=" * 80)
    print(f"Evaluator: {evaluator!r}")
    print("Search: Minimax with Alpha-Beta Pruning (vs. full minimax)")
    print(f"Depths: {depths}")
    print("=" * 80)

    all_results = []

    for depth in depths:
        start_time = time.time()
        results = [
            evaluate_position(
                position,
                depth,
                evaluator=evaluator,
                compare_unpruned=True,
                verbose=verbose,
            )
            for position in tqdm(TACTICS_POSITIONS, desc=f"depth {depth}", leave=False)
        ]
        total_time = time.time() - start_time

        correct = sum(1 for r in results if r.correct)
        pruned_nodes = sum(r.nodes_searched for r in results)
        unpruned_nodes = sum(r.unpruned_nodes for r in results)
        disagreements = [r.position.id for r in results if not r.agrees]

        all_results.append({
            'depth': depth,
            'correct': correct,
            'total': len(results),
            'total_time': total_time,
            'pruned_nodes': pruned_nodes,
            'unpruned_nodes': unpruned_nodes,
            'disagreements': disagreements,
            'results': results,
        })

        failed = [r for r in results if not r.correct]
        if failed and verbose:
            print(f"\n  Failed positions at depth {depth}:")
            for r in failed:
                print(f"    {r.position.id}: Expected {r.position.best_moves}, got {r.found_move}")

    print("\n" + "=" * 80)
    print("SUMMARY TABLE")
    print("=" * 80)
    print(f"{'Depth':<8} {'Correct':<10} {'Time':<10} {'Nodes':>12} {'Unpruned':>12} {'Saved %':>9}  Agree")
    print("-" * 80)

    for r in all_results:
        saved = 100 * (1 - r['pruned_nodes'] / r['unpruned_nodes']) if r['unpruned_nodes'] else 0
        agree = "yes" if not r['disagreements'] else ", ".join(r['disagreements'])
        print(
            f"{r['depth']:<8} {r['correct']}/{r['total']:<8} {format_time(r['total_time']):<10} "
            f"{r['pruned_nodes']:>12,} {r['unpruned_nodes']:>12,} {saved:>8.1f}%  {agree}"
        )

    print("=" * 80)

    return all_results


def main():
    parser = argparse.ArgumentParser(
        description="Run the tactics suite at multiple depths"
    )
    parser.add_argument(
        "--depths",
        type=str,
        default="1,2,3",
        help="Comma-separated list of depths to test (default: 1,2,3)"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Print detailed results for each position"
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        default=None,
        help="Write engine debug log to this file"
    )

    args = parser.parse_args()

    if args.log_file:
        setup_logger("DEBUG", log_file=args.log_file)

    try:
        depths = [int(d.strip()) for d in args.depths.split(",")]
    except ValueError:
        print("Error: depths must be comma-separated integers")
        sys.exit(1)

    if any(d < 0 for d in depths):
        print("Error: depths must be non-negative")
        sys.exit(1)

    try:
        run_benchmark(depths, verbose=args.verbose)
    except KeyboardInterrupt:
        print("\n\nBenchmark interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
