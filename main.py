import argparse
import logging
import sys

import numpy as np
import pandas as pd

from benchmarking import BenchmarkRunner, summarise
from data_analysis import analyse
from graph_generators.barabasi_albert import generate_ba
from graph_generators.random_regular import generate_rr
from wirecut.errors import WiringError
from wirecut.parsing import read_wiring
from wirecut.reduction import EXPECTED_WIRE_COUNT
from wirecut.solver import MAX_ATTEMPTS, find_partition
from wirecut.wires import Wires


def solve_file(args):
    wires = Wires.from_adjacency(read_wiring(args.input), dedupe=not args.no_dedupe)
    print(f"Loaded {args.input}: {wires.vertex_count()} components, {wires.edge_count()} wires")

    rng = np.random.default_rng(args.seed)
    partition = find_partition(wires, rng, target=args.target, max_attempts=args.max_attempts)

    print("Cut wires: " + ", ".join(str(w) for w in partition.cut))
    print(f"Groups: {len(partition.left)} x {len(partition.right)} (after {partition.attempts} attempts)")
    print(partition.product)


def benchmark(args):
    generators = {
        'RR': generate_rr,
        'BA': generate_ba,
    }
    model_params = {
        'RR': {'degree': 6},  # random 6-regular clusters
        'BA': {'m': 4}        # preferential attachment, 4 edges per new node
    }

    runner = BenchmarkRunner(generators, seed=args.seed, verify=args.verify)
    results_df = runner.run(
        models=args.models,
        n_values=args.sizes,
        trials=args.trials,
        model_params=model_params,
        width=args.target,
    )

    pd.set_option('display.width', 1000)
    pd.set_option('display.max_rows', None)

    print("\nBenchmark Results:")
    print(summarise(results_df))

    results_df.to_csv(args.output, index=False)
    print(f"\nResults saved to {args.output}")


def analysis(args):
    summary = analyse(args.input, args.out_dir)
    print(summary.to_string(index=False))
    print(f"Outputs written to folder: {args.out_dir}")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Minimum wire cut partitioner")
    parser.add_argument("-v", "--verbose", action="count", default=0,
                        help="-v for progress, -vv for every reduction attempt")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for graph generation and contraction")
    parser.add_argument("--target", type=int, default=EXPECTED_WIRE_COUNT,
                        help="number of wires to cut")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("solve", help="partition a wiring diagram")
    p.add_argument("input", help="file of 'component: other other ...' lines")
    p.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                   help="outer attempts before giving up")
    p.add_argument("--no-dedupe", action="store_true",
                   help="treat reverse listings as parallel wires")
    p.set_defaults(func=solve_file)

    p = sub.add_parser("benchmark", help="time the partitioner on planted-cut graphs")
    p.add_argument("--models", nargs="+", default=["RR", "BA"], choices=["RR", "BA"])
    p.add_argument("--sizes", nargs="+", type=int, default=[50, 100, 200, 400])
    p.add_argument("--trials", type=int, default=5)
    p.add_argument("--verify", action="store_true",
                   help="cross-check cut values with networkx Stoer-Wagner")
    p.add_argument("--output", default="benchmark_results.csv")
    p.set_defaults(func=benchmark)

    p = sub.add_parser("analyse", help="fit runtime scaling from a benchmark CSV")
    p.add_argument("input", nargs="?", default="benchmark_results.csv")
    p.add_argument("--out-dir", default="analysis_figures")
    p.set_defaults(func=analysis)

    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    level = [logging.WARNING, logging.INFO, logging.DEBUG][min(args.verbose, 2)]
    logging.basicConfig(level=level, format="%(asctime)s %(name)s %(levelname)s %(message)s")

    try:
        args.func(args)
    except WiringError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
