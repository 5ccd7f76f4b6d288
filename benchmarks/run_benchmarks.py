import os
import sys
import argparse

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from benchmarks.benchmark import Benchmark


def main():
    parser = argparse.ArgumentParser(description="Run pattern search benchmarks")
    parser.add_argument("--sizes", type=int, nargs="+", default=list(range(10_000, 200_001, 10_000)),
                        help="Text sizes to test (number of elements)")
    parser.add_argument("--output-dir", default="benchmark_results",
                        help="Directory for benchmark results")
    parser.add_argument("--alphabet", default="ab",
                        help="Characters the generated texts are drawn from")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for reproducible texts")
    args = parser.parse_args()

    patterns = [
        "aaaaaaaaab",
        "abababab",
        "abaabaab",
        "ab",
        "bbbbbbba",
    ]

    benchmark = Benchmark(args.output_dir, alphabet=args.alphabet, seed=args.seed)

    print("Running benchmarks...")
    print("===================")
    print(f"Text sizes: {len(args.sizes)}")
    print(f"Number of patterns: {len(patterns)}")
    print()

    benchmark.run_benchmark(text_sizes=args.sizes, patterns=patterns)

    print("\nGenerating reports...")
    benchmark.generate_report()

    print(f"\nBenchmark results saved to {args.output_dir}")
    print("Files generated:")
    print(f"- {args.output_dir}/time-speed.png")
    print(f"- {args.output_dir}/comparisons.png")
    print(f"- {args.output_dir}/memory_usage.png")
    print(f"- {args.output_dir}/benchmark_results.csv")
    print(f"- {args.output_dir}/benchmark_report.txt")


if __name__ == "__main__":
    main()
