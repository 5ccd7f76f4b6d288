import os
import time
import random
import tracemalloc
from typing import Dict, List, Optional, Type

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

from kmp_matcher.search.base import SearchAlgorithm
from kmp_matcher.search.algorithms import ALGORITHMS


class Benchmark:
    """
    Compares the registered search algorithms on generated texts.

    Texts are drawn from a small alphabet so that partial matches are
    frequent, which is where KMP's fallback table pays off over restarting
    the comparison at every text position.
    """

    def __init__(self, output_dir: str = "benchmark_results", alphabet: str = "ab",
                 algorithms: Optional[Dict[str, Type[SearchAlgorithm]]] = None, seed: Optional[int] = None):
        self.output_dir = output_dir
        self.alphabet = alphabet
        self.algorithms = algorithms or dict(ALGORITHMS)
        self.results: Dict[str, List[Dict]] = {}
        self._random = random.Random(seed)
        os.makedirs(output_dir, exist_ok=True)

    def generate_text(self, size: int, pattern: str, occurrences: int = 10) -> str:
        """Generate a random text of ``size`` elements with ``pattern`` planted in it."""
        chars = self._random.choices(self.alphabet, k=size)
        if len(pattern) <= size:
            for _ in range(occurrences):
                start = self._random.randint(0, size - len(pattern))
                chars[start:start + len(pattern)] = pattern
        return "".join(chars)

    def measure_memory(self, func, *args) -> float:
        tracemalloc.start()
        try:
            func(*args)
            _, peak = tracemalloc.get_traced_memory()
        finally:
            tracemalloc.stop()
        return peak / 1024

    def measure_throughput(self, search_func, text: str, patterns: List[str], n_runs: int = 3) -> float:
        start_time = time.perf_counter()
        for _ in range(n_runs):
            for pattern in patterns:
                search_func(text, pattern)
        total_time = time.perf_counter() - start_time
        if total_time == 0:
            return 0.0
        return (len(patterns) * n_runs) / (1000 * total_time)

    def run_benchmark(self, text_sizes: List[int], patterns: List[str]) -> None:
        if not patterns:
            raise ValueError("At least one pattern is required")
        self.results.clear()
        total_steps = len(text_sizes) * len(self.algorithms)
        current_step = 0

        for size in text_sizes:
            text = self.generate_text(size, patterns[0])
            for algo_name, algo_class in self.algorithms.items():
                current_step += 1
                print(f"Running benchmark: {current_step}/{total_steps} - Algorithm: {algo_name}, "
                      f"Text Size: {size}", end='\r')

                algo = algo_class()
                total_search_time = 0.0
                total_memory_usage = 0.0
                total_comparisons = 0
                for pattern in patterns:
                    search_start = time.perf_counter()
                    algo.search(text, pattern)
                    total_search_time += time.perf_counter() - search_start
                    total_comparisons += algo.get_stats()["comparisons"]
                    total_memory_usage += self.measure_memory(algo.search, text, pattern)

                self.results.setdefault(algo_name, []).append({
                    "text_size": size,
                    "avg_search_time": 1000 * total_search_time / len(patterns),
                    "memory_usage": total_memory_usage / len(patterns),
                    "comparisons": total_comparisons / len(patterns),
                    "throughput": self.measure_throughput(algo.search, text, patterns),
                })

        print("\nBenchmark completed.")

    def to_dataframe(self) -> pd.DataFrame:
        rows = []
        for algo_name, results in self.results.items():
            for result in results:
                rows.append(dict(result, algorithm=algo_name))
        return pd.DataFrame(rows)

    def plot_figure(self, df: pd.DataFrame, x: str, y: str, xlabel: str, ylabel: str, filename: str,
                    log_scale_x: bool = False, log_scale_y: bool = False) -> None:
        plt.figure(figsize=(15, 10))
        for algo in df["algorithm"].unique():
            algo_data = df[df["algorithm"] == algo]
            plt.plot(algo_data[x], algo_data[y], marker='o', label=algo)
        if log_scale_x:
            plt.xscale('log')
        if log_scale_y:
            plt.yscale('log')
        plt.xlabel(xlabel + " [Log Scale]" if log_scale_x else xlabel)
        plt.ylabel(ylabel + " [Log Scale]" if log_scale_y else ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def generate_report(self) -> pd.DataFrame:
        df = self.to_dataframe()
        print(df.head())
        self.plot_figure(
            df, x="text_size", y="avg_search_time",
            xlabel="Text Size (elements)", ylabel="Average Search Time (ms)",
            filename=os.path.join(self.output_dir, "time-speed.png"),
            log_scale_y=True,
        )
        self.plot_figure(
            df, x="text_size", y="comparisons",
            xlabel="Text Size (elements)", ylabel="Element Comparisons",
            filename=os.path.join(self.output_dir, "comparisons.png"),
        )
        self.plot_figure(
            df, x="text_size", y="memory_usage",
            xlabel="Text Size (elements)", ylabel="Memory Usage (kB)",
            filename=os.path.join(self.output_dir, "memory_usage.png"),
            log_scale_y=True,
        )

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w') as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            f.write(f"{'Algorithm':<20}{'Avg Search Time (ms)':<25}{'Comparisons':<20}{'Throughput (queries/ms)':<25}\n")
            f.write("=" * 90 + "\n")
            for algo in df["algorithm"].unique():
                algo_data = df[df["algorithm"] == algo]
                f.write(
                    f"{algo:<20}{algo_data['avg_search_time'].mean():<25.4f}"
                    f"{algo_data['comparisons'].mean():<20.1f}{algo_data['throughput'].mean():<25.4f}\n"
                )
        return df
