"""Benchmark inserting, retrieving and removing random strings in the trie.

Run from the repository root:

    python -m benchmarks.run_benchmarks --config_path benchmarks/configs/bench_config.txt
"""

import argparse
import gc
import json
import time
import tracemalloc
from pathlib import Path
from typing import Union

import matplotlib.pyplot as plt
import psutil

from src.mytrie.config import BenchConfig, load_config_file
from src.mytrie.logger import log, setup_logging
from src.mytrie.samples import generate_samples
from src.mytrie.trie import Trie

CONFIG_PATH = Path(__file__).parent / "configs" / "bench_config.txt"
RESULTS_DIR = (
    Path(__file__).parent.parent
    / "static"
    / "benchmarks"
    / "trie_benchmark_results"
)
# Share of the configured sample count used by each benchmark round
SAMPLE_FRACTIONS = [0.01, 0.1, 0.5, 1.0]
OPERATIONS = ["insert", "retrieve", "remove"]


class ContentNotFoundError(Exception):
    """Raised when a sample that was inserted can't be removed again."""


def elapsed_ms(begin: float) -> float:
    """Return the milliseconds passed since `begin`."""
    return (time.perf_counter() - begin) * 1000


def run_round(samples: list[str]) -> dict[str, Union[float, int]]:
    """Insert, retrieve and remove every sample, timing each phase.

    Args:
        samples (list[str]): Distinct strings to benchmark with.

    Raises:
        ContentNotFoundError: If a sample could not be removed.
        AssertionError: If the retrieved strings differ from the samples
        or the trie is not empty at the end.

    Returns:
        dict[str, float | int]: Timings in milliseconds per operation,
        the number of nodes built, and the memory measurements in bytes.

    """
    process = psutil.Process()
    rss_before = process.memory_info().rss
    # Keep a tracing started by the caller running afterwards
    started_tracing = not tracemalloc.is_tracing()
    if started_tracing:
        tracemalloc.start()
    else:
        tracemalloc.reset_peak()
    try:
        begin = time.perf_counter()
        trie = Trie.from_iterable(samples)
        insert_ms = elapsed_ms(begin)
        log("insert", len(samples), insert_ms)

        node_count = trie.count_nodes()
        _, peak_memory = tracemalloc.get_traced_memory()
        rss_after = process.memory_info().rss

        begin = time.perf_counter()
        retrieved = list(trie.iter_content(""))
        retrieve_ms = elapsed_ms(begin)
        log("retrieve", len(retrieved), retrieve_ms)

        assert sorted(retrieved) == sorted(samples), (
            "The retrieved strings differ from the inserted ones."
        )

        begin = time.perf_counter()
        for item in samples:
            if not trie.remove(item):
                raise ContentNotFoundError(
                    f"The sample {item!r} was inserted but is missing.",
                )
        remove_ms = elapsed_ms(begin)
        log("remove", len(samples), remove_ms)

        assert trie.is_empty(), "The trie is not empty after removing all."
    finally:
        if started_tracing:
            tracemalloc.stop()

    return {
        "insert": insert_ms,
        "retrieve": retrieve_ms,
        "remove": remove_ms,
        "node_count": node_count,
        "peak_traced_memory": peak_memory,
        "rss_growth": max(rss_after - rss_before, 0),
    }


def plot_results(
    results: dict[int, dict[str, Union[float, int]]],
    results_dir: Path,
) -> Path:
    """Plot the timings of every round as grouped bars.

    Args:
        results (dict): The results of `run_round` keyed by sample count.
        results_dir (Path): The directory to save the graph to.

    Returns:
        Path: The path of the saved graph.

    """
    counts = list(results)
    width = 0.8 / len(OPERATIONS)
    try:
        plt.switch_backend("Agg")
        plt.figure(figsize=(8, 5))
        for i, operation in enumerate(OPERATIONS):
            x = [j + i * width for j in range(len(counts))]
            y_values = [float(results[count][operation]) for count in counts]
            plt.bar(x, y_values, width=width, label=operation)
            for xi, v in zip(x, y_values):
                plt.text(xi, v + 0.01, f"{v:.1f}", ha="center", va="bottom")

        plt.xticks(
            [j + width for j in range(len(counts))],
            [str(count) for count in counts],
        )
        plt.xlabel("Strings")
        plt.ylabel("Execution Time (ms)")
        plt.title("Trie operation timings")
        plt.legend()
        plt.tight_layout()

        graph_path = results_dir / "benchmark_trie.png"
        plt.savefig(graph_path)
        return graph_path
    finally:
        # Cleanup matplotlib resources
        plt.close("all")


def run_benchmarks(
    config: BenchConfig,
    results_dir: Path,
) -> dict[int, dict[str, Union[float, int]]]:
    """Run one round per sample size and store the results.

    Args:
        config (BenchConfig): The benchmark settings.
        results_dir (Path): The directory for `results.json` and the graph.

    Returns:
        dict: The results of every round keyed by sample count.

    """
    samples = generate_samples(
        config.count,
        config.min_length,
        config.max_length,
        config.charset,
        seed=config.seed,
    )

    results: dict[int, dict[str, Union[float, int]]] = {}
    for fraction in SAMPLE_FRACTIONS:
        count = max(int(config.count * fraction), 1)
        if count in results or count > len(samples):
            continue
        print(f"\n--- Benchmarking {count} strings ---")
        results[count] = run_round(samples[:count])
        for operation in OPERATIONS:
            print(f"{operation}: {results[count][operation]:.2f} ms")
        # Force garbage collection
        gc.collect()

    results_dir.mkdir(parents=True, exist_ok=True)
    results_json_path = results_dir / "results.json"
    with open(results_json_path, "w", encoding="utf-8") as f:
        json.dump(results, f, indent=4)
    print(f"\nResults written to {results_json_path}")

    if config.plot and results:
        print(f"Graph written to {plot_results(results, results_dir)}")

    return results


def main() -> None:
    """Main function."""
    parser = argparse.ArgumentParser(description="Benchmark the trie.")
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    parser.add_argument(
        "--results_dir",
        type=str,
        default=str(RESULTS_DIR),
        help="Directory to write results.json (and the graph) into.",
        required=False,
    )
    parser.add_argument(
        "--log_path",
        type=str,
        default=None,
        help="Optional path of the log file.",
        required=False,
    )
    args = parser.parse_args()

    if args.log_path is not None:
        setup_logging(Path(args.log_path))
    else:
        setup_logging()

    config = load_config_file(Path(args.config_path))
    print(config)
    run_benchmarks(config, Path(args.results_dir))


if __name__ == "__main__":
    main()
