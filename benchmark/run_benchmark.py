# benchmark/run_benchmark.py
"""
Benchmark for the seeded Bloom filter.

- For each (capacity, target error rate) builds an optimal filter with Murmur3
- Inserts random strings, queries a disjoint random set
- Empirical FPR over several runs (avg ± std) vs the filter's own estimate
  and the textbook (1 - e^{-kn/m})^k
- Insert / query throughput, RSS delta via psutil
- Saturation plot: empirical FPR while the filter fills past its capacity
"""

import os
import random
import string
import time
from typing import List, Tuple

import matplotlib.pyplot as plt
import numpy as np
import psutil

from seedbloom import BloomFilter, Murmur3

CONFIGS: List[Tuple[int, float]] = [
    (10_000, 0.01),
    (10_000, 0.001),
    (100_000, 0.01),
]
NUM_RUNS = 3
QUERIES = 100_000


def random_item(rng: random.Random, prefix: str, n: int = 12) -> str:
    return prefix + ''.join(rng.choices(string.ascii_letters + string.digits, k=n))


def textbook_fpr(n: int, m: int, k: int) -> float:
    return (1.0 - np.exp(-k * n / m)) ** k


def measure_fpr(bf: BloomFilter, rng: random.Random, queries: int) -> float:
    """Empirical FPR on items that were never inserted (disjoint prefix)."""
    hits = sum(bf.contains(random_item(rng, "q:")) for _ in range(queries))
    return hits / queries


def benchmark_once(capacity: int, error_rate: float, seed: int) -> dict:
    rng = random.Random(seed)
    process = psutil.Process()
    rss_before = process.memory_info().rss

    bf = BloomFilter.optimal(Murmur3(), capacity, error_rate)
    items = [random_item(rng, "i:") for _ in range(capacity)]

    start_insert = time.perf_counter()
    bf.insert_all(items)
    insert_duration = time.perf_counter() - start_insert

    start_query = time.perf_counter()
    fpr = measure_fpr(bf, rng, QUERIES)
    query_duration = time.perf_counter() - start_query

    return {
        "m": bf.m_bits(),
        "k": bf.k_hash(),
        "fpr": fpr,
        "estimate": bf.false_positive_rate(),
        "textbook": textbook_fpr(len(bf), bf.m_bits(), bf.k_hash()),
        "insert_ops": capacity / insert_duration,
        "query_ops": QUERIES / query_duration,
        "memory_kb": (process.memory_info().rss - rss_before) / 1024,
    }


def run_full_benchmark(num_runs: int = NUM_RUNS) -> dict:
    """Run every config num_runs times and summarise avg ± std."""
    summary = {}
    for capacity, error_rate in CONFIGS:
        name = f"n={capacity:,} p={error_rate}"
        print(f"\n=== {name} ===")
        runs = [benchmark_once(capacity, error_rate, seed) for seed in range(num_runs)]

        fprs = [r["fpr"] for r in runs]
        summary[name] = {
            "m": runs[0]["m"],
            "k": runs[0]["k"],
            "fpr_mean": np.mean(fprs),
            "fpr_std": np.std(fprs),
            "estimate": runs[0]["estimate"],
            "textbook": runs[0]["textbook"],
            "insert_mean": np.mean([r["insert_ops"] for r in runs]),
            "query_mean": np.mean([r["query_ops"] for r in runs]),
            "memory_mean": np.mean([r["memory_kb"] for r in runs]),
        }
    print_results(summary)
    return summary


def print_results(summary: dict):
    from tabulate import tabulate

    table = []
    for name, s in summary.items():
        table.append([
            name,
            f"{s['m']:,}",
            s["k"],
            f"{s['fpr_mean']:.4%} ± {s['fpr_std']:.4%}",
            f"{s['estimate']:.4%}",
            f"{s['textbook']:.4%}",
            f"{s['insert_mean']:,.0f} ops/s",
            f"{s['query_mean']:,.0f} ops/s",
            f"{s['memory_mean']:,.0f} KB",
        ])

    print(f"\n=== RESULTS (avg ± std over {NUM_RUNS} runs) ===")
    print(tabulate(
        table,
        headers=["Config", "m", "k", "Empirical FPR", "Estimate", "Textbook", "Insert", "Query", "RSS delta"],
        tablefmt="github",
    ))


def plot_saturation(capacity: int = 10_000, error_rate: float = 0.01, steps: int = 20):
    """Plot empirical and textbook FPR while inserting up to 2x capacity."""
    rng = random.Random(0)
    bf = BloomFilter.optimal(Murmur3(), capacity, error_rate)
    step = 2 * capacity // steps

    inserted, empirical, textbook = [], [], []
    for _ in range(steps):
        bf.insert_all(random_item(rng, "i:") for _ in range(step))
        inserted.append(len(bf))
        empirical.append(measure_fpr(bf, rng, 10_000) * 100)
        textbook.append(textbook_fpr(len(bf), bf.m_bits(), bf.k_hash()) * 100)

    fig, ax = plt.subplots(figsize=(9, 6))
    ax.plot(inserted, empirical, marker="o", label="Empirical")
    ax.plot(inserted, textbook, linestyle="--", label="(1 - e^{-kn/m})^k")
    ax.axvline(capacity, color="grey", alpha=0.5, label="Capacity")
    ax.set_xlabel("Items inserted")
    ax.set_ylabel("False Positive Rate (%)")
    ax.set_title(f"Saturation (m={bf.m_bits():,}, k={bf.k_hash()})")
    ax.legend()
    plt.tight_layout()

    os.makedirs("plots", exist_ok=True)
    plot_path = "plots/saturation.png"
    plt.savefig(plot_path, dpi=200)
    plt.close()
    print(f"\nPlot saved to: {plot_path}")


if __name__ == "__main__":
    run_full_benchmark()
    plot_saturation()
