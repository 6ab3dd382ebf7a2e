#!/usr/bin/env python3
"""
Example: Benchmarking the LCP strategies.

Compares binary lifting over class layers against the suffix array +
range-minimum strategy on random strings, after checking they agree.
"""

from lcparray.benchmark import BenchmarkSuite, print_comparison_table


def main():
    print("LCP Benchmark Suite")
    print("=" * 80)

    benchmark = BenchmarkSuite(
        lengths=[10, 100, 1000, 10000, 100000],
        num_queries=2000,
        seed=42
    )

    print("\nVerifying strategies agree...")
    mismatches = benchmark.verify_strategies()
    if mismatches:
        print(f"Found {len(mismatches)} disagreements, first: {mismatches[0]}")
        return
    print("All strategies agree.")

    print("\nRunning benchmarks...")
    results = benchmark.compare_strategies(verbose=True)

    print_comparison_table(results)


if __name__ == "__main__":
    main()
