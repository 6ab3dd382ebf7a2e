#!/usr/bin/env python3
"""
Benchmarks for LCP construction and query strategies.

Times structure construction and random get(i, j) queries on random
alphanumeric strings of several lengths, and cross-checks that the
strategies agree.
"""

from typing import Dict, List, Optional, Sequence, Tuple
from dataclasses import dataclass
import random
import time

from lcparray.lcp import STRATEGIES, new

LETTER_BYTES = b"abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789"

DEFAULT_LENGTHS = (10, 100, 1000, 10000, 100000)


@dataclass
class BenchmarkResult:
    """Timings for one strategy on one string length."""
    strategy: str
    length: int
    build_time_s: float
    num_queries: int
    mean_query_time_us: float  # Average per-query time
    median_query_time_us: float  # Median per-query time
    total_time_s: float


def generate_string(length: int, seed: Optional[int] = None) -> bytes:
    """
    Random string over [a-zA-Z0-9].

    Args:
        length: Number of symbols
        seed: Seed for reproducible strings

    Returns:
        Random bytes
    """
    rng = random.Random(seed)
    return bytes(rng.choice(LETTER_BYTES) for _ in range(length))


class BenchmarkSuite:
    """
    Benchmark suite comparing LCP strategies across string lengths.
    """

    def __init__(
        self,
        lengths: Sequence[int] = DEFAULT_LENGTHS,
        num_queries: int = 1000,
        seed: Optional[int] = None
    ):
        """
        Initialize benchmark suite.

        Args:
            lengths: String lengths to benchmark
            num_queries: Random queries timed per structure
            seed: Seed for strings and query positions
        """
        self.lengths = list(lengths)
        self.num_queries = num_queries
        self.seed = seed
        self._rng = random.Random(seed)
        self._strings = {
            length: generate_string(length, seed=self._rng.randrange(2 ** 32))
            for length in self.lengths
        }

    def _query_pairs(self, length: int) -> List[Tuple[int, int]]:
        if length == 0:
            return []
        return [
            (self._rng.randrange(length), self._rng.randrange(length))
            for _ in range(self.num_queries)
        ]

    def run_strategy(self, strategy: str, length: int) -> BenchmarkResult:
        """
        Time construction and queries for one strategy and length.

        Raises:
            ValueError: If the strategy is unknown
        """
        text = self._strings.get(length)
        if text is None:
            text = generate_string(length, seed=self._rng.randrange(2 ** 32))
            self._strings[length] = text

        start_time = time.time()
        structure = new(text, strategy)
        build_time = time.time() - start_time

        times = []
        for i, j in self._query_pairs(length):
            query_start = time.time()
            structure.get(i, j)
            times.append((time.time() - query_start) * 1_000_000)  # us

        mean_time = sum(times) / len(times) if times else 0.0
        median_time = sorted(times)[len(times) // 2] if times else 0.0

        return BenchmarkResult(
            strategy=strategy,
            length=length,
            build_time_s=build_time,
            num_queries=len(times),
            mean_query_time_us=mean_time,
            median_query_time_us=median_time,
            total_time_s=time.time() - start_time
        )

    def compare_strategies(
        self,
        strategies: Optional[Sequence[str]] = None,
        verbose: bool = False
    ) -> Dict[str, Dict[int, BenchmarkResult]]:
        """
        Benchmark several strategies over every configured length.

        Args:
            strategies: Strategy names (default: all)
            verbose: Print progress

        Returns:
            Dict mapping strategy -> length -> BenchmarkResult
        """
        strategies = list(strategies or STRATEGIES)
        results = {}

        for strategy in strategies:
            results[strategy] = {}
            for length in self.lengths:
                if verbose:
                    print(f"Benchmarking {strategy} on length {length:,}...")

                result = self.run_strategy(strategy, length)
                results[strategy][length] = result

                if verbose:
                    print(f"  Built in {result.build_time_s:.3f}s, "
                          f"{result.mean_query_time_us:.2f} us/query")

        return results

    def verify_strategies(
        self,
        strategies: Optional[Sequence[str]] = None,
        max_length: int = 10000
    ) -> List[Tuple[int, int, int, Dict[str, int]]]:
        """
        Check that all strategies return the same LCP on random queries.

        Args:
            strategies: Strategy names (default: all)
            max_length: Skip configured lengths above this

        Returns:
            List of (length, i, j, {strategy: answer}) for every disagreement
        """
        strategies = list(strategies or STRATEGIES)
        mismatches = []

        for length in self.lengths:
            if length > max_length:
                continue

            text = self._strings[length]
            structures = {name: new(text, name) for name in strategies}

            for i, j in self._query_pairs(length):
                answers = {name: s.get(i, j) for name, s in structures.items()}
                if len(set(answers.values())) > 1:
                    mismatches.append((length, i, j, answers))

        return mismatches


def print_comparison_table(results: Dict[str, Dict[int, BenchmarkResult]]):
    """
    Print a formatted comparison table.

    Args:
        results: Output from BenchmarkSuite.compare_strategies()
    """
    print("\n" + "=" * 80)
    print("Strategy Comparison")
    print("=" * 80)

    strategies = list(results.keys())
    if not strategies:
        print("No results")
        return

    lengths = list(results[strategies[0]].keys())

    for length in lengths:
        print(f"\nLength {length:,}:")
        print("-" * 80)
        print(f"{'Strategy':<20} {'Build(s)':<12} {'Mean(us)':<12} {'Median(us)':<12} {'Queries':<10}")
        print("-" * 80)

        for strategy in strategies:
            result = results[strategy][length]
            print(f"{strategy:<20} "
                  f"{result.build_time_s:<12.4f} "
                  f"{result.mean_query_time_us:<12.2f} "
                  f"{result.median_query_time_us:<12.2f} "
                  f"{result.num_queries:<10}")

    print("=" * 80)
