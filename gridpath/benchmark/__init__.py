"""
Benchmark module.

Compares the search algorithms on a single request:
- compare_algorithms: Run each algorithm and collect AlgorithmStats
- summarize: Aggregate statistics across the runs
"""

from gridpath.benchmark.compare import AlgorithmStats, compare_algorithms, summarize

__all__ = ["AlgorithmStats", "compare_algorithms", "summarize"]
