"""Benchmarking helpers."""

from .benchmark import BenchmarkReport, run_benchmarks, time_calls

__all__ = [
    "BenchmarkReport",
    "run_benchmarks",
    "time_calls",
]
