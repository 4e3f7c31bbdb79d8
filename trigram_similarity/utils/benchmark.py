"""
Micro-benchmarks for similarity scoring and fuzzy word search.
Plain string equality is timed on the same inputs as a point of reference.
"""
from __future__ import annotations

import logging
import time
from collections.abc import Callable, Sequence

import numpy as np
from pydantic import BaseModel, Field, computed_field
from tqdm import tqdm

from trigram_similarity.core.similarity import similarity
from trigram_similarity.search.scanner import find_words

logger = logging.getLogger(__name__)


class BenchmarkReport(BaseModel):
    """
    Timings of one benchmarked operation.

    Example:
        report = BenchmarkReport(name="similarity", iterations=3, timings=[1e-6, 2e-6, 3e-6])
        report.mean_us  # 2.0
    """
    name: str = Field(description="What was timed")
    iterations: int = Field(description="Number of timed calls")
    timings: list[float] = Field(default_factory=list, description="Seconds per call")

    @computed_field
    @property
    def mean_us(self) -> float:
        """Mean time per call in microseconds."""
        return float(np.mean(self.timings) * 1e6) if self.timings else 0.0

    @computed_field
    @property
    def std_us(self) -> float:
        """Standard deviation per call in microseconds."""
        return float(np.std(self.timings) * 1e6) if self.timings else 0.0

    @computed_field
    @property
    def min_us(self) -> float:
        """Fastest call in microseconds."""
        return float(np.min(self.timings) * 1e6) if self.timings else 0.0

    def __str__(self) -> str:
        return (f"{self.name:<40} {self.mean_us:10.3f} us/call "
                f"(± {self.std_us:.3f}, min {self.min_us:.3f}, n={self.iterations})")


def time_calls(name: str, fn: Callable[[], object], iterations: int) -> BenchmarkReport:
    """Call `fn` `iterations` times and record the duration of each call."""
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")
    timings = []
    for _ in tqdm(range(iterations), desc=name, ncols=100, leave=False, mininterval=0.1):
        start = time.perf_counter()
        fn()
        timings.append(time.perf_counter() - start)
    return BenchmarkReport(name=name, iterations=iterations, timings=timings)


def run_benchmarks(
    iterations: int | None = None,
    pairs: Sequence[Sequence[str]] | None = None,
) -> list[BenchmarkReport]:
    """
    Benchmark `similarity` and string equality on each pair, then a full
    `find_words` scan of the demo haystack.

    Defaults come from the `benchmark` and `demo` config sections.
    """
    from trigram_similarity import config

    if iterations is None:
        iterations = config.cfg.benchmark.iterations
    if pairs is None:
        pairs = config.cfg.benchmark.pairs
    needle = config.cfg.demo.needle
    haystack = config.cfg.demo.haystack

    reports = []
    for a, b in pairs:
        label = a if len(a) <= 20 else a[:17] + "..."
        reports.append(time_calls(f"similarity[{label}]", lambda: similarity(a, b), iterations))
        reports.append(time_calls(f"string equality[{label}]", lambda: a == b, iterations))
    reports.append(time_calls(f"find_words[{needle}]",
                              lambda: list(find_words(needle, haystack)),
                              iterations))

    logger.info(f"Ran {len(reports)} benchmarks with {iterations} iterations each")
    for report in reports:
        logger.info(str(report))
    return reports
