import logging
import time
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field


class BenchResult(BaseModel):
    """Throughput of one benchmarked function"""

    model_config = ConfigDict(frozen=True)

    label: str = Field(..., min_length=1)
    iterations: int = Field(..., ge=1, description="Number of measured calls")
    elapsed_s: float = Field(..., gt=0, description="Time spent in measured calls")

    @property
    def ips(self) -> float:
        """Iterations per second"""
        return self.iterations / self.elapsed_s


def measure_ips(
    label: str, fn: Callable[[], object], warmup_s: float = 2.0, time_s: float = 5.0
) -> BenchResult:
    """Call fn repeatedly and count how many calls fit in time_s seconds."""
    logging.debug(f"warming up {label} for {warmup_s}s")
    deadline = time.perf_counter() + warmup_s
    while time.perf_counter() < deadline:
        fn()

    logging.debug(f"measuring {label} for {time_s}s")
    iterations = 0
    start = time.perf_counter()
    deadline = start + time_s
    # at least one measured call, even for slow functions
    while True:
        fn()
        iterations += 1
        now = time.perf_counter()
        if now >= deadline:
            break
    elapsed = now - start
    # perf_counter can return the same value twice for very fast calls
    return BenchResult(label=label, iterations=iterations, elapsed_s=max(elapsed, 1e-9))


def compare(results: list[BenchResult]) -> list[tuple[BenchResult, float]]:
    """Sort results fastest first, with their slowdown relative to the fastest."""
    ranked = sorted(results, key=lambda r: r.ips, reverse=True)
    if not ranked:
        return []
    best = ranked[0].ips
    return [(result, best / result.ips) for result in ranked]


def print_bench_result(result: BenchResult) -> None:
    print(
        f"{result.label:>32}: {result.ips:12.1f} i/s "
        f"({result.iterations} in {result.elapsed_s:.3f} s)"
    )


def print_comparison(results: list[BenchResult]) -> None:
    print("\nComparison:")
    for result, slowdown in compare(results):
        if slowdown == 1.0:
            print(f"{result.label:>32}: {result.ips:12.1f} i/s")
        else:
            print(
                f"{result.label:>32}: {result.ips:12.1f} i/s - {slowdown:.2f}x slower"
            )
    print()
