from .ips import BenchResult, compare, measure_ips, print_bench_result, print_comparison

__all__ = [
    "BenchResult",
    "compare",
    "measure_ips",
    "print_bench_result",
    "print_comparison",
]
