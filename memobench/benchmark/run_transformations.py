"""Compare memoized and naive implementations of the protocol transformation
and of the DNS batch lookup. Run with `python -m memobench.benchmark.run_transformations`"""

import logging

from memobench.benchmark.ips import measure_ips, print_bench_result, print_comparison
from memobench.config import BenchConfig
from memobench.errors import ResolutionFailure
from memobench.protocol import (
    MemoizedProtocolTransformer,
    NaiveProtocolTransformer,
    ProtocolRecord,
)
from memobench.resolver import ConcurrentResolver, SequentialResolver


def benchmark_protocol(config: BenchConfig) -> None:
    record = ProtocolRecord.model_validate(config.payload)
    results = [
        measure_ips(
            "memoized protocol",
            lambda: MemoizedProtocolTransformer(record).transform(),
            config.warmup_s,
            config.time_s,
        ),
        measure_ips(
            "naive protocol",
            lambda: NaiveProtocolTransformer(record).transform(),
            config.warmup_s,
            config.time_s,
        ),
    ]
    for result in results:
        print_bench_result(result)
    print_comparison(results)


def benchmark_dns(config: BenchConfig) -> None:
    hostnames = list(config.hostnames)
    try:
        results = [
            measure_ips(
                "concurrent DNS lookup batch",
                lambda: ConcurrentResolver().resolve(hostnames),
                config.warmup_s,
                config.time_s,
            ),
            measure_ips(
                "naive DNS lookup batch",
                lambda: SequentialResolver().resolve(hostnames),
                config.warmup_s,
                config.time_s,
            ),
        ]
    except ResolutionFailure as e:
        logging.error(f"Skipping DNS benchmark: {e}")
        return
    for result in results:
        print_bench_result(result)
    print_comparison(results)


def main(config: BenchConfig | None = None) -> None:
    if config is None:
        config = BenchConfig()
    logging.info(f"Running benchmarks with {config}")
    benchmark_protocol(config)
    benchmark_dns(config)


def run() -> None:
    logging.basicConfig(level=logging.INFO, force=True)
    main()


if __name__ == "__main__":
    run()
