import logging
from unittest.mock import MagicMock, patch

import pytest
from pydantic import ValidationError

from memobench.benchmark import BenchResult, compare, measure_ips, print_comparison
from memobench.benchmark import run_transformations
from memobench.config import BenchConfig
from memobench.errors import ResolutionFailure


def test_bench_result_ips():
    """Test iterations per second of a result."""
    result = BenchResult(label="x", iterations=50, elapsed_s=2.0)
    assert result.ips == 25.0


def test_bench_result_validation():
    """Test invalid results are rejected."""
    with pytest.raises(ValidationError):
        BenchResult(label="", iterations=1, elapsed_s=1.0)
    with pytest.raises(ValidationError):
        BenchResult(label="x", iterations=0, elapsed_s=1.0)


def test_measure_ips_counts_calls():
    """Test measure_ips counts the measured calls."""
    fn = MagicMock()
    result = measure_ips("mock", fn, warmup_s=0, time_s=0.05)
    assert result.label == "mock"
    assert result.iterations >= 1
    # warm-up calls are not counted
    assert fn.call_count >= result.iterations
    assert result.elapsed_s >= 0.05


def test_measure_ips_measures_slow_function_once():
    """Test a call longer than the window is still measured."""
    fn = MagicMock()
    clock = MagicMock()
    # warm-up deadline, warm-up check, start, after the first call
    clock.perf_counter.side_effect = [0.0, 0.0, 0.0, 10.0]
    with patch("memobench.benchmark.ips.time", clock):
        result = measure_ips("slow", fn, warmup_s=0, time_s=1.0)
    assert fn.call_count == 1
    assert result.iterations == 1
    assert result.elapsed_s == 10.0


def test_compare_ranks_fastest_first():
    """Test results are ranked with their slowdown."""
    slow = BenchResult(label="slow", iterations=10, elapsed_s=1.0)
    fast = BenchResult(label="fast", iterations=40, elapsed_s=1.0)
    ranked = compare([slow, fast])
    assert [r.label for r, _ in ranked] == ["fast", "slow"]
    assert [factor for _, factor in ranked] == [1.0, 4.0]
    assert compare([]) == []


def test_print_comparison(capsys):
    """Test the comparison output."""
    print_comparison(
        [
            BenchResult(label="naive", iterations=10, elapsed_s=1.0),
            BenchResult(label="memoized", iterations=20, elapsed_s=1.0),
        ]
    )
    out = capsys.readouterr().out
    assert "memoized" in out
    assert "2.00x slower" in out
    assert out.index("memoized") < out.index("naive")


def test_main_runs_both_groups(capsys):
    """Test the driver runs the protocol and DNS groups."""
    config = BenchConfig(warmup_s=0, time_s=0.01, fib_version=10, payload_repeat=2)
    with patch("memobench.resolver.socket.getaddrinfo", return_value=[]):
        run_transformations.main(config)
    out = capsys.readouterr().out
    assert "memoized protocol" in out
    assert "naive protocol" in out
    assert "concurrent DNS lookup batch" in out
    assert "naive DNS lookup batch" in out


def test_dns_group_is_skipped_on_failure(capsys, caplog):
    """Test a lookup failure skips the DNS group."""
    config = BenchConfig(warmup_s=0, time_s=0.01, hostnames=["unknown.invalid"])
    failure = ResolutionFailure("unknown.invalid", OSError("no such host"))
    with patch.object(run_transformations.ConcurrentResolver, "resolve", side_effect=failure):
        with caplog.at_level(logging.ERROR):
            run_transformations.benchmark_dns(config)
    assert "DNS lookup batch" not in capsys.readouterr().out
    assert "unknown.invalid" in caplog.text


def test_dns_group_is_skipped_for_invalid_hostname(capsys, caplog):
    """Test a hostname the resolver cannot encode does not stop the driver."""
    config = BenchConfig(warmup_s=0, time_s=0.01, hostnames=["a" * 64 + ".com"])
    with caplog.at_level(logging.ERROR):
        run_transformations.benchmark_dns(config)
    assert "DNS lookup batch" not in capsys.readouterr().out
    assert "Skipping DNS benchmark" in caplog.text
