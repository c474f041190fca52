from typing import Sequence

from .errors import InvalidArgument, MemobenchError, ResolutionFailure
from .fibonacci import MemoCache, MemoizedFibonacci, NaiveFibonacci
from .protocol import (
    MemoizedProtocolTransformer,
    NaiveProtocolTransformer,
    ProtocolRecord,
    checksum,
    transform,
)
from .resolver import AddressRecord, ConcurrentResolver, SequentialResolver


def fib(n: int, memoized: bool = True) -> int:
    """Compute the n-th Fibonacci number with a fresh evaluator."""
    if memoized:
        return MemoizedFibonacci().fib(n)
    return NaiveFibonacci().fib(n)


def resolve(
    hostnames: Sequence[str], concurrent: bool = True
) -> list[list[AddressRecord]]:
    """Resolve a batch of hostnames, results in the order of the input."""
    if concurrent:
        return ConcurrentResolver().resolve(hostnames)
    return SequentialResolver().resolve(hostnames)


__all__ = [
    "ConcurrentResolver",
    "InvalidArgument",
    "MemoCache",
    "MemobenchError",
    "MemoizedFibonacci",
    "MemoizedProtocolTransformer",
    "NaiveFibonacci",
    "NaiveProtocolTransformer",
    "ProtocolRecord",
    "ResolutionFailure",
    "SequentialResolver",
    "checksum",
    "fib",
    "resolve",
    "transform",
]
