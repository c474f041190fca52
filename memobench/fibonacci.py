import logging

from memobench.errors import InvalidArgument

# Largest recursion depth of a memoized call, far below the default limit
WARMUP_STEP = 256


def _check_index(n: int) -> None:
    # bool is an int subclass but makes no sense as an index
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidArgument(f"Fibonacci index must be an integer, got {n!r}")
    if n < 0:
        raise InvalidArgument(f"Fibonacci index must be non-negative, got {n}")


class MemoCache:
    """Values already computed by one evaluator, keyed by index"""

    def __init__(self):
        self.values: dict[int, int] = dict()
        # Number of lookups served from / missing in the cache
        self.hits: int = 0
        self.misses: int = 0

    def get(self, n: int) -> int | None:
        value = self.values.get(n)
        if value is None:
            self.misses += 1
        else:
            self.hits += 1
        return value

    def store(self, n: int, value: int) -> None:
        self.values[n] = value

    def __contains__(self, n: object) -> bool:
        return n in self.values

    def __len__(self) -> int:
        return len(self.values)


class NaiveFibonacci:
    """Recompute every term, no memory of past calls"""

    def fib(self, n: int) -> int:
        _check_index(n)
        return self._fib(n)

    def _fib(self, n: int) -> int:
        if n < 2:
            return n
        return self._fib(n - 1) + self._fib(n - 2)


class MemoizedFibonacci:
    """Remember every computed term in a cache owned by the instance.

    The cache is not thread safe: use one instance per thread, and a fresh
    instance whenever a cold cache is needed.
    """

    def __init__(self, cache: MemoCache | None = None):
        self.cache: MemoCache = cache if cache is not None else MemoCache()

    def fib(self, n: int) -> int:
        _check_index(n)
        # fill the cache bottom up, each step only recurses down to the last one
        for k in range(WARMUP_STEP, n, WARMUP_STEP):
            if k not in self.cache:
                self._fib(k)
        return self._fib(n)

    def _fib(self, n: int) -> int:
        if n < 2:
            return n
        value = self.cache.get(n)
        if value is None:
            logging.debug(f"cache miss for fib({n})")
            value = self._fib(n - 1) + self._fib(n - 2)
            self.cache.store(n, value)
        return value
