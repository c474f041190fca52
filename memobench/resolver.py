"""This module resolves batches of hostnames, one at a time or all at once"""

import logging
import socket
import threading
from typing import Any, Callable, Sequence

from memobench.errors import ResolutionFailure

AddressRecord = tuple[Any, ...]
LookupFn = Callable[[str], list[AddressRecord]]


def getaddrinfo_lookup(hostname: str) -> list[AddressRecord]:
    """Ask the host resolver (DNS, hosts file...) for the addresses of a name"""
    return socket.getaddrinfo(hostname, None)


def _lookup_one(lookup: LookupFn, hostname: str) -> list[AddressRecord]:
    try:
        return lookup(hostname)
    except (OSError, UnicodeError) as e:
        # idna encoding of an invalid name fails with UnicodeError
        logging.debug(f"lookup of {hostname} failed: {e}")
        raise ResolutionFailure(hostname, e) from e


class SequentialResolver:
    """Resolve one hostname after the other, stop at the first failure"""

    def __init__(self, lookup: LookupFn = getaddrinfo_lookup):
        self.lookup = lookup

    def resolve(self, hostnames: Sequence[str]) -> list[list[AddressRecord]]:
        return [_lookup_one(self.lookup, hostname) for hostname in hostnames]


class _LookupThread(threading.Thread):
    """Thread resolving a single hostname and keeping the outcome"""

    def __init__(self, lookup: LookupFn, hostname: str):
        super().__init__(name=f"memobench-resolve-{hostname}", daemon=True)
        self.lookup = lookup
        self.hostname = hostname
        self.result: list[AddressRecord] | None = None
        self.error: BaseException | None = None

    def run(self) -> None:
        try:
            self.result = _lookup_one(self.lookup, self.hostname)
        except BaseException as e:
            # re-raised by the resolver once every thread is joined
            self.error = e


class ConcurrentResolver:
    """Resolve every hostname in its own thread.

    All threads are started before any is joined, so the batch takes about as
    long as the slowest lookup. Every thread is joined before returning, even
    when some lookups failed; the first failure in input order is then raised.
    """

    def __init__(self, lookup: LookupFn = getaddrinfo_lookup):
        self.lookup = lookup

    def resolve(self, hostnames: Sequence[str]) -> list[list[AddressRecord]]:
        threads = [_LookupThread(self.lookup, hostname) for hostname in hostnames]
        for thread in threads:
            thread.start()
        logging.debug(f"started {len(threads)} lookup threads")
        for thread in threads:
            thread.join()

        for thread in threads:
            if thread.error is not None:
                raise thread.error
        return [thread.result for thread in threads]
