"""
Concurrency-safe set of discovered resolver addresses.
"""

from typing import Iterable

from .read_write_lock import ReadWriteLock


class AddressCache:
    """
    Unique set of bare host strings in insertion order.

    Writes take the exclusive lock, reads take the shared lock, and
    neither is held longer than the set mutation or the snapshot copy.
    Callers never see the underlying set.

    Usage:
        cache = AddressCache()
        cache.add("127.0.0.1")
        cache.get()  # ["127.0.0.1"]
    """

    def __init__(self) -> None:
        self._addrs: dict[str, None] = {}
        self._lock = ReadWriteLock()

    def add(self, host: str) -> None:
        with self._lock.write():
            self._addrs.setdefault(host, None)

    def update(self, hosts: Iterable[str]) -> None:
        """Add every host under a single write, so readers see all or none."""
        hosts = list(hosts)

        with self._lock.write():
            for host in hosts:
                self._addrs.setdefault(host, None)

    def get(self) -> list[str]:
        with self._lock.read():
            return list(self._addrs)

    def __contains__(self, host: object) -> bool:
        with self._lock.read():
            return host in self._addrs

    def __len__(self) -> int:
        with self._lock.read():
            return len(self._addrs)
