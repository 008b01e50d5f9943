"""Cache store capability consumed by the forecast service."""

from collections.abc import Callable
from typing import Protocol, TypeVar

T = TypeVar("T")


class CacheStore(Protocol):
    """Keyed store with get-or-compute semantics and TTL expiry.

    ``get_or_compute`` returns the live value under ``key`` or calls
    ``compute`` and stores its result for ``ttl_seconds``. Errors raised by
    ``compute`` propagate unchanged and nothing is stored. Under concurrent
    misses an implementation either runs ``compute`` once and shares the
    result, or lets them race with the last write winning.
    """

    def get_or_compute(self, key: str, compute: Callable[[], T], ttl_seconds: int) -> T: ...

    def delete(self, key: str) -> bool: ...
