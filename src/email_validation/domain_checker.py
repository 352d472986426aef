import socket
from collections.abc import Callable

from loguru import logger

from email_validation.cache import ExpiringCache
from email_validation.config import settings


def resolve_host(domain: str) -> bool:
    """Check whether a domain resolves through the local resolver."""
    try:
        socket.getaddrinfo(domain, None)
    except (socket.gaierror, UnicodeError, OSError):
        return False
    return True


class DomainChecker:
    """Memoized domain lookup backed by an expiring cache."""

    def __init__(
        self,
        cache: ExpiringCache | None = None,
        ttl: float | None = None,
        resolver: Callable[[str], bool] | None = None,
    ) -> None:
        """
        Initialize the domain checker.

        Args:
            cache: Cache shared between callers. If None, creates a private one.
            ttl: Seconds a lookup result is reused. Defaults to settings.
            resolver: Performs the actual lookup. Defaults to ``resolve_host``.
        """
        self._cache = cache if cache is not None else ExpiringCache()
        self._ttl = ttl or settings.domain_cache_ttl
        self._resolver = resolver or resolve_host

    def has_mx_record(self, domain: str) -> bool:
        """
        Check whether a domain can receive mail, using the cache first.

        Args:
            domain: Domain part of an address.

        Returns:
            True if the domain resolved on the last (cached) lookup.
        """
        domain = domain.strip().lower()

        cached, found = self._cache.get(domain)
        if found:
            return cached

        result = self._resolver(domain)
        self._cache.set(domain, result, self._ttl)
        logger.debug(f"Domain lookup for {domain}: {result}")
        return result

    @property
    def cache(self) -> ExpiringCache:
        """Get the underlying cache."""
        return self._cache
