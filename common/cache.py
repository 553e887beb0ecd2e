"""
Single-snapshot cache in front of the upstream models listing.

A fresh snapshot is served as-is. Once it expires the next call refreshes it;
if that refresh fails, the expired snapshot is served instead of the error.
Only a first-ever failure reaches the caller.
"""

import time
from dataclasses import dataclass
from typing import Any, Callable, Optional

from common.errors import UpstreamError, UpstreamMalformedError
from common.logger import log_error, log_warning

DEFAULT_TTL_SECONDS = 3600  # 1 hour
FALLBACK_REASON = "API error fallback"


@dataclass
class CacheEntry:
    payload: Optional[dict] = None
    fetched_at: float = 0.0
    ttl_seconds: float = DEFAULT_TTL_SECONDS

    def is_fresh(self, now: float) -> bool:
        return self.payload is not None and now - self.fetched_at < self.ttl_seconds


@dataclass
class FetchResult:
    payload: dict
    from_cache: bool
    cache_reason: Optional[str] = None

    def to_body(self) -> dict:
        body = dict(self.payload)
        if self.from_cache:
            body["fromCache"] = True
        if self.cache_reason:
            body["cacheReason"] = self.cache_reason
        return body


class CachedFetcher:
    """Owns one CacheEntry. Not thread-safe; concurrent refreshes are not merged."""

    def __init__(
        self,
        fetch: Callable[[], Any],
        transform: Callable[[Any, float], dict],
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        clock: Callable[[], float] = time.time,
    ):
        self._fetch = fetch
        self._transform = transform
        self._clock = clock
        self.entry = CacheEntry(ttl_seconds=ttl_seconds)

    def _refresh(self, now: float) -> dict:
        raw = self._fetch()
        try:
            return self._transform(raw, now)
        except (ValueError, OverflowError, OSError) as e:
            raise UpstreamMalformedError(f"Could not normalize response: {e}") from e

    def get_data(self) -> FetchResult:
        now = self._clock()
        if self.entry.is_fresh(now):
            return FetchResult(self.entry.payload, from_cache=True)

        try:
            payload = self._refresh(now)
        except UpstreamError as e:
            if self.entry.payload is None:
                log_error("models_fetch_failed", error_code=e.error_code, reason=str(e))
                raise
            log_warning(
                "models_stale_fallback",
                error_code=e.error_code,
                reason=str(e),
                age_seconds=round(now - self.entry.fetched_at, 1),
            )
            return FetchResult(
                self.entry.payload, from_cache=True, cache_reason=FALLBACK_REASON
            )

        self.entry = CacheEntry(
            payload=payload, fetched_at=now, ttl_seconds=self.entry.ttl_seconds
        )
        return FetchResult(payload, from_cache=False)
