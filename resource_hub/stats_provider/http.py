"""Caching HTTP transport shared by the marketplace stats providers.

Purpose:
- Give every provider a synchronous ``httpx.Client`` with a common timeout
  and User-Agent.
- Reuse successful responses for ``ttl`` seconds so repeated stats requests
  for the same project do not hit marketplace rate limits.

Only 2xx responses are cached; failures are always re-fetched.
"""

from __future__ import annotations

import threading
import time
from typing import Dict, Optional, Tuple

import httpx

from resource_hub.core.logging_config import get_logger

logger = get_logger(__name__)


class ResponseCache:
    """Thread-safe in-process cache of HTTP responses keyed by URL.

    Attributes:
        ttl: Time-to-live for cached responses in seconds (0 disables caching)
        max_size: Maximum number of cached responses (0 = unlimited)
    """

    def __init__(self, ttl: float, max_size: int = 512) -> None:
        self._entries: Dict[str, Tuple[float, httpx.Response]] = {}
        self._ttl = ttl
        self._max_size = max_size
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[httpx.Response]:
        """Get a response if it is cached and not expired."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            expires_at, response = entry
            if time.monotonic() >= expires_at:
                del self._entries[key]
                return None
            return response

    def set(self, key: str, response: httpx.Response) -> None:
        """Store a response, evicting the oldest entry when full."""
        if self._ttl <= 0:
            return
        with self._lock:
            if self._max_size > 0 and key not in self._entries and len(self._entries) >= self._max_size:
                oldest_key = next(iter(self._entries))
                del self._entries[oldest_key]
            self._entries[key] = (time.monotonic() + self._ttl, response)

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CachingHttpClient:
    """
    Thin caching wrapper around ``httpx.Client`` for marketplace APIs.

    Responsibilities:
    - get: GET a URL, served from cache while a previous 2xx response is fresh

    Transport errors propagate as ``httpx.HTTPError``; turning them into an
    empty result is the caller's job.
    """

    def __init__(
        self,
        name: str,
        *,
        ttl: float = 3600.0,
        timeout: float = 10.0,
        user_agent: Optional[str] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.name = name
        headers = {"Accept": "application/json"}
        if user_agent:
            headers["User-Agent"] = user_agent
        self._client = client or httpx.Client(timeout=timeout, follow_redirects=True, headers=headers)
        self._cache = ResponseCache(ttl)

    @property
    def cache(self) -> ResponseCache:
        return self._cache

    def get(self, url: str) -> httpx.Response:
        cached = self._cache.get(url)
        if cached is not None:
            logger.debug("CachingHttpClient[%s].get: cache hit %s", self.name, url)
            return cached
        logger.debug("CachingHttpClient[%s].get: GET %s", self.name, url)
        response = self._client.get(url)
        if response.is_success:
            self._cache.set(url, response)
        return response

    def close(self) -> None:
        self._client.close()
