"""Read-through cache for reference data (Bible text, achievement catalog).

Entries always live in process memory; when ``REDIS_URL`` is configured they
are mirrored to Redis so several workers share them. A Redis failure disables
the mirror for the rest of the process instead of failing the request.
"""

from __future__ import annotations

import hashlib
import json
import threading
import time
import uuid
from dataclasses import dataclass
from typing import Any, Callable

import redis
from loguru import logger

from hebrew_app.config import settings

BIBLE_NAMESPACE = "bible"
ACHIEVEMENT_NAMESPACE = "achievements"

# Scripture and the catalog change only when an operator reseeds them.
REFERENCE_TTL_SECONDS = 6 * 60 * 60


def _json_default(value: Any) -> Any:
    if isinstance(value, uuid.UUID):
        return str(value)
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if hasattr(value, "hex") and callable(getattr(value, "hex")):
        return value.hex()
    raise TypeError(f"Object of type {type(value)!r} is not JSON serializable")


def build_cache_key(**components: Any) -> str:
    """Return a stable short hash for keyword components."""

    payload = json.dumps(components, sort_keys=True, default=_json_default)
    return hashlib.sha1(payload.encode("utf-8")).hexdigest()


@dataclass
class _Entry:
    expires_at: float | None
    payload: str


class CacheBackend:
    """JSON cache keyed by ``namespace:key``."""

    def __init__(self, redis_url: str | None = None) -> None:
        self._lock = threading.Lock()
        self._local: dict[str, _Entry] = {}
        self._redis: redis.Redis | None = None
        if redis_url:
            self._redis = redis.Redis.from_url(redis_url, decode_responses=True)

    @staticmethod
    def _compose(namespace: str, key: str) -> str:
        return f"{namespace}:{key}"

    def _disable_redis(self, exc: Exception) -> None:
        logger.warning(f"Redis cache unavailable, using in-process cache only: {exc}")
        self._redis = None

    def get(self, namespace: str, key: str) -> Any | None:
        name = self._compose(namespace, key)
        if self._redis is not None:
            try:
                value = self._redis.get(name)
            except redis.RedisError as exc:
                self._disable_redis(exc)
            else:
                if value is not None:
                    return json.loads(value)
        with self._lock:
            entry = self._local.get(name)
            if entry is None:
                return None
            if entry.expires_at is not None and entry.expires_at < time.time():
                del self._local[name]
                return None
            return json.loads(entry.payload)

    def set(self, namespace: str, key: str, value: Any, ttl_seconds: int = REFERENCE_TTL_SECONDS) -> None:
        name = self._compose(namespace, key)
        payload = json.dumps(value, default=_json_default)
        if self._redis is not None:
            try:
                self._redis.set(name, payload, ex=ttl_seconds or None)
            except redis.RedisError as exc:
                self._disable_redis(exc)
        with self._lock:
            expires_at = time.time() + ttl_seconds if ttl_seconds else None
            self._local[name] = _Entry(expires_at=expires_at, payload=payload)

    def get_or_set(
        self,
        namespace: str,
        key: str,
        loader: Callable[[], Any],
        ttl_seconds: int = REFERENCE_TTL_SECONDS,
    ) -> Any:
        """Return the cached value or compute, store and return it.

        ``None`` results are not cached so a miss is retried next time.
        """

        cached = self.get(namespace, key)
        if cached is not None:
            return cached
        value = loader()
        if value is not None:
            self.set(namespace, key, value, ttl_seconds)
        return value

    def invalidate(self, namespace: str, *, key: str | None = None) -> None:
        """Drop one key, or the whole namespace when ``key`` is omitted."""

        pattern = self._compose(namespace, key) if key is not None else f"{namespace}:"
        if self._redis is not None:
            try:
                if key is not None:
                    self._redis.delete(pattern)
                else:
                    for cache_key in self._redis.scan_iter(f"{pattern}*"):
                        self._redis.delete(cache_key)
            except redis.RedisError as exc:
                self._disable_redis(exc)
        with self._lock:
            if key is not None:
                self._local.pop(pattern, None)
                return
            for cache_key in [k for k in self._local if k.startswith(pattern)]:
                del self._local[cache_key]

    def clear(self) -> None:
        """Reset the in-process cache; used between tests."""

        with self._lock:
            self._local.clear()


cache_backend = CacheBackend(str(settings.REDIS_URL) if settings.REDIS_URL else None)


__all__ = [
    "ACHIEVEMENT_NAMESPACE",
    "BIBLE_NAMESPACE",
    "CacheBackend",
    "build_cache_key",
    "cache_backend",
]
