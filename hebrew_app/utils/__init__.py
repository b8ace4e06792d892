"""Utility helpers package."""

from hebrew_app.utils.cache import CacheBackend, build_cache_key, cache_backend

__all__ = ["CacheBackend", "build_cache_key", "cache_backend"]
