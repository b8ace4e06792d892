"""Tests for the reference data cache."""
from __future__ import annotations

import uuid

from hebrew_app.utils.cache import CacheBackend, build_cache_key


def test_get_or_set_calls_loader_once() -> None:
    cache = CacheBackend()
    calls = []

    def load() -> dict:
        calls.append(1)
        return {"books": ["Gen"]}

    assert cache.get_or_set("bible", "books", load) == {"books": ["Gen"]}
    assert cache.get_or_set("bible", "books", load) == {"books": ["Gen"]}
    assert len(calls) == 1


def test_none_is_not_cached() -> None:
    cache = CacheBackend()

    assert cache.get_or_set("bible", "missing", lambda: None) is None
    assert cache.get_or_set("bible", "missing", lambda: [1]) == [1]


def test_invalidate_key_and_namespace() -> None:
    cache = CacheBackend()
    cache.set("bible", "a", 1)
    cache.set("bible", "b", 2)
    cache.set("achievements", "catalog", [3])

    cache.invalidate("bible", key="a")
    assert cache.get("bible", "a") is None
    assert cache.get("bible", "b") == 2

    cache.invalidate("bible")
    assert cache.get("bible", "b") is None
    assert cache.get("achievements", "catalog") == [3]


def test_expired_entries_are_dropped() -> None:
    cache = CacheBackend()
    cache.set("bible", "a", 1, ttl_seconds=-1)

    assert cache.get("bible", "a") is None


def test_cache_keys_are_stable() -> None:
    user_id = uuid.uuid4()

    assert build_cache_key(book="Gen", chapter=1) == build_cache_key(chapter=1, book="Gen")
    assert build_cache_key(book="Gen", chapter=1) != build_cache_key(book="Gen", chapter=2)
    assert build_cache_key(user=user_id) == build_cache_key(user=user_id)


def test_uuid_values_are_stored_as_strings() -> None:
    cache = CacheBackend()
    user_id = uuid.uuid4()

    cache.set("achievements", "owner", {"user": user_id})

    assert cache.get("achievements", "owner") == {"user": str(user_id)}
