from __future__ import annotations

import threading
from unittest.mock import patch

from fastapi.testclient import TestClient

from flavorgraph.app import app
from flavorgraph.recommendations.cache import QueryCache
from flavorgraph.recommendations.data_store import get_context

client = TestClient(app)

CARBONARA = ["pasta", "eggs", "bacon", "parmesan", "black pepper"]


def test_cache_miss_then_hit():
    cache = QueryCache()
    request = {"ingredients": ["beef"], "_catalog_version": 1}
    assert cache.get(request) is None
    cache.set(request, "response")
    assert cache.get(request) == "response"
    assert cache.stats() == {"size": 1, "hits": 1, "misses": 1, "hit_rate": 50.0}


def test_cache_entries_expire():
    cache = QueryCache(ttl_seconds=0)
    request = {"ingredients": ["beef"]}
    cache.set(request, "response")
    assert cache.get(request) is None
    assert cache.stats()["size"] == 0


def test_cache_key_ignores_dict_order():
    cache = QueryCache()
    cache.set({"a": 1, "b": 2}, "response")
    assert cache.get({"b": 2, "a": 1}) == "response"


def test_clear_resets_stats():
    cache = QueryCache()
    cache.get({"x": 1})
    cache.clear()
    assert cache.stats() == {"size": 0, "hits": 0, "misses": 0, "hit_rate": 0.0}


def test_search_served_from_cache_on_repeat():
    get_context().cache.clear()
    resp1 = client.post("/recipes/search", json={"ingredients": CARBONARA})
    assert resp1.status_code == 200
    assert get_context().cache.stats()["misses"] >= 1

    # Same pantry in a different order and case
    reordered = [i.upper() for i in reversed(CARBONARA)]
    resp2 = client.post("/recipes/search", json={"ingredients": reordered})
    assert resp2.status_code == 200
    assert resp2.json() == resp1.json()
    assert get_context().cache.stats()["hits"] >= 1


def test_cache_stats_endpoint():
    get_context().cache.clear()
    client.post("/recipes/search", json={"ingredients": ["rice", "eggs"]})
    client.post("/recipes/search", json={"ingredients": ["rice", "eggs"]})
    resp = client.get("/cache/stats")
    assert resp.status_code == 200
    body = resp.json()
    assert body["hits"] >= 1
    assert "hit_rate" in body


def test_expired_entries_are_pruned_on_write():
    cache = QueryCache(ttl_seconds=0)
    for n in range(100):
        cache.set({"ingredients": [f"item{n}"]}, n)
    assert cache.stats()["size"] == 1


def test_oldest_entry_evicted_at_capacity():
    cache = QueryCache(max_entries=3)
    for n in range(5):
        cache.set({"n": n}, n)
    assert cache.stats()["size"] == 3
    assert cache.get({"n": 0}) is None
    assert cache.get({"n": 1}) is None
    assert cache.get({"n": 4}) == 4


def test_rewriting_a_key_does_not_evict_others():
    cache = QueryCache(max_entries=2)
    cache.set({"n": 1}, "one")
    cache.set({"n": 2}, "two")
    cache.set({"n": 2}, "two again")
    assert cache.get({"n": 1}) == "one"
    assert cache.get({"n": 2}) == "two again"


def test_expired_key_already_removed_does_not_raise():
    cache = QueryCache(ttl_seconds=0)
    request = {"ingredients": ["beef"]}
    cache.set(request, "response")
    # Another thread pruned the entry between lookup and removal
    with patch.object(cache, "_expired", side_effect=lambda entry, now: cache._entries.clear() or True):
        assert cache.get(request) is None
    assert cache.stats()["misses"] == 1


def test_concurrent_lookups_of_expired_key():
    cache = QueryCache(ttl_seconds=0)
    request = {"ingredients": ["beef"]}
    errors = []

    def lookup():
        try:
            for _ in range(200):
                cache.set(request, "response")
                cache.get(request)
        except Exception as exc:
            errors.append(exc)

    threads = [threading.Thread(target=lookup) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert errors == []
