from __future__ import annotations

import hashlib
import json
import threading
import time
from typing import Any

from .config import DEFAULT_CACHE_CONFIG


def _make_key(request_dict: dict) -> str:
    normalized = json.dumps(request_dict, sort_keys=True, default=str)
    return hashlib.sha256(normalized.encode()).hexdigest()[:16]


class QueryCache:
    """
    TTL cache for search responses, scoped to one catalog version.

    Expired entries are pruned on every write, and once `max_entries` is
    reached the oldest entry is evicted. Safe to share between the threads
    FastAPI runs sync endpoints on.
    """

    def __init__(
        self,
        ttl_seconds: int = DEFAULT_CACHE_CONFIG.ttl_seconds,
        max_entries: int = DEFAULT_CACHE_CONFIG.max_entries,
    ) -> None:
        self.ttl_seconds = ttl_seconds
        self.max_entries = max_entries
        self._entries: dict[str, dict[str, Any]] = {}
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0

    def _expired(self, entry: dict[str, Any], now: float) -> bool:
        return now - entry["created_at"] >= self.ttl_seconds

    def get(self, request_dict: dict) -> Any | None:
        key = _make_key(request_dict)
        with self._lock:
            entry = self._entries.get(key)
            if entry and not self._expired(entry, time.time()):
                self._hits += 1
                return entry["value"]
            if entry:
                self._entries.pop(key, None)
            self._misses += 1
            return None

    def set(self, request_dict: dict, value: Any) -> None:
        key = _make_key(request_dict)
        now = time.time()
        with self._lock:
            for stale in [k for k, e in self._entries.items() if self._expired(e, now)]:
                del self._entries[stale]
            # Re-insert so a refreshed key counts as newest
            self._entries.pop(key, None)
            while self._entries and len(self._entries) >= self.max_entries:
                del self._entries[next(iter(self._entries))]
            self._entries[key] = {"value": value, "created_at": now}

    def stats(self) -> dict:
        with self._lock:
            total = self._hits + self._misses
            return {
                "size": len(self._entries),
                "hits": self._hits,
                "misses": self._misses,
                "hit_rate": round(self._hits / total * 100, 1) if total > 0 else 0.0,
            }

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
