from __future__ import annotations

from collections import Counter
from typing import Any


def compute_analytics(events: list[dict[str, Any]]) -> dict[str, Any]:
    searches = [e for e in events if e["type"] == "search"]
    total = len(searches)

    # Average response time
    times = [s["response_time_ms"] for s in searches if "response_time_ms" in s]
    avg_time = round(sum(times) / len(times), 1) if times else 0.0

    # Top requested ingredients
    ingredient_counter: Counter[str] = Counter()
    for s in searches:
        for name in s.get("ingredients", []) or []:
            ingredient_counter[name] += 1
    top_ingredients = [{"name": n, "count": c} for n, c in ingredient_counter.most_common(10)]

    # Result volume
    returned = [s.get("results_returned", 0) for s in searches]
    avg_results = round(sum(returned) / total, 1) if total else 0.0
    empty = sum(1 for r in returned if r == 0)

    # Cache stats
    cache_hits = sum(1 for s in searches if s.get("cache_hit"))
    cache_misses = total - cache_hits

    return {
        "total_searches": total,
        "avg_response_time_ms": avg_time,
        "top_ingredients": top_ingredients,
        "avg_results_per_search": avg_results,
        "empty_result_rate": round(empty / total * 100, 1) if total else 0.0,
        "cache_stats": {
            "hits": cache_hits,
            "misses": cache_misses,
            "hit_rate": round(cache_hits / total * 100, 1) if total else 0.0,
        },
    }
