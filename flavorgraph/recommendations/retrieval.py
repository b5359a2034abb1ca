from __future__ import annotations

import time

from ..analytics.store import record_event
from ..engine.gaps import gap_analysis
from .data_store import get_context
from .models import SearchRequest, SearchResponse


def _record_search(request: SearchRequest, response: SearchResponse, start_time: float, cache_hit: bool) -> None:
    elapsed_ms = round((time.time() - start_time) * 1000, 1)
    record_event("search", {
        "ingredients": request.ingredients,
        "include_substitutions": request.include_substitutions,
        "results_returned": response.total_results,
        "catalog_version": response.catalog_version,
        "response_time_ms": elapsed_ms,
        "cache_hit": cache_hit,
    })


def search_recipes(request: SearchRequest) -> SearchResponse:
    start_time = time.time()
    context = get_context()

    # --- Cache check ---
    request_dict = {
        "ingredients": sorted(request.ingredients),
        "include_substitutions": request.include_substitutions,
        "_catalog_version": context.version,
    }
    cached = context.cache.get(request_dict)
    if cached is not None:
        _record_search(request, cached, start_time, cache_hit=True)
        return cached

    # --- Engine ---
    results = context.engine.recommend(
        request.ingredients,
        include_substitutions=request.include_substitutions,
    )

    response = SearchResponse(
        results=results,
        gaps=gap_analysis(results),
        total_results=len(results),
        catalog_version=context.version,
    )

    context.cache.set(request_dict, response)
    _record_search(request, response, start_time, cache_hit=False)
    return response
