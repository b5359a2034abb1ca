from __future__ import annotations

from typing import Iterable

from .models import GapReport, ScoredCandidate
from .scoring import round_half_up


def gap_analysis(candidates: Iterable[ScoredCandidate]) -> list[GapReport]:
    """Report what is missing for each candidate that cannot be made as-is."""
    reports: list[GapReport] = []
    for candidate in candidates:
        missing = candidate.missing_ingredients
        if not missing:
            continue
        total = len(candidate.recipe.distinct_ingredients())
        reports.append(GapReport(
            recipe_id=candidate.recipe.id,
            recipe_name=candidate.recipe.name,
            missing=list(missing),
            missing_count=len(missing),
            missing_percentage=round_half_up(100 * len(missing) / total) if total else 0,
        ))
    return reports
