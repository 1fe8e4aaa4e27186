"""Reduce a moderation verdict to the parts worth showing an operator."""

from __future__ import annotations

from modcheck.moderation.models import AnalysisReport, ModerationCategory, ModerationResult

SCORE_THRESHOLD = 0.1
TOP_N = 3


def flagged_categories(result: ModerationResult) -> list[ModerationCategory]:
    """Categories marked true, in canonical order."""
    return [c for c in ModerationCategory if result.categories.get(c)]


def top_scores(
    result: ModerationResult,
    threshold: float = SCORE_THRESHOLD,
    limit: int = TOP_N,
) -> list[tuple[ModerationCategory, float]]:
    """Highest scores strictly above *threshold*, best first, at most *limit*.

    ``sorted`` is stable, so equal scores keep canonical category order.
    """
    above = [
        (c, result.category_scores[c])
        for c in ModerationCategory
        if result.category_scores.get(c, 0.0) > threshold
    ]
    return sorted(above, key=lambda item: item[1], reverse=True)[: max(limit, 0)]


def analyze(
    result: ModerationResult,
    threshold: float = SCORE_THRESHOLD,
    limit: int = TOP_N,
) -> AnalysisReport:
    """Summarize *result* without modifying it."""
    return AnalysisReport(
        flagged=result.flagged,
        flagged_categories=flagged_categories(result),
        top_scores=top_scores(result, threshold=threshold, limit=limit),
    )
