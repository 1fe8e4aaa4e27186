"""Moderation verdict models and analysis."""

from modcheck.moderation.analyzer import SCORE_THRESHOLD, TOP_N, analyze
from modcheck.moderation.models import (
    AnalysisReport,
    ModerationCategory,
    ModerationResponse,
    ModerationResult,
)

__all__ = [
    "SCORE_THRESHOLD",
    "TOP_N",
    "AnalysisReport",
    "ModerationCategory",
    "ModerationResponse",
    "ModerationResult",
    "analyze",
]
