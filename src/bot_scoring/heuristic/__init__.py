"""Heuristic bot-likelihood scoring.

Scores a scraped profile on engagement, content, metadata and two red-flag
checks (duplicate comments, karma discrepancy), then blends them into a
0-100 likelihood.
"""

from bot_scoring.heuristic.normalize import normalize_profile, parse_account_date
from bot_scoring.heuristic.scorer import analyze
from bot_scoring.heuristic.types import (
    AnalysisBreakdown,
    AnalysisResult,
    CategoryResult,
    Comment,
    NormalizedSignals,
    ProfileInput,
)

__all__ = [
    "AnalysisBreakdown",
    "AnalysisResult",
    "CategoryResult",
    "Comment",
    "NormalizedSignals",
    "ProfileInput",
    "analyze",
    "normalize_profile",
    "parse_account_date",
]
