"""Profile bot-likelihood scoring.

This package provides:
- heuristic: rule-based scoring of scraped social-media profiles
- config: category weights for the aggregator
- cli: the ``bot-score`` command
"""

from bot_scoring.config import ScoringConfig, get_config
from bot_scoring.errors import ErrorCode, ProfileInputError
from bot_scoring.heuristic import AnalysisResult, CategoryResult, ProfileInput, analyze

__all__ = [
    "AnalysisResult",
    "CategoryResult",
    "ErrorCode",
    "ProfileInput",
    "ProfileInputError",
    "ScoringConfig",
    "analyze",
    "get_config",
]
