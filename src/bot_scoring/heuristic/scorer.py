"""Bot likelihood aggregation.

Combines the four category scores into a weighted verdict and applies the
hard override for extreme duplicate or karma signals.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from bot_scoring.config import get_config
from bot_scoring.heuristic.categories import (
    MAX_SCORE,
    round_half_up,
    score_additional_checks,
    score_content,
    score_engagement,
    score_metadata,
)
from bot_scoring.heuristic.normalize import normalize_profile
from bot_scoring.heuristic.types import AnalysisBreakdown, AnalysisResult, ProfileInput

if TYPE_CHECKING:
    from collections.abc import Mapping
    from datetime import datetime
    from typing import Any

    from bot_scoring.config import ScoringConfig
    from bot_scoring.heuristic.types import AdditionalChecksBreakdown, NormalizedSignals


def analyze(
    profile: ProfileInput | Mapping[str, Any],
    *,
    now: datetime | None = None,
    config: ScoringConfig | None = None,
) -> AnalysisResult:
    """Estimate how likely a scraped profile is automated.

    Args:
        profile: Profile record, either validated or as the raw JSON mapping.
        now: Reference time for account age. Defaults to the current UTC time.
        config: Category weights. Defaults to ``get_config()``.

    Returns:
        AnalysisResult with the 0-100 likelihood and all four categories.

    Raises:
        pydantic.ValidationError: If a raw mapping has fields of an unusable shape.
    """
    if not isinstance(profile, ProfileInput):
        profile = ProfileInput.model_validate(profile)
    config = config or get_config()

    signals = normalize_profile(profile, now=now)

    additional = score_additional_checks(profile.recent_comments, signals)
    breakdown = AnalysisBreakdown(
        content_analysis=score_content(profile.recent_comments),
        engagement_with_users=score_engagement(signals),
        profile_metadata=score_metadata(profile.description, signals),
        additional_checks=additional.combined,
    )

    bot_likelihood = _weighted_score(breakdown, signals, config)

    explanation = _override_explanation(additional) if config.override_enabled else ""
    if explanation:
        bot_likelihood = MAX_SCORE

    return AnalysisResult(
        bot_likelihood=bot_likelihood,
        override_triggered=bool(explanation),
        override_explanation=explanation,
        analysis=breakdown,
    )


def _weighted_score(
    breakdown: AnalysisBreakdown,
    signals: NormalizedSignals,
    config: ScoringConfig,
) -> int:
    """Weighted mean of the category scores."""
    metadata_weight = (
        config.new_account_metadata_weight if signals.is_new_account else config.metadata_weight
    )
    weighted = [
        (breakdown.content_analysis.score, config.content_weight),
        (breakdown.engagement_with_users.score, config.engagement_weight),
        (breakdown.profile_metadata.score, metadata_weight),
        (breakdown.additional_checks.score, config.additional_checks_weight),
    ]

    total = sum(score * weight for score, weight in weighted)
    total_weight = sum(weight for _, weight in weighted)

    return min(MAX_SCORE, max(0, round_half_up(total / total_weight)))


def _override_explanation(additional: AdditionalChecksBreakdown) -> str:
    """Explain which extreme sub-check forces the maximum score, if any.

    Reads the raw sub-scores, not the blended additional-checks score.
    """
    duplicate_hit = additional.duplicate_ratio.score == MAX_SCORE
    karma_hit = additional.karma_discrepancy.score == MAX_SCORE

    if duplicate_hit and karma_hit:
        return "Both duplicate comment ratio and extremely low comment karma triggered the override."
    if duplicate_hit:
        return "Duplicate comment ratio triggered the override."
    if karma_hit:
        return "Karma discrepancy triggered the override."
    return ""
