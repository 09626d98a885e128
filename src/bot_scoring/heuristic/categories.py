"""Category scorers.

Each scorer maps normalized signals to a 0-100 suspicion score with a short
explanation. Higher means more bot-like.
"""

from __future__ import annotations

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from bot_scoring.heuristic.types import AdditionalChecksBreakdown, CategoryResult

if TYPE_CHECKING:
    from collections.abc import Sequence

    from bot_scoring.heuristic.types import Comment, NormalizedSignals

# Engagement escalation for prolific new accounts
ESCALATION_MIN_POSTS = 5
ESCALATION_KARMA_RATIO = 0.05
ESCALATION_FACTOR = 1.5

# Content length bands (average characters per comment)
SHORT_COMMENT_LENGTH = 15
TYPICAL_COMMENT_LENGTH = 40

BRIEF_DESCRIPTION_LENGTH = 10

# Duplicate ratio bands
HIGH_REPETITION_RATIO = 0.3
SOME_REPETITION_RATIO = 0.1

# Karma discrepancy bands (comment karma / post karma)
EXTREME_KARMA_RATIO = 0.01
LOW_KARMA_RATIO = 0.05

MAX_SCORE = 100


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def score_engagement(signals: NormalizedSignals) -> CategoryResult:
    """Score account maturity, escalated for prolific low-engagement new accounts."""
    age = signals.account_age_years

    if age is None:
        return CategoryResult(score=50, description="Account age not provided.")

    if age < 1:
        score = 60
        description = "Account is very new; low engagement is common in new users."
    elif age < 3:
        score = 40
        description = "Account is moderately new; engagement appears acceptable."
    else:
        score = 20
        description = "Account is well-established; engagement is as expected."

    if (
        age < 1
        and signals.posting_frequency > ESCALATION_MIN_POSTS
        and signals.karma_ratio is not None
        and signals.karma_ratio < ESCALATION_KARMA_RATIO
    ):
        score = min(MAX_SCORE, round_half_up(score * ESCALATION_FACTOR))
        description += " Additionally, frequent posts with very low engagement were detected."

    return CategoryResult(score=score, description=description)


def score_content(comments: Sequence[Comment] | None) -> CategoryResult:
    """Score the average length of recent comments."""
    if not comments:
        return CategoryResult(
            score=70,
            description="No recent comments detected; the user might simply be a lurker.",
        )

    average_length = sum(len(comment.text or "") for comment in comments) / len(comments)

    if average_length < SHORT_COMMENT_LENGTH:
        return CategoryResult(
            score=70,
            description="Recent comments are unusually short; this can sometimes indicate automation.",
        )
    if average_length < TYPICAL_COMMENT_LENGTH:
        return CategoryResult(
            score=40,
            description="Recent comments are within a typical range for casual users.",
        )
    return CategoryResult(score=20, description="Recent comments appear detailed and natural.")


def score_metadata(description: str | None, signals: NormalizedSignals) -> CategoryResult:
    """Score the profile description."""
    if not description or not description.strip():
        if signals.is_new_account:
            return CategoryResult(
                score=60,
                description="Profile description is missing; many new users leave this blank.",
            )
        return CategoryResult(
            score=50,
            description="Profile description is missing; note that many genuine users leave this blank.",
        )

    if len(description) < BRIEF_DESCRIPTION_LENGTH:
        return CategoryResult(score=50, description="Profile description is very brief.")

    return CategoryResult(score=20, description="Profile description appears normal.")


def score_duplicate_ratio(comments: Sequence[Comment] | None) -> CategoryResult:
    """Score how often recent comments repeat each other verbatim."""
    if not comments:
        return CategoryResult(score=50, description="Insufficient comment data for duplicate analysis.")

    counts = Counter(comment.text or "" for comment in comments)
    duplicates = sum(count - 1 for count in counts.values())
    ratio = duplicates / len(comments)

    if ratio > HIGH_REPETITION_RATIO:
        return CategoryResult(score=100, description="High repetition detected in recent comments.")
    if ratio > SOME_REPETITION_RATIO:
        return CategoryResult(score=50, description="Some repetition observed in recent comments.")
    return CategoryResult(score=20, description="Recent comments are sufficiently varied.")


def score_karma_discrepancy(signals: NormalizedSignals) -> CategoryResult:
    """Score comment karma relative to post karma."""
    ratio = signals.karma_ratio

    if ratio is None:
        return CategoryResult(score=50, description="Insufficient karma data for analysis.")
    if ratio < EXTREME_KARMA_RATIO:
        return CategoryResult(score=100, description="Extremely low comment karma relative to post karma.")
    if ratio < LOW_KARMA_RATIO:
        return CategoryResult(score=80, description="Low comment karma relative to post karma.")
    return CategoryResult(score=20, description="Karma distribution appears typical.")


def score_additional_checks(
    comments: Sequence[Comment] | None,
    signals: NormalizedSignals,
) -> AdditionalChecksBreakdown:
    """Blend the duplicate-ratio and karma-discrepancy checks.

    Both raw sub-scores are returned with the blend so the aggregator can
    apply its override on them.
    """
    duplicate = score_duplicate_ratio(comments)
    karma = score_karma_discrepancy(signals)

    return AdditionalChecksBreakdown(
        duplicate_ratio=duplicate,
        karma_discrepancy=karma,
        combined=CategoryResult(
            score=round_half_up((duplicate.score + karma.score) / 2),
            description=f"{duplicate.description} {karma.description}",
        ),
    )
