"""Derive secondary signals from a raw profile."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from bot_scoring.heuristic.types import NormalizedSignals, ProfileInput

YEAR = timedelta(days=365)


def parse_account_date(value: str | None) -> datetime | None:
    """Parse an ISO-8601 date or datetime into an aware UTC datetime.

    Accepts ``2023-01-01``, ``2023-01-01T12:30:00`` and offset forms such as
    ``2023-01-01T12:30:00Z``. Naive values are taken as UTC. Anything else,
    including relative phrases like "Joined 3 years ago", yields ``None``.
    """
    if not value or not value.strip():
        return None

    try:
        parsed = datetime.fromisoformat(value.strip())
        if parsed.tzinfo is None:
            return parsed.replace(tzinfo=UTC)
        # Offsets at the edges of the calendar overflow on conversion
        return parsed.astimezone(UTC)
    except (ValueError, OverflowError):
        return None


def normalize_profile(profile: ProfileInput, *, now: datetime | None = None) -> NormalizedSignals:
    """Compute account age, posting frequency and karma ratio.

    Args:
        profile: Validated profile input.
        now: Reference time for the account age. Defaults to the current UTC
            time; pass a fixed value for reproducible scores.

    Returns:
        NormalizedSignals where unknown values are ``None``.
    """
    return NormalizedSignals(
        account_age_years=_account_age_years(profile.account_age, now),
        posting_frequency=len(profile.recent_comments or []),
        karma_ratio=_karma_ratio(profile.post_karma, profile.comment_karma),
    )


def _account_age_years(account_age: str | None, now: datetime | None) -> float | None:
    created = parse_account_date(account_age)
    if created is None:
        return None

    reference = now or datetime.now(UTC)
    if reference.tzinfo is None:
        reference = reference.replace(tzinfo=UTC)

    return (reference - created) / YEAR


def _karma_ratio(post_karma: float | None, comment_karma: float | None) -> float | None:
    """Comment karma per unit of post karma, guarded against zero division."""
    if not post_karma or comment_karma is None:
        return None
    return comment_karma / post_karma
