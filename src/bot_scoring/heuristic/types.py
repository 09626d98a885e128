"""Profile input and analysis result models."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Literal

from bot_utils import MutableModel, StrictModel
from pydantic import Field, field_validator

ANALYSIS_COMPLETE = "Analysis complete"


class Comment(MutableModel):
    """Single scraped comment. Only its text is scored."""

    text: str | None = None

    @field_validator("text", mode="before")
    @classmethod
    def drop_non_string_text(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class ProfileInput(MutableModel):
    """Scraped profile record as received from the scraper.

    Malformed account ages and comment lists degrade to "unknown" instead of
    failing. Description and karma values of the wrong type still raise
    ``ValidationError``.
    """

    account_age: str | None = Field(default=None, alias="accountAge")
    recent_comments: list[Comment] | None = Field(default=None, alias="recentComments")
    description: str | None = None
    post_karma: float | None = Field(default=None, alias="postKarma")
    comment_karma: float | None = Field(default=None, alias="commentKarma")

    @field_validator("account_age", mode="before")
    @classmethod
    def drop_non_string_age(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None

    @field_validator("recent_comments", mode="before")
    @classmethod
    def coerce_comments(cls, value: Any) -> list[Any] | None:
        if not isinstance(value, (list, tuple)):
            return None
        return [item if isinstance(item, (Mapping, Comment)) else {} for item in value]


class NormalizedSignals(StrictModel):
    """Secondary signals derived from a profile."""

    account_age_years: float | None
    posting_frequency: int = Field(ge=0)
    karma_ratio: float | None

    @property
    def is_new_account(self) -> bool:
        """Account is known to be younger than one year."""
        return self.account_age_years is not None and self.account_age_years < 1


class CategoryResult(StrictModel):
    """Score and explanation for one analysis dimension."""

    score: int = Field(ge=0, le=100)
    description: str


class AdditionalChecksBreakdown(StrictModel):
    """Additional-checks category with its two raw sub-signals.

    The aggregator reads the sub-signals for the override rule, so they are
    kept alongside the blended category result.
    """

    duplicate_ratio: CategoryResult
    karma_discrepancy: CategoryResult
    combined: CategoryResult


class AnalysisBreakdown(StrictModel):
    """Per-category results. Always holds all four categories."""

    content_analysis: CategoryResult
    engagement_with_users: CategoryResult
    profile_metadata: CategoryResult
    additional_checks: CategoryResult


class AnalysisResult(StrictModel):
    """Final bot-likelihood verdict for a profile."""

    bot_likelihood: int = Field(ge=0, le=100)
    status: Literal["Analysis complete"] = ANALYSIS_COMPLETE
    override_triggered: bool = Field(alias="overrideTriggered")
    override_explanation: str = Field(default="", alias="overrideExplanation")
    analysis: AnalysisBreakdown

    def to_payload(self) -> dict[str, Any]:
        """JSON-ready dict using the wire field names."""
        return self.model_dump(mode="json", by_alias=True)
