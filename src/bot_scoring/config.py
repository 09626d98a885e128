"""Scoring weights and aggregation switches."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ScoringConfig(BaseModel):
    """Category weights used by the aggregator."""

    content_weight: float = Field(default=1.0, gt=0, description="Weight of content analysis")
    engagement_weight: float = Field(default=1.0, gt=0, description="Weight of engagement analysis")
    metadata_weight: float = Field(default=1.0, gt=0, description="Weight of profile metadata")
    new_account_metadata_weight: float = Field(
        default=0.5,
        gt=0,
        description="Metadata weight for accounts younger than one year",
    )
    additional_checks_weight: float = Field(
        default=1.5,
        gt=0,
        description="Weight of the duplicate-ratio and karma checks",
    )

    override_enabled: bool = Field(
        default=True,
        description="Force the maximum score when a red-flag sub-check is extreme",
    )


# Global config instance (can be overridden in tests)
DEFAULT_CONFIG = ScoringConfig()


def get_config() -> ScoringConfig:
    """Get the current scoring configuration."""
    return DEFAULT_CONFIG
