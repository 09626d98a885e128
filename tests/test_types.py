"""Tests for profile and result models."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any

import pytest
from pydantic import ValidationError

from bot_scoring.heuristic import AnalysisResult, CategoryResult, Comment, ProfileInput, analyze


class TestProfileInput:
    """Tests for ProfileInput model."""

    def test_camel_case_aliases(self, sample_profile: dict[str, Any]) -> None:
        """Test scraped camelCase keys populate the fields."""
        profile = ProfileInput.model_validate(sample_profile)

        assert profile.account_age == "2023-01-01"
        assert profile.recent_comments == [Comment(text="hi")]
        assert profile.post_karma == 1000
        assert profile.comment_karma == 5

    def test_field_names_accepted(self) -> None:
        """Test snake_case names work for programmatic construction."""
        profile = ProfileInput(account_age="2020-05-05", post_karma=10)

        assert profile.account_age == "2020-05-05"
        assert profile.post_karma == 10

    def test_unknown_fields_ignored(self) -> None:
        """Test extra scraped fields are dropped."""
        profile = ProfileInput.model_validate({"username": "someone", "avatarUrl": "https://x"})

        assert profile == ProfileInput()

    def test_non_string_age_dropped(self) -> None:
        """Test a numeric account age is treated as missing."""
        assert ProfileInput.model_validate({"accountAge": 1700000000}).account_age is None

    def test_non_list_comments_dropped(self) -> None:
        """Test a comment field that is not a list is treated as missing."""
        assert ProfileInput.model_validate({"recentComments": {"text": "hi"}}).recent_comments is None

    def test_malformed_comment_entries(self) -> None:
        """Test comment entries degrade to empty comments."""
        profile = ProfileInput.model_validate({"recentComments": ["hi", None, {"text": 42}, {"text": "ok"}]})

        assert profile.recent_comments == [Comment(), Comment(), Comment(), Comment(text="ok")]

    def test_invalid_description_raises(self) -> None:
        """Test a non-string description is rejected."""
        with pytest.raises(ValidationError):
            ProfileInput.model_validate({"description": 12})


class TestCategoryResult:
    """Tests for CategoryResult model."""

    @pytest.mark.parametrize("score", [-1, 101])
    def test_score_bounds(self, score: int) -> None:
        """Test scores outside 0-100 are rejected."""
        with pytest.raises(ValidationError):
            CategoryResult(score=score, description="out of range")

    def test_frozen(self) -> None:
        """Test results cannot be modified after creation."""
        result = CategoryResult(score=20, description="fine")

        with pytest.raises(ValidationError):
            result.score = 90  # type: ignore[misc]


class TestAnalysisResult:
    """Tests for AnalysisResult serialization."""

    def test_payload_wire_keys(self, sample_profile: dict[str, Any], fixed_now: datetime) -> None:
        """Test the payload uses the wire field names."""
        payload = analyze(sample_profile, now=fixed_now).to_payload()

        assert set(payload) == {
            "bot_likelihood",
            "status",
            "overrideTriggered",
            "overrideExplanation",
            "analysis",
        }
        assert payload["status"] == "Analysis complete"
        assert payload["overrideTriggered"] is True
        assert payload["analysis"]["additional_checks"] == {
            "score": 60,
            "description": (
                "Recent comments are sufficiently varied. Extremely low comment karma relative to post karma."
            ),
        }

    def test_payload_round_trip(self, established_profile: dict[str, Any], fixed_now: datetime) -> None:
        """Test a payload validates back into the same result."""
        result = analyze(established_profile, now=fixed_now)

        assert AnalysisResult.model_validate_json(json.dumps(result.to_payload())) == result
