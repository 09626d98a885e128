"""Base Pydantic models shared by the scoring packages."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class StrictModel(BaseModel):
    """Base model for values produced by the scorer.

    Results are built internally from already-normalized data, so they can
    afford strict validation:
    - No type coercion (strict=True)
    - Immutable after creation (frozen=True)
    - Fail on unknown fields (extra="forbid")
    """

    model_config = ConfigDict(
        strict=True,
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        use_enum_values=True,
        populate_by_name=True,
    )


class MutableModel(BaseModel):
    """Base model for untrusted payloads.

    Scraped profiles arrive with camelCase keys, stray fields and loosely
    typed numbers, so this base coerces where it can and ignores extras.
    """

    model_config = ConfigDict(
        extra="ignore",
        validate_assignment=True,
        populate_by_name=True,
    )
