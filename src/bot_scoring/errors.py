"""Profile input error types."""

from __future__ import annotations

from enum import StrEnum
from typing import Self


class ErrorCode(StrEnum):
    """Standardized input error codes."""

    INVALID_JSON = "INVALID_JSON"
    INVALID_PROFILE = "INVALID_PROFILE"
    INPUT_NOT_FOUND = "INPUT_NOT_FOUND"


class ProfileInputError(Exception):
    """Profile payload could not be read or decoded."""

    def __init__(self, code: ErrorCode, message: str) -> None:
        """Initialize profile input error.

        Args:
            code: Standardized error code.
            message: Human-readable error message.
        """
        super().__init__(message)
        self.code = code
        self.message = message

    def is_code(self, code: ErrorCode) -> bool:
        """Check if this error matches a specific code."""
        return self.code == code

    @classmethod
    def invalid_json(cls, details: str) -> Self:
        """Create invalid JSON error."""
        return cls(ErrorCode.INVALID_JSON, f"Invalid JSON: {details}")

    @classmethod
    def invalid_profile(cls, details: str) -> Self:
        """Create invalid profile error."""
        return cls(ErrorCode.INVALID_PROFILE, f"Invalid profile: {details}")

    @classmethod
    def input_not_found(cls, path: str) -> Self:
        """Create missing input file error."""
        return cls(ErrorCode.INPUT_NOT_FOUND, f"Input file not found: {path}")
