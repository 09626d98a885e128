"""Shared utilities: logging, settings, base models."""

from bot_utils.base import MutableModel, StrictModel
from bot_utils.logging import get_logger
from bot_utils.settings import Settings, get_settings

__all__ = ["MutableModel", "Settings", "StrictModel", "get_logger", "get_settings"]
