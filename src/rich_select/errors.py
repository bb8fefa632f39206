"""Exceptions raised by rich_select."""

from __future__ import annotations


class RichSelectError(Exception):
    """Base error for rich_select."""


class InvalidConfigurationError(RichSelectError, ValueError):
    """Raised when a prompt is constructed with unusable options."""

    def __init__(self, option: str, reason: str):
        self.option = option
        self.reason = reason
        super().__init__(f"Invalid configuration for {option}: {reason}")
