"""
Custom exceptions for Encore.
"""

from typing import Optional


class EncoreError(Exception):
    """Base exception for Encore."""
    pass


class InvalidReference(EncoreError, ValueError):
    """Exception raised when a media reference is missing or empty."""

    def __init__(self, message: str, media_url=None):
        super().__init__(message)
        self.media_url = media_url


class ArtworkUnavailable(EncoreError):
    """Exception raised when artwork cannot be derived for a media reference."""

    def __init__(self, message: str, media_url: Optional[str] = None, status_code: Optional[int] = None):
        super().__init__(message)
        self.media_url = media_url
        self.status_code = status_code


class ConfigurationError(EncoreError):
    """Exception raised when configuration is invalid."""
    pass
