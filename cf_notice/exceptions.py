"""
Error types shared across cf-notice.
"""

from typing import Optional


class CFNoticeError(Exception):
    """Base class for all cf-notice errors."""


class ConfigError(CFNoticeError):
    """Raised when the configuration is unusable (e.g. no credential)."""


class APIError(CFNoticeError):
    """Raised when the DNS provider API cannot be reached or returns an error."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SnapshotError(CFNoticeError, IOError):
    """Raised when the snapshot file cannot be read, parsed or written."""
