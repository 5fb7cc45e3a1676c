"""
Shared types for vendor integrations.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass
class ConfigCheck:
    """Result of validating a vendor's configuration."""
    valid: bool
    error: Optional[str] = None
    hint: Optional[str] = None


class ExternalServiceError(Exception):
    """Base class for vendor integration failures."""
    pass


class AuthProviderError(ExternalServiceError):
    """The hosted auth provider could not be reached or is not configured."""
    pass


class LivekitConfigError(ExternalServiceError):
    """LiveKit credentials or URL missing."""
    pass


class PaymentConfigError(ExternalServiceError):
    """Payment provider credentials missing."""

    def __init__(self, message: str, hint: Optional[str] = None):
        super().__init__(message)
        self.hint = hint


class PaymentProviderError(ExternalServiceError):
    """Payment provider returned a non-success response."""

    def __init__(self, status: int, details: str, hint: Optional[str] = None):
        super().__init__(f"Dodo API error (status {status})")
        self.status = status
        self.details = details
        self.hint = hint
