"""
External Services - Vendor integrations.

Services:
- SupabaseAuthClient: resolve bearer tokens through the hosted auth provider
- LivekitService: room tokens and voice agent dispatch
- PaymentService: checkout sessions and webhook verification
"""
from app.services.external.errors import (
    AuthProviderError,
    ConfigCheck,
    ExternalServiceError,
    LivekitConfigError,
    PaymentConfigError,
    PaymentProviderError,
)
from app.services.external.livekit import LivekitService, TokenResult
from app.services.external.payments import CheckoutSession, PaymentService
from app.services.external.supabase import AuthenticatedUser, SupabaseAuthClient

__all__ = [
    "AuthenticatedUser",
    "SupabaseAuthClient",
    "LivekitService",
    "TokenResult",
    "PaymentService",
    "CheckoutSession",
    "ConfigCheck",
    "ExternalServiceError",
    "AuthProviderError",
    "LivekitConfigError",
    "PaymentConfigError",
    "PaymentProviderError",
]
