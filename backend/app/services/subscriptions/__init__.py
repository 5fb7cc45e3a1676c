"""
Subscriptions module - Paywall state mirrored from the payment provider.
"""
from app.services.subscriptions.service import SubscriptionService
from app.services.subscriptions.store import SubscriptionStore

__all__ = [
    "SubscriptionService",
    "SubscriptionStore",
]
