"""
Subscription Service - Entitlement checks and webhook-driven updates.
"""
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.logging import get_logger, mask_identifier
from app.models.subscription import Subscription, SubscriptionStatus
from app.services.subscriptions.store import SubscriptionStore

logger = get_logger(__name__)

DEFAULT_PLAN = "pro"


class SubscriptionService:
    """Subscription state for the paywall."""

    def __init__(self, db: AsyncSession):
        self.store = SubscriptionStore(db)

    async def get_status(self, user_id: str) -> Dict[str, Any]:
        """
        Subscription status for a user.

        Users without a row are "pending" and have no access.
        """
        subscription = await self.store.find_by_user_id(user_id)

        if not subscription:
            return {"status": SubscriptionStatus.PENDING, "hasAccess": False}

        return {
            "status": subscription.status,
            "hasAccess": subscription.has_access,
            "plan": subscription.plan,
            "trialEndsAt": subscription.trial_ends_at,
        }

    async def activate_subscription(
        self,
        user_id: str,
        dodo_subscription_id: str,
        is_trialing: bool,
        trial_ends_at: Optional[str] = None,
    ) -> Subscription:
        """Activate or update a subscription from a webhook."""
        status = SubscriptionStatus.TRIAL if is_trialing else SubscriptionStatus.ACTIVE

        logger.info(
            "Activating subscription",
            user_id=user_id,
            subscription_id=mask_identifier(dodo_subscription_id),
            status=status,
        )

        return await self.store.upsert(
            user_id=user_id,
            dodo_subscription_id=dodo_subscription_id,
            status=status,
            plan=DEFAULT_PLAN,
            trial_ends_at=trial_ends_at,
        )

    async def cancel_subscription(self, dodo_subscription_id: str) -> Optional[Subscription]:
        logger.info(
            "Cancelling subscription",
            subscription_id=mask_identifier(dodo_subscription_id),
        )
        return await self.store.cancel_by_dodo_id(dodo_subscription_id)

    async def has_access(self, user_id: str) -> bool:
        status = await self.get_status(user_id)
        return status["hasAccess"]
