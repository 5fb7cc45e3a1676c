"""
Subscription Store - Database operations for subscriptions.
"""
from datetime import datetime
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.subscription import Subscription, SubscriptionStatus
from app.core.logging import get_logger, mask_identifier

logger = get_logger(__name__)


class SubscriptionStore:
    """
    Database store for subscriptions.

    One row per user; the payment provider's subscription id is
    used to find the row on cancellation webhooks.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_by_user_id(self, user_id: str) -> Optional[Subscription]:
        """Get a user's subscription, or None if they never subscribed."""
        result = await self.db.execute(
            select(Subscription).where(Subscription.user_id == user_id)
        )
        return result.scalar_one_or_none()

    async def find_by_dodo_subscription_id(
        self,
        dodo_subscription_id: str
    ) -> Optional[Subscription]:
        """Get a subscription by the payment provider's id."""
        result = await self.db.execute(
            select(Subscription).where(
                Subscription.dodo_subscription_id == dodo_subscription_id
            )
        )
        return result.scalars().first()

    async def upsert(
        self,
        user_id: str,
        dodo_subscription_id: str,
        status: str,
        plan: str,
        trial_ends_at: Optional[str] = None,
    ) -> Subscription:
        """
        Create or update a user's subscription.

        Args:
            user_id: Owning user
            dodo_subscription_id: Payment provider subscription id
            status: trial or active
            plan: Plan name
            trial_ends_at: Trial end timestamp as sent by the provider

        Returns:
            Created or updated Subscription
        """
        existing = await self.find_by_user_id(user_id)

        if existing:
            existing.dodo_subscription_id = dodo_subscription_id
            existing.status = status
            existing.plan = plan
            existing.trial_ends_at = trial_ends_at
            existing.updated_at = datetime.utcnow()

            await self.db.flush()
            await self.db.refresh(existing)

            logger.debug("Updated subscription", user_id=user_id, status=status)
            return existing

        subscription = Subscription(
            user_id=user_id,
            dodo_subscription_id=dodo_subscription_id,
            status=status,
            plan=plan,
            trial_ends_at=trial_ends_at,
        )
        self.db.add(subscription)
        await self.db.flush()
        await self.db.refresh(subscription)

        logger.debug("Created subscription", user_id=user_id, status=status)
        return subscription

    async def update_status_by_dodo_id(
        self,
        dodo_subscription_id: str,
        status: str
    ) -> Optional[Subscription]:
        """
        Set the status of the subscription with this provider id.

        Returns:
            Updated Subscription, or None if no row matches
        """
        subscription = await self.find_by_dodo_subscription_id(dodo_subscription_id)

        if not subscription:
            logger.warning(
                "No subscription for provider id",
                subscription_id=mask_identifier(dodo_subscription_id),
            )
            return None

        subscription.status = status
        subscription.updated_at = datetime.utcnow()
        await self.db.flush()
        await self.db.refresh(subscription)

        return subscription

    async def cancel_by_dodo_id(self, dodo_subscription_id: str) -> Optional[Subscription]:
        return await self.update_status_by_dodo_id(
            dodo_subscription_id, SubscriptionStatus.CANCELLED
        )
