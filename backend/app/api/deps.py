"""
Shared API dependencies.
"""
from datetime import datetime
from typing import Callable

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.database import get_db
from app.services.external import LivekitService, PaymentService
from app.services.subscriptions import SubscriptionService
from app.services.workouts import WorkoutService
from app.services.workouts.service import utc_now


def get_clock() -> Callable[[], datetime]:
    """Evaluation clock for analytics; overridden in tests."""
    return utc_now


def get_workout_service(
    db: AsyncSession = Depends(get_db),
    clock: Callable[[], datetime] = Depends(get_clock),
) -> WorkoutService:
    return WorkoutService(db, clock=clock)


def get_subscription_service(
    db: AsyncSession = Depends(get_db),
) -> SubscriptionService:
    return SubscriptionService(db)


def get_livekit_service() -> LivekitService:
    return LivekitService()


def get_payment_service() -> PaymentService:
    return PaymentService()
