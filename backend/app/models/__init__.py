from app.models.workout import WorkoutLog
from app.models.subscription import Subscription, SubscriptionStatus

__all__ = [
    "WorkoutLog",
    "Subscription",
    "SubscriptionStatus",
]
