"""
Subscription database model.
Mirrors the payment provider's subscription state per user.
"""
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class SubscriptionStatus:
    """Subscription lifecycle states."""
    PENDING = "pending"
    TRIAL = "trial"
    ACTIVE = "active"
    CANCELLED = "cancelled"
    EXPIRED = "expired"

    WITH_ACCESS = (TRIAL, ACTIVE)


class Subscription(Base):
    """Subscription stored in database."""

    __tablename__ = "subscriptions"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        unique=True,
        index=True
    )
    dodo_subscription_id: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True
    )
    status: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        default=SubscriptionStatus.PENDING
    )
    plan: Mapped[str | None] = mapped_column(String(50), nullable=True)
    trial_ends_at: Mapped[str | None] = mapped_column(String(64), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        onupdate=datetime.utcnow
    )

    @property
    def has_access(self) -> bool:
        return self.status in SubscriptionStatus.WITH_ACCESS

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "id": str(self.id),
            "userId": self.user_id,
            "status": self.status,
            "plan": self.plan,
            "trialEndsAt": self.trial_ends_at,
            "updatedAt": self.updated_at.isoformat() if self.updated_at else None,
        }
