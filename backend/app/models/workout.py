"""
Workout Log database model.
"""
import uuid
from datetime import datetime
from sqlalchemy import String, DateTime, Integer, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class WorkoutLog(Base):
    """One logged exercise (sets/reps group) reported by the voice agent."""

    __tablename__ = "workout_logs"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4
    )
    user_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True
    )
    workout_performed: Mapped[str] = mapped_column(String(255), nullable=False)
    activity: Mapped[str | None] = mapped_column(String(255), nullable=True)
    sets: Mapped[int | None] = mapped_column(Integer, nullable=True)
    reps: Mapped[int | None] = mapped_column(Integer, nullable=True)
    muscle_target: Mapped[str | None] = mapped_column(String(255), nullable=True)
    workout_time: Mapped[str | None] = mapped_column(String(16), nullable=True)
    workout_time_seconds: Mapped[int | None] = mapped_column(Integer, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=datetime.utcnow,
        index=True
    )

    def to_dict(self) -> dict:
        """Convert to dictionary for API response."""
        return {
            "id": str(self.id),
            "user_id": self.user_id,
            "workout_performed": self.workout_performed,
            "activity": self.activity,
            "sets": self.sets,
            "reps": self.reps,
            "muscle_target": self.muscle_target,
            "workout_time": self.workout_time,
            "workout_time_seconds": self.workout_time_seconds,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
