"""
Workout Store - Database operations for workout logs.
"""
import uuid
from typing import List, Optional, Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.workout import WorkoutLog
from app.core.logging import get_logger

logger = get_logger(__name__)


class WorkoutStore:
    """
    Database store for workout logs.

    Handles CRUD operations for the WorkoutLog model.
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(
        self,
        user_id: str,
        workout_performed: str,
        activity: Optional[str] = None,
        sets: Optional[int] = None,
        reps: Optional[int] = None,
        muscle_target: Optional[str] = None,
        workout_time: Optional[str] = None,
        workout_time_seconds: Optional[int] = None,
    ) -> WorkoutLog:
        """
        Insert a new workout log.

        Returns:
            The persisted WorkoutLog with id and created_at populated
        """
        log = WorkoutLog(
            user_id=user_id,
            workout_performed=workout_performed,
            activity=activity,
            sets=sets,
            reps=reps,
            muscle_target=muscle_target,
            workout_time=workout_time,
            workout_time_seconds=workout_time_seconds,
        )
        self.db.add(log)
        await self.db.flush()
        await self.db.refresh(log)

        logger.debug("Created workout log", workout_id=str(log.id))
        return log

    async def find_by_user_id(
        self,
        user_id: str,
        limit: int = 50,
        offset: int = 0
    ) -> Sequence[WorkoutLog]:
        """One page of a user's workouts, newest first."""
        result = await self.db.execute(
            select(WorkoutLog)
            .where(WorkoutLog.user_id == user_id)
            .order_by(WorkoutLog.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return result.scalars().all()

    async def find_by_id(self, workout_id: str) -> Optional[WorkoutLog]:
        """
        Get a workout by ID.

        Returns:
            WorkoutLog or None if not found or the id is malformed
        """
        try:
            workout_uuid = uuid.UUID(workout_id)
        except ValueError:
            logger.warning("Invalid workout_id format", workout_id=workout_id)
            return None

        result = await self.db.execute(
            select(WorkoutLog).where(WorkoutLog.id == workout_uuid)
        )
        return result.scalar_one_or_none()

    async def find_all_by_user_id(self, user_id: str) -> List[WorkoutLog]:
        """All of a user's workouts for analytics, newest first."""
        result = await self.db.execute(
            select(WorkoutLog)
            .where(WorkoutLog.user_id == user_id)
            .order_by(WorkoutLog.created_at.desc())
        )
        return list(result.scalars().all())
