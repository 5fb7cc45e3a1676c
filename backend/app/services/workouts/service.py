"""
Workout Service - Business logic for workout logging and analytics.
"""
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Callable, Optional, Sequence
from zoneinfo import ZoneInfo

from sqlalchemy.ext.asyncio import AsyncSession

from app.core.config import settings
from app.core.logging import get_logger
from app.models.workout import WorkoutLog
from app.services.analytics import (
    AnalyticsSummary,
    ConsistencyStats,
    ExerciseBreakdown,
    compute_consistency,
    compute_exercise_stats,
    compute_summary,
    normalize_logs,
    parse_duration,
)
from app.services.workouts.store import WorkoutStore

logger = get_logger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_analytics_timezone() -> tzinfo:
    """Zone for calendar-day bucketing, from ANALYTICS_TIMEZONE."""
    if settings.ANALYTICS_TIMEZONE.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(settings.ANALYTICS_TIMEZONE)


@dataclass
class CreateWorkoutInput:
    """Workout summary as reported by the voice agent."""
    user_id: str
    workout_performed: str
    activity: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    muscle_target: Optional[str] = None
    workout_time: Optional[str] = None


class WorkoutService:
    """
    Workout logging and analytics.

    Usage:
        service = WorkoutService(db)
        summary = await service.get_analytics_summary(user_id)

    The clock is read once per analytics call and passed into the
    pure analytics functions.
    """

    def __init__(
        self,
        db: AsyncSession,
        clock: Callable[[], datetime] = utc_now,
        tz: Optional[tzinfo] = None,
    ):
        self.store = WorkoutStore(db)
        self.clock = clock
        self.tz = tz or get_analytics_timezone()

    async def create_from_voice_agent(self, data: CreateWorkoutInput) -> WorkoutLog:
        """Persist a workout summary, deriving seconds from its MM:SS time."""
        workout_time_seconds = parse_duration(data.workout_time)

        logger.info(
            "Creating workout log",
            user_id=data.user_id,
            workout=data.workout_performed,
            activity=data.activity,
            sets=data.sets,
            reps=data.reps,
            workout_time=data.workout_time,
            workout_time_seconds=workout_time_seconds,
        )
        if data.workout_time and workout_time_seconds is None:
            logger.warning("Unparseable workout_time stored without seconds", workout_time=data.workout_time)

        return await self.store.create(
            user_id=data.user_id,
            workout_performed=data.workout_performed,
            activity=data.activity,
            sets=data.sets,
            reps=data.reps,
            muscle_target=data.muscle_target,
            workout_time=data.workout_time,
            workout_time_seconds=workout_time_seconds,
        )

    async def get_workouts(
        self,
        user_id: str,
        limit: int = 50,
        offset: int = 0
    ) -> Sequence[WorkoutLog]:
        return await self.store.find_by_user_id(user_id, limit=limit, offset=offset)

    async def get_workout_by_id(self, workout_id: str) -> Optional[WorkoutLog]:
        return await self.store.find_by_id(workout_id)

    async def get_analytics_summary(self, user_id: str) -> AnalyticsSummary:
        """Totals, active days, current streak and last workout."""
        entries = normalize_logs(await self.store.find_all_by_user_id(user_id))
        summary = compute_summary(entries, now=self.clock(), tz=self.tz)

        logger.debug(
            "Computed analytics summary",
            user_id=user_id,
            total_workouts=summary.total_workouts,
            current_streak=summary.current_streak,
        )
        return summary

    async def get_exercise_analytics(self, user_id: str) -> ExerciseBreakdown:
        """Per-exercise breakdown, most frequent first."""
        entries = normalize_logs(await self.store.find_all_by_user_id(user_id))
        breakdown = compute_exercise_stats(entries)

        logger.debug(
            "Computed exercise analytics",
            user_id=user_id,
            unique_exercises=breakdown.total_unique_exercises,
        )
        return breakdown

    async def get_consistency_analytics(self, user_id: str) -> ConsistencyStats:
        """Streaks, weekly average and month calendar."""
        entries = normalize_logs(await self.store.find_all_by_user_id(user_id))
        stats = compute_consistency(
            (e.created_at for e in entries),
            now=self.clock(),
            tz=self.tz,
        )

        logger.debug(
            "Computed consistency analytics",
            user_id=user_id,
            current_streak=stats.current_streak,
            longest_streak=stats.longest_streak,
        )
        return stats
