"""
Summary view - headline totals for the analytics dashboard.
"""
from dataclasses import dataclass
from datetime import datetime, timezone, tzinfo
from typing import Any, Dict, Iterable, Optional

from app.services.analytics.adapter import WorkoutEntry
from app.services.analytics.days import current_streak, distinct_days, evaluation_day
from app.services.analytics.duration import format_duration


@dataclass
class LastWorkout:
    """Reference to the most recent workout."""
    id: str
    workout_performed: str
    created_at: datetime

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "workout_performed": self.workout_performed,
            "created_at": self.created_at.isoformat(),
        }


@dataclass
class AnalyticsSummary:
    """Totals over all of a user's workout logs."""
    total_workouts: int = 0
    total_time_seconds: int = 0
    total_volume: int = 0
    active_days: int = 0
    current_streak: int = 0
    last_workout: Optional[LastWorkout] = None

    @property
    def total_time_formatted(self) -> str:
        return format_duration(self.total_time_seconds)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "total_workouts": self.total_workouts,
            "total_time_seconds": self.total_time_seconds,
            "total_time_formatted": self.total_time_formatted,
            "total_volume": self.total_volume,
            "active_days": self.active_days,
            "current_streak": self.current_streak,
            "last_workout": self.last_workout.to_dict() if self.last_workout else None,
        }


def compute_summary(
    entries: Iterable[WorkoutEntry],
    now: datetime,
    tz: tzinfo = timezone.utc
) -> AnalyticsSummary:
    """
    Compute the dashboard summary.

    Entries without a created_at still count toward workouts, time and
    volume, but not toward active days, streak or the last workout.

    Args:
        entries: All of one user's workout entries, in any order
        now: Evaluation instant; "today" and "yesterday" derive from it
        tz: Zone used for calendar-day bucketing

    Returns:
        AnalyticsSummary
    """
    entries = list(entries)

    days = distinct_days((e.created_at for e in entries), tz)

    dated = [e for e in entries if e.created_at is not None]
    last = max(dated, key=lambda e: (e.created_at, e.id), default=None)

    return AnalyticsSummary(
        total_workouts=len(entries),
        total_time_seconds=sum(e.duration_seconds or 0 for e in entries),
        total_volume=sum(e.volume for e in entries),
        active_days=len(days),
        current_streak=current_streak(days, evaluation_day(now, tz)),
        last_workout=LastWorkout(
            id=last.id,
            workout_performed=last.performed_name,
            created_at=last.created_at,
        ) if last else None,
    )
