"""
Consistency view - streaks, weekly frequency and the month calendar.
"""
import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional

from app.services.analytics.days import (
    current_streak,
    distinct_days,
    evaluation_day,
    running_streaks,
)

# Trailing window for the weekly average
WEEKLY_WINDOW_DAYS = 28
WEEKLY_WINDOW_WEEKS = 4


@dataclass
class ConsistencyStats:
    """Day-level training consistency."""
    current_streak: int = 0
    longest_streak: int = 0
    weekly_average: float = 0.0
    this_month_days: List[date] = field(default_factory=list)
    all_workout_days: List[date] = field(default_factory=list)

    @property
    def total_active_days(self) -> int:
        return len(self.all_workout_days)

    @property
    def this_month_count(self) -> int:
        return len(self.this_month_days)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API response."""
        return {
            "current_streak": self.current_streak,
            "longest_streak": self.longest_streak,
            "total_active_days": self.total_active_days,
            "weekly_average": self.weekly_average,
            "this_month_days": [d.isoformat() for d in self.this_month_days],
            "this_month_count": self.this_month_count,
            "all_workout_days": [d.isoformat() for d in self.all_workout_days],
        }


def _round_half_up(value: float, digits: int = 1) -> float:
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def weekly_average(days: List[date], today: date) -> float:
    """Active days from today - 28 days through today, per week."""
    cutoff = today - timedelta(days=WEEKLY_WINDOW_DAYS)
    recent = [d for d in days if cutoff <= d <= today]
    return _round_half_up(len(recent) / WEEKLY_WINDOW_WEEKS)


def compute_consistency(
    timestamps: Iterable[Optional[datetime]],
    now: datetime,
    tz: tzinfo = timezone.utc
) -> ConsistencyStats:
    """
    Compute streak and frequency stats from workout timestamps.

    Missing timestamps are skipped.

    Args:
        timestamps: created_at of each of one user's workouts
        now: Evaluation instant
        tz: Zone used for calendar-day bucketing

    Returns:
        ConsistencyStats
    """
    days = distinct_days(timestamps, tz)
    today = evaluation_day(now, tz)

    streaks = running_streaks(days)

    return ConsistencyStats(
        current_streak=current_streak(days, today),
        longest_streak=max(streaks, default=0),
        weekly_average=weekly_average(days, today),
        this_month_days=[
            d for d in days if (d.year, d.month) == (today.year, today.month)
        ],
        all_workout_days=days,
    )
