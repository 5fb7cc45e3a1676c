"""
Shared test data builders.
"""
import itertools
from datetime import datetime, timedelta, timezone
from typing import Optional

from app.services.analytics import WorkoutEntry

# Saturday 2024-06-15, midday UTC
FIXED_NOW = datetime(2024, 6, 15, 12, 0, tzinfo=timezone.utc)

_ids = itertools.count(1)


def days_ago(n: int, hour: int = 9) -> datetime:
    """Aware UTC timestamp n days before FIXED_NOW at the given hour."""
    return (FIXED_NOW - timedelta(days=n)).replace(hour=hour, minute=0)


def entry(
    name: str = "Push Up",
    sets: Optional[int] = None,
    reps: Optional[int] = None,
    seconds: Optional[int] = None,
    created_at: Optional[datetime] = None,
    id: Optional[str] = None,
) -> WorkoutEntry:
    return WorkoutEntry(
        id=id or f"w{next(_ids):04d}",
        performed_name=name,
        sets=sets,
        reps=reps,
        duration_seconds=seconds,
        created_at=created_at,
    )
