"""
Workout Entry Adapter - Normalize persisted or raw workout rows.

All analytics functions work on WorkoutEntry, never on ORM objects,
so they stay free of I/O and can be fed plain dicts in tests.
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone, tzinfo
from typing import Any, Dict, Iterable, List, Optional

from app.core.logging import get_logger
from app.models.workout import WorkoutLog
from app.services.analytics.duration import parse_duration

logger = get_logger(__name__)


@dataclass(frozen=True)
class WorkoutEntry:
    """
    Immutable analytics view of one workout log.

    created_at is always timezone-aware (UTC) or None when the source
    timestamp was missing or unparseable.
    """
    id: str
    performed_name: str
    user_id: Optional[str] = None
    activity: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    muscle_target: Optional[str] = None
    duration_text: Optional[str] = None
    duration_seconds: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def volume(self) -> int:
        """Sets multiplied by reps, missing values counted as zero."""
        return (self.sets or 0) * (self.reps or 0)

    def calendar_day(self, tz: tzinfo = timezone.utc) -> Optional[date]:
        """Calendar day of created_at in the given zone."""
        return to_calendar_day(self.created_at, tz)


def parse_timestamp(value: Any) -> Optional[datetime]:
    """
    Parse a created_at value into an aware UTC datetime.

    Accepts datetimes (naive ones are taken as UTC) and ISO 8601 strings,
    including a trailing "Z". Returns None for anything else.
    """
    if value is None:
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_calendar_day(value: Optional[datetime], tz: tzinfo = timezone.utc) -> Optional[date]:
    """Project an instant onto its calendar day in tz."""
    if value is None:
        return None
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(tz).date()


def _optional_int(value: Any) -> Optional[int]:
    if value is None or value == "":
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def from_log(log: WorkoutLog) -> WorkoutEntry:
    """Build an entry from a persisted workout log."""
    duration_seconds = log.workout_time_seconds
    if duration_seconds is None:
        duration_seconds = parse_duration(log.workout_time)

    return WorkoutEntry(
        id=str(log.id),
        performed_name=log.workout_performed or "",
        user_id=log.user_id,
        activity=log.activity,
        sets=log.sets,
        reps=log.reps,
        muscle_target=log.muscle_target,
        duration_text=log.workout_time,
        duration_seconds=duration_seconds,
        created_at=parse_timestamp(log.created_at),
    )


def from_dict(raw: Dict[str, Any]) -> WorkoutEntry:
    """
    Build an entry from a raw row using the API's field names.

    workout_time_seconds is trusted when present, otherwise derived
    from workout_time.
    """
    duration_text = raw.get("workout_time")
    duration_seconds = _optional_int(raw.get("workout_time_seconds"))
    if duration_seconds is None:
        duration_seconds = parse_duration(duration_text)

    return WorkoutEntry(
        id=str(raw.get("id", "")),
        performed_name=raw.get("workout_performed") or "",
        user_id=raw.get("user_id"),
        activity=raw.get("activity"),
        sets=_optional_int(raw.get("sets")),
        reps=_optional_int(raw.get("reps")),
        muscle_target=raw.get("muscle_target"),
        duration_text=duration_text,
        duration_seconds=duration_seconds,
        created_at=parse_timestamp(raw.get("created_at")),
    )


def normalize_logs(logs: Iterable[WorkoutLog]) -> List[WorkoutEntry]:
    """Convert logs to entries, logging how many lack a usable timestamp."""
    entries = [from_log(log) for log in logs]

    undated = sum(1 for e in entries if e.created_at is None)
    if undated:
        logger.warning(
            "Workout logs without usable created_at excluded from day-based stats",
            count=undated,
        )

    return entries
