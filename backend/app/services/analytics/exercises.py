"""
Exercise breakdown - per-exercise aggregates keyed by normalized name.
"""
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from app.services.analytics.adapter import WorkoutEntry
from app.services.analytics.duration import format_duration


@dataclass
class ExerciseStat:
    """Accumulated stats for one exercise name."""
    exercise: str
    count: int = 0
    total_sets: int = 0
    # sets x reps, not a plain rep count
    total_volume: int = 0
    total_time_seconds: int = 0
    last_performed: Optional[datetime] = None

    @property
    def total_time_formatted(self) -> str:
        return format_duration(self.total_time_seconds)

    def add(self, entry: WorkoutEntry) -> None:
        """Fold one entry into the running totals."""
        self.count += 1
        self.total_sets += entry.sets or 0
        self.total_volume += entry.volume
        self.total_time_seconds += entry.duration_seconds or 0
        if entry.created_at is not None and (
            self.last_performed is None or entry.created_at > self.last_performed
        ):
            self.last_performed = entry.created_at

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exercise": self.exercise,
            "count": self.count,
            "total_sets": self.total_sets,
            "total_volume": self.total_volume,
            "total_time_seconds": self.total_time_seconds,
            "total_time_formatted": self.total_time_formatted,
            "last_performed": self.last_performed.isoformat() if self.last_performed else None,
        }


@dataclass
class ExerciseBreakdown:
    """Exercise stats ordered by how often each was performed."""
    exercises: List[ExerciseStat] = field(default_factory=list)

    @property
    def total_unique_exercises(self) -> int:
        return len(self.exercises)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "exercises": [e.to_dict() for e in self.exercises],
            "total_unique_exercises": self.total_unique_exercises,
        }


def normalize_exercise_name(name: Optional[str]) -> str:
    """Grouping key: trimmed and case-folded."""
    return (name or "").strip().casefold()


def compute_exercise_stats(entries: Iterable[WorkoutEntry]) -> ExerciseBreakdown:
    """
    Group entries by exercise and sort by count, most frequent first.

    Exercises with equal counts keep first-seen order.
    """
    grouped: Dict[str, ExerciseStat] = {}

    for entry in entries:
        key = normalize_exercise_name(entry.performed_name)
        stat = grouped.get(key)
        if stat is None:
            stat = grouped[key] = ExerciseStat(exercise=key)
        stat.add(entry)

    ordered = sorted(grouped.values(), key=lambda s: s.count, reverse=True)
    return ExerciseBreakdown(exercises=ordered)
