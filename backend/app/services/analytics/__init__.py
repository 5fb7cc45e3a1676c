"""
Analytics module - Workout history statistics.

This module provides:
- Duration codec for "MM:SS" workout times
- Entry adapter normalizing persisted or raw workout rows
- Summary, exercise breakdown and consistency views

Every computation is a pure function of its input and an explicit
evaluation instant; nothing here touches the database or the clock.
"""
from app.services.analytics.adapter import (
    WorkoutEntry,
    from_dict,
    from_log,
    normalize_logs,
    parse_timestamp,
)
from app.services.analytics.consistency import ConsistencyStats, compute_consistency
from app.services.analytics.duration import format_duration, parse_duration
from app.services.analytics.exercises import (
    ExerciseBreakdown,
    ExerciseStat,
    compute_exercise_stats,
    normalize_exercise_name,
)
from app.services.analytics.summary import AnalyticsSummary, LastWorkout, compute_summary

__all__ = [
    # Duration codec
    "parse_duration",
    "format_duration",
    # Data structures
    "WorkoutEntry",
    "AnalyticsSummary",
    "LastWorkout",
    "ExerciseStat",
    "ExerciseBreakdown",
    "ConsistencyStats",
    # Adapters
    "from_log",
    "from_dict",
    "normalize_logs",
    "parse_timestamp",
    # Computations
    "compute_summary",
    "compute_exercise_stats",
    "normalize_exercise_name",
    "compute_consistency",
]
