"""
Workouts module - Workout log persistence and analytics orchestration.
"""
from app.services.workouts.service import CreateWorkoutInput, WorkoutService
from app.services.workouts.store import WorkoutStore

__all__ = [
    "CreateWorkoutInput",
    "WorkoutService",
    "WorkoutStore",
]
