"""
Analytics API endpoints.

Every response is recomputed from the user's full workout history.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import get_workout_service
from app.services.workouts import WorkoutService

router = APIRouter()


def _require_user_id(user_id: Optional[str]) -> str:
    if not user_id:
        raise HTTPException(status_code=400, detail="user_id is required")
    return user_id


@router.get("/summary")
async def get_summary(
    user_id: Optional[str] = None,
    service: WorkoutService = Depends(get_workout_service),
) -> dict[str, Any]:
    """
    Overview stats for a user.
    """
    summary = await service.get_analytics_summary(_require_user_id(user_id))
    return {"success": True, "summary": summary.to_dict()}


@router.get("/exercises")
async def get_exercises(
    user_id: Optional[str] = None,
    service: WorkoutService = Depends(get_workout_service),
) -> dict[str, Any]:
    """
    Exercise breakdown, most frequent first.
    """
    breakdown = await service.get_exercise_analytics(_require_user_id(user_id))
    return {"success": True, **breakdown.to_dict()}


@router.get("/consistency")
async def get_consistency(
    user_id: Optional[str] = None,
    service: WorkoutService = Depends(get_workout_service),
) -> dict[str, Any]:
    """
    Streak and frequency data.
    """
    consistency = await service.get_consistency_analytics(_require_user_id(user_id))
    return {"success": True, "consistency": consistency.to_dict()}
