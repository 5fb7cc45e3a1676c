"""
Workout log API endpoints.
"""
from typing import Any, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel, Field

from app.api.deps import get_workout_service
from app.core.config import settings
from app.core.logging import get_logger
from app.services.workouts import CreateWorkoutInput, WorkoutService

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class VoiceAgentSummaryRequest(BaseModel):
    """Workout summary posted by the voice agent at the end of a set."""
    user_id: Optional[str] = Field(None, description="Owning user")
    room_id: Optional[str] = Field(None, description="Legacy fallback for user_id")
    workout_performed: Optional[str] = Field(None, description="Exercise name")
    activity: Optional[str] = None
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    muscle_target: Optional[str] = None
    workout_time: Optional[str] = Field(None, description="Duration as MM:SS")


class VoiceAgentSummaryResponse(BaseModel):
    success: bool = True
    workout_id: str
    message: str


# ========================================
# API Endpoints
# ========================================

@router.post("/voice-agent-summary", response_model=VoiceAgentSummaryResponse)
async def create_from_voice_agent(
    request: VoiceAgentSummaryRequest,
    service: WorkoutService = Depends(get_workout_service),
):
    """
    Store a workout summary reported by the voice agent.
    """
    user_id = request.user_id or request.room_id

    if not user_id:
        logger.warning("Voice agent summary without user_id or room_id")
        raise HTTPException(status_code=400, detail="user_id is required")

    if not request.workout_performed or not request.workout_performed.strip():
        logger.warning("Voice agent summary without workout_performed", user_id=user_id)
        raise HTTPException(status_code=400, detail="workout_performed is required")

    workout = await service.create_from_voice_agent(
        CreateWorkoutInput(
            user_id=user_id,
            workout_performed=request.workout_performed.strip(),
            activity=request.activity,
            sets=request.sets,
            reps=request.reps,
            muscle_target=request.muscle_target,
            workout_time=request.workout_time,
        )
    )

    logger.info("Workout log saved", workout_id=str(workout.id), user_id=user_id)

    return VoiceAgentSummaryResponse(
        workout_id=str(workout.id),
        message="Workout log saved successfully",
    )


@router.get("/workouts")
async def list_workouts(
    user_id: Optional[str] = None,
    limit: int = Query(default=settings.WORKOUTS_PAGE_SIZE, ge=1),
    offset: int = Query(default=0, ge=0),
    service: WorkoutService = Depends(get_workout_service),
) -> dict[str, Any]:
    """
    One page of a user's workouts, newest first.
    """
    if not user_id:
        raise HTTPException(status_code=400, detail="user_id is required")

    limit = min(limit, settings.WORKOUTS_MAX_PAGE_SIZE)
    workouts = await service.get_workouts(user_id, limit=limit, offset=offset)

    return {
        "success": True,
        "workouts": [w.to_dict() for w in workouts],
        "count": len(workouts),
    }


@router.get("/workouts/{workout_id}")
async def get_workout(
    workout_id: str,
    service: WorkoutService = Depends(get_workout_service),
) -> dict[str, Any]:
    """
    Get a single workout by ID.
    """
    workout = await service.get_workout_by_id(workout_id)

    if not workout:
        raise HTTPException(status_code=404, detail="Workout not found")

    return {
        "success": True,
        "workout": workout.to_dict(),
    }
