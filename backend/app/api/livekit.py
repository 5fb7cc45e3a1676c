"""
LiveKit API endpoints.
"""
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from app.api.deps import get_livekit_service
from app.core.auth import get_current_user
from app.core.logging import get_logger
from app.services.external import AuthenticatedUser, LivekitService

logger = get_logger(__name__)
router = APIRouter()


# ========================================
# Request/Response Schemas
# ========================================

class TokenRequest(BaseModel):
    """Request to join a voice session room."""
    roomName: Optional[str] = Field(None, description="Room to join")
    participantIdentity: Optional[str] = Field(None, description="Identity override")
    agentName: Optional[str] = Field(None, description="Agent to dispatch")


class TokenResponse(BaseModel):
    """Room token and agent dispatch outcome."""
    token: str
    agentDispatched: bool
    dispatchWarning: Optional[str] = None


# ========================================
# API Endpoints
# ========================================

@router.post("/token", response_model=TokenResponse)
async def generate_token(
    request: TokenRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    livekit: LivekitService = Depends(get_livekit_service),
):
    """
    Generate a LiveKit room token and dispatch the coaching agent.
    """
    if not request.roomName:
        raise HTTPException(status_code=400, detail="roomName is required")

    check = livekit.validate_config()
    if not check.valid:
        logger.error("LiveKit config error", error=check.error)
        raise HTTPException(status_code=500, detail=check.error)

    user_id = request.participantIdentity or user.id
    user_name = user.first_name or user_id

    result = await livekit.generate_token(
        room_name=request.roomName,
        user_id=user_id,
        user_name=user_name,
        agent_name=request.agentName,
    )

    return TokenResponse(
        token=result.token,
        agentDispatched=result.agent_dispatched,
        dispatchWarning=result.dispatch_warning,
    )
