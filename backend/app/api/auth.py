"""
Auth API endpoints.
"""
from fastapi import APIRouter, Depends

from app.core.auth import get_current_user
from app.services.external import AuthenticatedUser

router = APIRouter()


@router.get("/me")
async def get_me(
    user: AuthenticatedUser = Depends(get_current_user),
):
    """
    Current authenticated user.
    """
    return {
        "user": user.to_dict(),
        "message": "You are authenticated!",
    }
