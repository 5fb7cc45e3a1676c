"""
Bearer-token authentication dependency.
"""
from typing import Optional

from fastapi import Depends, HTTPException
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.logging import get_logger
from app.services.external import AuthenticatedUser, AuthProviderError, SupabaseAuthClient

logger = get_logger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def get_auth_client() -> SupabaseAuthClient:
    return SupabaseAuthClient()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_client: SupabaseAuthClient = Depends(get_auth_client),
) -> AuthenticatedUser:
    """
    Resolve the Authorization header to a user.

    Raises 401 for a missing, malformed or rejected token.
    """
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise HTTPException(status_code=401, detail="Missing or invalid authorization header")

    try:
        user = await auth_client.get_user(credentials.credentials)
    except AuthProviderError as e:
        logger.error("Auth middleware error", error=str(e))
        raise HTTPException(status_code=500, detail="Internal server error")

    if user is None:
        raise HTTPException(status_code=401, detail="Invalid or expired token")

    return user
