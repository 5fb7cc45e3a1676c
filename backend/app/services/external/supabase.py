"""
Supabase Auth client - Resolve bearer tokens to users.

Sessions are managed entirely by the hosted provider; this client
only asks it who a token belongs to.
"""
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.core.logging import get_logger
from app.services.external.errors import AuthProviderError

logger = get_logger(__name__)


@dataclass
class AuthenticatedUser:
    """User resolved from a bearer token."""
    id: str
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "email": self.email,
            "firstName": self.first_name,
            "lastName": self.last_name,
        }


class SupabaseAuthClient:
    """
    Thin client over the provider's /auth/v1/user endpoint.

    Usage:
        client = SupabaseAuthClient()
        user = await client.get_user(access_token)
    """

    def __init__(
        self,
        url: Optional[str] = None,
        service_key: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 5.0,
    ):
        self.url = (url or settings.SUPABASE_URL or "").rstrip("/")
        self.service_key = service_key or settings.SUPABASE_SERVICE_ROLE_KEY
        self.transport = transport
        self.timeout = timeout

    def is_configured(self) -> bool:
        return bool(self.url and self.service_key)

    async def get_user(self, access_token: str) -> Optional[AuthenticatedUser]:
        """
        Look up the user owning an access token.

        Returns:
            AuthenticatedUser, or None when the provider rejects the token

        Raises:
            AuthProviderError: Provider not configured or unreachable
        """
        if not self.is_configured():
            raise AuthProviderError("Supabase auth is not configured")

        try:
            async with httpx.AsyncClient(transport=self.transport, timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.url}/auth/v1/user",
                    headers={
                        "apikey": self.service_key,
                        "Authorization": f"Bearer {access_token}",
                    },
                )
        except httpx.HTTPError as e:
            logger.error("Auth provider request failed", error_type=type(e).__name__)
            raise AuthProviderError(str(e)) from e

        if response.status_code in (401, 403):
            return None
        if response.status_code >= 400:
            logger.error("Auth provider error", status_code=response.status_code)
            raise AuthProviderError(f"Auth provider returned {response.status_code}")

        data = response.json()
        if not data.get("id"):
            return None

        metadata = data.get("user_metadata") or {}
        return AuthenticatedUser(
            id=data["id"],
            email=data.get("email"),
            first_name=metadata.get("first_name"),
            last_name=metadata.get("last_name"),
        )
