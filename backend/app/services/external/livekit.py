"""
LiveKit Service - Room access tokens and voice agent dispatch.

Access tokens are HS256 JWTs signed with the LiveKit API secret and
carrying a "video" grant. Agent dispatch goes through the server's
AgentDispatchService Twirp endpoint.
"""
import json
import time
from dataclasses import dataclass
from typing import Any, Dict, Optional

import httpx
from jose import jwt

from app.core.config import settings
from app.core.logging import get_logger, mask_identifier
from app.services.external.errors import ConfigCheck, LivekitConfigError

logger = get_logger(__name__)

ALGORITHM = "HS256"
DISPATCH_PATH = "/twirp/livekit.AgentDispatchService/CreateDispatch"


@dataclass
class TokenResult:
    """Room token plus the outcome of the best-effort agent dispatch."""
    token: str
    agent_dispatched: bool
    dispatch_warning: Optional[str] = None


class LivekitService:
    """
    Mint participant tokens and dispatch the coaching agent into the room.

    Usage:
        service = LivekitService()
        result = await service.generate_token("room-1", user_id, "Sam")
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        api_secret: Optional[str] = None,
        url: Optional[str] = None,
        default_agent: Optional[str] = None,
        token_ttl_seconds: Optional[int] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key or settings.LIVEKIT_API_KEY
        self.api_secret = api_secret or settings.LIVEKIT_API_SECRET
        self.url = url or settings.get_livekit_http_url()
        self.default_agent = default_agent or settings.LIVEKIT_AGENT_NAME
        self.token_ttl_seconds = token_ttl_seconds or settings.LIVEKIT_TOKEN_TTL_SECONDS
        self.transport = transport

    def validate_config(self) -> ConfigCheck:
        """Check credentials and server URL are set."""
        if not self.api_key or not self.api_secret:
            return ConfigCheck(valid=False, error="LiveKit credentials not configured")
        if not self.url:
            return ConfigCheck(valid=False, error="LiveKit URL not configured")
        return ConfigCheck(valid=True)

    def _sign(self, identity: str, grant: Dict[str, Any], **claims: Any) -> str:
        now = int(time.time())
        payload = {
            "iss": self.api_key,
            "sub": identity,
            "nbf": now,
            "exp": now + self.token_ttl_seconds,
            "video": grant,
            **claims,
        }
        return jwt.encode(payload, self.api_secret, algorithm=ALGORITHM)

    def create_access_token(self, room_name: str, identity: str, name: str) -> str:
        """Participant token allowed to join, publish and subscribe in one room."""
        return self._sign(
            identity,
            {
                "roomJoin": True,
                "room": room_name,
                "canPublish": True,
                "canSubscribe": True,
            },
            name=name,
            jti=identity,
        )

    async def dispatch_agent(
        self,
        room_name: str,
        agent_name: str,
        metadata: Dict[str, Any]
    ) -> None:
        """
        Ask the LiveKit server to dispatch an agent into a room.

        Raises:
            httpx.HTTPError: Request failed or server returned an error
        """
        admin_token = self._sign(
            self.api_key,
            {"roomAdmin": True, "room": room_name},
        )

        async with httpx.AsyncClient(transport=self.transport, timeout=5.0) as client:
            response = await client.post(
                f"{self.url}{DISPATCH_PATH}",
                headers={"Authorization": f"Bearer {admin_token}"},
                json={
                    "room": room_name,
                    "agent_name": agent_name,
                    "metadata": json.dumps(metadata),
                },
            )
            response.raise_for_status()

    async def generate_token(
        self,
        room_name: str,
        user_id: str,
        user_name: str,
        agent_name: Optional[str] = None,
    ) -> TokenResult:
        """
        Create a room token and dispatch the agent.

        A failed dispatch is reported in the result, never raised.

        Raises:
            LivekitConfigError: Credentials or URL missing
        """
        check = self.validate_config()
        if not check.valid:
            raise LivekitConfigError(check.error)

        token = self.create_access_token(room_name, identity=user_id, name=user_name)

        target_agent = agent_name or self.default_agent
        try:
            await self.dispatch_agent(
                room_name,
                target_agent,
                {"userId": user_id, "username": user_name, "roomName": room_name},
            )
        except httpx.HTTPError as e:
            warning = str(e) or type(e).__name__
            logger.warning(
                "Agent dispatch failed",
                agent=target_agent,
                room=mask_identifier(room_name, 12),
                error=warning,
            )
            return TokenResult(token=token, agent_dispatched=False, dispatch_warning=warning)

        logger.info(
            "Agent dispatched",
            agent=target_agent,
            room=mask_identifier(room_name, 12),
        )
        return TokenResult(token=token, agent_dispatched=True)
