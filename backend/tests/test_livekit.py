"""
Tests for LiveKit token minting and agent dispatch.
"""
import asyncio
import json

import httpx
import pytest
from jose import jwt

from app.api.deps import get_livekit_service
from app.main import app
from app.services.external import LivekitConfigError, LivekitService

API_KEY = "lk_key"
API_SECRET = "lk_secret_value_for_tests"


def _livekit(handler=None, **overrides) -> LivekitService:
    options = {
        "api_key": API_KEY,
        "api_secret": API_SECRET,
        "url": "https://livekit.example",
        "default_agent": "hype_me_up",
        "token_ttl_seconds": 600,
        "transport": httpx.MockTransport(handler or (lambda request: httpx.Response(200, json={}))),
    }
    options.update(overrides)
    return LivekitService(**options)


def _claims(token: str) -> dict:
    return jwt.decode(token, API_SECRET, algorithms=["HS256"])


class TestLivekitService:

    def test_access_token_grants_room(self):
        token = _livekit().create_access_token("room-1", identity="user-1", name="Sam")

        claims = _claims(token)
        assert claims["iss"] == API_KEY
        assert claims["sub"] == "user-1"
        assert claims["name"] == "Sam"
        assert claims["exp"] - claims["nbf"] == 600
        assert claims["video"] == {
            "roomJoin": True,
            "room": "room-1",
            "canPublish": True,
            "canSubscribe": True,
        }

    def test_generate_token_dispatches_agent(self):
        requests = []

        def handler(request: httpx.Request) -> httpx.Response:
            requests.append(request)
            return httpx.Response(200, json={"id": "dispatch-1"})

        result = asyncio.run(_livekit(handler).generate_token("room-1", "user-1", "Sam"))

        assert result.agent_dispatched is True
        assert result.dispatch_warning is None
        assert _claims(result.token)["sub"] == "user-1"

        (request,) = requests
        assert request.url.path == "/twirp/livekit.AgentDispatchService/CreateDispatch"
        body = json.loads(request.content)
        assert body["room"] == "room-1"
        assert body["agent_name"] == "hype_me_up"
        assert json.loads(body["metadata"]) == {"userId": "user-1", "username": "Sam", "roomName": "room-1"}

        admin = _claims(request.headers["authorization"].split(" ", 1)[1])
        assert admin["video"] == {"roomAdmin": True, "room": "room-1"}

    def test_requested_agent_overrides_default(self):
        names = []

        def handler(request: httpx.Request) -> httpx.Response:
            names.append(json.loads(request.content)["agent_name"])
            return httpx.Response(200, json={})

        asyncio.run(_livekit(handler).generate_token("room-1", "user-1", "Sam", agent_name="calm_coach"))

        assert names == ["calm_coach"]

    def test_dispatch_failure_still_returns_token(self):
        result = asyncio.run(
            _livekit(lambda request: httpx.Response(503, text="unavailable")).generate_token("room-1", "user-1", "Sam")
        )

        assert result.agent_dispatched is False
        assert result.dispatch_warning
        assert _claims(result.token)["video"]["room"] == "room-1"

    def test_missing_credentials(self, monkeypatch):
        service = _livekit()
        monkeypatch.setattr(service, "api_secret", None)

        assert service.validate_config().valid is False
        with pytest.raises(LivekitConfigError):
            asyncio.run(service.generate_token("room-1", "user-1", "Sam"))

    def test_missing_url(self, monkeypatch):
        service = _livekit()
        monkeypatch.setattr(service, "url", None)

        check = service.validate_config()
        assert check.valid is False
        assert check.error == "LiveKit URL not configured"


class TestTokenEndpoint:

    def test_returns_token_for_authenticated_user(self, client, test_user):
        app.dependency_overrides[get_livekit_service] = lambda: _livekit()

        response = client.post("/api/livekit/token", json={"roomName": "room-7"})

        assert response.status_code == 200
        body = response.json()
        assert body["agentDispatched"] is True
        claims = _claims(body["token"])
        assert claims["sub"] == test_user.id
        assert claims["name"] == "Sam"

    def test_participant_identity_override(self, client):
        app.dependency_overrides[get_livekit_service] = lambda: _livekit()

        body = client.post("/api/livekit/token", json={"roomName": "room-7", "participantIdentity": "guest-1"}).json()

        assert _claims(body["token"])["sub"] == "guest-1"

    def test_requires_room_name(self, client):
        app.dependency_overrides[get_livekit_service] = lambda: _livekit()

        response = client.post("/api/livekit/token", json={})

        assert response.status_code == 400
        assert response.json()["detail"] == "roomName is required"

    def test_unconfigured_livekit(self, client, monkeypatch):
        service = _livekit()
        monkeypatch.setattr(service, "api_key", None)
        app.dependency_overrides[get_livekit_service] = lambda: service

        response = client.post("/api/livekit/token", json={"roomName": "room-7"})

        assert response.status_code == 500
        assert response.json()["detail"] == "LiveKit credentials not configured"
