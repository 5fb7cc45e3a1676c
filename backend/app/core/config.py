"""
Application configuration.
All sensitive values loaded from environment variables.
"""
from typing import List, Optional
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Database
    DATABASE_URL: str = "postgresql+asyncpg://postgres:postgres@db:5432/hypecoach"

    # CORS
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "http://127.0.0.1:5173"]
    CLIENT_URL: str = "http://localhost:5173"

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "json"  # json or console

    # Analytics
    # Calendar days (active days, streaks, month view) are bucketed in this zone
    ANALYTICS_TIMEZONE: str = "UTC"
    WORKOUTS_PAGE_SIZE: int = 50
    WORKOUTS_MAX_PAGE_SIZE: int = 500

    # Hosted auth provider (Supabase)
    SUPABASE_URL: Optional[str] = None
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = None

    # Real-time audio (LiveKit)
    LIVEKIT_URL: Optional[str] = None
    LIVEKIT_API_KEY: Optional[str] = None
    LIVEKIT_API_SECRET: Optional[str] = None
    LIVEKIT_AGENT_NAME: str = "hype_me_up"
    LIVEKIT_TOKEN_TTL_SECONDS: int = 6 * 60 * 60

    # Payments (Dodo Payments)
    DODO_PAYMENTS_API_KEY: Optional[str] = None
    DODO_PRODUCT_ID: Optional[str] = None
    DODO_TEST_MODE: bool = True
    DODO_WEBHOOK_SECRET: Optional[str] = None

    def get_dodo_base_url(self) -> str:
        """Get the payment provider API base URL for the configured mode."""
        if self.DODO_TEST_MODE:
            return "https://test.dodopayments.com"
        return "https://live.dodopayments.com"

    def get_livekit_http_url(self) -> Optional[str]:
        """LiveKit server URL with ws(s) scheme rewritten to http(s)."""
        if not self.LIVEKIT_URL:
            return None
        url = self.LIVEKIT_URL.rstrip("/")
        if url.startswith("wss://"):
            return "https://" + url[len("wss://"):]
        if url.startswith("ws://"):
            return "http://" + url[len("ws://"):]
        return url

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
