"""
HypeCoach Backend - FastAPI Application
"""
from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.logging import setup_logging, get_logger, request_logging_middleware
from app.core.database import init_db
from app.api import analytics, auth, livekit, subscriptions, workouts

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    # Startup
    setup_logging()
    logger.info("Starting HypeCoach Backend", version="1.0.0")
    await init_db()
    logger.info("Database initialized")

    yield

    # Shutdown
    logger.info("Shutting down HypeCoach Backend")


app = FastAPI(
    title="HypeCoach API",
    description="Voice fitness coach backend: workout logs, analytics and subscriptions",
    version="1.0.0",
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.middleware("http")(request_logging_middleware)

# Include routers
app.include_router(auth.router, prefix="/api", tags=["auth"])
app.include_router(livekit.router, prefix="/api/livekit", tags=["livekit"])
app.include_router(workouts.router, prefix="/api", tags=["workouts"])
app.include_router(analytics.router, prefix="/api/analytics", tags=["analytics"])
app.include_router(subscriptions.router, prefix="/api", tags=["subscriptions"])


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "hypecoach-backend",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }
