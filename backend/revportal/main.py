"""Hotel Performance Portal — FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from revportal.api.v1.auth import router as auth_router
from revportal.api.v1.dashboard import router as dashboard_router
from revportal.api.v1.hotels import router as hotels_router
from revportal.api.v1.marketing import router as marketing_router
from revportal.api.v1.performance import router as performance_router
from revportal.api.v1.strategies import router as strategies_router
from revportal.api.v1.users import router as users_router
from revportal.api.v1.weekly_updates import router as weekly_updates_router
from revportal.config import settings

# Configure root logger so all revportal.* loggers output to stderr.
logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan handler for startup and shutdown events."""
    # Startup
    yield
    # Shutdown — dispose engine connections
    from revportal.database import engine

    await engine.dispose()


app = FastAPI(
    title=settings.app_name,
    version=settings.app_version,
    description="Revenue management reporting for a multi-hotel portfolio: STR benchmarks, "
    "digital marketing, strategies and weekly updates.",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Routers
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(hotels_router)
app.include_router(dashboard_router)
app.include_router(performance_router)
app.include_router(marketing_router)
app.include_router(strategies_router)
app.include_router(weekly_updates_router)


@app.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "healthy", "service": settings.app_name}


@app.get("/", tags=["root"])
async def root() -> dict[str, str]:
    """Root endpoint."""
    return {
        "service": settings.app_name,
        "version": settings.app_version,
        "docs": "/docs",
    }
