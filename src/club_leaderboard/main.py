"""
Club Leaderboard API - Main Application

FastAPI application serving the yearly ride leaderboard.
"""

from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from club_leaderboard import __version__
from club_leaderboard.api.dependencies import ClientManager
from club_leaderboard.api.routes import leaderboard, viz
from club_leaderboard.config import get_settings
from club_leaderboard.logging_config import setup_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler for startup/shutdown."""
    settings = get_settings()
    setup_logger(level="DEBUG" if settings.debug else settings.log_level, log_file=settings.log_file)
    logger.info(f"Starting Club Leaderboard API v{__version__}")
    logger.info(f"Database: {settings.firebase_database_url}")

    yield

    logger.info("Shutting down Club Leaderboard API")
    await ClientManager.close_client()


def create_app() -> FastAPI:
    """Application factory to create the FastAPI app."""
    settings = get_settings()

    app = FastAPI(
        title=settings.api_title,
        description=settings.api_description,
        version=settings.api_version,
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health", tags=["Health"])
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint with API info."""
        return {
            "name": settings.api_title,
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
            "endpoints": {
                "leaderboard": "/api/leaderboard",
                "viz": "/api/viz",
            },
        }

    app.include_router(leaderboard.router, prefix="/api/leaderboard", tags=["Leaderboard"])
    app.include_router(viz.router, prefix="/api/viz", tags=["Visualization"])

    return app


app = create_app()


def run():
    """Run the application (used by the CLI entry point)."""
    settings = get_settings()
    uvicorn.run(
        "club_leaderboard.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.reload,
    )


if __name__ == "__main__":
    run()
