# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User API.
# It configures the FastAPI application with middleware, routers, and handlers,
# and wires the services once at startup.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.dependencies import build_config_service, build_user_service
from app.exceptions import (
    UserApiException,
    user_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from app.version import __version__
from core.repositories import UserRepository

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(user_repository: UserRepository | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        user_repository: Storage for users. Defaults to a fresh in-memory
            repository created at startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """
        Application lifespan handler.

        - Startup: resolve config, construct services
        - Shutdown: drop service references (in-memory users are lost)
        """
        logger.info(f"Starting User API in {settings.ENVIRONMENT} mode")

        app.state.config_service = build_config_service(settings)
        app.state.user_service = build_user_service(user_repository)
        logger.info(
            f"Services ready (feature_flag={app.state.config_service.feature_flag})"
        )

        yield

        logger.info("Shutting down User API")
        app.state.user_service = None
        app.state.config_service = None

    app = FastAPI(
        title="User API",
        description="Create, list and look up users held in memory.",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "List, fetch and create users",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    # =========================================================================
    # Middleware
    # =========================================================================

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # =========================================================================
    # Exception Handlers
    # =========================================================================

    app.add_exception_handler(UserApiException, user_api_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    @app.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # =========================================================================
    # Routers
    # =========================================================================

    app.include_router(
        users.router,
        prefix="/user",
        tags=["Users"]
    )

    app.include_router(
        health.router,
        tags=["Health"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "User API",
            "version": __version__,
            "docs": "/docs",
            "health": "/health",
        }

    return app


app = create_app()


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
    )
