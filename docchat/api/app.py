"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from docchat.api.chat import router as chat_router
from docchat.api.routes import router as upload_router
from docchat.chat.session import SessionController

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    logger.info("Starting DocChat API...")
    yield
    logger.info("Shutting down DocChat API...")


def create_app(controller: SessionController | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        controller: Session controller to expose. A default one backed by
            the environment configuration is created on first request if
            omitted.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="DocChat API",
        description=(
            "Chat with a generative-text backend and attach a PDF whose text "
            "is folded into the conversation as context."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    application.state.controller = controller

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
    )

    application.include_router(chat_router)
    application.include_router(upload_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "docchat"}

    return application
