"""FastAPI application factory and configuration.

Host application for the chat UI with lifespan logging and a health route.
The NiceGUI page is mounted onto this app by ``responsible_chat.main``.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from responsible_chat import __version__
from responsible_chat.client.config import get_client_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Manage application startup and shutdown lifecycle.

    Args:
        app: The FastAPI application instance.

    Yields:
        Control to the application while it runs.
    """
    # Startup
    logger.info(f"Starting Responsible Chat UI (backend: {get_client_config().backend_url})")
    yield
    # Shutdown
    logger.info("Shutting down Responsible Chat UI...")


def create_app() -> FastAPI:
    """Create and configure the FastAPI host application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Responsible Chat",
        description=(
            "Single-page chat client that forwards user turns to a remote "
            "chat backend and renders the replies."
        ),
        version=__version__,
        docs_url="/docs",
        redoc_url=None,
        lifespan=lifespan,
    )

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {
            "status": "healthy",
            "service": "responsible-chat",
            "backend_url": get_client_config().backend_url,
        }

    return application
