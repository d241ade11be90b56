"""Main application entry point.

Runs the FastAPI host app with the NiceGUI chat page mounted (port 8080 by
default). Environment variables are loaded from .env file.
"""

import logging
import os
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

# Configure logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)
logger = logging.getLogger(__name__)


def run_integrated() -> None:
    """Run FastAPI with NiceGUI mounted on the same server.

    FastAPI serves /health, NiceGUI serves the chat page.
    """
    import uvicorn
    from nicegui import ui

    from responsible_chat.api.app import create_app
    from responsible_chat.ui.chat_page import APP_TITLE
    from responsible_chat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()

    # Mount NiceGUI onto FastAPI
    ui.run_with(app, title=APP_TITLE)

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Chat UI available at http://localhost:{port}/")
    logger.info(f"Health check at http://localhost:{port}/health")

    uvicorn.run(
        app,
        host=host,
        port=port,
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_standalone() -> None:
    """Run the chat page on NiceGUI's own server, without the host app."""
    from responsible_chat.ui.chat_page import main as run_ui

    run_ui()


def main() -> None:
    """Application entry point.

    Set RUN_MODE=standalone to serve only the NiceGUI page.
    Default is integrated mode (FastAPI host app with the page mounted).
    """
    mode = os.getenv("RUN_MODE", "integrated").lower()

    logger.info(f"Starting Responsible Chat in {mode} mode")

    if mode == "standalone":
        run_standalone()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
