"""FastAPI host application for the chat UI.

Endpoints:
    - GET /health: Service health status and configured backend URL
    - /: Chat page (NiceGUI, mounted at startup)
"""

from responsible_chat.api.app import create_app

__all__ = ["create_app"]
