"""Responsible Chat - single-page chat client for a remote chat backend.

Combines NiceGUI for the interface, httpx for backend calls,
FastAPI as the host application, and Pydantic for data validation.

Components:
    - client: Backend configuration and HTTP transport
    - session: Conversation store (messages, pending flag, draft)
    - ui: Chat page rendered from the store
    - api: Host application and health endpoint
    - models: Message and wire schemas
"""

__version__ = "0.1.0"
