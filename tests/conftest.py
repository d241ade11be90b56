"""Pytest fixtures and shared test configuration.

Provides reusable fixtures for unit and integration tests.

Fixtures:
    - client_config: Config pointing at the default backend address
    - backend_app: FastAPI stand-in for the remote chat backend
    - chat_transport: ChatTransport routed to backend_app in-process
    - async_client: HTTPX client for the host application
"""

from collections.abc import AsyncGenerator, Iterator

import pytest
from fastapi import FastAPI, HTTPException, Request
from fastapi.responses import JSONResponse, PlainTextResponse
from httpx import ASGITransport, AsyncClient

import responsible_chat.client.config as config_module
from responsible_chat.api.app import create_app
from responsible_chat.client.config import ClientConfig
from responsible_chat.client.transport import ChatTransport
from responsible_chat.models.schemas import ChatRequest


@pytest.fixture(autouse=True)
def reset_config_singleton() -> Iterator[None]:
    """Drop the cached process-wide config around each test."""
    config_module._client_config = None
    yield
    config_module._client_config = None


@pytest.fixture
def client_config() -> ClientConfig:
    """Return config for the default local backend.

    Returns:
        ClientConfig with an explicit backend URL and no timeout.
    """
    return ClientConfig(backend_url="http://localhost:8000", single_flight=False)


@pytest.fixture
def backend_app() -> FastAPI:
    """Build a fake chat backend speaking the /api/chat wire protocol.

    Behaviour is keyed on the incoming message:
        - "hi": replies "X"
        - "limit": 500 with detail "rate limited"
        - "nodetail": 503 with an empty JSON object
        - "html": 200 with a non-JSON body
        - "noreply": 200 with JSON lacking "reply"
        - anything else: echoes the message back with extra fields

    Returns:
        FastAPI app recording received payloads on ``app.state.received``.
    """
    app = FastAPI()
    app.state.received = []

    @app.post("/api/chat")
    async def chat(request: Request):
        app.state.received.append(
            {
                "content_type": request.headers.get("content-type"),
                "body": await request.json(),
            }
        )
        payload = ChatRequest.model_validate(app.state.received[-1]["body"])
        if payload.message == "hi":
            return {"reply": "X"}
        if payload.message == "limit":
            raise HTTPException(status_code=500, detail="rate limited")
        if payload.message == "nodetail":
            return JSONResponse(status_code=503, content={})
        if payload.message == "html":
            return PlainTextResponse("<html>oops</html>")
        if payload.message == "noreply":
            return {"answer": "misnamed"}
        return {"reply": f"echo: {payload.message}", "model": "stub", "usage": {"tokens": 3}}

    return app


@pytest.fixture
def chat_transport(client_config: ClientConfig, backend_app: FastAPI) -> ChatTransport:
    """Create a ChatTransport that talks to backend_app without a network.

    Args:
        client_config: Backend settings.
        backend_app: The fake backend.

    Returns:
        Transport routed through ASGITransport.
    """
    return ChatTransport(client_config, transport=ASGITransport(app=backend_app))


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for the host application.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=create_app())
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
