"""Test package for Responsible Chat.

Structure:
    - unit/: Config, models and conversation store in isolation
    - integration/: Transport and store against an in-process fake backend

No network access is needed; the backend is a FastAPI app served through
httpx's ASGITransport.
"""
