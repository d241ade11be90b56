"""Integration tests for components working together.

Coverage:
    - ChatTransport against a FastAPI backend over ASGITransport
    - ConversationStore driving the real transport end to end
    - Host application health endpoint
"""
