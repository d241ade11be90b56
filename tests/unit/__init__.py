"""Unit tests for individual components in isolation.

Coverage:
    - client/: Configuration loading and validation
    - models/: Pydantic validation of messages and wire payloads
    - session/: Conversation store lifecycle with fake transports
"""
