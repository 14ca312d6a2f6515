"""Service layer modules for the Prompt Forge API."""

from . import ai_gateway, openai_service, persistence_service, preview_service

__all__ = [
    "ai_gateway",
    "openai_service",
    "persistence_service",
    "preview_service",
]
