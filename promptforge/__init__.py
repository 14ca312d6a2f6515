"""Application package for the Prompt Forge API."""
