"""Wrapper utilities around the OpenAI client."""

from __future__ import annotations

import os
from typing import Any, Dict, List, Optional, Union

from openai import OpenAI

DEFAULT_MODEL = os.getenv("OPENAI_MODEL", "gpt-4.1-mini")
PRO_MODEL = os.getenv("OPENAI_PRO_MODEL", "gpt-4.1")
MAX_OUTPUT_TOKENS = int(os.getenv("OPENAI_MAX_OUTPUT_TOKENS", "2048"))


def get_openai_client() -> OpenAI:
    """Instantiate an OpenAI client using the configured API key."""
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        raise RuntimeError("OPENAI_API_KEY environment variable is not set")
    return OpenAI(api_key=api_key)


def create_response(
    client: OpenAI,
    prompt: Union[str, List[Dict[str, str]]],
    *,
    model: Optional[str] = None,
    instructions: Optional[str] = None,
    temperature: Optional[float] = None,
    json_schema: Optional[Dict[str, Any]] = None,
    schema_name: str = "structured_output",
    max_output_tokens: int = MAX_OUTPUT_TOKENS,
):
    """Invoke the Responses API with shared defaults.

    ``prompt`` is either a single string or a list of role-tagged messages.
    Passing ``json_schema`` asks the model for strict schema-conformant JSON.
    """
    options: Dict[str, Any] = {}
    if instructions:
        options["instructions"] = instructions
    if temperature is not None:
        options["temperature"] = temperature
    if json_schema is not None:
        options["text"] = {
            "format": {
                "type": "json_schema",
                "name": schema_name,
                "schema": json_schema,
                "strict": True,
            }
        }

    return client.responses.create(
        model=model or DEFAULT_MODEL,
        input=prompt,
        max_output_tokens=max_output_tokens,
        **options,
    )
