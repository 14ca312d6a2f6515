"""The five text-generation operations the tools rely on.

Each operation is one round trip through the Responses API. Nothing here
retries, caches or rate limits, and every kind of failure (transport error,
refusal, empty output, schema mismatch) surfaces as the same GatewayError.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Sequence, Union

from openai import OpenAIError
from pydantic import BaseModel, ConfigDict, ValidationError

from promptforge.models import ChatTurn
from promptforge.services import openai_service

_LOGGER = logging.getLogger(__name__)

IDEAS_SCHEMA: Dict[str, Any] = {
    "type": "object",
    "properties": {
        "audience": {"type": "string"},
        "features": {"type": "array", "items": {"type": "string"}},
        "framework": {"type": "string"},
        "tone": {"type": "string"},
        "style": {"type": "string"},
    },
    "required": ["audience", "features", "framework", "tone", "style"],
    "additionalProperties": False,
}

PERSONA_INSTRUCTIONS = (
    'You are an AI assistant. Adopt the following persona: "{persona}". '
    'Respond with the following tone: "{tone}".'
)

CODE_INSTRUCTIONS = """You are an expert code generator. Your task is to generate clean, functional, and complete code based on the user's prompt.
- The target language/framework is {language}.
- ONLY output the raw code.
- Do NOT include any explanations, comments, or markdown formatting like ```html or ```javascript.
- If the request is for a complete HTML file, include the <!DOCTYPE html>, <html>, <head>, and <body> tags.
- If asked for React or Vue, provide the component code. Assume necessary imports are handled."""

FULL_PROMPT_TEMPLATE = """
Create a comprehensive, detailed, and well-structured prompt in Markdown format for an AI to build an application.
The application details are as follows:
- One-sentence description: "{description}"
- Target Audience: "{audience}"
- Key Features: {features}
- Technology/Framework: "{framework}"
- Desired Tone: "{tone}"
- Desired Style: "{style}"

The final output should be a complete prompt that an AI developer can use to understand and build the entire application. Structure it logically with clear headings.
"""

IDEAS_TEMPLATE = (
    'Based on the app description "{description}", generate a JSON object with suggestions '
    "for building a detailed prompt. The JSON should have keys: 'audience' (string), "
    "'features' (array of strings), 'framework' (string, e.g., 'React', 'Vue', 'HTML/CSS/JS'), "
    "'tone' (string), and 'style' (string)."
)


class GatewayError(Exception):
    """Raised when a generation request does not yield usable text."""


class PromptIdeas(BaseModel):
    """Structured suggestions filling the prompt builder form."""

    model_config = ConfigDict(extra="forbid", strict=True)

    audience: str
    features: List[str]
    framework: str
    tone: str
    style: str


class PromptDetails(PromptIdeas):
    description: str


def _to_wire_messages(history: Sequence[ChatTurn]) -> List[Dict[str, str]]:
    return [
        {"role": "assistant" if turn.role == "model" else "user", "content": turn.text}
        for turn in history
    ]


def _generate(
    prompt: Union[str, List[Dict[str, str]]],
    *,
    model: str,
    instructions: Optional[str] = None,
    temperature: Optional[float] = None,
    json_schema: Optional[Dict[str, Any]] = None,
    schema_name: str = "structured_output",
) -> str:
    try:
        client = openai_service.get_openai_client()
        response = openai_service.create_response(
            client,
            prompt,
            model=model,
            instructions=instructions,
            temperature=temperature,
            json_schema=json_schema,
            schema_name=schema_name,
        )
    except RuntimeError as exc:
        _LOGGER.error("AI gateway unavailable: %s", exc)
        raise GatewayError(str(exc)) from exc
    except OpenAIError as exc:
        _LOGGER.exception("OpenAI API error during %s request", model)
        raise GatewayError("The AI service request failed.") from exc

    text = (getattr(response, "output_text", None) or "").strip()
    if not text:
        raise GatewayError("The AI service returned an empty response.")
    return text


def generate_chat_response(
    history: Sequence[ChatTurn], persona: str, tone: str, temperature: float
) -> str:
    """Answer the last user turn given the whole conversation."""
    return _generate(
        _to_wire_messages(history),
        model=openai_service.DEFAULT_MODEL,
        instructions=PERSONA_INSTRUCTIONS.format(persona=persona, tone=tone),
        temperature=temperature,
    )


def generate_prompt_ideas(description: str) -> PromptIdeas:
    """Suggest audience, features, framework, tone and style for an app idea.

    Output that is not JSON matching IDEAS_SCHEMA exactly is a failure; nothing
    is salvaged from a partial payload.
    """
    text = _generate(
        IDEAS_TEMPLATE.format(description=description),
        model=openai_service.DEFAULT_MODEL,
        json_schema=IDEAS_SCHEMA,
        schema_name="prompt_ideas",
    )
    try:
        return PromptIdeas.model_validate_json(text)
    except ValidationError as exc:
        _LOGGER.warning("Prompt ideas did not match the expected schema: %s", exc)
        raise GatewayError("The AI service returned malformed suggestions.") from exc


def generate_full_prompt(details: PromptDetails) -> str:
    prompt = FULL_PROMPT_TEMPLATE.format(
        description=details.description,
        audience=details.audience,
        features=", ".join(details.features),
        framework=details.framework,
        tone=details.tone,
        style=details.style,
    )
    return _generate(prompt, model=openai_service.PRO_MODEL)


def generate_code(prompt: str, language: str) -> str:
    return _generate(
        prompt,
        model=openai_service.PRO_MODEL,
        instructions=CODE_INSTRUCTIONS.format(language=language),
    )


def generate_general_text(prompt: str, persona: str, tone: str) -> str:
    return _generate(
        prompt,
        model=openai_service.DEFAULT_MODEL,
        instructions=PERSONA_INSTRUCTIONS.format(persona=persona, tone=tone),
    )
