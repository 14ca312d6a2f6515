"""Tests for the AI gateway operations against a fake Responses API."""

from __future__ import annotations

import json

import pytest
from openai import OpenAIError

from promptforge.models import ChatTurn
from promptforge.services import ai_gateway, openai_service
from promptforge.services.ai_gateway import GatewayError, PromptDetails

IDEAS = {
    "audience": "Busy students",
    "features": ["Task list", "Reminders"],
    "framework": "React",
    "tone": "Friendly",
    "style": "Minimal",
}


def test_chat_sends_history_with_persona_and_temperature(fake_openai):
    fake_openai.reply("Sure thing!")
    history = [
        ChatTurn(role="user", text="Hi"),
        ChatTurn(role="model", text="Hello!"),
        ChatTurn(role="user", text="Help me"),
    ]

    reply = ai_gateway.generate_chat_response(history, "Code Wizard", "Casual", 0.3)

    assert reply == "Sure thing!"
    call = fake_openai.calls[0]
    assert call["input"] == [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello!"},
        {"role": "user", "content": "Help me"},
    ]
    assert call["temperature"] == 0.3
    assert '"Code Wizard"' in call["instructions"]
    assert '"Casual"' in call["instructions"]
    assert call["model"] == openai_service.DEFAULT_MODEL


def test_prompt_ideas_request_structured_output(fake_openai):
    fake_openai.reply(json.dumps(IDEAS))

    ideas = ai_gateway.generate_prompt_ideas("A to-do app for students")

    assert ideas.model_dump() == IDEAS
    text_format = fake_openai.calls[0]["text"]["format"]
    assert text_format["type"] == "json_schema"
    assert text_format["schema"]["required"] == ["audience", "features", "framework", "tone", "style"]
    assert "A to-do app for students" in fake_openai.calls[0]["input"]


@pytest.mark.parametrize(
    "payload",
    [
        "not json at all",
        json.dumps({key: value for key, value in IDEAS.items() if key != "style"}),
        json.dumps({**IDEAS, "extra": "field"}),
        json.dumps({**IDEAS, "features": "Task list"}),
        json.dumps([IDEAS]),
    ],
)
def test_prompt_ideas_reject_nonconforming_payloads(fake_openai, payload):
    fake_openai.reply(payload)

    with pytest.raises(GatewayError):
        ai_gateway.generate_prompt_ideas("A to-do app")


def test_full_prompt_embeds_every_detail(fake_openai):
    fake_openai.reply("# Build It")
    details = PromptDetails(description="A to-do app", **IDEAS)

    result = ai_gateway.generate_full_prompt(details)

    assert result == "# Build It"
    call = fake_openai.calls[0]
    assert "Task list, Reminders" in call["input"]
    assert '"Busy students"' in call["input"]
    assert "instructions" not in call
    assert call["model"] == openai_service.PRO_MODEL


def test_code_generation_asks_for_raw_code(fake_openai):
    fake_openai.reply("<!DOCTYPE html><html><body><h1>Hi</h1></body></html>")

    code = ai_gateway.generate_code("A landing page", "HTML")

    assert code.startswith("<!DOCTYPE html>")
    call = fake_openai.calls[0]
    assert "The target language/framework is HTML." in call["instructions"]
    assert "ONLY output the raw code." in call["instructions"]
    assert call["model"] == openai_service.PRO_MODEL


def test_general_text_uses_persona_template(fake_openai):
    fake_openai.reply("A slogan")

    assert ai_gateway.generate_general_text("Write a slogan", "Marketing Guru", "Humorous") == "A slogan"
    assert '"Marketing Guru"' in fake_openai.calls[0]["instructions"]


def test_empty_output_is_a_failure(fake_openai):
    fake_openai.reply("   ")

    with pytest.raises(GatewayError):
        ai_gateway.generate_general_text("Hello", "Helpful Assistant", "Neutral")


def test_sdk_errors_surface_as_gateway_error(fake_openai):
    fake_openai.reply(OpenAIError("connection reset"))

    with pytest.raises(GatewayError):
        ai_gateway.generate_code("Anything", "Vue")


def test_missing_api_key_surfaces_as_gateway_error(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    with pytest.raises(GatewayError):
        ai_gateway.generate_general_text("Hello", "Helpful Assistant", "Neutral")


def test_gateway_does_not_retry(fake_openai):
    fake_openai.reply(OpenAIError("boom"), "would succeed on retry")

    with pytest.raises(GatewayError):
        ai_gateway.generate_general_text("Hello", "Helpful Assistant", "Neutral")
    assert len(fake_openai.calls) == 1
