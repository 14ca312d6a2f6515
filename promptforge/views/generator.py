"""Freeform text generator with its own persona and tone pickers."""

from __future__ import annotations

from typing import Any, Dict, Optional

from promptforge.services import ai_gateway
from promptforge.services.ai_gateway import GatewayError
from promptforge.views.base import FAILED, INVALID, NO_CREDITS, OK, BaseView

GENERATION_COST = 1

PERSONAS = ["Helpful Assistant", "Expert Developer", "Creative Writer", "Marketing Guru"]
TONES = ["Neutral", "Formal", "Casual", "Humorous"]


class GeneratorView(BaseView):
    name = "generator"

    def __init__(self, store) -> None:
        super().__init__(store)
        self.prompt = ""
        self.persona = PERSONAS[0]
        self.tone = TONES[0]
        self.response = ""

    def generate(
        self,
        prompt: Optional[str] = None,
        persona: Optional[str] = None,
        tone: Optional[str] = None,
    ) -> str:
        if prompt is not None:
            self.prompt = prompt
        if persona:
            self.persona = persona
        if tone:
            self.tone = tone
        if not self.prompt.strip():
            self.ui.show_toast("Please enter a prompt.")
            return INVALID

        with self.busy("generate"):
            if not self.spend(GENERATION_COST):
                return NO_CREDITS
            self.response = ""
            try:
                self.response = ai_gateway.generate_general_text(self.prompt, self.persona, self.tone)
            except GatewayError:
                self.ui.show_toast("Failed to generate response. Please try again.")
                return FAILED
            return OK

    def save(self) -> str:
        if not self.response:
            return INVALID
        self.store.save_prompt(self.prompt[:30], self.response)
        self.ui.show_toast("Response Saved!")
        return OK

    def render(self) -> Dict[str, Any]:
        return {
            "prompt": self.prompt,
            "persona": self.persona,
            "tone": self.tone,
            "personas": PERSONAS,
            "tones": TONES,
            "response": self.response,
            "isLoading": self.is_loading,
            "cost": GENERATION_COST,
        }
