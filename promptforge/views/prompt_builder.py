"""Three-step prompt builder: describe, refine suggestions, review."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from promptforge.services import ai_gateway
from promptforge.services.ai_gateway import GatewayError, PromptDetails
from promptforge.utils.markdown import render_markdown
from promptforge.views.base import FAILED, INVALID, NO_CREDITS, OK, BaseView

IDEAS_COST = 1
FULL_PROMPT_COST = 1
TEXT_FIELDS = ("audience", "framework", "tone", "style")


def empty_form() -> Dict[str, Any]:
    return {"audience": "", "features": [], "framework": "", "tone": "", "style": ""}


class PromptBuilderView(BaseView):
    name = "prompt-builder"

    def __init__(self, store) -> None:
        super().__init__(store)
        self.step = 1
        self.description = ""
        self.form: Dict[str, Any] = empty_form()
        self.final_prompt = ""

    def submit_description(self, description: Optional[str] = None) -> str:
        """Step 1: ask for suggestions; the form only changes on a valid answer."""
        if description is not None:
            self.description = description
        if not self.description.strip():
            self.ui.show_toast("Please enter a description.")
            return INVALID

        with self.busy("ideas"):
            if not self.spend(IDEAS_COST):
                return NO_CREDITS
            try:
                ideas = ai_gateway.generate_prompt_ideas(self.description)
            except GatewayError:
                self.ui.show_toast("Failed to generate ideas. Please try again.")
                return FAILED

            self.form = ideas.model_dump()
            self.step = 2
            return OK

    def update_form(self, fields: Dict[str, Any]) -> str:
        """Step 2 edits. Unknown keys or wrong types leave the form untouched."""
        updated = dict(self.form)
        for key, value in fields.items():
            if key in TEXT_FIELDS and isinstance(value, str):
                updated[key] = value
            elif key == "features" and isinstance(value, list) and all(isinstance(v, str) for v in value):
                updated[key] = list(value)
            else:
                return INVALID
        self.form = updated
        return OK

    def update_feature(self, index: int, value: str) -> str:
        features: List[str] = list(self.form["features"])
        if not 0 <= index < len(features):
            return INVALID
        features[index] = value
        self.form = {**self.form, "features": features}
        return OK

    def submit_form(self) -> str:
        """Step 2: synthesize the full Markdown prompt."""
        if self.step < 2:
            return INVALID
        try:
            details = PromptDetails(description=self.description, **self.form)
        except ValidationError:
            return INVALID

        with self.busy("prompt"):
            if not self.spend(FULL_PROMPT_COST):
                return NO_CREDITS
            try:
                self.final_prompt = ai_gateway.generate_full_prompt(details)
            except GatewayError:
                self.ui.show_toast("Failed to generate the final prompt. Please try again.")
                return FAILED

            self.step = 3
            return OK

    def back(self) -> str:
        self.step = max(1, self.step - 1)
        return OK

    def save(self) -> str:
        if self.step != 3 or not self.final_prompt:
            return INVALID
        self.store.save_prompt(self.description, self.final_prompt)
        self.ui.show_toast("Prompt Saved!")
        return OK

    def send_to_code_builder(self) -> str:
        if self.step != 3 or not self.final_prompt:
            return INVALID
        self.store.set_prompt_for_code_builder(self.final_prompt)
        self.store.navigate("code-builder")
        return OK

    def render(self) -> Dict[str, Any]:
        return {
            "step": self.step,
            "description": self.description,
            "form": self.form,
            "finalPrompt": self.final_prompt,
            "finalPromptHtml": render_markdown(self.final_prompt) if self.final_prompt else "",
            "isLoading": self.is_loading,
        }
