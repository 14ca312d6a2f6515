"""Code generation view with a live-preview validity check for HTML output."""

from __future__ import annotations

from typing import Any, Dict, Optional

from promptforge.services import ai_gateway
from promptforge.services.ai_gateway import GatewayError
from promptforge.services.preview_service import PREVIEW_LANGUAGE, PreviewResult, check_preview
from promptforge.views.base import FAILED, INVALID, NO_CREDITS, OK, BaseView

CODE_GENERATION_COST = 5
LANGUAGES = ("HTML", "React", "Vue")
BUILDER_TABS = ("full-app", "quick-snippet")
PREVIEW_TABS = ("preview", "code")


class CodeBuilderView(BaseView):
    name = "code-builder"

    def __init__(self, store) -> None:
        super().__init__(store)
        self.tab = "full-app"
        self.prompt = ""
        self.language = "HTML"
        self.generated_code = ""
        self.preview: Optional[PreviewResult] = None
        self.preview_tab = "code"

    def on_mount(self) -> None:
        # The prompt builder's handoff is consumed exactly once.
        handoff = self.store.take_prompt_for_code_builder()
        if handoff:
            self.tab = "full-app"
            self.prompt = handoff

    def generate(
        self,
        prompt: Optional[str] = None,
        language: Optional[str] = None,
        tab: Optional[str] = None,
    ) -> str:
        if language is not None and language not in LANGUAGES:
            return INVALID
        if tab is not None and tab not in BUILDER_TABS:
            return INVALID
        if prompt is not None:
            self.prompt = prompt
        if language is not None:
            self.language = language
        if tab is not None:
            self.tab = tab
        if not self.prompt.strip():
            self.ui.show_toast("Please enter a prompt.")
            return INVALID

        with self.busy("generate"):
            if not self.spend(CODE_GENERATION_COST):
                return NO_CREDITS
            try:
                code = ai_gateway.generate_code(self.prompt, self.language)
            except GatewayError:
                self.ui.show_toast("Failed to generate code. Please try again.")
                self.back_to_editor()
                return FAILED

            self.generated_code = code
            self.preview = check_preview(code, self.language)
            self.preview_tab = self.preview.default_tab
            return OK

    def regenerate(self) -> str:
        return self.generate()

    def back_to_editor(self) -> str:
        self.generated_code = ""
        self.preview = None
        self.preview_tab = "code"
        return OK

    def set_preview_tab(self, tab: str) -> str:
        if not self.generated_code or tab not in PREVIEW_TABS:
            return INVALID
        if tab == "preview" and self.language != PREVIEW_LANGUAGE:
            return INVALID
        self.preview_tab = tab
        return OK

    def save(self) -> str:
        if not self.generated_code:
            return INVALID
        self.store.save_prompt(self.prompt[:30], self.generated_code)
        self.ui.show_toast("Code Saved!")
        return OK

    def render(self) -> Dict[str, Any]:
        return {
            "tab": self.tab,
            "prompt": self.prompt,
            "language": self.language,
            "languages": list(LANGUAGES),
            "generatedCode": self.generated_code,
            "preview": self.preview.to_dict() if self.preview else None,
            "previewTab": self.preview_tab,
            "isLoading": self.is_loading,
            "cost": CODE_GENERATION_COST,
        }
