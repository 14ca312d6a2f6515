from __future__ import annotations

from typing import Any, Dict

from promptforge.views.base import BaseView

QUICK_ACTIONS = [
    {"view": "chat", "label": "AI Chat"},
    {"view": "prompt-builder", "label": "Prompt Builder"},
    {"view": "code-builder", "label": "Code Builder"},
    {"view": "generator", "label": "Generator"},
]


class DashboardView(BaseView):
    name = "dashboard"

    def render(self) -> Dict[str, Any]:
        state = self.store.state
        return {
            "greeting": f"Welcome back, {state.current_user.name}" if state.current_user else "Welcome",
            "credits": state.user_credits,
            "promptsSaved": len(state.saved_prompts),
            "quickActions": QUICK_ACTIONS,
        }
