from __future__ import annotations

from typing import Any, Dict

from promptforge.views.base import NOT_FOUND, OK, BaseView


class HistoryView(BaseView):
    """Saved prompts, most recent first."""

    name = "history"

    def view_prompt(self, prompt_id: str) -> str:
        record = self.store.find_prompt(prompt_id)
        if record is None:
            return NOT_FOUND
        self.ui.show_modal("saved-prompt", prompt=record.to_dict())
        return OK

    def delete(self, prompt_id: str) -> str:
        if self.store.find_prompt(prompt_id) is None:
            return NOT_FOUND
        self.store.delete_prompt(prompt_id)
        return OK

    def render(self) -> Dict[str, Any]:
        prompts = [p.to_dict() for p in self.store.state.saved_prompts]
        return {"prompts": prompts, "empty": not prompts}
