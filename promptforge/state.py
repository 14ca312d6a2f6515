"""Application state store: every mutation of the shared record goes through here."""

from __future__ import annotations

import threading
import time
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from promptforge.models import (
    DEFAULT_VIEW,
    LANDING_VIEW,
    SIGNUP_CREDITS,
    VIEWS,
    AppState,
    ChatSettings,
    ChatTurn,
    SavedPrompt,
    User,
)
from promptforge.ui import TransientUI

Listener = Callable[[AppState], None]
HistoryUpdater = Callable[[List[ChatTurn]], List[ChatTurn]]


def display_timestamp(moment: Optional[datetime] = None) -> str:
    """Human readable local time used on saved prompts."""
    return (moment or datetime.now()).strftime("%m/%d/%Y, %I:%M:%S %p")


class StateStore:
    """Owns one client's AppState and notifies listeners after each change.

    Operations never raise for insufficient credits; spending reports success
    through its return value instead.
    """

    def __init__(
        self,
        state: Optional[AppState] = None,
        *,
        ui: Optional[TransientUI] = None,
    ) -> None:
        self._state = state or AppState()
        self._ui = ui or TransientUI()
        self._lock = threading.RLock()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> AppState:
        return self._state

    @property
    def ui(self) -> TransientUI:
        return self._ui

    @property
    def lock(self) -> threading.RLock:
        """Reentrant lock guarding the record; listeners run while it is held."""
        return self._lock

    def subscribe(self, listener: Listener) -> None:
        self._listeners.append(listener)

    def _commit(self) -> None:
        for listener in list(self._listeners):
            listener(self._state)

    # -- navigation and session -------------------------------------------

    def navigate(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view: {view!r}")
        with self._lock:
            self._state.current_view = view
            self._commit()

    def effective_view(self) -> str:
        """Anonymous clients only ever see the landing page."""
        with self._lock:
            if self._state.current_user is None:
                return LANDING_VIEW
            return self._state.current_view

    def login(self, user: User) -> None:
        with self._lock:
            self._state.current_user = user
            if self._state.user_credits <= 0:
                self._state.user_credits = SIGNUP_CREDITS
            self._state.current_view = DEFAULT_VIEW
            self._commit()

    def logout(self) -> None:
        # Credits and saved prompts stay for the next login on this client.
        with self._lock:
            self._state.current_user = None
            self._state.current_chat_history = []
            self._state.current_view = LANDING_VIEW
            self._commit()

    # -- credits ----------------------------------------------------------

    def add_credits(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Credit amount must not be negative.")
        with self._lock:
            self._state.user_credits += amount
            self._commit()

    def deduct_credits(self, amount: int) -> bool:
        if amount < 0:
            raise ValueError("Credit amount must not be negative.")
        with self._lock:
            if self._state.user_credits < amount:
                return False
            self._state.user_credits -= amount
            self._commit()
            return True

    def check_credits(self, cost: int = 1) -> bool:
        """Whether the balance covers an operation costing ``cost`` credits."""
        with self._lock:
            return self._state.user_credits >= cost

    # -- saved prompts ----------------------------------------------------

    def _next_prompt_id(self) -> str:
        candidate = int(time.time() * 1000)
        taken = {prompt.id for prompt in self._state.saved_prompts}
        while str(candidate) in taken:
            candidate += 1
        return str(candidate)

    def save_prompt(self, title: str, prompt: str) -> SavedPrompt:
        with self._lock:
            record = SavedPrompt(
                id=self._next_prompt_id(),
                title=title,
                prompt=prompt,
                timestamp=display_timestamp(),
            )
            self._state.saved_prompts = [record, *self._state.saved_prompts]
            self._commit()
            return record

    def delete_prompt(self, prompt_id: str) -> None:
        with self._lock:
            remaining = [p for p in self._state.saved_prompts if p.id != prompt_id]
            if len(remaining) == len(self._state.saved_prompts):
                return
            self._state.saved_prompts = remaining
            self._commit()

    def find_prompt(self, prompt_id: str) -> Optional[SavedPrompt]:
        with self._lock:
            return next((p for p in self._state.saved_prompts if p.id == prompt_id), None)

    # -- chat -------------------------------------------------------------

    def replace_history(self, turns: List[ChatTurn]) -> None:
        with self._lock:
            self._state.current_chat_history = list(turns)
            self._commit()

    def append_from_previous(self, updater: HistoryUpdater) -> List[ChatTurn]:
        """Derive the new history from the current one while holding the lock."""
        with self._lock:
            updated = list(updater(list(self._state.current_chat_history)))
            self._state.current_chat_history = updated
            self._commit()
            return list(updated)

    def update_chat_settings(self, settings: ChatSettings) -> None:
        with self._lock:
            self._state.chat_settings = settings
            self._commit()
        self._ui.show_toast("Chat settings saved!")

    # -- code builder handoff ---------------------------------------------

    def set_prompt_for_code_builder(self, text: str) -> None:
        with self._lock:
            self._state.prompt_for_code_builder = text or ""
            self._commit()

    def take_prompt_for_code_builder(self) -> str:
        """Return the pending handoff text and clear it."""
        with self._lock:
            text = self._state.prompt_for_code_builder
            if text:
                self._state.prompt_for_code_builder = ""
                self._commit()
            return text

    # -- read side --------------------------------------------------------

    def snapshot(self) -> Dict[str, Any]:
        with self._lock:
            state = self._state
            return {
                "currentView": self.effective_view(),
                "currentUser": state.current_user.to_dict() if state.current_user else None,
                "userCredits": state.user_credits,
                "savedPrompts": [p.to_dict() for p in state.saved_prompts],
                "currentChatHistory": [t.to_dict() for t in state.current_chat_history],
                "chatSettings": state.chat_settings.to_dict(),
            }
