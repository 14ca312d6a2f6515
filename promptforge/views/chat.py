"""Conversational chat view with persona/tone settings."""

from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from promptforge.models import ChatSettings, ChatTurn
from promptforge.services import ai_gateway
from promptforge.services.ai_gateway import GatewayError
from promptforge.views.base import FAILED, INVALID, NO_CREDITS, NOT_FOUND, OK, BaseView

_LOGGER = logging.getLogger(__name__)

CHAT_COST = 1

PERSONAS = ["Helpful Assistant", "Sarcastic Friend", "Domain Expert", "Creative Writer", "Code Wizard"]
TONES = ["Neutral", "Formal", "Casual", "Humorous", "Enthusiastic"]


class ChatView(BaseView):
    name = "chat"

    def send(self, message: str) -> str:
        """Append the user's turn, ask the model, and append its answer.

        The user's turn is speculative: if the call fails it is removed again,
        so history only ever holds turns that were answered.
        """
        if not message or not message.strip():
            return INVALID

        with self.busy("send"):
            if not self.spend(CHAT_COST):
                return NO_CREDITS

            user_turn = ChatTurn(role="user", text=message)
            history = self.store.append_from_previous(lambda previous: previous + [user_turn])
            settings = self.store.state.chat_settings
            try:
                reply = ai_gateway.generate_chat_response(
                    history, settings.persona, settings.tone, settings.temperature
                )
            except GatewayError:
                _LOGGER.warning("Chat turn failed; rolling back the pending message")
                self.ui.show_toast("Error communicating with AI.")
                self.store.append_from_previous(_drop_turn(user_turn))
                return FAILED

            self.store.append_from_previous(
                lambda previous: previous + [ChatTurn(role="model", text=reply)]
            )
            return OK

    def regenerate(self, index: int) -> str:
        """Ask again with the user turn that prompted the reply at ``index``.

        The earlier exchange stays in history; the question and the new answer
        are appended like any other turn.
        """
        history = self.store.state.current_chat_history
        if not 0 < index < len(history):
            return NOT_FOUND
        if history[index].role != "model" or history[index - 1].role != "user":
            return INVALID
        return self.send(history[index - 1].text)

    def open_settings(self) -> str:
        self.ui.show_modal(
            "chat-settings",
            settings=self.store.state.chat_settings.to_dict(),
            personas=PERSONAS,
            tones=TONES,
        )
        return OK

    def save_settings(
        self,
        persona: Optional[str] = None,
        tone: Optional[str] = None,
        temperature: Optional[float] = None,
    ) -> str:
        current = self.store.state.chat_settings
        try:
            settings = ChatSettings(
                persona=persona if persona is not None else current.persona,
                tone=tone if tone is not None else current.tone,
                temperature=temperature if temperature is not None else current.temperature,
            )
        except (TypeError, ValueError):
            return INVALID
        self.store.update_chat_settings(settings)
        self.ui.hide_modal()
        return OK

    def render(self) -> Dict[str, Any]:
        state = self.store.state
        return {
            "history": [turn.to_dict() for turn in state.current_chat_history],
            "settings": state.chat_settings.to_dict(),
            "isLoading": self.is_loading,
            "cost": CHAT_COST,
        }


def _drop_turn(turn: ChatTurn):
    """Updater removing ``turn`` when it is still the most recent entry."""

    def updater(previous):
        if previous and previous[-1] is turn:
            return previous[:-1]
        return previous

    return updater
