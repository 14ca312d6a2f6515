"""Typed records making up the persisted application state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

VIEWS = (
    "landing",
    "dashboard",
    "chat",
    "prompt-builder",
    "code-builder",
    "generator",
    "history",
    "store",
)
LANDING_VIEW = "landing"
DEFAULT_VIEW = "dashboard"

CHAT_ROLES = ("user", "model")

SIGNUP_CREDITS = 20


@dataclass
class User:
    name: str
    email: str

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "email": self.email}


@dataclass
class SavedPrompt:
    """A prompt (or generated artifact) kept in the user's history."""

    id: str
    title: str
    prompt: str
    timestamp: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "title": self.title,
            "prompt": self.prompt,
            "timestamp": self.timestamp,
        }


@dataclass
class ChatTurn:
    role: str
    text: str

    def __post_init__(self) -> None:
        if self.role not in CHAT_ROLES:
            raise ValueError(f"Unknown chat role: {self.role!r}")

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "text": self.text}


@dataclass
class ChatSettings:
    persona: str = "Helpful Assistant"
    tone: str = "Neutral"
    temperature: float = 0.7

    def __post_init__(self) -> None:
        # Slider range in the settings modal.
        self.temperature = min(max(float(self.temperature), 0.0), 1.0)

    def to_dict(self) -> Dict[str, Any]:
        return {"persona": self.persona, "tone": self.tone, "temperature": self.temperature}


@dataclass
class AppState:
    """Single mutable record shared by every view of one client."""

    current_view: str = LANDING_VIEW
    current_user: Optional[User] = None
    user_credits: int = 0
    saved_prompts: List[SavedPrompt] = field(default_factory=list)
    current_chat_history: List[ChatTurn] = field(default_factory=list)
    # Handoff from the prompt builder to the code builder; never persisted.
    prompt_for_code_builder: str = ""
    chat_settings: ChatSettings = field(default_factory=ChatSettings)


__all__ = [
    "AppState",
    "ChatSettings",
    "ChatTurn",
    "CHAT_ROLES",
    "DEFAULT_VIEW",
    "LANDING_VIEW",
    "SavedPrompt",
    "SIGNUP_CREDITS",
    "User",
    "VIEWS",
]
