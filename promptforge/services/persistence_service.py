"""Mirror of the application state into a per-client key-value record."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Dict, Optional

from promptforge import database
from promptforge.models import (
    DEFAULT_VIEW,
    AppState,
    ChatSettings,
    ChatTurn,
    SavedPrompt,
    User,
)
from promptforge.storage import state_records

_LOGGER = logging.getLogger(__name__)

STORAGE_KEY = "aiPromptForgeState"
STATE_COLLECTION = "app_state"
SETTINGS_FIELDS = ("persona", "tone", "temperature")


class MemoryStateBackend:
    """Process-local records, used when MongoDB is disabled."""

    def get(self, client_id: str) -> Optional[str]:
        return state_records.get(f"{STORAGE_KEY}:{client_id}")

    def put(self, client_id: str, value: str) -> None:
        state_records[f"{STORAGE_KEY}:{client_id}"] = value

    def delete(self, client_id: str) -> None:
        state_records.pop(f"{STORAGE_KEY}:{client_id}", None)

    def clear(self) -> int:
        keys = [key for key in state_records if key.startswith(f"{STORAGE_KEY}:")]
        for key in keys:
            del state_records[key]
        return len(keys)


class MongoStateBackend:
    """One document per client in the ``app_state`` collection."""

    def _collection(self):
        return database.get_database()[STATE_COLLECTION]

    def get(self, client_id: str) -> Optional[str]:
        document = self._collection().find_one({"client_id": client_id, "key": STORAGE_KEY})
        return document.get("value") if document else None

    def put(self, client_id: str, value: str) -> None:
        self._collection().update_one(
            {"client_id": client_id, "key": STORAGE_KEY},
            {
                "$set": {"value": value, "updated_at": datetime.utcnow()},
                "$setOnInsert": {"created_at": datetime.utcnow()},
            },
            upsert=True,
        )

    def delete(self, client_id: str) -> None:
        self._collection().delete_one({"client_id": client_id, "key": STORAGE_KEY})

    def clear(self) -> int:
        return self._collection().delete_many({"key": STORAGE_KEY}).deleted_count


def get_backend():
    """Pick the storage backend from the ENABLE_MONGODB switch."""
    if database.mongodb_enabled():
        return MongoStateBackend()
    return MemoryStateBackend()


def create_indexes() -> None:
    """Create the lookup index for state records."""
    collection = database.get_database()[STATE_COLLECTION]
    collection.create_index([("client_id", 1), ("key", 1)], unique=True)


def serialize_state(state: AppState) -> str:
    """Encode everything except the single-use code builder handoff."""
    record: Dict[str, Any] = {
        "currentView": state.current_view,
        "currentUser": state.current_user.to_dict() if state.current_user else None,
        "userCredits": state.user_credits,
        "savedPrompts": [prompt.to_dict() for prompt in state.saved_prompts],
        "currentChatHistory": [turn.to_dict() for turn in state.current_chat_history],
        "chatSettings": state.chat_settings.to_dict(),
    }
    return json.dumps(record)


def _state_from_record(record: Dict[str, Any]) -> AppState:
    """Build an AppState from a decoded record, defaulting absent fields."""
    if not isinstance(record, dict):
        raise ValueError("State record must be a JSON object.")

    user_data = record.get("currentUser")
    if not user_data:
        return AppState()

    credits = int(record.get("userCredits") or 0)
    if credits < 0:
        raise ValueError("Stored credit balance is negative.")

    settings_data = record.get("chatSettings") or {}
    # Keys written by other versions are ignored rather than failing the load.
    settings_fields = {key: settings_data[key] for key in SETTINGS_FIELDS if key in settings_data}
    return AppState(
        current_view=DEFAULT_VIEW,
        current_user=User(name=str(user_data["name"]), email=str(user_data["email"])),
        user_credits=credits,
        saved_prompts=[
            SavedPrompt(
                id=str(item["id"]),
                title=str(item["title"]),
                prompt=str(item["prompt"]),
                timestamp=str(item["timestamp"]),
            )
            for item in record.get("savedPrompts") or []
        ],
        current_chat_history=[
            ChatTurn(role=item["role"], text=str(item["text"]))
            for item in record.get("currentChatHistory") or []
        ],
        prompt_for_code_builder="",
        chat_settings=ChatSettings(**settings_fields),
    )


def deserialize_state(raw: str) -> AppState:
    """Decode a stored record. Raises ValueError for anything unusable."""
    try:
        return _state_from_record(json.loads(raw))
    except (TypeError, KeyError, AttributeError) as exc:
        raise ValueError(f"Malformed state record: {exc}") from exc


def load_state(client_id: str, backend=None) -> AppState:
    """Read the client's record once at startup, falling back to defaults.

    A corrupt record is removed so the next save starts clean.
    """
    backend = backend or get_backend()
    raw = backend.get(client_id)
    if not raw:
        return AppState()

    try:
        state = deserialize_state(raw)
    except ValueError:
        _LOGGER.warning("Discarding unreadable state record for client %s", client_id, exc_info=True)
        backend.delete(client_id)
        return AppState()

    return state


def save_state(client_id: str, state: AppState, backend=None) -> None:
    """Overwrite the client's record with the current state."""
    backend = backend or get_backend()
    backend.put(client_id, serialize_state(state))


def clear_all_states(backend=None) -> int:
    """Delete every client's stored record; returns how many were removed."""
    backend = backend or get_backend()
    removed = backend.clear()
    _LOGGER.info("Cleared %d stored state records", removed)
    return removed
