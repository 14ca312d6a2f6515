"""Toast notifications and the single modal overlay shown to a client."""

from __future__ import annotations

import threading
from typing import Any, Dict, List, Optional

MODAL_KINDS = ("auth", "insufficient-credits", "chat-settings", "saved-prompt")


class TransientUI:
    """Process-local UI feedback, kept apart from the persisted state record.

    Toasts queue up until the next response drains them. The modal stays open
    until something hides it, and opening another modal replaces it.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._toasts: List[str] = []
        self._modal: Optional[Dict[str, Any]] = None

    def show_toast(self, message: str) -> None:
        with self._lock:
            self._toasts.append(message)

    def show_modal(self, kind: str, **content: Any) -> None:
        if kind not in MODAL_KINDS:
            raise ValueError(f"Unknown modal kind: {kind!r}")
        with self._lock:
            self._modal = {"kind": kind, **content}

    def hide_modal(self) -> None:
        with self._lock:
            self._modal = None

    @property
    def modal(self) -> Optional[Dict[str, Any]]:
        with self._lock:
            return dict(self._modal) if self._modal else None

    def drain(self) -> Dict[str, Any]:
        """Return pending feedback and forget the delivered toasts."""
        with self._lock:
            toasts, self._toasts = self._toasts, []
            modal = dict(self._modal) if self._modal else None
        return {"toasts": toasts, "modal": modal}
