"""Shared plumbing for view controllers."""

from __future__ import annotations

import threading
from contextlib import contextmanager
from typing import Any, Dict, Iterator, Set

from promptforge.state import StateStore

# Action outcomes reported back to the HTTP layer.
OK = "ok"
INVALID = "invalid"
NOT_FOUND = "not_found"
NO_CREDITS = "no_credits"
FAILED = "failed"


class ActionBusy(Exception):
    """Raised when an action is submitted again while its AI call is pending."""

    def __init__(self, action: str) -> None:
        super().__init__(f"'{action}' is already in progress.")
        self.action = action


class BaseView:
    """A mounted view: reads the store, owns its ephemeral state.

    Instances live only while their view is the active one; leaving the view
    discards the instance and everything it held.
    """

    name = ""

    def __init__(self, store: StateStore) -> None:
        self.store = store
        self.ui = store.ui
        self._pending: Set[str] = set()
        self._pending_lock = threading.Lock()

    def on_mount(self) -> None:
        """Hook run once when the view becomes active."""

    @property
    def is_loading(self) -> bool:
        with self._pending_lock:
            return bool(self._pending)

    @contextmanager
    def busy(self, action: str) -> Iterator[None]:
        """Mark ``action`` in flight for the duration of the block."""
        with self._pending_lock:
            if action in self._pending:
                raise ActionBusy(action)
            self._pending.add(action)
        try:
            yield
        finally:
            with self._pending_lock:
                self._pending.discard(action)

    def show_no_credits(self, cost: int) -> None:
        self.ui.show_modal(
            "insufficient-credits",
            title="Out of Credits",
            message=(
                f"This action needs {cost} credit{'s' if cost != 1 else ''}. "
                "Please purchase more to continue."
            ),
            action={"label": "Go to Store", "view": "store"},
        )

    def spend(self, cost: int) -> bool:
        """Deduct ``cost`` credits, opening the store prompt when short."""
        if not self.store.check_credits(cost) or not self.store.deduct_credits(cost):
            self.show_no_credits(cost)
            return False
        return True

    def render(self) -> Dict[str, Any]:
        raise NotImplementedError
