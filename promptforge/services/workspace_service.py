"""Per-client wiring of the state store, its persistence mirror and mounted views."""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Dict, Optional

from promptforge.models import AppState
from promptforge.services import persistence_service
from promptforge.state import StateStore
from promptforge.storage import workspaces
from promptforge.ui import TransientUI
from promptforge.views import VIEW_CLASSES, BaseView

_LOGGER = logging.getLogger(__name__)

_registry_lock = threading.Lock()


class Workspace:
    """Everything one client (one browser) sees.

    The store is mirrored to storage after every mutation. Only the active
    view stays mounted; navigating elsewhere drops the others together with
    their ephemeral state.

    A workspace is only kept in the registry once there is something worth
    keeping: a signed-in session, a state change or an open modal. Until then
    it serves a single response and is discarded.
    """

    def __init__(
        self,
        client_id: str,
        store: StateStore,
        on_retain: Optional[Callable[[Workspace], None]] = None,
    ) -> None:
        self.client_id = client_id
        self.store = store
        self._on_retain = on_retain
        self._views: Dict[str, BaseView] = {}
        # Shared with the store: listeners already run under it.
        self._views_lock = store.lock
        self._active = store.effective_view()
        store.subscribe(self._persist)
        store.subscribe(self._unmount_inactive)

    @property
    def ui(self) -> TransientUI:
        return self.store.ui

    def _persist(self, state: AppState) -> None:
        persistence_service.save_state(self.client_id, state)
        self._retain()

    def _retain(self) -> None:
        callback, self._on_retain = self._on_retain, None
        if callback is not None:
            callback(self)

    def _unmount_inactive(self, state: AppState) -> None:
        current = self.store.effective_view()
        with self._views_lock:
            if current == self._active:
                return
            for name in list(self._views):
                if name != current:
                    del self._views[name]
            self._active = current

    def view(self, name: str) -> BaseView:
        """Return the mounted controller for ``name``, mounting it if needed."""
        with self._views_lock:
            controller = self._views.get(name)
            if controller is None:
                controller = VIEW_CLASSES[name](self.store)
                self._views[name] = controller
                controller.on_mount()
            return controller

    def enter(self, name: str) -> BaseView:
        """Make ``name`` the current view and return its controller."""
        if self.store.state.current_view != name:
            self.store.navigate(name)
        return self.view(name)

    def current_view(self) -> BaseView:
        return self.view(self.store.effective_view())

    def render(self) -> Dict[str, Any]:
        """Response body shared by every view endpoint."""
        controller = self.current_view()
        body = {
            "clientId": self.client_id,
            "state": self.store.snapshot(),
            "view": {"name": controller.name, **controller.render()},
            "ui": self.ui.drain(),
        }
        if body["ui"]["modal"] is not None:
            self._retain()
        return body


def get_workspace(client_id: str) -> Workspace:
    """Return the client's workspace, loading persisted state on first use."""
    with _registry_lock:
        workspace = workspaces.get(client_id)
        if workspace is not None:
            return workspace
        state = persistence_service.load_state(client_id)
        _LOGGER.debug("Loaded workspace for client %s", client_id)
        store = StateStore(state, ui=TransientUI())
        if state.current_user is None:
            return Workspace(client_id, store, on_retain=_register)
        workspace = Workspace(client_id, store)
        workspaces[client_id] = workspace
        return workspace


def _register(workspace: Workspace) -> None:
    with _registry_lock:
        workspaces.setdefault(workspace.client_id, workspace)


def reset_workspaces() -> None:
    """Forget every live workspace, as if each client reloaded the page."""
    with _registry_lock:
        workspaces.clear()
