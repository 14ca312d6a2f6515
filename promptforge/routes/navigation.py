"""/api routes for reading state, switching views and dismissing the modal."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, jsonify

from promptforge.models import LANDING_VIEW, VIEWS
from promptforge.utils.client import current_workspace, request_payload, view_response

bp = Blueprint("navigation", __name__, url_prefix="/api")


@bp.get("/state")
def get_state():
    """Return the state snapshot with the current view rendered."""
    return view_response(current_workspace())


@bp.post("/navigate")
def navigate():
    """Switch views. Anonymous clients stay on the landing page."""
    payload: Dict[str, Any] = request_payload()
    view = str(payload.get("view", "")).strip()
    workspace = current_workspace()
    if view not in VIEWS:
        return jsonify(error=f"Unknown view '{view}'.", views=list(VIEWS), clientId=workspace.client_id), 400
    workspace.store.navigate(view)
    return view_response(workspace)


@bp.post("/ui/modal/close")
def close_modal():
    workspace = current_workspace()
    workspace.ui.hide_modal()
    return view_response(workspace)


@bp.post("/landing/contact-sales")
def contact_sales():
    workspace = current_workspace()
    return view_response(workspace, workspace.view(LANDING_VIEW).contact_sales())
