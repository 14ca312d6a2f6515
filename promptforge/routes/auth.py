"""/api/auth routes for the mocked login flow."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app, jsonify

from promptforge.models import LANDING_VIEW
from promptforge.utils.client import current_workspace, request_payload, view_response

bp = Blueprint("auth", __name__, url_prefix="/api/auth")


@bp.post("/open")
def open_auth_form():
    """Show the login or signup modal on the landing page."""
    payload: Dict[str, Any] = request_payload()
    workspace = current_workspace()
    landing = workspace.view(LANDING_VIEW)
    return view_response(workspace, landing.open_auth(str(payload.get("formType", "login"))))


@bp.post("/login")
@bp.post("/signup")
def submit_auth_form():
    """Accept any submitted form; there is no credential check."""
    payload: Dict[str, Any] = request_payload()
    workspace = current_workspace()
    landing = workspace.view(LANDING_VIEW)
    outcome = landing.submit_auth(name=payload.get("name"), email=payload.get("email"))
    current_app.logger.info("Client %s signed in", workspace.client_id)
    return view_response(workspace, outcome)


@bp.post("/logout")
def logout():
    workspace = current_workspace()
    if workspace.store.state.current_user is None:
        return jsonify(error="Not logged in.", clientId=workspace.client_id), 400
    workspace.store.logout()
    return view_response(workspace)
