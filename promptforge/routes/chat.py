"""/api/chat endpoints for the conversational view."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app

from promptforge.utils.client import request_payload, require_login, view_response
from promptforge.views.base import FAILED, INVALID

bp = Blueprint("chat", __name__, url_prefix="/api/chat")


@bp.post("")
def send_message():
    """Send one chat turn; a failed turn leaves history as it was."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    message = str(payload.get("message", ""))

    outcome = workspace.enter("chat").send(message)
    if outcome == FAILED:
        current_app.logger.warning("Chat turn failed for client %s", workspace.client_id)
    return view_response(workspace, outcome)


@bp.post("/settings/open")
def open_settings():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("chat").open_settings())


@bp.put("/settings")
def save_settings():
    """Replace persona, tone and temperature in one step."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    chat = workspace.enter("chat")
    temperature = payload.get("temperature")
    if temperature is not None and (isinstance(temperature, bool) or not isinstance(temperature, (int, float))):
        return view_response(workspace, INVALID)

    outcome = chat.save_settings(
        persona=payload.get("persona"),
        tone=payload.get("tone"),
        temperature=temperature,
    )
    return view_response(workspace, outcome)


@bp.post("/regenerate")
def regenerate_reply():
    """Re-ask the question behind the model reply at ``index``."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    index = payload.get("index")
    chat = workspace.enter("chat")
    if isinstance(index, bool) or not isinstance(index, int):
        return view_response(workspace, INVALID)

    outcome = chat.regenerate(index)
    if outcome == FAILED:
        current_app.logger.warning("Chat regenerate failed for client %s", workspace.client_id)
    return view_response(workspace, outcome)
