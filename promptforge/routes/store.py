"""/api/store endpoints for credit packages."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint, current_app

from promptforge.utils.client import request_payload, require_login, view_response
from promptforge.views.base import OK

bp = Blueprint("store", __name__, url_prefix="/api/store")


@bp.get("")
def list_plans():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    workspace.enter("store")
    return view_response(workspace)


@bp.post("/purchase")
def purchase_credits():
    """Simulated purchase of one of the fixed credit packages."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    credits = payload.get("credits")
    if isinstance(credits, bool) or not isinstance(credits, int):
        credits = -1

    outcome = workspace.enter("store").purchase(credits)
    if outcome == OK:
        current_app.logger.info("Client %s purchased %s credits", workspace.client_id, credits)
    return view_response(workspace, outcome)
