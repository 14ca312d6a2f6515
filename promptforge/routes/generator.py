"""/api/generator endpoints for freeform text."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint

from promptforge.utils.client import request_payload, require_login, view_response

bp = Blueprint("generator", __name__, url_prefix="/api/generator")


@bp.post("")
def generate_text():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    generator = workspace.enter("generator")
    outcome = generator.generate(
        prompt=str(payload.get("prompt", "")),
        persona=payload.get("persona") or None,
        tone=payload.get("tone") or None,
    )
    return view_response(workspace, outcome)


@bp.post("/save")
def save_response():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("generator").save())
