"""/api/prompt-builder endpoints driving the three-step builder."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint

from promptforge.utils.client import request_payload, require_login, view_response
from promptforge.views.base import INVALID

bp = Blueprint("prompt_builder", __name__, url_prefix="/api/prompt-builder")


@bp.post("/ideas")
def suggest_ideas():
    """Step 1: turn a one-sentence description into form suggestions."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    builder = workspace.enter("prompt-builder")
    return view_response(workspace, builder.submit_description(str(payload.get("description", ""))))


@bp.patch("/form")
def edit_form():
    """Step 2 edits: whole fields, or one feature via ``featureIndex``."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    builder = workspace.enter("prompt-builder")
    if "featureIndex" in payload:
        index = payload.get("featureIndex")
        value = payload.get("value")
        if not isinstance(index, int) or not isinstance(value, str):
            return view_response(workspace, INVALID)
        return view_response(workspace, builder.update_feature(index, value))
    return view_response(workspace, builder.update_form(payload))


@bp.post("/prompt")
def build_prompt():
    """Step 2 submit: synthesize the final Markdown prompt."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("prompt-builder").submit_form())


@bp.post("/back")
def previous_step():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("prompt-builder").back())


@bp.post("/save")
def save_prompt():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("prompt-builder").save())


@bp.post("/handoff")
def send_to_code_builder():
    """Carry the finished prompt into the code builder and switch to it."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("prompt-builder").send_to_code_builder())
