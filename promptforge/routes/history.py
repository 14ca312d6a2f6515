"""/api/history endpoints for saved prompts."""

from __future__ import annotations

from flask import Blueprint

from promptforge.utils.client import require_login, view_response

bp = Blueprint("history", __name__, url_prefix="/api/history")


@bp.get("")
def list_prompts():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    workspace.enter("history")
    return view_response(workspace)


@bp.post("/<prompt_id>/open")
def open_prompt(prompt_id: str):
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("history").view_prompt(prompt_id))


@bp.delete("/<prompt_id>")
def delete_prompt(prompt_id: str):
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("history").delete(prompt_id))
