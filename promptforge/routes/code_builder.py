"""/api/code-builder endpoints."""

from __future__ import annotations

from typing import Any, Dict

from flask import Blueprint

from promptforge.utils.client import request_payload, require_login, view_response

bp = Blueprint("code_builder", __name__, url_prefix="/api/code-builder")


def _optional_str(payload: Dict[str, Any], key: str):
    value = payload.get(key)
    return value if isinstance(value, str) else None


@bp.post("/generate")
def generate_code():
    """Generate code (5 credits) and report whether an HTML preview rendered."""
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    builder = workspace.enter("code-builder")
    outcome = builder.generate(
        prompt=_optional_str(payload, "prompt"),
        language=_optional_str(payload, "language"),
        tab=_optional_str(payload, "tab"),
    )
    return view_response(workspace, outcome)


@bp.post("/regenerate")
def regenerate_code():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("code-builder").regenerate())


@bp.post("/back")
def back_to_editor():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("code-builder").back_to_editor())


@bp.post("/tab")
def switch_preview_tab():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response

    payload: Dict[str, Any] = request_payload()
    builder = workspace.enter("code-builder")
    return view_response(workspace, builder.set_preview_tab(str(payload.get("tab", ""))))


@bp.post("/save")
def save_code():
    workspace, error_response = require_login()
    if error_response is not None:
        return error_response
    return view_response(workspace, workspace.enter("code-builder").save())
