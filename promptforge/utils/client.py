"""Helpers resolving the calling client and its workspace."""

from __future__ import annotations

import re
import secrets
from typing import Any, Dict, Optional, Tuple

from flask import g, jsonify, request

from promptforge.services.workspace_service import Workspace, get_workspace
from promptforge.views.base import FAILED, INVALID, NO_CREDITS, NOT_FOUND, OK

CLIENT_HEADER = "X-Client-Id"
_CLIENT_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{8,64}$")


class BadPayload(Exception):
    """Raised when a request body is JSON but not an object."""


def request_payload() -> Dict[str, Any]:
    """Return the JSON object body, or an empty dict when there is none."""
    payload = request.get_json(silent=True)
    if payload is None:
        return {}
    if not isinstance(payload, dict):
        raise BadPayload("Request body must be a JSON object.")
    return payload


def generate_token(prefix: str = "client") -> str:
    """Return a random token with the given prefix suitable for in-memory keys."""
    return f"{prefix}_{secrets.token_urlsafe(12)}"


def resolve_client_id() -> str:
    """Read the client id header, issuing a fresh id to first-time clients."""
    provided = request.headers.get(CLIENT_HEADER, "").strip()
    if provided and _CLIENT_ID_PATTERN.match(provided):
        client_id = provided
    else:
        client_id = generate_token("client")
    g.client_id = client_id
    return client_id


def current_workspace() -> Workspace:
    return get_workspace(resolve_client_id())


def require_login() -> Tuple[Workspace, Optional[Any]]:
    """Return the workspace, or an error response when nobody is logged in."""
    workspace = current_workspace()
    if workspace.store.state.current_user is None:
        return workspace, (
            jsonify(error="Please log in to use this tool.", view="landing", clientId=workspace.client_id),
            401,
        )
    return workspace, None


def attach_client_header(response):
    """Echo the resolved client id so first-time callers learn theirs."""
    client_id = g.get("client_id")
    if client_id:
        response.headers[CLIENT_HEADER] = client_id
    return response


OUTCOME_STATUS = {OK: 200, INVALID: 400, NOT_FOUND: 404, NO_CREDITS: 402, FAILED: 502}
OUTCOME_ERRORS = {
    INVALID: "Invalid request.",
    NOT_FOUND: "Not found.",
    NO_CREDITS: "Insufficient credits.",
    FAILED: "The AI request failed. Please try again.",
}


def view_response(workspace: Workspace, outcome: str = OK):
    """Render the workspace with the status matching a view action's outcome."""
    body = workspace.render()
    status = OUTCOME_STATUS[outcome]
    if outcome in OUTCOME_ERRORS:
        body["error"] = OUTCOME_ERRORS[outcome]
    return jsonify(body), status
