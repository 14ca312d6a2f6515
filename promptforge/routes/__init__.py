"""Blueprint registration helper."""

from __future__ import annotations

from flask import Flask, current_app, jsonify

from promptforge.utils.client import BadPayload, attach_client_header, current_workspace, view_response
from promptforge.views import ActionBusy
from promptforge.views.base import INVALID

from .auth import bp as auth_bp
from .chat import bp as chat_bp
from .code_builder import bp as code_builder_bp
from .generator import bp as generator_bp
from .history import bp as history_bp
from .navigation import bp as navigation_bp
from .prompt_builder import bp as prompt_builder_bp
from .store import bp as store_bp


def register_routes(app: Flask) -> None:
    """Register all application blueprints on the provided Flask app."""
    app.register_blueprint(auth_bp)
    app.register_blueprint(navigation_bp)
    app.register_blueprint(chat_bp)
    app.register_blueprint(prompt_builder_bp)
    app.register_blueprint(code_builder_bp)
    app.register_blueprint(generator_bp)
    app.register_blueprint(history_bp)
    app.register_blueprint(store_bp)

    app.after_request(attach_client_header)

    @app.errorhandler(ActionBusy)
    def handle_busy(exc: ActionBusy):
        return jsonify(error=str(exc), action=exc.action), 409

    @app.errorhandler(BadPayload)
    def handle_bad_payload(exc: BadPayload):
        current_app.logger.info("Rejected request body: %s", exc)
        return view_response(current_workspace(), INVALID)

    @app.get("/")
    def index():
        return jsonify(message="Hello from the Prompt Forge API"), 200
