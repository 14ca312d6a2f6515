"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os

from flask import Flask
from flask_cors import CORS

from promptforge.database import mongodb_enabled
from promptforge.routes import register_routes

REQUEST_LIMIT_BYTES = 1 * 1024 * 1024  # 1 MB per request


def create_app() -> Flask:
    """Configure and return the Flask application instance."""
    app = Flask(__name__)
    origins = os.getenv("PROMPTFORGE_CORS_ORIGINS", "*")
    CORS(app, resources={r"/api/*": {"origins": origins}}, expose_headers=["X-Client-Id"])

    app.config["MAX_CONTENT_LENGTH"] = REQUEST_LIMIT_BYTES

    register_routes(app)

    # Initialize MongoDB indexes if enabled
    if mongodb_enabled():
        try:
            from promptforge.services import persistence_service
            with app.app_context():
                persistence_service.create_indexes()
                app.logger.info("MongoDB indexes created successfully")
        except Exception as e:
            app.logger.warning(f"Failed to create MongoDB indexes: {e}")

    return app


app = create_app()
