"""
App factory: create_app()

- Loads config (env + override dict)
- Sets up logging
- Wires DI container (answer service)
- Registers middleware (request IDs, timing)
- Registers blueprints from routes/*
- Installs global JSON error handlers

Run:
    gunicorn -c gunicorn.conf.py "app:create_app()"
"""

from __future__ import annotations
from typing import Any, Dict

from flask import Flask, jsonify

from app.config import Settings, load_settings
from app.logging_setup import configure_logging
from app.container import Container
from app import middleware

APP_NAME = "faq-voice"
__version__ = "1.0.0"


def _register_blueprints(app: Flask) -> None:
    # Lazy imports to avoid circulars
    from routes.health_routes import bp as health_bp
    from routes.generate_routes import bp as generate_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(generate_bp)


def _install_error_handlers(app: Flask) -> None:
    @app.errorhandler(400)
    def bad_request(err):
        app.logger.warning(f"400: {err}")
        return jsonify({"error": "bad_request"}), 400

    @app.errorhandler(404)
    def not_found(err):
        return jsonify({"error": "not_found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(err):
        return jsonify({"error": "method_not_allowed"}), 405

    @app.errorhandler(413)
    def too_large(err):
        return jsonify({"error": "payload_too_large"}), 413

    @app.errorhandler(500)
    def server_error(err):
        app.logger.exception("Unhandled server error")
        return jsonify({"error": "server_error"}), 500


def create_app(config_override: Dict[str, Any] | None = None) -> Flask:
    # Settings & logging
    settings: Settings = load_settings(config_override)
    configure_logging(settings)

    app = Flask(__name__, static_folder=None)
    app.config["SECRET_KEY"] = settings.SECRET_KEY
    app.config["SETTINGS"] = settings

    # Dependency container
    container = Container(settings)
    app.container = container  # type: ignore[attr-defined]

    # Middleware
    middleware.install_request_id(app)
    middleware.install_timing(app)

    # Blueprints
    _register_blueprints(app)

    # Error handlers
    _install_error_handlers(app)

    app.logger.info(f"App started ENV={settings.APP_ENV} LOG_DIR={settings.LOG_DIR or '-'}")

    # Simple root
    @app.get("/")
    def root():
        return {"ok": True, "name": APP_NAME, "env": settings.APP_ENV}

    return app
