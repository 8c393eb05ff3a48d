"""Flask application package."""

from __future__ import annotations

from dotenv import load_dotenv
from flask import Flask
from flask_cors import CORS


def create_app(config_object: type | None = None) -> Flask:
    """Application factory.

    Args:
        config_object: Configuration class to load. Resolved from
            ``APP_ENV`` when omitted.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from housie.config import get_config
    from housie.error_handlers import register_error_handlers
    from housie.logging_config import configure_logging
    from housie.routes.health import health_bp
    from housie.routes.tickets import tickets_bp

    app = Flask(__name__)
    app.config.from_object(config_object or get_config())

    configure_logging(app)
    register_error_handlers(app)

    origins = app.config["CORS_ORIGINS"]
    CORS(
        app,
        resources={r"/*": {"origins": origins if isinstance(origins, str) else list(origins)}},
        methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    app.register_blueprint(health_bp)
    app.register_blueprint(tickets_bp)

    return app
