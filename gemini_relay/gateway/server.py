"""
Relay gateway: builds the Flask app and registers the relay blueprint.
This is the local entrypoint for development.
"""

import logging
from typing import Optional

from flask import Flask, jsonify
from flask_cors import CORS

from gemini_relay.ai_service.client import GeminiClient
from gemini_relay.ai_service.config import Settings, load_settings
from gemini_relay.ai_service.routes import relay_bp, CLIENT_EXTENSION_KEY

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Basic console logging during API requests."""
    logging.basicConfig(level=level, format="[%(levelname)s] %(asctime)s - %(message)s")


def create_app(client: Optional[GeminiClient] = None, settings: Optional[Settings] = None) -> Flask:
    """
    Application factory for creating the Flask app.

    Args:
        client (GeminiClient, optional): Inference client to inject. Built
            from settings when omitted.
        settings (Settings, optional): Configuration. Loaded from the
            environment when omitted.

    Returns:
        Flask: The configured Flask application.
    """
    settings = settings or load_settings()

    app = Flask(__name__)
    # Allow all origins
    CORS(app)

    app.extensions[CLIENT_EXTENSION_KEY] = client or GeminiClient.from_settings(settings)
    app.register_blueprint(relay_bp)

    # --- BASIC HEALTH CHECKPOINTS ---
    @app.route("/")
    def ping():
        """
        Root URL for simple 'online' check.
        """
        return jsonify({"status": "relay_ok"}), 200

    @app.route("/health")
    def health():
        """
        Health check endpoint.
        """
        return jsonify({"status": "ok"}), 200

    return app


def main() -> None:
    settings = load_settings()
    configure_logging(settings.log_level)

    app = create_app(settings=settings)
    logger.info("Server running at http://localhost:%s", settings.port)
    app.run(host=settings.host, port=settings.port, debug=settings.debug)


if __name__ == "__main__":
    main()
