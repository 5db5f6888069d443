"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from compounding.app.api.routes import api_bp
from compounding.config import Config, load_config
from compounding.utils.logging import get_logger, setup_logging

logger = get_logger(__name__)


def create_app(config: Optional[Config] = None) -> Flask:
    """Build the Flask app instance."""
    config = config or load_config()
    setup_logging(config.logging.level)

    app = Flask(__name__)
    app.config["CALCULATOR"] = config.calculator

    CORS(
        app,
        resources={r"/api/*": {"origins": config.cors.origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    logger.info("calculator API ready, CORS origins: %s", ", ".join(config.cors.origins))
    return app
