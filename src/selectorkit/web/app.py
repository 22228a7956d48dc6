from __future__ import annotations

import logging

from flask import Flask

from selectorkit.builder import SelectorBuilder
from selectorkit.config import SelectorKitConfig


def create_app(
    config: SelectorKitConfig | None = None,
    flask_config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app."""
    app = Flask(__name__)
    app.config.update(flask_config or {})

    config = config or SelectorKitConfig()
    app.extensions["selectorkit_config"] = config
    app.extensions["selector_builder"] = SelectorBuilder()
    logging.getLogger("selectorkit").setLevel(config.log_level)

    from selectorkit.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
