"""Application factory serving the localized route table."""

from __future__ import annotations

import os
from collections.abc import Mapping
from pathlib import Path

from flask import Flask, jsonify
from werkzeug.exceptions import NotFound

from routelocale.backend.app.services.route_table import build_route_table
from routelocale.backend.version import get_project_version

from .http import problem_response
from .routes import RouteHandler, register_routes


def _optional_path(raw: str | None) -> Path | None:
    """Convert an environment variable into a path, ignoring blank values."""

    if not raw or not raw.strip():
        return None
    return Path(raw.strip()).expanduser()


def create_app(
    config_dir: Path | None = None,
    translations_dir: Path | None = None,
    handlers: Mapping[str, RouteHandler] | None = None,
) -> Flask:
    """Create the Flask application and register the localized routes.

    Directories default to ``ROUTELOCALE_CONFIG_DIR`` and
    ``ROUTELOCALE_TRANSLATIONS_DIR`` and then to the packaged data.
    """

    app = Flask(__name__)

    config_dir = config_dir or _optional_path(os.getenv("ROUTELOCALE_CONFIG_DIR"))
    translations_dir = translations_dir or _optional_path(
        os.getenv("ROUTELOCALE_TRANSLATIONS_DIR")
    )

    table = build_route_table(config_dir, translations_dir)
    registered = register_routes(app, table, handlers)
    app.logger.debug("Registered %d localized URL rules", len(registered))

    @app.route("/health", methods=["GET"])
    def health_check():
        """Simple health check endpoint for infrastructure monitoring."""

        payload = {
            "status": "ok",
            "version": get_project_version(),
            "locales": list(table.manifest.locale_names),
            "default_locale": table.manifest.default_locale_name,
        }
        return jsonify(payload)

    @app.errorhandler(NotFound)
    def handle_not_found(error: NotFound):
        """Return JSON for paths no localized route matches."""

        return problem_response(
            "not_found", status=404, message=error.description or "Not found"
        ).to_response()

    @app.errorhandler(ValueError)
    def handle_value_error(error: ValueError):
        """Gracefully surface validation errors raised by handlers."""

        return problem_response(
            "validation_error", status=400, message=str(error)
        ).to_response()

    return app
