"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from routelocale.backend.app import create_app  # noqa: E402
from routelocale.backend.config.route_config import clear_config_cache  # noqa: E402
from routelocale.backend.config.schema import LocaleManifest  # noqa: E402
from routelocale.backend.app.localization import MappingCatalog, clear_catalog_cache  # noqa: E402
from routelocale.backend.services.localizer import RouteTreeExpander  # noqa: E402


@pytest.fixture(autouse=True)
def _reset_caches(monkeypatch: pytest.MonkeyPatch):
    """Drop cached configuration so environment overrides never leak between tests."""

    monkeypatch.delenv("ROUTELOCALE_CONFIG_DIR", raising=False)
    monkeypatch.delenv("ROUTELOCALE_TRANSLATIONS_DIR", raising=False)
    clear_config_cache()
    clear_catalog_cache()
    yield
    clear_config_cache()
    clear_catalog_cache()


@pytest.fixture()
def catalog() -> MappingCatalog:
    """French appends ``_fr`` to known segments; English is the identity."""

    return MappingCatalog(
        {
            "en": {"routes": {}},
            "fr": {
                "routes": {
                    "pages": "pages_fr",
                    "users": "users_fr",
                    "faces": "faces_fr",
                    "columns": "columns_fr",
                }
            },
        }
    )


@pytest.fixture()
def manifest() -> LocaleManifest:
    """English (default) and French with catalogues, German without one."""

    return LocaleManifest.model_validate(
        {
            "default_locale": "en",
            "locales": [
                {"name": "fr", "catalog": "fr"},
                {"name": "en", "catalog": "en"},
                {"name": "de", "catalog": None},
            ],
        }
    )


@pytest.fixture()
def expander(manifest: LocaleManifest, catalog: MappingCatalog) -> RouteTreeExpander:
    return RouteTreeExpander(manifest, catalog)


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    application = create_app()
    application.config.update(TESTING=True)
    return application


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()
