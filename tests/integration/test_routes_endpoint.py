"""Integration tests for the route introspection API."""

from __future__ import annotations

from http import HTTPStatus

from flask.testing import FlaskClient


def test_routes_endpoint_lists_localized_table(client: FlaskClient) -> None:
    response = client.get("/api/v1/routes")

    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["default_locale"] == "en"
    assert payload["locales"] == ["en", "fr"]

    first, second = payload["routes"][:2]
    assert (first["verb"], first["path"], first["locale"]) == ("get", "/pages/:page", "en")
    assert (second["verb"], second["path"], second["locale"]) == ("get", "/pages_fr/:page", "fr")
    assert first["options"]["assigns"] == {"locale": "en", "key": "value"}
    assert first["source"].startswith("routes.yaml:")


def test_routes_endpoint_includes_nested_children(client: FlaskClient) -> None:
    payload = client.get("/api/v1/routes/fr").get_json()

    users = next(route for route in payload["routes"] if route["target"] == "UserController")
    assert users["path"] == "/users_fr"
    assert [(child["path"], child["locale"]) for child in users["children"]] == [
        ("/faces_fr", "fr")
    ]


def test_routes_endpoint_filters_by_locale(client: FlaskClient) -> None:
    payload = client.get("/api/v1/routes/fr").get_json()

    assert payload["locale"] == "fr"
    assert payload["routes"]
    assert {route["locale"] for route in payload["routes"]} == {"fr"}


def test_routes_endpoint_rejects_unknown_locale(client: FlaskClient) -> None:
    response = client.get("/api/v1/routes/pt")

    assert response.status_code == HTTPStatus.NOT_FOUND
    payload = response.get_json()
    assert payload["error"] == "not_found"
    assert payload["locales"] == ["en", "fr"]
