"""Integration tests dispatching requests through the localized Flask routes."""

from __future__ import annotations

from http import HTTPStatus
from pathlib import Path

import pytest
from flask import g, jsonify
from flask.testing import FlaskClient

from routelocale.backend.app import create_app


def test_default_locale_route_is_served(client: FlaskClient) -> None:
    response = client.get("/chapters/1")
    assert response.status_code == HTTPStatus.NOT_FOUND

    response = client.get("/users/7")
    assert response.status_code == HTTPStatus.OK
    payload = response.get_json()
    assert payload["target"] == "UserController"
    assert payload["action"] == "show"
    assert payload["locale"] == "en"
    assert payload["params"] == {"id": "7"}


def test_translated_route_is_served(client: FlaskClient) -> None:
    payload = client.get("/pages_fr/intro").get_json()

    assert payload["target"] == "PageController"
    assert payload["locale"] == "fr"
    assert payload["params"] == {"page": "intro"}


def test_single_locale_group_only_registers_that_locale(client: FlaskClient) -> None:
    assert client.get("/chapters_fr/3").get_json()["locale"] == "fr"
    assert client.put("/pages_fr/3").get_json()["action"] == "update"
    assert client.put("/pages/3").status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_resources_expand_to_rest_actions(client: FlaskClient) -> None:
    assert client.get("/users_fr").get_json()["action"] == "index"
    assert client.get("/users_fr/new").get_json()["action"] == "new"
    assert client.get("/users_fr/5/edit").get_json()["action"] == "edit"
    assert client.post("/users_fr").get_json()["action"] == "create"
    assert client.patch("/users_fr/5").get_json()["action"] == "update"
    assert client.delete("/users_fr/5").get_json()["action"] == "delete"


def test_resources_except_option_is_honoured(client: FlaskClient) -> None:
    assert client.get("/comments_fr/2").get_json()["action"] == "show"
    assert client.delete("/comments_fr/2").status_code == HTTPStatus.METHOD_NOT_ALLOWED


def test_nested_resources_share_the_parent_locale(client: FlaskClient) -> None:
    payload = client.get("/users_fr/5/faces_fr/9").get_json()

    assert payload["target"] == "FaceController"
    assert payload["locale"] == "fr"
    assert payload["params"] == {"user_id": "5", "id": "9"}
    assert client.get("/users_fr/5/faces/9").status_code == HTTPStatus.NOT_FOUND


def test_live_routes_are_localized(client: FlaskClient) -> None:
    payload = client.get("/columns_fr/2").get_json()

    assert payload["verb"] == "live"
    assert payload["locale"] == "fr"
    assert client.get("/live_page").get_json()["locale"] == "en"


def test_declared_options_route_is_dispatched(client: FlaskClient) -> None:
    response = client.open("/pages_fr/1", method="OPTIONS")

    assert response.status_code == HTTPStatus.OK
    assert response.get_json()["action"] == "options"
    assert response.get_json()["locale"] == "fr"


def test_paths_without_declared_options_keep_automatic_options(client: FlaskClient) -> None:
    response = client.open("/users_fr", method="OPTIONS")

    assert response.status_code == HTTPStatus.OK
    assert "GET" in response.headers["Allow"]


def test_declared_head_route_is_dispatched() -> None:
    seen: list[str | None] = []

    def page_handler(action: str | None, **params: str):
        seen.append(action)
        return jsonify({"action": action})

    client = create_app(handlers={"PageController": page_handler}).test_client()

    assert client.head("/pages_fr/1").status_code == HTTPStatus.OK
    assert client.get("/pages_fr/1").get_json()["action"] in {"show", "edit"}
    assert seen[0] == "head"


def test_unlocalized_routes_are_registered_as_written(client: FlaskClient) -> None:
    payload = client.get("/not_localized/2").get_json()

    assert payload["locale"] is None
    assert client.get("/not_localized_fr/2").status_code == HTTPStatus.NOT_FOUND


def test_unknown_path_returns_problem_payload(client: FlaskClient) -> None:
    response = client.get("/does-not-exist")

    assert response.status_code == HTTPStatus.NOT_FOUND
    assert response.get_json()["error"] == "not_found"


def test_registered_handlers_receive_action_and_metadata() -> None:
    def page_handler(action: str | None, **params: str):
        return jsonify(
            {
                "action": action,
                "params": params,
                "locale": g.route_assigns["locale"].name,
                "key": g.route_assigns.get("key"),
            }
        )

    app = create_app(handlers={"PageController": page_handler})
    client = app.test_client()

    payload = client.get("/pages_fr/intro").get_json()

    assert payload["locale"] == "fr"
    assert payload["params"] == {"page": "intro"}
    assert payload["action"] in {"show", "edit"}


def test_live_routes_publish_private_metadata() -> None:
    seen: dict[str, object] = {}

    def column_handler(action: str | None, **params: str):
        seen["assigns"] = dict(g.route_assigns)
        seen["locale"] = g.route_private["locale"].name
        return jsonify({"ok": True})

    client = create_app(handlers={"ColumnLive": column_handler}).test_client()
    client.get("/columns/4")

    assert seen == {"assigns": {}, "locale": "en"}


def test_missing_catalog_locale_registers_no_routes(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    tmp_path.joinpath("locales.yaml").write_text(
        "default_locale: en\nlocales:\n  - {name: en, catalog: en}\n  - {name: de}\n",
        encoding="utf-8",
    )
    tmp_path.joinpath("routes.yaml").write_text(
        "groups:\n  - routes:\n      - {verb: get, path: /pages/:page, target: PageController, action: show}\n",
        encoding="utf-8",
    )

    with caplog.at_level("WARNING"):
        app = create_app(config_dir=tmp_path)

    rules = sorted(rule.rule for rule in app.url_map.iter_rules() if rule.endpoint.startswith("page"))
    assert rules == ["/pages/<page>"]
    assert any("'de'" in record.getMessage() for record in caplog.records)
