# tests/test_api.py
"""
HTTP surface: routes, payloads and the error envelope.
"""

import pytest
from fastapi.routing import APIRoute

from talord.main import create_app

API_PREFIX = "/api/v1"


def test_routes_registered_under_api_prefix():
    app = create_app()
    paths = {r.path for r in app.routes if isinstance(r, APIRoute)}
    assert f"{API_PREFIX}/health" in paths
    assert f"{API_PREFIX}/numerals" in paths
    assert f"{API_PREFIX}/numerals/batch" in paths
    assert f"{API_PREFIX}/numerals/{{raw}}" in paths


def test_health(client):
    response = client.get(f"{API_PREFIX}/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok", "lexicon": "da", "magnitudes": 12}


def test_name_from_path(client):
    response = client.get(f"{API_PREFIX}/numerals/1001")
    assert response.status_code == 200
    body = response.json()
    assert body["text"] == "et tusind og én"
    assert body["kind"] == "int"
    assert body["number"] == 1001


def test_name_negative_decimal_from_path(client):
    response = client.get(f"{API_PREFIX}/numerals/-3.5")
    assert response.status_code == 200
    assert response.json()["text"] == "minus fire komma fem"


def test_name_from_body(client):
    response = client.post(f"{API_PREFIX}/numerals", json={"number": 2000000})
    assert response.status_code == 200
    assert response.json()["text"] == "to millioner"


def test_float_body_stays_float(client):
    response = client.post(f"{API_PREFIX}/numerals", json={"number": 3.14})
    assert response.status_code == 200
    body = response.json()
    assert body["kind"] == "float"
    assert body["text"] == "tre komma en, fire"


def test_invalid_text_is_unprocessable(client):
    response = client.get(f"{API_PREFIX}/numerals/tolv")
    assert response.status_code == 422
    body = response.json()
    assert body["status"] == "error"
    assert body["code"] == 422


def test_out_of_range_is_unprocessable(client):
    response = client.get(f"{API_PREFIX}/numerals/1" + "0" * 39)
    assert response.status_code == 422
    assert "10^39" in response.json()["message"]


def test_missing_number_fails_validation(client):
    response = client.post(f"{API_PREFIX}/numerals", json={})
    assert response.status_code == 422


@pytest.mark.parametrize("value", [True, False, "42", None])
def test_non_numeric_body_fails_validation(client, value):
    """Booleans and numeric strings are not accepted as numbers."""
    response = client.post(f"{API_PREFIX}/numerals", json={"number": value})
    assert response.status_code == 422


def test_batch(client):
    response = client.post(
        f"{API_PREFIX}/numerals/batch", json={"numbers": [0, 101, 1000001]}
    )
    assert response.status_code == 200
    texts = [r["text"] for r in response.json()["results"]]
    assert texts == ["nul", "et hundrede og én", "en million og én"]


def test_empty_batch_fails_validation(client):
    response = client.post(f"{API_PREFIX}/numerals/batch", json={"numbers": []})
    assert response.status_code == 422


def test_batch_with_boolean_fails_validation(client):
    response = client.post(
        f"{API_PREFIX}/numerals/batch", json={"numbers": [1, True]}
    )
    assert response.status_code == 422


def test_unknown_route_uses_error_envelope(client):
    response = client.get(f"{API_PREFIX}/nope")
    assert response.status_code == 404
    assert response.json()["status"] == "error"
