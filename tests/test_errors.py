# tests/test_errors.py
import json

from mimarket_lambda.api.responses import FALLBACK_ERROR_BODY, format_error, format_success


def test_error_shape_on_method_not_allowed(client):
    r = client.patch("/")
    assert r.status_code == 405
    data = r.json()
    assert data["status"] == "error"
    assert data["message"] == "Method Not Allowed"
    assert data["data"] is None


def test_format_success_envelope():
    out = format_success("all good")
    assert out.status_code == 200
    body = json.loads(out.body)
    assert body["status"] == "success"
    assert body["message"] == "all good"
    assert body["data"] is None
    assert out.headers["Access-Control-Allow-Headers"] == "Content-Type, Authorization"


def test_format_error_envelope():
    out = format_error("Invalid JSON in request body")
    assert out.status_code == 400
    body = json.loads(out.body)
    assert body == {
        "status": "error",
        "message": "Invalid JSON in request body",
        "data": None,
        "timestamp": body["timestamp"],
    }
    assert out.headers["Access-Control-Allow-Origin"] == "*"


def test_serialization_failure_falls_back_to_fixed_body():
    # a lone surrogate cannot be encoded as UTF-8 JSON
    out = format_success("bad \ud800 text")
    assert out.status_code == 500
    assert out.body == FALLBACK_ERROR_BODY
    assert json.loads(out.body)["message"] == "Failed to serialize response"
