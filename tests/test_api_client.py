"""
Tests for ApiClient: headers, bodies, payload decoding and error unwrapping.
"""

from __future__ import annotations

import json

import httpx
import pytest

from services.api_client import (
    ApiError,
    CONNECTION_ERROR_MESSAGE,
    DEFAULT_ERROR_MESSAGE,
    extract_error_message,
)
from tests.conftest import json_response


def test_get_sends_bearer_token_and_returns_payload(make_api) -> None:
    api, sent = make_api(lambda r: json_response(200, [{"id": 1}]))

    assert api.get("/orders/") == [{"id": 1}]

    request = sent[0]
    assert request.method == "GET"
    assert str(request.url) == "http://api.test/api/orders/"
    assert request.headers["Authorization"] == "Bearer test-token"
    assert request.headers["Content-Type"] == "application/json"
    assert request.content == b""


def test_no_authorization_header_without_token(make_api) -> None:
    api, sent = make_api(lambda r: json_response(200, {}), token=None)

    api.get("/auth/me/")

    assert "Authorization" not in sent[0].headers


def test_post_and_put_send_json_body(make_api) -> None:
    api, sent = make_api(lambda r: json_response(201, {"id": 7}))

    assert api.post("/orders/", {"client": "Ana"}) == {"id": 7}
    api.put("/orders/7/", {"client": "Bea"})

    assert sent[0].method == "POST"
    assert json.loads(sent[0].content) == {"client": "Ana"}
    assert sent[1].method == "PUT"
    assert str(sent[1].url) == "http://api.test/api/orders/7/"
    assert json.loads(sent[1].content) == {"client": "Bea"}


def test_empty_data_sends_no_body(make_api) -> None:
    api, sent = make_api(lambda r: json_response(200, {}))

    api.post("/orders/", {})

    assert sent[0].content == b""


def test_non_json_success_returns_none(make_api) -> None:
    api, sent = make_api(lambda r: httpx.Response(204))

    assert api.delete("/orders/3/") is None
    assert sent[0].method == "DELETE"


def test_error_uses_detail(make_api) -> None:
    api, _ = make_api(lambda r: json_response(401, {"detail": "Token inválido"}))

    with pytest.raises(ApiError) as exc_info:
        api.get("/orders/")

    assert exc_info.value.message == "Token inválido"
    assert str(exc_info.value) == "Token inválido"
    assert exc_info.value.status_code == 401
    assert exc_info.value.payload == {"detail": "Token inválido"}


def test_error_falls_back_to_message_then_serialized_payload(make_api) -> None:
    api, _ = make_api(lambda r: json_response(400, {"message": "Fallo"}))
    with pytest.raises(ApiError) as exc_info:
        api.get("/x/")
    assert exc_info.value.message == "Fallo"

    api, _ = make_api(lambda r: json_response(400, {"email": ["ya existe"]}))
    with pytest.raises(ApiError) as exc_info:
        api.post("/register/", {"email": "a@b.cl"})
    assert exc_info.value.message == '{"email": ["ya existe"]}'


def test_non_json_error_uses_default_message(make_api) -> None:
    api, _ = make_api(lambda r: httpx.Response(500, text="<html>boom</html>"))

    with pytest.raises(ApiError) as exc_info:
        api.get("/orders/")

    assert exc_info.value.message == DEFAULT_ERROR_MESSAGE
    assert exc_info.value.status_code == 500
    assert exc_info.value.payload is None


def test_transport_failure_raises_api_error(make_api) -> None:
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    api, _ = make_api(handler)

    with pytest.raises(ApiError) as exc_info:
        api.get("/orders/")

    assert exc_info.value.message == CONNECTION_ERROR_MESSAGE
    assert exc_info.value.status_code is None


def test_with_token_overrides_session_token(make_api) -> None:
    api, sent = make_api(lambda r: json_response(200, {}), token="old")

    api.with_token("fresh").get("/auth/me/")

    assert sent[0].headers["Authorization"] == "Bearer fresh"


def test_field_error_picks_first_available_field() -> None:
    error = ApiError("x", 400, {"username": ["en uso"], "detail": "Malo"})

    assert error.field_error("password", "username", "detail") == "en uso"
    assert error.field_error("password") is None
    assert ApiError("x", None, None).field_error("detail") is None


def test_extract_error_message_handles_empty_detail() -> None:
    assert extract_error_message({"detail": "", "message": "m"}) == "m"
    assert extract_error_message(None) == DEFAULT_ERROR_MESSAGE
