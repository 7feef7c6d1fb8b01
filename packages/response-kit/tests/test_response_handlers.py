from __future__ import annotations

from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient
from pydantic import BaseModel

from response_kit.errors import ApiError
from response_kit.handlers import install_exception_handlers, to_json_response
from response_kit.helper import ResponseHelper


class Payload(BaseModel):
    name: str


def _build_app(expose_internal_errors: bool = False) -> FastAPI:
    app = FastAPI()
    install_exception_handlers(app, helper=ResponseHelper(), expose_internal_errors=expose_internal_errors)

    @app.get("/created")
    async def created() -> object:
        return to_json_response(ResponseHelper().created({"id": 1}))

    @app.get("/api-error")
    async def api_error() -> object:
        raise ApiError.conflict("already exists", "DUPLICATE_NAME")

    @app.get("/http-error")
    async def http_error() -> object:
        raise HTTPException(status_code=401, detail={"code": "INVALID_TOKEN", "message": "token expired"})

    @app.get("/rate-limited")
    async def rate_limited() -> object:
        raise HTTPException(status_code=429, detail="slow down", headers={"Retry-After": "5"})

    @app.post("/validate")
    async def validate(body: Payload) -> object:
        return to_json_response(ResponseHelper().ok(body.model_dump()))

    @app.get("/not-modified")
    async def not_modified() -> object:
        raise HTTPException(status_code=304, headers={"ETag": "\"v1\""})

    @app.get("/no-content")
    async def no_content() -> object:
        raise ApiError(204)

    @app.get("/boom")
    async def boom() -> object:
        raise RuntimeError("database exploded")

    return app


def test_to_json_response_pairs_status_and_payload() -> None:
    response = TestClient(_build_app()).get("/created")

    assert response.status_code == 201
    assert response.json() == {"statusCode": 201, "message": "Created", "data": {"id": 1}}


def test_api_error_is_formatted() -> None:
    response = TestClient(_build_app()).get("/api-error")

    assert response.status_code == 409
    assert response.json() == {"statusCode": 409, "message": "already exists", "errorCode": "DUPLICATE_NAME"}


def test_http_exception_with_dict_detail() -> None:
    response = TestClient(_build_app()).get("/http-error")

    assert response.status_code == 401
    assert response.json() == {"statusCode": 401, "message": "token expired", "errorCode": "INVALID_TOKEN"}


def test_http_exception_keeps_headers_and_uses_status_token() -> None:
    response = TestClient(_build_app()).get("/rate-limited")

    assert response.status_code == 429
    assert response.headers["retry-after"] == "5"
    assert response.json() == {"statusCode": 429, "message": "slow down", "errorCode": "TOO_MANY_REQUESTS"}


def test_unknown_route_is_not_found() -> None:
    response = TestClient(_build_app()).get("/missing")

    assert response.status_code == 404
    assert response.json() == {"statusCode": 404, "message": "Not Found", "errorCode": "NOT_FOUND"}


def test_validation_error_is_bad_request() -> None:
    response = TestClient(_build_app()).post("/validate", json={})
    body = response.json()

    assert response.status_code == 400
    assert body["statusCode"] == 400
    assert body["errorCode"] == "BAD_REQUEST"
    assert "required" in body["message"].lower()


def test_unexpected_error_hides_details_by_default() -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {
        "statusCode": 500,
        "message": "Internal Server Error",
        "errorCode": "INTERNAL_SERVER_ERROR",
    }


def test_unexpected_error_message_exposed_when_enabled() -> None:
    client = TestClient(_build_app(expose_internal_errors=True), raise_server_exceptions=False)
    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json()["message"] == "database exploded"
    assert response.json()["errorCode"] == "INTERNAL_SERVER_ERROR"


def test_unexpected_error_is_logged(caplog) -> None:
    client = TestClient(_build_app(), raise_server_exceptions=False)
    with caplog.at_level("ERROR", logger="response_kit.handlers"):
        client.get("/boom")

    assert any(record.getMessage() == "unhandled_exception" for record in caplog.records)


def test_not_modified_http_exception_has_empty_body() -> None:
    response = TestClient(_build_app()).get("/not-modified")

    assert response.status_code == 304
    assert response.content == b""
    assert response.headers["etag"] == '"v1"'


def test_api_error_below_400_has_empty_body() -> None:
    response = TestClient(_build_app()).get("/no-content")

    assert response.status_code == 204
    assert response.content == b""
