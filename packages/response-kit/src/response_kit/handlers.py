from __future__ import annotations

import logging
from typing import Any, Mapping

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from starlette.exceptions import HTTPException as StarletteHTTPException

from response_kit.errors import ApiError
from response_kit.helper import ResponseHelper, get_response_helper
from response_kit.models import ErrorResponse, SuccessResponse

logger = logging.getLogger(__name__)


def to_json_response(
    record: SuccessResponse | ErrorResponse,
    headers: Mapping[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=record.status_code,
        content=jsonable_encoder(record.to_payload()),
        headers=dict(headers) if headers else None,
    )


# below 400 (204, 304 and redirects) the response carries no error body
def _bodyless_response(status_code: int, headers: Mapping[str, str] | None = None) -> Response:
    return Response(status_code=status_code, headers=dict(headers) if headers else None)


def _http_exception_record(helper: ResponseHelper, exc: StarletteHTTPException) -> ErrorResponse:
    detail: Any = exc.detail
    if isinstance(detail, dict):
        return helper.for_status(exc.status_code, detail.get("message"), detail.get("code"))
    return helper.for_status(exc.status_code, None if detail is None else str(detail))


def install_exception_handlers(
    app: FastAPI,
    helper: ResponseHelper | None = None,
    expose_internal_errors: bool = False,
) -> None:
    responses = helper or get_response_helper()

    @app.exception_handler(ApiError)
    async def handle_api_error(request: Request, exc: ApiError) -> Response:
        if exc.status_code < 400:
            return _bodyless_response(exc.status_code)
        record = exc.to_response(responses)
        logger.info(
            "api_error",
            extra={
                "component": "response_kit",
                "path": request.url.path,
                "status_code": record.status_code,
                "error_code": record.error_code,
            },
        )
        return to_json_response(record)

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(_: Request, exc: StarletteHTTPException) -> Response:
        if exc.status_code < 400:
            return _bodyless_response(exc.status_code, exc.headers)
        return to_json_response(_http_exception_record(responses, exc), headers=exc.headers)

    @app.exception_handler(RequestValidationError)
    async def handle_validation_error(_: Request, exc: RequestValidationError) -> JSONResponse:
        message = "; ".join(err["msg"] for err in exc.errors())
        return to_json_response(responses.bad_request(message or None))

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.error(
            "unhandled_exception",
            exc_info=exc,
            extra={"component": "response_kit", "path": request.url.path},
        )
        span = trace.get_current_span()
        span.record_exception(exc)
        span.set_status(Status(StatusCode.ERROR, type(exc).__name__))
        message = str(exc) if expose_internal_errors and str(exc) else None
        return to_json_response(responses.error(message))
