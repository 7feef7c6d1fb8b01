from __future__ import annotations

from http import HTTPStatus
import re
from typing import Any, Mapping

from response_kit.constants import (
    ERROR_CODES,
    ERROR_KIND_BY_STATUS,
    FORMATTED_STATUSES,
    REASON_PHRASES,
    status_phrase,
)
from response_kit.models import ErrorResponse, SuccessResponse

_NON_TOKEN_CHARS = re.compile(r"[^A-Z0-9]+")


def _phrase_token(phrase: str) -> str:
    return _NON_TOKEN_CHARS.sub("_", phrase.upper()).strip("_")


class ResponseHelper:
    """Builds standardized success and error response records.

    The reason phrase and error code tables are resolved once on construction,
    so a table missing one of the formatted statuses or error kinds raises
    ``KeyError`` here rather than on a later call.
    """

    def __init__(
        self,
        reason_phrases: Mapping[int, str] = REASON_PHRASES,
        error_codes: Mapping[str, str] = ERROR_CODES,
    ) -> None:
        self._phrases: dict[int, str] = {status.value: reason_phrases[status.value] for status in FORMATTED_STATUSES}
        self._codes: dict[int, str] = {
            status_code: error_codes[kind] for status_code, kind in ERROR_KIND_BY_STATUS.items()
        }

    def ok(self, data: Mapping[str, Any] | None = None, count: int | None = None) -> SuccessResponse:
        return SuccessResponse(
            status_code=HTTPStatus.OK.value,
            message=self._phrases[HTTPStatus.OK.value],
            count=count,
            data=data,
        )

    def created(self, data: Mapping[str, Any]) -> SuccessResponse:
        return SuccessResponse(
            status_code=HTTPStatus.CREATED.value,
            message=self._phrases[HTTPStatus.CREATED.value],
            data={} if data is None else data,
        )

    def bad_request(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.BAD_REQUEST.value, message, error_code)

    def unauthorized(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.UNAUTHORIZED.value, message, error_code)

    def forbidden(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.FORBIDDEN.value, message, error_code)

    def not_found(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.NOT_FOUND.value, message, error_code)

    def conflict(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.CONFLICT.value, message, error_code)

    def error(self, message: str | None = None, error_code: str | None = None) -> ErrorResponse:
        return self._error(HTTPStatus.INTERNAL_SERVER_ERROR.value, message, error_code)

    def for_status(
        self,
        status_code: int,
        message: str | None = None,
        error_code: str | None = None,
    ) -> ErrorResponse:
        """Build an error record for any 4xx/5xx status.

        Statuses with a dedicated operation use its defaults; any other status
        falls back to its standard reason phrase and an upper-snake token of it.
        """
        status_code = int(status_code)
        if status_code in self._codes:
            return self._error(status_code, message, error_code)
        phrase = status_phrase(status_code)
        return ErrorResponse(
            status_code=status_code,
            message=phrase if message is None else message,
            error_code=_phrase_token(phrase) if error_code is None else error_code,
        )

    def _error(self, status_code: int, message: str | None, error_code: str | None) -> ErrorResponse:
        return ErrorResponse(
            status_code=status_code,
            message=self._phrases[status_code] if message is None else message,
            error_code=self._codes[status_code] if error_code is None else error_code,
        )


_response_helper = ResponseHelper()


def get_response_helper() -> ResponseHelper:
    return _response_helper
