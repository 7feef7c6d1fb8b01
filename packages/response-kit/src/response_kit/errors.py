from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus

from response_kit.constants import status_phrase
from response_kit.helper import ResponseHelper, get_response_helper
from response_kit.models import ErrorResponse


@dataclass(eq=False)
class ApiError(Exception):
    """Raised by route handlers to abort with a formatted error response."""

    status_code: int
    message: str | None = None
    error_code: str | None = None

    def __str__(self) -> str:
        return self.message or status_phrase(self.status_code)

    def to_response(self, helper: ResponseHelper | None = None) -> ErrorResponse:
        helper = helper or get_response_helper()
        return helper.for_status(self.status_code, self.message, self.error_code)

    @classmethod
    def bad_request(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.BAD_REQUEST.value, message, error_code)

    @classmethod
    def unauthorized(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.UNAUTHORIZED.value, message, error_code)

    @classmethod
    def forbidden(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.FORBIDDEN.value, message, error_code)

    @classmethod
    def not_found(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.NOT_FOUND.value, message, error_code)

    @classmethod
    def conflict(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.CONFLICT.value, message, error_code)

    @classmethod
    def internal(cls, message: str | None = None, error_code: str | None = None) -> ApiError:
        return cls(HTTPStatus.INTERNAL_SERVER_ERROR.value, message, error_code)
