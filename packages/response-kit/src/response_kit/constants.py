from __future__ import annotations

from enum import StrEnum
from http import HTTPStatus
from types import MappingProxyType
from typing import Mapping


class ErrorCode(StrEnum):
    BAD_REQUEST = "BAD_REQUEST"
    UNAUTHORIZED = "UNAUTHORIZED"
    FORBIDDEN = "FORBIDDEN"
    NOT_FOUND = "NOT_FOUND"
    CONFLICT = "CONFLICT"
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


FORMATTED_STATUSES: tuple[HTTPStatus, ...] = (
    HTTPStatus.OK,
    HTTPStatus.CREATED,
    HTTPStatus.BAD_REQUEST,
    HTTPStatus.UNAUTHORIZED,
    HTTPStatus.FORBIDDEN,
    HTTPStatus.NOT_FOUND,
    HTTPStatus.CONFLICT,
    HTTPStatus.INTERNAL_SERVER_ERROR,
)

# status code -> error kind, for the statuses that have a dedicated error operation
ERROR_KIND_BY_STATUS: Mapping[int, str] = MappingProxyType(
    {
        HTTPStatus.BAD_REQUEST.value: ErrorCode.BAD_REQUEST.name,
        HTTPStatus.UNAUTHORIZED.value: ErrorCode.UNAUTHORIZED.name,
        HTTPStatus.FORBIDDEN.value: ErrorCode.FORBIDDEN.name,
        HTTPStatus.NOT_FOUND.value: ErrorCode.NOT_FOUND.name,
        HTTPStatus.CONFLICT.value: ErrorCode.CONFLICT.name,
        HTTPStatus.INTERNAL_SERVER_ERROR.value: ErrorCode.INTERNAL_SERVER_ERROR.name,
    }
)

REASON_PHRASES: Mapping[int, str] = MappingProxyType(
    {status.value: status.phrase for status in FORMATTED_STATUSES}
)

ERROR_CODES: Mapping[str, str] = MappingProxyType({code.name: code.value for code in ErrorCode})


def status_phrase(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Error"
