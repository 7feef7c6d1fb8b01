"""Standardized success and error response payloads."""

from response_kit.constants import ERROR_CODES, REASON_PHRASES, ErrorCode
from response_kit.errors import ApiError
from response_kit.handlers import install_exception_handlers, to_json_response
from response_kit.helper import ResponseHelper, get_response_helper
from response_kit.models import ErrorResponse, SuccessResponse

__all__ = [
    "ApiError",
    "ERROR_CODES",
    "ErrorCode",
    "ErrorResponse",
    "REASON_PHRASES",
    "ResponseHelper",
    "SuccessResponse",
    "get_response_helper",
    "install_exception_handlers",
    "to_json_response",
]
