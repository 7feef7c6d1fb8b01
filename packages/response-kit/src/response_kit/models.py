from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class SuccessResponse:
    # data mappings are not hashable
    __hash__ = None  # type: ignore[assignment]

    status_code: int
    message: str
    count: int | None = None
    data: Mapping[str, Any] | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"statusCode": self.status_code, "message": self.message}
        if self.count is not None:
            payload["count"] = self.count
        if self.data is not None:
            payload["data"] = self.data
        return payload


@dataclass(frozen=True)
class ErrorResponse:
    status_code: int
    message: str
    error_code: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"statusCode": self.status_code, "message": self.message}
        if self.error_code is not None:
            payload["errorCode"] = self.error_code
        return payload
