from __future__ import annotations

import logging

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

_configured = False
_logging_configured = False


def _normalize_level(level: str | int) -> str | int:
    return level.upper() if isinstance(level, str) else level


def configure_logging(level: str | int = "INFO") -> None:
    global _logging_configured
    normalized = _normalize_level(level)
    if not _logging_configured:
        logging.basicConfig(level=normalized, format=LOG_FORMAT)
        _logging_configured = True
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(normalized)


def configure_otel(service_name: str) -> None:
    global _configured
    if _configured:
        return
    provider = TracerProvider(resource=Resource.create({"service.name": service_name}))
    trace.set_tracer_provider(provider)
    _configured = True
