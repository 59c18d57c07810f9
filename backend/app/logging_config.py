"""JSON logging for the Narrative Engine API.

``configure_logging()`` runs once at import of ``app.main``. From then on every
``logging.getLogger(__name__)`` record, including those from the
``narrative_engine`` library, is written to stdout as one JSON object per line.

Each request gets a request context: a dict holding its ``X-Request-ID`` plus
whatever the handlers bind with ``bind_request_context()`` (the narrative
outcome, the tone intensity). Every record logged while the request is handled
carries those fields, and so does the single access record written at the end.
"""

import json
import logging
import time
import uuid
from contextvars import ContextVar
from typing import Any, Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

REQUEST_ID_HEADER = "X-Request-ID"

# The dict is shared by reference with the endpoint task, so fields bound
# inside the handler are visible to the middleware afterwards.
_request_context_var: ContextVar[Optional[dict[str, Any]]] = ContextVar(
    "request_context", default=None
)

# Attributes every LogRecord has; anything else on a record came from extra={}
_STANDARD_ATTRS = frozenset(logging.makeLogRecord({}).__dict__) | {"message", "asctime"}

_QUIET_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def get_request_context() -> dict[str, Any]:
    """Copy of the fields bound to the current request, empty outside one."""
    return dict(_request_context_var.get() or {})


def get_request_id() -> str:
    return get_request_context().get("request_id", "")


def bind_request_context(**fields: Any) -> None:
    """Attach fields to every later record of the current request.

    Outside a request there is nothing to bind to and the call does nothing.
    """
    context = _request_context_var.get()
    if context is not None:
        context.update(fields)


class JsonFormatter(logging.Formatter):
    """Render a record as a single-line JSON object.

    Layering: standard fields, then the request context, then ``extra=`` values.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(get_request_context())
        payload.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _STANDARD_ATTRS and not key.startswith("_")
        )

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def configure_logging(level: str = "INFO") -> None:
    """Route the root logger, and with it the narrative_engine loggers, to JSON on stdout.

    Args:
        level: Level name such as ``"INFO"`` or ``"DEBUG"``; unknown names fall back to INFO.
    """
    root = logging.getLogger()
    root.handlers.clear()

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).info("JSON logging configured", extra={"log_level": level.upper()})


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Open a request context for each request and echo its ID back.

    An incoming ``X-Request-ID`` from a proxy is reused; otherwise a new hex
    UUID is minted. The access record carries every field the handler bound,
    so one line per request says which narrative outcome it produced.
    """

    def __init__(self, app: ASGIApp, header_name: str = REQUEST_ID_HEADER) -> None:
        super().__init__(app)
        self._header_name = header_name

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        context: dict[str, Any] = {
            "request_id": request.headers.get(self._header_name) or uuid.uuid4().hex
        }
        token = _request_context_var.set(context)
        started = time.monotonic()
        try:
            response = await call_next(request)
        finally:
            _request_context_var.reset(token)

        response.headers[self._header_name] = context["request_id"]

        logging.getLogger("app.access").info(
            "%s %s %s",
            request.method,
            request.url.path,
            response.status_code,
            extra={
                **context,
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
                "duration_ms": round((time.monotonic() - started) * 1000, 1),
            },
        )
        return response
