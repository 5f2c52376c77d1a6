import logging
import uuid
from contextvars import ContextVar
from typing import Optional
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

CORRELATION_HEADER = "X-Correlation-ID"
MAX_CORRELATION_ID_LENGTH = 128

correlation_id_var: ContextVar[str] = ContextVar("correlation_id", default="N/A")


def _accept_correlation_id(value: Optional[str]) -> str:
    # Client ids end up in every log line, so only short printable ones are reused.
    if value and len(value) <= MAX_CORRELATION_ID_LENGTH and value.isprintable():
        return value
    return str(uuid.uuid4())


class TracingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next):
        correlation_id = _accept_correlation_id(request.headers.get(CORRELATION_HEADER))
        request.state.correlation_id = correlation_id
        token = correlation_id_var.set(correlation_id)
        try:
            response = await call_next(request)
        finally:
            correlation_id_var.reset(token)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response


class CorrelationIdFilter(logging.Filter):
    """Stamps each record with the id of the request being served."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.correlation_id = correlation_id_var.get()
        return True


def get_correlation_id(request: Request) -> str:
    return getattr(request.state, "correlation_id", correlation_id_var.get())
