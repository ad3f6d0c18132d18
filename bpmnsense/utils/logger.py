"""
Stderr-only logging for the diagnostics bridge.

Editor integrations talk to their host over STDOUT (LSP stdio transport,
or the ``check`` command's report), so every log line goes to STDERR.

Request Context Support:
- Each analyzer run gets a request id and the uri of the document it checks
- Carried in contextvars so it follows the check across ``await`` points
- Injected into every log record emitted inside ``with_request_context()``
"""

import os
import secrets
import sys
import time
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Generator

from loguru import logger as loguru_logger

from bpmnsense.constants import ENV_DEBUG

# ============================================================================
# Request Context
# ============================================================================


@dataclass
class RequestContext:
    """Context for one analyzer run."""

    request_id: str
    document_uri: str | None = None
    start_time: float | None = None

    @property
    def elapsed(self) -> float:
        if self.start_time is None:
            return 0.0
        return time.time() - self.start_time


_request_context: ContextVar[RequestContext | None] = ContextVar(
    "request_context", default=None
)


def generate_request_id() -> str:
    """
    Generate a unique request ID for correlation.

    Format: chk_<timestamp_base36>_<random_hex>
    """
    timestamp = int(time.time() * 1000)
    random_part = secrets.token_hex(4)
    return f"chk_{base36_encode(timestamp)}_{random_part}"


def base36_encode(number: int) -> str:
    """Encode an integer to base36 string."""
    if number == 0:
        return "0"

    chars = "0123456789abcdefghijklmnopqrstuvwxyz"
    result = []
    while number:
        result.append(chars[number % 36])
        number //= 36
    return "".join(reversed(result))


def get_request_context() -> RequestContext | None:
    """Get the current request context (if any)."""
    return _request_context.get()


@contextmanager
def with_request_context(
    document_uri: str | None = None,
    request_id: str | None = None,
) -> Generator[RequestContext, None, None]:
    """
    Run a block with a request context.

    All log messages within this context carry the request id and
    document uri. Works across async operations via contextvars.
    """
    context = RequestContext(
        request_id=request_id or generate_request_id(),
        document_uri=document_uri,
        start_time=time.time(),
    )
    token = _request_context.set(context)
    try:
        yield context
    finally:
        _request_context.reset(token)


# ============================================================================
# Logger Configuration
# ============================================================================

_LOG_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "{extra[request_id]} | <cyan>{name}</cyan> - <level>{message}</level>"
)


def is_debug_enabled() -> bool:
    """Check if debug mode is enabled."""
    return os.environ.get(ENV_DEBUG, "").lower() == "true"


def _inject_request_context(record: Any) -> None:
    ctx = _request_context.get()
    if ctx is not None:
        record["extra"]["request_id"] = ctx.request_id
        record["extra"]["document_uri"] = ctx.document_uri


def configure_logging(level: str | None = None) -> None:
    """Route all log output to stderr with request ids attached."""
    loguru_logger.remove()
    loguru_logger.configure(
        extra={"request_id": "-", "document_uri": None},
        patcher=_inject_request_context,
    )
    loguru_logger.add(
        sys.stderr,
        level=level or ("DEBUG" if is_debug_enabled() else "INFO"),
        format=_LOG_FORMAT,
    )


# Export loguru logger for direct use
logger = loguru_logger
