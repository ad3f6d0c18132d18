"""
BPMNSense utility modules.

- Logging (stderr-only, request-scoped)
- Error classification (log-only vs surfaced failures)
- Subprocess helpers
"""

from .error_classifier import (
    ErrorCategory,
    ErrorClassification,
    classify_error,
    should_surface,
)
from .logger import (
    RequestContext,
    configure_logging,
    generate_request_id,
    get_request_context,
    is_debug_enabled,
    logger,
    with_request_context,
)
from .subprocess_util import format_command, quote_arg, split_command, subprocess_kwargs

__all__ = [
    # Logger
    "RequestContext",
    "configure_logging",
    "generate_request_id",
    "get_request_context",
    "is_debug_enabled",
    "logger",
    "with_request_context",
    # Error classifier
    "ErrorCategory",
    "ErrorClassification",
    "classify_error",
    "should_surface",
    # Subprocess
    "format_command",
    "quote_arg",
    "split_command",
    "subprocess_kwargs",
]
