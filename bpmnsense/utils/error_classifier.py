"""Error classification via lookup tables.

Decides what the check flow does with a failure: every failure is logged,
only those a user can fix by changing configuration are surfaced.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from bpmnsense.types.errors import (
    ConfigurationError,
    InvocationError,
    InvocationFailure,
    ParseError,
)


class ErrorCategory(str, Enum):
    """High-level error categories for handling decisions."""

    CONFIGURATION = "configuration"
    TRANSIENT = "transient"
    ANALYZER = "analyzer"
    MALFORMED_OUTPUT = "malformed_output"
    UNKNOWN = "unknown"


@dataclass(frozen=True, slots=True)
class ErrorClassification:
    """Classification result consumed by the check flow."""

    category: ErrorCategory
    surface_to_user: bool


# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

_INVOCATION_TABLE: dict[InvocationFailure, ErrorClassification] = {
    InvocationFailure.NOT_FOUND: ErrorClassification(ErrorCategory.CONFIGURATION, True),
    InvocationFailure.SPAWN_FAILED: ErrorClassification(ErrorCategory.TRANSIENT, False),
    InvocationFailure.TIMEOUT: ErrorClassification(ErrorCategory.TRANSIENT, False),
    InvocationFailure.ANALYZER_STDERR: ErrorClassification(ErrorCategory.ANALYZER, False),
}

_TYPE_TABLE: list[tuple[tuple[type[Exception], ...], ErrorClassification]] = [
    (
        (ParseError, ValueError),
        ErrorClassification(ErrorCategory.MALFORMED_OUTPUT, False),
    ),
    (
        (ConfigurationError,),
        ErrorClassification(ErrorCategory.CONFIGURATION, True),
    ),
    (
        (FileNotFoundError,),
        ErrorClassification(ErrorCategory.CONFIGURATION, True),
    ),
    (
        (TimeoutError, ConnectionError, BrokenPipeError),
        ErrorClassification(ErrorCategory.TRANSIENT, False),
    ),
]

# Shells and some launchers report a missing program only in text.
_MSG_PATTERNS: list[tuple[re.Pattern[str], ErrorClassification]] = [
    (
        re.compile(r"ENOENT|command not found|no such file or directory|is not recognized", re.I),
        ErrorClassification(ErrorCategory.CONFIGURATION, True),
    ),
]

_UNKNOWN = ErrorClassification(ErrorCategory.UNKNOWN, False)


def classify_error(error: Exception) -> ErrorClassification:
    """Classify an error into a category and whether to surface it."""
    if isinstance(error, InvocationError):
        return _INVOCATION_TABLE[error.failure]

    for exc_types, cls in _TYPE_TABLE:
        if isinstance(error, exc_types):
            return cls

    msg = str(error)
    for pattern, cls in _MSG_PATTERNS:
        if pattern.search(msg):
            return cls

    return _UNKNOWN


def should_surface(error: Exception) -> bool:
    """Check if an error should be shown to the user rather than only logged."""
    return classify_error(error).surface_to_user
