"""
Error handling system for BPMNSense.

Structured error types for the diagnostics bridge. Two failure kinds come
out of a check run: ``InvocationError`` (the analyzer could not be run or
produced only stderr) and ``ParseError`` (its stdout was not a valid
report). Both are caught at the top of the per-document check flow.
"""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, IntEnum
from typing import Any

from bpmnsense.constants import utcnow


class ErrorCode(IntEnum):
    """Internal error codes for categorization."""

    # Analyzer invocation errors (1000-1999)
    EXECUTABLE_NOT_FOUND = 1001
    SPAWN_FAILED = 1002
    ANALYZER_TIMEOUT = 1003
    ANALYZER_FAILED = 1004

    # Report errors (2000-2999)
    REPORT_MALFORMED = 2001

    # Configuration errors (3000-3999)
    INVALID_CONFIG = 3001


class ErrorSeverity(str, Enum):
    """Error severity levels."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    CRITICAL = "critical"


class InvocationFailure(str, Enum):
    """Why an analyzer invocation failed."""

    NOT_FOUND = "not_found"
    SPAWN_FAILED = "spawn_failed"
    TIMEOUT = "timeout"
    ANALYZER_STDERR = "analyzer_stderr"


@dataclass
class RecoveryAction:
    """Suggested action to recover from an error."""

    description: str
    command: str | None = None


@dataclass
class ErrorContext:
    """Context information for an error."""

    operation: str | None = None
    file_path: str | None = None
    component: str | None = None
    timestamp: datetime = field(default_factory=utcnow)
    additional_info: dict[str, Any] = field(default_factory=dict)


class BpmnSenseError(Exception):
    """Base error class for BPMNSense."""

    def __init__(
        self,
        code: ErrorCode,
        message: str,
        user_message: str,
        severity: str = ErrorSeverity.MEDIUM,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.severity = severity
        self.user_message = user_message
        self.context = context or ErrorContext()
        self.recovery_actions = recovery_actions or []
        self.original_error = original_error

        self.context.timestamp = utcnow()

    def get_formatted_message(self) -> str:
        """Get a formatted error message for display to users."""
        parts = [
            f"[Error] {self.user_message}",
            f"   Code: {self.code.value}",
        ]

        if self.context.operation:
            parts.append(f"   Operation: {self.context.operation}")
        if self.context.file_path:
            parts.append(f"   File: {self.context.file_path}")
        if self.context.component:
            parts.append(f"   Component: {self.context.component}")

        if self.recovery_actions:
            parts.append("")
            parts.append("Suggested actions:")
            for i, action in enumerate(self.recovery_actions, 1):
                parts.append(f"   {i}. {action.description}")
                if action.command:
                    parts.append(f"      Run: {action.command}")

        return "\n".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dictionary."""
        return {
            "name": self.__class__.__name__,
            "code": self.code.value,
            "message": str(self),
            "user_message": self.user_message,
            "severity": self.severity,
            "context": {
                "operation": self.context.operation,
                "file_path": self.context.file_path,
                "component": self.context.component,
                "timestamp": self.context.timestamp.isoformat(),
                "additional_info": self.context.additional_info,
            },
            "recovery_actions": [
                {"description": a.description, "command": a.command}
                for a in self.recovery_actions
            ],
            "original_error": str(self.original_error) if self.original_error else None,
        }


_INVOCATION_CODES: dict[InvocationFailure, ErrorCode] = {
    InvocationFailure.NOT_FOUND: ErrorCode.EXECUTABLE_NOT_FOUND,
    InvocationFailure.SPAWN_FAILED: ErrorCode.SPAWN_FAILED,
    InvocationFailure.TIMEOUT: ErrorCode.ANALYZER_TIMEOUT,
    InvocationFailure.ANALYZER_STDERR: ErrorCode.ANALYZER_FAILED,
}


class InvocationError(BpmnSenseError):
    """The analyzer process could not be run to a usable result."""

    def __init__(
        self,
        message: str,
        failure: InvocationFailure,
        user_message: str | None = None,
        stderr: str = "",
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=_INVOCATION_CODES[failure],
            message=message,
            user_message=user_message or "BPMNCode check failed.",
            severity=ErrorSeverity.HIGH if failure is InvocationFailure.NOT_FOUND else ErrorSeverity.MEDIUM,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )
        self.failure = failure
        self.stderr = stderr

    @property
    def executable_missing(self) -> bool:
        return self.failure is InvocationFailure.NOT_FOUND


class ParseError(BpmnSenseError):
    """The analyzer's stdout was not a well-formed report."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        raw_output: str = "",
        context: ErrorContext | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.REPORT_MALFORMED,
            message=message,
            user_message=user_message or "Failed to parse BPMNCode output.",
            severity=ErrorSeverity.MEDIUM,
            context=context,
            original_error=original_error,
        )
        self.raw_output = raw_output


class ConfigurationError(BpmnSenseError):
    """Error related to configuration issues."""

    def __init__(
        self,
        message: str,
        user_message: str | None = None,
        context: ErrorContext | None = None,
        recovery_actions: list[RecoveryAction] | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.INVALID_CONFIG,
            message=message,
            user_message=user_message or "Configuration error occurred.",
            severity=ErrorSeverity.HIGH,
            context=context,
            recovery_actions=recovery_actions,
            original_error=original_error,
        )
