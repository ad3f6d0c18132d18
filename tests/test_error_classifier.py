"""
Tests for the error classifier and error types.

- Invocation failures by kind
- Type-table and message-pattern fallback
- Which failures are surfaced to the user
"""

import pytest

from bpmnsense.types.errors import (
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    InvocationError,
    InvocationFailure,
    ParseError,
    RecoveryAction,
)
from bpmnsense.utils import ErrorCategory, ErrorClassification, classify_error, should_surface


class TestErrorClassification:
    """Tests for ErrorClassification dataclass."""

    def test_frozen(self):
        c = ErrorClassification(ErrorCategory.UNKNOWN, False)
        with pytest.raises(AttributeError):
            c.category = ErrorCategory.TRANSIENT  # type: ignore[misc]


class TestInvocationFailures:
    """Invocation errors are classified by failure kind."""

    def test_not_found_is_surfaced(self):
        err = InvocationError("missing", failure=InvocationFailure.NOT_FOUND)
        c = classify_error(err)
        assert c.category == ErrorCategory.CONFIGURATION
        assert c.surface_to_user is True

    @pytest.mark.parametrize(
        "failure,category",
        [
            (InvocationFailure.TIMEOUT, ErrorCategory.TRANSIENT),
            (InvocationFailure.SPAWN_FAILED, ErrorCategory.TRANSIENT),
            (InvocationFailure.ANALYZER_STDERR, ErrorCategory.ANALYZER),
        ],
    )
    def test_other_failures_logged_only(self, failure, category):
        c = classify_error(InvocationError("x", failure=failure))
        assert c.category == category
        assert c.surface_to_user is False

    def test_error_codes(self):
        assert InvocationError("x", failure=InvocationFailure.TIMEOUT).code == ErrorCode.ANALYZER_TIMEOUT
        assert InvocationError("x", failure=InvocationFailure.NOT_FOUND).code == ErrorCode.EXECUTABLE_NOT_FOUND


class TestOtherErrors:
    """Type table and message patterns."""

    def test_parse_error(self):
        c = classify_error(ParseError("bad"))
        assert c.category == ErrorCategory.MALFORMED_OUTPUT
        assert c.surface_to_user is False

    def test_configuration_error_surfaced(self):
        assert should_surface(ConfigurationError("bad config")) is True

    def test_file_not_found_surfaced(self):
        assert should_surface(FileNotFoundError("bpmncode")) is True

    def test_enoent_message(self):
        c = classify_error(RuntimeError("spawn bpmncode ENOENT"))
        assert c.category == ErrorCategory.CONFIGURATION

    def test_shell_not_found_message(self):
        assert should_surface(RuntimeError("sh: 1: bpmncode: command not found")) is True

    def test_unknown(self):
        c = classify_error(RuntimeError("something odd"))
        assert c.category == ErrorCategory.UNKNOWN
        assert c.surface_to_user is False


class TestErrorFormatting:
    """Tests for BpmnSenseError presentation helpers."""

    def test_formatted_message(self):
        err = InvocationError(
            "Analyzer executable not found: bpmncode",
            failure=InvocationFailure.NOT_FOUND,
            user_message="BPMNCode executable not found.",
            context=ErrorContext(operation="invoke", file_path="/tmp/f.bpmn"),
            recovery_actions=[RecoveryAction("Install bpmncode", command="pip install bpmncode")],
        )
        text = err.get_formatted_message()
        assert "BPMNCode executable not found." in text
        assert "File: /tmp/f.bpmn" in text
        assert "Run: pip install bpmncode" in text

    def test_to_dict(self):
        err = ParseError("bad json", context=ErrorContext(file_path="/tmp/f.bpmn"))
        d = err.to_dict()
        assert d["name"] == "ParseError"
        assert d["code"] == ErrorCode.REPORT_MALFORMED.value
        assert d["context"]["file_path"] == "/tmp/f.bpmn"
