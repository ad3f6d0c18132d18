"""Tests for analyzer report parsing."""

import json

import pytest

from bpmnsense.bridge.report import parse_report
from bpmnsense.types.errors import ErrorCode, ParseError
from bpmnsense.types.report import AnalysisReport, DiagnosticRecord


def _record(**overrides):
    base = {
        "severity": "warning",
        "message": "unused lane",
        "line": 4,
        "column": 2,
        "start": 40,
        "end": 44,
        "suggestions": ["remove"],
        "code": "W010",
    }
    base.update(overrides)
    return base


class TestParseReport:
    """Tests for well-formed reports."""

    def test_full_report(self, spelling_report_json):
        report = parse_report(spelling_report_json)

        assert isinstance(report, AnalysisReport)
        assert report.file == "flow.bpmn"
        assert len(report) == 1
        record = report.errors[0]
        assert record == DiagnosticRecord(
            severity="error",
            message="unknown keyword 'strat', did you mean: 'start'",
            line=2,
            column=3,
            start=10,
            end=15,
            suggestions=(),
            code="E001",
        )
        assert report.summary.error_count == 1
        assert report.summary.has_errors is True

    def test_preserves_order(self):
        raw = json.dumps({"file": "f", "errors": [_record(code="A"), _record(code="B"), _record(code="C")]})
        assert [r.code for r in parse_report(raw).errors] == ["A", "B", "C"]

    def test_suggestions_field_kept(self):
        raw = json.dumps({"file": "f", "errors": [_record()]})
        assert parse_report(raw).errors[0].suggestions == ("remove",)

    def test_unknown_severity_passes_through(self):
        """Severity is judged by the translator, not the parser."""
        raw = json.dumps({"file": "f", "errors": [_record(severity="fatal")]})
        assert parse_report(raw).errors[0].severity == "fatal"

    @pytest.mark.parametrize("payload", [{"file": "f"}, {"fatal": "analyzer crashed"}, {}])
    def test_missing_errors_rejected(self, payload):
        with pytest.raises(ParseError) as exc_info:
            parse_report(json.dumps(payload))
        assert "errors" in str(exc_info.value)

    def test_missing_file_uses_argument(self):
        report = parse_report(json.dumps({"errors": []}), file_path="/tmp/x.bpmn")
        assert report.file == "/tmp/x.bpmn"

    def test_missing_summary_is_derived(self):
        raw = json.dumps({"file": "f", "errors": [_record(severity="error"), _record(severity="warning")]})
        summary = parse_report(raw).summary
        assert summary.error_count == 1
        assert summary.warning_count == 1
        assert summary.has_errors is True

    def test_missing_offsets_become_none(self):
        raw = json.dumps({"file": "f", "errors": [{"severity": "error", "message": "m", "line": 1, "column": 1}]})
        record = parse_report(raw).errors[0]
        assert record.start is None and record.end is None
        assert record.has_offsets is False

    def test_missing_message_becomes_empty(self):
        raw = json.dumps({"file": "f", "errors": [{"severity": "error", "line": 1, "column": 1, "start": 0, "end": 1}]})
        assert parse_report(raw).errors[0].message == ""


class TestParseReportFailures:
    """Malformed output fails loudly with ParseError."""

    def test_not_json(self):
        with pytest.raises(ParseError) as exc_info:
            parse_report("Segmentation fault")
        assert exc_info.value.code == ErrorCode.REPORT_MALFORMED
        assert exc_info.value.raw_output == "Segmentation fault"

    def test_truncated_json(self, spelling_report_json):
        with pytest.raises(ParseError):
            parse_report(spelling_report_json[:-10])

    def test_top_level_array(self):
        with pytest.raises(ParseError, match="Expected a JSON object"):
            parse_report("[]")

    def test_errors_not_a_list(self):
        with pytest.raises(ParseError, match="'errors' must be a list"):
            parse_report(json.dumps({"errors": {"a": 1}}))

    def test_partial_records_not_dropped(self):
        """One non-object entry rejects the whole report."""
        raw = json.dumps({"errors": [_record(), "oops", _record()]})
        with pytest.raises(ParseError, match=r"errors\[1\]"):
            parse_report(raw)
