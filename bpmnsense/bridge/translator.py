"""Report records to LSP diagnostics.

One diagnostic per record, in report order. Translation cannot fail: a
record with missing fields still yields a best-effort diagnostic so one
bad record never hides the others.
"""

from __future__ import annotations

from collections.abc import Iterable

from lsprotocol import types as lsp

from bpmnsense.bridge.ranges import map_range
from bpmnsense.constants import DIAGNOSTIC_SOURCE, LEGACY_RANGE_WIDTH
from bpmnsense.types.report import AnalysisReport, DiagnosticRecord, Severity

_SEVERITY_MAP: dict[str, lsp.DiagnosticSeverity] = {
    Severity.ERROR.value: lsp.DiagnosticSeverity.Error,
    Severity.WARNING.value: lsp.DiagnosticSeverity.Warning,
    Severity.INFO.value: lsp.DiagnosticSeverity.Information,
    Severity.HINT.value: lsp.DiagnosticSeverity.Hint,
}


def map_severity(severity: str) -> lsp.DiagnosticSeverity:
    """Map an analyzer severity string; anything unrecognized is an error."""
    return _SEVERITY_MAP.get(severity, lsp.DiagnosticSeverity.Error)


def translate_record(record: DiagnosticRecord) -> lsp.Diagnostic:
    width = record.width
    if width is None:
        width = LEGACY_RANGE_WIDTH
    return lsp.Diagnostic(
        range=map_range(record.line, record.column, width),
        message=record.message or "",
        severity=map_severity(record.severity),
        code=record.code or None,
        source=DIAGNOSTIC_SOURCE,
    )


def translate(report: AnalysisReport | Iterable[DiagnosticRecord]) -> list[lsp.Diagnostic]:
    """Translate a report (or bare records) into editor diagnostics."""
    records = report.errors if isinstance(report, AnalysisReport) else report
    return [translate_record(record) for record in records]
