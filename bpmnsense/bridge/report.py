"""Analyzer report parsing.

Turns the analyzer's stdout into an ``AnalysisReport``. Structural
problems (not JSON, ``errors`` not a list of objects) raise ``ParseError``;
a bad report is never partially accepted. Field values are not judged
here: an unknown severity string passes through to the translator.
"""

from __future__ import annotations

import json
from typing import Any

from bpmnsense.types.errors import ErrorContext, ParseError
from bpmnsense.types.report import AnalysisReport, DiagnosticRecord, ReportSummary


def _int_or(value: Any, default: int | None) -> int | None:
    if isinstance(value, bool):
        return default
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return default


def _record_from_dict(raw: dict[str, Any]) -> DiagnosticRecord:
    suggestions = raw.get("suggestions") or []
    if not isinstance(suggestions, list):
        suggestions = []
    message = raw.get("message")
    code = raw.get("code")
    return DiagnosticRecord(
        severity=str(raw.get("severity", "")),
        message=message if isinstance(message, str) else "",
        line=_int_or(raw.get("line"), 1),  # type: ignore[arg-type]
        column=_int_or(raw.get("column"), 1),  # type: ignore[arg-type]
        start=_int_or(raw.get("start"), None),
        end=_int_or(raw.get("end"), None),
        suggestions=tuple(str(s) for s in suggestions),
        code="" if code is None else str(code),
    )


def _summary_from_dict(raw: Any, records: tuple[DiagnosticRecord, ...]) -> ReportSummary:
    if not isinstance(raw, dict):
        return ReportSummary.from_records(records)
    derived = ReportSummary.from_records(records)
    return ReportSummary(
        error_count=_int_or(raw.get("error_count"), derived.error_count),  # type: ignore[arg-type]
        warning_count=_int_or(raw.get("warning_count"), derived.warning_count),  # type: ignore[arg-type]
        has_errors=bool(raw.get("has_errors", derived.has_errors)),
    )


def parse_report(raw_output: str, file_path: str = "") -> AnalysisReport:
    """Parse analyzer JSON output into a report.

    Args:
        raw_output: The analyzer's stdout.
        file_path: Used when the document omits ``file``.

    Raises:
        ParseError: If the output is not a JSON object with an ``errors`` list
            of objects.
    """
    context = ErrorContext(operation="parse_report", file_path=file_path or None, component="report")

    try:
        data = json.loads(raw_output)
    except json.JSONDecodeError as e:
        raise ParseError(
            f"Analyzer output is not valid JSON: {e}",
            raw_output=raw_output,
            context=context,
            original_error=e,
        ) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object, got {type(data).__name__}",
            raw_output=raw_output,
            context=context,
        )

    if "errors" not in data:
        raise ParseError(
            "Analyzer report has no 'errors' field",
            raw_output=raw_output,
            context=context,
        )

    errors = data["errors"]
    if not isinstance(errors, list):
        raise ParseError(
            f"'errors' must be a list, got {type(errors).__name__}",
            raw_output=raw_output,
            context=context,
        )

    records: list[DiagnosticRecord] = []
    for index, item in enumerate(errors):
        if not isinstance(item, dict):
            raise ParseError(
                f"errors[{index}] must be an object, got {type(item).__name__}",
                raw_output=raw_output,
                context=context,
            )
        records.append(_record_from_dict(item))

    file = data.get("file")
    record_tuple = tuple(records)
    return AnalysisReport(
        file=file if isinstance(file, str) else file_path,
        errors=record_tuple,
        summary=_summary_from_dict(data.get("summary"), record_tuple),
    )
