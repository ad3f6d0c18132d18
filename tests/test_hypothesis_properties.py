"""Hypothesis property-based tests for range mapping and translation.

Properties tested:
- Mapped ranges never hold negative coordinates or inverted columns
- Translation is deterministic for an unchanged report
- Severity mapping is total
- Suggestion extraction and word location never raise
"""

from hypothesis import given
from hypothesis import strategies as st
from lsprotocol import types as lsp

from bpmnsense.bridge.suggestions import extract_suggestions
from bpmnsense.bridge.translator import map_severity, translate
from bpmnsense.bridge.words import locate_word
from bpmnsense.types.report import AnalysisReport, DiagnosticRecord


@st.composite
def records(draw):
    start = draw(st.integers(min_value=0, max_value=10_000))
    end = draw(st.integers(min_value=start, max_value=start + 500))
    return DiagnosticRecord(
        severity=draw(st.sampled_from(["error", "warning", "info", "hint", "bogus"])),
        message=draw(st.text(max_size=60)),
        line=draw(st.integers(min_value=1, max_value=100_000)),
        column=draw(st.integers(min_value=1, max_value=1_000)),
        start=start,
        end=end,
        code=draw(st.text(max_size=6)),
    )


@given(st.lists(records(), max_size=20))
def test_ranges_are_valid(recs):
    for record, diag in zip(recs, translate(recs)):
        r = diag.range
        assert r.start.line >= 0 and r.start.character >= 0
        assert r.end.character >= r.start.character
        assert r.end.line == r.start.line
        assert r.end.character - r.start.character == record.end - record.start


@given(st.lists(records(), max_size=20))
def test_translation_is_deterministic(recs):
    report = AnalysisReport(file="f.bpmn", errors=tuple(recs))
    assert translate(report) == translate(report)


@given(st.text(max_size=20))
def test_severity_mapping_is_total(severity):
    mapped = map_severity(severity)
    assert isinstance(mapped, lsp.DiagnosticSeverity)
    if severity not in {"warning", "info", "hint"}:
        assert mapped == lsp.DiagnosticSeverity.Error


@given(st.text(max_size=200))
def test_extraction_never_raises(message):
    out = extract_suggestions(message)
    assert all(piece for piece in out)
    if "did you mean" not in message.lower():
        assert out == []


@given(st.text(max_size=80), st.integers(min_value=-5, max_value=100))
def test_located_word_matches_slice(line, column):
    span = locate_word(line, column)
    assert 0 <= span.start <= span.end <= len(line)
    assert line[span.start:span.end] == span.word
