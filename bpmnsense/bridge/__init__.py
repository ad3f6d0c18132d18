"""
Diagnostics & quick-fix bridge.

Pipeline: invoke analyzer -> parse report -> translate to LSP diagnostics,
and on request: extract "did you mean" candidates -> locate the word ->
assemble quick-fixes.
"""

from .checker import ProcessChecker
from .diagnostics import DiagnosticsBridge
from .invoker import AnalyzerInvoker, RawOutput, build_command
from .quickfix import CandidateFix, assemble_fixes, fix_label, fixes_for_diagnostic
from .ranges import line_at, map_range, offset_to_position
from .report import parse_report
from .suggestions import extract_suggestions
from .translator import map_severity, translate, translate_record
from .words import IDENTIFIER_CHARS, NAME_CHARS, WordSpan, locate_word

__all__ = [
    # Ranges
    "line_at",
    "map_range",
    "offset_to_position",
    # Invocation
    "AnalyzerInvoker",
    "RawOutput",
    "build_command",
    # Reports
    "parse_report",
    "map_severity",
    "translate",
    "translate_record",
    # Quick-fixes
    "IDENTIFIER_CHARS",
    "NAME_CHARS",
    "WordSpan",
    "locate_word",
    "extract_suggestions",
    "CandidateFix",
    "assemble_fixes",
    "fix_label",
    "fixes_for_diagnostic",
    # Orchestration
    "ProcessChecker",
    "DiagnosticsBridge",
]
