"""
BPMNSense type definitions.

Wire-format report records and the error taxonomy.
"""

from .errors import (
    BpmnSenseError,
    ConfigurationError,
    ErrorCode,
    ErrorContext,
    ErrorSeverity,
    InvocationError,
    InvocationFailure,
    ParseError,
    RecoveryAction,
)
from .document import TextDocument
from .report import AnalysisReport, DiagnosticRecord, ReportSummary, Severity

__all__ = [
    # Report
    "AnalysisReport",
    "DiagnosticRecord",
    "ReportSummary",
    "Severity",
    # Documents
    "TextDocument",
    # Errors
    "BpmnSenseError",
    "ConfigurationError",
    "ErrorCode",
    "ErrorContext",
    "ErrorSeverity",
    "InvocationError",
    "InvocationFailure",
    "ParseError",
    "RecoveryAction",
]
