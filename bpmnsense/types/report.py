"""
Analyzer report types.

These mirror the JSON document printed by ``bpmncode check --format json``.
Records are immutable and live for a single analyzer run.
"""

from dataclasses import dataclass, field
from enum import Enum


class Severity(str, Enum):
    """Severity strings the analyzer is documented to emit."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass(frozen=True)
class DiagnosticRecord:
    """A single issue as reported by the analyzer.

    ``line`` and ``column`` are 1-based. ``start``/``end`` are character
    offsets into the file; both are ``None`` for analyzers that predate
    offset reporting.
    """

    severity: str
    message: str
    line: int
    column: int
    start: int | None = None
    end: int | None = None
    suggestions: tuple[str, ...] = ()
    code: str = ""

    @property
    def has_offsets(self) -> bool:
        return self.start is not None and self.end is not None

    @property
    def width(self) -> int | None:
        """Span width in characters, or None without offsets."""
        if not self.has_offsets:
            return None
        return max(0, self.end - self.start)  # type: ignore[operator]


@dataclass(frozen=True)
class ReportSummary:
    """Counts carried in the wire format's ``summary`` object."""

    error_count: int = 0
    warning_count: int = 0
    has_errors: bool = False

    @classmethod
    def from_records(cls, records: "tuple[DiagnosticRecord, ...]") -> "ReportSummary":
        errors = sum(1 for r in records if r.severity == Severity.ERROR.value)
        warnings = sum(1 for r in records if r.severity == Severity.WARNING.value)
        return cls(error_count=errors, warning_count=warnings, has_errors=errors > 0)


@dataclass(frozen=True)
class AnalysisReport:
    """The full result of one analyzer run against one file."""

    file: str
    errors: tuple[DiagnosticRecord, ...] = ()
    summary: ReportSummary = field(default_factory=ReportSummary)

    @classmethod
    def empty(cls, file: str) -> "AnalysisReport":
        """Report for a file the analyzer found nothing wrong with."""
        return cls(file=file)

    def __len__(self) -> int:
        return len(self.errors)
