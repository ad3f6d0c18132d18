"""Checker protocol.

The diagnostics bridge depends only on this capability. The process-backed
implementation lives in ``bpmnsense.bridge.checker``; an in-process
analyzer can be plugged in by satisfying the same protocol.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from bpmnsense.types.report import AnalysisReport


@runtime_checkable
class Checker(Protocol):
    """Something that can analyze a BPMNCode file."""

    async def check(self, path: str) -> AnalysisReport:
        """Analyze the file at ``path``.

        Raises:
            InvocationError: If the analysis could not be run.
            ParseError: If the analysis output could not be understood.
        """
        ...
