"""
Pytest configuration and shared fixtures for BPMNSense tests.
"""
import json
import shlex
import sys
import textwrap
from pathlib import Path

import pytest

from bpmnsense.types.document import TextDocument
from bpmnsense.types.errors import InvocationError, InvocationFailure
from bpmnsense.types.report import AnalysisReport


SPELLING_REPORT = {
    "file": "flow.bpmn",
    "errors": [
        {
            "severity": "error",
            "message": "unknown keyword 'strat', did you mean: 'start'",
            "line": 2,
            "column": 3,
            "start": 10,
            "end": 15,
            "suggestions": [],
            "code": "E001",
        }
    ],
    "summary": {"error_count": 1, "warning_count": 0, "has_errors": True},
}

# Line 2 holds the misspelled keyword at column 3 (offsets 10..15).
SPELLING_SOURCE = 'process P {\n  strat "Begin"\n  end "Done"\n}\n'


@pytest.fixture
def spelling_report_json() -> str:
    return json.dumps(SPELLING_REPORT)


@pytest.fixture
def bpmn_file(tmp_path: Path) -> Path:
    """A BPMNCode file on disk, in a directory with a space in its name."""
    folder = tmp_path / "my flows"
    folder.mkdir()
    path = folder / "flow.bpmn"
    path.write_text(SPELLING_SOURCE)
    return path


@pytest.fixture
def make_analyzer(tmp_path: Path):
    """Build a fake analyzer: a Python script run as the configured executable.

    The returned string is usable as ``executable_path``.
    """

    def _make(
        stdout: str = "",
        stderr: str = "",
        exit_code: int = 0,
        sleep: float = 0.0,
        echo_argv: bool = False,
    ) -> str:
        script = tmp_path / f"fake_analyzer_{abs(hash((stdout, stderr, exit_code, sleep, echo_argv)))}.py"
        script.write_text(
            textwrap.dedent(
                f"""
                import json, sys, time
                time.sleep({sleep!r})
                if {echo_argv!r}:
                    sys.stdout.write(json.dumps({{"file": "argv", "errors": [], "argv": sys.argv[1:]}}))
                sys.stdout.write({stdout!r})
                sys.stderr.write({stderr!r})
                sys.exit({exit_code!r})
                """
            )
        )
        return f"{shlex.quote(sys.executable)} {shlex.quote(str(script))}"

    return _make


class FakeChecker:
    """In-process checker returning canned reports or raising canned errors."""

    def __init__(self, results=None):
        self.results = list(results or [])
        self.calls: list[str] = []

    async def check(self, path: str) -> AnalysisReport:
        self.calls.append(path)
        result = self.results.pop(0) if self.results else AnalysisReport.empty(path)
        if isinstance(result, Exception):
            raise result
        return result


@pytest.fixture
def fake_checker():
    return FakeChecker


@pytest.fixture
def not_found_error() -> InvocationError:
    return InvocationError(
        "Analyzer executable not found: bpmncode",
        failure=InvocationFailure.NOT_FOUND,
        user_message="BPMNCode executable not found. Please check your bpmncode.executablePath setting.",
    )


@pytest.fixture
def document(tmp_path: Path) -> TextDocument:
    path = tmp_path / "flow.bpmn"
    path.write_text(SPELLING_SOURCE)
    return TextDocument.from_path(path)
