"""Shared constants and helpers for BPMNSense.

Centralizes analyzer invocation defaults, the diagnostic source tag,
the environment variables read at startup, and a timezone-aware
datetime helper.
"""

from datetime import datetime, timezone


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(timezone.utc)


# Language id the host editor assigns to BPMNCode documents
LANGUAGE_ID: str = "bpmn"

# Source tag attached to every diagnostic produced from analyzer output.
# Quick-fixes are only offered for diagnostics carrying this tag.
DIAGNOSTIC_SOURCE: str = "bpmncode"

# Program name used when no executable path is configured
DEFAULT_EXECUTABLE: str = "bpmncode"

# Arguments around the file path: ``<exe> check --format json <file>``
CHECK_SUBCOMMAND: str = "check"
OUTPUT_FORMAT_ARGS: tuple[str, ...] = ("--format", "json")

# Analyzer runs longer than this are killed and reported as a timeout.
CHECK_TIMEOUT_SECONDS: float = 10.0

# Delay between a text change and the check it triggers.
CHANGE_DELAY_SECONDS: float = 1.0

# Highlight width used when a record carries no start/end offsets.
LEGACY_RANGE_WIDTH: int = 10

# Per-project configuration file, relative to the project root
CONFIG_DIR_NAME: str = ".bpmnsense"
CONFIG_FILE_NAME: str = "config.json"

# Environment overrides
ENV_EXECUTABLE: str = "BPMNSENSE_EXECUTABLE"
ENV_DEBUG: str = "BPMNSENSE_DEBUG"
