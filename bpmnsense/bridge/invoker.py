"""Analyzer process invocation.

Runs ``<executable> check --format json <file>`` as a subprocess with a
hard timeout. This is the only place BPMNSense spawns processes. There
are no retries; the next editor event is the retry.

Output policy:
- non-empty stdout is the result, whatever the exit code (the analyzer
  exits non-zero when it finds errors)
- empty stdout with stderr text is an ``InvocationError``
- both empty means a healthy file
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass

from bpmnsense.constants import (
    CHECK_SUBCOMMAND,
    CHECK_TIMEOUT_SECONDS,
    DEFAULT_EXECUTABLE,
    OUTPUT_FORMAT_ARGS,
)
from bpmnsense.types.errors import (
    ErrorContext,
    InvocationError,
    InvocationFailure,
    RecoveryAction,
)
from bpmnsense.utils.logger import logger
from bpmnsense.utils.subprocess_util import format_command, split_command, subprocess_kwargs


@dataclass(frozen=True)
class RawOutput:
    """Decoded output of one analyzer run."""

    stdout: str
    stderr: str
    returncode: int | None = None

    @property
    def is_empty(self) -> bool:
        return not self.stdout.strip()


def build_command(executable: str, file_path: str) -> list[str]:
    """Build argv for checking ``file_path``.

    ``executable`` may itself carry arguments (``python -m bpmncode``).
    The file path is always a single argv entry, so embedded spaces are safe.
    """
    argv = split_command(executable) or [DEFAULT_EXECUTABLE]
    return [*argv, CHECK_SUBCOMMAND, *OUTPUT_FORMAT_ARGS, file_path]


def _not_found_error(executable: str, file_path: str, exc: Exception) -> InvocationError:
    return InvocationError(
        f"Analyzer executable not found: {executable}",
        failure=InvocationFailure.NOT_FOUND,
        user_message=(
            "BPMNCode executable not found. "
            "Please check your bpmncode.executablePath setting."
        ),
        context=ErrorContext(operation="invoke", file_path=file_path, component="invoker"),
        recovery_actions=[
            RecoveryAction("Install bpmncode or point executablePath at it", command="bpmnsense init ."),
        ],
        original_error=exc,
    )


class AnalyzerInvoker:
    """Runs the external analyzer against a file."""

    def __init__(
        self,
        executable: str = DEFAULT_EXECUTABLE,
        timeout: float = CHECK_TIMEOUT_SECONDS,
    ) -> None:
        self.executable = executable
        self.timeout = timeout

    async def invoke(self, file_path: str) -> RawOutput:
        """Run the analyzer and return its output.

        Raises:
            InvocationError: On spawn failure, timeout, or stderr-only output.
        """
        argv = build_command(self.executable, file_path)
        logger.debug("Running analyzer: {}", format_command(argv))

        try:
            proc = await asyncio.create_subprocess_exec(
                *argv,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                **subprocess_kwargs(),
            )
        except FileNotFoundError as e:
            raise _not_found_error(self.executable, file_path, e) from e
        except OSError as e:
            raise InvocationError(
                f"Failed to start analyzer '{self.executable}': {e}",
                failure=InvocationFailure.SPAWN_FAILED,
                context=ErrorContext(operation="invoke", file_path=file_path, component="invoker"),
                original_error=e,
            ) from e

        try:
            stdout_b, stderr_b = await asyncio.wait_for(proc.communicate(), timeout=self.timeout)
        except asyncio.TimeoutError as e:
            if proc.returncode is None:
                proc.kill()
            await proc.wait()
            raise InvocationError(
                f"Analyzer timed out after {self.timeout:g}s on {file_path}",
                failure=InvocationFailure.TIMEOUT,
                user_message="BPMNCode check timed out.",
                context=ErrorContext(operation="invoke", file_path=file_path, component="invoker"),
                original_error=e,
            ) from e

        output = RawOutput(
            stdout=stdout_b.decode("utf-8", errors="replace"),
            stderr=stderr_b.decode("utf-8", errors="replace"),
            returncode=proc.returncode,
        )

        if not output.is_empty:
            return output

        if output.stderr.strip():
            logger.error("BPMNCode stderr: {}", output.stderr.strip())
            raise InvocationError(
                output.stderr.strip(),
                failure=InvocationFailure.ANALYZER_STDERR,
                stderr=output.stderr,
                context=ErrorContext(
                    operation="invoke",
                    file_path=file_path,
                    component="invoker",
                    additional_info={"returncode": proc.returncode},
                ),
            )

        logger.debug("Analyzer produced no output for {} (exit {})", file_path, proc.returncode)
        return output
