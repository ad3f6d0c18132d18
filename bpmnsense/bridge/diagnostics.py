"""Per-document diagnostics bridge.

Owns the diagnostic set for every open BPMNCode document. Each check
replaces a document's set wholesale. Editor events can overlap: a slow
check started before a faster one must not overwrite the newer result,
so every check takes a per-document sequence number and only the latest
one is applied.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Sequence

from lsprotocol import types as lsp

from bpmnsense.bridge.checker import ProcessChecker
from bpmnsense.bridge.quickfix import fixes_for_diagnostic
from bpmnsense.bridge.translator import translate
from bpmnsense.config import BridgeConfig
from bpmnsense.constants import DIAGNOSTIC_SOURCE
from bpmnsense.interfaces.checker import Checker
from bpmnsense.types.document import TextDocument
from bpmnsense.types.errors import BpmnSenseError, InvocationError, ParseError
from bpmnsense.utils.error_classifier import ErrorCategory, classify_error
from bpmnsense.utils.logger import logger, with_request_context

Publisher = Callable[[str, list[lsp.Diagnostic]], None]
Notifier = Callable[[str], None]


class DiagnosticsBridge:
    """Runs checks on editor events and keeps the per-document diagnostic sets.

    Args:
        checker: Analysis capability; a ``ProcessChecker`` by default.
        config: Bridge settings.
        publisher: Called with ``(uri, diagnostics)`` whenever a set changes.
        notifier: Called with a user-facing message for actionable failures.
    """

    def __init__(
        self,
        checker: Checker | None = None,
        config: BridgeConfig | None = None,
        publisher: Publisher | None = None,
        notifier: Notifier | None = None,
    ) -> None:
        self._config = config or BridgeConfig()
        self._checker: Checker = checker or ProcessChecker.from_config(self._config)
        self._publisher = publisher
        self._notifier = notifier
        self._diagnostics: dict[str, list[lsp.Diagnostic]] = {}
        self._sequence: dict[str, int] = {}
        self._pending: set[asyncio.Task[bool]] = set()

    @property
    def config(self) -> BridgeConfig:
        return self._config

    def update_config(self, config: BridgeConfig) -> None:
        """Swap settings; later checks use the new executable and timeout."""
        self._config = config
        if isinstance(self._checker, ProcessChecker):
            self._checker.configure(config)
        logger.info("Analyzer executable set to {}", config.executable_path)

    # ------------------------------------------------------------------
    # Diagnostic set
    # ------------------------------------------------------------------

    def get(self, uri: str) -> list[lsp.Diagnostic]:
        return list(self._diagnostics.get(uri, []))

    @property
    def documents(self) -> list[str]:
        return list(self._diagnostics)

    def _replace(self, uri: str, diagnostics: list[lsp.Diagnostic]) -> None:
        self._diagnostics[uri] = diagnostics
        if self._publisher is not None:
            self._publisher(uri, list(diagnostics))

    def clear(self, uri: str) -> None:
        if self._diagnostics.pop(uri, None) is not None and self._publisher is not None:
            self._publisher(uri, [])

    def clear_all(self) -> None:
        for uri in list(self._diagnostics):
            self.clear(uri)

    # ------------------------------------------------------------------
    # Checks
    # ------------------------------------------------------------------

    def _next_sequence(self, uri: str) -> int:
        seq = self._sequence.get(uri, 0) + 1
        self._sequence[uri] = seq
        return seq

    def _is_latest(self, uri: str, seq: int) -> bool:
        return self._sequence.get(uri) == seq

    def handles(self, document: TextDocument) -> bool:
        return document.language_id == self._config.language_id

    async def check_document(self, document: TextDocument) -> bool:
        """Check a document and replace its diagnostic set.

        Returns:
            True if a new set was applied; False if the document was skipped,
            the check failed, or a newer check superseded this one.
        """
        if not self.handles(document):
            return False

        seq = self._next_sequence(document.uri)
        with with_request_context(document.uri) as ctx:
            logger.debug("Checking {} (seq {})", document.path, seq)
            try:
                report = await self._checker.check(document.path)
            except (InvocationError, ParseError) as e:
                self._handle_failure(e)
                return False

            diagnostics = translate(report)

            if not self._is_latest(document.uri, seq):
                logger.debug("Discarding stale result for {} (seq {})", document.uri, seq)
                return False

            self._replace(document.uri, diagnostics)
            logger.debug(
                "Applied {} diagnostics to {} in {:.3f}s",
                len(diagnostics), document.uri, ctx.elapsed,
            )
            return True

    def _handle_failure(self, error: BpmnSenseError) -> None:
        classification = classify_error(error)
        if classification.category is ErrorCategory.MALFORMED_OUTPUT:
            logger.error("Failed to parse BPMNCode output: {}", error)
        else:
            logger.error("BPMNCode check failed: {}", error)
        if classification.surface_to_user and self._notifier is not None:
            self._notifier(error.user_message)

    async def on_open(self, document: TextDocument) -> bool:
        return await self.check_document(document)

    async def on_save(self, document: TextDocument) -> bool:
        return await self.check_document(document)

    def on_change(self, document: TextDocument) -> asyncio.Task[bool] | None:
        """Schedule a check after the configured change delay.

        Must be called from within a running event loop.
        """
        if not self.handles(document):
            return None
        task = asyncio.get_running_loop().create_task(self._delayed_check(document))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        return task

    async def _delayed_check(self, document: TextDocument) -> bool:
        await asyncio.sleep(self._config.change_delay)
        return await self.check_document(document)

    # ------------------------------------------------------------------
    # Quick-fixes
    # ------------------------------------------------------------------

    def code_actions(
        self,
        document: TextDocument,
        diagnostics: Sequence[lsp.Diagnostic],
    ) -> list[lsp.CodeAction]:
        """Quick-fix actions for the analyzer diagnostics in ``diagnostics``."""
        actions: list[lsp.CodeAction] = []
        for diagnostic in diagnostics:
            if diagnostic.source != DIAGNOSTIC_SOURCE:
                continue
            for fix in fixes_for_diagnostic(diagnostic, document.text):
                actions.append(fix.to_code_action(document.uri, diagnostic))
        return actions

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------

    async def dispose(self) -> None:
        """Cancel scheduled checks and clear every diagnostic set."""
        for task in list(self._pending):
            task.cancel()
        if self._pending:
            await asyncio.gather(*self._pending, return_exceptions=True)
        self._pending.clear()
        self.clear_all()
        # Counters stay monotonic; bumping them drops checks still in flight.
        for uri in self._sequence:
            self._sequence[uri] += 1
