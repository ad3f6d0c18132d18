"""Process-backed checker: invoke the analyzer, parse its report."""

from __future__ import annotations

from bpmnsense.bridge.invoker import AnalyzerInvoker
from bpmnsense.bridge.report import parse_report
from bpmnsense.config import BridgeConfig
from bpmnsense.types.report import AnalysisReport


class ProcessChecker:
    """Checker that shells out to the ``bpmncode`` analyzer."""

    def __init__(self, invoker: AnalyzerInvoker | None = None) -> None:
        self._invoker = invoker or AnalyzerInvoker()

    @classmethod
    def from_config(cls, config: BridgeConfig) -> ProcessChecker:
        return cls(AnalyzerInvoker(executable=config.executable_path, timeout=config.timeout))

    @property
    def executable(self) -> str:
        return self._invoker.executable

    def configure(self, config: BridgeConfig) -> None:
        """Apply new settings to later checks."""
        self._invoker.executable = config.executable_path
        self._invoker.timeout = config.timeout

    async def check(self, path: str) -> AnalysisReport:
        output = await self._invoker.invoke(path)
        if output.is_empty:
            return AnalysisReport.empty(path)
        return parse_report(output.stdout, file_path=path)
