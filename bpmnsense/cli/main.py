"""
BPMNSense CLI.

Commands:
- check: run the analyzer on a file, print diagnostics and quick-fixes
- init: write a default project config
"""

from __future__ import annotations

import asyncio
import json
import sys
from dataclasses import replace
from pathlib import Path

import click
from lsprotocol import converters
from lsprotocol import types as lsp

from bpmnsense import __version__
from bpmnsense.bridge.checker import ProcessChecker
from bpmnsense.bridge.quickfix import fixes_for_diagnostic
from bpmnsense.bridge.translator import translate
from bpmnsense.config import config_path, load_config, write_default_config
from bpmnsense.types.document import TextDocument
from bpmnsense.types.errors import BpmnSenseError, ConfigurationError
from bpmnsense.utils.logger import configure_logging

EXIT_FINDINGS = 1
EXIT_FAILURE = 2

_SEVERITY_NAMES: dict[lsp.DiagnosticSeverity, str] = {
    lsp.DiagnosticSeverity.Error: "error",
    lsp.DiagnosticSeverity.Warning: "warning",
    lsp.DiagnosticSeverity.Information: "info",
    lsp.DiagnosticSeverity.Hint: "hint",
}


@click.group(invoke_without_command=True)
@click.version_option(__version__, prog_name="BPMNSense", message="%(prog)s v%(version)s")
@click.option("--debug", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """BPMNSense - Diagnostics and quick-fixes for BPMNCode files."""
    configure_logging("DEBUG" if debug else None)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


def _format_diagnostic(path: str, diagnostic: lsp.Diagnostic) -> str:
    start = diagnostic.range.start
    severity = _SEVERITY_NAMES.get(diagnostic.severity, "error")  # type: ignore[arg-type]
    code = f" [{diagnostic.code}]" if diagnostic.code else ""
    return f"{path}:{start.line + 1}:{start.character + 1}: {severity}{code} {diagnostic.message}"


@cli.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option("--executable", "-e", default=None, help="Analyzer executable (overrides config).")
@click.option("--timeout", type=float, default=None, help="Analyzer timeout in seconds.")
@click.option("--root", type=click.Path(file_okay=False), default=".", help="Project root holding .bpmnsense/config.json.")
@click.option("--json", "as_json", is_flag=True, help="Print LSP diagnostics and code actions as JSON.")
def check(file: str, executable: str | None, timeout: float | None, root: str, as_json: bool) -> None:
    """Check a BPMNCode file with the analyzer."""
    try:
        config = load_config(root)
    except ConfigurationError as e:
        click.echo(e.get_formatted_message(), err=True)
        sys.exit(EXIT_FAILURE)

    if executable:
        config = config.with_executable(executable)
    if timeout is not None:
        config = replace(config, timeout=timeout)

    document = TextDocument.from_path(file, language_id=config.language_id)
    checker = ProcessChecker.from_config(config)

    try:
        report = asyncio.run(checker.check(document.path))
    except BpmnSenseError as e:
        click.echo(e.get_formatted_message(), err=True)
        sys.exit(EXIT_FAILURE)

    diagnostics = translate(report)

    if as_json:
        converter = converters.get_converter()
        payload = {
            "uri": document.uri,
            "diagnostics": [converter.unstructure(d) for d in diagnostics],
            "code_actions": [
                converter.unstructure(fix.to_code_action(document.uri, d))
                for d in diagnostics
                for fix in fixes_for_diagnostic(d, document.text)
            ],
        }
        click.echo(json.dumps(payload, indent=2))
    else:
        for diagnostic in diagnostics:
            click.echo(_format_diagnostic(document.path, diagnostic))
            for fix in fixes_for_diagnostic(diagnostic, document.text):
                click.echo(f"    fix: {fix.title}")
        click.echo(f"Found {len(diagnostics)} issue(s).")

    if any(d.severity == lsp.DiagnosticSeverity.Error for d in diagnostics):
        sys.exit(EXIT_FINDINGS)


@cli.command()
@click.argument("path", type=click.Path(file_okay=False), default=".")
@click.option("--force", is_flag=True, help="Overwrite an existing config file.")
def init(path: str, force: bool) -> None:
    """Write a default .bpmnsense/config.json under PATH."""
    target = config_path(path)
    existed = target.exists()
    written = write_default_config(Path(path), force=force)
    if existed and not force:
        click.echo(f"Config already exists: {written} (use --force to overwrite)")
    else:
        click.echo(f"BPMNSense initialized: {written}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
