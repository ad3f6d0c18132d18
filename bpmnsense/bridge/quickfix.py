"""Quick-fix assembly.

One fix per candidate, in candidate order, duplicates included. The edit
replaces the diagnostic's reported range; the located word only feeds the
label.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from lsprotocol import types as lsp

from bpmnsense.bridge.ranges import line_at
from bpmnsense.bridge.suggestions import extract_suggestions
from bpmnsense.bridge.words import locate_word


@dataclass(frozen=True)
class CandidateFix:
    """A single replacement offered for a diagnostic."""

    title: str
    new_text: str
    range: lsp.Range
    original_word: str

    def to_text_edit(self) -> lsp.TextEdit:
        return lsp.TextEdit(range=self.range, new_text=self.new_text)

    def to_code_action(self, uri: str, diagnostic: lsp.Diagnostic) -> lsp.CodeAction:
        return lsp.CodeAction(
            title=self.title,
            kind=lsp.CodeActionKind.QuickFix,
            diagnostics=[diagnostic],
            edit=lsp.WorkspaceEdit(changes={uri: [self.to_text_edit()]}),
        )


def fix_label(original_word: str, candidate: str) -> str:
    return f"Replace '{original_word}' with '{candidate}'"


def assemble_fixes(
    diagnostic: lsp.Diagnostic,
    candidates: Sequence[str],
    original_word: str,
    replace_range: lsp.Range | None = None,
) -> list[CandidateFix]:
    """Build one fix per candidate.

    Args:
        diagnostic: The diagnostic being fixed.
        candidates: Replacement texts, in order.
        original_word: Token shown in the label.
        replace_range: Range the edit replaces; the diagnostic's range by default.
    """
    target = replace_range or diagnostic.range
    return [
        CandidateFix(
            title=fix_label(original_word, candidate),
            new_text=candidate,
            range=target,
            original_word=original_word,
        )
        for candidate in candidates
    ]


def fixes_for_diagnostic(diagnostic: lsp.Diagnostic, document_text: str) -> list[CandidateFix]:
    """Extract candidates from the message and assemble fixes against the text."""
    candidates = extract_suggestions(diagnostic.message)
    if not candidates:
        return []
    start = diagnostic.range.start
    span = locate_word(line_at(document_text, start.line), start.character + 1)
    return assemble_fixes(diagnostic, candidates, span.word)
