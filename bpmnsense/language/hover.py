"""Hover documentation from a fixed table."""

from __future__ import annotations

from lsprotocol import types as lsp

from bpmnsense.bridge.ranges import line_at
from bpmnsense.bridge.words import NAME_CHARS, WordSpan, locate_word
from bpmnsense.language.vocabulary import HOVER_DOCS

OPERATOR_CHARS: frozenset[str] = frozenset("-=.>")


def token_at(line_text: str, character: int) -> WordSpan:
    """Name or flow operator touching a 0-based cursor position."""
    span = locate_word(line_text, character + 1, NAME_CHARS)
    if span.is_empty:
        span = locate_word(line_text, character + 1, OPERATOR_CHARS)
    return span


def documentation_for(word: str) -> str | None:
    return HOVER_DOCS.get(word)


def hover(text: str, position: lsp.Position) -> lsp.Hover | None:
    """Hover for the token at ``position``, or None if it is undocumented."""
    span = token_at(line_at(text, position.line), position.character)
    if span.is_empty:
        return None

    doc = documentation_for(span.word)
    if doc is None:
        return None

    return lsp.Hover(
        contents=lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=doc),
        range=lsp.Range(
            start=lsp.Position(line=position.line, character=span.start),
            end=lsp.Position(line=position.line, character=span.end),
        ),
    )
