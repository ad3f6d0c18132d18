"""Analyzer coordinates to editor ranges.

The analyzer reports 1-based line/column plus a character span; LSP wants
0-based positions. Negative coordinates are clamped to zero since hosts
reject them. Spans never wrap lines.
"""

from __future__ import annotations

from lsprotocol import types as lsp


def map_range(line: int, column: int, width: int) -> lsp.Range:
    """Map a 1-based ``(line, column)`` and a span width to a 0-based range."""
    start_line = max(0, line - 1)
    start_column = max(0, column - 1)
    return lsp.Range(
        start=lsp.Position(line=start_line, character=start_column),
        end=lsp.Position(line=start_line, character=start_column + max(0, width)),
    )


def offset_to_position(text: str, offset: int) -> lsp.Position:
    """Convert a character offset into ``text`` to a 0-based position."""
    offset = min(max(0, offset), len(text))
    line = text.count("\n", 0, offset)
    line_start = text.rfind("\n", 0, offset) + 1
    return lsp.Position(line=line, character=offset - line_start)


def line_at(text: str, line: int) -> str:
    """Return the 0-based ``line`` of ``text`` without its terminator, or ''."""
    lines = text.splitlines()
    if 0 <= line < len(lines):
        return lines[line]
    return ""
