"""Heuristic go-to-definition.

Best-effort text search, not a resolver: there is no symbol index, and a
name that appears in an earlier declaration-shaped phrase wins even if it
is not the real declaration. The analyzer remains the authority.
"""

from __future__ import annotations

import re

from lsprotocol import types as lsp

from bpmnsense.bridge.ranges import line_at, offset_to_position
from bpmnsense.language.hover import token_at
from bpmnsense.language.vocabulary import CONTAINER_KEYWORDS, NODE_KEYWORDS


def _declaration_patterns(word: str) -> list[re.Pattern[str]]:
    name = re.escape(word)
    return [
        re.compile(rf"\b({'|'.join(NODE_KEYWORDS)})\s+\"?{name}\"?", re.IGNORECASE),
        re.compile(rf"\b({'|'.join(CONTAINER_KEYWORDS)})\s+\"?{name}\"?\s*\{{", re.IGNORECASE),
    ]


def find_declaration(text: str, word: str) -> int | None:
    """Offset of the first declaration-looking phrase for ``word``, if any.

    Node declarations are tried before container declarations.
    """
    if not word:
        return None
    for pattern in _declaration_patterns(word):
        match = pattern.search(text)
        if match:
            return match.start()
    return None


def definition(uri: str, text: str, position: lsp.Position) -> lsp.Location | None:
    """Guess where the name under the cursor is declared."""
    span = token_at(line_at(text, position.line), position.character)
    offset = find_declaration(text, span.word)
    if offset is None:
        return None
    pos = offset_to_position(text, offset)
    return lsp.Location(uri=uri, range=lsp.Range(start=pos, end=pos))
