"""Word-boundary location within a line.

A diagnostic's reported width does not always match the identifier a user
would replace, so the token is re-derived from the raw line text.
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_letters

# BPMNCode keywords are alphabetic; digits do not extend a token.
IDENTIFIER_CHARS: frozenset[str] = frozenset(ascii_letters + "_")

# Looser class for hover/definition lookups on user-chosen names.
NAME_CHARS: frozenset[str] = frozenset(ascii_letters + "0123456789_")


@dataclass(frozen=True)
class WordSpan:
    """A located token: ``line_text[start:end] == word``."""

    start: int
    end: int
    word: str

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


def locate_word(
    line_text: str,
    column: int,
    chars: frozenset[str] = IDENTIFIER_CHARS,
) -> WordSpan:
    """Expand left and right from a 1-based column over identifier characters.

    The cursor sits before character ``column - 1``: the scan left looks at
    the characters preceding it, the scan right at the characters from it.

    >>> locate_word("task myTask", 5)
    WordSpan(start=0, end=4, word='task')
    """
    cursor = min(max(0, column - 1), len(line_text))

    start = cursor
    while start > 0 and line_text[start - 1] in chars:
        start -= 1

    end = cursor
    while end < len(line_text) and line_text[end] in chars:
        end += 1

    return WordSpan(start=start, end=end, word=line_text[start:end])
