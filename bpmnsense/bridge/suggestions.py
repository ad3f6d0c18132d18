"""Quick-fix candidates from "did you mean" hints.

The analyzer embeds its suggestions in the diagnostic message, e.g.::

    unknown keyword 'strat', did you mean: 'start'
    unknown attribute 'prio', did you mean: priority, version

The message is the only source of candidates; the record's
``suggestions`` field is not consulted.
"""

from __future__ import annotations

import re

_TRIGGER = "did you mean"

# Exactly one quoted candidate. A comma and another candidate after it
# means the hint is a quoted list instead.
_SINGLE_QUOTED = re.compile(
    r"did you mean:?[ \t]*(['\"])([^'\"]+)\1(?![ \t]*,[ \t]*\S)",
    re.IGNORECASE,
)

# The rest of the line after the trigger, split on ", ".
_LIST = re.compile(r"did you mean(?::|[ \t])[ \t]*([^\r\n]+)", re.IGNORECASE)

# Sentence end: terminator followed by whitespace or end of text.
_SENTENCE_END = re.compile(r"[.?!;](?=\s|$)")

_STRIP_CHARS = "'\"() \t"


def extract_suggestions(message: str) -> list[str]:
    """Extract replacement candidates from a diagnostic message.

    Returns:
        Candidates in message order; empty when the message carries no hint.
    """
    if not message or _TRIGGER not in message.lower():
        return []

    single = _SINGLE_QUOTED.search(message)
    if single:
        return [single.group(2)]

    listed = _LIST.search(message)
    if listed:
        tail = _SENTENCE_END.split(listed.group(1), maxsplit=1)[0]
        pieces = (piece.strip(_STRIP_CHARS) for piece in tail.split(", "))
        return [piece for piece in pieces if piece]

    return []
