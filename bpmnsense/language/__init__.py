"""Static language features: completion, hover, heuristic definition."""

from .completion import completion_items
from .definition import definition, find_declaration
from .hover import documentation_for, hover, token_at

__all__ = [
    "completion_items",
    "definition",
    "documentation_for",
    "find_declaration",
    "hover",
    "token_at",
]
