"""Static completion items: keywords, flow operators, attributes."""

from __future__ import annotations

from lsprotocol import types as lsp

from bpmnsense.language.vocabulary import ATTRIBUTES, FLOW_OPERATORS, KEYWORDS


def _markdown(value: str) -> lsp.MarkupContent:
    return lsp.MarkupContent(kind=lsp.MarkupKind.Markdown, value=value)


def completion_items() -> list[lsp.CompletionItem]:
    """All completion items, independent of cursor context."""
    items: list[lsp.CompletionItem] = []

    for keyword in KEYWORDS:
        items.append(
            lsp.CompletionItem(
                label=keyword,
                kind=lsp.CompletionItemKind.Keyword,
                documentation=_markdown(f"BPMN keyword: `{keyword}`"),
            )
        )

    for op, desc in FLOW_OPERATORS.items():
        items.append(
            lsp.CompletionItem(
                label=op,
                kind=lsp.CompletionItemKind.Operator,
                documentation=_markdown(desc),
            )
        )

    for attr in ATTRIBUTES:
        items.append(
            lsp.CompletionItem(
                label=attr,
                kind=lsp.CompletionItemKind.Property,
                insert_text=f"{attr}=",
            )
        )

    return items
