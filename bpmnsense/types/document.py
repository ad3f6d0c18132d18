"""Minimal view of an editor document, as the bridge needs it."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class TextDocument:
    """An open document: where it lives, what language it is, what it says."""

    uri: str
    path: str
    language_id: str
    text: str = ""

    @classmethod
    def from_path(cls, path: str | Path, language_id: str = "bpmn", text: str | None = None) -> "TextDocument":
        """Build a document for a file on disk, reading it unless ``text`` is given."""
        p = Path(path).resolve()
        if text is None:
            text = p.read_text(encoding="utf-8") if p.is_file() else ""
        return cls(uri=p.as_uri(), path=str(p), language_id=language_id, text=text)
