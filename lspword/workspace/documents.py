"""
Document Store

Keeps the current full text of every document the editor has opened.

Design Principles:
1. Full-text snapshots only (no history, no range patching)
2. Last write wins
3. Explicit "not found" (None) on lookup
4. Entries are not reclaimed on close; they live until the server exits
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class DocumentId:
    """Identity of an open document, keyed on its URI exactly as sent."""

    uri: str

    def __str__(self) -> str:
        return self.uri


class DocumentStore:
    """
    Mapping from DocumentId to the document's current full text.

    Usage:
        store = DocumentStore()
        store.upsert(DocumentId("file:///a.rs"), "fn main() {}")

        text = store.get(DocumentId("file:///a.rs"))
        if text is None:
            ...  # never opened
    """

    def __init__(self) -> None:
        self._documents: dict[DocumentId, str] = {}

    def upsert(self, doc_id: DocumentId, text: str) -> None:
        """Create or replace the record for doc_id."""
        self._documents[doc_id] = text

    def get(self, doc_id: DocumentId) -> str | None:
        """Return the current text for doc_id, or None if it was never opened."""
        return self._documents.get(doc_id)

    def __contains__(self, doc_id: object) -> bool:
        return doc_id in self._documents

    def __len__(self) -> int:
        return len(self._documents)
