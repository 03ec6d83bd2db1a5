"""
Completion (Autocomplete) feature.

Every distinct word of the requested document is offered as a candidate.
The cursor position is not used: the client's own fuzzy matching filters
the full list as the user types.
"""

from lsprotocol.types import CompletionItem

from lspword.utils.words import tokenize
from lspword.workspace.documents import DocumentId, DocumentStore


def complete(doc_id: DocumentId, store: DocumentStore) -> list[CompletionItem]:
    """
    Build the completion candidates for a document.

    A document the server never saw yields an empty list, not an error.
    Items carry only a label, sorted so responses are stable.
    """
    text = store.get(doc_id)
    if text is None:
        return []

    return [CompletionItem(label=word) for word in sorted(tokenize(text))]
