"""Document state for lsp-word."""
from .documents import DocumentId, DocumentStore

__all__ = ['DocumentId', 'DocumentStore']
