"""
LSP Capabilities - What features the server announces to clients.

These are fixed and announced once during initialization:

1. TEXT SYNCHRONIZATION:
   - Full sync: every didChange carries the whole document text.
     The change handler relies on this, so the two must stay in step.

2. COMPLETION:
   - textDocument/completion, triggered by every ASCII letter.
"""

from string import ascii_lowercase, ascii_uppercase

from lsprotocol.types import CompletionOptions, TextDocumentSyncKind

TEXT_DOCUMENT_SYNC_KIND = TextDocumentSyncKind.Full

TRIGGER_CHARACTERS = list(ascii_uppercase + ascii_lowercase)


def completion_options() -> CompletionOptions:
    """Options registered with the completion feature."""
    return CompletionOptions(trigger_characters=list(TRIGGER_CHARACTERS))
