from pygls.lsp.server import LanguageServer

from lspword.lsp.capabilities import TEXT_DOCUMENT_SYNC_KIND
from lspword.lsp.dispatcher import MessageDispatcher
from lspword.workspace.documents import DocumentStore


class WordLanguageServer(LanguageServer):
    """
    Language Server that completes words from the current document.

    Attributes:
        documents: Full text of every document the client opened
        dispatcher: Routes protocol messages to the store and completion
    """

    def __init__(self, name: str, version: str):
        super().__init__(name, version, text_document_sync_kind=TEXT_DOCUMENT_SYNC_KIND)

        self.documents = DocumentStore()
        self.dispatcher = MessageDispatcher(self.documents)
