import logging

from lsprotocol.types import (
    EXIT,
    INITIALIZE,
    SHUTDOWN,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    CompletionItem,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
)

from lspword.errors import MalformedParamsError
from lspword.lsp.capabilities import completion_options
from lspword.lsp.dispatcher import Message
from lspword.lsp.word_language_server import WordLanguageServer

logger = logging.getLogger(__name__)

SERVER_NAME = "lsp-word"
SERVER_VERSION = "0.1.0"


def _notify(ls: WordLanguageServer, method: str, params) -> None:
    """Forward a notification to the dispatcher, reporting malformed params."""
    try:
        ls.dispatcher.dispatch(Message(method, params))
    except MalformedParamsError as e:
        logger.error("Skipping message: %s", e)
        ls.window_log_message(
            LogMessageParams(type=MessageType.Error, message=str(e))
        )


async def handle_initialize(ls: WordLanguageServer, params: InitializeParams):
    """Start serving once pygls has answered the handshake."""
    client = params.client_info.name if params.client_info else "unknown client"
    logger.info("Initialized by %s (root: %s)", client, params.root_uri)

    ls.dispatcher.initialized()


async def handle_completion(
    ls: WordLanguageServer, params: CompletionParams
) -> list[CompletionItem]:
    """
    Every word of the document, whatever the cursor position.

    pygls sends the returned list tagged with the request id.
    """
    return ls.dispatcher.dispatch(Message(TEXT_DOCUMENT_COMPLETION, params))


async def handle_did_open(ls: WordLanguageServer, params: DidOpenTextDocumentParams):
    _notify(ls, TEXT_DOCUMENT_DID_OPEN, params)


async def handle_did_change(ls: WordLanguageServer, params: DidChangeTextDocumentParams):
    _notify(ls, TEXT_DOCUMENT_DID_CHANGE, params)


async def handle_did_close(ls: WordLanguageServer, params: DidCloseTextDocumentParams):
    _notify(ls, TEXT_DOCUMENT_DID_CLOSE, params)


async def handle_shutdown(ls: WordLanguageServer):
    ls.dispatcher.dispatch(Message(SHUTDOWN))


async def handle_exit(ls: WordLanguageServer):
    ls.dispatcher.dispatch(Message(EXIT))


def create_server() -> WordLanguageServer:
    """
    Creates and returns a configured Language Server instance.

    The LanguageServer class from pygls handles:
    - JSON-RPC communication with clients (editors)
    - The initialize handshake and capability advertisement
    - Correlating responses with request ids
    """
    server = WordLanguageServer(SERVER_NAME, SERVER_VERSION)

    @server.feature(INITIALIZE)
    async def initialize(ls: WordLanguageServer, params: InitializeParams):
        await handle_initialize(ls, params)

    @server.feature(TEXT_DOCUMENT_COMPLETION, completion_options())
    async def completion(ls: WordLanguageServer, params: CompletionParams):
        return await handle_completion(ls, params)

    @server.feature(TEXT_DOCUMENT_DID_OPEN)
    async def did_open(ls: WordLanguageServer, params: DidOpenTextDocumentParams):
        await handle_did_open(ls, params)

    @server.feature(TEXT_DOCUMENT_DID_CHANGE)
    async def did_change(ls: WordLanguageServer, params: DidChangeTextDocumentParams):
        await handle_did_change(ls, params)

    @server.feature(TEXT_DOCUMENT_DID_CLOSE)
    async def did_close(ls: WordLanguageServer, params: DidCloseTextDocumentParams):
        await handle_did_close(ls, params)

    # pygls answers shutdown and ends the process on exit; these run after its
    # built-in handlers and keep the dispatcher's state in step.
    @server.feature(SHUTDOWN)
    async def shutdown(ls: WordLanguageServer, *args):
        await handle_shutdown(ls)

    @server.feature(EXIT)
    async def on_exit(ls: WordLanguageServer, *args):
        await handle_exit(ls)

    return server
