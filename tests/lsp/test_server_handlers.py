from unittest.mock import Mock

import pytest
from lsprotocol.converters import get_converter
from lsprotocol.types import (
    ClientInfo,
    ClientCapabilities,
    CompletionParams,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    InitializeParams,
    LogMessageParams,
    MessageType,
    Position,
    TextDocumentIdentifier,
    TextDocumentItem,
)

from lspword.lsp.dispatcher import MessageDispatcher, ServerState
from lspword.lsp.server import (
    handle_completion,
    handle_did_change,
    handle_did_close,
    handle_did_open,
    handle_exit,
    handle_initialize,
    handle_shutdown,
)
from lspword.workspace.documents import DocumentId, DocumentStore

URI = "file:///project/app.js"


@pytest.fixture
def ls():
    """Create a mock server for testing."""
    server = Mock()
    server.window_log_message = Mock()
    server.documents = DocumentStore()
    server.dispatcher = MessageDispatcher(server.documents)
    return server


def open_params(text: str) -> DidOpenTextDocumentParams:
    return DidOpenTextDocumentParams(
        text_document=TextDocumentItem(uri=URI, language_id="javascript", version=1, text=text)
    )


def change_params(*changes) -> DidChangeTextDocumentParams:
    """Structure a didChange payload as it arrives on the wire."""
    return get_converter().structure(
        {"textDocument": {"uri": URI, "version": 2}, "contentChanges": list(changes)},
        DidChangeTextDocumentParams,
    )


def completion_params(uri: str = URI) -> CompletionParams:
    return CompletionParams(
        text_document=TextDocumentIdentifier(uri=uri),
        position=Position(line=0, character=5),
    )


@pytest.mark.asyncio
async def test_initialize_starts_serving(ls):
    params = InitializeParams(
        process_id=1234,
        capabilities=ClientCapabilities(),
        client_info=ClientInfo(name="test-editor"),
        root_uri="file:///project",
    )

    await handle_initialize(ls, params)

    assert ls.dispatcher.state is ServerState.SERVING


@pytest.mark.asyncio
async def test_open_then_complete(ls):
    await handle_did_open(ls, open_params("const answer = compute(x);"))

    items = await handle_completion(ls, completion_params())

    assert {item.label for item in items} == {"const", "answer", "compute"}


@pytest.mark.asyncio
async def test_change_replaces_document(ls):
    await handle_did_open(ls, open_params("before"))
    await handle_did_change(ls, change_params({"text": "after"}))

    items = await handle_completion(ls, completion_params())

    assert [item.label for item in items] == ["after"]


@pytest.mark.asyncio
async def test_complete_unopened_document(ls):
    assert await handle_completion(ls, completion_params("file:///elsewhere.js")) == []


@pytest.mark.asyncio
async def test_close_keeps_text(ls):
    await handle_did_open(ls, open_params("persistent"))
    await handle_did_close(ls, DidCloseTextDocumentParams(text_document=TextDocumentIdentifier(uri=URI)))

    assert ls.documents.get(DocumentId(URI)) == "persistent"
    assert not ls.window_log_message.called


@pytest.mark.asyncio
async def test_range_change_logged_to_client(ls):
    await handle_did_open(ls, open_params("original"))
    params = change_params(
        {
            "range": {
                "start": {"line": 0, "character": 0},
                "end": {"line": 0, "character": 1},
            },
            "text": "O",
        }
    )

    await handle_did_change(ls, params)

    assert ls.documents.get(DocumentId(URI)) == "original"
    call_args = ls.window_log_message.call_args[0][0]
    assert isinstance(call_args, LogMessageParams)
    assert call_args.type == MessageType.Error


@pytest.mark.asyncio
async def test_shutdown_then_exit(ls):
    ls.dispatcher.initialized()

    await handle_shutdown(ls)
    assert ls.dispatcher.state is ServerState.SHUTTING_DOWN

    await handle_exit(ls)
    assert ls.dispatcher.state is ServerState.EXITED
