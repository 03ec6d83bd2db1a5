"""
Message Dispatcher

Routes inbound protocol messages to the document store and the completion
engine, one message at a time, in arrival order.

Design Principles:
1. Closed set of recognized methods (see Method); anything else is ignored
   through an explicit branch, never a silent catch-all
2. Strictly sequential: a message is handled fully before the next one
3. The dispatcher owns no transport; responses go to a sink callable
4. A malformed message is logged and skipped, the loop keeps serving

Under pygls the server loop calls dispatch() with params pygls has already
structured, and pygls sends the returned result. run() is the loop used
without a pygls transport: it reads Message values from any iterable,
structures raw JSON params itself and writes responses to the sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lsprotocol import converters
from lsprotocol.types import (
    EXIT,
    SHUTDOWN,
    TEXT_DOCUMENT_COMPLETION,
    TEXT_DOCUMENT_DID_CHANGE,
    TEXT_DOCUMENT_DID_CLOSE,
    TEXT_DOCUMENT_DID_OPEN,
    CompletionItem,
    CompletionParams,
    CompletionResponse,
    DidChangeTextDocumentParams,
    DidCloseTextDocumentParams,
    DidOpenTextDocumentParams,
    ErrorCodes,
    ResponseError,
    ResponseErrorMessage,
    ShutdownResponse,
)

from lspword.errors import MalformedParamsError
from lspword.lsp.completion import complete
from lspword.workspace.documents import DocumentId, DocumentStore

logger = logging.getLogger(__name__)

Sink = Callable[[Any], None]


class Method(str, Enum):
    """Protocol methods the dispatcher acts on."""

    COMPLETION = TEXT_DOCUMENT_COMPLETION
    SHUTDOWN = SHUTDOWN
    EXIT = EXIT
    DID_OPEN = TEXT_DOCUMENT_DID_OPEN
    DID_CHANGE = TEXT_DOCUMENT_DID_CHANGE
    DID_CLOSE = TEXT_DOCUMENT_DID_CLOSE

    @classmethod
    def lookup(cls, name: str) -> Method | None:
        """Return the Method for a wire name, or None if it is not recognized."""
        try:
            return cls(name)
        except ValueError:
            return None


class ServerState(Enum):
    """Lifecycle of the dispatch loop."""

    AWAITING_INITIALIZE = "awaiting_initialize"
    SERVING = "serving"
    SHUTTING_DOWN = "shutting_down"
    EXITED = "exited"


@dataclass(frozen=True)
class Message:
    """
    An inbound request or notification.

    Attributes:
        method: Wire method name (e.g. "textDocument/completion")
        params: Structured lsprotocol params, or a raw JSON-like mapping
        id: Request id echoed on the response; None for notifications
    """

    method: str
    params: Any = None
    id: int | str | None = None

    @property
    def is_request(self) -> bool:
        return self.id is not None


def _discard(response: Any) -> None:
    pass


class MessageDispatcher:
    """
    Maps inbound messages to actions on a DocumentStore.

    Usage:
        dispatcher = MessageDispatcher(DocumentStore(), sink=send)
        dispatcher.initialized()
        dispatcher.run(messages)

    Requests carrying an id get their response sent to the sink, tagged with
    that id. Every handler also returns its result, so a transport that
    correlates responses on its own (pygls) can dispatch without a sink.
    """

    def __init__(self, store: DocumentStore, sink: Sink | None = None) -> None:
        self.store = store
        self.sink = sink or _discard
        self.state = ServerState.AWAITING_INITIALIZE
        self._converter = converters.get_converter()

        self._handlers: dict[Method, Callable[[Message], Any]] = {
            Method.COMPLETION: self._on_completion,
            Method.SHUTDOWN: self._on_shutdown,
            Method.EXIT: self._on_exit,
            Method.DID_OPEN: self._on_did_open,
            Method.DID_CHANGE: self._on_did_change,
            Method.DID_CLOSE: self._on_did_close,
        }

    def initialized(self) -> None:
        """Enter the serving state once the initialize handshake is done."""
        self.state = ServerState.SERVING

    def run(self, messages: Iterable[Message]) -> None:
        """
        Handle messages in order until an exit notification arrives.

        A message with malformed params is logged and skipped; requests
        additionally get an InvalidParams error response.
        """
        for message in messages:
            try:
                self.dispatch(message)
            except MalformedParamsError as e:
                logger.error("Skipping message: %s", e)
                if message.is_request:
                    self.sink(
                        ResponseErrorMessage(
                            id=message.id,
                            error=ResponseError(
                                code=ErrorCodes.InvalidParams,
                                message=str(e),
                            ),
                        )
                    )

            if self.state is ServerState.EXITED:
                break

    def dispatch(self, message: Message) -> Any:
        """
        Handle a single message and return its result.

        Unrecognized methods are ignored and return None.

        Raises:
            MalformedParamsError: If params do not fit the method
        """
        method = Method.lookup(message.method)
        if method is None:
            logger.debug("Ignoring unrecognized method: %s", message.method)
            return None

        return self._handlers[method](message)

    # ===== Requests =====

    def _on_completion(self, message: Message) -> list[CompletionItem]:
        params = self._structure(message, CompletionParams)
        doc_id = DocumentId(params.text_document.uri)

        items = complete(doc_id, self.store)
        logger.debug("Completion for %s: %d items", doc_id, len(items))

        if message.is_request:
            self.sink(CompletionResponse(id=message.id, result=items))
        return items

    def _on_shutdown(self, message: Message) -> None:
        logger.info("Shutdown requested")
        self.state = ServerState.SHUTTING_DOWN

        if message.is_request:
            self.sink(ShutdownResponse(id=message.id))
        return None

    # ===== Notifications =====

    def _on_exit(self, message: Message) -> None:
        logger.info("Exit notification received")
        self.state = ServerState.EXITED
        return None

    def _on_did_open(self, message: Message) -> None:
        params = self._structure(message, DidOpenTextDocumentParams)
        doc_id = DocumentId(params.text_document.uri)

        self.store.upsert(doc_id, params.text_document.text)
        logger.info("Document opened: %s (%d documents cached)", doc_id, len(self.store))
        return None

    def _on_did_change(self, message: Message) -> None:
        params = self._structure(message, DidChangeTextDocumentParams)
        doc_id = DocumentId(params.text_document.uri)

        if not params.content_changes:
            raise MalformedParamsError(message.method, "no content changes")

        # Full sync: the last change carries the whole document.
        change = params.content_changes[-1]
        if getattr(change, "range", None) is not None:
            raise MalformedParamsError(
                message.method, "range edit received but only full sync is supported"
            )

        self.store.upsert(doc_id, change.text)
        logger.debug("Document changed: %s", doc_id)
        return None

    def _on_did_close(self, message: Message) -> None:
        params = self._structure(message, DidCloseTextDocumentParams)
        doc_id = DocumentId(params.text_document.uri)

        # The store keeps closed documents until the server exits.
        logger.debug("Document closed: %s (text kept: %s)", doc_id, doc_id in self.store)
        return None

    def _structure(self, message: Message, params_type: type) -> Any:
        """Return message.params as params_type, structuring raw mappings."""
        params = message.params
        if isinstance(params, params_type):
            return params

        if not isinstance(params, Mapping):
            raise MalformedParamsError(
                message.method, f"expected {params_type.__name__}, got {type(params).__name__}"
            )

        try:
            return self._converter.structure(dict(params), params_type)
        except Exception as e:
            raise MalformedParamsError(message.method, f"{type(e).__name__}: {e}") from e
