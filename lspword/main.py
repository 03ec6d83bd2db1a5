"""
Main entry point for the lsp-word language server.

This file is executed when running: python -m lspword

The server communicates with editors via stdin/stdout using JSON-RPC.
"""
import logging
import sys

from lspword.config import DEBUGPY_PORT, load_settings
from lspword.lsp.server import create_server
from lspword.utils.logs import init_logging

logger = logging.getLogger(__name__)


def main():
    """Start the language server on stdin/stdout."""
    settings = load_settings()
    init_logging(settings)

    # stdout carries the protocol, so debug chatter goes to stderr
    if settings.debug:
        print("lsp-word starting in DEBUG mode", file=sys.stderr)
        print(f"Waiting for debugger to attach on port {DEBUGPY_PORT}...", file=sys.stderr)
        try:
            import debugpy  # type: ignore
            debugpy.listen(("127.0.0.1", DEBUGPY_PORT))
            debugpy.wait_for_client()
            print("Debugger attached! Continuing...", file=sys.stderr)
        except ImportError:
            print("debugpy not available - install with: pip install lsp-word[dev]", file=sys.stderr)

    logger.info("Starting LSP server")
    server = create_server()

    # Start the server - it will listen on stdin/stdout for LSP messages
    # from the editor client
    server.start_io()


if __name__ == "__main__":
    main()
