import logging
import sys
from pathlib import Path

from lspword.config import Settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
STDERR_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

PACKAGE_LOGGER = "lspword"


def _create_log_file(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return logging.FileHandler(path, mode="w", encoding="utf-8")


def init_logging(settings: Settings) -> logging.Handler:
    """
    Configure logging for the server process.

    The configured level applies to lsp-word's own loggers. pygls logs
    every message it sends at INFO, so it and other libraries stay at
    WARNING or above unless the level is DEBUG.

    Logs go to the log file under the cache directory. If it cannot be
    created they go to stderr without timestamps. Never stdout: it carries
    the protocol stream.
    """
    try:
        handler = _create_log_file(settings.log_file)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    except OSError:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(STDERR_FORMAT))

    if settings.log_level <= logging.DEBUG:
        library_level = settings.log_level
    else:
        library_level = max(settings.log_level, logging.WARNING)

    root = logging.getLogger()
    root.setLevel(library_level)
    root.addHandler(handler)

    logging.getLogger(PACKAGE_LOGGER).setLevel(settings.log_level)
    logging.getLogger("pygls").setLevel(library_level)
    return handler
