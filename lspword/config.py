"""
Settings read from the process environment.

LSP_WORD_LOG     log level name (debug, info, warning, error); default info
XDG_CACHE_HOME   base directory for the log file; default ~/.cache
DEBUG            wait for a debugpy client before serving
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

LOG_LEVEL_VAR = "LSP_WORD_LOG"
LOG_DIR_NAME = "lsp-word"
LOG_FILE_NAME = "lsp-word.log"

DEBUGPY_PORT = 5678


@dataclass(frozen=True)
class Settings:
    log_level: int
    cache_dir: Path
    debug: bool

    @property
    def log_file(self) -> Path:
        return self.cache_dir / LOG_DIR_NAME / LOG_FILE_NAME


def parse_log_level(raw: str | None) -> int:
    """Map a level name like 'debug' to its logging constant, defaulting to INFO."""
    if not raw:
        return logging.INFO
    level = getattr(logging, raw.strip().upper(), None)
    if isinstance(level, int):
        return level
    return logging.INFO


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from environ (os.environ by default)."""
    if environ is None:
        environ = os.environ

    cache_home = environ.get("XDG_CACHE_HOME")
    cache_dir = Path(cache_home) if cache_home else Path.home() / ".cache"

    return Settings(
        log_level=parse_log_level(environ.get(LOG_LEVEL_VAR)),
        cache_dir=cache_dir,
        debug=bool(environ.get("DEBUG")),
    )
