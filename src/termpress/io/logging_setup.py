"""Logging bootstrap for one termpress process.

The server starts one process per remote client, so each process serves
exactly one session (or is the server itself). The log file is named after
that role and session id, and every record carries the id so interleaved
stderr from the server can be told apart.

// [LAW:single-enforcer] Handlers on the `termpress` logger are attached here only.
"""

from __future__ import annotations

import logging
import os
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path

LOGGER_NAME = "termpress"
DEFAULT_LOG_DIR = "~/.local/share/termpress/logs"
MAX_LOG_BYTES = 5 * 1024 * 1024
LOG_BACKUPS = 3

FILE_FORMAT = "%(asctime)s %(levelname)s [%(session)s] %(name)s: %(message)s"
STREAM_FORMAT = "[%(session)s] %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class LogRuntime:
    """Where this process logs and at what level."""

    role: str
    session_id: str
    level: int
    file_path: Path

    @property
    def level_name(self) -> str:
        return logging.getLevelName(self.level)


_RUNTIME: LogRuntime | None = None


def new_session_id() -> str:
    return uuid.uuid4().hex[:8]


class SessionTag(logging.Filter):
    """Stamps each record with the session id this process serves."""

    def __init__(self, session_id: str) -> None:
        super().__init__()
        self.session_id = session_id

    def filter(self, record: logging.LogRecord) -> bool:
        record.session = self.session_id
        return True


def _level_from_env() -> int:
    level = logging.getLevelName(os.environ.get("TERMPRESS_LOG_LEVEL", "INFO").strip().upper())
    # getLevelName returns a "Level X" string for names it does not know.
    return level if isinstance(level, int) else logging.INFO


def _log_file(role: str, session_id: str) -> Path:
    explicit = os.environ.get("TERMPRESS_LOG_FILE")
    if explicit:
        return Path(explicit)
    log_dir = Path(os.environ.get("TERMPRESS_LOG_DIR") or os.path.expanduser(DEFAULT_LOG_DIR))
    stamp = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
    return log_dir / f"{role}-{session_id}-{stamp}.log"


def configure(
    role: str = "session",
    session_id: str | None = None,
    *,
    stream: bool = True,
) -> LogRuntime:
    """Attach the file handler (and optionally stderr) to the `termpress` logger.

    role is "session" for a browsing process and "serve" for the server.
    stream=False leaves stderr alone; a local TUI owns the terminal.
    Only the first call configures; later calls return the same runtime.
    """
    global _RUNTIME
    if _RUNTIME is not None:
        return _RUNTIME

    session_id = session_id or new_session_id()
    level = _level_from_env()
    file_path = _log_file(role, session_id)
    file_path.parent.mkdir(parents=True, exist_ok=True)

    file_handler = RotatingFileHandler(
        file_path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS, encoding="utf-8"
    )
    file_handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%dT%H:%M:%S"))
    handlers: list[logging.Handler] = [file_handler]
    if stream:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter(STREAM_FORMAT))
        handlers.append(stream_handler)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.propagate = False
    logger.handlers.clear()
    tag = SessionTag(session_id)
    for handler in handlers:
        handler.setLevel(level)
        handler.addFilter(tag)
        logger.addHandler(handler)

    _RUNTIME = LogRuntime(role=role, session_id=session_id, level=level, file_path=file_path)
    return _RUNTIME
