# -*- coding: utf-8 -*-
"""Root logging setup for console + session file logging."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path


LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%dT%H:%M:%S"


def _level_value(level: int | str) -> int:
    if isinstance(level, str):
        return logging.getLevelName(level.upper())
    return level


def set_log_level(level: int | str) -> None:
    """Set the root logger and the handlers installed here to `level`."""
    level = _level_value(level)
    root = logging.getLogger()
    root.setLevel(level)
    for handler in getattr(root, "_garage_handlers", []):
        handler.setLevel(level)


def setup_session_logging(base_dir: str | Path, app_name: str, level: int | str = logging.INFO) -> Path | None:
    """Configure root logging once per process.

    Returns the session log path, or None if the log file could not be created.
    """
    root = logging.getLogger()
    if getattr(root, "_garage_logging_configured", False):
        set_log_level(level)
        return getattr(root, "_garage_session_log", None)

    level = _level_value(level)
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT)
    handlers: list[logging.Handler] = []

    if not any(isinstance(handler, logging.StreamHandler) for handler in root.handlers):
        stream_handler = logging.StreamHandler()
        stream_handler.setLevel(level)
        stream_handler.setFormatter(formatter)
        root.addHandler(stream_handler)
        handlers.append(stream_handler)

    safe_app_name = app_name.lower().replace(" ", "-")
    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    session_log_path: Path | None = Path(base_dir) / "logs" / f"{safe_app_name}-{timestamp}.log"
    try:
        session_log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(session_log_path, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)
        handlers.append(file_handler)
        root.debug("Session log file established: %s", session_log_path)
    except OSError as e:
        root.error("Failed to establish session log file: %s", e)
        session_log_path = None

    root._garage_logging_configured = True  # type: ignore[attr-defined]
    root._garage_session_log = session_log_path  # type: ignore[attr-defined]
    root._garage_handlers = handlers  # type: ignore[attr-defined]
    return session_log_path
