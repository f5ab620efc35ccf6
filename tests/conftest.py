# -*- coding: utf-8 -*-
"""Shared pytest fixtures."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Callable

import pytest


SRC_DIR = Path(__file__).resolve().parents[1] / "src"
if str(SRC_DIR) not in sys.path:
    sys.path.insert(0, str(SRC_DIR))


@pytest.fixture
def write_file(tmp_path: Path) -> Callable[[str, bytes], Path]:
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def jfif_file(write_file) -> Path:
    return write_file("photo.jpg", bytes([0xFF, 0xD8, 0xFF, 0xE0]) + b"\x00" * 100)


@pytest.fixture
def default_config() -> dict:
    from garage.config import get_default_config

    return get_default_config()


@pytest.fixture
def clean_root_logger():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            handler.close()
            root.removeHandler(handler)
    root.setLevel(saved_level)
    for attr in ("_garage_logging_configured", "_garage_session_log", "_garage_handlers"):
        if hasattr(root, attr):
            delattr(root, attr)
