# -*- coding: utf-8 -*-
"""File helpers: settings JSON I/O, existence and size checks."""

from __future__ import annotations

import json
import logging
import os
import stat
from pathlib import Path
from typing import Any

from garage.constants import DEFAULT_MAX_IMAGE_FILESIZE
from garage.models.image_status import ImageStatus

logger = logging.getLogger(__name__)


def ensure_dir(path: str | Path) -> Path:
    """Create a directory if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def read_json_file(path: str | Path) -> dict[str, Any]:
    """Read a JSON object from a UTF-8 file."""
    file_path = Path(path)
    with file_path.open("r", encoding="utf-8") as handle:
        data = json.load(handle)
    if not isinstance(data, dict):
        raise ValueError(f"Expected JSON object in {file_path}")
    return data


def write_json_file(path: str | Path, data: dict[str, Any]) -> Path:
    """Write JSON to a file with indentation."""
    file_path = Path(path)
    ensure_dir(file_path.parent)
    with file_path.open("w", encoding="utf-8") as handle:
        json.dump(data, handle, indent=2, ensure_ascii=True)
        handle.write("\n")
    return file_path


def exists_file(path: str | Path | None) -> bool:
    """Return True if `path` names an existing entry that is not a directory.

    Errors while checking are logged and reported as "does not exist".
    """
    try:
        if path and os.path.exists(path) and not stat.S_ISDIR(os.lstat(path).st_mode):
            return True
    except Exception as exc:
        logger.warning("can not access to the image file: %s\n%s", path, exc)
    return False


def read_file_header(path: str | Path, size: int) -> bytes:
    """Read up to `size` bytes from the start of a file.

    Short files are padded with zero bytes. `OSError` propagates.
    """
    with open(path, "rb") as handle:
        data = handle.read(size)
    return data.ljust(size, b"\x00")


def check_file_size(path: str | Path, max_size: int = DEFAULT_MAX_IMAGE_FILESIZE) -> ImageStatus:
    """Check that a file is smaller than `max_size` bytes."""
    try:
        with open(path, "rb") as handle:
            size = os.fstat(handle.fileno()).st_size
    except OSError as exc:
        logger.error("check_file_size: %s", exc)
        return ImageStatus.ERROR_FILE_ACCESS

    if size >= max_size:
        logger.info("File too large: %s (%d bytes, limit %d)", path, size, max_size)
        return ImageStatus.ERROR_SIZE_TOO_LARGE
    return ImageStatus.ERROR_TYPE_NOERROR
