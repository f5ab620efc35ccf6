# -*- coding: utf-8 -*-
"""Header sniffing for images sent to the device."""

from __future__ import annotations

import logging
from pathlib import Path

from garage.constants import DEFAULT_MAX_IMAGE_FILESIZE, JPEG_EXTENSIONS, JPEG_HEADER_SIZE
from garage.models.image_status import ImageStatus
from garage.utils.file_utils import check_file_size, read_file_header

logger = logging.getLogger(__name__)


JPEG_SOI = b"\xff\xd8"
# JFIF and Exif files carry 0xE0 / 0xE1 in the fourth byte.
JPEG_LOSSLESS_MARKER = 0xEE


def is_jpeg_path(path: str | Path) -> bool:
    return Path(path).suffix.lower() in JPEG_EXTENSIONS


def classify_jpeg_header(header: bytes) -> ImageStatus:
    """Classify the first bytes of a file the device may receive as a JPEG.

    This is a heuristic on the first four bytes, not a JPEG parser.
    """
    header = header.ljust(JPEG_HEADER_SIZE, b"\x00")
    if header[0] == 0x00 and header[1] == 0x00:
        return ImageStatus.ERROR_TYPE_JPEG2000
    if header[:2] != JPEG_SOI:
        return ImageStatus.ERROR_TYPE_NOT_JPEG
    if header[3] == JPEG_LOSSLESS_MARKER:
        return ImageStatus.ERROR_TYPE_JPEGLOSSLESS
    return ImageStatus.ERROR_TYPE_NOERROR


def check_jpeg(path: str | Path) -> ImageStatus:
    """Return ERROR_TYPE_NOERROR if the device can display the JPEG at `path`."""
    try:
        header = read_file_header(path, JPEG_HEADER_SIZE)
    except OSError as exc:
        logger.error("check_jpeg: %s", exc)
        return ImageStatus.ERROR_FILE_ACCESS

    status = classify_jpeg_header(header)
    if not status.ok:
        logger.debug("check_jpeg %s: %s (header=%s)", path, status.name, header.hex())
    return status


def check_image(path: str | Path, max_size: int = DEFAULT_MAX_IMAGE_FILESIZE) -> ImageStatus:
    """Run the size check, then the JPEG header check for .jpg/.jpeg files."""
    status = check_file_size(path, max_size)
    if not status.ok:
        return status
    if is_jpeg_path(path):
        return check_jpeg(path)
    return status
