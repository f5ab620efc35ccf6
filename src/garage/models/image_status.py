# -*- coding: utf-8 -*-
"""Status codes returned by the image file checks."""

from __future__ import annotations

from enum import IntEnum


class ImageStatus(IntEnum):
    """Result of an image size or header check.

    Values are the integer codes the host application compares against.
    """

    ERROR_FILE_ACCESS = 0
    ERROR_TYPE_NOERROR = 1
    ERROR_TYPE_JPEG2000 = -1
    ERROR_TYPE_JPEGLOSSLESS = -2
    ERROR_TYPE_NOT_JPEG = -3
    ERROR_SIZE_TOO_LARGE = -10

    @property
    def ok(self) -> bool:
        return self is ImageStatus.ERROR_TYPE_NOERROR

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]


_DESCRIPTIONS = {
    ImageStatus.ERROR_FILE_ACCESS: "file could not be opened or read",
    ImageStatus.ERROR_TYPE_NOERROR: "file is acceptable",
    ImageStatus.ERROR_TYPE_JPEG2000: "JPEG 2000 is not supported",
    ImageStatus.ERROR_TYPE_JPEGLOSSLESS: "lossless JPEG is not supported",
    ImageStatus.ERROR_TYPE_NOT_JPEG: "file is not a JPEG image",
    ImageStatus.ERROR_SIZE_TOO_LARGE: "file exceeds the maximum image size",
}
