# -*- coding: utf-8 -*-
"""MiscUtil: the helper facade the editor calls into."""

from __future__ import annotations

from pathlib import Path

from garage.models.image_status import ImageStatus
from garage.models.runtime_config import RuntimeConfig
from garage.utils import file_utils, image_utils, path_utils, platform


class MiscUtil:
    """Path, platform and image-file helpers bound to one `RuntimeConfig`.

    Pass a config to pin the platform, build variant or size limit, e.g. in
    tests. Without one the running host is detected.
    """

    ERROR_FILE_ACCESS = ImageStatus.ERROR_FILE_ACCESS
    ERROR_TYPE_NOERROR = ImageStatus.ERROR_TYPE_NOERROR
    ERROR_TYPE_JPEG2000 = ImageStatus.ERROR_TYPE_JPEG2000
    ERROR_TYPE_JPEGLOSSLESS = ImageStatus.ERROR_TYPE_JPEGLOSSLESS
    ERROR_TYPE_NOT_JPEG = ImageStatus.ERROR_TYPE_NOT_JPEG
    ERROR_SIZE_TOO_LARGE = ImageStatus.ERROR_SIZE_TOO_LARGE

    def __init__(self, config: RuntimeConfig | None = None) -> None:
        self.config = config or RuntimeConfig.detect()

    def get_appropriate_path(self, path: str, convert_backslashes: bool = False) -> str:
        return path_utils.get_appropriate_path(path, convert_backslashes, platform=self._get_platform())

    def _get_platform(self) -> str:
        return self.config.platform or platform.get_platform()

    def is_windows(self) -> bool:
        return platform.is_windows(self._get_platform())

    def is_darwin(self) -> bool:
        return platform.is_darwin(self._get_platform())

    def is_bz(self) -> bool:
        """Return True for the business build variant."""
        return self.config.is_bz

    def check_file_size(self, path: str | Path) -> ImageStatus:
        return file_utils.check_file_size(path, self.config.max_image_filesize)

    def check_jpeg(self, path: str | Path) -> ImageStatus:
        return image_utils.check_jpeg(path)

    def check_image(self, path: str | Path) -> ImageStatus:
        return image_utils.check_image(path, self.config.max_image_filesize)

    def exists_file(self, path: str | Path | None) -> bool:
        return file_utils.exists_file(path)
