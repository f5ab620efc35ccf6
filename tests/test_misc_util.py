# -*- coding: utf-8 -*-
"""Tests for the MiscUtil facade."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

from garage.misc_util import MiscUtil
from garage.models.image_status import ImageStatus
from garage.models.runtime_config import RuntimeConfig


def test_default_util_detects_host_platform() -> None:
    util = MiscUtil()
    assert util.config.platform == sys.platform
    assert util.is_bz() is False


@pytest.mark.parametrize("platform", ["win32", "darwin", "linux"])
def test_windows_and_darwin_never_both_true(platform: str) -> None:
    util = MiscUtil(RuntimeConfig(platform=platform))
    assert not (util.is_windows() and util.is_darwin())


def test_empty_platform_falls_back_to_detection() -> None:
    util = MiscUtil(RuntimeConfig(platform=""))
    assert util.is_windows() is (sys.platform == "win32")


def test_path_normalization_follows_injected_platform() -> None:
    windows = MiscUtil(RuntimeConfig(platform="win32"))
    darwin = MiscUtil(RuntimeConfig(platform="darwin"))
    assert windows.get_appropriate_path("file:///C:/a%20b.png", True) == "C:/a b.png"
    assert darwin.get_appropriate_path("file:///Users/a", True) == "/Users/a"


def test_is_bz_reflects_build_variant() -> None:
    assert MiscUtil(RuntimeConfig(platform="win32", is_bz=True)).is_bz() is True
    assert MiscUtil(RuntimeConfig(platform="win32", is_bz=False)).is_bz() is False


def test_check_file_size_uses_configured_limit(write_file) -> None:
    path = write_file("img.png", b"x" * 10)
    assert MiscUtil(RuntimeConfig("win32", max_image_filesize=10)).check_file_size(path) == MiscUtil.ERROR_SIZE_TOO_LARGE
    assert MiscUtil(RuntimeConfig("win32", max_image_filesize=11)).check_file_size(path) == MiscUtil.ERROR_TYPE_NOERROR


def test_check_jpeg_and_check_image(jfif_file: Path, tmp_path: Path) -> None:
    util = MiscUtil(RuntimeConfig("win32", max_image_filesize=1000))
    assert util.check_jpeg(jfif_file) is ImageStatus.ERROR_TYPE_NOERROR
    assert util.check_image(jfif_file) is ImageStatus.ERROR_TYPE_NOERROR
    assert util.check_jpeg(tmp_path / "missing.jpg") == 0


def test_exists_file(jfif_file: Path, tmp_path: Path) -> None:
    util = MiscUtil(RuntimeConfig("linux"))
    assert util.exists_file(jfif_file) is True
    assert util.exists_file(tmp_path) is False
    assert util.exists_file("") is False


def test_status_aliases_match_integer_codes() -> None:
    assert MiscUtil.ERROR_FILE_ACCESS == 0
    assert MiscUtil.ERROR_TYPE_NOERROR == 1
    assert MiscUtil.ERROR_TYPE_JPEG2000 == -1
    assert MiscUtil.ERROR_TYPE_JPEGLOSSLESS == -2
    assert MiscUtil.ERROR_TYPE_NOT_JPEG == -3
    assert MiscUtil.ERROR_SIZE_TOO_LARGE == -10


def test_runtime_config_is_frozen() -> None:
    config = RuntimeConfig(platform="win32")
    with pytest.raises(AttributeError):
        config.is_bz = True  # type: ignore[misc]
