# -*- coding: utf-8 -*-
"""Immutable runtime configuration injected into the utilities."""

from __future__ import annotations

from dataclasses import dataclass

from garage.constants import DEFAULT_MAX_IMAGE_FILESIZE
from garage.utils.platform import get_platform


@dataclass(frozen=True)
class RuntimeConfig:
    """Platform, build variant and image size limit for one process."""

    platform: str
    is_bz: bool = False
    max_image_filesize: int = DEFAULT_MAX_IMAGE_FILESIZE

    @classmethod
    def detect(cls) -> "RuntimeConfig":
        """Return the config for the running host with default build settings."""
        return cls(platform=get_platform())
