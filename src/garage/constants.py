# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "garage-utils"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

PLATFORM_WIN32 = "win32"
PLATFORM_DARWIN = "darwin"
# Used when the runtime does not report a platform.
PLATFORM_DEFAULT = PLATFORM_WIN32

BUILD_VARIANTS = ("default", "bz")

# Largest image the device accepts, in bytes. Files of exactly this size are rejected.
DEFAULT_MAX_IMAGE_FILESIZE = 5_000_000

JPEG_HEADER_SIZE = 8
JPEG_EXTENSIONS = (".jpg", ".jpeg")

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
