# -*- coding: utf-8 -*-
"""Normalize file paths that reach the application as file:// URLs."""

from __future__ import annotations

import logging
import re
from urllib.parse import unquote

from garage.utils.platform import is_darwin

logger = logging.getLogger(__name__)

DARWIN_URL_PREFIX = "file://"
DEFAULT_URL_PREFIX = "file:///"
# A "%" must start a two-digit hex escape.
MALFORMED_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class PathDecodeError(ValueError):
    """Raised when a percent-encoded path does not decode to UTF-8 text."""


def url_prefix_for(platform: str | None = None) -> str:
    """Return the file URL prefix to strip on `platform`.

    macOS keeps the leading slash of absolute paths, so only `file://` goes.
    """
    if is_darwin(platform):
        return DARWIN_URL_PREFIX
    return DEFAULT_URL_PREFIX


def decode_path(path: str) -> str:
    """Percent-decode a path as UTF-8.

    Raises PathDecodeError for a stray `%` and for escapes that are not UTF-8.
    """
    match = MALFORMED_ESCAPE.search(path)
    if match:
        raise PathDecodeError(f"Malformed percent-escape at offset {match.start()} in path {path!r}")
    try:
        return unquote(path, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise PathDecodeError(f"Invalid percent-encoding in path {path!r}: {exc}") from exc


def get_appropriate_path(
    path: str,
    convert_backslashes: bool = False,
    platform: str | None = None,
) -> str:
    """Turn a file URL or encoded path into a plain filesystem path string.

    The whole string is percent-decoded, then the platform's `file://` prefix
    is stripped if present, then backslashes become forward slashes when
    `convert_backslashes` is set. The result is not checked against the
    filesystem.
    """
    logger.debug("get_appropriate_path path=%s", path)
    path = decode_path(path)
    prefix = url_prefix_for(platform)
    if path.startswith(prefix):
        # Keeps later occurrences of the prefix, e.g. "file:///a/file:///b" -> "a/file:///b".
        path = path[len(prefix):]
    if convert_backslashes:
        path = path.replace("\\", "/")
    return path
