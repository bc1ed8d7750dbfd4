"""Error types raised by the JSON file codecs."""

from __future__ import annotations

import errno
import os
from typing import Union


class JsonFileError(Exception):
    """Base class for all codec errors."""


class JsonFileNotFoundError(JsonFileError, FileNotFoundError):
    """Raised when a JSON file to read does not exist."""


class JsonDecodeError(JsonFileError, ValueError):
    """Raised when file content is not valid JSON or does not fit the shape."""


class JsonEncodeError(JsonFileError, ValueError):
    """Raised when a value cannot be represented as JSON."""


class JsonFileIOError(JsonFileError, OSError):
    """Raised on filesystem or stream failures."""


def file_not_found(path: Union[str, os.PathLike[str]]) -> JsonFileNotFoundError:
    """Build the error raised for a missing JSON file."""
    return JsonFileNotFoundError(errno.ENOENT, "JSON file not found", os.fspath(path))


def io_error(exc: OSError, path: Union[str, os.PathLike[str]]) -> JsonFileIOError:
    """Wrap a filesystem failure, keeping its errno and the offending path."""
    filename = os.fspath(exc.filename if exc.filename is not None else path)
    return JsonFileIOError(exc.errno, exc.strerror or str(exc), filename)
