"""Asynchronous JSON file persistence with typed decoding."""

from jsonfile.codec import FileJsonCodec, InMemoryJsonCodec, JsonFileSerializer
from jsonfile.config import CodecConfig, load_codec_config
from jsonfile.errors import (
    JsonDecodeError,
    JsonEncodeError,
    JsonFileError,
    JsonFileIOError,
    JsonFileNotFoundError,
)
from jsonfile.io.json_text import read_json, write_json

__all__ = [
    "FileJsonCodec",
    "InMemoryJsonCodec",
    "JsonFileSerializer",
    "CodecConfig",
    "load_codec_config",
    "read_json",
    "write_json",
    "JsonFileError",
    "JsonFileNotFoundError",
    "JsonDecodeError",
    "JsonEncodeError",
    "JsonFileIOError",
]
