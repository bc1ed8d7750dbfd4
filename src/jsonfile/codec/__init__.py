"""JSON codec backends."""

from jsonfile.codec.base import JsonFileSerializer
from jsonfile.codec.file import FileJsonCodec
from jsonfile.codec.memory import InMemoryJsonCodec

__all__ = ["JsonFileSerializer", "FileJsonCodec", "InMemoryJsonCodec"]
