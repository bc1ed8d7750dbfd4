"""In-memory JSON codec for tests and callers that must not touch disk."""

from __future__ import annotations

import asyncio
import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from jsonfile.cancellation import run_cancellable
from jsonfile.codec.base import JsonFileSerializer, PathLike
from jsonfile.config import CodecConfig
from jsonfile.errors import file_not_found
from jsonfile.io.json_text import decode_json, encode_json


class InMemoryJsonCodec(JsonFileSerializer):
    """Keep encoded JSON documents in a dict keyed by path."""

    def __init__(
        self,
        config: Optional[CodecConfig] = None,
        files: Optional[Mapping[str, str]] = None,
    ) -> None:
        super().__init__(config)
        self._files: Dict[str, str] = dict(files or {})

    @property
    def files(self) -> Mapping[str, str]:
        """Read-only view of stored JSON text."""
        return MappingProxyType(self._files)

    def exists(self, path: PathLike) -> bool:
        """Return whether a document is stored under ``path``."""
        return os.fspath(path) in self._files

    async def read(
        self,
        path: PathLike,
        shape: Any = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        return await run_cancellable(self._read(os.fspath(path), shape), cancel_event)

    async def write(
        self,
        path: PathLike,
        value: Any,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> None:
        await run_cancellable(self._write(os.fspath(path), value), cancel_event)

    async def _read(self, key: str, shape: Any) -> Any:
        if key not in self._files:
            raise file_not_found(key)
        return decode_json(self._files[key], shape, self.config)

    async def _write(self, key: str, value: Any) -> None:
        self._files[key] = encode_json(value, self.config)
