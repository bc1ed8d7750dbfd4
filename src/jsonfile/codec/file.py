"""Filesystem-backed JSON codec using non-blocking file I/O."""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Any, Optional

import aiofiles
import aiofiles.os

from jsonfile.cancellation import run_cancellable
from jsonfile.codec.base import JsonFileSerializer, PathLike
from jsonfile.errors import JsonDecodeError, file_not_found, io_error
from jsonfile.io.json_text import decode_json, encode_json, write_text_atomic

logger = logging.getLogger(__name__)


class FileJsonCodec(JsonFileSerializer):
    """Read and write JSON documents on the local filesystem.

    File access goes through ``aiofiles``; JSON encoding and decoding run in a
    worker thread so large documents do not stall the event loop. Each call
    opens its own handles, so calls on different paths are independent.
    Writes to the same path are not serialized. A cancelled write only stops
    the caller waiting: a worker thread already running an atomic write still
    finishes its ``os.replace`` after ``CancelledError`` has been raised.
    """

    async def read(
        self,
        path: PathLike,
        shape: Any = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        """Load the JSON document at ``path``, optionally into ``shape``."""
        return await run_cancellable(self._read(Path(path), shape), cancel_event)

    async def write(
        self,
        path: PathLike,
        value: Any,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> None:
        """Store ``value`` at ``path``, replacing existing content."""
        await run_cancellable(self._write(Path(path), value), cancel_event)

    async def _read(self, path: Path, shape: Any) -> Any:
        if not await aiofiles.os.path.exists(path):
            raise file_not_found(path)
        try:
            async with aiofiles.open(
                path, "r", encoding=self.config.encoding
            ) as handle:
                text = await handle.read()
        except FileNotFoundError as exc:
            raise file_not_found(path) from exc
        except UnicodeDecodeError as exc:
            raise JsonDecodeError(
                f"File is not valid {self.config.encoding} text: {exc}"
            ) from exc
        except OSError as exc:
            raise io_error(exc, path) from exc
        logger.debug("Read %s chars from %s", len(text), path)
        return await asyncio.to_thread(decode_json, text, shape, self.config)

    async def _write(self, path: Path, value: Any) -> None:
        text = await asyncio.to_thread(encode_json, value, self.config)
        try:
            await aiofiles.os.makedirs(path.parent, exist_ok=True)
            if self.config.atomic_write:
                await asyncio.to_thread(
                    write_text_atomic, path, text, self.config.encoding
                )
            else:
                async with aiofiles.open(
                    path, "w", encoding=self.config.encoding
                ) as handle:
                    await handle.write(text)
                    await handle.flush()
        except OSError as exc:
            raise io_error(exc, path) from exc
        logger.debug("Wrote %s chars to %s", len(text), path)
