"""JSON file serializer interface."""

from __future__ import annotations

import asyncio
import os
from abc import ABC, abstractmethod
from typing import Any, Optional, Union

from jsonfile.config import CodecConfig

PathLike = Union[str, os.PathLike[str]]


class JsonFileSerializer(ABC):
    """Base class for JSON persistence backends."""

    def __init__(self, config: Optional[CodecConfig] = None) -> None:
        self.config = config or CodecConfig()

    @abstractmethod
    async def read(
        self,
        path: PathLike,
        shape: Any = None,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> Any:
        """Load the JSON document at ``path``, optionally into ``shape``."""
        raise NotImplementedError

    @abstractmethod
    async def write(
        self,
        path: PathLike,
        value: Any,
        *,
        cancel_event: Optional[asyncio.Event] = None,
    ) -> None:
        """Store ``value`` as an indented JSON document at ``path``."""
        raise NotImplementedError
