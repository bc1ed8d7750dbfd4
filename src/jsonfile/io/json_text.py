"""JSON text encoding, shape conversion and blocking file helpers."""

from __future__ import annotations

import json
import logging
import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import TypeAdapter, ValidationError

from jsonfile.config import DEFAULT_CONFIG, CodecConfig
from jsonfile.errors import (
    JsonDecodeError,
    JsonEncodeError,
    file_not_found,
    io_error,
)

logger = logging.getLogger(__name__)


def _shape_name(shape: Any) -> str:
    return getattr(shape, "__name__", None) or repr(shape)


def _default(value: Any) -> Any:
    # Decimals are narrowed to double precision; json has no exact number hook.
    if isinstance(value, Decimal):
        return float(value)
    adapter = TypeAdapter(type(value))
    # Python mode keeps nested Decimals so they come back here as numbers.
    dumped = adapter.dump_python(value, mode="python")
    if dumped is value or not isinstance(dumped, (dict, list, tuple)):
        dumped = adapter.dump_python(value, mode="json")
    return dumped


def encode_json(value: Any, config: Optional[CodecConfig] = None) -> str:
    """Serialize ``value`` to indented JSON text."""
    cfg = config or DEFAULT_CONFIG
    try:
        return json.dumps(
            value,
            indent=cfg.indent,
            ensure_ascii=cfg.ensure_ascii,
            sort_keys=cfg.sort_keys,
            allow_nan=False,
            default=_default,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise JsonEncodeError(f"Value cannot be encoded as JSON: {exc}") from exc


def _validate_text(text: str, shape: Any, cfg: CodecConfig) -> Any:
    try:
        return TypeAdapter(shape).validate_json(text, strict=cfg.strict)
    except ValidationError as exc:
        raise JsonDecodeError(
            f"JSON content does not match {_shape_name(shape)}: {exc}"
        ) from exc


def convert(data: Any, shape: Any = None, config: Optional[CodecConfig] = None) -> Any:
    """Validate decoded JSON data into ``shape``; return it untouched without one.

    Validation runs in JSON mode, so objects are accepted for dataclass and
    model shapes even with ``strict`` set.
    """
    if shape is None:
        return data
    cfg = config or DEFAULT_CONFIG
    return _validate_text(encode_json(data, cfg), shape, cfg)


def decode_json(
    text: str, shape: Any = None, config: Optional[CodecConfig] = None
) -> Any:
    """Parse JSON text, optionally into ``shape``.

    ``float_mode`` applies to untyped values only; with a shape, the field
    types decide how numbers are parsed.
    """
    cfg = config or DEFAULT_CONFIG
    if shape is not None:
        return _validate_text(text, shape, cfg)
    parse_float = Decimal if cfg.float_mode == "decimal" else float
    try:
        return json.loads(text, parse_float=parse_float)
    except json.JSONDecodeError as exc:
        raise JsonDecodeError(f"Invalid JSON text: {exc}") from exc


def write_text_atomic(path: Path, text: str, encoding: str = "utf-8") -> None:
    """Write ``text`` to a temp file beside ``path`` and move it into place."""
    fd, tmp_path = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding=encoding) as handle:
            handle.write(text)
            handle.flush()
            os.fsync(handle.fileno())
        os.replace(tmp_path, path)
    finally:
        try:
            os.remove(tmp_path)
        except FileNotFoundError:
            pass
        except OSError as exc:
            logger.warning("Could not remove temp file %s: %s", tmp_path, exc)


def write_json(
    path: Union[str, os.PathLike[str]],
    data: Any,
    config: Optional[CodecConfig] = None,
) -> None:
    """Write JSON to disk, creating parent directories."""
    cfg = config or DEFAULT_CONFIG
    target = Path(path)
    text = encode_json(data, cfg)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        if cfg.atomic_write:
            write_text_atomic(target, text, cfg.encoding)
        else:
            with target.open("w", encoding=cfg.encoding) as handle:
                handle.write(text)
    except OSError as exc:
        raise io_error(exc, target) from exc
    logger.debug("Wrote %s chars to %s", len(text), target)


def read_json(
    path: Union[str, os.PathLike[str]],
    shape: Any = None,
    config: Optional[CodecConfig] = None,
) -> Any:
    """Read JSON from disk, optionally into ``shape``."""
    cfg = config or DEFAULT_CONFIG
    target = Path(path)
    try:
        with target.open("r", encoding=cfg.encoding) as handle:
            text = handle.read()
    except FileNotFoundError as exc:
        raise file_not_found(target) from exc
    except UnicodeDecodeError as exc:
        raise JsonDecodeError(f"File is not valid {cfg.encoding} text: {exc}") from exc
    except OSError as exc:
        raise io_error(exc, target) from exc
    return decode_json(text, shape, cfg)
