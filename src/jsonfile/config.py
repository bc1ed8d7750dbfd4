"""Configuration model for the JSON file codecs."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from omegaconf import OmegaConf
from omegaconf.errors import OmegaConfBaseException

FLOAT_MODES = ("double", "decimal")


@dataclass
class CodecConfig:
    """Serializer settings shared by every read and write of a codec."""

    indent: int = 4
    encoding: str = "utf-8"
    ensure_ascii: bool = False
    sort_keys: bool = False
    float_mode: str = "double"
    strict: bool = False
    atomic_write: bool = False

    def __post_init__(self) -> None:
        if self.indent <= 0:
            raise ValueError(f"indent must be a positive integer, got {self.indent}")
        if self.float_mode not in FLOAT_MODES:
            raise ValueError(
                f"Unsupported float_mode: {self.float_mode!r} "
                f"(expected one of {', '.join(FLOAT_MODES)})"
            )


DEFAULT_CONFIG = CodecConfig()


def load_codec_config(
    path: Optional[Union[str, os.PathLike[str]]] = None,
    overrides: Optional[Mapping[str, Any]] = None,
) -> CodecConfig:
    """Load codec settings from an optional YAML file plus overrides."""
    layers: list[Any] = [OmegaConf.structured(CodecConfig())]
    if path is not None:
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file does not exist: {config_path}")
        raw_cfg = OmegaConf.load(str(config_path))
        data = OmegaConf.to_container(raw_cfg, resolve=True)
        if data is not None and not isinstance(data, dict):
            raise ValueError(f"Config file must hold a mapping: {config_path}")
        layers.append(data or {})
    if overrides:
        layers.append(dict(overrides))
    try:
        merged = OmegaConf.merge(*layers)
        cfg_obj = OmegaConf.to_object(merged)
    except OmegaConfBaseException as exc:
        raise ValueError(f"Invalid codec config: {exc}") from exc
    if not isinstance(cfg_obj, CodecConfig):
        raise ValueError("Codec config did not resolve to CodecConfig.")
    return cfg_obj
