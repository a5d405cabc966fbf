"""Loading StreamConfig from YAML files or plain mappings."""
from __future__ import annotations

import dataclasses
from pathlib import Path
from typing import Any, Dict, Mapping

import yaml

from .streams.base import StreamConfig


def load_yaml(path: str | Path) -> Dict[str, Any]:
    """Read a YAML mapping from `path` (an empty file gives ``{}``)."""
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(str(p))
    data = yaml.safe_load(p.read_text(encoding="utf-8"))
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise TypeError(f"YAML root must be a mapping (dict). Got: {type(data)}")
    return data


def stream_config_from_dict(data: Mapping[str, Any]) -> StreamConfig:
    """
    Build a `StreamConfig` from a mapping.

    Known keys map onto the config fields; unknown keys are collected into
    `options` and forwarded to the stream constructor. A nested ``stream``
    mapping is used when present, so a fixture file may keep other
    sections next to it.
    """
    if "stream" in data and isinstance(data["stream"], Mapping):
        data = data["stream"]
    names = {f.name for f in dataclasses.fields(StreamConfig)}
    known = {k: v for k, v in data.items() if k in names}
    extra = {k: v for k, v in data.items() if k not in names}
    cfg = StreamConfig(**known)
    cfg.options = {**dict(cfg.options or {}), **extra}
    if cfg.values is not None:
        cfg.values = [float(v) for v in cfg.values]
    return cfg


def load_stream_config(path: str | Path) -> StreamConfig:
    """Load a `StreamConfig` from a YAML file."""
    return stream_config_from_dict(load_yaml(path))


def dump_stream_config(cfg: StreamConfig) -> str:
    """Serialize `cfg` into a YAML string readable by `load_stream_config`."""
    return yaml.safe_dump({"stream": dataclasses.asdict(cfg)}, sort_keys=False, allow_unicode=True)
