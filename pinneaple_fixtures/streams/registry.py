"""StreamCatalog factory for building scalar streams by name."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Type

from .base import ScalarStream, StreamConfig
from .cyclic_stream import CyclicStream
from .random_stream import RandomStream

_REGISTRY: Dict[str, Type] = {
    "random": RandomStream,
    "cyclic": CyclicStream,
}


@dataclass
class StreamCatalog:
    """
    Factory-style catalog of scalar stream implementations.

    Attributes:
        registry: Mapping from string keys to stream classes. Initialized
                  from the built-in streams; `register` adds more.
    """
    registry: Dict[str, Type] = None

    def __post_init__(self):
        """Initialize the catalog registry from the default internal mapping."""
        self.registry = dict(_REGISTRY) if self.registry is None else dict(self.registry)

    def list(self):
        """
        List all available stream keys.

        Returns:
            A sorted list of registered stream names.
        """
        return sorted(self.registry.keys())

    def register(self, name: str, cls: Type) -> None:
        """Register `cls` under `name` (case-insensitive)."""
        self.registry[name.lower().strip()] = cls

    def build(self, name: str, **kwargs) -> ScalarStream:
        """
        Instantiate a stream by name.

        Args:
            name: String key identifying the stream (case-insensitive).
            **kwargs: Keyword arguments forwarded to the stream constructor.

        Returns:
            An instance of the requested stream.

        Raises:
            KeyError: If the provided name is not found in the registry.
        """
        key = name.lower().strip()
        if key not in self.registry:
            raise KeyError(f"Unknown stream '{name}'. Available: {self.list()}")
        return self.registry[key](**kwargs)

    def from_config(self, cfg: StreamConfig) -> ScalarStream:
        """
        Build the stream described by `cfg`.

        Random streams take `low`, `high` and `seed`; cyclic streams take
        `values`. Any other kind receives only `cfg.options`.
        """
        key = cfg.kind.lower().strip()
        kwargs: Dict[str, Any] = {}
        if key == "random":
            kwargs.update(low=cfg.low, high=cfg.high, seed=cfg.seed)
        elif key == "cyclic":
            kwargs.update(values=cfg.values or [])
        kwargs.update(cfg.options)
        return self.build(key, **kwargs)
