"""ScalarStream protocol and StreamConfig for fixture scalar sources."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

# mt19937's reference default seed
DEFAULT_SEED = 5489


@runtime_checkable
class ScalarStream(Protocol):
    """
    Protocol for infinite sources of real values.

    Every `pull` returns a float and advances the stream. Streams are never
    exhausted; the synthesizer never asks for lookahead or length.
    """

    def pull(self) -> float:
        """Return the next value and advance the cursor."""
        ...


@dataclass
class StreamConfig:
    """
    Configuration container for building a scalar stream.

    Attributes
    ----------
    kind : str
        Catalog key of the stream ("random", "cyclic", ...).
    seed : int
        Seed for random streams. Ignored by cyclic streams.
    low : float
        Lower bound of random draws.
    high : float
        Upper bound of random draws.
    values : Optional[List[float]]
        Predefined sequence replayed by cyclic streams.
    options : Dict[str, Any]
        Extra keyword arguments forwarded to the stream constructor.
    """
    kind: str = "random"
    seed: int = DEFAULT_SEED
    low: float = 0.0
    high: float = 1.0
    values: Optional[List[float]] = None
    options: Dict[str, Any] = field(default_factory=dict)

    def build(self) -> ScalarStream:
        """Build the configured stream through the default `StreamCatalog`."""
        from .registry import StreamCatalog

        return StreamCatalog().from_config(self)
