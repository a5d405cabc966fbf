"""Scalar streams feeding the fixture synthesizer."""
from .base import DEFAULT_SEED, ScalarStream, StreamConfig
from .counting import CountingStream
from .cyclic_stream import CyclicStream
from .random_stream import RandomStream
from .registry import StreamCatalog

__all__ = [
    "DEFAULT_SEED",
    "ScalarStream",
    "StreamConfig",
    "CountingStream",
    "CyclicStream",
    "RandomStream",
    "StreamCatalog",
]
