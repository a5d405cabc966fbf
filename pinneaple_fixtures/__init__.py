"""Typed fixture synthesis from scalar streams."""
from .errors import ShapeError, StreamError
from .filler import fill
from .generator import DataGenerator
from .log import configure_logging
from .shapes import Aggregate, FixedSequence, Leaf, Shape, leaf_count, record, shape_of
from .streams import (
    DEFAULT_SEED,
    CountingStream,
    CyclicStream,
    RandomStream,
    ScalarStream,
    StreamCatalog,
    StreamConfig,
)
from .synthesizer import synthesize
from .config import load_stream_config, stream_config_from_dict

__all__ = [
    "ShapeError",
    "StreamError",
    "fill",
    "DataGenerator",
    "configure_logging",
    "Aggregate",
    "FixedSequence",
    "Leaf",
    "Shape",
    "leaf_count",
    "record",
    "shape_of",
    "DEFAULT_SEED",
    "CountingStream",
    "CyclicStream",
    "RandomStream",
    "ScalarStream",
    "StreamCatalog",
    "StreamConfig",
    "synthesize",
    "load_stream_config",
    "stream_config_from_dict",
]
