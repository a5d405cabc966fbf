"""Exception types raised by shape resolution and stream construction."""
from __future__ import annotations


class ShapeError(TypeError):
    """
    A target cannot be described as a numeric fixture shape.

    Raised while a shape is being built, before any value is pulled from a
    stream. `path` names the offending field (dotted, e.g. ``"pose.x"``).
    """

    def __init__(self, message: str, path: str = ""):
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class StreamError(ValueError):
    """A scalar stream was constructed with an invalid configuration."""
