"""Resize plugin."""

from .expression import AlignmentBuilder, ResizeBuilder, resize
from .modes import Anchor, FitMode, ScaleMode
from .schema import ResizeParams

__all__ = [
    "AlignmentBuilder",
    "Anchor",
    "FitMode",
    "ResizeBuilder",
    "ResizeParams",
    "ScaleMode",
    "resize",
]
