"""cl_image_url - Fluent query parameter builders for a remote image service."""

from .common.errors import InvalidArgumentError
from .common.url_builder import ImageUrlBuilder, ParameterBuilder
from .plugins.resize import (
    AlignmentBuilder,
    Anchor,
    FitMode,
    ResizeBuilder,
    ResizeParams,
    ScaleMode,
    resize,
)
from .plugins.resize.routes import create_router

__version__ = "0.1.0"

__all__ = [
    "AlignmentBuilder",
    "Anchor",
    "FitMode",
    "ImageUrlBuilder",
    "InvalidArgumentError",
    "ParameterBuilder",
    "ResizeBuilder",
    "ResizeParams",
    "ScaleMode",
    "__version__",
    "create_router",
    "resize",
]
