"""Common module - URL builder, base classes, and errors."""

from .errors import InvalidArgumentError
from .url_builder import ImageUrlBuilder, ParameterBuilder

__all__ = [
    "ImageUrlBuilder",
    "InvalidArgumentError",
    "ParameterBuilder",
]
