"""Image URL builder and the parameter store it owns."""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import TYPE_CHECKING, Self, override

import httpx
from loguru import logger

from .errors import InvalidArgumentError

if TYPE_CHECKING:
    from ..plugins.resize.expression import ResizeBuilder


class ImageUrlBuilder:
    """Collects query parameters for a remote image-processing service.

    The builder owns an insertion-ordered parameter store. Sub-builders
    (resize, alignment) hold a reference to it and write through
    `set_parameter`; `build()` serializes the store into a URL.

    Example:
        builder = ImageUrlBuilder("/images/photo.jpg")
        builder.resize(lambda img: img.width(200).height(100).crop())
        builder.build()  # "/images/photo.jpg?width=200&height=100&mode=crop"
    """

    def __init__(self, path: str):
        self._path: str = path
        self._parameters: dict[str, str] = {}

    @property
    def path(self) -> str:
        return self._path

    @property
    def parameters(self) -> Mapping[str, str]:
        """Read-only view of the parameter store."""
        return MappingProxyType(self._parameters)

    def set_parameter(self, key: str, value: str) -> None:
        """Insert or overwrite a single parameter (last write wins)."""
        if not key:
            raise InvalidArgumentError("Parameter name must not be empty.")

        logger.debug(f"Setting image parameter {key}={value}")
        self._parameters[key] = value

    def resize(self, configure: "Callable[[ResizeBuilder], object]") -> Self:
        """Attach resize options, see `cl_image_url.plugins.resize.resize`."""
        from ..plugins.resize.expression import resize

        return resize(self, configure)

    def build(self) -> str:
        """Serialize the path and parameter store into a URL.

        Parameters are merged into any query string already present on the path.
        """
        if not self._parameters:
            return self._path

        url = httpx.URL(self._path).copy_merge_params(self._parameters)
        return str(url)

    @override
    def __str__(self) -> str:
        return self.build()

    @override
    def __repr__(self) -> str:
        return f"ImageUrlBuilder(path={self._path!r}, parameters={self._parameters!r})"


class ParameterBuilder:
    """Base class for fluent sub-builders bound to an `ImageUrlBuilder`."""

    def __init__(self, builder: ImageUrlBuilder):
        self.builder: ImageUrlBuilder = builder
