"""Fluent builder for the resize family of image URL parameters."""

from collections.abc import Callable
from decimal import Decimal
from typing import Self

from loguru import logger

from ...common.errors import InvalidArgumentError
from ...common.url_builder import ImageUrlBuilder, ParameterBuilder
from .modes import (
    ANCHOR,
    FIT_MODE,
    HEIGHT,
    MAX_HEIGHT,
    MAX_WIDTH,
    SCALE,
    WIDTH,
    ZOOM,
    Anchor,
    FitMode,
    ScaleMode,
)


def _positive_int(value: int, label: str) -> str:
    if isinstance(value, bool) or not isinstance(value, int):
        logger.debug(f"Rejected {label} {value!r}: not an integer")
        raise InvalidArgumentError(f"{label} must be an integer.")
    if value <= 0:
        logger.debug(f"Rejected {label} {value!r}: not positive")
        raise InvalidArgumentError(f"{label} must be greater than 0.")
    return str(value)


def _positive_decimal(value: int | float | Decimal, label: str) -> str:
    """Render a positive multiplier without losing digits or using exponents."""
    if isinstance(value, bool) or not isinstance(value, int | float | Decimal):
        logger.debug(f"Rejected {label} {value!r}: not a number")
        raise InvalidArgumentError(f"{label} must be a number.")

    # floats go through repr so 0.1 stays "0.1"
    number = value if isinstance(value, Decimal) else Decimal(repr(value))

    if not number.is_finite() or number <= 0:
        logger.debug(f"Rejected {label} {value!r}: not a positive finite number")
        raise InvalidArgumentError(f"{label} must be greater than 0.")
    return format(number, "f")


class ResizeBuilder(ParameterBuilder):
    """Configures width, height, fit mode, scale mode, and zoom.

    Every method validates its input before writing, then returns a builder
    to keep chaining. Fit and scale choices that support anchoring return an
    `AlignmentBuilder`, which adds the anchor operations to this builder.
    """

    def dimensions(self, width: int, height: int) -> Self:
        """Set width and height. Aspect ratio is kept according to the fit mode."""
        return self.width(width).height(height)

    def width(self, width: int) -> Self:
        """Set the desired width in pixels."""
        self.builder.set_parameter(WIDTH, _positive_int(width, "Width"))
        return self

    def height(self, height: int) -> Self:
        """Set the desired height in pixels."""
        self.builder.set_parameter(HEIGHT, _positive_int(height, "Height"))
        return self

    def max_width(self, max_width: int) -> Self:
        """Set the maximum width in pixels. Keeps aspect ratio without padding."""
        self.builder.set_parameter(MAX_WIDTH, _positive_int(max_width, "Max width"))
        return self

    def max_height(self, max_height: int) -> Self:
        """Set the maximum height in pixels. Keeps aspect ratio without padding."""
        self.builder.set_parameter(MAX_HEIGHT, _positive_int(max_height, "Max height"))
        return self

    def max(self) -> Self:
        """Fit mode max: behaves like max width / max height."""
        self.builder.set_parameter(FIT_MODE, FitMode.MAX.value)
        return self

    def pad(self) -> "AlignmentBuilder":
        """Fit mode pad: adds whitespace to resolve aspect-ratio conflicts."""
        self.builder.set_parameter(FIT_MODE, FitMode.PAD.value)
        return AlignmentBuilder(self.builder)

    def crop(self) -> "AlignmentBuilder":
        """Fit mode crop: trims the image to the requested box."""
        self.builder.set_parameter(FIT_MODE, FitMode.CROP.value)
        return AlignmentBuilder(self.builder)

    def stretch(self) -> Self:
        """Fit mode stretch: fills the box, losing aspect ratio.

        Nothing is left to anchor, so chaining stays on the resize builder.
        """
        self.builder.set_parameter(FIT_MODE, FitMode.STRETCH.value)
        return self

    def scale_up(self) -> Self:
        """Only allow upscaling."""
        self.builder.set_parameter(SCALE, ScaleMode.UP.value)
        return self

    def scale_down(self) -> Self:
        """Only allow downscaling (service default)."""
        self.builder.set_parameter(SCALE, ScaleMode.DOWN.value)
        return self

    def scale_both(self) -> Self:
        self.builder.set_parameter(SCALE, ScaleMode.BOTH.value)
        return self

    def scale_canvas(self) -> "AlignmentBuilder":
        """Scale the image down and pad the canvas instead of upscaling."""
        self.builder.set_parameter(SCALE, ScaleMode.CANVAS.value)
        return AlignmentBuilder(self.builder)

    def zoom(self, multiplier: int | float | Decimal) -> Self:
        """Scale the image by a multiplier.

        0.5 produces a half-size image, 2 a double-size one. The value is
        written with all of its digits, e.g. Decimal("0.50") -> "0.50".
        """
        self.builder.set_parameter(ZOOM, _positive_decimal(multiplier, "Zoom multiplier"))
        return self


class AlignmentBuilder(ResizeBuilder):
    """Resize builder that can also anchor the image in the padded or cropped area.

    Returned by `pad()`, `crop()` and `scale_canvas()`. Every resize setter
    stays available, so `img.crop().top_left().width(200)` is valid.
    """

    def anchor(self, anchor: Anchor | str) -> Self:
        """Set the anchor from an `Anchor` member or its wire value.

        Raises:
            InvalidArgumentError: If `anchor` is not a known anchor value
        """
        try:
            value = Anchor(anchor)
        except ValueError:
            logger.debug(f"Rejected anchor value {anchor!r}")
            raise InvalidArgumentError(
                f"Unknown anchor {anchor!r}. Expected one of: {', '.join(Anchor)}."
            ) from None

        self.builder.set_parameter(ANCHOR, value.value)
        return self

    def top_left(self) -> Self:
        return self.anchor(Anchor.TOP_LEFT)

    def top_center(self) -> Self:
        return self.anchor(Anchor.TOP_CENTER)

    def top_right(self) -> Self:
        return self.anchor(Anchor.TOP_RIGHT)

    def middle_left(self) -> Self:
        return self.anchor(Anchor.MIDDLE_LEFT)

    def middle_center(self) -> Self:
        """Center the image (the service default)."""
        return self.anchor(Anchor.MIDDLE_CENTER)

    def middle_right(self) -> Self:
        return self.anchor(Anchor.MIDDLE_RIGHT)

    def bottom_left(self) -> Self:
        return self.anchor(Anchor.BOTTOM_LEFT)

    def bottom_center(self) -> Self:
        return self.anchor(Anchor.BOTTOM_CENTER)

    def bottom_right(self) -> Self:
        return self.anchor(Anchor.BOTTOM_RIGHT)


def resize(
    builder: ImageUrlBuilder,
    configure: Callable[[ResizeBuilder], object],
) -> ImageUrlBuilder:
    """Add resize options to an `ImageUrlBuilder`.

    Args:
        builder: Builder whose parameter store receives the options
        configure: Callback invoked with a `ResizeBuilder`; its return value is ignored

    Returns:
        The same `builder`, for further chaining

    Raises:
        InvalidArgumentError: If `builder` or `configure` is missing

    Example:
        resize(builder, lambda img: img.width(200).height(100).crop())
    """
    if builder is None:
        raise InvalidArgumentError("builder is required.")
    if not callable(configure):
        raise InvalidArgumentError("configure is required and must be callable.")

    _ = configure(ResizeBuilder(builder))
    return builder
