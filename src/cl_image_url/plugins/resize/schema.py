"""Resize parameters schema."""

from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .expression import AlignmentBuilder, ResizeBuilder
from .modes import Anchor, FitMode, ScaleMode


class ResizeParams(BaseModel):
    """Declarative form of a resize configuration.

    Each field maps to one call on `ResizeBuilder`; `configure` replays them
    in a fixed order, so the store it produces equals the hand-written chain.

    Attributes:
        width: Target width in pixels
        height: Target height in pixels
        max_width: Maximum width in pixels (aspect ratio kept, no padding)
        max_height: Maximum height in pixels (aspect ratio kept, no padding)
        mode: Fit mode (max, pad, crop, stretch)
        scale: Scale mode (upscaleonly, downscaleonly, both, upscalecanvas)
        zoom: Multiplier applied on top of the target size
        anchor: Alignment; only valid with pad/crop or canvas scaling
    """

    width: int | None = Field(default=None, gt=0)
    height: int | None = Field(default=None, gt=0)
    max_width: int | None = Field(default=None, gt=0)
    max_height: int | None = Field(default=None, gt=0)
    mode: FitMode | None = None
    scale: ScaleMode | None = None
    zoom: Decimal | None = Field(default=None, gt=0, allow_inf_nan=False)
    anchor: Anchor | None = None

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    @model_validator(mode="after")
    def validate_anchor_target(self) -> "ResizeParams":
        """Ensure an anchor is only given where the service can apply it."""
        if self.anchor is not None and not self.supports_alignment:
            raise ValueError("anchor requires mode 'pad' or 'crop', or scale 'upscalecanvas'")
        return self

    @property
    def supports_alignment(self) -> bool:
        return self.mode in (FitMode.PAD, FitMode.CROP) or self.scale == ScaleMode.CANVAS

    def configure(self, resize: ResizeBuilder) -> None:
        """Apply every set field to `resize`. Usable as a `resize()` callback."""
        if self.width is not None:
            _ = resize.width(self.width)
        if self.height is not None:
            _ = resize.height(self.height)
        if self.max_width is not None:
            _ = resize.max_width(self.max_width)
        if self.max_height is not None:
            _ = resize.max_height(self.max_height)

        alignment: AlignmentBuilder | None = None
        match self.mode:
            case FitMode.MAX:
                _ = resize.max()
            case FitMode.PAD:
                alignment = resize.pad()
            case FitMode.CROP:
                alignment = resize.crop()
            case FitMode.STRETCH:
                _ = resize.stretch()
            case None:
                pass

        match self.scale:
            case ScaleMode.UP:
                _ = resize.scale_up()
            case ScaleMode.DOWN:
                _ = resize.scale_down()
            case ScaleMode.BOTH:
                _ = resize.scale_both()
            case ScaleMode.CANVAS:
                alignment = resize.scale_canvas()
            case None:
                pass

        if self.zoom is not None:
            _ = resize.zoom(self.zoom)
        if self.anchor is not None and alignment is not None:
            _ = alignment.anchor(self.anchor)
