"""Wire values understood by the remote image service for resizing."""

from enum import StrEnum


class FitMode(StrEnum):
    """How requested dimensions are reconciled with the source aspect ratio."""

    MAX = "max"
    PAD = "pad"
    CROP = "crop"
    STRETCH = "stretch"


class ScaleMode(StrEnum):
    """Whether the service may upscale, downscale, or both."""

    UP = "upscaleonly"
    DOWN = "downscaleonly"
    BOTH = "both"
    CANVAS = "upscalecanvas"


class Anchor(StrEnum):
    TOP_LEFT = "topleft"
    TOP_CENTER = "topcenter"
    TOP_RIGHT = "topright"
    MIDDLE_LEFT = "middleleft"
    MIDDLE_CENTER = "middlecenter"
    MIDDLE_RIGHT = "middleright"
    BOTTOM_LEFT = "bottomleft"
    BOTTOM_CENTER = "bottomcenter"
    BOTTOM_RIGHT = "bottomright"


# Query parameter names
WIDTH = "width"
HEIGHT = "height"
MAX_WIDTH = "maxwidth"
MAX_HEIGHT = "maxheight"
FIT_MODE = "mode"
SCALE = "scale"
ZOOM = "zoom"
ANCHOR = "anchor"
