"""Resize URL route factory."""

from decimal import Decimal
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query
from pydantic import ValidationError

from ...common.url_builder import ImageUrlBuilder
from .modes import Anchor, FitMode, ScaleMode
from .schema import ResizeParams


def create_router(base_url: str = "") -> APIRouter:
    """Create router that builds resize URLs for the image service.

    Args:
        base_url: Prefix joined in front of every requested image path
                  (e.g. "https://images.example.com")

    Returns:
        Configured APIRouter with the resize URL endpoint
    """
    router = APIRouter()

    @router.get("/urls/resize")
    async def build_resize_url(
        path: Annotated[str, Query(min_length=1, description="Image path on the image service")],
        width: Annotated[int | None, Query(gt=0, description="Target width in pixels")] = None,
        height: Annotated[int | None, Query(gt=0, description="Target height in pixels")] = None,
        max_width: Annotated[
            int | None, Query(gt=0, alias="maxwidth", description="Maximum width in pixels")
        ] = None,
        max_height: Annotated[
            int | None, Query(gt=0, alias="maxheight", description="Maximum height in pixels")
        ] = None,
        mode: Annotated[FitMode | None, Query(description="Fit mode")] = None,
        scale: Annotated[ScaleMode | None, Query(description="Scale mode")] = None,
        zoom: Annotated[Decimal | None, Query(gt=0, description="Zoom multiplier")] = None,
        anchor: Annotated[Anchor | None, Query(description="Alignment for pad/crop")] = None,
    ):
        """Build an image URL carrying the requested resize options.

        Returns:
            url: Image URL with the resize query string
            parameters: The resize parameters that were written
        """
        try:
            params = ResizeParams(
                width=width,
                height=height,
                max_width=max_width,
                max_height=max_height,
                mode=mode,
                scale=scale,
                zoom=zoom,
                anchor=anchor,
            )
        except ValidationError as e:
            errors = e.errors(include_url=False, include_context=False, include_input=False)
            raise HTTPException(status_code=422, detail=errors) from e

        builder = ImageUrlBuilder(f"{base_url.rstrip('/')}/{path.lstrip('/')}")
        _ = builder.resize(params.configure)

        return {"url": builder.build(), "parameters": dict(builder.parameters)}

    # Mark function as used (accessed via FastAPI decorator)
    _ = build_resize_url

    return router
