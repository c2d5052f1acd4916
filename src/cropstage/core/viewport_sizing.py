"""Viewport sizing policy for the crop preview."""

from __future__ import annotations

from ..domain.models import Size, ViewportConfig


def resolve_viewport_size(container: Size, config: ViewportConfig) -> Size:
    """Return the crop viewport size that fits inside *container*.

    The height is chosen first (fixed, or the container width times the
    aspect ratio clamped to the configured bounds) and the width follows from
    the aspect ratio.  Width containment is resolved before height
    containment, and either may push the height outside the min/max bounds:
    staying inside the container always wins.
    """

    aspect_ratio = config.crop_aspect_ratio or config.image_aspect_ratio
    fixed_height = config.fixed_height

    # a panel ratio only applies when the panel shows a single item
    if config.panel_aspect_ratio and not config.allow_multiple:
        fixed_height = container.width * config.panel_aspect_ratio
        aspect_ratio = config.panel_aspect_ratio

    if fixed_height is not None:
        height = fixed_height
    else:
        height = max(
            config.min_height,
            min(container.width * aspect_ratio, config.max_height),
        )

    width = height / aspect_ratio
    if width > container.width:
        width = container.width
        height = width * aspect_ratio

    if height > container.height:
        height = container.height
        width = height / aspect_ratio

    return Size(width, height)


__all__ = ["resolve_viewport_size"]
