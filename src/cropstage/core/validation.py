"""Caller-side precondition checks.

The geometry core trusts its inputs.  Callers that receive values from user
interaction run them through these helpers first so out-of-contract input
fails loudly instead of producing ``inf`` or ``nan`` further down.
"""

from __future__ import annotations

import math

from ..domain.models import CropDescriptor, Size, ViewportConfig
from ..errors import InvalidInputError


def _require_positive(value: float, name: str) -> None:
    if not math.isfinite(value) or value <= 0.0:
        raise InvalidInputError(f"{name} must be a positive finite number, got {value!r}")


def require_size(size: Size, name: str = "size") -> Size:
    """Return *size* unchanged after checking both dimensions are positive."""

    _require_positive(size.width, f"{name}.width")
    _require_positive(size.height, f"{name}.height")
    return size


def require_crop(crop: CropDescriptor) -> CropDescriptor:
    """Return *crop* unchanged after checking the pan, zoom and aspect ratio."""

    for axis, value in (("x", crop.center.x), ("y", crop.center.y)):
        # 0 and 1 leave no image on one side of the pan point
        if not 0.0 < value < 1.0:
            raise InvalidInputError(
                f"crop center.{axis} must lie strictly inside (0, 1), got {value!r}"
            )
    if not math.isfinite(crop.zoom) or crop.zoom < 0.0:
        raise InvalidInputError(f"crop zoom must be >= 0, got {crop.zoom!r}")
    if not math.isfinite(crop.rotation):
        raise InvalidInputError(f"crop rotation must be finite, got {crop.rotation!r}")
    if crop.aspect_ratio is not None:
        _require_positive(crop.aspect_ratio, "crop aspect_ratio")
    return crop


def require_viewport_config(config: ViewportConfig) -> ViewportConfig:
    """Return *config* unchanged after checking ratios and height bounds."""

    _require_positive(config.image_aspect_ratio, "image_aspect_ratio")
    if config.crop_aspect_ratio is not None:
        _require_positive(config.crop_aspect_ratio, "crop_aspect_ratio")
    if config.panel_aspect_ratio is not None:
        _require_positive(config.panel_aspect_ratio, "panel_aspect_ratio")
    if config.fixed_height is not None:
        _require_positive(config.fixed_height, "fixed_height")
    if config.min_height < 0.0 or config.min_height > config.max_height:
        raise InvalidInputError(
            f"height bounds are inconsistent: min={config.min_height!r}, max={config.max_height!r}"
        )
    return config


__all__ = ["require_crop", "require_size", "require_viewport_config"]
