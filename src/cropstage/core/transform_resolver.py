"""Render transform resolver.

Turns a crop descriptor into the origin/translation/rotation/scale that
places the image layer so the crop exactly fills the stage.  The rendering
layer applies the transform about ``(origin_x, origin_y)``:

``p' = origin + translate + scale * R(rotate_z) * (p - origin)``

so the pan point of the image always lands on the stage centre.
"""

from __future__ import annotations

import math

import numpy as np

from ..domain.models import (
    SKIPPED,
    CropDescriptor,
    Flip,
    Rect,
    RenderTransform,
    ResolvedTransform,
    Size,
    Vector,
)
from ..errors import InvalidInputError
from .geometry import centered_rect, rotated_rect_size

TWO_PI = math.pi * 2.0


def normalise_rotation(rotation: float) -> float:
    """Wrap *rotation* into ``[0, 2π)``."""

    wrapped = float(rotation) % TWO_PI
    # tiny negative angles round up to exactly 2π
    return 0.0 if wrapped >= TWO_PI else wrapped


def image_rect_zoom_factor(
    image: Size, crop_rect: Rect, rotation: float, center: Vector
) -> float:
    """Return the minimum scale that keeps the rotated crop covered by the image.

    Only the part of the image symmetric around *center* can be shown without
    running past an edge, so the available area shrinks as the pan moves
    towards a border.
    """

    cx = min(center.x, 1.0 - center.x)
    cy = min(center.y, 1.0 - center.y)
    image_width = cx * 2.0 * image.width
    image_height = cy * 2.0 * image.height

    rotated = rotated_rect_size(crop_rect, rotation)
    try:
        return max(rotated.width / image_width, rotated.height / image_height)
    except ZeroDivisionError as exc:
        raise InvalidInputError(
            f"crop center ({center.x}, {center.y}) leaves no visible image area"
        ) from exc


def resolve_transform(
    image: Size,
    crop: CropDescriptor,
    stage: Rect,
    *,
    should_optimize: bool = False,
) -> ResolvedTransform:
    """Compute the transform that renders *crop* of *image* inside *stage*.

    Parameters
    ----------
    image:
        Intrinsic pixel size of the source image.
    crop:
        Crop state; read only.
    stage:
        Viewport rectangle the crop must fill.
    should_optimize:
        Rendering hint used during interactive resizing.  When set the
        :data:`~cropstage.domain.models.SKIPPED` sentinel is returned and the
        consumer keeps its previous transform.

    Returns
    -------
    RenderTransform | SkippedTransform
    """

    if should_optimize:
        return SKIPPED

    rotation = normalise_rotation(crop.rotation)
    aspect_ratio = crop.aspect_ratio or image.height / image.width

    zoom_factor = image_rect_zoom_factor(
        image,
        centered_rect(stage, aspect_ratio),
        rotation,
        crop.center,
    )
    scale = crop.zoom * zoom_factor

    stage_center = stage.center
    return RenderTransform(
        origin_x=crop.center.x * image.width,
        origin_y=crop.center.y * image.height,
        translate_x=stage_center.x - image.width * crop.center.x,
        translate_y=stage_center.y - image.height * crop.center.y,
        rotate_z=rotation,
        scale_x=scale,
        scale_y=scale,
    )


def flip_scale(flip: Flip) -> tuple[float, float]:
    """Return the ``(scale_x, scale_y)`` mirror applied to the bitmap layer."""

    return (-1.0 if flip.horizontal else 1.0, -1.0 if flip.vertical else 1.0)


def transform_matrix(transform: ResolvedTransform) -> np.ndarray:
    """Return the 3x3 matrix mapping image pixels to stage coordinates."""

    if transform.is_skipped:
        raise InvalidInputError("a skipped transform has no matrix")

    cos_t = math.cos(transform.rotate_z)
    sin_t = math.sin(transform.rotate_z)

    to_origin = np.array(
        [
            [1.0, 0.0, -transform.origin_x],
            [0.0, 1.0, -transform.origin_y],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    scale = np.diag([transform.scale_x, transform.scale_y, 1.0]).astype(np.float64)
    rotate = np.array(
        [
            [cos_t, -sin_t, 0.0],
            [sin_t, cos_t, 0.0],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    back = np.array(
        [
            [1.0, 0.0, transform.origin_x + transform.translate_x],
            [0.0, 1.0, transform.origin_y + transform.translate_y],
            [0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return back @ rotate @ scale @ to_origin


__all__ = [
    "flip_scale",
    "image_rect_zoom_factor",
    "normalise_rotation",
    "resolve_transform",
    "transform_matrix",
]
