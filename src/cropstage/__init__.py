"""cropstage: crop preview geometry for rotated, zoomed and panned images."""

from .core import (
    centered_rect,
    resolve_transform,
    resolve_viewport_size,
    rotated_rect_size,
    transform_matrix,
)
from .domain import (
    SKIPPED,
    CropDescriptor,
    Flip,
    Rect,
    RenderTransform,
    ResolvedTransform,
    Size,
    SkippedTransform,
    Vector,
    ViewportConfig,
)
from .errors import CropStageError, InvalidInputError

__version__ = "0.1.0"

__all__ = [
    "SKIPPED",
    "CropDescriptor",
    "CropStageError",
    "Flip",
    "InvalidInputError",
    "Rect",
    "RenderTransform",
    "ResolvedTransform",
    "Size",
    "SkippedTransform",
    "Vector",
    "ViewportConfig",
    "centered_rect",
    "resolve_transform",
    "resolve_viewport_size",
    "rotated_rect_size",
    "transform_matrix",
]
