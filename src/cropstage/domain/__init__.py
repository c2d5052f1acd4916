from .models import (
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

__all__ = [
    "SKIPPED",
    "CropDescriptor",
    "Flip",
    "Rect",
    "RenderTransform",
    "ResolvedTransform",
    "Size",
    "SkippedTransform",
    "Vector",
    "ViewportConfig",
]
