"""Qt-facing consumers of the crop preview geometry."""

from .preview_controller import ImagePreviewController
from .protocols import RenderTransformConsumer
from .qt_transform import flip_qtransform, to_qtransform

__all__ = [
    "ImagePreviewController",
    "RenderTransformConsumer",
    "flip_qtransform",
    "to_qtransform",
]
