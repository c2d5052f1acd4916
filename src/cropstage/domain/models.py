"""Immutable value types shared by the geometry core and its consumers.

All ratios follow the ``height / width`` convention.  Instances are frozen so a
crop descriptor handed to the resolver can never be altered behind the
caller's back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Union


@dataclass(frozen=True)
class Vector:
    """2D point or offset."""

    x: float
    y: float


@dataclass(frozen=True)
class Size:
    """Width/height pair used for images, stages, containers and viewports."""

    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in stage coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def center(self) -> Vector:
        return Vector(self.x + self.width * 0.5, self.y + self.height * 0.5)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @classmethod
    def from_size(cls, size: Size) -> Rect:
        return cls(0.0, 0.0, size.width, size.height)


@dataclass(frozen=True)
class Flip:
    horizontal: bool = False
    vertical: bool = False


@dataclass(frozen=True)
class CropDescriptor:
    """Pan/zoom/rotate/flip state of a crop.

    ``center`` is the pan position in normalised image coordinates and must
    lie strictly inside ``(0, 1)`` on both axes.  ``aspect_ratio`` of ``None``
    means the crop follows the image aspect ratio.
    """

    center: Vector = field(default_factory=lambda: Vector(0.5, 0.5))
    zoom: float = 1.0
    rotation: float = 0.0
    aspect_ratio: Optional[float] = None
    flip: Flip = field(default_factory=Flip)


@dataclass(frozen=True)
class RenderTransform:
    """Affine placement of the image layer inside the stage."""

    origin_x: float
    origin_y: float
    translate_x: float
    translate_y: float
    rotate_z: float
    scale_x: float
    scale_y: float

    @property
    def is_skipped(self) -> bool:
        return False


@dataclass(frozen=True)
class SkippedTransform:
    """Sentinel telling the consumer to keep the previously applied transform.

    Every field reads as ``None`` ("unset").
    """

    origin_x: None = None
    origin_y: None = None
    translate_x: None = None
    translate_y: None = None
    rotate_z: None = None
    scale_x: None = None
    scale_y: None = None

    @property
    def is_skipped(self) -> bool:
        return True


ResolvedTransform = Union[RenderTransform, SkippedTransform]

SKIPPED = SkippedTransform()


@dataclass(frozen=True)
class ViewportConfig:
    """Inputs of the viewport sizing policy besides the container size."""

    image_aspect_ratio: float
    min_height: float
    max_height: float
    fixed_height: Optional[float] = None
    panel_aspect_ratio: Optional[float] = None
    allow_multiple: bool = False
    crop_aspect_ratio: Optional[float] = None
