"""Interfaces implemented by whatever draws the crop preview."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from ..domain.models import ResolvedTransform, Size


@runtime_checkable
class RenderTransformConsumer(Protocol):
    """Receives the results of :class:`ImagePreviewController.refresh`."""

    def apply_transform(self, transform: ResolvedTransform) -> None:
        """Place the image layer; a skipped transform keeps the previous one."""

    def apply_flip(self, scale_x: float, scale_y: float) -> None:
        """Mirror the un-rotated bitmap beneath the transform."""

    def apply_viewport_size(self, size: Size) -> None:
        """Resize the clip viewport."""

    def apply_opacity(self, opacity: float) -> None:
        """Fade the clip viewport in or out."""


__all__ = ["RenderTransformConsumer"]
