"""Qt controller that drives the crop preview geometry."""

from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from ..core.transform_resolver import flip_scale, resolve_transform
from ..core.validation import require_crop, require_size, require_viewport_config
from ..core.viewport_sizing import resolve_viewport_size
from ..domain.models import SKIPPED, CropDescriptor, Rect, ResolvedTransform, Size
from ..settings.schema import PreviewOptions
from .protocols import RenderTransformConsumer

LOGGER = logging.getLogger(__name__)


class ImagePreviewController(QObject):
    """Resolve viewport size and image transform for one previewed item.

    The controller only remembers the latest inputs.  Each :meth:`refresh`
    recomputes everything from them, so calling it repeatedly with the same
    inputs produces the same output.
    """

    viewportSizeChanged = Signal(object)
    transformChanged = Signal(object)
    flipChanged = Signal(float, float)
    opacityChanged = Signal(float)

    def __init__(
        self,
        options: PreviewOptions | None = None,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._options = options or PreviewOptions()
        self._image_size: Optional[Size] = None
        self._crop: Optional[CropDescriptor] = None
        self._container: Optional[Size] = None
        self._viewport: Optional[Size] = None
        self._consumers: list[RenderTransformConsumer] = []

    # ------------------------------------------------------------------
    # Inputs
    # ------------------------------------------------------------------
    def set_image_size(self, size: Size) -> None:
        self._image_size = require_size(size, "image")

    def set_crop(self, crop: CropDescriptor) -> None:
        self._crop = require_crop(crop)

    def set_container_size(self, size: Size) -> None:
        self._container = require_size(size, "container")

    def set_options(self, options: PreviewOptions) -> None:
        self._options = options

    def options(self) -> PreviewOptions:
        return self._options

    def viewport_size(self) -> Optional[Size]:
        """Return the viewport size from the last full refresh."""

        return self._viewport

    def transparency_mode(self) -> Optional[str]:
        return self._options.transparency_mode

    def add_consumer(self, consumer: RenderTransformConsumer) -> None:
        if consumer not in self._consumers:
            self._consumers.append(consumer)

    def remove_consumer(self, consumer: RenderTransformConsumer) -> None:
        try:
            self._consumers.remove(consumer)
        except ValueError:
            pass

    # ------------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------------
    def refresh(self, should_optimize: bool = False) -> Optional[ResolvedTransform]:
        """Recompute the preview layout.

        Parameters
        ----------
        should_optimize:
            Set during interactive resizing.  The clip is hidden, the
            viewport keeps its size and consumers receive a skipped
            transform.

        Returns
        -------
        RenderTransform | SkippedTransform | None
            ``None`` while the image, crop or container is still unknown.
        """

        if self._image_size is None or self._crop is None or self._container is None:
            LOGGER.debug("Preview refresh ignored: inputs incomplete")
            return None

        opacity = 0.0 if should_optimize else 1.0
        self.opacityChanged.emit(opacity)
        for consumer in self._consumers:
            consumer.apply_opacity(opacity)

        if should_optimize:
            LOGGER.debug("Preview refresh skipped layout")
            self._publish_transform(SKIPPED)
            return SKIPPED

        image = self._image_size
        crop = self._crop
        config = require_viewport_config(
            self._options.viewport_config(image.height / image.width, crop.aspect_ratio)
        )
        viewport = resolve_viewport_size(self._container, config)
        if viewport != self._viewport:
            self._viewport = viewport
            self.viewportSizeChanged.emit(viewport)
        for consumer in self._consumers:
            consumer.apply_viewport_size(viewport)

        transform = resolve_transform(image, crop, Rect.from_size(viewport))
        LOGGER.debug(
            "Preview layout %.1fx%.1f scale=%.4f rotation=%.4f",
            viewport.width,
            viewport.height,
            transform.scale_x,
            transform.rotate_z,
        )
        self._publish_transform(transform)

        scale_x, scale_y = flip_scale(crop.flip)
        self.flipChanged.emit(scale_x, scale_y)
        for consumer in self._consumers:
            consumer.apply_flip(scale_x, scale_y)
        return transform

    def _publish_transform(self, transform: ResolvedTransform) -> None:
        self.transformChanged.emit(transform)
        for consumer in self._consumers:
            consumer.apply_transform(transform)


__all__ = ["ImagePreviewController"]
