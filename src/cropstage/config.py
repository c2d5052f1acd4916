"""Default configuration values for cropstage."""

from __future__ import annotations

from typing import Final

# ``PREVIEW_HEIGHT`` pins the crop viewport to a fixed pixel height.  ``None``
# lets the viewport follow the container width and the aspect ratio, clamped
# between the minimum and maximum below.
PREVIEW_HEIGHT: Final[float | None] = None
PREVIEW_MIN_HEIGHT: Final[float] = 44.0
PREVIEW_MAX_HEIGHT: Final[float] = 256.0

# ``None`` disables the transparency indicator, ``"grid"`` requests the
# checkerboard and any other value falls back to a flat colour.
TRANSPARENCY_INDICATOR: Final[str | None] = None

# A panel aspect ratio only overrides the viewport when a single item is shown.
PANEL_ASPECT_RATIO: Final[float | None] = None
ALLOW_MULTIPLE: Final[bool] = False

SETTINGS_SCHEMA_ID: Final[str] = "cropstage/preview@1"
