"""Schema helpers for the preview options file."""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any, Optional

from jsonschema import Draft202012Validator

from .. import config
from ..domain.models import ViewportConfig
from ..errors import SettingsValidationError

_RATIO_PATTERN = r"^\s*\d+(\.\d+)?\s*(:\s*\d+(\.\d+)?\s*)?$"

PREVIEW_SCHEMA: dict[str, Any] = {
    "$id": "cropstage/preview.schema.json",
    "type": "object",
    "required": ["schema", "preview", "panel"],
    "properties": {
        "schema": {"const": config.SETTINGS_SCHEMA_ID},
        "preview": {
            "type": "object",
            "properties": {
                "height": {
                    "oneOf": [
                        {"type": "null"},
                        {"type": "number", "exclusiveMinimum": 0},
                    ],
                },
                "min_height": {"type": "number", "minimum": 0},
                "max_height": {"type": "number", "minimum": 0},
                "transparency_indicator": {"type": ["string", "null"]},
            },
            "additionalProperties": True,
        },
        "panel": {
            "type": "object",
            "properties": {
                "aspect_ratio": {
                    "oneOf": [
                        {"type": "null"},
                        {"type": "number", "exclusiveMinimum": 0},
                        {"type": "string", "pattern": _RATIO_PATTERN},
                    ],
                },
                "allow_multiple": {"type": "boolean"},
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": config.SETTINGS_SCHEMA_ID,
    "preview": {
        "height": config.PREVIEW_HEIGHT,
        "min_height": config.PREVIEW_MIN_HEIGHT,
        "max_height": config.PREVIEW_MAX_HEIGHT,
        "transparency_indicator": config.TRANSPARENCY_INDICATOR,
    },
    "panel": {
        "aspect_ratio": config.PANEL_ASPECT_RATIO,
        "allow_multiple": config.ALLOW_MULTIPLE,
    },
}

_validator = Draft202012Validator(PREVIEW_SCHEMA)


def parse_aspect_ratio(value: float | str | None) -> Optional[float]:
    """Return *value* as a ``height / width`` ratio.

    ``"16:9"`` describes width and height, so it becomes ``9 / 16``.  Plain
    numbers and numeric strings are taken as the ratio itself; ``None`` and the
    empty string mean "no ratio".
    """

    if value is None:
        return None
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            if ":" in text:
                width, height = (float(part) for part in text.split(":", 1))
                ratio = height / width
            else:
                ratio = float(text)
        except (ValueError, ZeroDivisionError) as exc:
            raise SettingsValidationError(f"invalid aspect ratio {value!r}") from exc
    else:
        ratio = float(value)
    if ratio <= 0.0:
        raise SettingsValidationError(f"aspect ratio must be positive, got {value!r}")
    return ratio


def transparency_mode(value: Optional[str]) -> Optional[str]:
    """Map the configured transparency indicator onto a presentation mode."""

    if value is None:
        return None
    return "grid" if value == "grid" else "color"


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key in {"preview", "panel"} and isinstance(value, dict):
                target = merged.setdefault(key, {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the preview schema."""

    errors = sorted(_validator.iter_errors(data), key=lambda err: list(err.path))
    if errors:
        first = errors[0]
        location = ".".join(str(part) for part in first.path) or "<root>"
        raise SettingsValidationError(f"{location}: {first.message}")
    preview = data["preview"]
    if preview.get("min_height", 0) > preview.get("max_height", float("inf")):
        raise SettingsValidationError("preview.min_height exceeds preview.max_height")


@dataclass(frozen=True)
class PreviewOptions:
    """Host configuration for the crop preview, resolved from a settings document."""

    height: Optional[float] = config.PREVIEW_HEIGHT
    min_height: float = config.PREVIEW_MIN_HEIGHT
    max_height: float = config.PREVIEW_MAX_HEIGHT
    transparency_indicator: Optional[str] = config.TRANSPARENCY_INDICATOR
    panel_aspect_ratio: Optional[float] = config.PANEL_ASPECT_RATIO
    allow_multiple: bool = config.ALLOW_MULTIPLE

    @classmethod
    def from_settings(cls, data: dict[str, Any]) -> PreviewOptions:
        """Build options from a merged and validated settings document."""

        preview = data["preview"]
        panel = data["panel"]
        height = preview.get("height")
        return cls(
            height=None if height is None else float(height),
            min_height=float(preview["min_height"]),
            max_height=float(preview["max_height"]),
            transparency_indicator=preview.get("transparency_indicator"),
            panel_aspect_ratio=parse_aspect_ratio(panel.get("aspect_ratio")),
            allow_multiple=bool(panel["allow_multiple"]),
        )

    @property
    def transparency_mode(self) -> Optional[str]:
        return transparency_mode(self.transparency_indicator)

    def viewport_config(
        self, image_aspect_ratio: float, crop_aspect_ratio: Optional[float] = None
    ) -> ViewportConfig:
        """Combine these options with per-image ratios for the sizing policy."""

        return ViewportConfig(
            image_aspect_ratio=image_aspect_ratio,
            min_height=self.min_height,
            max_height=self.max_height,
            fixed_height=self.height,
            panel_aspect_ratio=self.panel_aspect_ratio,
            allow_multiple=self.allow_multiple,
            crop_aspect_ratio=crop_aspect_ratio,
        )


__all__ = [
    "DEFAULT_SETTINGS",
    "PREVIEW_SCHEMA",
    "PreviewOptions",
    "merge_with_defaults",
    "parse_aspect_ratio",
    "transparency_mode",
    "validate_settings",
]
