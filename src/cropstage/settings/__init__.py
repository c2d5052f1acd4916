"""Preview options: schema, defaults and the settings manager."""

from .schema import (
    DEFAULT_SETTINGS,
    PREVIEW_SCHEMA,
    PreviewOptions,
    merge_with_defaults,
    parse_aspect_ratio,
    transparency_mode,
    validate_settings,
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
