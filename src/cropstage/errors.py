"""Custom exception hierarchy for cropstage."""

from __future__ import annotations


class CropStageError(Exception):
    """Base class for all custom errors raised by cropstage."""


# --- Contract violations ---

class InvalidInputError(CropStageError):
    """Raised when a caller passes input outside the geometry contract."""


# --- Settings errors ---

class SettingsLoadError(CropStageError):
    """Raised when the preview settings file cannot be read."""


class SettingsValidationError(CropStageError):
    """Raised when preview settings fail validation against the schema."""


__all__ = [
    "CropStageError",
    "InvalidInputError",
    "SettingsLoadError",
    "SettingsValidationError",
]
