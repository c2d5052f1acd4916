"""Preview options file management with validation and change notifications."""

from __future__ import annotations

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any

from PySide6.QtCore import QObject, Signal

from ..errors import SettingsLoadError, SettingsValidationError
from .schema import DEFAULT_SETTINGS, PreviewOptions, merge_with_defaults

LOGGER = logging.getLogger(__name__)


class PreviewSettingsManager(QObject):
    """Load, validate and persist the preview options.

    Without a *path* the manager keeps its settings in memory only.
    """

    settingsChanged = Signal(str, object)

    def __init__(self, path: Path | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._path = path
        self._data: dict[str, Any] = deepcopy(DEFAULT_SETTINGS)
        self._options = PreviewOptions.from_settings(self._data)

    @property
    def path(self) -> Path | None:
        return self._path

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Load the options JSON from disk, falling back to defaults if missing."""

        payload = None
        if self._path is not None and self._path.exists():
            try:
                payload = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, ValueError) as exc:
                raise SettingsLoadError(f"{self._path}: {exc}") from exc
            if not isinstance(payload, dict):
                raise SettingsLoadError(f"{self._path}: expected a JSON object")
        data = merge_with_defaults(payload)
        self._options = PreviewOptions.from_settings(data)
        self._data = data
        LOGGER.debug("Loaded preview settings from %s", self._path or "<defaults>")

    def get(self, key: str, default: Any | None = None) -> Any:
        """Return the value for *key*, supporting dotted access for nested keys."""

        target = self._data
        parts = key.split(".")
        for index, part in enumerate(parts):
            if not isinstance(target, dict) or part not in target:
                return default
            value = target[part]
            if index == len(parts) - 1:
                return value
            target = value
        return default

    def set(self, key: str, value: Any) -> None:
        """Update *key* with *value*, validate, persist and notify listeners."""

        if isinstance(value, Path):
            value = str(value)

        candidate = deepcopy(self._data)
        parts = key.split(".")
        target: dict[str, Any] = candidate
        for part in parts[:-1]:
            branch = target.get(part)
            if not isinstance(branch, dict):
                branch = {}
                target[part] = branch
            target = branch
        target[parts[-1]] = value

        try:
            merged = merge_with_defaults(candidate)
            options = PreviewOptions.from_settings(merged)
        except SettingsValidationError:
            LOGGER.warning("Rejected preview setting %s=%r", key, value)
            raise
        self._data = merged
        self._options = options
        self._write()
        self.settingsChanged.emit(key, value)

    def options(self) -> PreviewOptions:
        """Return the resolved options for the current settings."""

        return self._options

    # ------------------------------------------------------------------
    # Internal utilities
    # ------------------------------------------------------------------
    def _write(self) -> None:
        if self._path is None:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")


__all__ = ["PreviewSettingsManager"]
