"""Optional prompt settings loaded from ``~/.pi/prompt.json``.

These only seed constructors such as :meth:`CompletionSession.from_settings`;
every component also works when built directly.

Keys may be written in snake_case or camelCase. Missing keys keep their
defaults; a missing file yields the defaults.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)

CONFIG_DIR_NAME = ".pi"
SETTINGS_FILE_NAME = "prompt.json"


class SettingsError(ValueError):
    """Settings file could not be read or failed validation."""


class PromptSettings(BaseModel):
    """Completion menu and word-separator options."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    max_suggestions: int = Field(default=6, gt=0, alias="maxSuggestions")
    word_separator: str = Field(default="", alias="wordSeparator")
    show_at_start: bool = Field(default=False, alias="showAtStart")
    label_prefix: str = Field(default=" ", alias="labelPrefix")
    label_suffix: str = Field(default=" ", alias="labelSuffix")
    description_prefix: str = Field(default=" ", alias="descriptionPrefix")
    description_suffix: str = Field(default=" ", alias="descriptionSuffix")
    shorten_suffix: str = Field(default="...", alias="shortenSuffix")


def default_settings_path() -> Path:
    return Path(os.path.expanduser("~")) / CONFIG_DIR_NAME / SETTINGS_FILE_NAME


def parse_settings(data: dict[str, Any], source: str = "prompt settings") -> PromptSettings:
    """Validate a settings mapping, raising :class:`SettingsError` on bad values."""
    try:
        return PromptSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid {source}: {e}") from e


def load_settings(path: str | Path | None = None) -> PromptSettings:
    """Load settings from *path* (default ``~/.pi/prompt.json``)."""
    settings_path = Path(path) if path is not None else default_settings_path()
    if not settings_path.exists():
        logger.debug("No settings file at %s, using defaults", settings_path)
        return PromptSettings()

    try:
        data = json.loads(settings_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SettingsError(f"Cannot read settings from {settings_path}: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError(f"Settings in {settings_path} must be a JSON object")

    settings = parse_settings(data, source=str(settings_path))

    logger.debug("Loaded prompt settings from %s", settings_path)
    return settings
