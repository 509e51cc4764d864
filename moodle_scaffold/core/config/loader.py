"""
Settings loader — reads scaffold.yml into the settings model.

The file is optional.  An installation without one scaffolds with
no lifecycle scripts attached.
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from moodle_scaffold.core.models.settings import ScaffoldSettings

logger = logging.getLogger(__name__)

# Default settings filename, looked up in the installation root
SETTINGS_FILE = "scaffold.yml"


class SettingsError(Exception):
    """Raised when scaffold.yml exists but is unreadable or invalid."""


def find_settings_file(root: Path) -> Path | None:
    """Return ``root/scaffold.yml`` if present, else None."""
    candidate = root / SETTINGS_FILE
    return candidate if candidate.is_file() else None


def load_settings(root: Path, path: Path | None = None) -> ScaffoldSettings:
    """Load and validate scaffolder settings.

    Args:
        root: Installation root, searched when ``path`` is not given.
        path: Explicit settings file path.

    Returns:
        Validated ScaffoldSettings (defaults when no file exists).

    Raises:
        SettingsError: If the file is unreadable or invalid.
    """
    if path is None:
        path = find_settings_file(root)

    if path is None:
        logger.debug("No %s in %s, using defaults", SETTINGS_FILE, root)
        return ScaffoldSettings()

    if not path.is_file():
        raise SettingsError(f"Settings file not found: {path}")

    logger.debug("Loading scaffold settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise SettingsError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML in {path}: {e}") from e

    # An empty file is a valid "no settings" file
    if data is None:
        return ScaffoldSettings()

    if not isinstance(data, dict):
        raise SettingsError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    try:
        settings = ScaffoldSettings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Invalid scaffold settings in {path}: {e}") from e

    logger.info(
        "Loaded scaffold settings with %d script(s)",
        sum(len(cmds) for cmds in settings.scripts.values()),
    )
    return settings
