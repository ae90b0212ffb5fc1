"""Project settings file loading and CLI override merging."""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Mapping, Optional

import yaml

from errors import SettingsError

logger = logging.getLogger(__name__)


def load_settings(path: Optional[str]) -> Dict[str, Any]:
    """Load project settings from a YAML, YML or JSON file.

    A missing file is not fatal: a warning is logged and no settings are
    returned. A top-level ``project`` section is unwrapped when present.

    Raises:
        SettingsError: If the file cannot be parsed or is not a mapping.
    """
    if not path:
        return {}

    if not os.path.isfile(path):
        logger.warning("Config file not found: %s", path)
        return {}

    try:
        with open(path, "r", encoding="utf-8") as f:
            if path.lower().endswith(".json"):
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise SettingsError(path, str(exc)) from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SettingsError(path, "top-level value must be a mapping")
    section = data.get("project", data)
    if not isinstance(section, dict):
        raise SettingsError(path, "'project' section must be a mapping")
    logger.info("Loaded settings from: %s", path)
    return section


def merge_settings(file_settings: Mapping[str, Any], overrides: Mapping[str, Any]) -> Dict[str, Any]:
    """Overlay ``overrides`` on ``file_settings``; None overrides are ignored."""
    merged = dict(file_settings)
    merged.update({key: value for key, value in overrides.items() if value is not None})
    return merged
