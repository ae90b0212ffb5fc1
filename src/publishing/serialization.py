"""Serialization of publishing configurations for the scaffolding engine."""

import dataclasses
import json
from enum import Enum
from typing import Any, Dict, Mapping

import yaml

from constants import OutputFormats

from .models import PublishingConfig


def _plain(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: _plain(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Mapping):
        return {str(k): _plain(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_plain(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    return value


def to_dict(config: PublishingConfig) -> Dict[str, Any]:
    """Convert ``config`` into plain dicts, lists and scalars."""
    return _plain(config)


def to_json(config: PublishingConfig) -> str:
    return json.dumps(to_dict(config), indent=2, sort_keys=True) + "\n"


def to_yaml(config: PublishingConfig) -> str:
    return yaml.safe_dump(to_dict(config), sort_keys=True, default_flow_style=False)


def render(config: PublishingConfig, fmt: str = OutputFormats.JSON.value) -> str:
    """Render ``config`` as ``json`` or ``yaml``."""
    if fmt == OutputFormats.YAML.value:
        return to_yaml(config)
    if fmt == OutputFormats.JSON.value:
        return to_json(config)
    raise ValueError(f"unsupported output format: {fmt}")
