"""Rendering configuration for menus."""

from __future__ import annotations

import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator

_LOGGER = logging.getLogger(__name__)
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
_DEFAULT_CONFIG_PATH = _PROJECT_ROOT / "configs" / "menu.json"
_TAG_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")
_CLASS_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

_ENV_OVERRIDES = {
    "menu_tag": "NAVMENU_MENU_TAG",
    "item_tag": "NAVMENU_ITEM_TAG",
    "active_class": "NAVMENU_ACTIVE_CLASS",
}


class MenuConfig(BaseModel):
    """Tag names and class markers used when a menu renders itself."""

    menu_tag: str = Field(
        default="ul",
        description="Tag wrapping the whole menu",
    )
    item_tag: str = Field(
        default="li",
        description="Tag wrapping each item of the menu",
    )
    active_class: str = Field(
        default="active",
        description="Class added to the wrapper of an active item",
    )

    @field_validator("menu_tag", "item_tag", mode="before")
    @classmethod
    def _normalise_tag(cls, value: str | None) -> str:
        candidate = str(value or "").strip().lower()
        if not _TAG_PATTERN.match(candidate):
            raise ValueError(f"Unsupported tag name '{value}'")
        return candidate

    @field_validator("active_class", mode="before")
    @classmethod
    def _normalise_active_class(cls, value: str | None) -> str:
        candidate = str(value or "").strip()
        if not _CLASS_PATTERN.match(candidate):
            raise ValueError(f"Unsupported active class '{value}'")
        return candidate

    def item_selector(self, active: bool) -> str:
        """Return the selector for an item wrapper, e.g. ``li.active``."""

        if active:
            return f"{self.item_tag}.{self.active_class}"
        return self.item_tag

    @classmethod
    def load(cls, path: Path | None = None) -> "MenuConfig":
        """Load configuration from disk and environment overrides."""

        config_path = path or _DEFAULT_CONFIG_PATH
        data: Dict[str, Any] = {}

        if config_path.exists():
            try:
                data = json.loads(config_path.read_text(encoding="utf-8"))
            except json.JSONDecodeError as exc:
                _LOGGER.warning(
                    "Unable to decode menu config at %s: %s", config_path, exc
                )
            if not isinstance(data, dict):
                _LOGGER.warning("Ignoring menu config at %s: expected an object", config_path)
                data = {}

        for field_name, variable in _ENV_OVERRIDES.items():
            value = os.environ.get(variable)
            if value is not None:
                data[field_name] = value

        filtered: Dict[str, Any] = {
            key: data[key] for key in cls.model_fields if key in data
        }

        return cls(**filtered)


def load_menu_config(path: Path | None = None) -> MenuConfig:
    """Helper to load the menu configuration."""

    return MenuConfig.load(path)


__all__ = ["MenuConfig", "load_menu_config"]
