"""Schema helpers for the application settings file."""

from __future__ import annotations

import os
from copy import deepcopy
from typing import Any

from jsonschema import Draft202012Validator

from ..config import DEFAULT_PAGE_SIZE, SETTINGS_SCHEMA_ID

SETTINGS_SCHEMA: dict[str, Any] = {
    "$id": "recipeBrowser/settings.schema.json",
    "type": "object",
    "required": ["schema", "search"],
    "properties": {
        "schema": {"const": SETTINGS_SCHEMA_ID},
        "catalog_path": {"type": ["string", "null"]},
        "search": {
            "type": "object",
            "required": ["page_size", "fetch_mode"],
            "properties": {
                "page_size": {"type": "integer", "minimum": 1},
                "fetch_mode": {
                    "type": "string",
                    "enum": ["inline", "background"],
                },
            },
            "additionalProperties": True,
        },
    },
    "additionalProperties": True,
}

DEFAULT_SETTINGS: dict[str, Any] = {
    "schema": SETTINGS_SCHEMA_ID,
    "catalog_path": None,
    "search": {
        "page_size": DEFAULT_PAGE_SIZE,
        "fetch_mode": "background",
    },
}

_validator = Draft202012Validator(SETTINGS_SCHEMA)


def merge_with_defaults(data: dict[str, Any] | None) -> dict[str, Any]:
    """Merge *data* with :data:`DEFAULT_SETTINGS` and validate the result."""

    merged = deepcopy(DEFAULT_SETTINGS)
    if data:
        for key, value in data.items():
            if key == "search" and isinstance(value, dict):
                target = merged.setdefault("search", {})
                for sub_key, sub_value in value.items():
                    target[sub_key] = sub_value
                continue
            if key == "catalog_path" and value not in {None, ""}:
                try:
                    merged[key] = os.fspath(value)
                except TypeError:
                    continue
                continue
            merged[key] = value
    validate_settings(merged)
    return merged


def validate_settings(data: dict[str, Any]) -> None:
    """Validate *data* against the settings schema."""

    _validator.validate(data)


__all__ = ["DEFAULT_SETTINGS", "SETTINGS_SCHEMA", "merge_with_defaults", "validate_settings"]
