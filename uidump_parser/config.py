# uidump_parser/config.py
"""
@file config.py
@brief Run configuration: CLI options merged over an optional YAML config file.
"""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import yaml
from jsonschema import Draft202012Validator

from .criteria import (PrintDirective, SearchCriterion, SecondaryFilter,
                       parse_attribute_filter)
from .exceptions import ConfigError

DEFAULT_SCHEMA_PATH = os.path.join(os.path.dirname(__file__), "schemas", "config.schema.json")
BOUNDS_ATTRIBUTE = "bounds"

# config file key -> argparse destination
_CONFIG_KEYS = {
    "file": "file",
    "resource_id": "resource_id",
    "class": "class_name",
    "text": "text",
    "filter_attribute": "filter_attribute",
    "print_only": "print_only",
    "bounds": "bounds",
    "debug": "debug",
    "log_file": "log_file",
}


@dataclass(frozen=True)
class SearchConfig:
    """Immutable settings for one run."""
    file: str = ""
    resource_id: str = ""
    class_name: str = ""
    text: str = ""
    attribute_filter: Optional[SecondaryFilter] = None
    print_only: str = ""
    debug: bool = False
    log_file: Optional[str] = None

    def select(self) -> Tuple[Optional[SearchCriterion], Optional[SecondaryFilter]]:
        """
        Pick the primary criterion: resource-id > class > text > attribute filter.

        When one of the first three wins, the attribute filter (if any) becomes
        the secondary filter. Returns (None, None) when nothing is set.
        """
        if self.resource_id:
            return SearchCriterion.resource_id(self.resource_id), self.attribute_filter
        if self.class_name:
            return SearchCriterion.class_name(self.class_name), self.attribute_filter
        if self.text:
            return SearchCriterion.text(self.text), self.attribute_filter
        if self.attribute_filter is not None:
            return SearchCriterion.attribute_filter(self.attribute_filter), None
        return None, None

    def criterion(self) -> Optional[SearchCriterion]:
        return self.select()[0]

    def secondary(self) -> Optional[SecondaryFilter]:
        return self.select()[1]

    def directive(self) -> PrintDirective:
        return PrintDirective(self.print_only or None)


def _load_schema(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def validate_config_values(data: Dict[str, Any], schema_path: str = DEFAULT_SCHEMA_PATH) -> None:
    """Validate raw config values against the JSON schema."""
    validator = Draft202012Validator(_load_schema(schema_path))
    errors = sorted(validator.iter_errors(data), key=lambda e: list(e.path))
    if errors:
        lines = ["Config schema validation failed:"]
        for e in errors:
            lines.append(f"- {list(e.path)}: {e.message}")
        raise ConfigError("\n".join(lines))


def load_config_file(path: str, schema_path: str = DEFAULT_SCHEMA_PATH) -> Dict[str, Any]:
    """
    Load and validate a YAML config file.

    @param path Path to the YAML file
    @return Mapping of config keys to values
    @throws ConfigError if missing, not YAML, not a mapping or schema-invalid
    """
    if not os.path.exists(path):
        raise ConfigError(f"Config YAML not found: {path}")
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Could not read config {path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError("Config YAML must be a mapping at root.")
    validate_config_values(data, schema_path)
    return data


def build_config(args: Any, file_values: Optional[Dict[str, Any]] = None) -> SearchConfig:
    """
    Merge parsed CLI arguments over config file values.

    A CLI value of None (option not given) falls back to the file value.
    """
    merged: Dict[str, Any] = {}
    for key, dest in _CONFIG_KEYS.items():
        if file_values and key in file_values:
            merged[dest] = file_values[key]
    for dest in _CONFIG_KEYS.values():
        value = getattr(args, dest, None)
        if value is not None:
            merged[dest] = value

    print_only = merged.get("print_only") or ""
    if not print_only and merged.get("bounds"):
        print_only = BOUNDS_ATTRIBUTE

    return SearchConfig(
        file=merged.get("file") or "",
        resource_id=merged.get("resource_id") or "",
        class_name=merged.get("class_name") or "",
        text=merged.get("text") or "",
        attribute_filter=parse_attribute_filter(merged.get("filter_attribute")),
        print_only=print_only,
        debug=bool(merged.get("debug", False)),
        log_file=merged.get("log_file") or None,
    )
