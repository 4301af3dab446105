"""
Configuration loading and merging for tapresolver.

This module reads the root app config, reads a tap's own config, and
deep-merges the two. It does not decide which tap is active or where the
merged result is written; see tapresolver.taps for that.

Config Files
------------
1. **Root config** (<app_root>/app.json, fallback <app_root>/package.json)
   - Required; must be a non-empty JSON object
   - Must define tapResolver.paths.{externalTaps,localTaps,baseTap} as strings

2. **Tap config** (<tap_path>/app.json)
   - Optional; a missing file is treated as an empty object
   - Overrides the root config

Merge Behavior
--------------
The merge uses "tap wins" semantics:
  - **Dicts**: Recursively merged (keys from the tap override the root)
  - **Lists**: Completely replaced (NOT appended/extended)
  - **Scalars**: Overwritten (strings, numbers, booleans)

Neither input is mutated; the result is a new, deep-copied dict.

Functions
---------
load_app_config : function
    Load and validate the root config (main public API).
read_app_config : function
    Load the root config without checking tapResolver.paths.
find_app_config_path : function
    Locate the root config file on disk.
load_tap_config : function
    Load a tap's config, tolerating its absence.
deep_merge : function
    Merge a tap config over a root config.
dump_config : function
    Render a config as YAML for debug output.

Error Handling
--------------
- ValidationError: root config missing, unparsable, or missing path keys
- MergeError: tap config present but unparsable or not an object
- All errors are chained with "from err" for better debugging

Examples
--------
    >>> from tapresolver.config import load_app_config, deep_merge
    >>> root = load_app_config("/path/to/app")
    >>> merged = deep_merge(root, {"name": "acme"})
    >>> merged["name"]
    'acme'
"""

from __future__ import annotations

from copy import deepcopy
import json
from pathlib import Path
from typing import Any

import yaml

from tapresolver.constants import APP_CONFIG_FILE, PACKAGE_CONFIG_FILE
from tapresolver.exceptions import MergeError, ValidationError
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.validation import check_tap_paths, validate_app_root_arg

# -------------------------------
# JSON helpers
# -------------------------------


def _load_json_file(p: Path, fs: FileSystem) -> Any:
    """
    Load a JSON file and return the parsed Python object.

    Raises:
      FileNotFoundError      - when file does not exist
      json.JSONDecodeError   - for invalid JSON
    """
    if not fs.exists(p):
        raise FileNotFoundError(f"file not found: {p}")
    return json.loads(fs.read_text(p))


# -------------------------------
# Root config
# -------------------------------


def find_app_config_path(app_root: str | Path, fs: FileSystem | None = None) -> Path:
    """
    Return the root config file for app_root.

    app.json wins over package.json. When neither exists the app.json path
    is returned so callers still get the well-known location.
    """
    fs = fs or get_default_fs()
    app_json = Path(app_root) / APP_CONFIG_FILE
    package_json = Path(app_root) / PACKAGE_CONFIG_FILE
    if not fs.exists(app_json) and fs.exists(package_json):
        return package_json
    return app_json


def read_app_config(
    app_root: str | Path, fs: FileSystem | None = None
) -> dict[str, Any]:
    """
    Read app.json (or package.json) from app_root.

    Raises
      ValidationError if app_root is invalid, the file is missing, is not
      valid JSON, or is not a non-empty object.
    """
    validate_app_root_arg(app_root)
    fs = fs or get_default_fs()
    config_path = find_app_config_path(app_root, fs)

    try:
        app_config = _load_json_file(config_path, fs)
    except FileNotFoundError as err:
        raise ValidationError(
            f"Could not find {APP_CONFIG_FILE} in root directory {app_root}! "
            f"{APP_CONFIG_FILE} is required!"
        ) from err
    except json.JSONDecodeError as err:
        raise ValidationError(f"Invalid JSON in {config_path}: {err}") from err

    if not isinstance(app_config, dict) or not app_config:
        raise ValidationError(
            f"{config_path} must contain a non-empty JSON object. "
            f"{APP_CONFIG_FILE} is required!"
        )
    return app_config


def load_app_config(
    app_root: str | Path, fs: FileSystem | None = None
) -> dict[str, Any]:
    """
    Load and validate the root app config.

    Steps
      1) Check app_root is a non-empty string or path.
      2) Read app.json, falling back to package.json.
      3) Check tapResolver.paths has string externalTaps, localTaps, baseTap.

    Returns
      The parsed root config.

    Raises
      ValidationError on any failed step.
    """
    app_config = read_app_config(app_root, fs)
    errors = check_tap_paths(app_config)
    if errors:
        raise ValidationError(errors[0])
    return app_config


# -------------------------------
# Tap config
# -------------------------------


def load_tap_config(tap_path: Path, fs: FileSystem | None = None) -> dict[str, Any]:
    """
    Load <tap_path>/app.json.

    A missing file is not an error: the tap simply overrides nothing.

    Raises
      MergeError if the file exists but is not a JSON object.
    """
    fs = fs or get_default_fs()
    config_path = Path(tap_path) / APP_CONFIG_FILE
    try:
        tap_config = _load_json_file(config_path, fs)
    except FileNotFoundError:
        return {}
    except json.JSONDecodeError as err:
        raise MergeError(f"Invalid JSON in tap config {config_path}: {err}") from err

    if tap_config is None:
        return {}
    if not isinstance(tap_config, dict):
        raise MergeError(f"Tap config {config_path} must be a JSON object")
    return tap_config


# -------------------------------
# Merge logic
# -------------------------------


def deep_merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge two dicts with "overlay wins".

    Rules:
      - dict + dict -> deep merge
      - list + list -> overlay REPLACES base (not concatenated)
      - everything else -> overlay overwrites base

    This function does not mutate inputs; returns a new dict that shares
    no nested containers with either input.
    """
    result: dict[str, Any] = deepcopy(base)
    for k, v in overlay.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = deep_merge(result[k], v)
        else:
            # Replace lists and scalars entirely
            result[k] = deepcopy(v)
    return result


# -------------------------------
# Debug helpers
# -------------------------------


def dump_config(data: dict[str, Any]) -> str:
    """Render a config as YAML for debug output."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False)
