# Copyright 2025 Roger Cibrian
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""App validation.

This module holds the shared validator used by every entry point
(setup_tap, locate_tap, make_resolver) and a non-raising variant used by
the ``tapresolver validate`` command.

Validation Checks:

- App root is a non-empty string or path
- App config is a populated mapping
- ``tapResolver.paths`` is a mapping
- ``tapResolver.paths`` has string ``externalTaps``, ``localTaps``, ``baseTap``

Example:
    Validate an app directory and handle results:
        ```python
        from tapresolver.validation import validate_app_root

        result = validate_app_root("/path/to/app")
        if result.status == "valid":
            print(f"App config found at {result.config_path}")
        else:
            for error in result.errors:
                print(f"Error: {error}")
        ```

"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from tapresolver.constants import REQUIRED_PATH_KEYS
from tapresolver.exceptions import ValidationError
from tapresolver.results import ValidationResult

__all__ = [
    "validate_app",
    "validate_app_root_arg",
    "validate_app_config",
    "check_tap_paths",
    "get_section",
    "validate_app_root",
]


def validate_app_root_arg(app_root: Any) -> None:
    """Raise ValidationError unless app_root is a non-empty string or path."""
    if isinstance(app_root, os.PathLike):
        app_root = os.fspath(app_root)
    if not isinstance(app_root, str) or not app_root:
        raise ValidationError("Application root directory is required!")


def validate_app_config(app_config: Any) -> None:
    """Raise ValidationError unless app_config is a populated mapping."""
    if not isinstance(app_config, dict) or not app_config:
        raise ValidationError("Application config is required!")


def validate_app(app_root: Any, app_config: Any) -> None:
    """Shared validator for an app root and its config.

    Args:
        app_root: App root directory.
        app_config: Parsed app.json contents.

    Raises:
        ValidationError: If either argument is missing or invalid.

    """
    validate_app_root_arg(app_root)
    validate_app_config(app_config)


def get_section(config: dict[str, Any], *keys: str) -> dict[str, Any]:
    """Walk nested config keys, treating a missing or non-object level as {}.

    Example:
        get_section(app_config, "tapResolver", "paths").get("temp")
    """
    section: Any = config
    for key in keys:
        section = section.get(key) if isinstance(section, dict) else None
    return section if isinstance(section, dict) else {}


def check_tap_paths(app_config: dict[str, Any]) -> list[str]:
    """Return the problems with ``tapResolver.paths`` (empty if none)."""
    paths = get_section(app_config, "tapResolver").get("paths")
    if not isinstance(paths, dict):
        return ["App config does NOT define 'tapResolver.paths'. This path is required!"]

    return [
        f"Your app config 'tapResolver.paths' must contain a {key} key as a string!"
        for key in REQUIRED_PATH_KEYS
        if not isinstance(paths.get(key), str)
    ]


def validate_app_root(app_root: str | Path) -> ValidationResult:
    """Validate an app directory without touching taps or temp files.

    This function checks:

    1. app.json (or package.json) exists and is valid JSON
    2. The top level is a non-empty object
    3. ``tapResolver.paths`` has the required string keys

    Args:
        app_root: App root directory.

    Returns:
        ValidationResult with status "valid" or "invalid".

    """
    from tapresolver.config.loader import find_app_config_path, read_app_config

    errors: list[str] = []
    warnings: list[str] = []
    config_path = find_app_config_path(app_root)

    try:
        app_config = read_app_config(app_root)
    except ValidationError as err:
        errors.append(str(err))
        app_config = {}

    if app_config:
        errors.extend(check_tap_paths(app_config))
        if "name" not in app_config:
            warnings.append(
                "App config has no 'name'; every tap name will be treated as active"
            )

    return ValidationResult(
        status="invalid" if errors else "valid",
        errors=errors,
        warnings=warnings,
        app_name=app_config.get("name"),
        config_path=str(config_path),
    )
