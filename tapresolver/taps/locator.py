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

"""Active tap discovery.

This module decides which tap is active and where it lives on disk.

Active tap name precedence (first non-empty wins):

1. The tap name passed by the caller
2. The ``TAP`` environment variable, then the legacy ``CLIENT`` variable
3. The root config's ``name``

Tap directory precedence when a tap is active:

1. ``<app_root>/<tapResolver.paths.localTaps>/<name>``
2. ``<app_root>/<tapResolver.paths.externalTaps>/<name>``
3. None (requested but not found)

Environment variables are read from the process environment, with a
``.env`` file in the app root filling in anything the process does not set.

Example:
    Locate the active tap:
        ```python
        from tapresolver.taps import locate_tap

        location = locate_tap("/path/to/app", app_config, "acme")
        if location.has_active_tap and location.active_tap_path is None:
            print("acme was requested but no tap folder exists")
        ```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
import os
from pathlib import Path
from typing import Any

from dotenv import dotenv_values

from tapresolver.constants import DEFAULT_TAPS_DIR, TAP_ENV_VARS
from tapresolver.exceptions import ValidationError
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.validation import get_section, validate_app

__all__ = [
    "TapLocation",
    "get_active_tap_name",
    "get_base_tap_path",
    "get_tap_path",
    "load_environment",
    "locate_tap",
]


@dataclass(frozen=True)
class TapLocation:
    """Where the active tap lives.

    Attributes:
        base_path: Directory of the base (root) tap.
        active_tap_name: Name of the active tap.
        active_tap_path: Tap directory, base_path when no tap is active, or
            None when the tap was requested but not found.
        has_active_tap: True if active_tap_name differs from the root name.
    """

    base_path: Path
    active_tap_name: str | None
    active_tap_path: Path | None
    has_active_tap: bool


def _tap_paths(app_config: dict[str, Any]) -> dict[str, Any]:
    return get_section(app_config, "tapResolver", "paths")


def load_environment(app_root: str | Path) -> dict[str, str | None]:
    """Return the process environment layered over ``<app_root>/.env``."""
    env_file = Path(app_root) / ".env"
    file_values = dotenv_values(env_file) if env_file.is_file() else {}
    return {**file_values, **os.environ}


def get_base_tap_path(app_root: str | Path, app_config: dict[str, Any]) -> Path:
    """Return the base tap directory.

    Uses ``tapResolver.paths.baseTap`` relative to app_root when set,
    otherwise ``<app_root>/taps/<name>``.

    Raises:
        ValidationError: If neither baseTap nor name is set.

    """
    base_tap = _tap_paths(app_config).get("baseTap")
    if base_tap:
        return Path(app_root) / base_tap

    name = app_config.get("name")
    if not name:
        raise ValidationError(
            "App config must define 'name' when 'tapResolver.paths.baseTap' is not set"
        )
    return Path(app_root) / DEFAULT_TAPS_DIR / name


def get_active_tap_name(
    app_config: dict[str, Any],
    tap_name: str | None = None,
    environ: Mapping[str, str | None] | None = None,
) -> str | None:
    """Return the active tap name (argument > environment > root name)."""
    if tap_name:
        return tap_name

    environ = os.environ if environ is None else environ
    for var in TAP_ENV_VARS:
        value = environ.get(var)
        if value:
            return value

    return app_config.get("name")


def get_tap_path(
    app_root: str | Path,
    app_config: dict[str, Any],
    tap_name: str,
    fs: FileSystem | None = None,
) -> Path | None:
    """Return the tap directory, preferring local taps over external taps.

    Returns:
        The first existing directory, or None if neither exists.

    """
    fs = fs or get_default_fs()
    paths = _tap_paths(app_config)

    candidates = [
        Path(app_root) / paths[key] / tap_name
        for key in ("localTaps", "externalTaps")
        if isinstance(paths.get(key), str)
    ]
    return next((c for c in candidates if fs.exists(c)), None)


def locate_tap(
    app_root: str | Path,
    app_config: dict[str, Any],
    tap_name: str | None = None,
    *,
    fs: FileSystem | None = None,
    environ: Mapping[str, str | None] | None = None,
) -> TapLocation:
    """Determine the active tap and its directory.

    Args:
        app_root: App root directory.
        app_config: Root app config.
        tap_name: Explicitly requested tap, if any.
        fs: Filesystem to probe. Defaults to the real disk.
        environ: Environment to read TAP/CLIENT from. Defaults to the
            process environment layered over ``<app_root>/.env``.

    Returns:
        TapLocation for the active tap.

    Raises:
        ValidationError: If app_root or app_config is invalid.

    """
    validate_app(app_root, app_config)

    if environ is None:
        environ = load_environment(app_root)

    base_path = get_base_tap_path(app_root, app_config)
    active_name = get_active_tap_name(app_config, tap_name, environ)
    has_active_tap = active_name != app_config.get("name")

    active_path = (
        get_tap_path(app_root, app_config, active_name, fs)
        if has_active_tap
        else base_path
    )

    return TapLocation(
        base_path=base_path,
        active_tap_name=active_name,
        active_tap_path=active_path,
        has_active_tap=has_active_tap,
    )
