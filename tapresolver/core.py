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

"""Core orchestration for tapresolver.

setup_tap is the entry point a build calls once per run. It composes the
tap locator and the config merger into a single TapDescriptor:

1. Validate the app root and root config
2. Determine the active tap name and directory
3. Merge the tap config over the root config and write it to a temp dir
4. Report when defaults are in use or a requested tap is missing

Calling setup_tap twice with the same arguments repeats the temp cleanup
and rewrite and returns an equal descriptor.

Example:
    Programmatic usage:
        ```python
        from tapresolver.config import load_app_config
        from tapresolver.core import setup_tap

        app_config = load_app_config("/path/to/app")
        descriptor = setup_tap("/path/to/app", app_config, "acme")

        print(f"Tap: {descriptor.active_tap_name}")
        print(f"Config: {descriptor.effective_config_path}")
        ```

"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from tapresolver.fs import FileSystem
from tapresolver.logging import Logger, get_global_logger
from tapresolver.results import TapDescriptor
from tapresolver.taps.locator import locate_tap
from tapresolver.taps.merger import resolve_effective_config
from tapresolver.validation import get_section, validate_app


def setup_tap(
    app_root: str | Path,
    app_config: dict[str, Any],
    tap_name: str | None = None,
    *,
    fs: FileSystem | None = None,
    logger: Logger | None = None,
    environ: Mapping[str, str | None] | None = None,
) -> TapDescriptor:
    """Resolve the active tap and its effective config.

    Args:
        app_root: App root directory.
        app_config: Root app config (see tapresolver.config.load_app_config).
        tap_name: Tap to activate. Falls back to the TAP/CLIENT environment
            variables, then the root config's name.
        fs: Filesystem to use. Defaults to the real disk.
        logger: Logger for warnings and diagnostics. Defaults to the global
            logger.
        environ: Environment mapping for the tap name fallback.

    Returns:
        TapDescriptor describing the active build target.

    Raises:
        ValidationError: If app_root or app_config is missing or invalid.
        CleanupError: If a stale temp config directory cannot be removed.

    """
    validate_app(app_root, app_config)
    logger = logger or get_global_logger()

    location = locate_tap(app_root, app_config, tap_name, fs=fs, environ=environ)
    logger.verbose("TAP", f"Active tap: {location.active_tap_name}")

    if location.has_active_tap and location.active_tap_path is None:
        paths = get_section(app_config, "tapResolver", "paths")
        logger.warning(
            "TAP",
            f"Tap '{location.active_tap_name}' not found in "
            f"{paths.get('localTaps')} or {paths.get('externalTaps')}, "
            f"using defaults at {location.base_path}",
        )

    effective = resolve_effective_config(
        app_root,
        app_config,
        location.active_tap_path,
        location.has_active_tap,
        fs=fs,
        logger=logger,
    )

    if not location.has_active_tap:
        logger.warning(
            "TAP",
            f"No tap folder found at {location.active_tap_path}, "
            f"using defaults at {location.base_path}",
        )

    return TapDescriptor(
        effective_config=effective.config,
        effective_config_path=effective.path,
        base_path=location.base_path,
        active_tap_name=location.active_tap_name,
        active_tap_path=location.active_tap_path,
        has_active_tap=location.has_active_tap,
    )
