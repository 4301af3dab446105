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

"""Effective config materialization.

When a tap is active, its app.json is merged over the root config and the
result is written to a temp directory for the build toolchain:

1. Resolve the temp directory (``tapResolver.paths.temp`` under the tap
   directory, else DEFAULT_TEMP_DIR).
2. Remove the stale temp directory. "Not found" counts as success; any
   other failure raises CleanupError.
3. Load the tap config, merge it, recreate the temp directory and write
   ``<temp_dir>/app.json``.
4. If step 3 fails, print a warning and return the root config unchanged.

Private Helpers:
    - _write_joined_config: The load/merge/write sequence of step 3
    - _log_merged_config: Debug dump of the merged config

Example:
    from tapresolver.taps.merger import resolve_effective_config

    effective = resolve_effective_config(
        "/path/to/app", app_config, Path("/path/to/app/taps/acme"), True
    )
    print(effective.path)  # <tap>/<temp>/app.json or DEFAULT_TEMP_DIR/app.json
"""

from __future__ import annotations

from dataclasses import dataclass
import json
from pathlib import Path
from typing import Any

from tapresolver.config.loader import (
    deep_merge,
    dump_config,
    find_app_config_path,
    load_tap_config,
)
from tapresolver.constants import APP_CONFIG_FILE, DEFAULT_TEMP_DIR
from tapresolver.exceptions import CleanupError, MergeError
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.logging import Logger, get_global_logger
from tapresolver.validation import get_section

__all__ = [
    "EffectiveConfig",
    "cleanup_temp_dir",
    "get_temp_dir",
    "resolve_effective_config",
]


@dataclass(frozen=True)
class EffectiveConfig:
    """The config the build should use and where it lives on disk."""

    config: dict[str, Any]
    path: Path


def get_temp_dir(app_config: dict[str, Any], tap_path: Path) -> Path:
    """Return where merged configs for this tap are written.

    ``tapResolver.paths.temp`` is resolved relative to the tap directory.
    Without it, DEFAULT_TEMP_DIR is used.
    """
    temp = get_section(app_config, "tapResolver", "paths").get("temp")
    if not temp or not isinstance(temp, str):
        return DEFAULT_TEMP_DIR
    return Path(tap_path) / temp


def cleanup_temp_dir(temp_dir: Path, fs: FileSystem | None = None) -> None:
    """Remove a stale temp directory.

    Raises:
        CleanupError: If removal fails for any reason other than the
            directory not existing.

    """
    fs = fs or get_default_fs()
    try:
        fs.remove_tree(temp_dir)
    except FileNotFoundError:
        pass
    except OSError as err:
        raise CleanupError(
            f"Failed to remove temp config folder {temp_dir}: {err}"
        ) from err


def _log_merged_config(config: dict[str, Any], logger: Logger) -> None:
    logger.debug("CONFIG", "--- Merged tap configuration ---")
    for line in dump_config(config).splitlines():
        if line.strip():
            logger.debug("CONFIG", line)


def _write_joined_config(
    app_config: dict[str, Any],
    tap_path: Path,
    temp_dir: Path,
    fs: FileSystem,
    logger: Logger,
) -> EffectiveConfig:
    tap_config = load_tap_config(tap_path, fs)
    if not tap_config:
        logger.verbose("CONFIG", f"No tap config found in {tap_path}")

    joined = deep_merge(app_config, tap_config)
    _log_merged_config(joined, logger)

    fs.make_dirs(temp_dir)
    temp_config_path = temp_dir / APP_CONFIG_FILE
    fs.write_text(temp_config_path, json.dumps(joined, indent=2) + "\n")
    logger.verbose("CONFIG", f"Wrote merged config: {temp_config_path}")

    return EffectiveConfig(config=joined, path=temp_config_path)


def resolve_effective_config(
    app_root: str | Path,
    app_config: dict[str, Any],
    tap_path: Path | None,
    has_active_tap: bool,
    *,
    fs: FileSystem | None = None,
    logger: Logger | None = None,
) -> EffectiveConfig:
    """Merge the active tap's config over the root config and persist it.

    Args:
        app_root: App root directory.
        app_config: Root app config. Never mutated.
        tap_path: Active tap directory, or None if it was not found.
        has_active_tap: Whether a tap other than the root is active.
        fs: Filesystem to use. Defaults to the real disk.
        logger: Logger for warnings and diagnostics. Defaults to the global
            logger.

    Returns:
        The merged config and its temp file path, or the root config and
        the root config path when no tap is active, the tap folder is
        missing, or the merge failed.

    Raises:
        CleanupError: If the stale temp directory cannot be removed.

    """
    fs = fs or get_default_fs()
    logger = logger or get_global_logger()

    root_data = EffectiveConfig(
        config=app_config, path=find_app_config_path(app_root, fs)
    )

    if not has_active_tap:
        return root_data

    # setup_tap warns about the missing tap with its name and search paths
    if tap_path is None:
        logger.verbose("CONFIG", "Active tap folder is missing, using the root config")
        return root_data

    temp_dir = get_temp_dir(app_config, tap_path)
    cleanup_temp_dir(temp_dir, fs)

    try:
        return _write_joined_config(app_config, Path(tap_path), temp_dir, fs, logger)
    except (MergeError, OSError, TypeError, ValueError) as err:
        logger.warning("CONFIG", str(err))
        return root_data
