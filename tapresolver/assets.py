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

"""Tap asset module generation.

This module scans a tap's assets folder and writes an ``index.js`` that maps
each asset's base name to a ``require()`` of the file, so the app can load
tap-specific images and fonts by name.

Private Helpers:
    - _allowed_extensions: Default, configured and caller extensions
    - _asset_file_names: Filtered, de-duplicated directory listing
    - _render_assets_module: The generated JS source

Example:
    from tapresolver.assets import build_assets

    index_path = build_assets(
        descriptor.effective_config,
        descriptor.base_path,
        descriptor.active_tap_path,
    )
    # taps/acme/assets/index.js:
    #   const assets = {
    #     "logo": require('taps/acme/assets/logo.png'),
    #   }
    #
    #   export default assets
"""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path
from typing import Any

from tapresolver.constants import (
    ASSETS_MODULE_FILE,
    DEFAULT_ASSET_EXTENSIONS,
    DEFAULT_ASSETS_DIR,
)
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.validation import get_section


def get_assets_dir(
    app_config: dict[str, Any], base_path: str | Path, tap_path: str | Path | None
) -> Path:
    """Return the folder to scan for assets.

    ``tapResolver.paths.tapAssets`` under the tap directory when it is set
    (and a tap directory exists), otherwise ``<base_path>/assets``.
    """
    tap_assets = get_section(app_config, "tapResolver", "paths").get("tapAssets")
    if not tap_assets or not isinstance(tap_assets, str) or tap_path is None:
        return Path(base_path) / DEFAULT_ASSETS_DIR
    return Path(tap_path) / tap_assets


def _allowed_extensions(
    app_config: dict[str, Any], extensions: Iterable[str] | None
) -> set[str]:
    configured = get_section(app_config, "tapResolver", "extensions").get("assets")
    if not isinstance(configured, list):
        configured = []
    return {*DEFAULT_ASSET_EXTENSIONS, *configured, *(extensions or ())}


def _asset_file_names(
    assets_dir: Path, allowed: set[str], fs: FileSystem
) -> list[str]:
    # A name without a dot yields ".<name>", which never matches
    names = (
        name for name in fs.list_dir(assets_dir)
        if f".{name.rsplit('.', 1)[-1]}" in allowed
    )
    return list(dict.fromkeys(names))


def _render_assets_module(assets_dir: Path, names: list[str]) -> str:
    properties = ",\n  ".join(
        f"\"{name.split('.')[0]}\": require('{assets_dir.as_posix()}/{name}')"
        for name in names
    )
    return f"const assets = {{\n  {properties}\n}}\n\nexport default assets\n"


def build_assets(
    app_config: dict[str, Any],
    base_path: str | Path,
    tap_path: str | Path | None,
    extensions: Iterable[str] | None = None,
    *,
    fs: FileSystem | None = None,
) -> Path:
    """Generate the assets index module for a tap.

    Args:
        app_config: Effective app config.
        base_path: Base tap directory (fallback assets location).
        tap_path: Active tap directory.
        extensions: Extra allowed extensions, e.g. [".lottie"].
        fs: Filesystem to use. Defaults to the real disk.

    Returns:
        Path of the written ``index.js``.

    Raises:
        OSError: If the assets folder cannot be listed or written.

    """
    fs = fs or get_default_fs()
    assets_dir = get_assets_dir(app_config, base_path, tap_path)
    names = _asset_file_names(
        assets_dir, _allowed_extensions(app_config, extensions), fs
    )

    assets_path = assets_dir / ASSETS_MODULE_FILE
    fs.write_text(assets_path, _render_assets_module(assets_dir, names))
    return assets_path
