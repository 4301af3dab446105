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

"""One-time directory setup run before the first tap build."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from tapresolver.constants import DEFAULT_TEMP_DIR
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.validation import get_section, validate_app


def ensure_install_dirs(
    app_root: str | Path,
    app_config: dict[str, Any],
    *,
    temp_dir: Path | None = None,
    fs: FileSystem | None = None,
) -> list[Path]:
    """Create the local taps, external taps and default temp folders.

    Safe to run repeatedly; existing folders are left alone. temp_dir
    defaults to DEFAULT_TEMP_DIR.

    Returns:
        The folders that did not exist and were created.

    """
    validate_app(app_root, app_config)
    fs = fs or get_default_fs()
    paths = get_section(app_config, "tapResolver", "paths")

    wanted = [
        Path(app_root) / paths[key]
        for key in ("localTaps", "externalTaps")
        if isinstance(paths.get(key), str)
    ]
    wanted.append(temp_dir or DEFAULT_TEMP_DIR)

    created = []
    for directory in wanted:
        if not fs.exists(directory):
            fs.make_dirs(directory)
            created.append(directory)
    return created
