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

"""File names, config keys, environment variables and defaults."""

from __future__ import annotations

from pathlib import Path
import tempfile

# Config files
APP_CONFIG_FILE = "app.json"
PACKAGE_CONFIG_FILE = "package.json"

# Required string keys under tapResolver.paths
REQUIRED_PATH_KEYS = ("externalTaps", "localTaps", "baseTap")

# Environment variables, checked in order after an explicit tap name
TAP_ENV_VARS = ("TAP", "CLIENT")
LOG_ENV_VAR = "LOG"

# Base tap folder when tapResolver.paths.baseTap is not set
DEFAULT_TAPS_DIR = "taps"

# Default location for merged temp configs when tapResolver.paths.temp is unset
DEFAULT_TEMP_DIR = Path(tempfile.gettempdir()) / "tapresolver"

DEFAULT_ASSETS_DIR = "assets"
ASSETS_MODULE_FILE = "index.js"

DEFAULT_ASSET_EXTENSIONS = (
    ".png",
    ".jpg",
    ".jpeg",
    ".gif",
    ".svg",
    ".webp",
    ".ttf",
    ".otf",
    ".mp3",
    ".mp4",
)

DEFAULT_RESOLVE_EXTENSIONS = (
    ".js",
    ".jsx",
    ".ts",
    ".tsx",
    ".json",
)

INDEX_FILE = "index"
