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

"""Configuration loading and merging for tapresolver.

This package reads the root app config (app.json, falling back to
package.json), reads a tap's optional app.json, and deep-merges them so
that dicts merge recursively and lists/scalars from the tap replace the
root value.

Public API:

- load_app_config: Load and validate the root config
- find_app_config_path: Locate the root config file
- load_tap_config: Load a tap's config ({} when absent)
- deep_merge: Merge a tap config over a root config

Example:
    Basic usage:

        from tapresolver.config import deep_merge, load_app_config

        root = load_app_config("/path/to/app")
        merged = deep_merge(root, {"name": "acme"})

"""

from .loader import (
    deep_merge,
    find_app_config_path,
    load_app_config,
    load_tap_config,
)

__all__ = [
    "deep_merge",
    "find_app_config_path",
    "load_app_config",
    "load_tap_config",
]
