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

"""Public API return types for tapresolver.

All dataclasses are frozen (immutable) to prevent accidental mutation of
return values.

Example:
    Using result types:
        ```python
        from tapresolver.core import setup_tap
        from tapresolver.results import TapDescriptor

        descriptor: TapDescriptor = setup_tap(app_root, app_config, "acme")
        print(descriptor.effective_config_path)
        ```

Note:
    Only public API return types belong in this module. Intermediate types
    (TapLocation, EffectiveConfig, ContentSpec) stay co-located with the
    logic that produces them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class TapDescriptor:
    """The active build target produced by setup_tap.

    Attributes:
        effective_config: Root config merged with the tap config, or the
            root config itself when no tap is active or the merge failed.
        effective_config_path: Where the effective config lives on disk:
            the merged temp file, or the root config file.
        base_path: Directory of the base (root) tap.
        active_tap_name: Name of the active tap.
        active_tap_path: Directory of the active tap, the base path when no
            tap is active, or None when the requested tap was not found.
        has_active_tap: True if the active tap name differs from the root
            config's name.
    """

    effective_config: dict[str, Any]
    effective_config_path: Path
    base_path: Path
    active_tap_name: str | None
    active_tap_path: Path | None
    has_active_tap: bool


@dataclass(frozen=True)
class ValidationResult:
    """Result from validating an app root.

    Attributes:
        status: Validation status ("valid" or "invalid").
        errors: List of error messages (empty if valid).
        warnings: List of warning messages.
        app_name: The root config's name, if it could be read.
        config_path: String path to the root config file.
    """

    status: str
    errors: list[str]
    warnings: list[str]
    app_name: str | None
    config_path: str
