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

"""Exception hierarchy for tapresolver.

This module defines the errors raised while setting up a tap and resolving
its content:

- ValidationError: Missing or invalid app root, app config, or required
  ``tapResolver.paths`` keys. Always fatal.
- CleanupError: The stale temp config directory could not be removed for a
  reason other than "it does not exist". Always fatal.
- MergeError: The tap config could not be loaded or merged. Recoverable:
  the merger catches it, prints a warning and falls back to the root config.

All exceptions inherit from TapResolverError, allowing callers to catch all
tapresolver errors with a single except clause if needed.

Example:
    Catching specific error types:
        ```python
        from tapresolver.core import setup_tap
        from tapresolver.exceptions import CleanupError, ValidationError

        try:
            descriptor = setup_tap("/path/to/app", app_config, "acme")
        except ValidationError as e:
            print(f"Invalid app: {e}")
        except CleanupError as e:
            print(f"Could not clear temp config: {e}")
        ```
"""

from __future__ import annotations

__all__ = [
    "TapResolverError",
    "ValidationError",
    "CleanupError",
    "MergeError",
]


class TapResolverError(Exception):
    """Base exception for all tapresolver errors."""

    pass


class ValidationError(TapResolverError):
    """Raised when the app root or app config is missing or invalid.

    This exception is raised when:

    - The app root is not a non-empty string or path
    - The app config is not a populated mapping
    - app.json (or package.json) cannot be found or parsed
    - ``tapResolver.paths`` is missing a required string key
    - A content resolver has no alias for its namespace

    Example:
        Catching validation errors:
            ```python
            from tapresolver.config import load_app_config
            from tapresolver.exceptions import ValidationError

            try:
                config = load_app_config("/path/to/app")
            except ValidationError as e:
                print(f"Config error: {e}")
            ```
    """

    pass


class CleanupError(TapResolverError):
    """Raised when the stale temp config directory cannot be removed.

    A missing directory is not an error. Anything else (permissions, a
    busy file, a path that is a regular file) is surfaced to the caller
    with the original OSError chained.
    """

    pass


class MergeError(TapResolverError):
    """Raised when a tap config cannot be loaded or merged.

    The config merger catches this error and falls back to the unmerged
    root config, so it only escapes when the lower-level helpers are
    called directly.
    """

    pass
