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

"""Content resolution for tap files.

A ContentResolver maps a logical file reference (a component or asset name)
to a concrete path. Files in the active tap win; anything the tap does not
override resolves to the base application.

Resolution of ``name`` for a resolver of type ``type_``:

1. Build ``<alias_map["<nameSpace>Client"]>/<type_>/<name>``
2. Append ``index`` if the path is a directory; the result is the cache key
3. Return the cached path if this key was seen before (no existence probes)
4. Run the probe strategies in order, first hit wins:
   - the exact path
   - the path + each configured extension, in order
5. Fall back to ``<content.base_path>/<type_>/<name>`` (not probed)
6. Cache and return the result

Example:
    Resolve components for the active tap:
        ```python
        from tapresolver.resolver import ContentSpec, build_alias_map, make_resolver

        resolve = make_resolver(
            descriptor.effective_config,
            build_alias_map(descriptor),
            ContentSpec(extensions=(".js", ".jsx"), base_path=descriptor.base_path),
            "components",
        )
        resolve("Button")  # taps/acme/components/Button.js or base/components/Button
        ```

Note:
    Set the LOG environment variable (or pass ``log_paths=True``) to log
    every resolved path through the verbose logger.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
import os
from pathlib import Path
import re
from typing import Any

from tapresolver.constants import DEFAULT_RESOLVE_EXTENSIONS, INDEX_FILE, LOG_ENV_VAR
from tapresolver.exceptions import ValidationError
from tapresolver.fs import FileSystem, get_default_fs
from tapresolver.logging import Logger, get_global_logger
from tapresolver.resolver.cache import PathCache
from tapresolver.results import TapDescriptor
from tapresolver.validation import get_section, validate_app_config

__all__ = [
    "ContentResolver",
    "ContentSpec",
    "ProbeStrategy",
    "build_alias_map",
    "exact_path",
    "first_match",
    "get_namespace",
    "make_resolver",
    "with_extensions",
]

# Returns the matching path, or None to let the next strategy try
ProbeStrategy = Callable[[FileSystem, Path], "Path | None"]


@dataclass(frozen=True)
class ContentSpec:
    """What a resolver looks for and where it falls back to.

    Attributes:
        extensions: Extensions tried, in order, when the exact path is missing.
        base_path: Base application directory used as the fallback root.
    """

    extensions: tuple[str, ...]
    base_path: Path

    @classmethod
    def from_value(cls, value: ContentSpec | Mapping[str, Any]) -> ContentSpec:
        """Accept a ContentSpec or a mapping with extensions/basePath keys."""
        if isinstance(value, ContentSpec):
            return value
        base_path = value.get("basePath", value.get("base_path"))
        if not base_path:
            raise ValidationError("Content must define a basePath")
        return cls(
            extensions=tuple(value.get("extensions", ())),
            base_path=Path(base_path),
        )


# -------------------------------
# Probe strategies
# -------------------------------


def exact_path(fs: FileSystem, path: Path) -> Path | None:
    """Match the path itself (files with no extension, or a full file name)."""
    return path if fs.exists(path) else None


def with_extensions(extensions: Iterable[str]) -> ProbeStrategy:
    """Build a strategy that tries ``path + ext`` for each extension in order."""
    extensions = tuple(extensions)

    def probe(fs: FileSystem, path: Path) -> Path | None:
        for ext in extensions:
            candidate = path.with_name(f"{path.name}{ext}")
            if fs.exists(candidate):
                return candidate
        return None

    return probe


def first_match(
    strategies: Sequence[ProbeStrategy], fs: FileSystem, path: Path
) -> Path | None:
    """Run strategies in order and return the first non-None result."""
    for strategy in strategies:
        found = strategy(fs, path)
        if found is not None:
            return found
    return None


# -------------------------------
# Resolver
# -------------------------------


def get_namespace(app_config: dict[str, Any]) -> str:
    """Return ``clientResolver.aliases.nameSpace`` (default empty string)."""
    namespace = get_section(app_config, "clientResolver", "aliases").get("nameSpace")
    return namespace if isinstance(namespace, str) else ""


def build_alias_map(descriptor: TapDescriptor) -> dict[str, Path]:
    """Build the alias map a resolver needs from a TapDescriptor.

    ``<nameSpace>Client`` points at the active tap (or the base tap when the
    requested tap was not found); ``<nameSpace>Base`` points at the base tap.
    """
    namespace = get_namespace(descriptor.effective_config)
    return {
        f"{namespace}Client": descriptor.active_tap_path or descriptor.base_path,
        f"{namespace}Base": descriptor.base_path,
    }


class ContentResolver:
    """Resolves file references for one content type of one tap.

    Instances are callable: ``resolver("Button")`` or ``resolver(match)``
    where ``match`` is an ``re.Match`` whose first group is the name.

    Attributes:
        client_dir: Directory of the active tap (from the alias map).
        content: Extensions and fallback base path.
        type_: Content folder, e.g. "components" or "assets".
        cache: Lookup cache owned by this resolver.
    """

    def __init__(
        self,
        app_config: dict[str, Any],
        alias_map: Mapping[str, str | Path],
        content: ContentSpec | Mapping[str, Any],
        type_: str,
        *,
        fs: FileSystem | None = None,
        cache: PathCache | None = None,
        logger: Logger | None = None,
        log_paths: bool | None = None,
    ) -> None:
        validate_app_config(app_config)

        alias_key = f"{get_namespace(app_config)}Client"
        if alias_key not in alias_map:
            raise ValidationError(f"Alias map has no '{alias_key}' entry")

        self.client_dir = Path(alias_map[alias_key])
        self.content = ContentSpec.from_value(content)
        self.type_ = type_
        self.cache = cache if cache is not None else PathCache()
        self._fs = fs or get_default_fs()
        self._logger = logger or get_global_logger()
        self._log_paths = (
            bool(os.environ.get(LOG_ENV_VAR)) if log_paths is None else log_paths
        )
        self._strategies: list[ProbeStrategy] = [
            exact_path,
            with_extensions(self.content.extensions),
        ]

    def _add_index(self, full_path: Path) -> Path:
        # Lets a folder resolve to its index file
        if self._fs.is_dir(full_path):
            return full_path / INDEX_FILE
        return full_path

    def resolve(self, name: str) -> Path:
        """Resolve name to a tap file or its base application fallback."""
        lookup = self._add_index(self.client_dir / self.type_ / name)

        cached = self.cache.get(lookup)
        if cached is not None:
            return cached

        found = first_match(self._strategies, self._fs, lookup)
        resolved = self.cache.set(
            lookup, found or self.content.base_path / self.type_ / name
        )

        if self._log_paths:
            self._logger.verbose("RESOLVE", f"Loading file from {resolved}")

        return resolved

    def reset(self) -> None:
        """Forget every resolved path."""
        self.cache.reset()

    def __call__(self, match: str | re.Match[str]) -> Path:
        name = match.group(1) if isinstance(match, re.Match) else match
        return self.resolve(name)


def make_resolver(
    app_config: dict[str, Any],
    alias_map: Mapping[str, str | Path],
    content: ContentSpec | Mapping[str, Any] | None,
    type_: str,
    **kwargs: Any,
) -> ContentResolver:
    """Build a ContentResolver.

    Args:
        app_config: Effective app config (validated here).
        alias_map: Must contain ``<nameSpace>Client``.
        content: Extensions and fallback base path. When None, the
            extensions come from ``tapResolver.extensions.resolve`` (or the
            defaults) and the base path from the ``<nameSpace>Base`` alias.
        type_: Content folder to resolve in.
        **kwargs: Passed to ContentResolver (fs, cache, logger, log_paths).

    Raises:
        ValidationError: If app_config is invalid or an alias is missing.

    """
    if content is None:
        validate_app_config(app_config)
        base_key = f"{get_namespace(app_config)}Base"
        if base_key not in alias_map:
            raise ValidationError(f"Alias map has no '{base_key}' entry")
        extensions = get_section(app_config, "tapResolver", "extensions").get("resolve")
        if not isinstance(extensions, list):
            extensions = DEFAULT_RESOLVE_EXTENSIONS
        content = ContentSpec(
            extensions=tuple(extensions), base_path=Path(alias_map[base_key])
        )
    return ContentResolver(app_config, alias_map, content, type_, **kwargs)
