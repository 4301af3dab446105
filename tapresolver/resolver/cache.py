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

"""Lookup cache for resolved content paths."""

from __future__ import annotations

from pathlib import Path


class PathCache:
    """Maps a lookup path to the path it resolved to.

    Entries are write-once: a key keeps its first value until reset() clears
    the whole cache. Each ContentResolver owns one cache; switching taps
    means a new resolver (and cache) or an explicit reset().

    Example:
        ```python
        cache = PathCache()
        cache.set(Path("taps/acme/components/Button"), Path("base/components/Button"))
        cache.get(Path("taps/acme/components/Button"))
        ```
    """

    def __init__(self) -> None:
        self._entries: dict[Path, Path] = {}

    def get(self, key: Path) -> Path | None:
        return self._entries.get(key)

    def set(self, key: Path, value: Path) -> Path:
        """Cache value under key unless key is already cached.

        Returns:
            The cached value for key.
        """
        return self._entries.setdefault(key, value)

    def reset(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
