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

"""Filesystem capability used by the locator, merger and resolver.

Every disk access in tapresolver goes through a FileSystem object so that
tests can swap in a fake and count probes. LocalFileSystem is the real
implementation and is used whenever no ``fs=`` argument is given.

Example:
    Count existence probes in a test:
        ```python
        from tapresolver.fs import LocalFileSystem

        class CountingFileSystem(LocalFileSystem):
            def __init__(self):
                self.exists_calls = 0

            def exists(self, path):
                self.exists_calls += 1
                return super().exists(path)
        ```
"""

from __future__ import annotations

import os
from pathlib import Path
import shutil
from typing import Protocol


class FileSystem(Protocol):
    """Protocol for the filesystem operations tapresolver needs."""

    def exists(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def read_text(self, path: Path) -> str: ...

    def write_text(self, path: Path, content: str) -> None: ...

    def list_dir(self, path: Path) -> list[str]: ...

    def remove_tree(self, path: Path) -> None: ...

    def make_dirs(self, path: Path) -> None: ...


class LocalFileSystem:
    """FileSystem backed by the real disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def read_text(self, path: Path) -> str:
        return Path(path).read_text(encoding="utf-8")

    def write_text(self, path: Path, content: str) -> None:
        """Write a file atomically.

        The content is written to a sibling ``.tmp`` file first and then
        moved over the target, so readers see either the old file or the
        complete new one.
        """
        path = Path(path)
        tmp_path = path.with_name(f"{path.name}.tmp")
        try:
            with open(tmp_path, "w", encoding="utf-8") as f:
                f.write(content)
            os.replace(tmp_path, path)
        except OSError:
            tmp_path.unlink(missing_ok=True)
            raise

    def list_dir(self, path: Path) -> list[str]:
        return sorted(os.listdir(path))

    def remove_tree(self, path: Path) -> None:
        """Remove a directory tree.

        Raises:
            FileNotFoundError: If the path does not exist.
            OSError: For any other removal failure.
        """
        shutil.rmtree(path)

    def make_dirs(self, path: Path) -> None:
        Path(path).mkdir(parents=True, exist_ok=True)


_default_fs = LocalFileSystem()


def get_default_fs() -> FileSystem:
    """Return the shared LocalFileSystem instance."""
    return _default_fs
