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


"""Diagnostics for tapresolver.

Library code never prints directly. It reports through a Logger, taken from
the ``logger=`` argument or, when that is omitted, the process-wide logger
that the CLI installs with set_global_logger().

Levels:
- warning: recoverable problems such as a fallback to the root config.
  Always printed, to stderr.
- verbose: which tap is active, where files were written and resolved.
- debug: the merged config dumped as YAML. Turning it on also turns on
  verbose.

Example:
    ```python
    from tapresolver.logging import get_logger, set_global_logger

    set_global_logger(get_logger(verbose=True))
    ```
"""

from __future__ import annotations

import sys
from typing import Protocol


class Logger(Protocol):
    """Anything with warning/verbose/debug methods taking (prefix, message)."""

    def warning(self, prefix: str, message: str) -> None: ...

    def verbose(self, prefix: str, message: str) -> None: ...

    def debug(self, prefix: str, message: str) -> None: ...


class DefaultLogger:
    """Prints ``[PREFIX] message`` lines; warnings go to stderr."""

    def __init__(self, verbose: bool = False, debug: bool = False) -> None:
        self._verbose = verbose or debug
        self._debug = debug

    def warning(self, prefix: str, message: str) -> None:
        print(f"[WARNING] [{prefix}] {message}", file=sys.stderr)

    def verbose(self, prefix: str, message: str) -> None:
        if self._verbose:
            print(f"[{prefix}] {message}")

    def debug(self, prefix: str, message: str) -> None:
        if self._debug:
            print(f"[{prefix}] {message}")


# Warnings only until the CLI (or a caller) installs something else
_global_logger: Logger = DefaultLogger()


def get_logger(verbose: bool = False, debug: bool = False) -> Logger:
    """Return a DefaultLogger with the given verbosity."""
    return DefaultLogger(verbose=verbose, debug=debug)


def get_global_logger() -> Logger:
    return _global_logger


def set_global_logger(logger: Logger) -> None:
    """Install the logger used by calls made without ``logger=``."""
    global _global_logger
    _global_logger = logger
