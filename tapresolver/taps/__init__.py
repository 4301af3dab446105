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

"""Tap discovery and effective config materialization.

Public API:

- locate_tap: Determine the active tap name and directory
- resolve_effective_config: Merge the tap config over the root config and
  write it to a temp directory
- TapLocation, EffectiveConfig: Their return types

"""

from .locator import TapLocation, locate_tap
from .merger import EffectiveConfig, resolve_effective_config

__all__ = [
    "EffectiveConfig",
    "TapLocation",
    "locate_tap",
    "resolve_effective_config",
]
