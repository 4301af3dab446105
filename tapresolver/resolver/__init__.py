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

"""Tap-aware content resolution.

Public API:

- make_resolver: Build a resolver for one content type
- ContentResolver: The resolver itself (callable)
- ContentSpec: Extensions and fallback base path
- PathCache: Per-resolver lookup cache
- build_alias_map: Alias map for a TapDescriptor

"""

from .cache import PathCache
from .content import ContentResolver, ContentSpec, build_alias_map, make_resolver

__all__ = [
    "ContentResolver",
    "ContentSpec",
    "PathCache",
    "build_alias_map",
    "make_resolver",
]
