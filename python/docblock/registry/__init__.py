# Copyright Rand Arete @ Ananke 2025
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
# ==============================================================================
"""Type registries used to probe whether a type name is already known.

- EmptyTypeRegistry: Knows nothing (the default)
- StaticTypeRegistry: Fixed set of names
- CallableTypeRegistry: Wraps a name -> bool probe function
- CachingTypeRegistry: Memoizes another registry
- SourceTypeRegistry: Names declared in source files on disk
"""

from __future__ import annotations

from .base import (
    TypeRegistry,
    EmptyTypeRegistry,
    StaticTypeRegistry,
    CallableTypeRegistry,
    CachingTypeRegistry,
    create_registry,
)
from .source import (
    SourceTypeRegistry,
    scan_declarations,
)

__all__ = [
    "TypeRegistry",
    "EmptyTypeRegistry",
    "StaticTypeRegistry",
    "CallableTypeRegistry",
    "CachingTypeRegistry",
    "create_registry",
    "SourceTypeRegistry",
    "scan_declarations",
]
