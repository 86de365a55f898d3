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
"""Docblock: type-expression parsing and resolution for documentation tools.

Given a raw docblock type such as ``Foo|Bar[]``, ``\\Vendor\\Class`` or
``array<string, int>``, docblock splits unions into single types,
classifies them, and resolves relative class names to fully-qualified
names using the namespace and imports in effect where the type was
written.

Key Components:
    - resolution: Union splitting, expansion and the TypeCollection
    - context: Namespace/alias/generics Context, and building one from source
    - registry: Existence probes for already-known types
    - config: ResolverConfig options

Usage:
    >>> from docblock import Context, TypeCollection
    >>> ctx = Context(namespace="App\\\\Models")
    >>> str(TypeCollection(["User|null"], ctx))
    '\\\\App\\\\Models\\\\User|null'
"""

from __future__ import annotations

from .config import DEFAULT_CONFIG, ResolverConfig
from .context import Context, context_from_source
from .registry import (
    CachingTypeRegistry,
    CallableTypeRegistry,
    EmptyTypeRegistry,
    SourceTypeRegistry,
    StaticTypeRegistry,
    TypeRegistry,
    create_registry,
)
from .resolution import (
    KEYWORDS,
    InvalidTypeError,
    TypeCollection,
    TypeExpander,
    TypeKind,
    is_keyword,
    split_union,
)

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONFIG",
    "ResolverConfig",
    "Context",
    "context_from_source",
    "TypeRegistry",
    "EmptyTypeRegistry",
    "StaticTypeRegistry",
    "CallableTypeRegistry",
    "CachingTypeRegistry",
    "SourceTypeRegistry",
    "create_registry",
    "KEYWORDS",
    "InvalidTypeError",
    "TypeCollection",
    "TypeExpander",
    "TypeKind",
    "is_keyword",
    "split_union",
]
