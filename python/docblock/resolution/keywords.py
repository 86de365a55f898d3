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
"""Reserved docblock type names.

Keywords are never namespace-resolved. Matching is case-insensitive, so
``String`` and ``STRING`` are keywords as well.
"""

from __future__ import annotations

from typing import FrozenSet


KEYWORDS: FrozenSet[str] = frozenset({
    # Scalars and basic types
    "string", "int", "integer", "bool", "boolean", "float", "double",
    "object", "mixed", "array", "resource", "void", "null", "scalar",
    "callback", "callable", "false", "true",
    # Late binding
    "self", "$this", "static",
    # Refined types
    "array-key", "number", "iterable", "pure-callable", "closed-resource",
    "open-resource", "positive-int", "negative-int", "non-positive-int",
    "non-negative-int", "non-zero-int", "non-empty-array", "list",
    "non-empty-list", "key-of", "value-of", "template-type", "class-string",
    "callable-string", "numeric-string", "non-empty-string",
    "non-falsy-string", "literal-string", "lowercase-string",
    # Bottom types
    "never", "never-return", "never-returns", "no-return",
    # Bit masks
    "int-mask", "int-mask-of",
})


def is_keyword(type_name: str) -> bool:
    """Check if a type name is a reserved keyword (case-insensitive)."""
    return type_name.lower() in KEYWORDS
