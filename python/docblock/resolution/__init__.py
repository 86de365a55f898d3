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
"""Docblock type-expression parsing and resolution.

Key Components:
- base: Operators, TypeKind, InvalidTypeError
- keywords: Reserved type names
- splitter: Bracket-aware union splitting
- expander: Resolution of single types to fully-qualified form
- collection: TypeCollection, the ordered container used by callers
"""

from __future__ import annotations

from .base import (
    OPERATOR_OR,
    OPERATOR_ARRAY,
    OPERATOR_NAMESPACE,
    TypeKind,
    InvalidTypeError,
)
from .keywords import KEYWORDS, is_keyword
from .splitter import split_union
from .expander import TypeExpander
from .collection import TypeCollection

__all__ = [
    # Operators
    "OPERATOR_OR",
    "OPERATOR_ARRAY",
    "OPERATOR_NAMESPACE",
    # Classification
    "TypeKind",
    "KEYWORDS",
    "is_keyword",
    # Errors
    "InvalidTypeError",
    # Parsing and resolution
    "split_union",
    "TypeExpander",
    "TypeCollection",
]
