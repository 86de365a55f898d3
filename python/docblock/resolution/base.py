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
"""Shared definitions for docblock type resolution."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any

from ..constants import OPERATOR_ARRAY, OPERATOR_NAMESPACE, OPERATOR_OR

__all__ = [
    "OPERATOR_OR",
    "OPERATOR_ARRAY",
    "OPERATOR_NAMESPACE",
    "TypeKind",
    "InvalidTypeError",
]


class TypeKind(Enum):
    """The kind of a single (non-union) type token.

    Attributes:
        KEYWORD: Reserved type name (string, int, self, ...)
        TEMPLATE: Generic parameter name visible in the context (T, K)
        ARRAY: Element type followed by []
        GENERIC: Generic instantiation or array/object shape (array<K, V>)
        CALLABLE: Callable signature or parenthesized expression
        LITERAL: Quoted literal string
        CLASS: Class reference, relative or fully-qualified
    """

    KEYWORD = auto()
    TEMPLATE = auto()
    ARRAY = auto()
    GENERIC = auto()
    CALLABLE = auto()
    LITERAL = auto()
    CLASS = auto()


class InvalidTypeError(TypeError):
    """A non-string value was passed where a type string was expected."""

    def __init__(self, value: Any):
        self.value = value
        super().__init__(
            f"A type should be represented by a string, received: {value!r}"
        )
