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
"""Expansion of single docblock types to fully-qualified form.

A type token (one alternative of a union) is resolved by the first
matching rule:

1. Blank                            -> ""
2. Generic or shape (array<K, V>)   -> unchanged
3. Callable signature (fn(): void)  -> unchanged
4. Parenthesized expression         -> unchanged
5. Quoted literal ('abc')           -> unchanged
6. Array suffix (Foo[])             -> expand(Foo) + []
7. Relative class reference         -> resolved against the context
8. Anything else (absolute names, keywords, generic parameters)
                                    -> unchanged

Relative class references (rule 7) resolve in this order:

a. A name the type registry already knows is made absolute as written.
b. If the first segment is not an alias, the name is placed in the
   ambient namespace.
c. ``Alias::CONSTANT`` replaces the alias and keeps the ``::`` suffix.
d. ``Alias\\Rest`` replaces the first segment with the alias target.

The registry check (a) runs before alias expansion, so a known global
type whose name shadows an alias resolves to the global type.
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, Optional, Tuple

from ..config import DEFAULT_CONFIG, ResolverConfig
from ..context.context import Context
from ..registry.base import CachingTypeRegistry, EmptyTypeRegistry, TypeRegistry
from .base import OPERATOR_ARRAY, OPERATOR_NAMESPACE, TypeKind
from .keywords import is_keyword

logger = logging.getLogger(__name__)


# An empty [] pair is an array suffix, never a shape
GENERIC_OR_SHAPE_PATTERN = re.compile(r"^[\w-]+(<.+>|\[(?!\]).+\]|\{.+\})$", re.ASCII)
CALLABLE_PATTERN = re.compile(r"\(.*?(?=:)")
LITERAL_QUOTES = ('"', "'")
STATIC_MEMBER = "::"
# ASCII blanks and NUL; form feed and Unicode spaces are kept
TRIM_CHARS = " \t\n\r\0\x0b"


class TypeExpander:
    """Resolves single type tokens against a namespace context.

    Example:
        >>> ctx = Context(namespace="App\\\\Models")
        >>> TypeExpander(ctx).expand("User[]")
        '\\\\App\\\\Models\\\\User[]'
    """

    def __init__(
        self,
        context: Optional[Context] = None,
        generics: Optional[Iterable[str]] = None,
        registry: Optional[TypeRegistry] = None,
        config: Optional[ResolverConfig] = None,
    ):
        """Initialize the expander.

        Args:
            context: Namespace context (an empty Context if None)
            generics: Generic parameter names; defaults to the context's
            registry: Type existence probe (knows nothing if None)
            config: Resolver options
        """
        self._context = context if context is not None else Context()
        self._generics: Tuple[str, ...] = (
            tuple(generics) if generics is not None else self._context.get_generics()
        )
        self._config = config or DEFAULT_CONFIG

        registry = registry if registry is not None else EmptyTypeRegistry()
        if self._config.cache_probe_results and not isinstance(
            registry, CachingTypeRegistry
        ):
            registry = CachingTypeRegistry(registry)
        self._registry = registry

    @property
    def context(self) -> Context:
        return self._context

    @property
    def generics(self) -> Tuple[str, ...]:
        return self._generics

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def expand(self, type_str: str) -> str:
        """Return the fully-qualified form of a single type.

        Args:
            type_str: One alternative of a union, relative or absolute

        Returns:
            The resolved type, or "" if the input is blank
        """
        type_str = type_str.strip(TRIM_CHARS)
        if not type_str:
            return ""

        if GENERIC_OR_SHAPE_PATTERN.match(type_str):
            return type_str

        if CALLABLE_PATTERN.search(type_str):
            return type_str

        if type_str.startswith("("):
            return type_str

        if type_str.startswith(LITERAL_QUOTES):
            return type_str

        if self.is_array(type_str):
            return self.expand(type_str[: -len(OPERATOR_ARRAY)]) + OPERATOR_ARRAY

        if (
            self.is_relative(type_str)
            and not self.is_keyword(type_str)
            and not self.is_generic(type_str)
        ):
            return self._resolve_relative(type_str)

        return type_str

    def _resolve_relative(self, type_str: str) -> str:
        """Resolve a relative class reference (rule 7)."""
        if self.exists_as_type(type_str):
            return OPERATOR_NAMESPACE + type_str

        head, separator, rest = type_str.partition(OPERATOR_NAMESPACE)
        member_alias, has_member, _ = head.partition(STATIC_MEMBER)
        aliases = self._context.get_namespace_aliases()

        member_aliased = bool(has_member and member_alias) and member_alias in aliases
        if head not in aliases and not member_aliased:
            namespace = self._context.get_namespace()
            if namespace:
                namespace += OPERATOR_NAMESPACE
            resolved = OPERATOR_NAMESPACE + namespace + type_str
            logger.debug(f"Placed {type_str!r} in namespace: {resolved!r}")
            return resolved

        if member_aliased:
            # Alias::MEMBER keeps its suffix; segments are joined without separators
            parts = [aliases[member_alias]]
            if separator:
                parts.append(rest)
            parts.append(head[head.index(STATIC_MEMBER):])
            resolved = "".join(parts)
        else:
            resolved = aliases[head] + separator + rest

        logger.debug(f"Expanded alias in {type_str!r}: {resolved!r}")
        return resolved

    def classify(self, type_str: str) -> Optional[TypeKind]:
        """Classify a single type token.

        Uses the same precedence as ``expand``, so the kind reported for a
        token is the rule that decides how it resolves.

        Args:
            type_str: One alternative of a union

        Returns:
            The TypeKind, or None if the input is blank
        """
        type_str = type_str.strip(TRIM_CHARS)
        if not type_str:
            return None
        if GENERIC_OR_SHAPE_PATTERN.match(type_str):
            return TypeKind.GENERIC
        if CALLABLE_PATTERN.search(type_str) or type_str.startswith("("):
            return TypeKind.CALLABLE
        if type_str.startswith(LITERAL_QUOTES):
            return TypeKind.LITERAL
        if self.is_array(type_str):
            return TypeKind.ARRAY
        if self.is_keyword(type_str):
            return TypeKind.KEYWORD
        if self.is_generic(type_str):
            return TypeKind.TEMPLATE
        return TypeKind.CLASS

    def is_array(self, type_str: str) -> bool:
        """Check if the type ends with the array suffix."""
        return type_str.endswith(OPERATOR_ARRAY)

    def is_keyword(self, type_str: str) -> bool:
        """Check if the type is a reserved keyword (case-insensitive)."""
        return is_keyword(type_str)

    def is_relative(self, type_str: str) -> bool:
        """Check if the type lacks a leading namespace separator.

        Keywords always count as relative.
        """
        return not type_str.startswith(OPERATOR_NAMESPACE) or self.is_keyword(type_str)

    def is_generic(self, type_str: str) -> bool:
        """Check if the type is a generic parameter name (case-sensitive)."""
        return type_str in self._generics

    def exists_as_type(self, type_str: str) -> bool:
        """Probe the registry for a type with exactly this name.

        A failing probe is logged and treated as "unknown" unless
        ``probe_errors_fail_open`` is disabled, in which case the error
        propagates.
        """
        try:
            return self._registry.exists(type_str)
        except Exception as e:
            if not self._config.probe_errors_fail_open:
                raise
            logger.warning(
                f"Type registry probe failed for {type_str!r}, treating it as unknown: {e}"
            )
            return False
