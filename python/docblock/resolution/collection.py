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
"""Ordered collection of resolved docblock types.

A TypeCollection is built from raw type strings as found in docblocks.
Every string is split on the union operator, each part is expanded to
its fully-qualified form, and the non-empty results are kept in order.
The collection renders back to a single union string.

Example:
    >>> ctx = Context(namespace="App", namespace_aliases={"M": "App\\\\Models"})
    >>> str(TypeCollection(["string|M\\\\User[]", "null"], ctx))
    'string|App\\\\Models\\\\User[]|null'

Instances are not synchronized; callers serialize ``add`` calls on a
shared collection.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Optional, Tuple, Union, overload

from ..config import ResolverConfig
from ..context.context import Context
from ..registry.base import TypeRegistry
from .base import OPERATOR_OR, InvalidTypeError, TypeKind
from .expander import TypeExpander
from .splitter import split_union


class TypeCollection:
    """Resolved types of one docblock type expression.

    Attributes:
        context: The namespace context types are resolved against
        generics: Effective generic names (context generics, then extras)
    """

    def __init__(
        self,
        types: Iterable[str] = (),
        context: Optional[Context] = None,
        generics: Optional[Iterable[str]] = None,
        registry: Optional[TypeRegistry] = None,
        config: Optional[ResolverConfig] = None,
    ):
        """Register the context and add the given types.

        Args:
            types: Raw type strings, each possibly a union
            context: The current invoking location (empty if None)
            generics: Generic names in addition to the context's
            registry: Type existence probe
            config: Resolver options

        Raises:
            TypeError: If ``types`` is a single string instead of a list
            InvalidTypeError: If any element of ``types`` is not a string
        """
        if isinstance(types, str):
            raise TypeError(
                "types should be a sequence of type strings, not a single string"
            )

        self._context = context if context is not None else Context()
        self._generics: Tuple[str, ...] = self._context.get_generics() + tuple(
            generics or ()
        )
        self._expander = TypeExpander(
            self._context, self._generics, registry=registry, config=config
        )
        self._items: List[str] = []

        for type_str in types:
            self.add(type_str)

    @property
    def context(self) -> Context:
        return self._context

    @property
    def generics(self) -> Tuple[str, ...]:
        return self._generics

    @property
    def expander(self) -> TypeExpander:
        return self._expander

    @property
    def items(self) -> Tuple[str, ...]:
        """The resolved types, in insertion order."""
        return tuple(self._items)

    def get_context(self) -> Context:
        """Return the current invoking location."""
        return self._context

    def get_array_copy(self) -> List[str]:
        """Return a list copy of the resolved types."""
        return list(self._items)

    def add(self, type_str: str) -> None:
        """Add a type, expanding it if it contains a relative namespace.

        Unions are split and every alternative is added separately.
        Alternatives that are blank after trimming are dropped.

        Args:
            type_str: A raw type, e.g. ``Foo|Bar[]|null``

        Raises:
            InvalidTypeError: If ``type_str`` is not a string

        Nothing is added if any alternative fails to resolve.
        """
        if not isinstance(type_str, str):
            raise InvalidTypeError(type_str)

        expanded = [e for e in map(self.expand, self.explode(type_str)) if e]
        self._items.extend(expanded)

    def explode(self, type_str: str) -> List[str]:
        """Split a union of types into single types."""
        return split_union(type_str)

    def expand(self, type_str: str) -> str:
        """Return the fully-qualified form of a single type."""
        return self._expander.expand(type_str)

    def kinds(self) -> List[Tuple[str, TypeKind]]:
        """Return each resolved type together with its kind."""
        return [(item, self._expander.classify(item)) for item in self._items]

    def __str__(self) -> str:
        return OPERATOR_OR.join(self._items)

    def __repr__(self) -> str:
        return f"TypeCollection({self._items!r})"

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __contains__(self, item: object) -> bool:
        return item in self._items

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> List[str]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[str, List[str]]:
        return self._items[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypeCollection):
            return self._items == other._items
        if isinstance(other, (list, tuple)):
            return self._items == list(other)
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
