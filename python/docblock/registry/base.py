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
"""Base class for type registries.

A type registry answers one question for the resolver: is a type with
this exact name already known? A bare name that is known resolves as
absolute instead of being placed in the ambient namespace.

Registries must not have side effects (no loading, no registration)
when probed.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, Dict, Iterable, Optional, Set

from ..constants import OPERATOR_NAMESPACE


class TypeRegistry(ABC):
    """Abstract base class for type registries.

    Subclasses implement the lookup:
    - EmptyTypeRegistry: nothing is known
    - StaticTypeRegistry: a fixed set of names
    - CallableTypeRegistry: a plain name -> bool function
    - CachingTypeRegistry: memoizes another registry
    """

    @abstractmethod
    def exists(self, name: str) -> bool:
        """Check if a type with this name is known.

        Args:
            name: Type name as written, without a leading separator

        Returns:
            True if the type exists
        """
        pass


class EmptyTypeRegistry(TypeRegistry):
    """Registry that knows no types.

    Every relative name is resolved against the context.
    """

    def exists(self, name: str) -> bool:
        return False


class StaticTypeRegistry(TypeRegistry):
    """Registry over a fixed set of fully-qualified names.

    A leading namespace separator is ignored on both registration and
    lookup. Lookups are case-insensitive by default, matching how class
    names are looked up in the documented language.
    """

    def __init__(
        self,
        names: Optional[Iterable[str]] = None,
        case_sensitive: bool = False,
    ):
        """Initialize with known names.

        Args:
            names: Initial set of known type names
            case_sensitive: Whether lookups distinguish case
        """
        self._case_sensitive = case_sensitive
        self._names: Set[str] = set()
        for name in names or ():
            self.register(name)

    def _key(self, name: str) -> str:
        key = name.lstrip(OPERATOR_NAMESPACE)
        return key if self._case_sensitive else key.lower()

    def register(self, name: str) -> None:
        """Add a known type name."""
        self._names.add(self._key(name))

    def exists(self, name: str) -> bool:
        return self._key(name) in self._names

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.exists(name)

    def __len__(self) -> int:
        return len(self._names)


class CallableTypeRegistry(TypeRegistry):
    """Registry backed by a probe function.

    Example:
        >>> registry = CallableTypeRegistry(lambda name: name == "DateTime")
        >>> registry.exists("DateTime")
        True
    """

    def __init__(self, probe: Callable[[str], bool]):
        self._probe = probe

    def exists(self, name: str) -> bool:
        return bool(self._probe(name))


class CachingTypeRegistry(TypeRegistry):
    """Registry that memoizes the answers of another registry.

    Exceptions raised by the wrapped registry are not cached.
    """

    def __init__(self, inner: TypeRegistry):
        self._inner = inner
        self._cache: Dict[str, bool] = {}

    @property
    def inner(self) -> TypeRegistry:
        return self._inner

    def exists(self, name: str) -> bool:
        if name in self._cache:
            return self._cache[name]
        result = self._inner.exists(name)
        self._cache[name] = result
        return result

    def clear(self) -> None:
        """Forget all cached answers."""
        self._cache.clear()


def create_registry(
    names: Optional[Iterable[str]] = None,
    probe: Optional[Callable[[str], bool]] = None,
    cache: bool = False,
) -> TypeRegistry:
    """Factory function to create a type registry.

    Args:
        names: Known type names (StaticTypeRegistry)
        probe: Probe function (CallableTypeRegistry); takes precedence
            over names when both are given
        cache: Whether to memoize answers

    Returns:
        Configured TypeRegistry
    """
    registry: TypeRegistry
    if probe is not None:
        registry = CallableTypeRegistry(probe)
    elif names is not None:
        registry = StaticTypeRegistry(names)
    else:
        registry = EmptyTypeRegistry()

    if cache:
        registry = CachingTypeRegistry(registry)
    return registry
