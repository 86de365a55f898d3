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
"""Resolution context for docblock types.

The Context describes where a type string was written: the enclosing
namespace, the aliases imported at that point, and the generic parameter
names in scope. It is immutable, so a single context can be shared by
many collections. The alias map is kept in an ``immutables.Map`` so
callers holding a reference to it cannot change it either.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Optional, Tuple

from immutables import Map as ImmutableMap

from ..constants import OPERATOR_NAMESPACE


# Namespace names meaning "no namespace"
GLOBAL_NAMESPACES = frozenset({"global", "default"})


@dataclass(frozen=True)
class Context:
    """Immutable namespace context.

    The constructor stores its arguments as given. Use ``Context.create``
    to normalize raw namespace and alias values.

    Attributes:
        namespace: Enclosing namespace, "" for the global namespace
        namespace_aliases: Alias -> namespace or class prefix
        generics: Generic parameter names in scope, in declaration order
    """

    namespace: str = ""
    namespace_aliases: Mapping[str, str] = field(default_factory=ImmutableMap)
    generics: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.namespace_aliases, ImmutableMap):
            object.__setattr__(
                self, "namespace_aliases", ImmutableMap(self.namespace_aliases)
            )
        object.__setattr__(self, "generics", tuple(self.generics))

    @classmethod
    def create(
        cls,
        namespace: str = "",
        namespace_aliases: Optional[Mapping[str, str]] = None,
        generics: Iterable[str] = (),
    ) -> Context:
        """Create a context from raw declarations.

        - "global" and "default" mean the global namespace
        - separators around the namespace are trimmed
        - alias targets are made absolute (exactly one leading separator)

        Args:
            namespace: Namespace as declared
            namespace_aliases: Alias -> imported name, as declared
            generics: Generic parameter names

        Returns:
            The normalized Context
        """
        namespace = namespace.strip(OPERATOR_NAMESPACE)
        if namespace in GLOBAL_NAMESPACES:
            namespace = ""

        aliases = {
            alias: OPERATOR_NAMESPACE + target.strip(OPERATOR_NAMESPACE)
            for alias, target in (namespace_aliases or {}).items()
        }
        return cls(
            namespace=namespace,
            namespace_aliases=ImmutableMap(aliases),
            generics=tuple(generics),
        )

    def get_namespace(self) -> str:
        """Return the enclosing namespace ("" when global)."""
        return self.namespace

    def get_namespace_aliases(self) -> Mapping[str, str]:
        """Return the alias map."""
        return self.namespace_aliases

    def get_generics(self) -> Tuple[str, ...]:
        """Return the generic parameter names in scope."""
        return self.generics

    def with_namespace_alias(self, alias: str, target: str) -> Context:
        """Create a new context with an additional alias.

        Args:
            alias: Short name
            target: Namespace or class the alias stands for

        Returns:
            A new Context with the alias added (or replaced)
        """
        return Context(
            namespace=self.namespace,
            namespace_aliases=self.namespace_aliases.set(alias, target),
            generics=self.generics,
        )

    def with_generics(self, *names: str) -> Context:
        """Create a new context with extra generic parameter names appended."""
        return Context(
            namespace=self.namespace,
            namespace_aliases=self.namespace_aliases,
            generics=self.generics + tuple(names),
        )
