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
"""Configuration for type resolution."""

from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class ResolverConfig:
    """Options controlling how type names are resolved.

    Attributes:
        probe_errors_fail_open: When the type registry raises while probing
            a name, log the failure and treat the name as unknown. When
            False the registry's exception propagates to the caller.

        cache_probe_results: Memoize registry answers per expander. Useful
            when the registry scans files or calls out to a slow probe.

    Example:
        >>> config = ResolverConfig(cache_probe_results=True)
        >>> collection = TypeCollection(["Foo"], config=config)
    """

    probe_errors_fail_open: bool = True
    cache_probe_results: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ResolverConfig:
        """Create from dictionary.

        Raises:
            ValueError: If the dictionary has unknown keys
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(
                f"Unknown resolver options: {', '.join(sorted(unknown))}"
            )
        return cls(**data)


DEFAULT_CONFIG = ResolverConfig()
