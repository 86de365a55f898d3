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
"""Type registry populated from source files.

Scans source files for namespace and type declarations and registers
the fully-qualified name of every class, interface, trait and enum
found. Files are read as text; nothing is executed or loaded.
"""

from __future__ import annotations

import bisect
import logging
import re
from pathlib import Path
from typing import Iterable, Iterator, List, Union

from ..constants import OPERATOR_NAMESPACE
from .base import StaticTypeRegistry

logger = logging.getLogger(__name__)


NAMESPACE_PATTERN = re.compile(r"^\s*namespace\s+([\w\\]+)\s*[;{]", re.MULTILINE)
DECLARATION_PATTERN = re.compile(
    r"^\s*(?:(?:abstract|final|readonly)\s+)*(class|interface|trait|enum)\s+(\w+)",
    re.MULTILINE,
)


def scan_declarations(source: str) -> List[str]:
    """Extract fully-qualified type declarations from source.

    A declaration belongs to the closest namespace declared before it.
    Declarations before any namespace are global.

    Args:
        source: Source code

    Returns:
        Fully-qualified names without a leading separator, in source order
    """
    namespace_starts: List[int] = []
    namespaces: List[str] = []
    for match in NAMESPACE_PATTERN.finditer(source):
        namespace_starts.append(match.start())
        namespaces.append(match.group(1).strip(OPERATOR_NAMESPACE))

    names: List[str] = []
    for match in DECLARATION_PATTERN.finditer(source):
        idx = bisect.bisect_right(namespace_starts, match.start()) - 1
        namespace = namespaces[idx] if idx >= 0 else ""
        name = match.group(2)
        if namespace:
            name = namespace + OPERATOR_NAMESPACE + name
        names.append(name)

    return names


def _iter_source_files(paths: Iterable[Union[str, Path]], suffix: str) -> Iterator[Path]:
    for path in paths:
        path = Path(path)
        if path.is_dir():
            yield from sorted(p for p in path.rglob(f"*{suffix}") if p.is_file())
        elif path.is_file():
            yield path
        else:
            logger.warning(f"Source path does not exist: {path}")


class SourceTypeRegistry(StaticTypeRegistry):
    """Registry of the types declared in a set of source files.

    Example:
        >>> registry = SourceTypeRegistry(["app/Models"])
        >>> registry.exists("App\\\\Models\\\\Employee")
        True
    """

    def __init__(
        self,
        paths: Iterable[Union[str, Path]] = (),
        suffix: str = ".php",
        case_sensitive: bool = False,
    ):
        """Initialize by scanning source files.

        Args:
            paths: Files or directories (searched recursively)
            suffix: File suffix to scan in directories
            case_sensitive: Whether lookups distinguish case
        """
        super().__init__(case_sensitive=case_sensitive)
        self._suffix = suffix
        self.scanned_files: List[Path] = []
        for path in _iter_source_files(paths, suffix):
            self.add_file(path)

    def add_file(self, path: Union[str, Path]) -> int:
        """Scan one file and register its declarations.

        Unreadable files are logged and skipped.

        Returns:
            Number of declarations registered
        """
        path = Path(path)
        try:
            source = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            logger.warning(f"Skipping unreadable source file {path}: {e}")
            return 0
        count = self._register_declarations(source)
        self.scanned_files.append(path)
        logger.debug(f"Registered {count} declarations from {path}")
        return count

    def add_source(self, source: str) -> int:
        """Register the declarations found in a source string."""
        count = self._register_declarations(source)
        logger.debug(f"Registered {count} declarations from source string")
        return count

    def _register_declarations(self, source: str) -> int:
        names = scan_declarations(source)
        for name in names:
            self.register(name)
        return len(names)
