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
"""Build a Context from the header of a source file.

Only the part of the file before the first type declaration is read, so
trait ``use`` statements inside class bodies are never mistaken for
imports.

Supported forms:
- namespace App\\Models;
- use Illuminate\\Database\\Eloquent\\Model;
- use Illuminate\\Support\\Collection as BaseCollection;
- use App\\Models\\{User, Post as Article};
- use App\\A, App\\B;
- @template T (also -covariant, -contravariant, psalm-/phpstan- prefixed)
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Tuple

from ..constants import OPERATOR_NAMESPACE
from ..registry.source import DECLARATION_PATTERN, NAMESPACE_PATTERN
from .context import Context

logger = logging.getLogger(__name__)


USE_PATTERN = re.compile(r"^\s*use\s+([^;]+);", re.MULTILINE)
AS_PATTERN = re.compile(r"\s+as\s+", re.IGNORECASE)
TEMPLATE_PATTERN = re.compile(
    r"@(?:phpstan-|psalm-)?template(?:-covariant|-contravariant)?\s+(\w+)"
)

# Imports of functions and constants do not introduce type aliases
NON_TYPE_IMPORTS = ("function ", "const ")


def _parse_use_item(item: str) -> Tuple[str, str]:
    """Split ``Foo\\Bar as Baz`` into (alias, imported name)."""
    parts = AS_PATTERN.split(item.strip(), maxsplit=1)
    name = parts[0].strip()
    if len(parts) == 2:
        alias = parts[1].strip()
    else:
        alias = name.rstrip(OPERATOR_NAMESPACE).rsplit(OPERATOR_NAMESPACE, 1)[-1]
    return alias, name


def parse_use_statement(body: str) -> List[Tuple[str, str]]:
    """Parse the body of one use statement.

    Args:
        body: Text between ``use`` and ``;``

    Returns:
        (alias, imported name) pairs; empty for function/const imports
    """
    body = body.strip()
    if body.lower().startswith(NON_TYPE_IMPORTS):
        return []

    if "{" in body:
        prefix, _, rest = body.partition("{")
        prefix = prefix.strip().rstrip(OPERATOR_NAMESPACE)
        items = [
            f"{prefix}{OPERATOR_NAMESPACE}{item.strip()}"
            for item in rest.rstrip("}").split(",")
            if item.strip() and not item.strip().lower().startswith(NON_TYPE_IMPORTS)
        ]
    else:
        items = [item for item in body.split(",") if item.strip()]

    return [_parse_use_item(item) for item in items]


def context_from_source(source: str) -> Context:
    """Build the context in effect for the first type declared in source.

    Args:
        source: Source code of one file

    Returns:
        A normalized Context (see ``Context.create``)
    """
    declaration = DECLARATION_PATTERN.search(source)
    header = source[: declaration.start()] if declaration else source

    namespace_match = NAMESPACE_PATTERN.search(header)
    namespace = namespace_match.group(1) if namespace_match else ""

    aliases: Dict[str, str] = {}
    for match in USE_PATTERN.finditer(header):
        for alias, name in parse_use_statement(match.group(1)):
            aliases[alias] = name

    generics = [m.group(1) for m in TEMPLATE_PATTERN.finditer(header)]

    logger.debug(
        f"Parsed context: namespace={namespace!r}, "
        f"{len(aliases)} aliases, generics={generics}"
    )
    return Context.create(namespace, aliases, generics)
