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
"""Union splitting for docblock type expressions."""

from __future__ import annotations

from typing import List

from .base import OPERATOR_OR


OPENING_BRACKETS = frozenset("<([{")
CLOSING_BRACKETS = frozenset(">)]}")


def split_union(type_str: str) -> List[str]:
    """Split a union type by |, respecting nested brackets.

    Only the nesting depth is tracked: any closer decrements it, whatever
    kind of bracket opened the region, and the depth is not clamped at
    zero. This keeps ``array{a: int)|string`` splittable instead of
    failing on the mismatch. NOTE: an unbalanced closer drives the depth
    negative, after which later | operators are kept inside the part.

    The last part is always emitted, so a trailing | yields an empty
    trailing part and an empty input yields ``[""]``.

    Args:
        type_str: The raw type or union of types

    Returns:
        The parts, in order, untrimmed
    """
    parts: List[str] = []
    current: List[str] = []
    depth = 0

    for c in type_str:
        if c == OPERATOR_OR and depth == 0:
            parts.append("".join(current))
            current = []
            continue

        if c in OPENING_BRACKETS:
            depth += 1
        elif c in CLOSING_BRACKETS:
            depth -= 1
        current.append(c)

    parts.append("".join(current))
    return parts
