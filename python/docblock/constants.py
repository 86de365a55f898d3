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
"""Operators of the docblock type syntax.

Downstream renderers split on these, so their exact spelling is part of
the output format:

- OPERATOR_OR: separates alternatives of a union type
- OPERATOR_ARRAY: suffix marking an array of the preceding type
- OPERATOR_NAMESPACE: namespace separator of fully-qualified names
"""

OPERATOR_OR = "|"
OPERATOR_ARRAY = "[]"
OPERATOR_NAMESPACE = "\\"
