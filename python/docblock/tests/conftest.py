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
"""Pytest configuration for docblock tests.

Puts the ``python`` source directory on the path so the tests run from a
checkout without installing the package, and provides shared contexts.
"""

import sys
from pathlib import Path

import pytest

python_dir = Path(__file__).resolve().parents[2]
if str(python_dir) not in sys.path:
    sys.path.insert(0, str(python_dir))

from docblock.context import Context  # noqa: E402


# Header of a typical model file, as found in application code
EMPLOYEE_SOURCE = r"""<?php

namespace App\Models;

use Illuminate\Database\Eloquent\Factories\HasFactory;
use Illuminate\Database\Eloquent\Model;

class Employee extends Model
{
    use HasFactory;
    protected $table = 'employees';

    public function user()
    {
        return $this->belongsTo(User::class);
    }
}
"""


@pytest.fixture
def empty_context() -> Context:
    """Context for the global namespace with no imports."""
    return Context()


@pytest.fixture
def models_context() -> Context:
    """Context inside App\\Models with a few imports."""
    return Context(
        namespace="App\\Models",
        namespace_aliases={
            "Model": "\\Illuminate\\Database\\Eloquent\\Model",
            "Support": "Illuminate\\Support",
            "Status": "App\\Enums\\Status",
        },
        generics=("TModel",),
    )


@pytest.fixture
def employee_source() -> str:
    return EMPLOYEE_SOURCE
