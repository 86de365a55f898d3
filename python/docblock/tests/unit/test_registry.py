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
"""Unit tests for type registries.

Tests cover:
- In-memory registries (empty, static, callable, caching)
- The create_registry factory
- Declaration scanning and SourceTypeRegistry
"""

import logging

import pytest

from docblock.registry import (
    CachingTypeRegistry,
    CallableTypeRegistry,
    EmptyTypeRegistry,
    SourceTypeRegistry,
    StaticTypeRegistry,
    create_registry,
    scan_declarations,
)


# ===========================================================================
# In-Memory Registries
# ===========================================================================


class TestEmptyTypeRegistry:
    def test_knows_nothing(self):
        registry = EmptyTypeRegistry()
        assert not registry.exists("Foo")
        assert not registry.exists("DateTime")


class TestStaticTypeRegistry:
    """Tests for StaticTypeRegistry."""

    def test_exists(self):
        registry = StaticTypeRegistry(["DateTime", "App\\Models\\User"])
        assert registry.exists("DateTime")
        assert registry.exists("App\\Models\\User")
        assert not registry.exists("User")

    def test_leading_separator_is_ignored(self):
        registry = StaticTypeRegistry(["\\App\\Models\\User"])
        assert registry.exists("App\\Models\\User")
        assert registry.exists("\\App\\Models\\User")

    def test_case_insensitive_by_default(self):
        registry = StaticTypeRegistry(["DateTime"])
        assert registry.exists("datetime")
        assert registry.exists("DATETIME")

    def test_case_sensitive(self):
        registry = StaticTypeRegistry(["DateTime"], case_sensitive=True)
        assert registry.exists("DateTime")
        assert not registry.exists("datetime")

    def test_register(self):
        registry = StaticTypeRegistry()
        assert len(registry) == 0
        registry.register("Foo")
        assert "Foo" in registry
        assert len(registry) == 1

    def test_contains_non_string(self):
        assert 123 not in StaticTypeRegistry(["123"])


class TestCallableTypeRegistry:
    def test_delegates_to_probe(self):
        registry = CallableTypeRegistry(lambda name: name.startswith("Date"))
        assert registry.exists("DateTime")
        assert not registry.exists("Foo")

    def test_result_is_bool(self):
        registry = CallableTypeRegistry(lambda name: 1 if name else None)
        assert registry.exists("Foo") is True
        assert registry.exists("") is False


class TestCachingTypeRegistry:
    """Tests for CachingTypeRegistry."""

    @pytest.fixture
    def calls(self):
        return []

    @pytest.fixture
    def registry(self, calls):
        def probe(name):
            calls.append(name)
            return name == "DateTime"

        return CachingTypeRegistry(CallableTypeRegistry(probe))

    def test_answers_are_cached(self, registry, calls):
        assert registry.exists("DateTime")
        assert registry.exists("DateTime")
        assert not registry.exists("Foo")
        assert not registry.exists("Foo")
        assert calls == ["DateTime", "Foo"]

    def test_clear(self, registry, calls):
        registry.exists("Foo")
        registry.clear()
        registry.exists("Foo")
        assert calls == ["Foo", "Foo"]

    def test_errors_are_not_cached(self):
        attempts = []

        def probe(name):
            attempts.append(name)
            raise LookupError(name)

        registry = CachingTypeRegistry(CallableTypeRegistry(probe))
        for _ in range(2):
            with pytest.raises(LookupError):
                registry.exists("Foo")
        assert attempts == ["Foo", "Foo"]


class TestCreateRegistry:
    def test_default_is_empty(self):
        assert isinstance(create_registry(), EmptyTypeRegistry)

    def test_names(self):
        registry = create_registry(names=["Foo"])
        assert isinstance(registry, StaticTypeRegistry)
        assert registry.exists("Foo")

    def test_probe_takes_precedence(self):
        registry = create_registry(names=["Foo"], probe=lambda name: False)
        assert isinstance(registry, CallableTypeRegistry)
        assert not registry.exists("Foo")

    def test_cache(self):
        registry = create_registry(names=["Foo"], cache=True)
        assert isinstance(registry, CachingTypeRegistry)
        assert isinstance(registry.inner, StaticTypeRegistry)


# ===========================================================================
# Source Scanning
# ===========================================================================


MODELS_SOURCE = r"""<?php

namespace App\Models;

use Illuminate\Database\Eloquent\Model;

abstract class BaseModel extends Model
{
}

final class Kunjungan extends BaseModel
{
    public function pasien()
    {
        return $this->belongsTo(Pasien::class);
    }
}

interface HasOwner {}

trait Auditable {}

enum Status: string {}
"""


class TestScanDeclarations:
    """Tests for scan_declarations."""

    def test_declarations_are_qualified(self):
        assert scan_declarations(MODELS_SOURCE) == [
            "App\\Models\\BaseModel",
            "App\\Models\\Kunjungan",
            "App\\Models\\HasOwner",
            "App\\Models\\Auditable",
            "App\\Models\\Status",
        ]

    def test_global_declarations(self):
        assert scan_declarations("<?php\nclass Foo {}\n") == ["Foo"]

    def test_multiple_namespaces(self):
        source = r"""<?php
namespace App\A;
class One {}
namespace App\B;
readonly class Two {}
"""
        assert scan_declarations(source) == ["App\\A\\One", "App\\B\\Two"]

    def test_class_constants_are_not_declarations(self):
        source = "<?php\nreturn $this->hasOne(RiwayatMedis::class);\n$x = new class {};\n"
        assert scan_declarations(source) == []


class TestSourceTypeRegistry:
    """Tests for SourceTypeRegistry."""

    @pytest.fixture
    def project(self, tmp_path):
        models = tmp_path / "app" / "Models"
        models.mkdir(parents=True)
        (models / "Kunjungan.php").write_text(MODELS_SOURCE)
        (models / "Employee.php").write_text(
            "<?php\nnamespace App\\Models;\n\nclass Employee extends Model {}\n"
        )
        (models / "README.md").write_text("class NotCode\n")
        return tmp_path

    def test_scans_directories(self, project):
        registry = SourceTypeRegistry([project])
        assert registry.exists("App\\Models\\Employee")
        assert registry.exists("App\\Models\\Kunjungan")
        assert not registry.exists("NotCode")
        assert len(registry.scanned_files) == 2

    def test_single_file(self, project):
        registry = SourceTypeRegistry([project / "app" / "Models" / "Employee.php"])
        assert registry.exists("app\\models\\employee")
        assert not registry.exists("App\\Models\\Kunjungan")

    def test_missing_path_is_logged(self, tmp_path, caplog):
        with caplog.at_level(logging.WARNING, logger="docblock.registry.source"):
            registry = SourceTypeRegistry([tmp_path / "missing"])
        assert len(registry) == 0
        assert "does not exist" in caplog.text

    def test_unreadable_file_is_skipped(self, tmp_path, caplog):
        registry = SourceTypeRegistry()
        with caplog.at_level(logging.WARNING, logger="docblock.registry.source"):
            assert registry.add_file(tmp_path / "missing.php") == 0
        assert "unreadable" in caplog.text
        assert registry.scanned_files == []

    def test_add_file_records_path(self, tmp_path):
        """Files read through add_file are listed, whatever their name."""
        odd = tmp_path / "<string>"
        odd.write_text("<?php\nclass Odd {}\n")
        registry = SourceTypeRegistry()
        assert registry.add_file(odd) == 1
        assert registry.scanned_files == [odd]
        assert registry.exists("Odd")

    def test_add_source(self):
        registry = SourceTypeRegistry()
        assert registry.add_source(MODELS_SOURCE) == 5
        assert registry.exists("App\\Models\\Status")
        assert registry.scanned_files == []
