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
"""Unit tests for ResolverConfig."""

import dataclasses

import pytest

from docblock.config import DEFAULT_CONFIG, ResolverConfig


class TestResolverConfig:
    """Tests for ResolverConfig."""

    def test_defaults(self):
        config = ResolverConfig()
        assert config.probe_errors_fail_open is True
        assert config.cache_probe_results is False
        assert DEFAULT_CONFIG == config

    def test_to_dict(self):
        config = ResolverConfig(cache_probe_results=True)
        assert config.to_dict() == {
            "probe_errors_fail_open": True,
            "cache_probe_results": True,
        }

    def test_from_dict(self):
        config = ResolverConfig.from_dict({"probe_errors_fail_open": False})
        assert config.probe_errors_fail_open is False
        assert config.cache_probe_results is False

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="Unknown resolver options: strict"):
            ResolverConfig.from_dict({"strict": True})

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_CONFIG.cache_probe_results = True
