#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for Configuration Sources
"""

import pytest

from orbitools import ConfigSourceError
from orbitools.spacing import JsonConfigFile, StaticGlobalSettings, load_json_file
from orbitools.spacing.sources import (
    dig,
    read_json_file,
    theme_default_spacings_enabled,
    theme_spacing_sizes,
)


class TestReadJsonFile:
    """Test JSON file reading"""

    def test_reads_object(self, write_json):
        path = write_json("a.json", {"a": 1})
        assert read_json_file(path) == {"a": 1}

    def test_missing_file_raises(self, temp_dir):
        with pytest.raises(ConfigSourceError) as exc_info:
            read_json_file(temp_dir / "missing.json")
        assert "file not found" in str(exc_info.value)

    def test_invalid_json_raises(self, temp_dir):
        path = temp_dir / "bad.json"
        path.write_text("{oops", encoding="utf-8")
        with pytest.raises(ConfigSourceError) as exc_info:
            read_json_file(path)
        assert "invalid JSON" in str(exc_info.value)

    def test_non_object_raises(self, write_json):
        path = write_json("list.json", [1, 2])
        with pytest.raises(ConfigSourceError):
            read_json_file(path)

    def test_load_returns_none_instead_of_raising(self, temp_dir):
        assert load_json_file(temp_dir / "missing.json") is None
        assert load_json_file(None) is None


class TestJsonConfigFile:
    """Test the config file wrapper"""

    def test_get_nested(self, write_json):
        config = JsonConfigFile(write_json("c.json", {"settings": {"breakpoints": [1]}}))
        assert config.exists()
        assert config.get("settings", "breakpoints") == [1]
        assert config.get("settings", "missing") is None

    def test_reread_on_access(self, write_json):
        path = write_json("c.json", {"v": 1})
        config = JsonConfigFile(path)
        assert config.get("v") == 1
        write_json("c.json", {"v": 2})
        assert config.get("v") == 2

    def test_no_path(self):
        config = JsonConfigFile(None)
        assert not config.exists()
        assert config.mtime() is None
        assert config.data() is None
        with pytest.raises(ConfigSourceError):
            config.read()


class TestGlobalSettings:
    """Test theme spacing lookups through global settings"""

    def test_dig_stops_at_missing_level(self):
        assert dig({"a": {"b": 1}}, "a", "b") == 1
        assert dig({"a": 1}, "a", "b") is None
        assert dig(None, "a") is None

    def test_no_spacing_block(self):
        assert theme_spacing_sizes(StaticGlobalSettings({})) is None
        assert theme_default_spacings_enabled(StaticGlobalSettings({})) is False

    def test_spacing_sizes_must_be_origin_mapping(self):
        provider = StaticGlobalSettings({"spacing": {"spacingSizes": [{"slug": "x"}]}})
        assert theme_spacing_sizes(provider) is None

    def test_empty_theme_origin_uses_default_origin(self):
        provider = StaticGlobalSettings({"spacing": {"spacingSizes": {"theme": [], "default": [1]}}})
        assert theme_spacing_sizes(provider) == [1]
