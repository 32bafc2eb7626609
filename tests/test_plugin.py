#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Integration Tests for the Orbitools Composition Root
"""

import pytest

from config.settings import Settings
from orbitools.adminkit import User
from orbitools.plugin import Orbitools
from orbitools.spacing import StaticGlobalSettings


@pytest.fixture
def theme_dir(write_json, temp_dir):
    write_json("theme/config/orbitools.json", {
        "settings": {"breakpoints": [{"slug": "tablet", "name": "Tablet", "value": "48rem"}]},
        "modules": {"typographyPresets": {"items": {
            "display": {"properties": {"fontSize": "3rem"}},
        }}},
    })
    return temp_dir / "theme"


@pytest.fixture
def plugin_settings(defaults_file, theme_dir):
    return Settings(defaults_file=defaults_file, theme_dir=theme_dir, log_file=None)


@pytest.fixture
def plugin(plugin_settings):
    return Orbitools(plugin_settings, global_settings=StaticGlobalSettings({}))


@pytest.fixture
def admin():
    return User(user_id="1", capabilities={"manage_options"})


def save(plugin, admin, data):
    request = {"adminkit_nonce": plugin.admin_page.create_nonce(), "settings": data}
    return plugin.admin_page.handle_save_request(request, admin)


class TestModules:
    """Test module toggles"""

    def test_modules_enabled_by_default(self, plugin):
        assert plugin.enabled_modules() == ["dimensions_controls", "flex_layout_controls", "typography_presets"]

    def test_disabled_module_saved_from_admin(self, plugin, admin):
        assert save(plugin, admin, {"typography_presets_enabled": ""}).success
        assert not plugin.is_module_enabled("typography_presets")
        assert plugin.preset_style_tag() == ""

    def test_disabled_dimensions_give_empty_block_config(self, plugin, admin):
        save(plugin, admin, {"dimensions_controls_enabled": "0"})
        supports = {"orbitools": {"dimensions": {"gap": True}}}
        assert plugin.get_block_config(supports).spacings == []

    def test_save_queues_notice(self, plugin, admin):
        save(plugin, admin, {})
        assert [n.message for n in plugin.admin_page.notices.pop_notices()] == ["Settings saved successfully"]


class TestOutput:
    """Test generated output"""

    def test_head_css(self, plugin):
        css = plugin.head_css()
        assert '<style id="orbitools-gaps-css">' in css
        assert ".has-gap.tablet\\:has-gap--md" in css
        assert ".has-type-preset-display {" in css

    def test_preset_css_toggle(self, plugin, admin):
        save(plugin, admin, {"typography_presets_enabled": "1", "typography_output_preset_css": ""})
        assert plugin.is_module_enabled("typography_presets")
        assert ".has-type-preset-display" not in plugin.head_css()

    def test_editor_settings(self, plugin):
        data = plugin.editor_settings()
        assert data["spacings"][0]["slug"] == "0"
        assert data["breakpoints"] == [{"slug": "tablet", "name": "Tablet", "value": "48rem"}]
        assert list(data["typographyPresets"]) == ["display"]
        assert data["showGroupsInDropdown"] is False

    def test_block_config(self, plugin):
        supports = {"orbitools": {"dimensions": {"gap": True, "breakpoints": True}}}
        config = plugin.get_block_config(supports)
        assert [b.slug for b in config.breakpoints] == ["tablet"]


class TestLifecycle:
    """Test theme switch and change detection"""

    def test_theme_switch_reloads(self, plugin, write_json, temp_dir):
        plugin.head_css()
        write_json("other-theme/config/orbitools.json", {
            "settings": {"breakpoints": [{"slug": "wide", "name": "Wide", "value": "90rem"}]},
        })
        plugin.on_theme_switch(temp_dir / "other-theme")
        assert [b.slug for b in plugin.resolver.resolve_breakpoints()] == ["wide"]
        assert not plugin.presets.has_presets()
        assert ".has-type-preset" not in plugin.head_css()

    def test_on_request_outside_debug_keeps_cache(self, plugin, write_json):
        plugin.resolver.resolve_breakpoints()
        write_json("theme/config/orbitools.json", {"settings": {}})
        plugin.on_request()
        assert plugin.resolver.resolve_breakpoints()[0].slug == "tablet"

    def test_on_request_in_debug_picks_up_edits(self, defaults_file, theme_dir, write_json):
        settings = Settings(defaults_file=defaults_file, theme_dir=theme_dir, log_file=None, debug=True)
        plugin = Orbitools(settings)
        plugin.resolver.resolve_breakpoints()
        write_json("theme/config/orbitools.json", {"settings": {}})
        plugin.on_request()
        assert plugin.resolver.resolve_breakpoints()[0].slug == "sm"
