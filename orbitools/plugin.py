"""
Orbitools Plugin

Wires settings, caches, the spacing resolver, generated CSS and the admin
page together. Host integrations create one Orbitools instance and call
into it from their request hooks.

Usage:
    from config.settings import settings
    plugin = Orbitools(settings, global_settings=StaticGlobalSettings(theme_json))
    plugin.head_css()
    plugin.get_block_config(block_supports)
    plugin.admin_page.handle_save_request(request, user)
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from config.constants import MODULE_SLUGS, PLUGIN_SLUG
from config.logging_config import enable_debug, setup_logger

from .adminkit import AdminPage, NonceManager, OptionStore
from .cache import MemoryCache, create_object_cache, create_transients
from .cache.base import CacheInterface
from .spacing import BlockConfig, GapsCSSGenerator, SpacingConfigResolver
from .spacing.sources import GlobalSettingsProvider
from .typography import PresetCSSGenerator, PresetManager

logger = logging.getLogger(__name__)


def _module_title(slug: str) -> str:
    return slug.replace("_", " ").title()


class Orbitools:
    """Plugin composition root"""

    def __init__(
        self,
        settings,
        global_settings: Optional[GlobalSettingsProvider] = None,
        options: Optional[OptionStore] = None,
        backend: Optional[CacheInterface] = None,
    ):
        self.settings = settings
        setup_logger(PLUGIN_SLUG, log_file=settings.log_file)
        if settings.debug:
            enable_debug(PLUGIN_SLUG)

        self.backend = backend or MemoryCache(max_size=settings.cache_max_size)
        self.cache = create_object_cache(self.backend, default_ttl=settings.cache_ttl_seconds)
        self.transients = create_transients(self.backend)
        self.options = options if options is not None else OptionStore()

        self.resolver = SpacingConfigResolver.from_settings(settings, global_settings, self.backend)
        self.gaps = GapsCSSGenerator(
            self.resolver,
            frontend_enabled=settings.gaps_frontend_css,
            editor_enabled=settings.gaps_editor_css,
        )
        self.presets = PresetManager(settings.theme_config_file)
        self.preset_css = PresetCSSGenerator(self.presets, self.cache)

        self.admin_page = AdminPage(
            PLUGIN_SLUG,
            structure_provider=self._admin_structure,
            fields_provider=self._admin_fields,
            options=self.options,
            nonces=NonceManager(lifetime_hours=settings.nonce_lifetime_hours),
            transients=self.transients,
        )
        self.admin_page.notices.ttl = settings.notice_ttl_seconds
        self.admin_page.on_post_save(self._after_settings_save)

        logger.debug(f"Orbitools initialized (debug={settings.debug}, theme={settings.theme_dir})")

    # ========== Settings ==========

    def get_all_settings(self) -> Dict[str, Any]:
        return self.admin_page.get_settings()

    def is_module_enabled(self, module_slug: str) -> bool:
        """Modules are enabled unless their toggle was saved as off"""
        value = self.get_all_settings().get(f"{module_slug}_enabled")
        return True if value is None else bool(value)

    def enabled_modules(self) -> List[str]:
        return [slug for slug in MODULE_SLUGS if self.is_module_enabled(slug)]

    def get_setting(self, key: str) -> Any:
        """Saved admin value, falling back to the environment-level setting"""
        saved = self.get_all_settings()
        if key in saved:
            return saved[key]
        return getattr(self.settings, key)

    def _admin_structure(self) -> Dict[str, Dict[str, Any]]:
        return {
            "modules": {"title": "Modules", "sections": {"modules": "Modules"}},
            "typography": {"title": "Typography", "sections": {"presets": "Presets"}},
        }

    def _admin_fields(self) -> Dict[str, List[Dict[str, Any]]]:
        modules = [
            {
                "id": f"{slug}_enabled",
                "name": _module_title(slug),
                "type": "checkbox",
                "section": "modules",
                "std": "1",
            }
            for slug in MODULE_SLUGS
        ]
        typography = [
            {
                "id": "typography_output_preset_css",
                "name": "Output preset CSS",
                "type": "checkbox",
                "section": "presets",
                "std": "1",
            },
            {
                "id": "typography_show_groups_in_dropdown",
                "name": "Show groups in dropdown",
                "type": "checkbox",
                "section": "presets",
            },
        ]
        return {"modules": modules, "typography": typography}

    def _after_settings_save(self, data: Dict[str, Any], result: bool) -> None:
        if not result:
            return
        self.preset_css.clear_cache()
        self.admin_page.notices.success("Settings saved successfully")

    # ========== Lifecycle ==========

    def on_request(self) -> None:
        """Per-request hook: picks up theme config edits in debug mode"""
        if self.resolver.check_for_changes():
            self.presets.reload()
            self.preset_css.clear_cache()

    def on_theme_switch(self, theme_dir=None) -> None:
        if theme_dir is not None:
            self.settings.theme_dir = theme_dir
            self.resolver.theme_config.path = self.settings.theme_config_file
            self.presets.config_file.path = self.settings.theme_config_file
        self.resolver.on_theme_switch()
        self.presets.reload()
        self.preset_css.clear_cache()
        logger.info(f"Theme switched, configuration reloaded ({self.settings.theme_dir})")

    def on_customizer_save(self) -> None:
        self.resolver.on_customizer_save()

    # ========== Output ==========

    def get_block_config(self, block_supports: Optional[Mapping[str, Any]]) -> BlockConfig:
        if not self.is_module_enabled("dimensions_controls"):
            return BlockConfig()
        return self.resolver.get_block_config(block_supports)

    def preset_style_tag(self) -> str:
        if not self.is_module_enabled("typography_presets"):
            return ""
        return self.preset_css.style_tag(enabled=bool(self.get_setting("typography_output_preset_css")))

    def head_css(self) -> str:
        """Frontend <head> styles: gap utilities and typography presets"""
        parts = []
        gaps = self.gaps.frontend_css()
        if gaps:
            parts.append(f'<style id="orbitools-gaps-css">\n{gaps}</style>\n')
        parts.append(self.preset_style_tag())
        return "".join(parts)

    def editor_settings(self) -> Dict[str, Any]:
        """Data handed to the block editor scripts"""
        return {
            "spacings": [s.to_dict() for s in self.resolver.resolve_spacing()],
            "breakpoints": [b.to_dict() for b in self.resolver.resolve_breakpoints()],
            "typographyPresets": {
                pid: p.to_dict() for pid, p in self.presets.get_presets().items()
            } if self.is_module_enabled("typography_presets") else {},
            "showGroupsInDropdown": bool(self.get_setting("typography_show_groups_in_dropdown")),
            "gapsEditorCss": self.gaps.editor_css(),
        }
