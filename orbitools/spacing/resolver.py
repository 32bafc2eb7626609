"""
Spacing Configuration Resolver

Resolves the spacing scale and breakpoints offered to dimension controls.

Spacing priority (first source passing shape validation wins):
1. Block supports - customSpacings declared by the block
2. Theme - global settings spacingSizes (theme origin, then default origin)
3. Core default scale - only when the theme enables defaultSpacingSizes
4. Plugin - defaults.json

Breakpoint priority:
1. Theme - config/orbitools.json settings.breakpoints
2. Plugin - defaults.json

Unusable sources never raise; they fall through to the next tier, and an
empty list is returned when nothing is usable.
"""

import logging
import time
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

from config.constants import (
    BREAKPOINTS_CACHE_KEY,
    CACHE_EXPIRATION,
    CONFIG_CHECK_KEY,
    CONFIG_CHECK_TTL,
    SPACING_CACHE_KEY,
    ZERO_SLUG,
)
from orbitools import ConfigSourceError
from orbitools.cache import NamespacedCache, create_object_cache, create_transients
from orbitools.cache.base import CacheInterface

from .models import BlockConfig, BreakpointEntry, DimensionsSupport, SpacingEntry, ZERO_SPACING
from .sources import (
    GlobalSettingsProvider,
    JsonConfigFile,
    WP_DEFAULT_SPACINGS,
    dig,
    theme_default_spacings_enabled,
    theme_spacing_sizes,
)

logger = logging.getLogger(__name__)

REQUIRED_SPACING_KEYS = ("size", "slug", "name")

BlockOverride = Union[Mapping[str, Any], Sequence[Mapping[str, Any]], None]


def _is_filled(value: Any) -> bool:
    # "0" is a legitimate slug/size, so only None and empty values are blank
    if value is None or value is False:
        return False
    if isinstance(value, str):
        return value != ""
    return bool(value)


def validate_spacing_format(spacings: Any) -> bool:
    """Every entry must carry non-empty size, slug and name"""
    if not isinstance(spacings, (list, tuple)) or not spacings:
        return False

    for spacing in spacings:
        if not isinstance(spacing, Mapping):
            return False
        for key in REQUIRED_SPACING_KEYS:
            if key not in spacing or not _is_filled(spacing[key]):
                return False

    return True


def _is_zero_slug(slug: Any) -> bool:
    return slug == ZERO_SLUG or (isinstance(slug, int) and not isinstance(slug, bool) and slug == 0)


def normalize_spacings(spacings: Any) -> List[SpacingEntry]:
    """
    Coerce raw spacing dicts into SpacingEntry values.

    A zero/None option is injected at the front when the source lacks one;
    an existing zero entry is kept in place and never duplicated.
    """
    if not isinstance(spacings, (list, tuple)):
        return []

    normalized: List[SpacingEntry] = []
    if not any(isinstance(s, Mapping) and _is_zero_slug(s.get("slug")) for s in spacings):
        normalized.append(ZERO_SPACING)

    for spacing in spacings:
        if isinstance(spacing, Mapping) and "slug" in spacing and "size" in spacing:
            normalized.append(SpacingEntry.from_dict(spacing))

    return normalized


def _override_spacings(block_override: BlockOverride) -> Any:
    if isinstance(block_override, Mapping):
        return block_override.get("customSpacings")
    return block_override


class SpacingConfigResolver:
    """
    Resolves and caches spacing and breakpoint configuration.

    Usage:
        resolver = SpacingConfigResolver(
            defaults_file="config/defaults.json",
            theme_config_file="/themes/site/config/orbitools.json",
            global_settings=StaticGlobalSettings(theme_json_settings),
        )
        resolver.resolve_spacing()
        resolver.resolve_breakpoints()
        resolver.on_theme_switch()   # invalidates cached results
    """

    def __init__(
        self,
        defaults_file: Union[str, Path, None],
        theme_config_file: Union[str, Path, None] = None,
        global_settings: Optional[GlobalSettingsProvider] = None,
        cache: Optional[NamespacedCache] = None,
        transients: Optional[NamespacedCache] = None,
        ttl: int = CACHE_EXPIRATION,
        check_ttl: int = CONFIG_CHECK_TTL,
        debug: bool = False,
        clock: Callable[[], float] = time.time,
    ):
        self.defaults = JsonConfigFile(defaults_file)
        self.theme_config = JsonConfigFile(theme_config_file)
        self.global_settings = global_settings
        self.cache = cache if cache is not None else create_object_cache(default_ttl=ttl)
        self.transients = transients if transients is not None else create_transients()
        self.ttl = ttl
        self.check_ttl = check_ttl
        self.debug = debug
        self._clock = clock

    @classmethod
    def from_settings(
        cls,
        settings,
        global_settings: Optional[GlobalSettingsProvider] = None,
        backend: Optional[CacheInterface] = None,
    ) -> "SpacingConfigResolver":
        """Build a resolver from config.settings.Settings"""
        return cls(
            defaults_file=settings.defaults_file,
            theme_config_file=settings.theme_config_file,
            global_settings=global_settings,
            cache=create_object_cache(backend, default_ttl=settings.cache_ttl_seconds),
            transients=create_transients(backend),
            ttl=settings.cache_ttl_seconds,
            check_ttl=settings.config_check_ttl_seconds,
            debug=settings.debug,
        )

    # ==================== Spacing ====================

    def resolve_spacing(self, block_override: BlockOverride = None) -> List[SpacingEntry]:
        """
        Resolved spacing list.

        Args:
            block_override: a block's dimension supports (with
                customSpacings) or a raw spacing list. Override results are
                never cached.
        """
        if not block_override:
            cached = self.cache.get(SPACING_CACHE_KEY)
            if cached is not None:
                return list(cached)

        spacings = self._resolve_spacing_priority(block_override)

        if not block_override:
            self.cache.set(SPACING_CACHE_KEY, tuple(spacings), self.ttl)

        return spacings

    def _resolve_spacing_priority(self, block_override: BlockOverride) -> List[SpacingEntry]:
        # 1. Block supports
        custom = _override_spacings(block_override)
        if custom:
            if validate_spacing_format(custom):
                return normalize_spacings(custom)
            logger.debug("Block customSpacings failed validation, falling through")

        # 2. Theme spacing sizes
        theme_spacings = theme_spacing_sizes(self.global_settings)
        if theme_spacings:
            if validate_spacing_format(theme_spacings):
                return normalize_spacings(theme_spacings)
            logger.debug("Theme spacing sizes failed validation, falling through")

        # 3. Core default scale, when the theme opts in
        if theme_default_spacings_enabled(self.global_settings):
            if validate_spacing_format(WP_DEFAULT_SPACINGS):
                return normalize_spacings(WP_DEFAULT_SPACINGS)

        # 4. Plugin defaults
        return self._plugin_default_spacings()

    def _plugin_default_spacings(self) -> List[SpacingEntry]:
        plugin_spacings = dig(self.defaults.data(), "defaults", "spacings")
        if plugin_spacings is None:
            logger.debug(f"No spacings in {self.defaults}")
            return []

        if not validate_spacing_format(plugin_spacings):
            logger.debug(f"{self.defaults} has invalid spacing format")
            return []

        return normalize_spacings(plugin_spacings)

    # ==================== Breakpoints ====================

    def resolve_breakpoints(self) -> List[BreakpointEntry]:
        """Resolved breakpoint list: theme file, then plugin defaults"""
        cached = self.cache.get(BREAKPOINTS_CACHE_KEY)
        if cached is not None:
            return list(cached)

        breakpoints = self._theme_breakpoints()
        if not breakpoints:
            breakpoints = self._plugin_default_breakpoints()

        self.cache.set(BREAKPOINTS_CACHE_KEY, tuple(breakpoints), self.ttl)
        return breakpoints

    def _theme_breakpoints(self) -> Optional[List[BreakpointEntry]]:
        if not self.theme_config.exists():
            return None

        try:
            data = self.theme_config.read()
        except ConfigSourceError as e:
            if self.debug:
                logger.warning(f"Theme config ignored, using plugin defaults: {e}")
            else:
                logger.debug(f"Theme config ignored: {e}")
            return None

        return _breakpoint_entries(dig(data, "settings", "breakpoints"), str(self.theme_config.path))

    def _plugin_default_breakpoints(self) -> List[BreakpointEntry]:
        raw = dig(self.defaults.data(), "defaults", "breakpoints")
        return _breakpoint_entries(raw, str(self.defaults.path)) or []

    # ==================== Invalidation ====================

    def invalidate(self) -> None:
        """Drop both cached results"""
        self.cache.delete(SPACING_CACHE_KEY)
        self.cache.delete(BREAKPOINTS_CACHE_KEY)
        logger.debug("Spacing and breakpoint cache cleared")

    def on_theme_switch(self) -> None:
        self.invalidate()

    def on_customizer_save(self) -> None:
        self.invalidate()

    def check_for_changes(self) -> bool:
        """
        Development-mode check for edits to the theme's orbitools.json.

        Invalidates when the file changed after the last recorded check.
        Returns True if the cache was invalidated.
        """
        if not self.debug:
            return False

        modified = self.theme_config.mtime()
        if modified is None:
            return False

        last_check = self.transients.get(CONFIG_CHECK_KEY)
        if last_check and modified <= last_check:
            return False

        self.invalidate()
        self.transients.set(CONFIG_CHECK_KEY, self._clock(), self.check_ttl)
        logger.info(f"Theme config changed, cache invalidated: {self.theme_config.path}")
        return True

    # ==================== Block Config ====================

    def get_block_config(self, block_supports: Optional[Mapping[str, Any]]) -> BlockConfig:
        """Spacings, breakpoints and dimension flags for a block's supports"""
        dimensions = dig(block_supports, "orbitools", "dimensions")
        if not dimensions:
            return BlockConfig()
        if not isinstance(dimensions, Mapping):
            dimensions = {}

        return BlockConfig(
            spacings=self.resolve_spacing(dimensions),
            breakpoints=self.resolve_breakpoints(),
            dimensions=DimensionsSupport.from_supports(dimensions),
        )

    def get_blocks_config(self, registry: Mapping[str, Mapping[str, Any]]) -> Dict[str, BlockConfig]:
        """Block configs for every registered block using orbitools dimensions"""
        configs = {
            name: self.get_block_config(supports)
            for name, supports in registry.items()
            if dig(supports, "orbitools", "dimensions") is not None
        }
        logger.debug(f"Dimensions config loaded for {len(configs)} blocks")
        return configs


def _breakpoint_entries(raw: Any, source: str) -> Optional[List[BreakpointEntry]]:
    if not raw or not isinstance(raw, list):
        return None
    try:
        return [BreakpointEntry.from_dict(item) for item in raw]
    except (KeyError, TypeError, AttributeError) as e:
        logger.debug(f"Breakpoints in {source} unusable: {e!r}")
        return None
