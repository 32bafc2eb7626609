"""
Spacing & Breakpoint Configuration

Exports:
- SpacingEntry, BreakpointEntry, DimensionsSupport, BlockConfig (models)
- SpacingConfigResolver (priority resolution with caching)
- validate_spacing_format, normalize_spacings
- StaticGlobalSettings, JsonConfigFile (sources)
- GapsCSSGenerator, generate_gaps_css
- slug lookups and validity checks (utils)
"""

from .models import (
    BlockConfig,
    BreakpointEntry,
    DimensionsSupport,
    SpacingEntry,
    ZERO_SPACING,
)
from .sources import (
    GlobalSettingsProvider,
    JsonConfigFile,
    StaticGlobalSettings,
    WP_DEFAULT_SPACINGS,
    load_json_file,
)
from .resolver import SpacingConfigResolver, normalize_spacings, validate_spacing_format
from .gaps_css import GapsCSSGenerator, generate_gaps_css
from .utils import (
    get_breakpoint_by_slug,
    get_breakpoints,
    get_spacing_size_by_slug,
    get_spacing_sizes,
    is_valid_breakpoint_slug,
    is_valid_spacing_slug,
)

__all__ = [
    'BlockConfig',
    'BreakpointEntry',
    'DimensionsSupport',
    'SpacingEntry',
    'ZERO_SPACING',
    'GlobalSettingsProvider',
    'JsonConfigFile',
    'StaticGlobalSettings',
    'WP_DEFAULT_SPACINGS',
    'load_json_file',
    'SpacingConfigResolver',
    'normalize_spacings',
    'validate_spacing_format',
    'GapsCSSGenerator',
    'generate_gaps_css',
    'get_breakpoint_by_slug',
    'get_breakpoints',
    'get_spacing_size_by_slug',
    'get_spacing_sizes',
    'is_valid_breakpoint_slug',
    'is_valid_spacing_slug',
]
