"""
Spacing Utilities

Lookups over a resolver's spacing sizes and breakpoints.
"""

from typing import List, Optional

from config.constants import ALWAYS_VALID_SPACING_SLUGS, BASE_BREAKPOINT_SLUG

from .models import BreakpointEntry, SpacingEntry
from .resolver import SpacingConfigResolver


def get_spacing_sizes(resolver: SpacingConfigResolver) -> List[SpacingEntry]:
    return resolver.resolve_spacing()


def get_breakpoints(resolver: SpacingConfigResolver) -> List[BreakpointEntry]:
    return resolver.resolve_breakpoints()


def get_spacing_size_by_slug(resolver: SpacingConfigResolver, slug: str) -> Optional[SpacingEntry]:
    for spacing in resolver.resolve_spacing():
        if spacing.slug == slug:
            return spacing
    return None


def get_breakpoint_by_slug(resolver: SpacingConfigResolver, slug: str) -> Optional[BreakpointEntry]:
    for breakpoint in resolver.resolve_breakpoints():
        if breakpoint.slug == slug:
            return breakpoint
    return None


def is_valid_spacing_slug(resolver: SpacingConfigResolver, slug: str) -> bool:
    """'0' and 'fill' are always accepted"""
    if slug in ALWAYS_VALID_SPACING_SLUGS:
        return True
    return get_spacing_size_by_slug(resolver, slug) is not None


def is_valid_breakpoint_slug(resolver: SpacingConfigResolver, slug: str) -> bool:
    """The base breakpoint is always accepted"""
    if slug == BASE_BREAKPOINT_SLUG:
        return True
    return get_breakpoint_by_slug(resolver, slug) is not None
