"""
Responsive Dimension Values

A responsive value maps "base" and each breakpoint slug to a spacing slug:
{"base": "40", "md": "60"}. These helpers fan a value out across a block's
configured breakpoints and turn it into utility classes.
"""

from typing import Any, Dict, List, Mapping, Optional

from config.constants import DIMENSION_TYPES
from orbitools.spacing.models import BlockConfig, BreakpointEntry, SpacingEntry


def _active_breakpoints(config: BlockConfig) -> List[BreakpointEntry]:
    if not config.dimensions.breakpoints:
        return []
    return config.breakpoints


def create_responsive_value(config: BlockConfig, base_value: Any = None) -> Dict[str, Any]:
    """Responsive value with a key for base and each enabled breakpoint"""
    value: Dict[str, Any] = {"base": base_value}
    for breakpoint in _active_breakpoints(config):
        value[breakpoint.slug] = None
    return value


def _is_set(value: Any) -> bool:
    return value is not None and value != ""


def responsive_value_to_classes(
    responsive_value: Optional[Mapping[str, Any]],
    prefix: str,
    config: BlockConfig,
) -> str:
    """
    Utility classes for a responsive value.

    {"base": "40", "md": "60"} with prefix "gap" gives "gap-40 md:gap-60"
    when the block has breakpoints enabled.
    """
    if not isinstance(responsive_value, Mapping):
        return ""

    classes: List[str] = []
    base = responsive_value.get("base")
    if _is_set(base):
        classes.append(f"{prefix}-{base}")

    for breakpoint in _active_breakpoints(config):
        value = responsive_value.get(breakpoint.slug)
        if _is_set(value):
            classes.append(f"{breakpoint.slug}:{prefix}-{value}")

    return " ".join(classes)


def get_spacing_option(config: BlockConfig, slug: Optional[str]) -> Optional[SpacingEntry]:
    if not slug:
        return None
    for spacing in config.spacings:
        if spacing.slug == slug:
            return spacing
    return None


def normalize_spacing_value(config: BlockConfig, value: Optional[str]) -> Optional[str]:
    """The slug if it is one of the block's spacing options, else None"""
    option = get_spacing_option(config, value)
    return option.slug if option else None


def enabled_dimension_types(config: BlockConfig) -> List[str]:
    return [t for t in DIMENSION_TYPES if getattr(config.dimensions, t)]


def is_dimension_type_enabled(config: BlockConfig, dimension_type: str) -> bool:
    return dimension_type in DIMENSION_TYPES and bool(getattr(config.dimensions, dimension_type))
