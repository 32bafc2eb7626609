"""
Layout Controls

Exports:
- FLEX_DEFAULTS, VALUE_MAPPINGS, generate_flex_attributes
- build_collection_classes, build_entry_classes, filter_classes, combine_classes
- create_responsive_value, responsive_value_to_classes
"""

from .flex import FLEX_DEFAULTS, VALUE_MAPPINGS, generate_flex_attributes, render_data_attributes
from .classes import (
    COLLECTION_LIMITS,
    build_collection_classes,
    build_entry_classes,
    clamp_columns,
    combine_classes,
    filter_classes,
)
from .responsive import (
    create_responsive_value,
    enabled_dimension_types,
    get_spacing_option,
    is_dimension_type_enabled,
    normalize_spacing_value,
    responsive_value_to_classes,
)

__all__ = [
    'FLEX_DEFAULTS',
    'VALUE_MAPPINGS',
    'generate_flex_attributes',
    'render_data_attributes',
    'COLLECTION_LIMITS',
    'build_collection_classes',
    'build_entry_classes',
    'clamp_columns',
    'combine_classes',
    'filter_classes',
    'create_responsive_value',
    'enabled_dimension_types',
    'get_spacing_option',
    'is_dimension_type_enabled',
    'normalize_spacing_value',
    'responsive_value_to_classes',
]
