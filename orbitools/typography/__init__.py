"""
Typography Presets

Exports:
- PresetManager, TypographyPreset (theme-defined presets)
- PresetCSSGenerator (preset stylesheet)
"""

from .presets import PresetManager, TypographyPreset, generate_preset_label, to_kebab_case
from .css import PresetCSSGenerator, process_css_value, sanitize_css_property

__all__ = [
    'PresetManager',
    'TypographyPreset',
    'generate_preset_label',
    'to_kebab_case',
    'PresetCSSGenerator',
    'process_css_value',
    'sanitize_css_property',
]
