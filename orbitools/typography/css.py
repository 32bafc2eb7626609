"""
Typography Preset CSS

One rule per preset:

    /* Typography Preset: Termina 16 400 */
    .has-type-preset-termina-16-400 {
        font-size: 1rem;
        line-height: normal;
    }
"""

import hashlib
import json
import logging
import re
from html import escape
from typing import Any, Optional

from config.constants import TYPOGRAPHY_CSS_CACHE_PREFIX, TYPOGRAPHY_CSS_TTL, TYPOGRAPHY_STYLE_ID
from orbitools.cache import NamespacedCache

from .presets import PresetManager, TypographyPreset, to_kebab_case

logger = logging.getLogger(__name__)

_PROPERTY_RE = re.compile(r"^[a-z0-9-]+$")
_UNSAFE_VALUE_RE = re.compile(r"[<>\"']")
_PERCENT_RE = re.compile(r"^(-?\d+(?:\.\d+)?)%$")

EMPTY_VALUES = ("", "undefined", "null")


def sanitize_css_property(name: str) -> Optional[str]:
    prop = to_kebab_case(name)
    return prop if _PROPERTY_RE.match(prop) else None


def _format_number(number: float) -> str:
    return f"{round(number, 10):g}"


def process_css_value(prop: str, value: Any) -> Optional[str]:
    """CSS value ready for output, None when it should be skipped"""
    if value is None or isinstance(value, (list, tuple, dict)):
        return None
    if isinstance(value, bool):
        value = "1" if value else ""

    text = str(value)
    if text in EMPTY_VALUES:
        return None

    if prop == "line-height" and text == "auto":
        text = "normal"

    if prop == "letter-spacing":
        match = _PERCENT_RE.match(text)
        if match:
            text = f"{_format_number(float(match.group(1)) * 0.01)}em"

    text = _UNSAFE_VALUE_RE.sub("", text)
    return text or None


class PresetCSSGenerator:
    """
    Builds the preset stylesheet.

    The generated CSS is kept on the instance and, when a cache is given,
    in the cache under a key derived from the preset data. Both are dropped
    by clear_cache().
    """

    def __init__(self, manager: PresetManager, cache: Optional[NamespacedCache] = None):
        self.manager = manager
        self.cache = cache
        self._css: Optional[str] = None
        self._cache_key: Optional[str] = None

    def generate_preset_css(self, preset: TypographyPreset) -> str:
        lines = []
        for name, value in preset.properties.items():
            prop = sanitize_css_property(name)
            css_value = process_css_value(prop, value) if prop else None
            if prop and css_value is not None:
                lines.append(f"    {prop}: {css_value};")
            else:
                logger.debug(f"Skipping property {name!r} of preset {preset.id!r}")

        if not lines:
            return ""

        selector = f".has-type-preset-{escape(preset.id, quote=True)}"
        label = escape(preset.label or preset.id, quote=False)
        body = "\n".join(lines)
        return f"/* Typography Preset: {label} */\n{selector} {{\n{body}\n}}"

    def get_preset_css(self, preset_id: str) -> str:
        preset = self.manager.get_preset(preset_id)
        return self.generate_preset_css(preset) if preset else ""

    def _key(self) -> str:
        payload = json.dumps(
            {pid: p.to_dict() for pid, p in self.manager.get_presets().items()},
            sort_keys=True,
            default=str,
        )
        digest = hashlib.md5(payload.encode("utf-8")).hexdigest()
        return f"{TYPOGRAPHY_CSS_CACHE_PREFIX}{digest}"

    def generate_css(self) -> str:
        if self._css is not None:
            return self._css

        key = self._key()
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                self._css, self._cache_key = cached, key
                return cached

        rules = (self.generate_preset_css(p) for p in self.manager.get_presets().values())
        css = "\n\n".join(rule for rule in rules if rule)

        if self.cache is not None:
            self.cache.set(key, css, ttl=TYPOGRAPHY_CSS_TTL)
        self._css, self._cache_key = css, key
        return css

    def style_tag(self, enabled: bool = True) -> str:
        """<style> element for page heads; empty when disabled or no CSS"""
        if not enabled:
            return ""
        css = self.generate_css()
        if not css:
            return ""
        return f'<style id="{TYPOGRAPHY_STYLE_ID}">\n{css}\n</style>\n'

    def clear_cache(self) -> None:
        if self.cache is not None and self._cache_key is not None:
            self.cache.delete(self._cache_key)
        self._css = None
        self._cache_key = None
