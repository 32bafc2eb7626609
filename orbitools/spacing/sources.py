"""
Configuration Sources

Readers for the places spacing and breakpoint configuration can come from:
host global settings (theme.json equivalent), the theme's orbitools.json
and the plugin's bundled defaults.json. Every reader degrades to None on
missing or malformed input.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Protocol, Union

from orbitools import ConfigSourceError

logger = logging.getLogger(__name__)


# WordPress core spacing scale, offered when a theme sets
# settings.spacing.defaultSpacingSizes
WP_DEFAULT_SPACINGS: List[Dict[str, str]] = [
    {"slug": "20", "size": "0.44rem", "name": "XS"},
    {"slug": "30", "size": "0.67rem", "name": "S"},
    {"slug": "40", "size": "1rem", "name": "M"},
    {"slug": "50", "size": "1.5rem", "name": "L"},
    {"slug": "60", "size": "2.25rem", "name": "XL"},
    {"slug": "70", "size": "3.38rem", "name": "XXL"},
]


class GlobalSettingsProvider(Protocol):
    """Host API exposing merged theme.json settings"""

    def get_global_settings(self) -> Optional[Mapping[str, Any]]:
        ...


class StaticGlobalSettings:
    """GlobalSettingsProvider backed by a plain mapping"""

    def __init__(self, settings: Optional[Mapping[str, Any]] = None):
        self.settings = dict(settings or {})

    def get_global_settings(self) -> Optional[Mapping[str, Any]]:
        return self.settings

    def update(self, settings: Mapping[str, Any]) -> None:
        self.settings = dict(settings)


def _spacing_block(provider: Optional[GlobalSettingsProvider]) -> Optional[Mapping[str, Any]]:
    if provider is None:
        logger.debug("Global settings provider not available")
        return None
    global_settings = provider.get_global_settings()
    if not isinstance(global_settings, Mapping):
        return None
    spacing = global_settings.get("spacing")
    return spacing if isinstance(spacing, Mapping) else None


def theme_spacing_sizes(provider: Optional[GlobalSettingsProvider]) -> Optional[List[Any]]:
    """
    Spacing sizes declared through global settings.

    Global settings nest sizes by origin: {"theme": [...], "default": [...]}.
    Theme sizes win; default sizes are used when the theme declares none.
    """
    spacing = _spacing_block(provider)
    if spacing is None:
        return None

    sizes = spacing.get("spacingSizes")
    if not isinstance(sizes, Mapping):
        logger.debug("No theme spacing data found")
        return None

    for origin in ("theme", "default"):
        candidates = sizes.get(origin)
        if candidates:
            logger.debug(f"Using {origin} spacings ({len(candidates)} options)")
            return candidates

    logger.debug("No theme spacing data found")
    return None


def theme_default_spacings_enabled(provider: Optional[GlobalSettingsProvider]) -> bool:
    """Whether the theme opted into the core default spacing scale"""
    spacing = _spacing_block(provider)
    if spacing is None:
        return False
    return bool(spacing.get("defaultSpacingSizes", False))


def read_json_file(path: Union[str, Path]) -> Dict[str, Any]:
    """
    Read a JSON object from disk.

    Raises:
        ConfigSourceError: file missing, unreadable, not JSON, or not an object
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigSourceError(str(path), "file not found")
    try:
        contents = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigSourceError(str(path), f"unreadable ({e})") from e
    try:
        decoded = json.loads(contents)
    except json.JSONDecodeError as e:
        raise ConfigSourceError(str(path), f"invalid JSON ({e.msg} at line {e.lineno})") from e
    if not isinstance(decoded, dict):
        raise ConfigSourceError(str(path), "top-level value is not an object")
    return decoded


def load_json_file(path: Optional[Union[str, Path]]) -> Optional[Dict[str, Any]]:
    """read_json_file that returns None instead of raising"""
    if path is None:
        return None
    try:
        return read_json_file(path)
    except ConfigSourceError as e:
        logger.debug(f"Config source skipped: {e}")
        return None


def dig(data: Optional[Mapping[str, Any]], *keys: str) -> Any:
    """Nested lookup, None as soon as a level is missing"""
    current: Any = data
    for key in keys:
        if not isinstance(current, Mapping) or key not in current:
            return None
        current = current[key]
    return current


class JsonConfigFile:
    """A JSON config file on disk, re-read on every access"""

    def __init__(self, path: Optional[Union[str, Path]]):
        self.path = Path(path) if path is not None else None

    def exists(self) -> bool:
        return self.path is not None and self.path.is_file()

    def mtime(self) -> Optional[float]:
        if not self.exists():
            return None
        try:
            return self.path.stat().st_mtime
        except OSError:
            return None

    def read(self) -> Dict[str, Any]:
        """Raises ConfigSourceError when the file cannot be used"""
        if self.path is None:
            raise ConfigSourceError("<none>", "no path configured")
        return read_json_file(self.path)

    def data(self) -> Optional[Dict[str, Any]]:
        return load_json_file(self.path)

    def get(self, *keys: str) -> Any:
        return dig(self.data(), *keys)

    def __repr__(self) -> str:
        return f"JsonConfigFile({str(self.path)!r})"
