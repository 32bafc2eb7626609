"""
Typography Preset Manager

Loads typography presets from the active theme's config/orbitools.json:

    {"modules": {"typographyPresets": {
        "groups": {"headings": {"title": "Headings"}},
        "items": {
            "termina-16-400": {"group": "headings",
                               "properties": {"fontSize": "1rem", "lineHeight": "auto"}}
        }
    }}}
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from config.constants import TYPOGRAPHY_DEFAULT_GROUP
from orbitools.spacing.sources import JsonConfigFile

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY_RE = re.compile(r"([a-z])([A-Z])")

CONFIG_DESCRIPTION = "From config/orbitools.json"


def to_kebab_case(name: str) -> str:
    """fontSize -> font-size"""
    return _CAMEL_BOUNDARY_RE.sub(r"\1-\2", name).lower()


def generate_preset_label(preset_id: str) -> str:
    """termina-16-400 -> Termina 16 400"""
    words = preset_id.replace("-", " ").replace("_", " ").split(" ")
    return " ".join(word[:1].upper() + word[1:] for word in words)


@dataclass
class TypographyPreset:
    id: str
    label: str
    properties: Dict[str, Any] = field(default_factory=dict)
    description: str = CONFIG_DESCRIPTION
    group: str = TYPOGRAPHY_DEFAULT_GROUP
    group_title: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label": self.label,
            "description": self.description,
            "properties": dict(self.properties),
            "group": self.group,
            "group_title": self.group_title,
        }


class PresetManager:
    """Theme-defined typography presets, keyed by preset id"""

    def __init__(self, theme_config_file: Optional[Union[str, Path]] = None):
        self.config_file = JsonConfigFile(theme_config_file)
        self._presets: Dict[str, TypographyPreset] = {}
        self.reload()

    def reload(self) -> None:
        """Re-read presets from the theme config"""
        config = self.config_file.get("modules", "typographyPresets")
        if not isinstance(config, Mapping):
            self._presets = {}
            return
        self._presets = self._parse_presets(config)
        logger.debug(f"Loaded {len(self._presets)} typography presets from {self.config_file}")

    def _parse_presets(self, config: Mapping[str, Any]) -> Dict[str, TypographyPreset]:
        items = config.get("items")
        if not isinstance(items, Mapping):
            return {}

        groups = config.get("groups")
        groups = groups if isinstance(groups, Mapping) else {}

        presets: Dict[str, TypographyPreset] = {}
        for preset_id, data in items.items():
            if not isinstance(data, Mapping):
                logger.debug(f"Skipping typography preset {preset_id!r}: not an object")
                continue

            group_id = data.get("group") or TYPOGRAPHY_DEFAULT_GROUP
            properties = data.get("properties")
            properties = properties if isinstance(properties, Mapping) else {}

            presets[preset_id] = TypographyPreset(
                id=preset_id,
                label=data.get("label") or generate_preset_label(preset_id),
                description=data.get("description") or CONFIG_DESCRIPTION,
                properties={to_kebab_case(k): v for k, v in properties.items()},
                group=group_id,
                group_title=self._group_title(group_id, data, groups),
            )
        return presets

    @staticmethod
    def _group_title(group_id: str, data: Mapping[str, Any], groups: Mapping[str, Any]) -> Optional[str]:
        definition = groups.get(group_id)
        if isinstance(definition, Mapping) and definition.get("title"):
            return definition["title"]
        return data.get("group_title")

    def get_presets(self) -> Dict[str, TypographyPreset]:
        return dict(self._presets)

    def get_preset(self, preset_id: str) -> Optional[TypographyPreset]:
        return self._presets.get(preset_id)

    def has_presets(self) -> bool:
        return bool(self._presets)

    def get_presets_by_group(self) -> Dict[str, Dict[str, Any]]:
        """
        Presets grouped for a dropdown:

            {"headings": {"title": "Headings", "presets": {id: preset, ...}}}
        """
        grouped: Dict[str, Dict[str, Any]] = {}
        for preset_id, preset in self._presets.items():
            group = grouped.setdefault(preset.group, {
                "title": preset.group_title or preset.group.capitalize(),
                "presets": {},
            })
            group["presets"][preset_id] = preset
        return grouped

    def get_preset_ids(self) -> List[str]:
        return list(self._presets)
