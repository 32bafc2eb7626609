"""
Spacing Data Models

Resolved spacing sizes, breakpoints and per-block dimension support flags.
"""

from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Mapping

from config.constants import ZERO_NAME, ZERO_SLUG


@dataclass(frozen=True)
class SpacingEntry:
    """A named spacing size offered for gap/padding/margin"""
    slug: str
    size: str
    name: str

    @property
    def is_zero(self) -> bool:
        return self.slug == ZERO_SLUG

    def to_dict(self) -> Dict[str, str]:
        return {"slug": self.slug, "size": self.size, "name": self.name}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SpacingEntry":
        slug = str(data["slug"])
        return cls(
            slug=slug,
            size=str(data["size"]),
            name=str(data.get("name") or f"Size {slug}"),
        )


ZERO_SPACING = SpacingEntry(slug=ZERO_SLUG, size="0", name=ZERO_NAME)


@dataclass(frozen=True)
class BreakpointEntry:
    """A named min-width threshold for responsive overrides"""
    slug: str
    name: str
    value: str

    def to_dict(self) -> Dict[str, str]:
        return {"slug": self.slug, "name": self.name, "value": self.value}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "BreakpointEntry":
        slug = str(data["slug"])
        return cls(
            slug=slug,
            name=str(data.get("name", slug)),
            value=str(data.get("value", "")),
        )


@dataclass(frozen=True)
class DimensionsSupport:
    """Which dimension controls a block exposes"""
    enabled: bool = False
    breakpoints: bool = False
    gap: bool = False
    margin: bool = False
    padding: bool = False

    def to_dict(self) -> Dict[str, bool]:
        return asdict(self)

    @classmethod
    def from_supports(cls, dimensions: Mapping[str, Any]) -> "DimensionsSupport":
        return cls(
            enabled=True,
            breakpoints=bool(dimensions.get("breakpoints", False)),
            gap=bool(dimensions.get("gap", False)),
            margin=bool(dimensions.get("margin", False)),
            padding=bool(dimensions.get("padding", False)),
        )


@dataclass
class BlockConfig:
    """Configuration handed to a block's editor controls"""
    spacings: List[SpacingEntry] = field(default_factory=list)
    breakpoints: List[BreakpointEntry] = field(default_factory=list)
    dimensions: DimensionsSupport = field(default_factory=DimensionsSupport)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "spacings": [s.to_dict() for s in self.spacings],
            "breakpoints": [b.to_dict() for b in self.breakpoints],
            "dimensions": self.dimensions.to_dict(),
        }
