"""
Gaps CSS Generator

Builds the has-gap utility classes from the resolved spacing scale, with a
media query per breakpoint for the responsive variants.
"""

import logging
from typing import List, Sequence

from .models import BreakpointEntry, SpacingEntry
from .resolver import SpacingConfigResolver

logger = logging.getLogger(__name__)


def _gap_rule(selector: str, declaration: str, indent: str = "") -> str:
    return f"{indent}{selector} {{\n{indent}    gap: {declaration};\n{indent}}}\n\n"


def _spacing_value(spacing: SpacingEntry) -> str:
    return f"var(--wp--preset--spacing--{spacing.slug}, {spacing.size})"


def generate_gaps_css(
    spacings: Sequence[SpacingEntry],
    breakpoints: Sequence[BreakpointEntry],
) -> str:
    """CSS for .has-gap--{slug} and {breakpoint}:has-gap--{slug} classes"""
    if not spacings:
        return ""

    # The zero rule is always written first, so skip it in the loops
    sized = [s for s in spacings if not s.is_zero]

    parts: List[str] = ["/* Gap Classes - has-gap Pattern */\n"]
    parts.append(_gap_rule(".has-gap.has-gap--0", "0"))
    for spacing in sized:
        parts.append(_gap_rule(f".has-gap.has-gap--{spacing.slug}", _spacing_value(spacing)))

    for breakpoint in breakpoints:
        parts.append(f"@media (min-width: {breakpoint.value}) {{\n")
        prefix = f".has-gap.{breakpoint.slug}\\:has-gap--"
        parts.append(_gap_rule(f"{prefix}0", "0", indent="    "))
        for spacing in sized:
            parts.append(_gap_rule(f"{prefix}{spacing.slug}", _spacing_value(spacing), indent="    "))
        parts.append("}\n\n")

    return "".join(parts)


class GapsCSSGenerator:
    """Gap utility CSS for the frontend and the block editor"""

    def __init__(
        self,
        resolver: SpacingConfigResolver,
        frontend_enabled: bool = True,
        editor_enabled: bool = True,
    ):
        self.resolver = resolver
        self.frontend_enabled = frontend_enabled
        self.editor_enabled = editor_enabled

    def generate(self) -> str:
        return generate_gaps_css(
            self.resolver.resolve_spacing(),
            self.resolver.resolve_breakpoints(),
        )

    def frontend_css(self) -> str:
        if not self.frontend_enabled:
            logger.debug("Frontend gaps CSS disabled")
            return ""
        return self.generate()

    def editor_css(self) -> str:
        if not self.editor_enabled:
            logger.debug("Editor gaps CSS disabled")
            return ""
        return self.generate()
