#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for the has-gap CSS Generator
"""

import pytest

from orbitools.spacing import BreakpointEntry, GapsCSSGenerator, SpacingEntry, ZERO_SPACING, generate_gaps_css


@pytest.fixture
def spacings():
    return [ZERO_SPACING, SpacingEntry("40", "1rem", "M")]


@pytest.fixture
def breakpoints():
    return [BreakpointEntry("md", "Medium", "67.5625rem")]


class TestGenerateGapsCss:
    """Test CSS text generation"""

    def test_empty_spacings_give_empty_css(self, breakpoints):
        assert generate_gaps_css([], breakpoints) == ""

    def test_base_rules(self, spacings):
        css = generate_gaps_css(spacings, [])
        assert css == (
            "/* Gap Classes - has-gap Pattern */\n"
            ".has-gap.has-gap--0 {\n    gap: 0;\n}\n\n"
            ".has-gap.has-gap--40 {\n    gap: var(--wp--preset--spacing--40, 1rem);\n}\n\n"
        )

    def test_zero_rule_written_once(self, spacings):
        css = generate_gaps_css(spacings, [])
        assert css.count(".has-gap.has-gap--0 {") == 1

    def test_breakpoint_media_query(self, spacings, breakpoints):
        css = generate_gaps_css(spacings, breakpoints)
        assert "@media (min-width: 67.5625rem) {\n" in css
        assert "    .has-gap.md\\:has-gap--0 {\n        gap: 0;\n    }\n" in css
        assert "    .has-gap.md\\:has-gap--40 {\n        gap: var(--wp--preset--spacing--40, 1rem);\n    }\n" in css
        assert css.endswith("}\n\n")

    def test_one_media_query_per_breakpoint(self, spacings):
        breakpoints = [
            BreakpointEntry("sm", "Small", "50rem"),
            BreakpointEntry("lg", "Large", "85rem"),
        ]
        css = generate_gaps_css(spacings, breakpoints)
        assert css.count("@media") == 2
        assert css.index("min-width: 50rem") < css.index("min-width: 85rem")


class TestGapsCSSGenerator:
    """Test generator wiring to the resolver"""

    def test_generate_uses_resolver(self, resolver):
        css = GapsCSSGenerator(resolver).generate()
        assert ".has-gap.has-gap--xs" in css
        assert ".has-gap.sm\\:has-gap--md" in css

    def test_frontend_disabled(self, resolver):
        generator = GapsCSSGenerator(resolver, frontend_enabled=False)
        assert generator.frontend_css() == ""
        assert generator.editor_css() != ""

    def test_editor_disabled(self, resolver):
        generator = GapsCSSGenerator(resolver, editor_enabled=False)
        assert generator.editor_css() == ""
        assert generator.frontend_css() != ""
