#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for Spacing Lookup Utilities
"""

from orbitools.spacing import (
    get_breakpoint_by_slug,
    get_breakpoints,
    get_spacing_size_by_slug,
    get_spacing_sizes,
    is_valid_breakpoint_slug,
    is_valid_spacing_slug,
)


class TestSpacingLookups:
    """Test spacing size lookups"""

    def test_get_spacing_sizes(self, resolver):
        assert [s.slug for s in get_spacing_sizes(resolver)] == ["0", "xs", "sm", "md"]

    def test_get_spacing_size_by_slug(self, resolver):
        spacing = get_spacing_size_by_slug(resolver, "sm")
        assert spacing.size == "0.5rem"
        assert get_spacing_size_by_slug(resolver, "huge") is None

    def test_valid_spacing_slugs(self, resolver):
        assert is_valid_spacing_slug(resolver, "md")
        assert not is_valid_spacing_slug(resolver, "huge")

    def test_zero_and_fill_always_valid(self, temp_dir):
        from orbitools.spacing import SpacingConfigResolver

        empty = SpacingConfigResolver(temp_dir / "missing.json")
        assert is_valid_spacing_slug(empty, "0")
        assert is_valid_spacing_slug(empty, "fill")


class TestBreakpointLookups:
    """Test breakpoint lookups"""

    def test_get_breakpoints(self, resolver):
        assert [b.slug for b in get_breakpoints(resolver)] == ["sm", "md"]

    def test_get_breakpoint_by_slug(self, resolver):
        assert get_breakpoint_by_slug(resolver, "md").value == "67.5625rem"
        assert get_breakpoint_by_slug(resolver, "xl") is None

    def test_base_always_valid(self, resolver):
        assert is_valid_breakpoint_slug(resolver, "base")
        assert is_valid_breakpoint_slug(resolver, "sm")
        assert not is_valid_breakpoint_slug(resolver, "xl")
