#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit Tests for Flex Layout Data Attributes
"""

from orbitools.layout import generate_flex_attributes, render_data_attributes


class TestGenerateFlexAttributes:
    """Test data attribute derivation"""

    def test_defaults_only_emit_stacked(self):
        """Default layout only carries the mobile stacking flag"""
        assert generate_flex_attributes({}) == {"data-stacked": "true"}

    def test_flow_when_direction_changes(self):
        attrs = generate_flex_attributes({"flexDirection": "column"})
        assert attrs["data-flow"] == "column nowrap"

    def test_flow_when_wrap_changes(self):
        attrs = generate_flex_attributes({"flexWrap": "wrap"})
        assert attrs["data-flow"] == "row wrap"

    def test_align_and_justify_mapped(self):
        attrs = generate_flex_attributes({
            "alignItems": "flex-end",
            "justifyContent": "space-between",
        })
        assert attrs["data-align"] == "end"
        assert attrs["data-justify"] == "between"

    def test_unmapped_values_pass_through(self):
        attrs = generate_flex_attributes({"alignItems": "baseline"})
        assert attrs["data-align"] == "baseline"

    def test_constrain_requires_full_width(self):
        attrs = {"restrictContentWidth": True}
        assert "data-constrain" not in generate_flex_attributes(attrs, "wp-block-orb-collection")
        assert generate_flex_attributes(attrs, "alignfull")["data-constrain"] == "true"

    def test_stack_on_mobile_disabled(self):
        assert "data-stacked" not in generate_flex_attributes({"stackOnMobile": False})

    def test_custom_item_width_uses_grid_name(self):
        assert generate_flex_attributes({"itemWidth": "custom"})["data-layout"] == "penta"
        attrs = generate_flex_attributes({"itemWidth": "custom", "columnSystem": 12})
        assert attrs["data-layout"] == "dodeca"

    def test_custom_item_width_unknown_grid(self):
        attrs = generate_flex_attributes({"itemWidth": "custom", "columnSystem": 7})
        assert attrs["data-layout"] == "custom"

    def test_named_item_width(self):
        assert generate_flex_attributes({"itemWidth": "equal"})["data-layout"] == "equal"


class TestRenderDataAttributes:
    """Test attribute serialization"""

    def test_render(self):
        html = render_data_attributes({"data-flow": "column wrap", "data-stacked": "true"})
        assert html == 'data-flow="column wrap" data-stacked="true"'

    def test_values_escaped(self):
        assert render_data_attributes({"data-x": '"><script>'}) == 'data-x="&quot;&gt;&lt;script&gt;"'
