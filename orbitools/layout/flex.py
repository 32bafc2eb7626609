"""
Flex Layout Attributes

Derives data-* attributes for Collection blocks from their layout
attributes. Only non-default values are emitted to keep markup minimal.
"""

from html import escape
from typing import Any, Dict, Mapping, Optional

FLEX_DEFAULTS: Dict[str, Any] = {
    "columnCount": 2,
    "flexDirection": "row",
    "flexWrap": "nowrap",
    "alignItems": "stretch",
    "justifyContent": "flex-start",
    "gapSize": None,
    "restrictContentWidth": False,
    "stackOnMobile": True,
    "itemWidth": "fit",
    "columnSystem": 5,
}

VALUE_MAPPINGS: Dict[str, Dict[str, str]] = {
    "alignItems": {
        "flex-start": "start",
        "flex-end": "end",
        "center": "center",
    },
    "justifyContent": {
        "flex-start": "start",
        "flex-end": "end",
        "center": "center",
        "space-between": "between",
        "space-around": "around",
        "space-evenly": "evenly",
    },
    "flexWrap": {
        "nowrap": "nowrap",
        "wrap": "wrap",
        "wrap-reverse": "wrap-reverse",
    },
    "gridSystem": {
        "5": "penta",
        "12": "dodeca",
    },
}


def _value(attributes: Mapping[str, Any], key: str) -> Any:
    # Unset and falsy attributes fall back to the declared default
    return attributes.get(key) or FLEX_DEFAULTS[key]


def generate_flex_attributes(
    attributes: Mapping[str, Any],
    class_name: Optional[str] = None,
) -> Dict[str, str]:
    """
    Data attributes for a Collection block.

    Args:
        attributes: block attribute bag
        class_name: the block's rendered className, used to detect
            full-width (alignfull) blocks

    Returns:
        {"data-flow": "column wrap", "data-align": "center", ...}
    """
    data_attrs: Dict[str, str] = {}

    direction = _value(attributes, "flexDirection")
    flex_wrap = _value(attributes, "flexWrap")
    align_items = _value(attributes, "alignItems")
    justify_content = _value(attributes, "justifyContent")
    restrict_width = _value(attributes, "restrictContentWidth")
    stack_on_mobile = attributes.get("stackOnMobile") is not False
    item_width = _value(attributes, "itemWidth")
    column_system = _value(attributes, "columnSystem")

    if direction != FLEX_DEFAULTS["flexDirection"] or flex_wrap != FLEX_DEFAULTS["flexWrap"]:
        data_attrs["data-flow"] = f"{direction} {flex_wrap}"

    if align_items != FLEX_DEFAULTS["alignItems"]:
        data_attrs["data-align"] = VALUE_MAPPINGS["alignItems"].get(align_items, align_items)

    if justify_content != FLEX_DEFAULTS["justifyContent"]:
        data_attrs["data-justify"] = VALUE_MAPPINGS["justifyContent"].get(justify_content, justify_content)

    is_full_width = bool(class_name) and "alignfull" in class_name
    if restrict_width and is_full_width:
        data_attrs["data-constrain"] = "true"

    if stack_on_mobile:
        data_attrs["data-stacked"] = "true"

    if item_width != FLEX_DEFAULTS["itemWidth"]:
        if item_width == "custom":
            data_attrs["data-layout"] = VALUE_MAPPINGS["gridSystem"].get(str(column_system), "custom")
        else:
            data_attrs["data-layout"] = item_width

    return data_attrs


def render_data_attributes(data_attrs: Mapping[str, str]) -> str:
    """Serialize data attributes for an HTML start tag"""
    return " ".join(f'{name}="{escape(str(value), quote=True)}"' for name, value in data_attrs.items())
