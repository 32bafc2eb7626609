"""
Class Name Builders

Consistent class strings for Collection and Entry blocks.
"""

import re
from typing import Iterable, Optional

COLLECTION_LIMITS = {
    "MIN_COLUMNS": 1,
    "MAX_COLUMNS": 10,
}


def build_collection_classes(layout_type: str, base_class: str = "orb-collection") -> str:
    """Base class plus layout modifier; other layout settings live in data attributes"""
    return f"{base_class} {base_class}--{layout_type}"


def build_entry_classes(
    width: Optional[str] = None,
    include_width: bool = True,
    base_class: str = "orb-entry",
) -> str:
    classes = [base_class]
    if include_width and width:
        classes.append(f"{base_class}--{width}")
    return " ".join(classes)


def filter_classes(class_name: Optional[str], classes_to_filter: Iterable[str] = ()) -> str:
    """Drop host-generated classes while keeping user-applied ones"""
    if not class_name:
        return ""
    blocked = set(classes_to_filter)
    return " ".join(cls for cls in class_name.split(" ") if cls and cls not in blocked)


def combine_classes(*classes: Optional[str]) -> str:
    """Join class strings, skipping empties and normalizing whitespace"""
    joined = " ".join(c for c in classes if c)
    return re.sub(r"\s+", " ", joined).strip()


def clamp_columns(count: int) -> int:
    return max(COLLECTION_LIMITS["MIN_COLUMNS"], min(COLLECTION_LIMITS["MAX_COLUMNS"], int(count)))
