"""Enums and type aliases for selectorkit."""

from enum import StrEnum


class SegmentCategory(StrEnum):
    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"


class Combinator(StrEnum):
    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"


# Required order of segments inside a simple selector
CATEGORY_ORDER: list[SegmentCategory] = [
    SegmentCategory.ELEMENT,
    SegmentCategory.ID,
    SegmentCategory.CLASS,
    SegmentCategory.ATTRIBUTE,
    SegmentCategory.PSEUDO_CLASS,
    SegmentCategory.PSEUDO_ELEMENT,
]

CATEGORY_RANK: dict[SegmentCategory, int] = {c: i for i, c in enumerate(CATEGORY_ORDER)}

# Categories allowed at most once per simple selector
UNIQUE_CATEGORIES: frozenset[SegmentCategory] = frozenset(
    {
        SegmentCategory.ELEMENT,
        SegmentCategory.ID,
        SegmentCategory.PSEUDO_ELEMENT,
    }
)
