"""Immutable CSS selector builder.

Every append returns a new ``SimpleSelector``; the receiver is never
modified. Simple selectors are joined into a ``CompositeSelector`` tree with
``combine`` and rendered with ``stringify``::

    builder = css_selector_builder
    builder.id("main").class_("container").class_("editable").stringify()
    # '#main.container.editable'

    builder.combine(
        builder.element("div").id("main"),
        "+",
        builder.element("span"),
    ).stringify()
    # 'div#main + span'
"""

from __future__ import annotations

from pydantic import BaseModel

from selectorkit.exceptions import DuplicateSegmentError, OrderViolationError
from selectorkit.models.domain import Segment
from selectorkit.types import CATEGORY_RANK, UNIQUE_CATEGORIES, SegmentCategory


class SimpleSelector(BaseModel):
    """An ordered run of segments with no combinator."""

    model_config = {"frozen": True}

    segments: tuple[Segment, ...] = ()

    @property
    def categories(self) -> list[SegmentCategory]:
        return [s.category for s in self.segments]

    @property
    def is_empty(self) -> bool:
        return not self.segments

    @property
    def high_water_mark(self) -> SegmentCategory | None:
        """Highest-ranked category present, or None for an empty selector."""
        if not self.segments:
            return None
        return max(self.categories, key=CATEGORY_RANK.__getitem__)

    def element(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.ELEMENT, value)

    def id(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.ID, value)

    def class_(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.CLASS, value)

    def attr(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.ATTRIBUTE, value)

    def pseudo_class(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.PSEUDO_CLASS, value)

    def pseudo_element(self, value: str) -> SimpleSelector:
        return self._append(SegmentCategory.PSEUDO_ELEMENT, value)

    @staticmethod
    def combine(left: Selector, combinator: str, right: Selector) -> CompositeSelector:
        return combine(left, combinator, right)

    def stringify(self) -> str:
        return "".join(s.render() for s in self.segments)

    def __str__(self) -> str:
        return self.stringify()

    def _append(self, category: SegmentCategory, value: str) -> SimpleSelector:
        present = set(self.categories)
        # Duplicate check runs first: a repeated unique category never
        # reports an ordering problem.
        if category in UNIQUE_CATEGORIES and category in present:
            raise DuplicateSegmentError()
        rank = CATEGORY_RANK[category]
        if any(CATEGORY_RANK[c] > rank for c in present):
            raise OrderViolationError()
        return SimpleSelector(segments=(*self.segments, Segment(category=category, value=value)))


class CompositeSelector(BaseModel):
    """Two selectors joined by a combinator token, rendered as ``left c right``."""

    model_config = {"frozen": True}

    left: SimpleSelector | CompositeSelector
    combinator: str
    right: SimpleSelector | CompositeSelector

    def stringify(self) -> str:
        return f"{self.left.stringify()} {self.combinator} {self.right.stringify()}"

    def __str__(self) -> str:
        return self.stringify()


Selector = SimpleSelector | CompositeSelector

CompositeSelector.model_rebuild()


def combine(left: Selector, combinator: str, right: Selector) -> CompositeSelector:
    """Join two selectors. The combinator is kept verbatim, any string is accepted."""
    return CompositeSelector(left=left, combinator=str(combinator), right=right)


# Shared empty base every chain starts from
css_selector_builder = SimpleSelector()