"""Inter-module data contracts."""

from __future__ import annotations

from typing import Any

import yaml
from pydantic import BaseModel, Field

from selectorkit.types import SegmentCategory

SEGMENT_PREFIXES: dict[SegmentCategory, str] = {
    SegmentCategory.ELEMENT: "",
    SegmentCategory.ID: "#",
    SegmentCategory.CLASS: ".",
    SegmentCategory.ATTRIBUTE: "[",
    SegmentCategory.PSEUDO_CLASS: ":",
    SegmentCategory.PSEUDO_ELEMENT: "::",
}


class Segment(BaseModel):
    model_config = {"frozen": True}

    category: SegmentCategory
    value: str

    def render(self) -> str:
        """Return the segment text with its category marker."""
        text = f"{SEGMENT_PREFIXES[self.category]}{self.value}"
        if self.category == SegmentCategory.ATTRIBUTE:
            text += "]"
        return text


class Rectangle(BaseModel):
    # Any: width and height are taken as given, no range or type checks
    width: Any
    height: Any

    def get_area(self) -> Any:
        return self.width * self.height


class SelectorDefinition(BaseModel):
    """Declarative form of a simple selector."""

    model_config = {"extra": "forbid"}

    element: str | None = None
    id: str | None = None
    classes: list[str] = Field(default_factory=list)
    attributes: list[str] = Field(default_factory=list)
    pseudo_classes: list[str] = Field(default_factory=list)
    pseudo_element: str | None = None


class CompositeDefinition(BaseModel):
    """Declarative form of ``left combinator right``."""

    model_config = {"extra": "forbid"}

    left: SelectorDefinition | CompositeDefinition
    combinator: str = " "
    right: SelectorDefinition | CompositeDefinition


class SelectorCatalog(BaseModel):
    selectors: dict[str, SelectorDefinition | CompositeDefinition] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> SelectorCatalog:
        """Parse a YAML mapping of ``name -> definition`` into a catalog."""
        if not yaml_str or not yaml_str.strip():
            return cls()
        raw = yaml.safe_load(yaml_str)
        if not raw:
            return cls()
        return cls.model_validate({"selectors": raw})

    def to_yaml(self) -> str:
        """Serialize the catalog back to YAML."""
        data = self.model_dump(exclude_defaults=True)
        return yaml.dump(data.get("selectors", {}), default_flow_style=False, sort_keys=False)
