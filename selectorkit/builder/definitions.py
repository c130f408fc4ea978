"""Build selectors from declarative definitions."""

from __future__ import annotations

import structlog
import yaml
from pydantic import ValidationError

from selectorkit.builder.selector import Selector, combine, css_selector_builder
from selectorkit.exceptions import DefinitionError
from selectorkit.models.domain import CompositeDefinition, SelectorCatalog, SelectorDefinition

logger = structlog.get_logger(__name__)


def build_selector(definition: SelectorDefinition | CompositeDefinition) -> Selector:
    """Build a selector by appending the definition's parts in canonical order."""
    if isinstance(definition, CompositeDefinition):
        return combine(
            build_selector(definition.left),
            definition.combinator,
            build_selector(definition.right),
        )

    selector = css_selector_builder
    if definition.element is not None:
        selector = selector.element(definition.element)
    if definition.id is not None:
        selector = selector.id(definition.id)
    for value in definition.classes:
        selector = selector.class_(value)
    for value in definition.attributes:
        selector = selector.attr(value)
    for value in definition.pseudo_classes:
        selector = selector.pseudo_class(value)
    if definition.pseudo_element is not None:
        selector = selector.pseudo_element(definition.pseudo_element)
    return selector


def load_selectors(yaml_str: str) -> dict[str, Selector]:
    """Parse a YAML catalog and build every named selector in it."""
    try:
        catalog = SelectorCatalog.from_yaml(yaml_str)
    except (yaml.YAMLError, ValidationError) as e:
        msg = f"Invalid selector definitions: {e}"
        raise DefinitionError(msg) from e

    selectors = {name: build_selector(d) for name, d in catalog.selectors.items()}
    logger.info("selectors_loaded", count=len(selectors))
    for name, selector in selectors.items():
        logger.debug("selector_built", name=name, selector=selector.stringify())
    return selectors
