"""Exception hierarchy for selectorkit."""


class SelectorKitError(Exception):
    """Base exception for all selectorkit errors."""


class SelectorBuildError(SelectorKitError):
    """Raised when a selector segment cannot be appended."""


class DuplicateSegmentError(SelectorBuildError):
    """Raised when element, id or pseudo-element is appended twice."""

    def __init__(self) -> None:
        super().__init__(
            "Element, id and pseudo-element should not occur more then one time "
            "inside the selector"
        )


class OrderViolationError(SelectorBuildError):
    """Raised when a segment is appended after a segment that must follow it."""

    def __init__(self) -> None:
        super().__init__(
            "Selector parts should be arranged in the following order: "
            "element, id, class, attribute, pseudo-class, pseudo-element"
        )


class DefinitionError(SelectorKitError):
    """Raised when a declarative selector definition is invalid."""


class DecodeError(SelectorKitError):
    """Raised when encoded text cannot be decoded."""
