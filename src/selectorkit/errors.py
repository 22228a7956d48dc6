"""Error hierarchy for selectorkit."""
from __future__ import annotations

DUPLICATE_PART_MESSAGE = (
    "Element, id and pseudo-element should not occur more then one time "
    "inside the selector"
)
PART_ORDER_MESSAGE = (
    "Selector parts should be arranged in the following order: element, id, "
    "class, attribute, pseudo-class, pseudo-element"
)


class SelectorError(ValueError):
    """Base error for invalid selector construction."""


class DuplicatePartError(SelectorError):
    """An element, id or pseudo-element was set twice on one selector."""

    def __init__(self, kind: object, message: str = DUPLICATE_PART_MESSAGE) -> None:
        super().__init__(message)
        self.kind = kind


class PartOrderError(SelectorError):
    """A part was added after a part that must come later."""

    def __init__(
        self, kind: object, last_rank: int, message: str = PART_ORDER_MESSAGE
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.last_rank = last_rank


class UnknownPartError(SelectorError):
    """A part name does not match any selector part kind."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown selector part: {name!r}")
        self.name = name


class NotAnObjectError(TypeError):
    """Decoded JSON was not an object and cannot become a record."""

    def __init__(self, value: object) -> None:
        super().__init__(
            f"Expected a JSON object, got {type(value).__name__}"
        )
        self.value = value
