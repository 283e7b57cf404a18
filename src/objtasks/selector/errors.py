"""Selector builder error types."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objtasks.selector.model import Category


class SelectorError(Exception):
    """Raised when selector parts are added in a way CSS does not allow."""

    def __init__(self, message: str, category: Category | None = None) -> None:
        self.category = category
        super().__init__(message)


class UniquenessError(SelectorError):
    """An element, id or pseudo-element was set twice on one selector."""

    MESSAGE = (
        "Element, id and pseudo-element should not occur more than one time "
        "inside the selector"
    )

    def __init__(self, category: Category | None = None) -> None:
        super().__init__(self.MESSAGE, category=category)


class OrderError(SelectorError):
    """A part was added after a part that must follow it."""

    MESSAGE = (
        "Selector parts should be arranged in the following order: element, id, "
        "class, attribute, pseudo-class, pseudo-element"
    )

    def __init__(self, category: Category | None = None, reached: int = 0) -> None:
        self.reached = reached
        super().__init__(self.MESSAGE, category=category)
