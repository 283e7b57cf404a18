"""Selector model: Category ranks, Selector and CombinedSelector.

A selector is built part by part and rendered in CSS order::

    element#id.class[attr]:pseudo-class::pseudo-element

Parts must be added in non-decreasing rank order. Element, id and
pseudo-element may appear at most once; the other categories repeat.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Protocol

from objtasks.selector.errors import OrderError, UniquenessError

__all__ = ["Category", "COMBINATORS", "Renderable", "Selector", "CombinedSelector"]

logger = logging.getLogger(__name__)

# Conventional CSS combinators: descendant, adjacent sibling, general sibling, child.
COMBINATORS = (" ", "+", "~", ">")


class Category(IntEnum):
    """Selector part category; the value is its rank in the rendered output."""

    ELEMENT = 1
    ID = 2
    CLASS = 3
    ATTRIBUTE = 4
    PSEUDO_CLASS = 5
    PSEUDO_ELEMENT = 6

    @property
    def exclusive(self) -> bool:
        """True for categories that may occur at most once per selector."""
        return self in (Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT)

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")


class Renderable(Protocol):
    """Anything that renders to a selector string."""

    def render(self) -> str: ...


@dataclass
class Selector:
    """A compound selector accumulated through chained calls.

    Empty values are ignored: they are neither stored nor ranked.
    """

    element_name: str | None = None
    id_name: str | None = None
    class_names: list[str] = field(default_factory=list)
    attributes: list[str] = field(default_factory=list)
    pseudo_classes: list[str] = field(default_factory=list)
    pseudo_element_name: str | None = None
    last_rank: int = 0

    # --- mutators -------------------------------------------------------------

    def set_element(self, name: str) -> Selector:
        if not name:
            return self
        self._check(Category.ELEMENT, self.element_name is not None)
        self.element_name = name
        return self

    def set_id(self, name: str) -> Selector:
        if not name:
            return self
        self._check(Category.ID, self.id_name is not None)
        self.id_name = name
        return self

    def add_class(self, name: str) -> Selector:
        if not name:
            return self
        self._check(Category.CLASS)
        self.class_names.append(name)
        return self

    def add_attribute(self, expr: str) -> Selector:
        """Append an attribute expression such as ``href$=".png"`` (no brackets)."""
        if not expr:
            return self
        self._check(Category.ATTRIBUTE)
        self.attributes.append(expr)
        return self

    def add_pseudo_class(self, name: str) -> Selector:
        if not name:
            return self
        self._check(Category.PSEUDO_CLASS)
        self.pseudo_classes.append(name)
        return self

    def set_pseudo_element(self, name: str) -> Selector:
        if not name:
            return self
        self._check(Category.PSEUDO_ELEMENT, self.pseudo_element_name is not None)
        self.pseudo_element_name = name
        return self

    # Chaining names matching the builder facade.
    element = set_element
    id = set_id
    class_ = add_class
    attr = add_attribute
    pseudo_class = add_pseudo_class
    pseudo_element = set_pseudo_element

    def _check(self, category: Category, occupied: bool = False) -> None:
        """Validate uniqueness, then order, then advance the reached rank."""
        if category.exclusive and occupied:
            logger.debug("Rejected duplicate %s part", category.label)
            raise UniquenessError(category)
        if category < self.last_rank:
            logger.debug(
                "Rejected %s part after rank %d", category.label, self.last_rank
            )
            raise OrderError(category, reached=self.last_rank)
        self.last_rank = int(category)

    # --- rendering ------------------------------------------------------------

    def render(self) -> str:
        parts: list[str] = []
        if self.element_name:
            parts.append(self.element_name)
        if self.id_name:
            parts.append(f"#{self.id_name}")
        parts.extend(f".{name}" for name in self.class_names)
        parts.extend(f"[{expr}]" for expr in self.attributes)
        parts.extend(f":{name}" for name in self.pseudo_classes)
        if self.pseudo_element_name:
            parts.append(f"::{self.pseudo_element_name}")
        return "".join(parts)

    def __str__(self) -> str:
        return self.render()

    stringify = render


@dataclass(frozen=True)
class CombinedSelector:
    """Two selectors joined by a combinator token.

    The token is used verbatim; see ``COMBINATORS`` for the conventional set.
    A ``" "`` token renders as three spaces between the operands.
    """

    left: Renderable
    combinator: str
    right: Renderable

    def render(self) -> str:
        return f"{self.left.render()} {self.combinator} {self.right.render()}"

    def __str__(self) -> str:
        return self.render()

    stringify = render
