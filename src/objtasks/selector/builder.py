"""Stateless facade for composing CSS selector strings.

Example:
    b = css_selector_builder
    b.id("main").class_("container").class_("editable").render()
    # '#main.container.editable'

    b.combine(b.element("div").id("main"), "+", b.element("table").id("data")).render()
    # 'div#main + table#data'
"""

from __future__ import annotations

from objtasks.selector.model import CombinedSelector, Renderable, Selector

__all__ = ["SelectorBuilder", "css_selector_builder"]


class SelectorBuilder:
    """Factory whose every call starts a new, independently owned node."""

    def element(self, value: str) -> Selector:
        return Selector().set_element(value)

    def id(self, value: str) -> Selector:
        return Selector().set_id(value)

    def class_(self, value: str) -> Selector:
        return Selector().add_class(value)

    def attr(self, value: str) -> Selector:
        return Selector().add_attribute(value)

    def pseudo_class(self, value: str) -> Selector:
        return Selector().add_pseudo_class(value)

    def pseudo_element(self, value: str) -> Selector:
        return Selector().set_pseudo_element(value)

    def combine(
        self, left: Renderable, combinator: str, right: Renderable
    ) -> CombinedSelector:
        """Join two nodes with *combinator*; neither operand is modified."""
        return CombinedSelector(left=left, combinator=combinator, right=right)


css_selector_builder = SelectorBuilder()
