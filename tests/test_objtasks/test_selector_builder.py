"""Tests for the css_selector_builder facade."""

import pytest

from objtasks.selector import (
    CombinedSelector,
    OrderError,
    Selector,
    SelectorBuilder,
    UniquenessError,
    css_selector_builder,
)


@pytest.fixture
def builder() -> SelectorBuilder:
    return css_selector_builder


class TestFacadeEntryPoints:
    def test_each_entry_point_returns_new_selector(self, builder):
        for sel in (
            builder.element("a"),
            builder.id("a"),
            builder.class_("a"),
            builder.attr("a"),
            builder.pseudo_class("a"),
            builder.pseudo_element("a"),
        ):
            assert isinstance(sel, Selector)

    def test_single_parts(self, builder):
        assert builder.element("div").render() == "div"
        assert builder.id("main").render() == "#main"
        assert builder.class_("btn").render() == ".btn"
        assert builder.attr("disabled").render() == "[disabled]"
        assert builder.pseudo_class("hover").render() == ":hover"
        assert builder.pseudo_element("before").render() == "::before"

    def test_calls_do_not_share_state(self, builder):
        first = builder.class_("one")
        second = builder.class_("two")
        assert first is not second
        assert first.render() == ".one"
        assert second.render() == ".two"

    def test_fresh_builder_instances_behave_alike(self):
        assert SelectorBuilder().id("x").render() == css_selector_builder.id("x").render()


class TestChains:
    def test_full_chain(self, builder):
        sel = (
            builder.element("a")
            .id("x")
            .class_("b1")
            .class_("b2")
            .attr('href$=".png"')
            .pseudo_class("focus")
        )
        assert sel.render() == 'a#x.b1.b2[href$=".png"]:focus'

    def test_id_and_classes(self, builder):
        assert builder.id("main").class_("container").class_("editable").render() == (
            "#main.container.editable"
        )

    def test_element_attr_pseudo_class(self, builder):
        assert builder.element("a").attr('href$=".png"').pseudo_class("focus").render() == (
            'a[href$=".png"]:focus'
        )

    def test_id_then_element_fails(self, builder):
        with pytest.raises(OrderError):
            builder.id("x").element("y")

    def test_id_twice_fails(self, builder):
        with pytest.raises(UniquenessError):
            builder.id("x").id("y")

    def test_pseudo_element_then_class_fails(self, builder):
        with pytest.raises(OrderError):
            builder.pseudo_element("after").class_("c")

    def test_error_does_not_poison_later_calls(self, builder):
        with pytest.raises(UniquenessError):
            builder.element("a").element("b")
        assert builder.element("b").render() == "b"


class TestCombine:
    def test_combine_two(self, builder):
        combined = builder.combine(builder.element("div").id("main"), "+", builder.element("table").id("data"))
        assert isinstance(combined, CombinedSelector)
        assert combined.render() == "div#main + table#data"

    def test_nested_combine(self, builder):
        combined = builder.combine(
            builder.element("div").id("main").class_("container").class_("draggable"),
            "+",
            builder.combine(
                builder.element("table").id("data"),
                "~",
                builder.combine(
                    builder.element("tr").pseudo_class("nth-of-type(even)"),
                    " ",
                    builder.element("td").pseudo_class("nth-of-type(even)"),
                ),
            ),
        )
        assert combined.render() == (
            "div#main.container.draggable + table#data ~ "
            "tr:nth-of-type(even)   td:nth-of-type(even)"
        )

    def test_combinator_passed_through_verbatim(self, builder):
        assert builder.combine(builder.element("a"), "||", builder.element("b")).render() == "a || b"

    def test_operands_still_buildable(self, builder):
        left = builder.element("a")
        combined = builder.combine(left, ">", builder.element("span"))
        left.class_("active")
        assert combined.render() == "a.active > span"


class TestEmptyValues:
    def test_empty_element_then_element(self, builder):
        assert builder.element("").element("a").render() == "a"

    def test_empty_id_then_element(self, builder):
        assert builder.id("").element("a").render() == "a"

    def test_empty_pseudo_element_then_class(self, builder):
        assert builder.pseudo_element("").class_("c").render() == ".c"
