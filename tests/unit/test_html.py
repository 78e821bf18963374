"""Tests for :mod:`navmenu.html`."""

from __future__ import annotations

import pytest

from navmenu.errors import MarkupError
from navmenu.html import parse_selector, render_attributes, render_element


def test_render_element_plain_tag() -> None:
    """Given a bare tag and no attributes When rendered Then only the children are wrapped."""

    assert render_element("li", {}, "x") == "<li>x</li>"


def test_render_element_selector_class_and_id() -> None:
    """Given a selector with class and id When rendered Then both become attributes."""

    markup = render_element("ul.nav.main#primary", {"data-depth": "1"}, "")

    assert markup == '<ul id="primary" class="nav main" data-depth="1"></ul>'


def test_render_element_merges_selector_and_attribute_classes() -> None:
    """Given selector and attribute classes When rendered Then selector classes lead and duplicates drop."""

    markup = render_element("li.active", {"title": "t", "class": "item active"}, "x")

    assert markup == '<li title="t" class="active item">x</li>'


def test_render_element_escapes_attributes_but_not_children() -> None:
    """Given unsafe attribute values When rendered Then only attributes are escaped."""

    markup = render_element("a", {"href": '/search?q="a"&b'}, "<b>bold</b>")

    assert markup == '<a href="/search?q=&quot;a&quot;&amp;b"><b>bold</b></a>'


def test_render_element_joins_child_sequences() -> None:
    """Given a list of child fragments When rendered Then they are concatenated in order."""

    assert render_element("ul", None, ["<li>1</li>", "<li>2</li>"]) == "<ul><li>1</li><li>2</li></ul>"


def test_render_attributes_handles_booleans_and_lists() -> None:
    """Given boolean, empty and list values When rendered Then flags are bare and empty values vanish."""

    rendered = render_attributes({"hidden": True, "disabled": False, "title": None, "rel": ["a", "b"]})

    assert rendered == ' hidden rel="a b"'


@pytest.mark.parametrize("name", ['on"click', "a>b", "data id", "x=y", "a/b", "", "a\n"])
def test_render_attributes_rejects_unsafe_names(name: str) -> None:
    """Given an attribute name that would break the tag When rendered Then a MarkupError is raised."""

    with pytest.raises(MarkupError):
        render_element("a", {name: "1"}, "x")


def test_render_attributes_accepts_data_and_aria_names() -> None:
    """Given hyphenated and namespaced names When rendered Then they are written unchanged."""

    assert render_attributes({"data-id": "1", "aria-current": "page", "xml:lang": "en"}) == (
        ' data-id="1" aria-current="page" xml:lang="en"'
    )


@pytest.mark.parametrize("selector", ["", "li..active", "1li", "li.active#", "ul li"])
def test_parse_selector_rejects_invalid_selectors(selector: str) -> None:
    """Given a malformed selector When parsed Then a MarkupError is raised."""

    with pytest.raises(MarkupError):
        parse_selector(selector)


def test_parse_selector_splits_parts() -> None:
    """Given a full selector When parsed Then tag, classes and id come back separately."""

    assert parse_selector("LI.active.first#x") == ("li", ["active", "first"], "x")
