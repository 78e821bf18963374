"""Tests for :mod:`navmenu.items`."""

from __future__ import annotations

import pytest

from navmenu.items import Html, Item, Link, Text


def test_item_cannot_be_instantiated_directly() -> None:
    with pytest.raises(TypeError):
        Item()  # type: ignore[abstract]


def test_link_renders_anchor_with_escaped_text() -> None:
    link = Link("Tom & Jerry", "/cartoons?a=1&b=2")

    assert link.render() == '<a href="/cartoons?a=1&amp;b=2">Tom &amp; Jerry</a>'


def test_link_to_swaps_argument_order() -> None:
    link = Link.to("/about", "About")

    assert link.text == "About"
    assert link.url == "/about"


def test_link_attributes_render_after_href() -> None:
    link = Link("Docs", "/docs").set_attribute("target", "_blank").add_class("external")

    assert link.render() == '<a href="/docs" target="_blank" class="external">Docs</a>'


@pytest.mark.parametrize(
    ("prefix", "url", "expected"),
    [
        ("/admin", "/users", "/admin/users"),
        ("/admin/", "users", "/admin/users"),
        ("https://example.com", "/", "https://example.com/"),
    ],
)
def test_link_prefix_joins_with_single_slash(prefix: str, url: str, expected: str) -> None:
    assert Link("x", url).prefix(prefix).url == expected


def test_activatable_state_transitions() -> None:
    """Given a link When toggled Then is_active reflects the last call."""

    link = Link("Home", "/")
    assert link.is_active() is False

    link.set_active()
    assert link.is_active() is True

    link.set_inactive()
    assert link.is_active() is False

    link.set_active(False)
    assert link.is_active() is False


def test_html_is_rendered_verbatim_and_text_is_escaped() -> None:
    assert Html("<hr>").render() == "<hr>"
    assert Text("<hr>").render() == "&lt;hr&gt;"
    assert str(Html("<b>x</b>")) == "<b>x</b>"


def test_parent_attributes_are_separate_from_own_attributes() -> None:
    link = Link("Home", "/").add_class("link").add_parent_class("item").set_parent_attribute("data-id", "1")

    assert link.parent_attributes() == {"data-id": "1", "class": "item"}
    assert link.attributes().to_dict() == {"class": "link"}


def test_custom_items_default_to_no_parent_attributes() -> None:
    class Divider(Item):
        def is_active(self) -> bool:
            return False

        def set_active(self) -> None:
            return None

        def render(self) -> str:
            return "<hr>"

    assert Divider().parent_attributes() == {}
