"""Composable HTML navigation menus.

Build a :class:`Menu` from items, attach filters or active-state callbacks and
render it::

    menu = Menu.new([Link("Home", "/"), Link("About", "/about")])
    menu.render()
    # '<ul><li><a href="/">Home</a></li><li><a href="/about">About</a></li></ul>'
"""

from .attributes import Attributes, HtmlAttributes, ParentAttributes
from .config import MenuConfig, load_menu_config
from .errors import InvalidItemError, MarkupError, NavMenuError
from .filters import FilterRegistry, MenuFilter, infer_item_type
from .html import render_element
from .items import Activatable, Html, Item, Link, Text
from .logging_config import configure_logging, reset_logging
from .menu import Menu

__all__ = [
    "Activatable",
    "Attributes",
    "FilterRegistry",
    "Html",
    "HtmlAttributes",
    "InvalidItemError",
    "Item",
    "Link",
    "MarkupError",
    "Menu",
    "MenuConfig",
    "MenuFilter",
    "NavMenuError",
    "ParentAttributes",
    "Text",
    "configure_logging",
    "infer_item_type",
    "load_menu_config",
    "render_element",
    "reset_logging",
]
