"""Composite menu: an ordered, filterable collection of items."""

from __future__ import annotations

import logging
from typing import Any, Callable, Iterable, Iterator, List, Optional, Tuple, TypeVar

from .attributes import Attributes, HtmlAttributes, ParentAttributes
from .config import MenuConfig
from .errors import InvalidItemError
from .filters import FilterRegistry, ItemType, infer_item_type, select
from .html import render_element
from .items import Html, Item, Link, Text
from .tracing import log_event, trace

_LOGGER = logging.getLogger(__name__)

ResultT = TypeVar("ResultT")


class Menu(HtmlAttributes, ParentAttributes, Item):
    """A list of items that renders as ``<ul>`` and can itself be nested.

    Most methods taking a callback restrict it to the items matching the
    annotation of its first parameter (see :mod:`navmenu.filters`). Pass
    ``item_type`` to set the restriction explicitly.

    Nested menus are held by reference: one instance may sit under several
    parents and changes to it show up in all of them.
    """

    def __init__(self, *items: Item, config: Optional[MenuConfig] = None) -> None:
        self._items: List[Item] = []
        self._filters = FilterRegistry()
        self._prepend = ""
        self._append = ""
        self._active = False
        self._config = config or MenuConfig()
        self._html_attributes = Attributes()
        self._parent_html_attributes = Attributes()
        for item in items:
            self._items.append(self._ensure_item(item))

    @classmethod
    def new(
        cls,
        items: Optional[Iterable[Item]] = None,
        config: Optional[MenuConfig] = None,
    ) -> "Menu":
        """Create a menu, optionally prefilled with ``items``."""

        return cls(*(items or ()), config=config)

    @property
    def config(self) -> MenuConfig:
        return self._config

    @property
    def items(self) -> Tuple[Item, ...]:
        return tuple(self._items)

    @property
    def filters(self) -> FilterRegistry:
        return self._filters

    # ------------------------------------------------------------------
    # Adding items
    # ------------------------------------------------------------------
    def _ensure_item(self, item: Any) -> Item:
        if not isinstance(item, Item):
            raise InvalidItemError(
                f"Menu items must implement Item, got {type(item).__name__}"
            )
        if item is self:
            raise InvalidItemError("A menu cannot be added to itself")
        return item

    def add(self, item: Item) -> "Menu":
        """Add ``item`` unless one of the registered filters returns ``False``."""

        self._ensure_item(item)
        if not self._filters.apply(item):
            log_event(
                _LOGGER,
                logging.DEBUG,
                "menu.add.rejected",
                item=type(item).__name__,
                filters=len(self._filters),
            )
            return self

        self._items.append(item)
        return self

    def add_if(self, condition: Any, item: Item) -> "Menu":
        if condition:
            self.add(item)
        return self

    def link(self, text: str, url: str) -> "Menu":
        return self.add(Link(text, url))

    def link_if(self, condition: Any, text: str, url: str) -> "Menu":
        if condition:
            self.link(text, url)
        return self

    def html(self, markup: str) -> "Menu":
        return self.add(Html(markup))

    def html_if(self, condition: Any, markup: str) -> "Menu":
        if condition:
            self.html(markup)
        return self

    def text(self, content: str) -> "Menu":
        return self.add(Text(content))

    def submenu(self, menu: "Menu") -> "Menu":
        if not isinstance(menu, Menu):
            raise InvalidItemError(f"Expected a Menu, got {type(menu).__name__}")
        return self.add(menu)

    # ------------------------------------------------------------------
    # Bulk operations
    # ------------------------------------------------------------------
    def _scope(
        self, callback: Callable[..., Any], item_type: Optional[ItemType]
    ) -> List[Item]:
        if item_type is None:
            item_type = infer_item_type(callback)
        return select(self._items, item_type)

    def map(
        self,
        callback: Callable[[Any], ResultT],
        *,
        item_type: Optional[ItemType] = None,
    ) -> List[ResultT]:
        """Return ``callback(item)`` for every matching item."""

        return [callback(item) for item in self._scope(callback, item_type)]

    def each(
        self,
        callback: Callable[[Any], Any],
        *,
        item_type: Optional[ItemType] = None,
    ) -> "Menu":
        for item in self._scope(callback, item_type):
            callback(item)
        return self

    def register_filter(
        self,
        callback: Callable[[Any], Any],
        *,
        item_type: Optional[ItemType] = None,
    ) -> "Menu":
        """Register a filter for items added from now on.

        A filter returning exactly ``False`` keeps the item out of the menu.
        Items already in the menu are left alone.
        """

        self._filters.register(callback, item_type)
        return self

    def apply_to_all(
        self,
        callback: Callable[[Any], Any],
        *,
        item_type: Optional[ItemType] = None,
    ) -> "Menu":
        """Run ``callback`` on every current item and on every future one.

        Current items are only visited; a ``False`` result does not remove
        them. For items added later the callback is a regular filter.
        """

        self.each(callback, item_type=item_type)
        self.register_filter(callback, item_type=item_type)
        return self

    def prefix_links(self, prefix: str) -> "Menu":
        def _prefix(link: Link) -> None:
            link.prefix(prefix)

        return self.apply_to_all(_prefix, item_type=Link)

    # ------------------------------------------------------------------
    # Wrapping fragments
    # ------------------------------------------------------------------
    @property
    def prepended(self) -> str:
        return self._prepend

    @property
    def appended(self) -> str:
        return self._append

    def prepend(self, text: str) -> "Menu":
        """Render ``text`` verbatim before the menu."""

        self._prepend = text
        return self

    def prepend_if(self, condition: Any, text: str) -> "Menu":
        if condition:
            self.prepend(text)
        return self

    def append(self, text: str) -> "Menu":
        """Render ``text`` verbatim after the menu."""

        self._append = text
        return self

    def append_if(self, condition: Any, text: str) -> "Menu":
        if condition:
            self.append(text)
        return self

    # ------------------------------------------------------------------
    # Active state
    # ------------------------------------------------------------------
    def is_active(self) -> bool:
        if self._active:
            return True
        return any(item.is_active() for item in self._items)

    def set_active(
        self,
        callback: Optional[Callable[[Any], Any]] = None,
        *,
        item_type: Optional[ItemType] = None,
    ) -> "Menu":
        """Activate every matching item for which ``callback`` is truthy.

        Without a callback the menu itself is marked active, which is what a
        parent menu does when it activates a nested menu. Nothing is ever
        deactivated here.
        """

        if callback is None:
            self._active = True
            return self

        for item in self._scope(callback, item_type):
            if callback(item):
                item.set_active()
        return self

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def _render_item(self, item: Item) -> str:
        return render_element(
            self._config.item_selector(item.is_active()),
            item.parent_attributes(),
            item.render(),
        )

    def render(self) -> str:
        with trace("menu.render", logger=_LOGGER, level=logging.DEBUG, items=len(self._items)):
            menu = render_element(
                self._config.menu_tag,
                self._html_attributes.to_dict(),
                [self._render_item(item) for item in self._items],
            )
        return f"{self._prepend}{menu}{self._append}"

    def __str__(self) -> str:
        return self.render()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Item]:
        return iter(tuple(self._items))

    def __repr__(self) -> str:
        return f"Menu(items={len(self._items)}, filters={len(self._filters)})"


__all__ = ["Menu"]
