"""Menu item contract and the leaf items shipped with navmenu."""

from __future__ import annotations

import html
from abc import ABC, abstractmethod
from typing import Any, Dict

from .attributes import Attributes, HtmlAttributes, ParentAttributes
from .html import render_element


class Item(ABC):
    """Anything that can be placed inside a :class:`~navmenu.menu.Menu`."""

    @abstractmethod
    def is_active(self) -> bool:
        """Return whether the item should be rendered as active."""

    @abstractmethod
    def set_active(self) -> Any:
        """Mark the item as active."""

    @abstractmethod
    def render(self) -> str:
        """Return the item's markup."""

    def parent_attributes(self) -> Dict[str, Any]:
        """Return the attributes for the element wrapping this item."""

        return {}

    def __str__(self) -> str:
        return self.render()


class Activatable:
    """Mixin storing a plain active flag."""

    _active: bool = False

    def is_active(self) -> bool:
        return self._active

    def set_active(self, active: bool = True):
        self._active = bool(active)
        return self

    def set_inactive(self):
        self._active = False
        return self


class _LeafItem(Activatable, ParentAttributes, Item):
    def __init__(self) -> None:
        self._active = False
        self._parent_html_attributes = Attributes()


class Link(HtmlAttributes, _LeafItem):
    """An anchor pointing at ``url``; ``text`` is escaped on render."""

    def __init__(self, text: str, url: str) -> None:
        super().__init__()
        self._html_attributes = Attributes()
        self._text = text
        self._url = url

    @classmethod
    def to(cls, url: str, text: str) -> "Link":
        return cls(text, url)

    @property
    def text(self) -> str:
        return self._text

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        self._url = value

    def prefix(self, prefix: str) -> "Link":
        """Prepend ``prefix`` to the URL, joining the two with a single slash."""

        self._url = f"{prefix.rstrip('/')}/{self._url.lstrip('/')}"
        return self

    def render(self) -> str:
        attributes = {"href": self._url}
        attributes.update(self._html_attributes.to_dict())
        return render_element("a", attributes, html.escape(self._text, quote=False))

    def __repr__(self) -> str:
        return f"Link(text={self._text!r}, url={self._url!r})"


class Html(_LeafItem):
    """Raw markup inserted as-is."""

    def __init__(self, markup: str) -> None:
        super().__init__()
        self._markup = markup

    @property
    def markup(self) -> str:
        return self._markup

    def render(self) -> str:
        return self._markup

    def __repr__(self) -> str:
        return f"Html({self._markup!r})"


class Text(_LeafItem):
    """Plain text, escaped on render."""

    def __init__(self, text: str) -> None:
        super().__init__()
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def render(self) -> str:
        return html.escape(self._text, quote=False)

    def __repr__(self) -> str:
        return f"Text({self._text!r})"


__all__ = ["Activatable", "Html", "Item", "Link", "Text"]
