"""Attribute storage shared by menus and menu items."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Mapping


class Attributes:
    """Ordered collection of HTML attributes with a separate class list."""

    def __init__(self, initial: Mapping[str, Any] | None = None) -> None:
        self._attributes: Dict[str, Any] = {}
        self._classes: List[str] = []
        if initial:
            self.set_attributes(initial)

    def set_attribute(self, name: str, value: Any = "") -> "Attributes":
        if name == "class":
            return self.add_class(value)
        self._attributes[name] = value
        return self

    def set_attributes(self, attributes: Mapping[str, Any]) -> "Attributes":
        for name, value in attributes.items():
            self.set_attribute(name, value)
        return self

    def forget_attribute(self, name: str) -> "Attributes":
        if name == "class":
            self._classes = []
        else:
            self._attributes.pop(name, None)
        return self

    def add_class(self, value: str | Iterable[str]) -> "Attributes":
        names = value.split() if isinstance(value, str) else [
            name for entry in value for name in str(entry).split()
        ]
        for name in names:
            if name not in self._classes:
                self._classes.append(name)
        return self

    def merge(self, other: "Attributes") -> "Attributes":
        """Copy attributes and classes from ``other``, overriding on conflict."""

        self._attributes.update(other._attributes)
        self.add_class(other._classes)
        return self

    @property
    def classes(self) -> List[str]:
        return list(self._classes)

    def get(self, name: str, default: Any = None) -> Any:
        if name == "class":
            return " ".join(self._classes) if self._classes else default
        return self._attributes.get(name, default)

    def is_empty(self) -> bool:
        return not self._attributes and not self._classes

    def to_dict(self) -> Dict[str, Any]:
        data = dict(self._attributes)
        if self._classes:
            data["class"] = " ".join(self._classes)
        return data

    def __repr__(self) -> str:
        return f"Attributes({self.to_dict()!r})"


class HtmlAttributes:
    """Mixin giving an item its own element attributes.

    Classes using it create ``_html_attributes`` in their initialiser.
    """

    _html_attributes: Attributes

    def attributes(self) -> Attributes:
        return self._html_attributes

    def set_attribute(self, name: str, value: Any = ""):
        self._html_attributes.set_attribute(name, value)
        return self

    def set_attributes(self, attributes: Mapping[str, Any]):
        self._html_attributes.set_attributes(attributes)
        return self

    def forget_attribute(self, name: str):
        self._html_attributes.forget_attribute(name)
        return self

    def add_class(self, value: str | Iterable[str]):
        self._html_attributes.add_class(value)
        return self


class ParentAttributes:
    """Mixin for attributes rendered on the element wrapping an item."""

    _parent_html_attributes: Attributes

    def set_parent_attribute(self, name: str, value: Any = ""):
        self._parent_html_attributes.set_attribute(name, value)
        return self

    def set_parent_attributes(self, attributes: Mapping[str, Any]):
        self._parent_html_attributes.set_attributes(attributes)
        return self

    def add_parent_class(self, value: str | Iterable[str]):
        self._parent_html_attributes.add_class(value)
        return self

    def parent_attributes(self) -> Dict[str, Any]:
        return self._parent_html_attributes.to_dict()


__all__ = ["Attributes", "HtmlAttributes", "ParentAttributes"]
