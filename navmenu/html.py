"""Minimal HTML element serializer used by every renderable item."""

from __future__ import annotations

import html
import re
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from .errors import MarkupError

_SELECTOR_PATTERN = re.compile(
    r"^(?P<tag>[a-zA-Z][a-zA-Z0-9-]*)"
    r"(?P<classes>(?:\.[a-zA-Z0-9_-]+)*)"
    r"(?:#(?P<id>[a-zA-Z0-9_-]+))?$"
)
_ATTRIBUTE_NAME_PATTERN = re.compile(r"^[^\s\"'>/=]+\Z")


def parse_selector(selector: str) -> Tuple[str, List[str], str | None]:
    """Split ``selector`` (``tag.class#id``) into tag, classes and id."""

    match = _SELECTOR_PATTERN.match(selector.strip())
    if match is None:
        raise MarkupError(f"Invalid tag selector '{selector}'")
    classes = [name for name in match.group("classes").split(".") if name]
    return match.group("tag").lower(), classes, match.group("id")


def _class_names(value: Any) -> List[str]:
    if value is None or value is False:
        return []
    if isinstance(value, str):
        return value.split()
    names: List[str] = []
    for entry in value:
        names.extend(str(entry).split())
    return names


def _merge_classes(*groups: Iterable[str]) -> List[str]:
    merged: List[str] = []
    for group in groups:
        for name in group:
            if name not in merged:
                merged.append(name)
    return merged


def _render_attribute(name: str, value: Any) -> str:
    if not _ATTRIBUTE_NAME_PATTERN.match(name):
        raise MarkupError(f"Invalid attribute name '{name}'")
    if value is True:
        return f" {name}"
    if isinstance(value, (list, tuple)):
        value = " ".join(str(entry) for entry in value)
    return f' {name}="{html.escape(str(value), quote=True)}"'


def render_attributes(attributes: Mapping[str, Any]) -> str:
    """Render ``attributes`` as a string of ``name="value"`` pairs."""

    return "".join(
        _render_attribute(name, value)
        for name, value in attributes.items()
        if value is not None and value is not False
    )


def render_element(
    selector: str,
    attributes: Mapping[str, Any] | None = None,
    children: str | Iterable[str] = "",
) -> str:
    """Render a single element.

    Parameters
    ----------
    selector:
        Tag name optionally followed by ``.class`` modifiers and an ``#id``,
        e.g. ``li.active``.
    attributes:
        Ordered attribute mapping. Values are escaped; ``None``/``False`` drop
        the attribute and ``True`` renders it without a value.
    children:
        Markup placed inside the element, joined verbatim.
    """

    tag, selector_classes, element_id = parse_selector(selector)
    source = dict(attributes or {})

    ordered: Dict[str, Any] = {}
    if element_id is not None:
        ordered["id"] = element_id
    classes = _merge_classes(selector_classes, _class_names(source.get("class")))
    if classes and "class" not in source:
        ordered["class"] = classes
    for name, value in source.items():
        if name == "class":
            if classes:
                ordered["class"] = classes
            continue
        if name == "id" and element_id is not None:
            continue
        ordered[name] = value

    content = children if isinstance(children, str) else "".join(children)
    return f"<{tag}{render_attributes(ordered)}>{content}</{tag}>"


__all__ = ["parse_selector", "render_attributes", "render_element"]
