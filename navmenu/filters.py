"""Type-scoped callbacks applied to menu items.

A callback scopes itself to a subset of items through the annotation of its
first parameter::

    def only_links(link: Link) -> bool:
        return link.url.startswith("/")

Callbacks without a usable annotation apply to every item.
"""

from __future__ import annotations

import functools
import inspect
import logging
import types
import typing
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, Iterator, List, Optional, Tuple, Union

from .tracing import log_event

_LOGGER = logging.getLogger(__name__)

ItemType = Union[type, Tuple[type, ...]]

_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


def _annotation_globals(callback: Callable[..., Any]) -> Dict[str, Any]:
    target: Any = callback
    while isinstance(target, functools.partial):
        target = target.func
    target = getattr(target, "__func__", target)
    if not inspect.isfunction(target) and not inspect.isclass(target):
        target = getattr(type(target), "__call__", target)
    target = inspect.unwrap(target)
    return getattr(target, "__globals__", {})


def _resolve_annotation(callback: Callable[..., Any], annotation: Any) -> Any:
    """Evaluate a single string annotation in the callback's module."""

    if not isinstance(annotation, str):
        return annotation
    try:
        return eval(annotation, dict(_annotation_globals(callback)))  # noqa: S307
    except (NameError, SyntaxError, AttributeError, TypeError):
        return None


def _first_parameter(callback: Callable[..., Any]) -> Optional[inspect.Parameter]:
    try:
        signature = inspect.signature(callback, eval_str=True)
    except (NameError, SyntaxError, TypeError, AttributeError):
        # Another annotation is unresolvable; resolve only the first one below.
        try:
            signature = inspect.signature(callback)
        except (TypeError, ValueError):
            return None
    except ValueError:
        return None

    for parameter in signature.parameters.values():
        if parameter.kind in _POSITIONAL_KINDS:
            return parameter.replace(
                annotation=_resolve_annotation(callback, parameter.annotation)
            )
    return None


def _as_item_type(annotation: Any) -> Optional[ItemType]:
    if annotation is Any:
        return None

    if inspect.isclass(annotation) and typing.get_origin(annotation) is None:
        return annotation

    if typing.get_origin(annotation) in (Union, types.UnionType):
        members = tuple(
            member
            for member in typing.get_args(annotation)
            if inspect.isclass(member) and member is not type(None)
        )
        return members or None

    return None


def infer_item_type(callback: Callable[..., Any]) -> Optional[ItemType]:
    """Return the class(es) annotated on ``callback``'s first parameter.

    ``None`` means the callback is unconstrained: it takes no parameters, its
    first parameter is unannotated, or the annotation is not a class.
    """

    parameter = _first_parameter(callback)
    if parameter is None or parameter.annotation is inspect.Parameter.empty:
        return None
    return _as_item_type(parameter.annotation)


def matches(item: Any, item_type: Optional[ItemType]) -> bool:
    return item_type is None or isinstance(item, item_type)


def select(items: Iterable[Any], item_type: Optional[ItemType]) -> List[Any]:
    """Return the items matching ``item_type``, preserving their order."""

    return [item for item in items if matches(item, item_type)]


def _type_name(item_type: Optional[ItemType]) -> Optional[str]:
    if item_type is None:
        return None
    if isinstance(item_type, tuple):
        return " | ".join(member.__qualname__ for member in item_type)
    return item_type.__qualname__


@dataclass(frozen=True)
class MenuFilter:
    """A registered callback and the item type it is restricted to."""

    item_type: Optional[ItemType]
    callback: Callable[[Any], Any]

    def applies_to(self, item: Any) -> bool:
        return matches(item, self.item_type)

    def accepts(self, item: Any) -> bool:
        """Run the callback on ``item``; only a literal ``False`` rejects it."""

        if not self.applies_to(item):
            return True
        return self.callback(item) is not False


class FilterRegistry:
    """Ordered list of filters consulted whenever an item is added."""

    def __init__(self) -> None:
        self._filters: List[MenuFilter] = []

    def register(
        self,
        callback: Callable[[Any], Any],
        item_type: Optional[ItemType] = None,
    ) -> MenuFilter:
        entry = MenuFilter(
            item_type=item_type if item_type is not None else infer_item_type(callback),
            callback=callback,
        )
        self._filters.append(entry)
        log_event(
            _LOGGER,
            logging.DEBUG,
            "filters.register",
            position=len(self._filters),
            item_type=_type_name(entry.item_type),
        )
        return entry

    def apply(self, item: Any) -> bool:
        """Return ``False`` as soon as one filter rejects ``item``."""

        for position, entry in enumerate(self._filters, start=1):
            if not entry.accepts(item):
                log_event(
                    _LOGGER,
                    logging.DEBUG,
                    "filters.rejected",
                    position=position,
                    item=type(item).__name__,
                )
                return False
        return True

    def __iter__(self) -> Iterator[MenuFilter]:
        return iter(list(self._filters))

    def __len__(self) -> int:
        return len(self._filters)


__all__ = [
    "FilterRegistry",
    "ItemType",
    "MenuFilter",
    "infer_item_type",
    "matches",
    "select",
]
