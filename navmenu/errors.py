"""Exceptions raised by the navmenu package."""

from __future__ import annotations


class NavMenuError(Exception):
    """Base class for every error raised by navmenu."""


class InvalidItemError(NavMenuError, TypeError):
    """Raised when something that is not a menu item is added to a menu."""


class MarkupError(NavMenuError, ValueError):
    """Raised when the markup serializer receives an unusable tag selector."""


__all__ = ["NavMenuError", "InvalidItemError", "MarkupError"]
