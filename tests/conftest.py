"""Shared pytest fixtures for the navmenu test-suite."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from navmenu import Html, Link, Menu


@pytest.fixture
def home_link() -> Link:
    return Link("Home", "/")


@pytest.fixture
def about_link() -> Link:
    return Link("About", "/about")


@pytest.fixture
def sample_menu(home_link: Link, about_link: Link) -> Menu:
    """Return a menu with two links."""

    return Menu.new([home_link, about_link])


@pytest.fixture
def mixed_menu() -> Menu:
    """Return a menu alternating links and raw HTML: [Link, Html, Link]."""

    return Menu.new(
        [
            Link("Home", "/"),
            Html("<span>Divider</span>"),
            Link("Contact", "/contact"),
        ]
    )
