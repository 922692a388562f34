"""
================================================================================
Capabilities
================================================================================

Minimal interfaces consumed by the verification chain.

Each capability names exactly one accessor:
    - Selectable: ``selected`` state
    - HasText: visible ``text``
    - Block: ``find_elements(locator)`` over descendants
    - Element: CSS ``classes`` of the underlying browser element

Page objects and element wrappers inherit the capabilities they support.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterable, Set, Tuple

# Selenium locator pair, e.g. (By.ID, "movies")
Locator = Tuple[str, str]


class Selectable(ABC):
    """Something that can be selected (checkbox, list option, tab...)."""

    @property
    @abstractmethod
    def selected(self) -> bool:
        ...


class HasText(ABC):
    """Something that exposes visible text."""

    @property
    @abstractmethod
    def text(self) -> str:
        ...


class Block(ABC):
    """A page or page region that can be searched for descendants."""

    @abstractmethod
    def find_elements(self, locator: Locator) -> Iterable[Any]:
        """Return the (possibly empty) matches for ``locator``."""


class Element(ABC):
    """Something backed by a browser element carrying CSS classes."""

    @property
    @abstractmethod
    def classes(self) -> Set[str]:
        ...


def classes_of(web_element: Any) -> Set[str]:
    """Return the CSS classes of a Selenium element as a set."""
    return set((web_element.get_attribute("class") or "").split())


def describe_locator(locator: Locator) -> str:
    """
    Render a locator for failure messages.

    >>> describe_locator(("id", "movies"))
    'By.id: movies'
    """
    by, value = locator
    return f"By.{by}: {value}"


__all__ = [
    "Locator",
    "Selectable",
    "HasText",
    "Block",
    "Element",
    "classes_of",
    "describe_locator",
]
