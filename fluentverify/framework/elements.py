"""
================================================================================
Element Wrappers
================================================================================

Adapters from Selenium ``WebElement`` objects to the verification
capabilities, so any element found on a page can join a verification chain.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, List, Set

import allure
from loguru import logger
from selenium.webdriver.remote.webelement import WebElement

from .capabilities import Block, Element, HasText, Locator, Selectable, classes_of
from .verification import VerificationMixin


class WebElementWrapper(VerificationMixin, Selectable, HasText, Block, Element):
    """
    Wraps a single Selenium element.

    Attributes:
        parent: Object returned by actions that leave the element (e.g. click)
        tag: The underlying Selenium ``WebElement``
    """

    def __init__(self, parent: Any, web_element: WebElement):
        self.parent = parent
        self.tag = web_element

    def __repr__(self) -> str:
        # WebElement.id is held client-side, so repr never queries the browser
        return f"<{type(self).__name__} id={self.tag.id}>"

    @property
    def selected(self) -> bool:
        return self.tag.is_selected()

    @property
    def text(self) -> str:
        return self.tag.text

    @property
    def classes(self) -> Set[str]:
        return classes_of(self.tag)

    def find_elements(self, locator: Locator) -> List[WebElement]:
        return self.tag.find_elements(*locator)

    def click(self) -> Any:
        """Click the element and return the parent for chaining."""
        with allure.step(f"Click {self!r}"):
            self.tag.click()
            logger.debug(f"Clicked {self!r}")
        return self.parent


__all__ = [
    "WebElementWrapper",
]
