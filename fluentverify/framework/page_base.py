"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation on Selenium.

Provides:
    - Block/Element/HasText capabilities over the page root element
    - The fluent verification chain (``page.verify_presence(...)``)
    - Per-page implicit wait
    - Element wrapping helpers

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import timedelta
from typing import List, Optional, Set, Union

from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webdriver import WebDriver
from selenium.webdriver.remote.webelement import WebElement

from .browser_manager import Session
from .capabilities import Block, Element, HasText, Locator, classes_of
from .elements import WebElementWrapper
from .verification import VerificationMixin


class WebBlock(VerificationMixin, Block, Element, HasText):
    """
    Base class for all page objects and page regions.

    Lookups are scoped to ``ROOT_LOCATOR`` (the document body by default).

    Usage:
        class SearchPage(WebBlock):
            URL_PATH = "/search"

            @property
            def results(self) -> WebElementWrapper:
                return self.element((By.ID, "results"))

        session.navigate_to(SearchPage).verify_presence((By.ID, "results"))
    """

    # Override in subclasses
    URL_PATH: str = "/"
    ROOT_LOCATOR: Locator = (By.TAG_NAME, "body")

    def __init__(
        self,
        session: Session,
        timeout: Optional[Union[float, timedelta]] = None,
    ):
        """
        Initialize page object.

        Args:
            session: Started browser session
            timeout: Implicit wait applied to the session for this page
        """
        self.session = session
        if timeout is not None:
            if isinstance(timeout, timedelta):
                timeout = timeout.total_seconds()
            session.set_wait(timeout)

    @property
    def driver(self) -> WebDriver:
        return self.session.driver

    @property
    def tag(self) -> WebElement:
        """Root element of this block."""
        return self.driver.find_element(*self.ROOT_LOCATOR)

    @property
    def url(self) -> str:
        return self.session.url_for(self.URL_PATH)

    @property
    def text(self) -> str:
        return self.tag.text

    @property
    def classes(self) -> Set[str]:
        return classes_of(self.tag)

    def find_elements(self, locator: Locator) -> List[WebElement]:
        return self.tag.find_elements(*locator)

    def find_element(self, locator: Locator) -> WebElement:
        return self.tag.find_element(*locator)

    def element(self, locator: Locator) -> WebElementWrapper:
        """Wrap the first match of ``locator`` so it can be verified."""
        return WebElementWrapper(self, self.find_element(locator))

    def elements(self, locator: Locator) -> List[WebElementWrapper]:
        return [WebElementWrapper(self, el) for el in self.find_elements(locator)]


__all__ = [
    "WebBlock",
]
