"""
================================================================================
KendoUI Widgets
================================================================================

Wrappers for Kendo widgets that enhance a native element.

KendoMultiSelect hides the original ``<select>`` and renders:
    - a wrapper ``div.k-multiselect`` holding the chips and a text input
    - a popup list ``ul#<select id>_listbox`` with one ``li`` per option

Selected options in the popup carry ``k-state-selected`` (older themes)
or ``k-selected`` (current themes).

================================================================================
"""

from __future__ import annotations

from typing import Any, List, Set

import allure
from loguru import logger
from selenium.webdriver.common.by import By
from selenium.webdriver.remote.webelement import WebElement

from fluentverify.framework.capabilities import Block, Element, Locator, classes_of
from fluentverify.framework.elements import WebElementWrapper
from fluentverify.framework.exceptions import VerificationError
from fluentverify.framework.verification import VerificationMixin

SELECTED_CLASSES = ("k-state-selected", "k-selected")

WRAPPER_XPATH = "./ancestor::*[contains(concat(' ', normalize-space(@class), ' '), ' k-multiselect ')][1]"


class KendoMultiSelectOption(WebElementWrapper):
    """One ``li`` of the multiselect popup list."""

    @property
    def selected(self) -> bool:
        return any(name in self.classes for name in SELECTED_CLASSES)

    @property
    def text(self) -> str:
        # The popup is hidden until opened, so visible text may be empty
        return (self.tag.get_attribute("textContent") or "").strip()


class KendoMultiSelect(VerificationMixin, Block, Element):
    """
    Kendo MultiSelect located through its original ``<select>``.

    Usage:
        page.movies.select("Taxi Driver").movies.verify(
            lambda m: m.selected_texts == ["Taxi Driver"],
            "that only Taxi Driver is selected.",
        )
    """

    def __init__(self, parent: Any, locator: Locator):
        """
        Args:
            parent: Block the widget lives in; returned by ``select``
            locator: Locator of the original ``<select>`` element
        """
        self.parent = parent
        self.locator = locator

    def __repr__(self) -> str:
        return f"<KendoMultiSelect {self.locator!r}>"

    @property
    def tag(self) -> WebElement:
        """The original (hidden) ``<select>``."""
        return self.parent.find_element(self.locator)

    @property
    def widget_id(self) -> str:
        return self.tag.get_attribute("id")

    @property
    def wrapper(self) -> WebElement:
        return self.tag.find_element(By.XPATH, WRAPPER_XPATH)

    @property
    def input(self) -> WebElement:
        return self.wrapper.find_element(By.TAG_NAME, "input")

    @property
    def classes(self) -> Set[str]:
        return classes_of(self.wrapper)

    def find_elements(self, locator: Locator) -> List[WebElement]:
        return self.wrapper.find_elements(*locator)

    @property
    def options(self) -> List[KendoMultiSelectOption]:
        items = self.parent.driver.find_elements(By.CSS_SELECTOR, f"#{self.widget_id}_listbox li")
        return [KendoMultiSelectOption(self.parent, item) for item in items]

    @property
    def selected_options(self) -> List[KendoMultiSelectOption]:
        return [option for option in self.options if option.selected]

    @property
    def selected_texts(self) -> List[str]:
        return [option.text for option in self.selected_options]

    def option(self, text: str) -> KendoMultiSelectOption:
        """
        Find the option whose text equals ``text``.

        Raises:
            VerificationError: If no option has that text
        """
        for option in self.options:
            if option.text == text:
                return option
        raise VerificationError(f"Couldn't find option {text} in {self!r}")

    def open(self) -> "KendoMultiSelect":
        """Focus the input so Kendo shows the popup list."""
        self.input.click()
        return self

    def select(self, text: str) -> Any:
        """
        Select the option with ``text`` and return the parent block.

        Args:
            text: Exact option text
        """
        with allure.step(f"Select '{text}' in {self!r}"):
            self.open()
            parent = self.option(text).click()
            logger.debug(f"Selected {text!r} in {self!r}")
        return parent


__all__ = [
    "KendoMultiSelect",
    "KendoMultiSelectOption",
    "SELECTED_CLASSES",
]
