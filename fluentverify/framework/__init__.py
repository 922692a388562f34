"""
================================================================================
Verification Framework
================================================================================

Selenium-based page object framework with a fluent verification chain.

Components:
    - verification: chainable verify_* checks raising VerificationError
    - capabilities: Selectable / HasText / Block / Element interfaces
    - elements: WebElement wrapper implementing the capabilities
    - page_base: base page object
    - browser_manager: Selenium session lifecycle

Author: Automation Team
License: MIT
================================================================================
"""

from .browser_manager import Session
from .capabilities import Block, Element, HasText, Locator, Selectable
from .elements import WebElementWrapper
from .exceptions import VerificationError
from .page_base import WebBlock
from .verification import (
    VerificationMixin,
    store,
    verify,
    verify_absence,
    verify_absence_of,
    verify_classes,
    verify_element_classes,
    verify_presence,
    verify_presence_of,
    verify_selected,
    verify_text,
    verify_text_contains,
    verify_text_mismatch,
    verify_that,
)

__all__ = [
    "Session",
    "Block",
    "Element",
    "HasText",
    "Locator",
    "Selectable",
    "WebElementWrapper",
    "VerificationError",
    "WebBlock",
    "VerificationMixin",
    "store",
    "verify",
    "verify_absence",
    "verify_absence_of",
    "verify_classes",
    "verify_element_classes",
    "verify_presence",
    "verify_presence_of",
    "verify_selected",
    "verify_text",
    "verify_text_contains",
    "verify_text_mismatch",
    "verify_that",
]
