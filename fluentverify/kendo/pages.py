"""
================================================================================
KendoUI Demo Page Objects
================================================================================

Page objects for the public KendoUI demo site, used by the UI test suite.

================================================================================
"""

from __future__ import annotations

from datetime import timedelta

from selenium.webdriver.common.by import By

from fluentverify.framework.browser_manager import Session
from fluentverify.framework.page_base import WebBlock

from .widgets import KendoMultiSelect


class KendoMultiSelectDemoPage(WebBlock):
    """MultiSelect "basic usage" demo."""

    URL_PATH = "/multiselect/index"

    def __init__(self, session: Session):
        super().__init__(session, timedelta(seconds=10))

    @property
    def movies(self) -> KendoMultiSelect:
        return KendoMultiSelect(self, (By.ID, "movies"))
