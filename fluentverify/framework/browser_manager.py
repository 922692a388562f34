"""
================================================================================
Browser Session
================================================================================

Selenium WebDriver lifecycle management for page objects.

Features:
    - Chrome / Firefox driver creation from configuration
    - Implicit wait configuration (the only waiting strategy used)
    - Navigation and page object construction
    - Screenshot capture with Allure attachment

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any, List, Optional, Type, TypeVar

import allure
from loguru import logger
from selenium import webdriver
from selenium.webdriver.remote.webdriver import WebDriver

from fluentverify.common import get_config


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent.parent / "screenshots"

TPage = TypeVar("TPage")


class Session:
    """
    Owns one Selenium driver and hands it to page objects.

    Usage:
        with Session() as session:
            page = session.navigate_to(KendoMultiSelectDemoPage)
            page.movies.select("Taxi Driver")

        # Or around an existing driver
        session = Session(driver=webdriver.Chrome())
    """

    DEFAULT_CHROME_ARGS: List[str] = [
        "--disable-gpu",
        "--no-sandbox",
        "--disable-dev-shm-usage",
        "--disable-extensions",
        "--disable-notifications",
        "--ignore-certificate-errors",
    ]

    def __init__(
        self,
        browser: Optional[str] = None,
        headless: Optional[bool] = None,
        implicit_wait: Optional[float] = None,
        base_url: Optional[str] = None,
        driver: Optional[WebDriver] = None,
    ):
        """
        Initialize session.

        Args:
            browser: 'chrome' or 'firefox'. Defaults to ``browser.name``.
            headless: Run headless. Defaults to ``browser.headless``.
            implicit_wait: Seconds Selenium waits for elements.
                Defaults to ``browser.implicit_wait``.
            base_url: Prefix for page URL paths. Defaults to ``ui.base_url``.
            driver: Already-created driver to adopt instead of launching one
        """
        self.browser = (browser or get_config("browser.name", "chrome")).lower()
        self.headless = get_config("browser.headless", True) if headless is None else headless
        self.implicit_wait = (
            get_config("browser.implicit_wait", 10) if implicit_wait is None else implicit_wait
        )
        self.base_url = (base_url or get_config("ui.base_url", "")).rstrip("/")

        self._driver: Optional[WebDriver] = driver
        if driver is not None:
            driver.implicitly_wait(self.implicit_wait)

    def __enter__(self) -> "Session":
        self.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def _chrome_options(self) -> webdriver.ChromeOptions:
        options = webdriver.ChromeOptions()
        for arg in self.DEFAULT_CHROME_ARGS:
            options.add_argument(arg)
        if self.headless:
            options.add_argument("--headless=new")
        options.add_argument(f"--window-size={get_config('browser.window_size', '1920,1080')}")
        return options

    def _firefox_options(self) -> webdriver.FirefoxOptions:
        options = webdriver.FirefoxOptions()
        if self.headless:
            options.add_argument("-headless")
        return options

    def start(self) -> None:
        """Launch the configured browser unless a driver was supplied."""
        if self._driver is not None:
            return

        if self.browser == "firefox":
            self._driver = webdriver.Firefox(options=self._firefox_options())
        elif self.browser == "chrome":
            self._driver = webdriver.Chrome(options=self._chrome_options())
        else:
            raise ValueError(f"Unsupported browser: {self.browser}")

        self._driver.implicitly_wait(self.implicit_wait)
        logger.debug(f"Browser started: {self.browser} (headless={self.headless})")

    def close(self) -> None:
        """Quit the driver."""
        if self._driver:
            self._driver.quit()
            self._driver = None
            logger.debug("Browser closed")

    @property
    def driver(self) -> WebDriver:
        if self._driver is None:
            raise RuntimeError("Session not started. Call start() first.")
        return self._driver

    def set_wait(self, seconds: float) -> None:
        """Change Selenium's implicit wait for subsequent lookups."""
        self.driver.implicitly_wait(seconds)
        self.implicit_wait = seconds

    def url_for(self, path: str) -> str:
        if path.startswith(("http://", "https://")):
            return path
        return f"{self.base_url}{path}"

    def navigate_to(self, page_cls: Type[TPage], *args: Any, **kwargs: Any) -> TPage:
        """
        Open ``page_cls.URL_PATH`` and return a page object for it.

        Args:
            page_cls: Page object class exposing ``URL_PATH``
            *args, **kwargs: Extra page constructor arguments
        """
        url = self.url_for(getattr(page_cls, "URL_PATH", ""))
        with allure.step(f"Navigate to {url}"):
            self.driver.get(url)
            logger.debug(f"Navigated to: {url}")
        return self.current_block(page_cls, *args, **kwargs)

    def current_block(self, page_cls: Type[TPage], *args: Any, **kwargs: Any) -> TPage:
        """Build a page object over whatever the browser currently shows."""
        return page_cls(self, *args, **kwargs)

    def screenshot(self, name: str, attach_to_allure: bool = True) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = SCREENSHOT_DIR / f"{name}_{timestamp}.png"

        png = self.driver.get_screenshot_as_png()
        filepath.write_bytes(png)

        if attach_to_allure:
            allure.attach(png, name=name, attachment_type=allure.attachment_type.PNG)

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath


__all__ = [
    "Session",
    "SCREENSHOT_DIR",
]
