"""
================================================================================
Base Page Object
================================================================================

Foundation class for the Page Object Model used by the demo-site scenarios.

Provides:
    - Navigation with a bounded load time (NavigationError on expiry)
    - Required and optional (soft-absence) field interaction
    - Text / visibility / presence queries that treat absence as a value
    - Error-like feedback collection driven by a configurable PatternSet
    - Failure capture (screenshot + URL) for the Allure report

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from .config_loader import ConfigLoader
from .locators import ElementNotFoundError, ElementRef, NavigationError, PatternSet


DEFAULT_BASE_URL = "https://the-internet.herokuapp.com"

# Collects (class attribute, text content) for every element carrying a class.
_CLASS_AND_TEXT_JS = "els => els.map(e => [e.getAttribute('class'), e.textContent])"


class FieldOutcome(str, Enum):
    """Result of filling a field that may not exist on every page variant."""

    FILLED = "filled"
    SKIPPED = "skipped"
    ABSENT = "absent"


class BasePage:
    """
    Base class for all page objects.

    Subclasses declare their element references once, at class level:

        class LoginPage(BasePage):
            URL_PATH = "/login"
            ELEMENTS = {
                "username": ElementRef("username", "#username"),
                ...
            }

            async def login(self, username: str, password: str) -> None:
                await self.fill("username", username)
                ...

    References are never resolved up front. Every operation builds a fresh
    Playwright Locator, so a page object stays valid across navigations.
    """

    URL_PATH: str = "/"
    ELEMENTS: Dict[str, ElementRef] = {}

    def __init__(
        self,
        page: Page,
        base_url: str = "",
        config: Optional[Any] = None,
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page owned by the running scenario
            base_url: Base URL for relative URL_PATHs. Defaults to `ui.base_url`.
            config: Object with a `get(key, default)` method. Defaults to ConfigLoader.
        """
        self.page = page
        self.config = config if config is not None else ConfigLoader()
        if not base_url:
            base_url = self.config.get("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")

        self.navigation_timeout = self.config.get("ui.navigation_timeout", 30000)
        self.action_timeout = self.config.get("ui.action_timeout", 10000)
        self.optional_timeout = self.config.get("ui.optional_field_timeout", 2000)
        self.error_patterns = PatternSet.from_config(self.config.get("error_patterns"))

    @property
    def url(self) -> str:
        """Full page URL; absolute URL_PATHs are used as-is."""
        if self.URL_PATH.startswith(("http://", "https://")):
            return self.URL_PATH
        return f"{self.base_url}{self.URL_PATH}"

    @property
    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Element Resolution
    # =========================================================================

    def element_ref(self, name: str) -> ElementRef:
        try:
            return self.ELEMENTS[name]
        except KeyError:
            raise ElementNotFoundError(
                f"No locator defined for element '{name}' on {type(self).__name__}"
            ) from None

    def locator(self, name: str) -> Locator:
        """Resolve a named element reference into a fresh Playwright Locator."""
        return self.page.locator(self.element_ref(name).selector)

    def error_locator(self) -> Locator:
        """Locator matching every error-like region of the configured pattern set."""
        return self.page.locator(self.error_patterns.selector)

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate(self, wait_for: str = "load") -> None:
        """
        Navigate to this page.

        Args:
            wait_for: Wait condition - 'load', 'domcontentloaded', 'networkidle'

        Raises:
            NavigationError: The page did not load within `ui.navigation_timeout`
        """
        with allure.step(f"Navigate to {self.url}"):
            try:
                await self.page.goto(
                    self.url, wait_until=wait_for, timeout=self.navigation_timeout
                )
            except PlaywrightTimeoutError as e:
                raise NavigationError(
                    f"{type(self).__name__} did not load {self.url} "
                    f"within {self.navigation_timeout}ms"
                ) from e
            logger.info(f"Navigated to: {self.url}")

    # =========================================================================
    # Actions
    # =========================================================================

    async def fill(self, name: str, value: str) -> None:
        """Fill a required input. Locator failures propagate."""
        shown = "*" * len(value) if "password" in name.lower() else value
        with allure.step(f"Fill {name}: {shown}"):
            await self.locator(name).fill(value, timeout=self.action_timeout)
            logger.debug(f"Filled {name}")

    async def fill_optional(self, name: str, value: Optional[str]) -> FieldOutcome:
        """
        Fill an input that may not exist on this page variant.

        Returns:
            SKIPPED for an empty value, ABSENT when the field could not be
            located within `ui.optional_field_timeout`, FILLED otherwise.
        """
        if not value:
            return FieldOutcome.SKIPPED
        with allure.step(f"Fill optional {name}: {value}"):
            try:
                await self.locator(name).fill(value, timeout=self.optional_timeout)
            except PlaywrightTimeoutError:
                logger.debug(f"Optional field '{name}' not found, skipping")
                return FieldOutcome.ABSENT
            logger.debug(f"Filled optional {name}")
            return FieldOutcome.FILLED

    async def fill_fields(
        self,
        values: Dict[str, Optional[str]],
        optional: Iterable[str] = (),
    ) -> Dict[str, FieldOutcome]:
        """
        Fill several fields in order, skipping empty values.

        Args:
            values: Element name -> value, filled in insertion order
            optional: Names of fields that may be missing on some page variants

        Returns:
            Element name -> FieldOutcome
        """
        optional = set(optional)
        outcomes: Dict[str, FieldOutcome] = {}
        for name, value in values.items():
            if name in optional:
                outcomes[name] = await self.fill_optional(name, value)
            elif value:
                await self.fill(name, value)
                outcomes[name] = FieldOutcome.FILLED
            else:
                outcomes[name] = FieldOutcome.SKIPPED
        return outcomes

    async def click(self, name: str) -> None:
        """Click a required element (button or anchor styled as one)."""
        with allure.step(f"Click: {name}"):
            await self.locator(name).click(timeout=self.action_timeout)
            logger.debug(f"Clicked {name}")

    # =========================================================================
    # Queries (absence is a value, never an error)
    # =========================================================================

    async def get_text(self, name: str) -> str:
        """Trimmed text of the first matching element, or "" when absent."""
        try:
            text = await self.locator(name).first.text_content(timeout=self.optional_timeout)
        except PlaywrightTimeoutError:
            logger.debug(f"Region '{name}' not present, returning empty text")
            return ""
        return (text or "").strip()

    async def get_error_texts(self) -> List[str]:
        """
        Texts of every error-like region, in document order.

        Each element carrying a class attribute is checked against the
        configured PatternSet. Returns [] when nothing matches.
        """
        candidates = await self.page.locator("[class]").evaluate_all(_CLASS_AND_TEXT_JS)
        texts = self.error_patterns.filter_texts(candidates)
        logger.debug(f"Found {len(texts)} error-like region(s)")
        return texts

    async def is_visible(self, name: str, timeout: int = 0) -> bool:
        """
        Check whether an element is rendered and visible.

        Args:
            name: Element name
            timeout: Optionally wait up to this many ms for it to appear
        """
        locator = self.locator(name).first
        if timeout:
            try:
                await locator.wait_for(state="visible", timeout=timeout)
            except PlaywrightTimeoutError:
                return False
        return await locator.is_visible()

    async def has_element(self, name: str) -> bool:
        """Whether the element exists in the DOM (waits up to the optional-field timeout)."""
        try:
            await self.locator(name).first.wait_for(
                state="attached", timeout=self.optional_timeout
            )
        except PlaywrightTimeoutError:
            logger.debug(f"Element '{name}' not present on {self.current_url}")
            return False
        return True

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def capture_failure(self, test_name: str, output_dir: Optional[Path] = None) -> Path:
        """
        Capture debugging information on test failure.

        Saves a full-page screenshot and attaches it, together with the
        current URL, to the Allure report.

        Returns:
            Path to saved screenshot
        """
        output_dir = Path(output_dir or self.config.get("run.artifacts_dir", "reports/artifacts"))
        output_dir.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        filepath = output_dir / f"failure_{test_name}_{timestamp}.png"

        with allure.step("Capture failure details"):
            screenshot = await self.page.screenshot(path=str(filepath), full_page=True)
            allure.attach(
                screenshot,
                name=f"failure_{test_name}",
                attachment_type=allure.attachment_type.PNG,
            )
            allure.attach(
                self.current_url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT,
            )

        logger.info(f"Failure screenshot saved: {filepath}")
        return filepath


__all__ = [
    "BasePage",
    "FieldOutcome",
]
