"""
================================================================================
Form Page Object (Async / Playwright)
================================================================================

Page object for a generic submission form, by default
https://formy-project.herokuapp.com/form.

The form's markup is owned by a third party and differs between variants:
the email field is optional and error feedback is detected with the
configured error-like class patterns rather than one fixed selector.

================================================================================
"""

from __future__ import annotations

from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator

from e2e_suites.ui_testing.framework.locators import ElementRef
from e2e_suites.ui_testing.framework.page_base import BasePage, FieldOutcome


DEFAULT_FORM_URL = "https://formy-project.herokuapp.com/form"


class FormPage(BasePage):
    """Form page object (async)."""

    ELEMENTS = {
        "first_name": ElementRef("first_name", "#first-name"),
        "last_name": ElementRef("last_name", "#last-name"),
        "email": ElementRef("email", "#email"),
        "submit_button": ElementRef("submit_button", "a.btn.btn-lg.btn-primary"),
        "success_message": ElementRef("success_message", ".alert.alert-success"),
    }

    OPTIONAL_FIELDS = ("email",)

    @property
    def url(self) -> str:
        return self.config.get("ui.form_url", DEFAULT_FORM_URL)

    @property
    def success_message(self) -> Locator:
        return self.locator("success_message")

    @property
    def error_messages(self) -> Locator:
        return self.error_locator()

    @allure.step("Open form page")
    async def open(self) -> "FormPage":
        await self.navigate()
        return self

    @allure.step("Fill form")
    async def fill_form(
        self,
        first_name: Optional[str],
        last_name: Optional[str],
        email: Optional[str] = None,
    ) -> Dict[str, FieldOutcome]:
        """
        Fill the form, skipping empty values.

        The email field is optional on some variants; when it cannot be
        found it is reported as ABSENT instead of failing the scenario.
        """
        outcomes = await self.fill_fields(
            {"first_name": first_name, "last_name": last_name, "email": email},
            optional=self.OPTIONAL_FIELDS,
        )
        summary = ", ".join(f"{name}={outcome.value}" for name, outcome in outcomes.items())
        logger.debug(f"Form fill outcomes: {summary}")
        return outcomes

    @allure.step("Submit form")
    async def submit_form(self) -> None:
        await self.click("submit_button")

    @allure.step("Submit empty form")
    async def submit_empty_form(self) -> None:
        await self.click("submit_button")

    async def get_error_messages(self) -> List[str]:
        return await self.get_error_texts()

    async def has_error_messages(self) -> bool:
        return bool(await self.get_error_texts())

    async def get_success_message(self) -> str:
        return await self.get_text("success_message")

    async def is_success_message_visible(self, timeout: int = 0) -> bool:
        return await self.is_visible("success_message", timeout=timeout)

    async def has_email_field(self) -> bool:
        return await self.has_element("email")

    async def is_submitted(self, timeout: Optional[int] = None) -> bool:
        """
        Whether the last submission went through.

        Accepts either a visible success banner or a URL that left the form.
        """
        if timeout is None:
            timeout = self.config.get("ui.settle_timeout", 5000)
        if await self.is_success_message_visible(timeout=timeout):
            return True
        return self.current_url.rstrip("/") != self.url.rstrip("/")
