"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Page object for https://the-internet.herokuapp.com/login.

The page renders a single `#flash` banner after submission; its modifier
class (`success` / `error`) tells the two outcomes apart.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger
from playwright.async_api import Locator

from e2e_suites.ui_testing.framework.locators import ElementRef
from e2e_suites.ui_testing.framework.page_base import BasePage


class LoginPage(BasePage):
    """Login page object (async)."""

    URL_PATH = "/login"

    ELEMENTS = {
        "username": ElementRef("username", "#username"),
        "password": ElementRef("password", "#password"),
        "login_button": ElementRef("login_button", 'button[type="submit"]'),
        "success_message": ElementRef("success_message", "#flash.flash.success"),
        "error_message": ElementRef("error_message", "#flash.flash.error"),
    }

    @property
    def success_message(self) -> Locator:
        return self.locator("success_message")

    @property
    def error_message(self) -> Locator:
        return self.locator("error_message")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page."""
        await self.navigate()
        return self

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """
        Fill both credentials and submit.

        Empty values are still written so the form submits exactly what the
        scenario asked for.
        """
        await self.fill("username", username)
        await self.fill("password", password)
        await self.click("login_button")
        logger.info(f"Submitted login form for user '{username}'")

    async def get_success_message(self) -> str:
        return await self.get_text("success_message")

    async def get_error_message(self) -> str:
        return await self.get_text("error_message")

    async def is_success_message_visible(self) -> bool:
        return await self.is_visible("success_message")

    async def is_error_message_visible(self) -> bool:
        return await self.is_visible("error_message")
