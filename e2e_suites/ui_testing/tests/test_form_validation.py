"""
================================================================================
Form Validation UI Tests (Async / Playwright)
================================================================================

Scenarios against the generic form page (`ui.form_url`):
  - empty submission follows the configured required-field contract
  - a valid submission goes through
  - an invalid email is rejected, when the form has an email field at all

================================================================================
"""

import allure
import pytest
import pytest_asyncio

from e2e_suites.ui_testing.framework.page_base import FieldOutcome
from e2e_suites.ui_testing.pages.form_page import FormPage


pytestmark = pytest.mark.asyncio(loop_scope="session")


@pytest_asyncio.fixture(autouse=True, loop_scope="session")
async def _open_form_page(form_page: FormPage):
    await form_page.open()


@allure.epic("UI Testing")
@allure.feature("Form Submission")
@pytest.mark.form
class TestFormValidation:
    """Form validation UI test suite (async)."""

    @allure.story("Form Validation")
    @allure.title("Empty submission follows the required-field contract")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression
    async def test_submit_empty_form(self, form_page: FormPage, ui_config):
        await form_page.submit_empty_form()

        if ui_config.get("form.validates_required_fields", False):
            with allure.step("Expect visible required-field errors"):
                await form_page.error_messages.first.wait_for(
                    state="visible", timeout=ui_config.get("ui.settle_timeout", 5000)
                )
                errors = await form_page.get_error_messages()
                assert errors, "Empty submission must show at least one error"
                assert all(message for message in errors)
        else:
            with allure.step("Expect the submission to go through without errors"):
                assert await form_page.is_submitted()
                assert await form_page.get_error_messages() == []

    @allure.story("Happy Path")
    @allure.title("Form submits with valid data")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke
    async def test_submit_valid_form(self, form_page: FormPage, test_data):
        data = test_data.valid_form

        outcomes = await form_page.fill_form(data.first_name, data.last_name, data.email)
        assert outcomes["first_name"] is FieldOutcome.FILLED
        assert outcomes["last_name"] is FieldOutcome.FILLED
        assert outcomes["email"] in (FieldOutcome.FILLED, FieldOutcome.ABSENT)

        await form_page.submit_form()

        assert await form_page.is_submitted()
        if await form_page.is_success_message_visible():
            assert test_data.messages.form_success in await form_page.get_success_message()

    @allure.story("Form Validation")
    @allure.title("Invalid email format is rejected")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression
    async def test_invalid_email_rejected(self, form_page: FormPage, test_data, ui_config):
        if not await form_page.has_email_field():
            pytest.skip("Email field does not exist on this form")

        data = test_data.valid_form
        outcomes = await form_page.fill_form(
            data.first_name, data.last_name, test_data.invalid_form.invalid_email
        )
        assert outcomes["email"] is FieldOutcome.FILLED

        await form_page.submit_form()

        await form_page.error_messages.first.wait_for(
            state="visible", timeout=ui_config.get("ui.settle_timeout", 5000)
        )
        errors = [message.lower() for message in await form_page.get_error_messages()]
        assert any("email" in message or "invalid" in message for message in errors), errors
