"""
================================================================================
Registration Page UI Tests (Async / Playwright)
================================================================================

Covers the registration challenges:
  - Successful registration and redirect
  - Empty fields, invalid e-mail, mismatched and short passwords
  - Password visibility toggles
  - Reset button

================================================================================
"""

import re

import allure
import pytest
from playwright.async_api import expect

from testsuites.ui_testing.data.register_data import (
    DATA_FOR_RESET_TEST,
    INVALID_EMAIL_DATA,
    INVALID_EMAILS,
    MISMATCHED_PASSWORDS_DATA,
    PARTIAL_DATA_SCENARIOS,
    SHORT_PASSWORD_DATA,
    SHORT_PASSWORDS,
    unique_registration_data,
)
from testsuites.ui_testing.pages.register_page import RegisterPage


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Registration")
class TestRegister:
    """Registration UI test suite (async)."""

    @allure.story("Happy Path")
    @allure.title("TC01 - Registration succeeds with valid data")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    async def test_register_success(self, register_page: RegisterPage):
        await register_page.register(unique_registration_data())
        await register_page.settle(1000)

        errors = await register_page.get_error_messages()
        assert "/register" not in register_page.current_url or not errors, errors

    @allure.story("Form Validation")
    @allure.title("TC02 - Empty form stays on the register page")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.regression_ui
    async def test_empty_fields(self, register_page: RegisterPage):
        await register_page.submit_form()
        await register_page.settle(500)

        assert "/register" in register_page.current_url
        values = await register_page.field_values()
        assert values["username"] == ""
        assert values["email"] == ""

    @allure.story("Form Validation")
    @allure.title("TC03 - Invalid e-mail is rejected")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_invalid_email(self, register_page: RegisterPage):
        await register_page.register(INVALID_EMAIL_DATA)
        await register_page.settle(500)

        assert "/register" in register_page.current_url
        assert await register_page.email_input.input_value() == INVALID_EMAIL_DATA.email

    @allure.story("Form Validation")
    @allure.title("TC04 - Mismatched passwords are rejected")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_mismatched_passwords(self, register_page: RegisterPage):
        data = MISMATCHED_PASSWORDS_DATA
        await register_page.register(data)
        await register_page.settle(500)

        assert "/register" in register_page.current_url
        values = await register_page.field_values()
        assert values["password"] == data.password
        assert values["confirm_password"] == data.confirm_password

    @allure.story("Form Validation")
    @allure.title("TC05 - Short password is rejected")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_short_password(self, register_page: RegisterPage):
        await register_page.register(SHORT_PASSWORD_DATA)
        await register_page.settle(500)

        assert "/register" in register_page.current_url
        assert await register_page.password_input.input_value() == SHORT_PASSWORD_DATA.password

    @allure.story("Form Controls")
    @allure.title("TC06 - Password visibility toggles and keeps the value")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_password_visibility_toggle(self, register_page: RegisterPage):
        password = "TestPassword123!"
        await register_page.fill_fields(password=password)
        assert await register_page.get_password_input_type() == "password"

        await register_page.toggle_password_visibility()
        assert await register_page.get_password_input_type() == "text"

        await register_page.toggle_password_visibility()
        assert await register_page.get_password_input_type() == "password"
        assert await register_page.password_input.input_value() == password

    @allure.story("Form Controls")
    @allure.title("Confirm password visibility toggles")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.regression_ui
    async def test_confirm_password_visibility_toggle(self, register_page: RegisterPage):
        await register_page.fill_fields(confirm_password="TestPassword123!")
        assert await register_page.get_confirm_password_input_type() == "password"

        await register_page.toggle_confirm_password_visibility()
        assert await register_page.get_confirm_password_input_type() == "text"

    @allure.story("Happy Path")
    @allure.title("TC07 - Successful registration leaves the register page")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_redirect_after_registration(self, register_page: RegisterPage):
        assert "/register" in register_page.current_url

        await register_page.register(unique_registration_data())

        if await register_page.is_registration_successful():
            assert "/register" not in register_page.current_url
        else:
            assert await register_page.get_error_messages() == []

    @allure.story("Form Controls")
    @allure.title("TC08 - Reset clears all fields")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_reset_clears_fields(self, register_page: RegisterPage):
        data = DATA_FOR_RESET_TEST
        await register_page.fill_registration_form(data)
        assert await register_page.field_values() == {
            "username": data.username,
            "email": data.email,
            "password": data.password,
            "confirm_password": data.confirm_password,
        }

        await register_page.reset_form()
        await register_page.settle(300)

        assert await register_page.are_all_fields_empty()


@allure.epic("UI Testing")
@allure.feature("Registration")
@allure.story("Edge Cases")
class TestRegisterEdgeCases:

    @allure.title("Automation Challenge section scrolls into view")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    async def test_scroll_to_automation_challenge(self, register_page: RegisterPage):
        await register_page.scroll_to_automation_challenge()
        await expect(register_page.page.locator("text=Automation Challenge")).to_be_in_viewport()

    @allure.title("Register page is reachable from the home page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    async def test_navigate_from_home(self, page):
        register_page = RegisterPage(page)
        await register_page.open()

        await expect(page).to_have_url(re.compile(r".*register"))
        await register_page.verify_page_loaded()

    @allure.title("Invalid e-mail {email} keeps the user on /register")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.parametrize("email", INVALID_EMAILS)
    async def test_invalid_email_variants(self, register_page: RegisterPage, email: str):
        await register_page.fill_fields(
            username="testuser",
            email=email,
            password="SecurePass123!",
            confirm_password="SecurePass123!",
        )
        await register_page.submit_form()
        await register_page.settle(500)

        assert "/register" in register_page.current_url

    @allure.title("Short password {password} keeps the user on /register")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.parametrize("password", SHORT_PASSWORDS)
    async def test_short_password_variants(self, register_page: RegisterPage, password: str):
        await register_page.fill_fields(
            username="testuser",
            email="test@example.com",
            password=password,
            confirm_password=password,
        )
        await register_page.submit_form()
        await register_page.settle(500)

        assert "/register" in register_page.current_url

    @allure.title("Partially filled form keeps the user on /register")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.parametrize(
        "data",
        PARTIAL_DATA_SCENARIOS,
        ids=["username-only", "email-only", "password-only", "confirm-only"],
    )
    async def test_partial_submission(self, register_page: RegisterPage, data):
        await register_page.register(data)
        await register_page.settle(500)

        assert "/register" in register_page.current_url
