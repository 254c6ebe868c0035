"""
================================================================================
Login Feature UI Tests (Async / Playwright)
================================================================================

Covers the login page challenges:
  - Successful login with valid credentials
  - Required-field validation (username, password, both)
  - Password visibility toggle and Remember Me checkbox
  - Reset button and navigation to Register
  - Special characters and field attributes

================================================================================
"""

import re

import allure
import pytest
from playwright.async_api import expect

from testsuites.ui_testing.data.login_data import (
    SPECIAL_CHARACTER_CREDENTIALS,
    VALID_LOGIN_CREDENTIALS,
)
from testsuites.ui_testing.pages.account_page import AccountPage
from testsuites.ui_testing.pages.login_page import LoginPage


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Authentication")
class TestLogin:
    """Login UI test suite (async)."""

    @allure.story("Happy Path")
    @allure.title("TC001 - Login succeeds with valid credentials")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    async def test_login_success(self, login_page: LoginPage, account_page: AccountPage):
        """Valid credentials land on /account and the page greets the user."""
        user = VALID_LOGIN_CREDENTIALS

        with allure.step("Login"):
            await login_page.login(user["username"], user["password"])

        with allure.step("Verify account page loaded"):
            await expect(login_page.page).to_have_url(re.compile(r".*/account"))
            assert await account_page.contains_text(user["username"])

    @allure.story("Happy Path")
    @allure.title("Reference credentials reach the account page")
    @allure.severity(allure.severity_level.BLOCKER)
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    async def test_reference_credentials(self, login_page: LoginPage):
        await login_page.login("testuser123", "Password123!")
        assert await login_page.is_login_successful()
        assert "/account" in login_page.current_url

    @allure.story("Form Validation")
    @allure.title("TC002 - Empty username shows a required error")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.regression_ui
    async def test_empty_username(self, login_page: LoginPage):
        await login_page.fill_fields(username="", password="SecurePass123!")
        await login_page.submit_form()

        errors = [e.lower() for e in await login_page.get_error_messages()]
        assert any("username" in e and "required" in e for e in errors), errors
        assert "/login" in login_page.current_url

    @allure.story("Form Validation")
    @allure.title("TC003 - Empty password shows a required error")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.regression_ui
    async def test_empty_password(self, login_page: LoginPage):
        await login_page.fill_fields(username="testuser", password="")
        await login_page.submit_form()

        errors = [e.lower() for e in await login_page.get_error_messages()]
        assert any("password" in e and "required" in e for e in errors), errors
        assert "/login" in login_page.current_url

    @allure.story("Form Validation")
    @allure.title("TC004 - Empty form shows both errors and does not navigate")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    async def test_empty_form(self, login_page: LoginPage):
        with allure.step("Submit empty form"):
            await login_page.login("", "")

        with allure.step("Verify errors"):
            errors = [e.lower() for e in await login_page.get_error_messages()]
            assert len(errors) >= 2, errors
            assert any("username" in e for e in errors)
            assert any("password" in e for e in errors)

        with allure.step("Verify no navigation"):
            assert not await login_page.is_login_successful()
            assert "/login" in login_page.current_url

    @allure.story("Form Controls")
    @allure.title("TC005 - Password visibility toggles")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_password_visibility_toggle(self, login_page: LoginPage):
        await login_page.fill_fields(password="SecurePass123!")
        assert await login_page.get_password_input_type() == "password"

        await login_page.toggle_password_visibility()
        assert await login_page.get_password_input_type() == "text"

        await login_page.toggle_password_visibility()
        assert await login_page.get_password_input_type() == "password"

    @allure.story("Form Controls")
    @allure.title("TC006 - Remember Me toggles")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_remember_me_toggle(self, login_page: LoginPage):
        assert not await login_page.is_remember_me_checked()

        await login_page.toggle_remember_me()
        assert await login_page.is_remember_me_checked()

        await login_page.toggle_remember_me()
        assert not await login_page.is_remember_me_checked()

    @allure.story("Form Controls")
    @allure.title("TC007 - Reset clears the form")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_reset_clears_fields(self, login_page: LoginPage):
        await login_page.fill_login_form("testuser", "SecurePass123!")
        assert not await login_page.are_all_fields_empty()

        await login_page.reset_form()
        assert await login_page.are_all_fields_empty()

    @allure.story("Navigation")
    @allure.title("TC008 - Register link opens the register page")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_navigate_to_register(self, login_page: LoginPage):
        await login_page.go_to_register()
        await expect(login_page.page).to_have_url(re.compile(r".*/register"))

    @allure.story("Negative Path")
    @allure.title("TC009 - Special characters are handled without crashing")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_special_characters(self, login_page: LoginPage):
        creds = SPECIAL_CHARACTER_CREDENTIALS
        await login_page.login(creds["username"], creds["password"])
        await login_page.settle(1000)

        assert re.search(r"/(account|login)", login_page.current_url)

    @allure.story("Accessibility")
    @allure.title("TC010 - Form fields expose ids and types")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.regression_ui
    async def test_field_attributes(self, login_page: LoginPage):
        await expect(login_page.username_input).to_have_attribute("id", "username")
        await expect(login_page.password_input).to_have_attribute("id", "password")
        await expect(login_page.password_input).to_have_attribute("type", "password")
        await expect(login_page.login_button).to_be_visible()
        await expect(login_page.login_button).to_be_enabled()
