"""
================================================================================
Login Page Object (Async / Playwright)
================================================================================

Login form of the practice application.

Design goals:
  - Consistent with async Playwright fixtures used in `testsuites/ui_testing/tests/`
  - Uses SmartLocator for resilient element detection (primary + fallbacks)
  - Outcome checks never raise on timeout; they report False / ""

The application is a single-page app: `/login` is reached through the
header Login button on the home page, never by deep link.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.framework.page_base import PageBase, error_matches
from testsuites.ui_testing.framework.scenario_loader import Scenario


@dataclass
class LoginAttempt:
    """Where a submitted login ended up."""
    succeeded: bool
    url: str
    errors: List[str] = field(default_factory=list)

    def has_error(self, expected: str) -> bool:
        return error_matches(self.errors, expected)


class LoginPage(PageBase):
    """Login page object (async)."""

    URL_PATH = "/login"
    PAGE_TITLE = "Login"
    # Header button on the home page; the form's own submit button comes later
    NAV_SELECTOR = "button:has-text('Login')"

    ACCOUNT_URL = "**/account"
    SUCCESS_TIMEOUT = 5000

    @property
    def username_input(self) -> Locator:
        return self.page.locator("#username")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#password")

    @property
    def login_button(self) -> Locator:
        return self.page.locator("[data-testid='login-button']")

    @property
    def remember_me_checkbox(self) -> Locator:
        return self.page.locator("#remember-me")

    @property
    def password_toggle(self) -> Locator:
        return self.page.locator("#password + button, #password ~ button").first

    @property
    def register_link(self) -> Locator:
        return self.page.locator("a[href='/register']")

    @allure.step("Open login page")
    async def open(self) -> "LoginPage":
        """Navigate to the login page via the home page."""
        await super().open()
        return self

    @allure.step("Fill login form (username={username})")
    async def fill_login_form(self, username: str, password: str) -> None:
        await self.fill("username_input", username)
        await self.fill("password_input", password)

    async def fill_fields(
        self,
        username: Optional[str] = None,
        password: Optional[str] = None,
    ) -> None:
        """Fill only the given fields; None leaves a field untouched."""
        if username is not None:
            await self.fill("username_input", username)
        if password is not None:
            await self.fill("password_input", password)

    @allure.step("Submit login form")
    async def submit_form(self) -> None:
        await self.click("login_button")

    @allure.step("Login (username={username})")
    async def login(self, username: str, password: str) -> None:
        """Fill both fields and submit. Does not wait for the outcome."""
        logger.info(f"Login attempt: username={username!r}")
        await self.fill_login_form(username, password)
        await self.submit_form()

    @allure.step("Reset login form")
    async def reset_form(self) -> None:
        await self.click("reset_button")

    async def toggle_remember_me(self) -> None:
        await self.click("remember_me_checkbox")

    async def is_remember_me_checked(self) -> bool:
        # Radix checkbox exposes its state as data-state
        return await self.remember_me_checkbox.get_attribute("data-state") == "checked"

    async def toggle_password_visibility(self) -> None:
        await self.password_toggle.click()

    async def get_password_input_type(self) -> str:
        return await self.password_input.get_attribute("type") or ""

    async def get_field_error(self, field_id: str) -> str:
        """
        Error shown next to a field ("username" or "password").

        Returns:
            Trimmed error text, or "" when the field has no error
        """
        container = self.page.locator(f"#{field_id}").locator("..")
        errors = container.locator(".text-destructive, .text-red-500, [class*='error']")
        if await errors.count() == 0:
            return ""
        return ((await errors.first.text_content()) or "").strip()

    @allure.step("Check login success")
    async def is_login_successful(self) -> bool:
        """True when the browser lands on /account within five seconds."""
        success = await self.reached_url(self.ACCOUNT_URL, timeout=self.SUCCESS_TIMEOUT)
        logger.debug(f"Login successful: {success} (url={self.current_url})")
        return success

    async def are_all_fields_empty(self) -> bool:
        username = await self.username_input.input_value()
        password = await self.password_input.input_value()
        return not username and not password

    @allure.step("Verify login page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.username_input).to_be_visible()
        await expect(self.password_input).to_be_visible()
        await expect(self.login_button).to_be_visible()

    @allure.step("Go to register page")
    async def go_to_register(self) -> None:
        await self.register_link.click()
        await self.wait_for_url("**/register")

    @allure.step("Run login scenario")
    async def run_scenario(self, scenario: Scenario) -> LoginAttempt:
        """
        Submit a scenario's credentials and report where the browser ended up.

        Success scenarios wait for /account; error scenarios read the
        validation messages without waiting for navigation.
        """
        await self.login(scenario.username, scenario.password)
        if scenario.expects_success:
            succeeded = await self.is_login_successful()
            errors = [] if succeeded else await self.get_error_messages()
        else:
            errors = await self.get_error_messages()
            succeeded = "/account" in self.current_url
        return LoginAttempt(succeeded=succeeded, url=self.current_url, errors=errors)
