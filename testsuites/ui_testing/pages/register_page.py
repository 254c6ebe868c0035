"""
================================================================================
Register Page Object (Async / Playwright)
================================================================================

Registration form of the practice application.

Highlights:
  - Field access through the SmartLocator library (primary + fallbacks)
  - Accepts `RegistrationData` records from the test data module
  - Success is "left /register"; failures stay put and show inline errors

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Dict, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.data.register_data import RegistrationData
from testsuites.ui_testing.framework.page_base import PageBase


class RegisterPage(PageBase):
    """Register page object (async)."""

    URL_PATH = "/register"
    PAGE_TITLE = "Register"
    NAV_SELECTOR = "a[href='/register']"

    SUCCESS_TIMEOUT = 5000

    @property
    def username_input(self) -> Locator:
        return self.page.locator("#username")

    @property
    def email_input(self) -> Locator:
        return self.page.locator("#email")

    @property
    def password_input(self) -> Locator:
        return self.page.locator("#password")

    @property
    def confirm_password_input(self) -> Locator:
        return self.page.locator("#confirmPassword")

    @property
    def register_button(self) -> Locator:
        return self.page.locator("button[type='submit']").first

    @property
    def password_toggle(self) -> Locator:
        return self.page.locator("#password + button, #password ~ button").first

    @property
    def confirm_password_toggle(self) -> Locator:
        return self.page.locator(
            "#confirmPassword + button, #confirmPassword ~ button"
        ).first

    @allure.step("Open register page")
    async def open(self) -> "RegisterPage":
        await super().open()
        return self

    async def scroll_to_automation_challenge(self) -> None:
        await self.page.locator("text=Automation Challenge").scroll_into_view_if_needed()

    @allure.step("Fill registration form")
    async def fill_registration_form(self, data: RegistrationData) -> None:
        await self.fill("username_input", data.username)
        await self.fill("email_input", data.email)
        await self.fill("password_input", data.password)
        await self.fill("confirm_password_input", data.confirm_password)

    async def fill_fields(
        self,
        username: Optional[str] = None,
        email: Optional[str] = None,
        password: Optional[str] = None,
        confirm_password: Optional[str] = None,
    ) -> None:
        """Fill only the given fields; None leaves a field untouched."""
        values = {
            "username_input": username,
            "email_input": email,
            "password_input": password,
            "confirm_password_input": confirm_password,
        }
        for element_name, value in values.items():
            if value is not None:
                await self.fill(element_name, value)

    @allure.step("Submit registration form")
    async def submit_form(self) -> None:
        await self.click("register_button")

    @allure.step("Register new user")
    async def register(self, data: RegistrationData) -> None:
        await self.fill_registration_form(data)
        await self.submit_form()

    @allure.step("Reset registration form")
    async def reset_form(self) -> None:
        await self.click("reset_button")

    async def toggle_password_visibility(self) -> None:
        await self.password_toggle.click()

    async def toggle_confirm_password_visibility(self) -> None:
        await self.confirm_password_toggle.click()

    async def get_password_input_type(self) -> str:
        return await self.password_input.get_attribute("type") or ""

    async def get_confirm_password_input_type(self) -> str:
        return await self.confirm_password_input.get_attribute("type") or ""

    @allure.step("Check registration success")
    async def is_registration_successful(self) -> bool:
        """True once the URL leaves /register within five seconds."""
        success = await self.reached_url(
            lambda url: "/register" not in url, timeout=self.SUCCESS_TIMEOUT
        )
        logger.debug(f"Registration successful: {success} (url={self.current_url})")
        return success

    async def field_values(self) -> Dict[str, str]:
        return {
            "username": await self.username_input.input_value(),
            "email": await self.email_input.input_value(),
            "password": await self.password_input.input_value(),
            "confirm_password": await self.confirm_password_input.input_value(),
        }

    async def are_all_fields_empty(self) -> bool:
        return not any((await self.field_values()).values())

    @allure.step("Verify register page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.username_input).to_be_visible()
        await expect(self.email_input).to_be_visible()
        await expect(self.password_input).to_be_visible()
        await expect(self.confirm_password_input).to_be_visible()
        await expect(self.register_button).to_be_visible()
