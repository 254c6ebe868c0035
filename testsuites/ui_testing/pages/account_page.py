"""
================================================================================
Account Page Object (Async / Playwright)
================================================================================

Landing view after a successful login.

================================================================================
"""

from __future__ import annotations

import allure
from loguru import logger

from testsuites.ui_testing.framework.page_base import PageBase


class AccountPage(PageBase):
    """Account page object (async)."""

    URL_PATH = "/account"
    PAGE_TITLE = "Account"

    @allure.step("Verify account page loaded")
    async def is_loaded(self, timeout: int = 5000) -> bool:
        """True when the browser is on /account and the body is rendered."""
        if not await self.reached_url(f"**{self.URL_PATH}", timeout=timeout):
            return False
        return await self.wait_visible(self.page.locator("body"), timeout)

    async def body_text(self) -> str:
        return await self.text_or_empty(self.page.locator("body"))

    async def contains_text(self, text: str) -> bool:
        """Whether the rendered page mentions `text` (e.g. the username)."""
        found = text in await self.body_text()
        logger.debug(f"Account page contains {text!r}: {found}")
        return found
