"""
================================================================================
Base Page Object
================================================================================

Foundation class for Page Object Model implementation.

Provides:
    - SPA navigation through the home page
    - Smart element location
    - Soft-failing bounded waits (timeout -> False / "")
    - Toast and inline error extraction
    - Screenshot and debugging utilities

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Locator, Page
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from uitest_tools.common import get_config, get_timeout

from .smart_locator import SmartLocator


# Default output directory for screenshots
SCREENSHOT_DIR = Path(__file__).parent.parent / "screenshots"

DEFAULT_BASE_URL = "https://happy-beach-030e0a900.2.azurestaticapps.net"

# Inline validation messages rendered by the application's form components
ERROR_SELECTOR = ".text-destructive, .text-red-500, [class*='error'], .error-message"

# Sonner toasts plus generic toast containers
TOAST_SELECTOR = "[role='status'], [data-sonner-toast], .toast, [class*='toast']"


async def wait_visible(locator: Locator, timeout: Optional[float] = None) -> bool:
    """Wait for `locator` to become visible; False when the wait times out."""
    try:
        await locator.wait_for(state="visible", timeout=timeout)
        return True
    except PlaywrightTimeoutError:
        return False


async def wait_hidden(locator: Locator, timeout: Optional[float] = None) -> bool:
    """Wait for `locator` to be hidden or detached; False when the wait times out."""
    try:
        await locator.wait_for(state="hidden", timeout=timeout)
        return True
    except PlaywrightTimeoutError:
        return False


async def text_or_empty(locator: Locator, timeout: Optional[float] = None) -> str:
    """Trimmed text of `locator` once visible, or "" when it never shows up."""
    if not await wait_visible(locator, timeout):
        return ""
    try:
        text = await locator.text_content(timeout=timeout)
    except PlaywrightTimeoutError:
        return ""
    return (text or "").strip()


class BasePage:
    """
    Base class for all page objects.

    Every action follows the same shape: locate, bounded wait, interact,
    bounded wait, extract. Waits that time out are reported as absence
    (False / "") so the test decides pass or fail.

    Usage:
        class AlertsPage(BasePage):
            URL_PATH = "/alerts"
            NAV_SELECTOR = "a[href='/alerts']"

            async def show_success_toast(self) -> str:
                await self.page.get_by_role("button", name="Show Success Toast").click()
                return await self.get_toast_message()
    """

    # Override in subclasses
    URL_PATH: Optional[str] = "/"
    PAGE_TITLE: str = ""
    NAV_SELECTOR: Optional[str] = None
    TOAST_SELECTOR: str = TOAST_SELECTOR
    ERROR_SELECTOR: str = ERROR_SELECTOR

    def __init__(
        self,
        page: Page,
        base_url: str = "",
    ):
        """
        Initialize page object.

        Args:
            page: Playwright Page object
            base_url: Base URL for the application (defaults to `ui.base_url`)
        """
        self.page = page
        if not base_url:
            base_url = get_config("ui.base_url", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.smart = SmartLocator(page)

        self.toast_timeout: int = get_timeout("toast", 3000)
        self.settle_ms: int = get_timeout("settle", 500)

    @property
    def url(self) -> str:
        """Get full page URL."""
        return f"{self.base_url}{self.URL_PATH or '/'}"

    @property
    def current_url(self) -> str:
        return self.page.url

    # =========================================================================
    # Navigation
    # =========================================================================

    async def navigate_to(
        self,
        path: str,
        wait_for: str = "networkidle",
    ) -> None:
        """Navigate to a specific path under the base URL."""
        full_url = f"{self.base_url}{path}"
        with allure.step(f"Navigate to {path}"):
            await self.page.goto(full_url, wait_until=wait_for)

    async def open(self) -> "BasePage":
        """
        Open this page the way a user does: load the home page, then follow
        the page's navigation entry. The application is a single-page app
        served from static hosting, so deep links are not used.
        """
        with allure.step(f"Open {self.PAGE_TITLE or type(self).__name__}"):
            await self.navigate_to("/")
            if self.NAV_SELECTOR:
                await self.page.locator(self.NAV_SELECTOR).first.click()
                if self.URL_PATH and self.URL_PATH != "/":
                    await self.wait_for_url(f"**{self.URL_PATH}")
            await self.wait_for_page_load()
        return self

    async def wait_for_page_load(
        self,
        state: str = "networkidle",
        timeout: int = 15000,
    ) -> None:
        """
        Wait for the page to reach a stable load state.

        Args:
            state: Playwright load state ('load', 'domcontentloaded', 'networkidle')
            timeout: Timeout in milliseconds
        """
        await self.page.wait_for_load_state(state, timeout=timeout)

    async def wait_for_url(
        self,
        url_pattern: Any,
        timeout: int = 10000,
    ) -> None:
        """
        Wait for URL to match pattern.

        Args:
            url_pattern: Glob string, regex or predicate
            timeout: Timeout in milliseconds
        """
        with allure.step(f"Wait for URL: {url_pattern}"):
            await self.page.wait_for_url(url_pattern, timeout=timeout)

    async def reached_url(self, url_pattern: Any, timeout: int = 5000) -> bool:
        """Soft variant of wait_for_url: False when the URL never matches."""
        try:
            await self.page.wait_for_url(url_pattern, timeout=timeout)
            return True
        except PlaywrightTimeoutError:
            return False

    async def settle(self, ms: Optional[int] = None) -> None:
        """Fixed short pause for UI state that has no event to wait on."""
        await self.page.wait_for_timeout(self.settle_ms if ms is None else ms)

    # =========================================================================
    # Smart Element Interactions
    # =========================================================================

    def smart_locator(
        self,
        primary: str,
        fallbacks: Optional[List[str]] = None,
        name: str = "custom_element",
    ) -> SmartLocator:
        """
        Build a SmartLocator in *element mode* with primary + fallback selectors.

        Args:
            primary: Primary selector
            fallbacks: Fallback selectors to try when primary fails
            name: Human-readable element name for logging/Allure

        Returns:
            SmartLocator instance configured for a single element
        """
        locators: Dict[str, str] = {"primary": primary}
        for i, fb in enumerate(fallbacks or [], start=1):
            locators[f"fallback_{i}"] = fb
        return SmartLocator(self.page, element_name=name, locators=locators)

    async def click(
        self,
        element_name: str,
        timeout: int = 5000,
        **kwargs: Any,
    ) -> None:
        """Click element from the SmartLocator library."""
        with allure.step(f"Click: {element_name}"):
            await self.smart.click(element_name, timeout, **kwargs)

    async def fill(
        self,
        element_name: str,
        value: str,
        timeout: int = 5000,
        **kwargs: Any,
    ) -> None:
        """Fill input element from the SmartLocator library."""
        shown = "*" * len(value) if "password" in element_name.lower() else value
        with allure.step(f"Fill {element_name}: {shown}"):
            await self.smart.fill(element_name, value, timeout, **kwargs)

    # =========================================================================
    # Soft-failing extraction
    # =========================================================================

    async def wait_visible(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return await wait_visible(locator, timeout)

    async def wait_hidden(self, locator: Locator, timeout: Optional[float] = None) -> bool:
        return await wait_hidden(locator, timeout)

    async def text_or_empty(self, locator: Locator, timeout: Optional[float] = None) -> str:
        return await text_or_empty(locator, timeout)

    @property
    def toast(self) -> Locator:
        """First toast notification on the page."""
        return self.page.locator(self.TOAST_SELECTOR).first

    async def get_toast_message(self, timeout: Optional[int] = None) -> str:
        """
        Text of the current toast.

        Returns "" when no toast becomes visible within the timeout.
        Calling it again without a new action returns the same text while
        the toast is still displayed.
        """
        return await text_or_empty(self.toast, self.toast_timeout if timeout is None else timeout)

    async def is_toast_visible(self, timeout: int = 2000) -> bool:
        return await wait_visible(self.toast, timeout)

    async def wait_for_toast_to_disappear(self, timeout: int = 6000) -> bool:
        """True once the toast is gone, False if it is still shown after `timeout`."""
        return await wait_hidden(self.toast, timeout)

    async def verify_toast_contains(self, expected_text: str, timeout: Optional[int] = None) -> bool:
        """Case-insensitive containment check on the current toast."""
        toast_text = await self.get_toast_message(timeout)
        return expected_text.lower() in toast_text.lower()

    async def get_error_messages(self) -> List[str]:
        """
        Visible inline error messages, trimmed, empty ones dropped.

        Validation messages render asynchronously after submit and have no
        event to wait on, so a short settle pause precedes the read.
        """
        await self.settle()
        texts = await self.page.locator(self.ERROR_SELECTOR).all_text_contents()
        messages = [t.strip() for t in texts if t and t.strip()]
        logger.debug(f"Error messages on {self.current_url}: {messages}")
        return messages

    async def has_error_matching(self, expected: str) -> bool:
        """True when any visible error contains the first word of `expected`."""
        return error_matches(await self.get_error_messages(), expected)

    # =========================================================================
    # Screenshot and Debug Utilities
    # =========================================================================

    async def screenshot(
        self,
        name: str,
        full_page: bool = False,
        attach_to_allure: bool = True,
    ) -> Path:
        """
        Take screenshot and optionally attach to Allure.

        Args:
            name: Screenshot name (without extension)
            full_page: Capture full scrollable page
            attach_to_allure: Whether to attach to Allure report

        Returns:
            Path to saved screenshot
        """
        SCREENSHOT_DIR.mkdir(parents=True, exist_ok=True)

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        safe_name = re.sub(r"[^\w.-]+", "_", name)
        filepath = SCREENSHOT_DIR / f"{safe_name}_{timestamp}.png"

        png = await self.page.screenshot(path=str(filepath), full_page=full_page)

        if attach_to_allure:
            allure.attach(
                png,
                name=name,
                attachment_type=allure.attachment_type.PNG
            )

        logger.debug(f"Screenshot saved: {filepath}")
        return filepath

    async def capture_failure(self, test_name: str) -> None:
        """
        Capture debugging information on test failure.

        Saves:
            - Full-page screenshot
            - Current URL
        """
        with allure.step("Capture failure details"):
            await self.screenshot(f"failure_{test_name}", full_page=True, attach_to_allure=True)
            allure.attach(
                self.page.url,
                name="Current URL",
                attachment_type=allure.attachment_type.TEXT
            )

    def get_locator_health_report(self) -> str:
        """Get smart locator health report."""
        return self.smart.get_health_report()


def error_matches(messages: List[str], expected: str) -> bool:
    """
    Whether any message matches an expected error.

    Matching uses the first word of the expected text, case-insensitively,
    so "Username is required" matches "Username must not be empty".
    """
    words = expected.strip().split()
    if not words:
        return bool(messages)
    key = words[0].lower()
    return any(key in message.lower() for message in messages)


__all__ = [
    "BasePage",
    "PageBase",
    "ERROR_SELECTOR",
    "TOAST_SELECTOR",
    "wait_visible",
    "wait_hidden",
    "text_or_empty",
    "error_matches",
]

# Many Page Objects prefer the PageBase name
PageBase = BasePage
