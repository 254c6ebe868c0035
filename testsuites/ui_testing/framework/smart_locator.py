"""
================================================================================
Smart Locator with Fallback Strategies
================================================================================

Element location system with:
    - Multiple fallback locator strategies per element
    - Automatic degradation when the primary locator fails
    - Usage analytics to flag selectors that need maintenance

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, Page


class ElementNotFoundError(Exception):
    """Raised when all locator strategies fail to find element."""
    pass


@dataclass
class LocatorHealth:
    """
    Tracks locator health and usage statistics.

    Attributes:
        element_name: Human-readable element name
        primary_selector: The preferred selector
        used_fallback: Whether a fallback was used
        fallback_name: Name of fallback used (if any)
        fallback_selector: The fallback selector used (if any)
    """
    element_name: str
    primary_selector: str
    used_fallback: bool = False
    fallback_name: Optional[str] = None
    fallback_selector: Optional[str] = None


class SmartLocator:
    """
    Smart element locator with fallback strategies.

    Locator Priority Order:
        1. id / data-testid (most stable)
        2. name / aria attributes
        3. Visible text content
        4. Structural CSS selectors (last resort)

    Usage:
        >>> smart = SmartLocator(page)
        >>> await smart.fill("username_input", "testuser123")
        >>> await smart.click("login_button")

    Configuration:
        Locators are defined in the LOCATORS dictionary. Each element
        can have multiple fallback strategies.
    """

    # Format: element_name -> {strategy_name: selector}
    LOCATORS: Dict[str, Dict[str, str]] = {
        # Login form
        "username_input": {
            "primary": "#username",
            "fallback_1": "input[name='username']",
            "fallback_2": "input[placeholder*='sername']",
        },
        "password_input": {
            "primary": "#password",
            "fallback_1": "input[name='password']",
            "fallback_2": "input[type='password']",
        },
        "login_button": {
            "primary": "[data-testid='login-button']",
            "fallback_1": "form button[type='submit']",
            "fallback_2": "form button:has-text('Login')",
        },
        "remember_me_checkbox": {
            "primary": "#remember-me",
            "fallback_1": "[role='checkbox'][aria-label*='emember']",
        },
        "reset_button": {
            "primary": "button:has-text('Reset')",
            "fallback_1": "button[type='reset']",
        },

        # Registration form
        "email_input": {
            "primary": "#email",
            "fallback_1": "input[name='email']",
            "fallback_2": "input[type='email']",
        },
        "confirm_password_input": {
            "primary": "#confirmPassword",
            "fallback_1": "input[name='confirmPassword']",
        },
        "register_button": {
            "primary": "button[type='submit']",
            "fallback_1": "button:has-text('Register')",
        },
    }

    def __init__(
        self,
        page: Page,
        element_name: Optional[str] = None,
        locators: Optional[Dict[str, str]] = None,
    ):
        """
        Initialize SmartLocator with Playwright page.

        This class supports two usage styles:
        1) **Library mode**: `SmartLocator(page)` then `await smart.click("login_button")`
           using the class-level `LOCATORS` map.
        2) **Element mode**: `SmartLocator(page, element_name="X", locators={...})`
           then `await element.locate()` to resolve a single element with fallbacks.

        Args:
            page: Playwright Page object
            element_name: Optional human-readable element name (element mode)
            locators: Optional locator map (element mode)
        """
        self.page = page
        self._element_name = element_name
        self._element_locators = locators
        self._health_records: List[LocatorHealth] = []
        self._fallback_used: Dict[str, LocatorHealth] = {}

    @property
    def health_records(self) -> List[LocatorHealth]:
        return list(self._health_records)

    async def locate(
        self,
        target: Optional[Union[str, Dict[str, str]]] = None,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        custom_locators: Optional[Dict[str, str]] = None,
    ) -> Locator:
        """
        Locate element using smart fallback strategy.

        Tries each locator strategy in order until one becomes visible
        within `timeout`. Records usage statistics for maintenance insights.

        Args:
            target: Either an element key (str) to look up in `LOCATORS`,
                a locator map (dict) with primary/fallback selectors, or None
                to use the instance's stored locator map (element mode).
            timeout: Timeout in milliseconds for each attempt
            element_name: Optional human-readable name (used for logging/reporting).
            custom_locators: Override default locators when `target` is a string key.

        Returns:
            Playwright Locator for the found element

        Raises:
            ElementNotFoundError: When all strategies fail
        """
        if isinstance(target, dict):
            locators = target
            display_name = element_name or self._element_name or "custom_element"
        elif isinstance(target, str):
            locators = custom_locators or self.LOCATORS.get(target, {})
            display_name = target
        else:
            locators = self._element_locators or {}
            display_name = element_name or self._element_name or "custom_element"

        if not locators:
            raise ElementNotFoundError(
                f"No locators defined for element: {display_name}"
            )

        errors = []

        for strategy_name, selector in locators.items():
            try:
                locator = self.page.locator(selector).first
                await locator.wait_for(state="visible", timeout=timeout)
            except PlaywrightError as e:
                errors.append(f"{strategy_name}: {selector} -> {str(e)[:80]}")
                continue

            is_primary = strategy_name == "primary"
            health = LocatorHealth(
                element_name=display_name,
                primary_selector=locators.get("primary", selector),
                used_fallback=not is_primary,
                fallback_name=None if is_primary else strategy_name,
                fallback_selector=None if is_primary else selector,
            )
            self._health_records.append(health)

            if is_primary:
                logger.debug(f"Element '{display_name}' found: {selector}")
            else:
                logger.warning(
                    f"Element '{display_name}' used fallback: "
                    f"{strategy_name} -> {selector}"
                )
                self._fallback_used[display_name] = health

            return locator

        error_msg = (
            f"All locators failed for '{display_name}':\n" +
            "\n".join(f"  - {err}" for err in errors)
        )
        logger.error(error_msg)
        raise ElementNotFoundError(error_msg)

    async def click(
        self,
        target: Union[str, Dict[str, str]],
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Click element using smart location."""
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.click(**kwargs)

    async def fill(
        self,
        target: Union[str, Dict[str, str]],
        value: str,
        timeout: int = 5000,
        element_name: Optional[str] = None,
        **kwargs: Any,
    ) -> None:
        """Fill input element using smart location."""
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        await locator.fill(value, **kwargs)

    async def get_text(
        self,
        target: Union[str, Dict[str, str]],
        timeout: int = 5000,
        element_name: Optional[str] = None,
    ) -> str:
        """
        Get text content of element.

        Args:
            target: Element key (str) or locator map (dict)
            timeout: Timeout for element location
            element_name: Optional human-readable name when `target` is a dict

        Returns:
            Text content of element
        """
        locator = await self.locate(target, timeout=timeout, element_name=element_name)
        return (await locator.text_content() or "").strip()

    async def is_visible(
        self,
        target: Union[str, Dict[str, str]],
        timeout: int = 2000,
        element_name: Optional[str] = None,
    ) -> bool:
        """
        Check if element is visible.

        Returns:
            True if element is visible, False otherwise
        """
        try:
            locator = await self.locate(target, timeout=timeout, element_name=element_name)
            return await locator.is_visible()
        except ElementNotFoundError:
            return False

    def get_health_report(self) -> str:
        """
        Generate locator health report.

        Lists elements that required a fallback locator, i.e. primary
        selectors that should be updated.

        Returns:
            Formatted health report string
        """
        if not self._fallback_used:
            return "All elements used primary locators. No maintenance needed."

        report_lines = [
            "Locator Health Report - Fallbacks Used:",
            "",
            "The following elements used fallback locators.",
            "Consider updating the primary selectors:",
            "",
        ]

        for element_name, health in self._fallback_used.items():
            report_lines.extend([
                f"  [{element_name}]",
                f"    Failed primary: {health.primary_selector}",
                f"    Used: {health.fallback_name} -> {health.fallback_selector}",
                "",
            ])

        return "\n".join(report_lines)

    def register_locator(
        self,
        element_name: str,
        locators: Dict[str, str],
    ) -> None:
        """
        Register a locator for this instance only.

        Args:
            element_name: Unique name for the element
            locators: Dictionary of strategy -> selector
        """
        # Copy so registrations never leak into other pages via the class map
        if self.LOCATORS is SmartLocator.LOCATORS:
            self.LOCATORS = dict(SmartLocator.LOCATORS)
        self.LOCATORS[element_name] = locators
        logger.debug(f"Registered new locator: {element_name}")


__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "LocatorHealth",
]
