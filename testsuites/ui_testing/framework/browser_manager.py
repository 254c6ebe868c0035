"""
================================================================================
Browser Manager
================================================================================

Browser lifecycle management for UI automation.

Features:
    - One browser instance per session (per xdist worker)
    - Context isolation for every test
    - Browser configuration presets from config.yaml

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from loguru import logger
from playwright.async_api import (
    async_playwright,
    Browser,
    BrowserContext,
    BrowserType,
    Page,
    Playwright,
)

from uitest_tools.common import get_config, get_timeout


# Browser names accepted on the command line / in config
SUPPORTED_BROWSERS = ("chromium", "firefox", "webkit", "msedge", "chrome")


class BrowserManager:
    """
    Manages browser instances and contexts for UI testing.

    Features:
        - Single browser instance for performance
        - Isolated contexts for test independence
        - Base URL, viewport and default timeouts applied to every context

    Usage:
        async with BrowserManager() as manager:
            page = await manager.new_page()
            await page.goto("/")
    """

    # Default browser launch options
    DEFAULT_LAUNCH_OPTIONS: Dict[str, Any] = {
        "headless": True,
    }

    # Default context options
    DEFAULT_CONTEXT_OPTIONS: Dict[str, Any] = {
        "viewport": {"width": 1920, "height": 1080},
        "ignore_https_errors": True,
    }

    def __init__(
        self,
        headless: Optional[bool] = None,
        browser_type: Optional[str] = None,
        slow_mo: Optional[int] = None,
        base_url: Optional[str] = None,
    ):
        """
        Initialize browser manager.

        Unset arguments fall back to the `ui.*` configuration keys.

        Args:
            headless: Run browser in headless mode
            browser_type: 'chromium', 'firefox', 'webkit', 'msedge' or 'chrome'
            slow_mo: Delay in ms between Playwright operations
            base_url: Base URL given to every new context
        """
        self.headless = get_config("ui.headless", True) if headless is None else headless
        self.browser_type = (browser_type or get_config("ui.browser", "chromium")).lower()
        self.slow_mo = get_config("ui.slow_mo", 0) if slow_mo is None else slow_mo
        self.base_url = base_url or get_config("ui.base_url", "")

        if self.browser_type not in SUPPORTED_BROWSERS:
            raise ValueError(
                f"Unsupported browser '{self.browser_type}'. "
                f"Choose one of: {', '.join(SUPPORTED_BROWSERS)}"
            )

        self.action_timeout: int = get_timeout("action", 10000)
        self.navigation_timeout: int = get_timeout("navigation", 30000)

        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._contexts: List[BrowserContext] = []

    async def __aenter__(self) -> "BrowserManager":
        """Async context manager entry - start browser."""
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit - close browser."""
        await self.close()

    def _launcher(self) -> BrowserType:
        if self.browser_type == "firefox":
            return self._playwright.firefox
        if self.browser_type == "webkit":
            return self._playwright.webkit
        return self._playwright.chromium

    def _launch_options(self) -> Dict[str, Any]:
        options = {
            **self.DEFAULT_LAUNCH_OPTIONS,
            "headless": self.headless,
            "slow_mo": self.slow_mo,
        }
        # Branded browsers are chromium builds selected by channel
        if self.browser_type in ("msedge", "chrome"):
            options["channel"] = self.browser_type
        return options

    async def start(self) -> None:
        """Start Playwright and launch browser."""
        self._playwright = await async_playwright().start()
        try:
            self._browser = await self._launcher().launch(**self._launch_options())
        except Exception:
            await self._playwright.stop()
            self._playwright = None
            raise
        logger.debug(
            f"Browser started: {self.browser_type} "
            f"(headless={self.headless}, slow_mo={self.slow_mo})"
        )

    async def close(self) -> None:
        """Close all contexts and browser."""
        for context in self._contexts:
            await context.close()
        self._contexts.clear()

        if self._browser:
            await self._browser.close()
            self._browser = None

        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

        logger.debug("Browser closed")

    def context_options(self, **overrides: Any) -> Dict[str, Any]:
        """Context options from config, with `overrides` on top."""
        options = dict(self.DEFAULT_CONTEXT_OPTIONS)
        options["viewport"] = {
            "width": get_config("ui.viewport.width", 1920),
            "height": get_config("ui.viewport.height", 1080),
        }
        if self.base_url:
            options["base_url"] = self.base_url
        options.update(overrides)
        return options

    async def new_context(
        self,
        **options: Any,
    ) -> BrowserContext:
        """
        Create new browser context.

        Each context is isolated - separate cookies, localStorage, etc.

        Args:
            **options: Additional context options

        Returns:
            New BrowserContext with default action/navigation timeouts set
        """
        if not self._browser:
            raise RuntimeError("Browser not started. Call start() first.")

        context = await self._browser.new_context(**self.context_options(**options))
        context.set_default_timeout(self.action_timeout)
        context.set_default_navigation_timeout(self.navigation_timeout)
        self._contexts.append(context)

        return context

    async def close_context(self, context: BrowserContext) -> None:
        """Close a context created by this manager."""
        if context in self._contexts:
            self._contexts.remove(context)
        await context.close()

    async def new_page(
        self,
        context: Optional[BrowserContext] = None,
        **context_options: Any,
    ) -> Page:
        """
        Create new page in new or existing context.

        Args:
            context: Existing context to use (creates new if None)
            **context_options: Options for new context

        Returns:
            New Page
        """
        if context is None:
            context = await self.new_context(**context_options)

        return await context.new_page()

    @property
    def browser(self) -> Optional[Browser]:
        """Get browser instance."""
        return self._browser

    @property
    def is_running(self) -> bool:
        return self._browser is not None and self._browser.is_connected()


__all__ = [
    "BrowserManager",
    "SUPPORTED_BROWSERS",
]
