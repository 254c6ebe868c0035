"""
================================================================================
Buttons Page Object (Async / Playwright)
================================================================================

Button variants, sizes, disabled / loading states and icon buttons. Every
enabled button announces itself with a toast.

================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple

import allure
from loguru import logger
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import Locator, expect

from testsuites.ui_testing.framework.page_base import PageBase


VARIANTS = ("default", "secondary", "destructive", "outline", "ghost", "link")
SIZES = ("small", "default", "large")
ICON_POSITIONS = ("left", "right", "only")

# Buttons that trigger a toast, with their display names, in page order
CLICKABLE_BUTTONS: Tuple[Tuple[str, str], ...] = (
    ("Default Button", "default-button"),
    ("Secondary Button", "secondary-button"),
    ("Destructive Button", "destructive-button"),
    ("Outline Button", "outline-button"),
    ("Ghost Button", "ghost-button"),
    ("Link Button", "link-button"),
    ("Small Button", "small-button"),
    ("Default Size Button", "default-size-button"),
    ("Large Button", "large-button"),
    ("Icon Left Button", "icon-left-button"),
    ("Icon Right Button", "icon-right-button"),
    ("Icon Only Button", "icon-only-button"),
)

NON_CLICKABLE_BUTTONS = (
    "disabled-button",
    "disabled-secondary-button",
    "loading-button",
    "loading-outline-button",
)

SONNER_TOASTS = "[role='status'], [data-sonner-toast]"
SPINNER_SELECTOR = "svg.animate-spin, .spinner, [class*='animate']"


@dataclass
class IconOnlyAccessibility:
    has_sr_only_text: bool
    has_aria_label: bool
    sr_text: str = ""

    @property
    def is_accessible(self) -> bool:
        return self.has_sr_only_text or self.has_aria_label


@dataclass
class ButtonToast:
    button_name: str
    toast_message: str


class ButtonsPage(PageBase):
    """Buttons page object (async)."""

    URL_PATH = "/buttons"
    PAGE_TITLE = "Buttons"
    NAV_SELECTOR = "a[href='/buttons']"

    CLICK_SETTLE_MS = 300
    # Short gap between clicks so consecutive toasts do not stack on one another
    BETWEEN_CLICKS_MS = 200

    def __init__(self, page, base_url: str = ""):
        super().__init__(page, base_url)
        self.toast_timeout = 2000

    def by_test_id(self, test_id: str) -> Locator:
        return self.page.locator(f"[data-testid='{test_id}']")

    def variant_button(self, variant: str) -> Locator:
        if variant not in VARIANTS:
            raise ValueError(f"Unknown button variant: {variant}")
        return self.by_test_id(f"{variant}-button")

    def size_button(self, size: str) -> Locator:
        if size not in SIZES:
            raise ValueError(f"Unknown button size: {size}")
        # The default-size button has its own id; "default-button" is the variant
        return self.by_test_id("default-size-button" if size == "default" else f"{size}-button")

    def icon_button(self, position: str) -> Locator:
        if position not in ICON_POSITIONS:
            raise ValueError(f"Unknown icon position: {position}")
        return self.by_test_id(f"icon-{position}-button")

    @property
    def disabled_button(self) -> Locator:
        return self.by_test_id("disabled-button")

    @property
    def disabled_secondary_button(self) -> Locator:
        return self.by_test_id("disabled-secondary-button")

    @property
    def loading_button(self) -> Locator:
        return self.by_test_id("loading-button")

    @property
    def loading_outline_button(self) -> Locator:
        return self.by_test_id("loading-outline-button")

    @allure.step("Open buttons page")
    async def open(self) -> "ButtonsPage":
        await super().open()
        return self

    @allure.step("Verify buttons page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.variant_button("default")).to_be_visible()
        await expect(self.variant_button("secondary")).to_be_visible()
        await expect(self.variant_button("destructive")).to_be_visible()

    async def _click_for_toast(self, button: Locator) -> str:
        await button.click()
        await self.settle(self.CLICK_SETTLE_MS)
        return await self.get_toast_message()

    @allure.step("Click {variant} variant button")
    async def click_button_variant(self, variant: str) -> str:
        return await self._click_for_toast(self.variant_button(variant))

    @allure.step("Click {size} size button")
    async def click_size_button(self, size: str) -> str:
        return await self._click_for_toast(self.size_button(size))

    @allure.step("Click icon {position} button")
    async def click_icon_button(self, position: str) -> str:
        return await self._click_for_toast(self.icon_button(position))

    async def wait_for_toast_to_disappear(self, timeout: int = 5000) -> bool:
        return await super().wait_for_toast_to_disappear(timeout)

    # =========================================================================
    # States
    # =========================================================================

    async def is_disabled_button_disabled(self) -> bool:
        return await self.disabled_button.is_disabled()

    async def is_disabled_secondary_button_disabled(self) -> bool:
        return await self.disabled_secondary_button.is_disabled()

    async def is_loading_button_disabled(self) -> bool:
        return await self.loading_button.is_disabled()

    async def is_loading_outline_button_disabled(self) -> bool:
        return await self.loading_outline_button.is_disabled()

    @allure.step("Attempt to click disabled button")
    async def attempt_click_disabled_button(self) -> bool:
        """
        Force a click on the disabled button.

        Returns:
            True only if the click produced a new toast
        """
        toasts = self.page.locator(SONNER_TOASTS)
        before = await toasts.count()
        try:
            await self.disabled_button.click(force=True, timeout=1000)
        except PlaywrightError as e:
            logger.debug(f"Disabled button click blocked: {str(e)[:80]}")
            return False
        await self.settle()
        return await toasts.count() > before

    async def has_loading_spinner(self) -> bool:
        return await self.loading_button.locator(SPINNER_SELECTOR).first.is_visible()

    async def has_icon_left(self) -> bool:
        return await self.icon_button("left").locator("svg").first.is_visible()

    async def has_icon_right(self) -> bool:
        return await self.icon_button("right").locator("svg").first.is_visible()

    async def get_icon_only_accessibility(self) -> IconOnlyAccessibility:
        button = self.icon_button("only")
        sr_only = button.locator(".sr-only, [class*='sr-only']").first
        # sr-only text is clipped, so presence in the DOM is what counts
        has_sr_only = await sr_only.count() > 0
        sr_text = ((await sr_only.text_content()) or "").strip() if has_sr_only else ""
        aria_label = await button.get_attribute("aria-label")
        return IconOnlyAccessibility(
            has_sr_only_text=has_sr_only and bool(sr_text),
            has_aria_label=bool(aria_label),
            sr_text=sr_text,
        )

    # =========================================================================
    # Comprehensive
    # =========================================================================

    def clickable_buttons(self) -> Dict[str, Locator]:
        return {name: self.by_test_id(test_id) for name, test_id in CLICKABLE_BUTTONS}

    def non_clickable_buttons(self) -> List[Locator]:
        return [self.by_test_id(test_id) for test_id in NON_CLICKABLE_BUTTONS]

    @allure.step("Click all buttons and collect toasts")
    async def click_all_buttons_and_collect_toasts(self) -> List[ButtonToast]:
        results: List[ButtonToast] = []
        for name, locator in self.clickable_buttons().items():
            toast = await self._click_for_toast(locator)
            results.append(ButtonToast(button_name=name, toast_message=toast))
            logger.debug(f"{name}: {toast or 'No toast'}")
            await self.settle(self.BETWEEN_CLICKS_MS)
        return results
