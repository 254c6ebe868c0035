"""
================================================================================
Date Picker Page Object (Async / Playwright)
================================================================================

Single date, date range and date + time pickers built on a popover
calendar grid.

Covers:
    - Day selection and submission
    - Month navigation and caption
    - Keyboard navigation inside the grid
    - Disabled-day checks and month-boundary edges

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

import re
from typing import Optional

import allure
from loguru import logger
from playwright.async_api import Locator, expect
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

from testsuites.ui_testing.framework.page_base import PageBase


DAY_CELL = "button[role='gridcell']"
ENABLED_DAY_CELL = "button[role='gridcell']:not([disabled])"
PREV_MONTH = "button[aria-label*='previous month'], button[name='previous-month']"
NEXT_MONTH = "button[aria-label*='next month'], button[name='next-month']"
CAPTION = "[class*='caption'], [class*='month-caption']"
POPOVER = "[role='dialog'], [data-radix-popper-content-wrapper]"

ARROW_KEYS = {
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "up": "ArrowUp",
    "down": "ArrowDown",
}

# Class names the calendar uses for days that cannot be picked
DISABLED_DAY_CLASSES = ("disabled", "day-disabled", "day-outside")


def _exact_day(day: int) -> re.Pattern:
    """Match the cell text exactly so day 1 never matches 15."""
    if not 1 <= day <= 31:
        raise ValueError(f"Day must be between 1 and 31, got {day}")
    return re.compile(rf"^{day}$")


class DatePickerPage(PageBase):
    """Date picker page object (async)."""

    URL_PATH = "/date-picker"
    PAGE_TITLE = "Date Picker"
    NAV_SELECTOR = "a[href='/date-picker']"
    TOAST_SELECTOR = "li[role='status'], [data-sonner-toast]"

    POPOVER_TIMEOUT = 3000
    MONTH_CHANGE_MS = 500
    SELECT_SETTLE_MS = 300
    KEY_SETTLE_MS = 100
    CLOSE_SETTLE_MS = 200

    @property
    def single_date_button(self) -> Locator:
        return self.page.locator("#single-date")

    @property
    def submit_date_button(self) -> Locator:
        return self.page.locator("[data-testid='date-submit-button']")

    @property
    def date_range_button(self) -> Locator:
        return self.page.locator("#date-range")

    @property
    def submit_date_range_button(self) -> Locator:
        return self.page.locator("[data-testid='date-range-submit-button']")

    @property
    def date_time_button(self) -> Locator:
        return self.page.locator("#date-time")

    @property
    def time_input(self) -> Locator:
        return self.page.locator("#time")

    @property
    def submit_date_time_button(self) -> Locator:
        return self.page.locator("[data-testid='date-time-submit-button']")

    @property
    def calendar_popover(self) -> Locator:
        return self.page.locator(POPOVER).first

    def day_cell(self, day: int, enabled_only: bool = True) -> Locator:
        selector = ENABLED_DAY_CELL if enabled_only else DAY_CELL
        return self.page.locator(selector).filter(has_text=_exact_day(day)).first

    @allure.step("Open date picker page")
    async def open(self) -> "DatePickerPage":
        await super().open()
        return self

    @allure.step("Verify date picker page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.single_date_button).to_be_visible()
        await expect(self.date_range_button).to_be_visible()
        await expect(self.date_time_button).to_be_visible()

    # =========================================================================
    # Calendar
    # =========================================================================

    async def _open_picker(self, trigger: Locator) -> None:
        await trigger.click()
        await self.calendar_popover.wait_for(state="visible", timeout=self.POPOVER_TIMEOUT)

    @allure.step("Open single date picker")
    async def open_single_date_picker(self) -> None:
        await self._open_picker(self.single_date_button)

    @allure.step("Open date range picker")
    async def open_date_range_picker(self) -> None:
        await self._open_picker(self.date_range_button)

    @allure.step("Open date-time picker")
    async def open_date_time_picker(self) -> None:
        await self._open_picker(self.date_time_button)

    @allure.step("Select day {day}")
    async def select_day(self, day: int) -> None:
        await self.day_cell(day).click()

    async def _change_month(self, selector: str) -> None:
        # Fresh locator each time; the header re-renders on every month change
        button = self.page.locator(selector).first
        await button.wait_for(state="visible", timeout=5000)
        await button.click()
        await self.settle(self.MONTH_CHANGE_MS)

    async def go_to_previous_month(self) -> None:
        await self._change_month(PREV_MONTH)

    async def go_to_next_month(self) -> None:
        await self._change_month(NEXT_MONTH)

    async def navigate_calendar_months(self, direction: str, times: int = 1) -> None:
        """Click previous ('prev') or next ('next') `times` times."""
        if direction not in ("prev", "next"):
            raise ValueError(f"Direction must be 'prev' or 'next', got {direction!r}")
        for _ in range(times):
            if direction == "prev":
                await self.go_to_previous_month()
            else:
                await self.go_to_next_month()

    async def get_current_calendar_month(self) -> str:
        """Caption of the displayed month, e.g. "January 2026"; "" if not shown."""
        return await self.text_or_empty(self.page.locator(CAPTION).first, 2000)

    async def is_calendar_open(self) -> bool:
        return await self.calendar_popover.is_visible()

    async def close_calendar(self) -> None:
        await self.press_key("Escape")
        await self.settle(self.CLOSE_SETTLE_MS)

    # =========================================================================
    # Single date / range / date-time
    # =========================================================================

    @allure.step("Select single date {day}")
    async def select_single_date(self, day: int) -> None:
        await self.open_single_date_picker()
        await self.select_day(day)
        await self.submit_date_button.click()

    async def get_selected_single_date(self) -> str:
        return ((await self.single_date_button.text_content()) or "").strip()

    @allure.step("Select date range {start_day} - {end_day}")
    async def select_date_range(self, start_day: int, end_day: int) -> None:
        await self.open_date_range_picker()
        await self.select_day(start_day)
        await self.settle(self.SELECT_SETTLE_MS)
        await self.select_day(end_day)
        await self.settle(self.SELECT_SETTLE_MS)
        await self.submit_date_range_button.click()

    async def get_selected_date_range(self) -> str:
        return ((await self.date_range_button.text_content()) or "").strip()

    @allure.step("Set time {time}")
    async def set_time(self, time: str) -> None:
        await self.time_input.click()
        await self.time_input.clear()
        await self.time_input.fill(time)

    async def get_time_value(self) -> str:
        return await self.time_input.input_value()

    @allure.step("Select date {day} and time {time}")
    async def select_date_and_time(self, day: int, time: str) -> None:
        await self.open_date_time_picker()
        await self.select_day(day)
        await self.settle(self.SELECT_SETTLE_MS)
        await self.close_calendar()
        await self.set_time(time)
        await self.submit_date_time_button.click()

    async def get_selected_date_time(self) -> str:
        return ((await self.date_time_button.text_content()) or "").strip()

    # =========================================================================
    # Keyboard
    # =========================================================================

    async def press_key(self, key: str) -> None:
        await self.page.keyboard.press(key)
        await self.settle(self.KEY_SETTLE_MS)

    async def navigate_with_arrow_key(self, direction: str) -> None:
        try:
            key = ARROW_KEYS[direction]
        except KeyError:
            raise ValueError(f"Unknown arrow direction: {direction}") from None
        await self.press_key(key)

    async def get_focused_day(self) -> Optional[int]:
        """Day number of the focused grid cell, None when no cell has focus."""
        text = await self.text_or_empty(self.page.locator(f"{DAY_CELL}:focus").first, 1000)
        return int(text) if text.isdigit() else None

    # =========================================================================
    # Range validation and edges
    # =========================================================================

    async def is_day_disabled(self, day: int) -> bool:
        cell = self.day_cell(day, enabled_only=False)
        if await cell.is_disabled():
            return True
        if await cell.get_attribute("aria-disabled") == "true":
            return True
        classes = (await cell.get_attribute("class") or "").split()
        return any(name in classes for name in DISABLED_DAY_CLASSES)

    @allure.step("Attempt to click disabled day {day}")
    async def attempt_click_disabled_day(self, day: int) -> bool:
        """True when the click is blocked or leaves the selected date unchanged."""
        before = await self.get_selected_single_date()
        try:
            await self.day_cell(day, enabled_only=False).click(timeout=1000)
        except PlaywrightTimeoutError:
            return True
        return before == await self.get_selected_single_date()

    @allure.step("Select first day of next month")
    async def navigate_to_first_day_next_month(self) -> None:
        await self.go_to_next_month()
        await self.select_day(1)

    @allure.step("Select last day of previous month")
    async def navigate_to_last_day_previous_month(self) -> str:
        """Select the last enabled day after moving back a month; returns its text."""
        await self.go_to_previous_month()
        last_day = self.page.locator(ENABLED_DAY_CELL).last
        text = ((await last_day.text_content()) or "").strip()
        await last_day.click()
        logger.debug(f"Selected last day of previous month: {text}")
        return text
