"""
================================================================================
Form Elements Page Object (Async / Playwright)
================================================================================

Inputs, radios, checkboxes, Radix comboboxes and the textarea of the
Basic Testing > Form Elements page.

================================================================================
"""

from __future__ import annotations

from typing import Iterable, List

import allure
from loguru import logger
from playwright.async_api import Locator, expect

from testsuites.ui_testing.data.form_data import FormData
from testsuites.ui_testing.framework.page_base import PageBase


OPTION_NUMBERS = (1, 2, 3)

# Presses used when walking the focus order
TAB_PRESSES = 15


def _check_option(option: int) -> int:
    if option not in OPTION_NUMBERS:
        raise ValueError(f"Option must be one of {OPTION_NUMBERS}, got {option}")
    return option


class FormElementsPage(PageBase):
    """Form Elements page object (async)."""

    URL_PATH = None
    PAGE_TITLE = "Form Elements"
    NAV_SELECTOR = "text=Form Elements"

    # Radix select opens with an animation
    DROPDOWN_OPEN_MS = 200

    @property
    def email_input(self) -> Locator:
        return self.page.locator("#emailInput")

    @property
    def number_input(self) -> Locator:
        return self.page.locator("#numberInput")

    @property
    def textarea_input(self) -> Locator:
        return self.page.locator("#textareaInput")

    @property
    def single_select_dropdown(self) -> Locator:
        return self.page.locator("#selectOption")

    @property
    def multi_select(self) -> Locator:
        return self.page.locator("#multiSelect")

    @property
    def reset_button(self) -> Locator:
        return self.page.locator("button:has-text('Reset')")

    @property
    def submit_button(self) -> Locator:
        return self.page.locator("button:has-text('Submit')")

    def radio(self, option: int) -> Locator:
        return self.page.locator(f"#r{_check_option(option)}")

    def checkbox(self, option: int) -> Locator:
        return self.page.locator(f"#option{_check_option(option)}")

    def option(self, text: str) -> Locator:
        return self.page.locator(f"[role='option']:has-text('{text}')")

    @allure.step("Open form elements page")
    async def open(self) -> "FormElementsPage":
        await super().open()
        return self

    # =========================================================================
    # Inputs
    # =========================================================================

    async def fill_email(self, email: str) -> None:
        await self.email_input.fill(email)

    async def fill_number(self, number: str) -> None:
        await self.number_input.fill(number)

    async def fill_textarea(self, text: str) -> None:
        await self.textarea_input.fill(text)

    async def get_email_value(self) -> str:
        return await self.email_input.input_value()

    async def get_number_value(self) -> str:
        return await self.number_input.input_value()

    async def get_textarea_value(self) -> str:
        return await self.textarea_input.input_value()

    # =========================================================================
    # Radios and checkboxes
    # =========================================================================

    @allure.step("Select radio option {option}")
    async def select_radio_option(self, option: int) -> None:
        await self.radio(option).check()

    async def is_radio_selected(self, option: int) -> bool:
        return await self.radio(option).is_checked()

    async def selected_radio(self) -> int:
        """Selected radio option number, 0 when none is selected."""
        for option in OPTION_NUMBERS:
            if await self.is_radio_selected(option):
                return option
        return 0

    @allure.step("Check checkbox {option}")
    async def check_checkbox(self, option: int) -> None:
        await self.checkbox(option).check()

    @allure.step("Uncheck checkbox {option}")
    async def uncheck_checkbox(self, option: int) -> None:
        await self.checkbox(option).uncheck()

    async def is_checkbox_checked(self, option: int) -> bool:
        return await self.checkbox(option).is_checked()

    # =========================================================================
    # Dropdowns
    # =========================================================================

    @allure.step("Select dropdown option {option_text}")
    async def select_dropdown_option(self, option_text: str) -> None:
        await self.single_select_dropdown.click()
        await self.settle(self.DROPDOWN_OPEN_MS)
        await self.option(option_text).first.click()

    async def get_selected_dropdown_value(self) -> str:
        return ((await self.single_select_dropdown.text_content()) or "").strip()

    @allure.step("Select multiple options")
    async def select_multiple_options(self, option_texts: Iterable[str]) -> None:
        """
        Select several options in the multi-select.

        Works with a native <select multiple> and with the listbox variant;
        options that are not visible in the listbox are skipped.
        """
        option_texts = list(option_texts)
        tag_name = await self.multi_select.evaluate("el => el.tagName.toLowerCase()")

        if tag_name == "select":
            await self.multi_select.select_option(label=option_texts)
            return

        await self.multi_select.click()
        await self.settle(self.DROPDOWN_OPEN_MS)
        for text in option_texts:
            option = self.option(text).first
            if await option.is_visible():
                await option.click()
            else:
                logger.warning(f"Multi-select option not visible: {text}")
        await self.page.keyboard.press("Escape")

    # =========================================================================
    # Form
    # =========================================================================

    @allure.step("Reset form")
    async def click_reset(self) -> None:
        await self.reset_button.click()

    @allure.step("Submit form")
    async def click_submit(self) -> None:
        await self.submit_button.click()

    @allure.step("Fill complete form")
    async def fill_complete_form(self, data: FormData) -> None:
        await self.fill_email(data.email)
        await self.fill_number(data.number)
        await self.select_radio_option(data.radio_option)
        for option in data.checkboxes:
            await self.check_checkbox(option)
        await self.select_dropdown_option(data.dropdown_value)
        if data.multi_select_values:
            await self.select_multiple_options(data.multi_select_values)
        await self.fill_textarea(data.textarea_text)

    async def are_all_fields_empty(self) -> bool:
        """Text inputs empty and no radio or checkbox selected."""
        if await self.get_email_value() or await self.get_number_value():
            return False
        if await self.get_textarea_value():
            return False
        for option in OPTION_NUMBERS:
            if await self.is_radio_selected(option) or await self.is_checkbox_checked(option):
                return False
        return True

    @allure.step("Verify form elements page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.email_input).to_be_visible()
        await expect(self.number_input).to_be_visible()
        await expect(self.radio(1)).to_be_visible()
        await expect(self.checkbox(1)).to_be_visible()
        await expect(self.single_select_dropdown).to_be_visible()
        await expect(self.textarea_input).to_be_visible()
        await expect(self.submit_button).to_be_visible()

    async def scroll_to_automation_challenge(self) -> None:
        await self.page.locator("text=Automation Challenge").scroll_into_view_if_needed()

    async def _focused_id(self) -> str:
        return await self.page.evaluate("() => document.activeElement ? document.activeElement.id : ''")

    @allure.step("Collect tab order")
    async def get_tab_order(self) -> List[str]:
        """Ids of the elements focused while tabbing from the email input, in order."""
        order: List[str] = []
        await self.email_input.focus()
        first = await self._focused_id()
        if first:
            order.append(first)

        for _ in range(TAB_PRESSES):
            await self.page.keyboard.press("Tab")
            focused = await self._focused_id()
            if focused and focused not in order:
                order.append(focused)

        logger.debug(f"Tab order: {order}")
        return order
