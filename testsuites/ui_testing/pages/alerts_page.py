"""
================================================================================
Alerts Page Object (Async / Playwright)
================================================================================

Native JavaScript dialogs (alert, confirm, prompt) and toast notifications.

Dialogs are intercepted with a one-shot handler registered before the
trigger is clicked; the result of the dialog is reported by the toast the
application shows afterwards.

Author: Automation Team
License: MIT
================================================================================
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

import allure
from loguru import logger
from playwright.async_api import Dialog, Locator, expect

from testsuites.ui_testing.framework.page_base import PageBase


@dataclass
class DialogResult:
    """Message of an intercepted dialog and the toast shown afterwards."""
    message: str = ""
    toast: str = ""
    dialog_type: str = ""


TRIGGER_BUTTONS = (
    "Trigger Alert",
    "Trigger Confirm",
    "Trigger Prompt",
    "Show Success Toast",
    "Show Error Toast",
)


class AlertsPage(PageBase):
    """Alerts page object (async)."""

    URL_PATH = "/alerts"
    PAGE_TITLE = "Alerts"
    NAV_SELECTOR = "a[href='/alerts']"

    # Time for the dialog handler to run and the toast to mount
    DIALOG_SETTLE_MS = 500
    TOAST_SETTLE_MS = 300

    def button(self, name: str) -> Locator:
        return self.page.get_by_role("button", name=name)

    @property
    def trigger_alert_button(self) -> Locator:
        return self.button("Trigger Alert")

    @property
    def trigger_confirm_button(self) -> Locator:
        return self.button("Trigger Confirm")

    @property
    def trigger_prompt_button(self) -> Locator:
        return self.button("Trigger Prompt")

    @property
    def show_success_toast_button(self) -> Locator:
        return self.button("Show Success Toast")

    @property
    def show_error_toast_button(self) -> Locator:
        return self.button("Show Error Toast")

    def trigger_buttons(self) -> List[Locator]:
        return [self.button(name) for name in TRIGGER_BUTTONS]

    @allure.step("Open alerts page")
    async def open(self) -> "AlertsPage":
        await super().open()
        return self

    @allure.step("Verify alerts page loaded")
    async def verify_page_loaded(self) -> None:
        await expect(self.trigger_alert_button).to_be_visible()
        await expect(self.trigger_confirm_button).to_be_visible()
        await expect(self.trigger_prompt_button).to_be_visible()

    async def _handle_dialog(
        self,
        trigger: Locator,
        accept: bool = True,
        prompt_text: Optional[str] = None,
    ) -> DialogResult:
        """Click `trigger`, answer the dialog it opens, and record what it said."""
        result = DialogResult()

        async def handler(dialog: Dialog) -> None:
            result.message = dialog.message
            result.dialog_type = dialog.type
            if not accept:
                await dialog.dismiss()
            elif prompt_text is not None:
                await dialog.accept(prompt_text)
            else:
                await dialog.accept()

        self.page.once("dialog", handler)
        await trigger.click()
        await self.settle(self.DIALOG_SETTLE_MS)
        logger.debug(f"Dialog handled: type={result.dialog_type} message={result.message!r}")
        return result

    @allure.step("Trigger standard alert")
    async def trigger_standard_alert(self) -> str:
        """Accept the alert and return its message ("" if none appeared)."""
        result = await self._handle_dialog(self.trigger_alert_button)
        return result.message

    @allure.step("Trigger confirm dialog (accept={accept})")
    async def trigger_confirm_dialog(self, accept: bool) -> DialogResult:
        result = await self._handle_dialog(self.trigger_confirm_button, accept=accept)
        result.toast = await self.get_toast_message()
        return result

    @allure.step("Trigger prompt dialog (accept={accept})")
    async def trigger_prompt_dialog(self, text: str, accept: bool = True) -> DialogResult:
        result = await self._handle_dialog(
            self.trigger_prompt_button, accept=accept, prompt_text=text
        )
        result.toast = await self.get_toast_message()
        return result

    @allure.step("Show success toast")
    async def show_success_toast(self) -> str:
        await self.show_success_toast_button.click()
        await self.settle(self.TOAST_SETTLE_MS)
        return await self.get_toast_message()

    @allure.step("Show error toast")
    async def show_error_toast(self) -> str:
        await self.show_error_toast_button.click()
        await self.settle(self.TOAST_SETTLE_MS)
        return await self.get_toast_message()

    async def trigger_button_visibility(self) -> Dict[str, bool]:
        return {
            name: await self.wait_visible(self.button(name), 2000)
            for name in TRIGGER_BUTTONS
        }
