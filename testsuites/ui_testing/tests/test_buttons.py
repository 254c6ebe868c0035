"""
================================================================================
Buttons UI Tests (Async / Playwright)
================================================================================

Variants, sizes, disabled and loading states, icon buttons and a sweep
over every clickable button.

================================================================================
"""

import allure
import pytest
from playwright.async_api import expect

from testsuites.ui_testing.pages.buttons_page import (
    CLICKABLE_BUTTONS,
    ICON_POSITIONS,
    SIZES,
    VARIANTS,
    ButtonsPage,
)


pytestmark = pytest.mark.asyncio(loop_scope="session")


@allure.epic("UI Testing")
@allure.feature("Buttons")
class TestButtons:
    """Buttons UI test suite (async)."""

    @allure.story("Variants")
    @allure.title("TC01 - Each variant shows a toast naming it")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P0
    @pytest.mark.smoke_ui
    async def test_variants_trigger_toasts(self, buttons_page: ButtonsPage):
        await buttons_page.verify_page_loaded()

        for variant in VARIANTS:
            with allure.step(f"Click {variant} button"):
                toast = await buttons_page.click_button_variant(variant)
                assert variant in toast.lower(), f"{variant}: {toast!r}"
                await buttons_page.wait_for_toast_to_disappear()

    @allure.story("States")
    @allure.title("TC02 - Disabled buttons cannot be clicked")
    @allure.severity(allure.severity_level.CRITICAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_disabled_buttons(self, buttons_page: ButtonsPage):
        assert await buttons_page.is_disabled_button_disabled()
        assert await buttons_page.is_disabled_secondary_button_disabled()
        await expect(buttons_page.disabled_button).to_have_attribute("disabled", "")
        await expect(buttons_page.disabled_secondary_button).to_have_attribute("disabled", "")

        assert not await buttons_page.attempt_click_disabled_button()

    @allure.story("States")
    @allure.title("TC03 - Loading buttons show a spinner and are disabled")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_loading_buttons(self, buttons_page: ButtonsPage):
        assert await buttons_page.is_loading_button_disabled()
        assert await buttons_page.is_loading_outline_button_disabled()
        assert await buttons_page.has_loading_spinner()

        await expect(buttons_page.loading_button).to_be_disabled()
        await expect(buttons_page.loading_outline_button).to_be_disabled()
        assert "loading" in ((await buttons_page.loading_button.text_content()) or "").lower()
        assert "processing" in ((await buttons_page.loading_outline_button.text_content()) or "").lower()

    @allure.story("Sizes")
    @allure.title("TC04 - Each size shows a toast naming it")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P1
    @pytest.mark.regression_ui
    async def test_sizes_trigger_toasts(self, buttons_page: ButtonsPage):
        for size in SIZES:
            with allure.step(f"Click {size} button"):
                toast = await buttons_page.click_size_button(size)
                assert size in toast.lower(), f"{size}: {toast!r}"
                await buttons_page.wait_for_toast_to_disappear()

    @allure.story("Icons")
    @allure.title("TC05 - Icon buttons show icon and label")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_icon_buttons(self, buttons_page: ButtonsPage):
        assert await buttons_page.has_icon_left()
        assert await buttons_page.has_icon_right()
        assert "Icon Left" in ((await buttons_page.icon_button("left").text_content()) or "")
        assert "Icon Right" in ((await buttons_page.icon_button("right").text_content()) or "")

        assert await buttons_page.click_icon_button("left") != ""
        await buttons_page.wait_for_toast_to_disappear()
        assert await buttons_page.click_icon_button("right") != ""

    @allure.story("Accessibility")
    @allure.title("TC06 - Icon-only button has an accessible name")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.regression_ui
    async def test_icon_only_accessibility(self, buttons_page: ButtonsPage):
        icon_only = buttons_page.icon_button("only")
        await expect(icon_only).to_be_visible()

        accessibility = await buttons_page.get_icon_only_accessibility()
        assert accessibility.is_accessible
        if accessibility.has_sr_only_text:
            assert accessibility.sr_text

        await expect(icon_only.locator("svg")).to_be_visible()
        assert await buttons_page.click_icon_button("only") != ""

    @allure.story("Comprehensive")
    @allure.title("TC07 - Every clickable button shows a toast")
    @allure.severity(allure.severity_level.NORMAL)
    @pytest.mark.P2
    @pytest.mark.e2e
    async def test_all_buttons(self, buttons_page: ButtonsPage):
        await buttons_page.verify_page_loaded()
        for button in buttons_page.clickable_buttons().values():
            await expect(button).to_be_visible()

        results = await buttons_page.click_all_buttons_and_collect_toasts()

        allure.attach(
            "\n".join(f"{r.button_name}: {r.toast_message or 'No toast'}" for r in results),
            name="button toasts",
            attachment_type=allure.attachment_type.TEXT,
        )
        assert len(results) == len(CLICKABLE_BUTTONS) == 12
        assert [r.button_name for r in results if not r.toast_message] == []

    @allure.story("Layout")
    @allure.title("TC08 - All button types are visible")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.regression_ui
    async def test_all_buttons_visible(self, buttons_page: ButtonsPage):
        for button in buttons_page.clickable_buttons().values():
            await expect(button).to_be_visible()
        for button in buttons_page.non_clickable_buttons():
            await expect(button).to_be_visible()

    @allure.story("Validation")
    @allure.title("Unknown variant, size or icon position is rejected")
    @allure.severity(allure.severity_level.MINOR)
    @pytest.mark.P3
    @pytest.mark.parametrize(
        "factory, value",
        [("variant_button", "primary"), ("size_button", "huge"), ("icon_button", "top")],
    )
    async def test_unknown_button_kind(self, buttons_page: ButtonsPage, factory: str, value: str):
        assert value not in VARIANTS + SIZES + ICON_POSITIONS
        with pytest.raises(ValueError):
            getattr(buttons_page, factory)(value)
