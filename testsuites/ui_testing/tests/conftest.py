"""
================================================================================
UI Testing Pytest Configuration
================================================================================

This module configures pytest for UI tests, providing fixtures for browser
management, page objects, and test setup/teardown.

Key Features:
- One browser per session (per xdist worker), fresh context per test
- Page Object fixtures, already navigated to their page
- Screenshot + URL attached to Allure on failure
- Suite skipped when no browser can start or the app is unreachable

================================================================================
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from loguru import logger
from playwright.async_api import BrowserContext, Page, expect
from playwright.async_api import Error as PlaywrightError

from testsuites.ui_testing.framework.browser_manager import BrowserManager
from testsuites.ui_testing.framework.page_base import BasePage
from testsuites.ui_testing.pages import (
    AccountPage,
    AlertsPage,
    ButtonsPage,
    DatePickerPage,
    FileUploadPage,
    FormElementsPage,
    LoginPage,
    RegisterPage,
)
from uitest_tools.common import get_config, get_timeout


def _skip_or_raise(reason: str, error: Exception) -> None:
    if get_config("ui.skip_if_unreachable", True):
        logger.warning(f"{reason}: {error}")
        pytest.skip(f"{reason}: {str(error).splitlines()[0]}")
    raise error


# ================================================================================
# Browser Fixtures
# ================================================================================

@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def browser_manager() -> AsyncGenerator[BrowserManager, None]:
    """
    Session-scoped browser manager fixture.

    Provides a single launched browser for all tests in the session,
    reducing browser launch overhead.
    """
    manager = BrowserManager()
    try:
        await manager.start()
    except PlaywrightError as e:
        _skip_or_raise(f"Cannot launch {manager.browser_type}", e)

    expect.set_options(timeout=get_timeout("expect", 10000))
    yield manager
    await manager.close()


@pytest_asyncio.fixture(scope="session", loop_scope="session")
async def app_available(browser_manager: BrowserManager) -> bool:
    """Check once per session that the application is reachable."""
    context = await browser_manager.new_context()
    try:
        page = await context.new_page()
        await page.goto(browser_manager.base_url, wait_until="domcontentloaded")
        logger.info(f"Application reachable: {browser_manager.base_url}")
    except PlaywrightError as e:
        _skip_or_raise(f"Application unreachable at {browser_manager.base_url}", e)
    finally:
        await browser_manager.close_context(context)
    return True


@pytest_asyncio.fixture(loop_scope="session")
async def context(
    browser_manager: BrowserManager,
    app_available: bool,
) -> AsyncGenerator[BrowserContext, None]:
    """
    Function-scoped browser context fixture.

    Creates a new browser context for each test, providing isolation.
    """
    context = await browser_manager.new_context()
    yield context
    await browser_manager.close_context(context)


@pytest_asyncio.fixture(loop_scope="session")
async def page(request, context: BrowserContext) -> AsyncGenerator[Page, None]:
    """
    Function-scoped page fixture.

    Creates a new page for each test and captures a screenshot and the
    current URL when the test body fails.
    """
    page = await context.new_page()
    yield page

    report = getattr(request.node, "rep_call", None)
    if report is not None and report.failed:
        try:
            await BasePage(page).capture_failure(request.node.name)
        except PlaywrightError as e:
            logger.warning(f"Failed to capture screenshot on failure: {e}")
    await page.close()


# ================================================================================
# Page Object Fixtures
# ================================================================================

@pytest_asyncio.fixture(loop_scope="session")
async def login_page(page: Page) -> LoginPage:
    """LoginPage opened through the home page, form verified."""
    login = LoginPage(page)
    await login.open()
    await login.verify_page_loaded()
    return login


@pytest.fixture
def account_page(page: Page) -> AccountPage:
    return AccountPage(page)


@pytest_asyncio.fixture(loop_scope="session")
async def register_page(page: Page) -> RegisterPage:
    register = RegisterPage(page)
    await register.open()
    await register.verify_page_loaded()
    return register


@pytest_asyncio.fixture(loop_scope="session")
async def form_elements_page(page: Page) -> FormElementsPage:
    form = FormElementsPage(page)
    await form.open()
    return form


@pytest_asyncio.fixture(loop_scope="session")
async def alerts_page(page: Page) -> AlertsPage:
    alerts = AlertsPage(page)
    await alerts.open()
    return alerts


@pytest_asyncio.fixture(loop_scope="session")
async def buttons_page(page: Page) -> ButtonsPage:
    buttons = ButtonsPage(page)
    await buttons.open()
    return buttons


@pytest_asyncio.fixture(loop_scope="session")
async def date_picker_page(page: Page) -> DatePickerPage:
    date_picker = DatePickerPage(page)
    await date_picker.open()
    return date_picker


@pytest_asyncio.fixture(loop_scope="session")
async def file_upload_page(page: Page) -> FileUploadPage:
    upload = FileUploadPage(page)
    await upload.open()
    return upload


# ================================================================================
# Test Lifecycle Hooks
# ================================================================================

@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """
    Keep each phase's report on the item.

    The `page` fixture reads `rep_call` during teardown to decide whether
    to capture failure details.
    """
    outcome = yield
    report = outcome.get_result()
    setattr(item, f"rep_{report.when}", report)
