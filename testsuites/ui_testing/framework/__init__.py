"""
================================================================================
UI Testing Framework
================================================================================

Playwright-based UI automation framework for the practice application.

Components:
    - smart_locator: Element location with fallback strategies
    - page_base: Base page object with soft-failing waits
    - browser_manager: Browser lifecycle management
    - scenario_loader: Login scenarios from spreadsheets

Author: Automation Team
License: MIT
================================================================================
"""

from .smart_locator import SmartLocator, ElementNotFoundError
from .page_base import BasePage, PageBase
from .browser_manager import BrowserManager
from .scenario_loader import (
    ExpectedOutcome,
    Scenario,
    ScenarioDataError,
    ScenarioLoader,
    SheetNotFoundError,
)

__all__ = [
    "SmartLocator",
    "ElementNotFoundError",
    "BasePage",
    "PageBase",
    "BrowserManager",
    "ExpectedOutcome",
    "Scenario",
    "ScenarioDataError",
    "ScenarioLoader",
    "SheetNotFoundError",
]
