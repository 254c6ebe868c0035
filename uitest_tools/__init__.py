"""
================================================================================
UI Test Tools
================================================================================

Shared utilities for the practice-app UI automation suite.

Modules:
    - common: Configuration loading and logging setup
    - report_tools: Allure attachment helpers
    - data_generator: Random credentials and e-mail addresses for form tests

Example:
    from uitest_tools.common import ConfigLoader, init_logger
    from uitest_tools.data_generator import random_email

    init_logger()
    base_url = ConfigLoader().get("ui.base_url")
    email = random_email()

================================================================================
"""

__version__ = "1.0.0"

__all__ = [
    "common",
    "report_tools",
    "data_generator",
]
