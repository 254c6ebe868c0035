"""
================================================================================
Suite Pytest Configuration
================================================================================

This module provides the pytest configuration shared by the UI and unit
suites. It registers common markers, tags tests by directory and sets up
logging once per session.

================================================================================
"""

import pytest

from uitest_tools.common import get_config, init_logger


def pytest_configure(config):
    """Configure pytest with project-wide custom markers."""

    # Priority markers
    config.addinivalue_line(
        "markers", "P0: Critical priority tests - must pass for deployment"
    )
    config.addinivalue_line(
        "markers", "P1: High priority tests - important functionality"
    )
    config.addinivalue_line(
        "markers", "P2: Medium priority tests - edge cases and minor features"
    )
    config.addinivalue_line(
        "markers", "P3: Low priority tests - extensive validation"
    )

    # Test type markers
    config.addinivalue_line(
        "markers", "smoke: Quick verification tests"
    )
    config.addinivalue_line(
        "markers", "regression: Full regression test suite"
    )
    config.addinivalue_line(
        "markers", "smoke_ui: Quick verification of the UI flows"
    )
    config.addinivalue_line(
        "markers", "regression_ui: Full UI regression"
    )
    config.addinivalue_line(
        "markers", "e2e: End-to-end tests simulating user flows"
    )
    config.addinivalue_line(
        "markers", "data_driven: Tests parametrized from scenario tables or workbooks"
    )

    # Domain markers
    config.addinivalue_line(
        "markers", "ui: Browser tests against the practice application"
    )
    config.addinivalue_line(
        "markers", "unit: Offline tests of the framework itself"
    )

    init_logger(
        level=get_config("logging.level", "INFO"),
        log_file=get_config("logging.file"),
    )


def pytest_collection_modifyitems(config, items):
    """
    Modify collected test items.

    Adds the domain marker from the test's directory so `-m ui` and
    `-m unit` select whole suites.
    """
    for item in items:
        path = str(item.fspath)
        if "ui_testing" in path:
            item.add_marker(pytest.mark.ui)
        elif "unit" in path:
            item.add_marker(pytest.mark.unit)


def pytest_report_header(config):
    """Add custom header to pytest output."""
    return [
        "",
        "=" * 60,
        "Practice App UI Automation Suite",
        f"Base URL : {get_config('ui.base_url')}",
        f"Browser  : {get_config('ui.browser', 'chromium')} "
        f"(headless={get_config('ui.headless', True)})",
        "=" * 60,
        "",
    ]
