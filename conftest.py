"""
Repository-level pytest configuration.

Command-line switches for the UI suite are exported as environment
variables so that `ConfigLoader` picks them up as overrides of
`config/config.yaml` (e.g. `--ui-browser firefox` -> `UI_BROWSER=firefox`).
Values already present in the environment are left alone.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    group = parser.getgroup("ui", "practice-app UI suite")
    group.addoption(
        "--ui-browser",
        action="store",
        default=None,
        help="Browser to run: chromium, firefox, webkit, msedge, chrome",
    )
    group.addoption(
        "--ui-headed",
        action="store_true",
        default=False,
        help="Run the browser with a visible window",
    )
    group.addoption(
        "--ui-base-url",
        action="store",
        default=None,
        help="Base URL of the application under test",
    )
    group.addoption(
        "--ui-slow-mo",
        action="store",
        default=None,
        help="Delay in ms between browser operations",
    )


def pytest_configure(config):
    overrides = {
        "UI_BROWSER": config.getoption("--ui-browser"),
        "UI_BASE_URL": config.getoption("--ui-base-url"),
        "UI_SLOW_MO": config.getoption("--ui-slow-mo"),
        "UI_HEADLESS": "false" if config.getoption("--ui-headed") else None,
    }
    for key, value in overrides.items():
        if value is not None:
            os.environ.setdefault(key, str(value))


@pytest.fixture(scope="session")
def project_root() -> Path:
    """Return repo root path."""
    return Path(__file__).parent
