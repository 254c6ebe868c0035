"""Allure reporting helpers."""

from .allure_utils import attach_json, attach_page_state, attach_scenario, attach_text

__all__ = [
    "attach_json",
    "attach_text",
    "attach_scenario",
    "attach_page_state",
]
