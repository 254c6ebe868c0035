"""
================================================================================
Allure Report Utilities
================================================================================

Attachment helpers used by UI tests and fixtures to enrich Allure reports.

Features:
- JSON / text attachments
- Scenario attachment for data-driven tests
- Page state attachment (URL + visible error messages) on failure

================================================================================
"""

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any, Iterable, Optional

import allure


def _default(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    return str(obj)


def attach_json(data: Any, name: str = "Data") -> None:
    """
    Attach JSON data to Allure report.

    Args:
        data: Data to attach (dataclasses are converted first)
        name: Attachment name
    """
    if is_dataclass(data) and not isinstance(data, type):
        data = asdict(data)
    json_str = json.dumps(data, indent=2, ensure_ascii=False, default=_default)
    allure.attach(
        json_str,
        name=name,
        attachment_type=allure.attachment_type.JSON
    )


def attach_text(text: str, name: str = "Text") -> None:
    """
    Attach text content to Allure report.

    Args:
        text: Text to attach
        name: Attachment name
    """
    allure.attach(
        text,
        name=name,
        attachment_type=allure.attachment_type.TEXT
    )


def attach_scenario(scenario: Any, name: Optional[str] = None) -> None:
    """
    Attach a data-driven scenario and tag the Allure test with its id.

    Passwords are attached as-is: every scenario in this suite is synthetic.
    """
    test_id = getattr(scenario, "test_id", None)
    if test_id:
        allure.dynamic.tag(test_id)
    attach_json(scenario, name=name or f"Scenario {test_id or ''}".strip())


def attach_page_state(url: str, errors: Iterable[str] = ()) -> None:
    """Attach current URL and visible error messages."""
    attach_text(url, name="Current URL")
    errors = list(errors)
    if errors:
        attach_json(errors, name="Visible Errors")


__all__ = [
    "attach_json",
    "attach_text",
    "attach_scenario",
    "attach_page_state",
]
