"""Form Elements page test data."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class FormData:
    """A complete Form Elements submission."""
    email: str
    number: str
    radio_option: int
    checkboxes: Tuple[int, ...] = ()
    dropdown_value: str = ""
    multi_select_values: Tuple[str, ...] = field(default_factory=tuple)
    textarea_text: str = ""


VALID_FORM_DATA = FormData(
    email="test@example.com",
    number="42",
    radio_option=2,
    checkboxes=(1, 2),
    dropdown_value="Item 2",
    textarea_text="This is a test message for the textarea field.",
)

WORKFLOW_FORM_DATA = FormData(
    email="complete@workflow.com",
    number="99",
    radio_option=2,
    checkboxes=(1, 3),
    dropdown_value="Item 2",
    textarea_text="Complete workflow test message",
)

DROPDOWN_OPTIONS: Tuple[str, ...] = ("Item 1", "Item 2", "Item 3")
MULTI_SELECT_OPTIONS: Tuple[str, ...] = ("Multi Option 1", "Multi Option 2", "Multi Option 3")

MEDIUM_TEXT = "This is a medium length text that spans multiple words."
LONG_TEXT = (
    "This is a very long text that spans multiple lines.\n"
    "Line 2: Testing textarea with multiline input.\n"
    "Line 3: Automation testing is important for quality assurance.\n"
    "Line 4: Playwright makes browser automation easy and reliable.\n"
    "Line 5: End of long text test."
)
SPECIAL_CHARACTERS_TEXT = "!@#$%^&*()_+-=[]{}|;:'\",.<>?/~`"
