"""
================================================================================
Page Objects
================================================================================

Page Object Model implementations for the practice application.

Each page class encapsulates:
    - Element locators
    - Page-specific actions
    - Verification methods

Author: Automation Team
License: MIT
================================================================================
"""

from .account_page import AccountPage
from .alerts_page import AlertsPage, DialogResult
from .buttons_page import ButtonsPage, ButtonToast, IconOnlyAccessibility
from .date_picker_page import DatePickerPage
from .file_upload_page import FileUploadPage
from .form_elements_page import FormElementsPage
from .login_page import LoginPage
from .register_page import RegisterPage

__all__ = [
    "AccountPage",
    "AlertsPage",
    "DialogResult",
    "ButtonsPage",
    "ButtonToast",
    "IconOnlyAccessibility",
    "DatePickerPage",
    "FileUploadPage",
    "FormElementsPage",
    "LoginPage",
    "RegisterPage",
]
