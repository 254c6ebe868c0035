"""
================================================================================
Registration Test Data
================================================================================

Registration form payloads: valid, invalid e-mail, mismatched and short
passwords, empty and partial submissions.

================================================================================
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from uitest_tools.data_generator import timestamp_suffix


@dataclass(frozen=True)
class RegistrationData:
    """Values for the four registration fields."""
    username: str
    email: str
    password: str
    confirm_password: str


VALID_REGISTRATION_DATA = RegistrationData(
    username="testuser123",
    email="testuser@example.com",
    password="SecurePass123!",
    confirm_password="SecurePass123!",
)


def unique_registration_data() -> RegistrationData:
    """Valid registration data with a timestamped username and e-mail."""
    suffix = timestamp_suffix()
    return RegistrationData(
        username=f"user_{suffix}",
        email=f"user_{suffix}@example.com",
        password="SecurePass123!",
        confirm_password="SecurePass123!",
    )


INVALID_EMAILS: Tuple[str, ...] = (
    "invalidemail",
    "invalid@",
    "@nodomain.com",
    "invalid@domain",
    "invalid.email@",
    "spaces in@email.com",
)

INVALID_EMAIL_DATA = RegistrationData(
    username="testuser",
    email="invalidemail",
    password="SecurePass123!",
    confirm_password="SecurePass123!",
)

MISMATCHED_PASSWORDS_DATA = RegistrationData(
    username="testuser",
    email="test@example.com",
    password="Password123!",
    confirm_password="DifferentPassword456!",
)

SHORT_PASSWORD_DATA = RegistrationData(
    username="testuser",
    email="test@example.com",
    password="123",
    confirm_password="123",
)

SHORT_PASSWORDS: Tuple[str, ...] = ("a", "ab", "123", "pass", "12345")

EMPTY_REGISTRATION_DATA = RegistrationData(username="", email="", password="", confirm_password="")

# One field filled at a time
PARTIAL_DATA_SCENARIOS: Tuple[RegistrationData, ...] = (
    RegistrationData(username="user", email="", password="", confirm_password=""),
    RegistrationData(username="", email="test@example.com", password="", confirm_password=""),
    RegistrationData(username="", email="", password="Password123!", confirm_password=""),
    RegistrationData(username="", email="", password="", confirm_password="Password123!"),
)

DATA_FOR_RESET_TEST = RegistrationData(
    username="resetTestUser",
    email="reset@test.com",
    password="ResetPassword123!",
    confirm_password="ResetPassword123!",
)

EXPECTED_ERRORS: Dict[str, str] = {
    "empty_username": "Username is required",
    "empty_email": "Email is required",
    "empty_password": "Password is required",
    "empty_confirm_password": "Please confirm your password",
    "invalid_email": "Please enter a valid email",
    "password_mismatch": "Passwords do not match",
    "short_password": "Password must be at least",
}
