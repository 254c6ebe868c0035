"""
================================================================================
Login Test Data
================================================================================

Static credentials and data-driven scenarios for the login page.

The practice application accepts any non-empty username/password pair, so
every scenario with both fields filled is expected to succeed; empty
required fields always take the error path.

================================================================================
"""

from typing import Dict, List, Tuple

from testsuites.ui_testing.framework.scenario_loader import ExpectedOutcome, Scenario


SUCCESS = ExpectedOutcome.SUCCESS
ERROR = ExpectedOutcome.ERROR


# =========================================
# Credentials
# =========================================

VALID_LOGIN_CREDENTIALS: Dict[str, str] = {
    "username": "testuser",
    "password": "SecurePass123!",
}

EMPTY_LOGIN_CREDENTIALS: Dict[str, str] = {"username": "", "password": ""}
USERNAME_ONLY_CREDENTIALS: Dict[str, str] = {"username": "testuser", "password": ""}
PASSWORD_ONLY_CREDENTIALS: Dict[str, str] = {"username": "", "password": "SecurePass123!"}

SPECIAL_CHARACTER_CREDENTIALS: Dict[str, str] = {
    "username": "test<script>alert(1)</script>",
    "password": "<script>alert(1)</script>",
}

SQL_INJECTION_CREDENTIALS: Dict[str, str] = {
    "username": "admin' OR '1'='1",
    "password": "' OR '1'='1",
}

REMEMBER_ME_CREDENTIALS: Dict[str, str] = {
    "username": "remember_me_user",
    "password": "RememberPass123!",
}

EXPECTED_ERRORS: Dict[str, str] = {
    "empty_username": "Username is required",
    "empty_password": "Password is required",
    "invalid_credentials": "Invalid credentials",
}

# Maximum-length inputs exercised by boundary tests
MAX_INPUT_LENGTH = 100


# =========================================
# Data-driven scenarios
# =========================================

VALID_LOGIN_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("VL001", "Standard alphanumeric username", "testuser123", "Password123!", SUCCESS),
    Scenario("VL002", "Email format username", "user@example.com", "SecurePass@2024", SUCCESS),
    Scenario("VL003", "Username with underscore", "test_user_01", "MyPassword#1", SUCCESS),
    Scenario("VL004", "Short valid credentials", "admin", "admin123", SUCCESS),
    Scenario("VL005", "Username with numbers", "user2024", "Pass2024!", SUCCESS),
)

VALIDATION_ERROR_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario(
        "VE001", "Both fields empty", "", "", ERROR,
        (EXPECTED_ERRORS["empty_username"], EXPECTED_ERRORS["empty_password"]),
    ),
    Scenario(
        "VE002", "Empty username only", "", "ValidPassword123!", ERROR,
        (EXPECTED_ERRORS["empty_username"],),
    ),
    Scenario(
        "VE003", "Empty password only", "validuser", "", ERROR,
        (EXPECTED_ERRORS["empty_password"],),
    ),
)

SPECIAL_CHARACTER_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("SC001", "XSS attempt in username", '<script>alert("xss")</script>', "ValidPassword123!", SUCCESS),
    Scenario("SC002", "SQL injection attempt", "admin' OR '1'='1", "' OR '1'='1", SUCCESS),
    Scenario("SC003", "Unicode characters", "user_日本語", "パスワード123", SUCCESS),
    Scenario("SC004", "Special symbols in password", "normaluser", "P@$$w0rd!#%&*()[]{}", SUCCESS),
    Scenario("SC005", "HTML entities", "&lt;user&gt;", "&amp;password&amp;", SUCCESS),
)

BOUNDARY_SCENARIOS: Tuple[Scenario, ...] = (
    Scenario("BT001", "Minimum length credentials (1 char each)", "a", "b", SUCCESS),
    Scenario("BT002", "Very long username (100 chars)", "a" * MAX_INPUT_LENGTH, "ValidPassword123!", SUCCESS),
    Scenario("BT003", "Very long password (100 chars)", "normaluser", "P" * 95 + "ass1!", SUCCESS),
    Scenario("BT004", "Username with leading spaces", "   spaceduser", "ValidPassword123!", SUCCESS),
    Scenario("BT005", "Password with trailing spaces", "normaluser", "ValidPassword123!   ", SUCCESS),
)

ALL_LOGIN_SCENARIOS: Dict[str, Tuple[Scenario, ...]] = {
    "valid": VALID_LOGIN_SCENARIOS,
    "validation": VALIDATION_ERROR_SCENARIOS,
    "special_chars": SPECIAL_CHARACTER_SCENARIOS,
    "boundary": BOUNDARY_SCENARIOS,
}


# =========================================
# Quick list and matrix
# =========================================

QUICK_LOGIN_CREDENTIALS: Tuple[Tuple[str, str, str], ...] = (
    ("quickuser1", "QuickPass123!", "Simple credentials"),
    ("admin@test.com", "Admin123!", "Email username"),
    ("test_user", "Test@Pass1", "Underscore username"),
)

MATRIX_USERNAMES: Tuple[str, ...] = ("testuser", "admin", "user@test.com")
MATRIX_PASSWORDS: Tuple[str, ...] = ("Password1!", "SecurePass@2024", "Test123#")


def credential_matrix() -> List[Tuple[str, str]]:
    """Every username/password combination, usernames outermost."""
    return [(u, p) for u in MATRIX_USERNAMES for p in MATRIX_PASSWORDS]


# =========================================
# Spreadsheet content
# =========================================

# Sheet name -> scenarios written to the default login workbook
WORKBOOK_SHEETS: Dict[str, Tuple[Scenario, ...]] = {
    "ValidLogins": VALID_LOGIN_SCENARIOS + (
        Scenario("VL006", "Complex password", "secureuser", "C0mpl3x@Pass!#", SUCCESS),
    ),
    "ValidationErrors": VALIDATION_ERROR_SCENARIOS,
    "SpecialCharacters": SPECIAL_CHARACTER_SCENARIOS,
    "BoundaryTests": BOUNDARY_SCENARIOS,
}
