"""
================================================================================
Credential Data Generator
================================================================================

Random form data for UI tests: usernames, e-mail addresses and passwords
that satisfy the practice application's registration rules.

================================================================================
"""

import random
import string
import time
from typing import Optional

from loguru import logger


SPECIAL_CHARACTERS = "!@#$%^&*"
VALID_DOMAINS = ["example.com", "test.com", "automation.dev"]

# Minimum length accepted by the registration form
MIN_PASSWORD_LENGTH = 8


def random_string(length: int = 10, alphabet: str = string.ascii_letters + string.digits) -> str:
    """Return a random string of ``length`` characters drawn from ``alphabet``."""
    if length < 0:
        raise ValueError(f"length must be >= 0, got {length}")
    return "".join(random.choices(alphabet, k=length))


def timestamp_suffix() -> str:
    """Millisecond timestamp, unique enough to keep generated users apart."""
    return str(int(time.time() * 1000))


def random_username(prefix: str = "user") -> str:
    """Generate a username such as ``user_k3j9x2``."""
    return f"{prefix}_{random_string(6, string.ascii_lowercase + string.digits)}"


def random_email(domain: Optional[str] = None) -> str:
    """Generate a valid e-mail address."""
    local = f"test_{random_string(8, string.ascii_lowercase + string.digits)}"
    return f"{local}@{domain or random.choice(VALID_DOMAINS)}"


def secure_password(length: int = 12) -> str:
    """
    Generate a password containing at least one lowercase letter, one
    uppercase letter, one digit and one special character.

    Args:
        length: Total length (at least MIN_PASSWORD_LENGTH)

    Returns:
        Shuffled password string
    """
    if length < MIN_PASSWORD_LENGTH:
        raise ValueError(
            f"Password length must be at least {MIN_PASSWORD_LENGTH}, got {length}"
        )

    required = [
        random.choice(string.ascii_lowercase),
        random.choice(string.ascii_uppercase),
        random.choice(string.digits),
        random.choice(SPECIAL_CHARACTERS),
    ]
    pool = string.ascii_letters + string.digits + SPECIAL_CHARACTERS
    chars = required + random.choices(pool, k=length - len(required))
    random.shuffle(chars)

    password = "".join(chars)
    logger.debug(f"Generated password of length {len(password)}")
    return password


__all__ = [
    "SPECIAL_CHARACTERS",
    "MIN_PASSWORD_LENGTH",
    "random_string",
    "timestamp_suffix",
    "random_username",
    "random_email",
    "secure_password",
]
