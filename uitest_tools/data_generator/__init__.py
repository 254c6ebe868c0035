"""Random test data for UI forms."""

from .credential_generator import (
    random_email,
    random_string,
    random_username,
    secure_password,
    timestamp_suffix,
)

__all__ = [
    "random_string",
    "random_username",
    "random_email",
    "secure_password",
    "timestamp_suffix",
]
