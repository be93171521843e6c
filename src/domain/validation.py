"""
Validation rules - Shape checks for account requests.

Pure functions over request data. Checks run in a fixed order and the
first failing check raises InvalidRequest; errors are never aggregated.
"""

import re

from .entities import LoginRequest, RegistrationRequest
from .exceptions import InvalidRequest

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

NAME_MIN_LENGTH = 2
PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 128

NAME_REQUIRED = "Name is required"
NAME_TOO_SHORT = "Name must be at least 2 characters"
EMAIL_REQUIRED = "Email is required"
EMAIL_INVALID = "Email is invalid"
PASSWORD_REQUIRED = "Password is required"
PASSWORD_TOO_SHORT = "Password must be at least 8 characters"
PASSWORD_TOO_LONG = "Password must be at most 128 characters"
SUBJECT_REQUIRED = "Subject is required"


def is_valid_email(email: str) -> bool:
    """Check the simple local@domain.tld shape."""
    return EMAIL_PATTERN.fullmatch(email) is not None


def validate_registration(request: RegistrationRequest) -> None:
    """
    Validate a registration request.

    Order: name -> email required -> email format -> password required
    -> password minimum -> password maximum.

    Raises:
        InvalidRequest: With the message of the first failing check
    """
    if not request.name:
        raise InvalidRequest(NAME_REQUIRED)
    if len(request.name.strip()) < NAME_MIN_LENGTH:
        raise InvalidRequest(NAME_TOO_SHORT)
    _validate_email(request.email)
    _validate_password_present(request.password)
    if len(request.password) > PASSWORD_MAX_LENGTH:
        raise InvalidRequest(PASSWORD_TOO_LONG)


def validate_login(request: LoginRequest) -> None:
    """
    Validate a login request.

    Raises:
        InvalidRequest: With the message of the first failing check
    """
    _validate_email(request.email)
    _validate_password_present(request.password)


def validate_subject(subject: str | None) -> None:
    """Reject a missing or empty subject identifier."""
    if not subject:
        raise InvalidRequest(SUBJECT_REQUIRED)


def _validate_email(email: str | None) -> None:
    if not email:
        raise InvalidRequest(EMAIL_REQUIRED)
    if not is_valid_email(email):
        raise InvalidRequest(EMAIL_INVALID)


def _validate_password_present(password: str | None) -> None:
    # Presence and minimum length, shared by registration and login
    if not password:
        raise InvalidRequest(PASSWORD_REQUIRED)
    if len(password) < PASSWORD_MIN_LENGTH:
        raise InvalidRequest(PASSWORD_TOO_SHORT)
