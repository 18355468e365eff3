"""
Sign-up field validation.

The server runs these checks on every ``/newUser`` request. The client runs
the same functions before sending so the user sees errors early, but the
server result is the one that counts.
"""
from typing import Optional

from email_validator import validate_email, EmailNotValidError

from storefront.utils.errors import (
    MissingFields,
    PasswordMismatch,
    InvalidEmail,
    WeakPassword,
)

MIN_PASSWORD_LENGTH = 8


def is_valid_email(email: str) -> bool:
    """Syntax-only email check; no DNS lookups."""
    try:
        validate_email(email, check_deliverability=False)
    except EmailNotValidError:
        return False
    return True


def is_strong_password(password: str) -> bool:
    """
    A strong password has at least 8 characters and contains an uppercase
    letter, a lowercase letter, a digit and a character that is none of those.
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return False

    has_upper = has_lower = has_digit = has_special = False
    for char in password:
        if "A" <= char <= "Z":
            has_upper = True
        elif "a" <= char <= "z":
            has_lower = True
        elif "0" <= char <= "9":
            has_digit = True
        else:
            has_special = True
    return has_upper and has_lower and has_digit and has_special


def validate_new_user_fields(
    username: Optional[str],
    email: Optional[str],
    password: Optional[str],
    confirm_password: Optional[str],
) -> None:
    """
    Raise the first client input error found, checking in a fixed order:
    missing fields, password mismatch, email syntax, password strength.
    """
    if not username or not email or not password or not confirm_password:
        raise MissingFields()
    if password != confirm_password:
        raise PasswordMismatch()
    if not is_valid_email(email):
        raise InvalidEmail()
    if not is_strong_password(password):
        raise WeakPassword()


# Ids are stored as signed 64-bit integers
MAX_PRODUCT_ID = 2**63 - 1


def parse_product_id(value) -> Optional[int]:
    """
    Read a product id from a path segment or request field.

    Anything that is not a whole number in the storable range gives None,
    which callers treat as an unknown product.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not value.is_integer():
            return None
        value = int(value)
    elif isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError:
            return None
    elif not isinstance(value, int):
        return None

    if -MAX_PRODUCT_ID - 1 <= value <= MAX_PRODUCT_ID:
        return value
    return None
