import pytest

from storefront.utils.errors import (
    MissingFields,
    PasswordMismatch,
    InvalidEmail,
    WeakPassword,
)
from storefront.utils.validation import (
    is_strong_password,
    is_valid_email,
    parse_product_id,
    validate_new_user_fields,
)


def test_strong_password_requires_every_character_class():
    assert is_strong_password("Str0ng!Pass")

    # Test case 1: Too short
    assert not is_strong_password("S0!a")
    # Test case 2: No digit
    assert not is_strong_password("Strong!Pass")
    # Test case 3: No uppercase
    assert not is_strong_password("str0ng!pass")
    # Test case 4: No lowercase
    assert not is_strong_password("STR0NG!PASS")
    # Test case 5: No special character
    assert not is_strong_password("Str0ngPass")


def test_email_syntax():
    assert is_valid_email("alice@mail.com")
    assert not is_valid_email("alice")
    assert not is_valid_email("alice@")
    assert not is_valid_email("alice @mail.com")
    assert not is_valid_email("")


@pytest.mark.parametrize(
    "fields, error",
    [
        (("", "a@mail.com", "Str0ng!Pass", "Str0ng!Pass"), MissingFields),
        (("carol", None, "Str0ng!Pass", "Str0ng!Pass"), MissingFields),
        (("carol", "a@mail.com", "Str0ng!Pass", "Str0ng!Pazz"), PasswordMismatch),
        (("carol", "not-an-email", "Str0ng!Pass", "Str0ng!Pass"), InvalidEmail),
        (("carol", "a@mail.com", "NoDigits!Here", "NoDigits!Here"), WeakPassword),
    ],
)
def test_validate_new_user_fields_reports_first_problem(fields, error):
    with pytest.raises(error):
        validate_new_user_fields(*fields)


def test_mismatch_is_reported_before_weak_password():
    # Both problems present; the mismatch wins
    with pytest.raises(PasswordMismatch):
        validate_new_user_fields("carol", "bad-email", "weak", "weaker")


def test_valid_fields_pass():
    validate_new_user_fields("carol", "carol@mail.com", "Str0ng!Pass", "Str0ng!Pass")


@pytest.mark.parametrize(
    "value, expected",
    [
        (7, 7),
        ("7", 7),
        (" 12 ", 12),
        (3.0, 3),
        (2**63 - 1, 2**63 - 1),
        (None, None),
        (True, None),
        ("abc", None),
        ("1.5", None),
        (2.5, None),
        (2**70, None),
        (str(2**70), None),
        ([7], None),
    ],
)
def test_parse_product_id(value, expected):
    assert parse_product_id(value) == expected
