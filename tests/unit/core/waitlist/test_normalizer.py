# tests/unit/core/waitlist/test_normalizer.py
import pytest

from src.core.exceptions import EmailValidationError
from src.core.waitlist.normalizer import (
    BLANK_MESSAGE,
    INVALID_MESSAGE,
    MISSING,
    NOT_A_STRING_MESSAGE,
    NULL_MESSAGE,
    REQUIRED_MESSAGE,
    TOO_LONG_MESSAGE,
    normalize_email,
)


@pytest.mark.parametrize("raw, expected", [
    ("a@x.com", "a@x.com"),
    ("Foo@Bar.com", "foo@bar.com"),
    ("  Someone.Else@Mail.Acme.org \n", "someone.else@mail.acme.org"),
    ("first+tag@sub.domain.io", "first+tag@sub.domain.io"),
])
def test_normalizes_valid_addresses(raw, expected):
    assert normalize_email(raw) == expected


@pytest.mark.parametrize("raw", [
    "not-an-email",
    "@x.com",
    "a@",
    "a@localhost",
    "a@@x.com",
    "a@b@x.com",
    "a@x..com",
    "a@.com",
    "a b@x.com",
])
def test_rejects_malformed_addresses(raw):
    with pytest.raises(EmailValidationError) as exc_info:
        normalize_email(raw)

    assert exc_info.value.field == "email"
    assert exc_info.value.message == INVALID_MESSAGE


@pytest.mark.parametrize("raw, message", [
    (MISSING, REQUIRED_MESSAGE),
    (None, NULL_MESSAGE),
    ("", BLANK_MESSAGE),
    ("   ", BLANK_MESSAGE),
    (42, NOT_A_STRING_MESSAGE),
    (["a@x.com"], NOT_A_STRING_MESSAGE),
])
def test_rejects_missing_or_non_string_values(raw, message):
    with pytest.raises(EmailValidationError) as exc_info:
        normalize_email(raw)

    assert exc_info.value.message == message


def test_rejects_overlong_address():
    raw = "a" * 64 + "@" + "b" * 190 + ".com"

    with pytest.raises(EmailValidationError) as exc_info:
        normalize_email(raw)

    assert exc_info.value.message == TOO_LONG_MESSAGE
