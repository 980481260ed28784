from typing import Any

from email_validator import EmailNotValidError, validate_email

from src.core.exceptions import EmailValidationError

MAX_EMAIL_LENGTH = 254

REQUIRED_MESSAGE = "This field is required."
NULL_MESSAGE = "This field may not be null."
BLANK_MESSAGE = "This field may not be blank."
NOT_A_STRING_MESSAGE = "Not a valid string."
TOO_LONG_MESSAGE = f"Ensure this field has no more than {MAX_EMAIL_LENGTH} characters."
INVALID_MESSAGE = "Enter a valid email address."


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


# Stands in for a field absent from the request, as opposed to an explicit null
MISSING = _Missing()


def _has_valid_shape(candidate: str) -> bool:
    if candidate.count("@") != 1:
        return False
    local_part, domain = candidate.split("@")
    if not local_part or "." not in domain:
        return False
    return all(domain.split("."))


def normalize_email(raw: Any) -> str:
    """
    Validate and canonicalize an email address.

    Surrounding whitespace is trimmed and the whole address is lowercased,
    local part included, so that the result can be used as the uniqueness
    key of a waitlist entry.

    Raises:
        EmailValidationError: if the value is missing, null, blank or not shaped
            like local-part@domain.tld
    """
    if raw is MISSING:
        raise EmailValidationError(REQUIRED_MESSAGE)
    if raw is None:
        raise EmailValidationError(NULL_MESSAGE)
    if not isinstance(raw, str):
        raise EmailValidationError(NOT_A_STRING_MESSAGE)

    candidate = raw.strip()
    if not candidate:
        raise EmailValidationError(BLANK_MESSAGE)
    if len(candidate) > MAX_EMAIL_LENGTH:
        raise EmailValidationError(TOO_LONG_MESSAGE)
    if not _has_valid_shape(candidate):
        raise EmailValidationError(INVALID_MESSAGE)

    try:
        validated = validate_email(candidate, check_deliverability=False)
    except EmailNotValidError:
        raise EmailValidationError(INVALID_MESSAGE)

    return validated.normalized.lower()
