"""Form input rules for the login and registration pages."""

from __future__ import annotations

import re
from email.utils import parseaddr

UPPER_RE = re.compile(r"[A-Z]")
LOWER_RE = re.compile(r"[a-z]")
DIGIT_RE = re.compile(r"[0-9]")
SPECIAL_RE = re.compile(r"""[!"£$%^&*()\-_=+\][{}'@#~/?.>,<|]""")

PASSWORD_MIN_LENGTH = 8
PASSWORD_MAX_LENGTH = 255


class FormValidationError(ValueError):
    """User input does not satisfy a form rule."""


def validate_email(value: str) -> str:
    _, address = parseaddr(value or "")
    local, _, domain = address.partition("@")
    if not local or not domain or " " in address:
        raise FormValidationError("invalid email address")
    return address


def validate_password(value: str) -> str:
    matched = all(rx.search(value) for rx in (UPPER_RE, LOWER_RE, DIGIT_RE, SPECIAL_RE))
    if not matched or not PASSWORD_MIN_LENGTH <= len(value) <= PASSWORD_MAX_LENGTH:
        raise FormValidationError("invalid password")
    return value


def validate_password_confirmation(password: str, confirm: str) -> str:
    if confirm != password:
        raise FormValidationError("passwords do not match")
    return confirm
