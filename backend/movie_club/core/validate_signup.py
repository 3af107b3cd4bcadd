"""Signup Validation — declarative field checks for account creation.

Invariants:
    - Every rule runs; violations accumulate in rule order (no short-circuit)
    - Missing fields are checked as the empty string
    - No IO: email shape is checked syntactically, never by DNS lookup
"""

import re
from typing import Callable

from email_validator import EmailNotValidError, validate_email

from movie_club.core.domain_types import FieldViolation

USERNAME_MIN_LENGTH = 5

_ALPHANUMERIC = re.compile(r"[A-Za-z0-9]+")


def _is_email(value: str) -> bool:
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError:
        return False
    return True


# (field, message, predicate) — order is the order violations are reported in
SIGNUP_RULES: list[tuple[str, str, Callable[[str], bool]]] = [
    (
        "Username", "Username is required",
        lambda v: len(v) >= USERNAME_MIN_LENGTH,
    ),
    (
        "Username",
        "Username contains non alphanumeric characters - not allowed.",
        lambda v: bool(_ALPHANUMERIC.fullmatch(v)),
    ),
    ("Password", "Password is required", lambda v: len(v) > 0),
    ("Email", "Email does not appear to be valid", _is_email),
]


def validate_signup(
    username: str | None, password: str | None, email: str | None,
) -> list[FieldViolation]:
    """Run every signup rule and return the violations, empty if valid."""
    values = {
        "Username": username or "",
        "Password": password or "",
        "Email": email or "",
    }
    return [
        FieldViolation(field=name, message=message)
        for name, message, check in SIGNUP_RULES
        if not check(values[name])
    ]
