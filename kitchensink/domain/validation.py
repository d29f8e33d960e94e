"""
Member field validation.

Each field is checked by an ordered tuple of pure rules. All rules run,
so every violated field is reported in one pass. Rules other than the
"required" check are skipped for absent values.

Rule order matters: when a field breaks several rules, callers that
collapse violations into a field -> message mapping keep the last one.
"""

import re
from collections.abc import Callable
from decimal import Decimal, InvalidOperation
from typing import NamedTuple

from email_validator import SPECIAL_USE_DOMAIN_NAMES, EmailNotValidError, validate_email

from .model import Member

NAME_MIN_LENGTH = 1
NAME_MAX_LENGTH = 25
PHONE_MIN_LENGTH = 10
PHONE_MAX_LENGTH = 12

_NO_DIGITS = re.compile(r"[^0-9]*")
_ONLY_DIGITS = re.compile(r"[0-9]+")


class Violation(NamedTuple):
    """A single broken rule: wire field name and message."""

    field: str
    message: str


class Rule(NamedTuple):
    field: str
    message: str
    check: Callable[[str], bool]
    skip_none: bool = True


def _is_present(value: str | None) -> bool:
    return value is not None


def _length_between(low: int, high: int) -> Callable[[str], bool]:
    return lambda value: low <= len(value) <= high


def _with_neutral_tld(value: str) -> str:
    """Replace a reserved top-level label (localhost, test, local...) with a neutral one."""
    local_part, at, domain = value.rpartition("@")
    labels = domain.split(".")
    if not at or labels[-1].lower() not in SPECIAL_USE_DOMAIN_NAMES:
        return value
    labels[-1] = "example"
    return local_part + "@" + ".".join(labels)


def _is_email(value: str) -> bool:
    # Empty values are reported by the non-empty rule alone
    if value == "":
        return True
    # Syntax only: dotless and reserved hosts such as localhost are well formed
    try:
        validate_email(
            _with_neutral_tld(value), check_deliverability=False, globally_deliverable=False
        )
    except EmailNotValidError:
        return False
    return True


def _fits_digits(integer: int, fraction: int) -> Callable[[str], bool]:
    def check(value: str) -> bool:
        try:
            number = Decimal(value)
        except InvalidOperation:
            return False
        if not number.is_finite():
            return False
        _, digits, exponent = number.as_tuple()
        scale = -exponent
        integer_length = len(digits) - scale
        fraction_length = max(scale, 0)
        return integer_length <= integer and fraction_length <= fraction

    return check


RULES: tuple[Rule, ...] = (
    Rule("name", "must not be null", _is_present, skip_none=False),
    Rule(
        "name",
        f"size must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH}",
        _length_between(NAME_MIN_LENGTH, NAME_MAX_LENGTH),
    ),
    Rule("name", "Must not contain numbers", lambda value: _NO_DIGITS.fullmatch(value) is not None),
    Rule("email", "must not be null", _is_present, skip_none=False),
    Rule("email", "must not be empty", lambda value: len(value) > 0),
    Rule("email", "must be a well-formed email address", _is_email),
    Rule("phoneNumber", "must not be null", _is_present, skip_none=False),
    Rule(
        "phoneNumber",
        f"size must be between {PHONE_MIN_LENGTH} and {PHONE_MAX_LENGTH}",
        _length_between(PHONE_MIN_LENGTH, PHONE_MAX_LENGTH),
    ),
    Rule(
        "phoneNumber",
        "numeric value out of bounds (<12 digits>.<0 digits> expected)",
        _fits_digits(integer=12, fraction=0),
    ),
    Rule("phoneNumber", "Must contain only numbers", lambda value: _ONLY_DIGITS.fullmatch(value) is not None),
)


def _field_value(candidate: Member, field: str) -> str | None:
    if field == "phoneNumber":
        return candidate.phone_number
    return getattr(candidate, field)


def validate(candidate: Member) -> list[Violation]:
    """
    Check a candidate member against every field rule.

    Args:
        candidate: Member to check (id is ignored)

    Returns:
        Violations in rule order; empty when the candidate is valid
    """
    violations = []
    for rule in RULES:
        value = _field_value(candidate, rule.field)
        if value is None and rule.skip_none:
            continue
        if not rule.check(value):
            violations.append(Violation(rule.field, rule.message))
    return violations
