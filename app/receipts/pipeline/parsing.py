"""
Lenient parsers for the string fields of a receipt.

Each parser returns ``None`` instead of raising when the input is malformed,
so a rule can simply contribute zero.
"""
from __future__ import annotations

import re
from datetime import date, datetime, time
from decimal import Decimal

_AMOUNT_RE = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_RE = re.compile(r"[0-9]{2}:[0-9]{2}")


def parse_amount(value: str) -> Decimal | None:
    """Parse an ASCII decimal string into an exact ``Decimal``.

    NaN, infinities, underscores, surrounding whitespace and non-ASCII digits
    are all rejected.
    """
    if not _AMOUNT_RE.fullmatch(value):
        return None
    try:
        amount = Decimal(value)
    except (ArithmeticError, ValueError):
        return None
    return amount if amount.is_finite() else None


def parse_date(value: str) -> date | None:
    if not _DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def parse_time(value: str) -> time | None:
    if not _TIME_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%H:%M").time()
    except ValueError:
        return None


def is_multiple_of(amount: Decimal, step_cents: int) -> bool:
    """True when *amount* is an exact multiple of ``step_cents / 100``.

    *step_cents* must divide 100. Works on the digit tuple, so very large or
    very precise amounts never hit the context precision limit of
    ``Decimal.__mod__``.
    """
    _, digits, exponent = amount.as_tuple()
    while exponent < 0 and digits and digits[-1] == 0:
        digits = digits[:-1]
        exponent += 1
    if exponent >= 0:
        return True
    if exponent < -2:
        return False
    coefficient = int("".join(map(str, digits)) or "0")
    cents = coefficient * 10 ** (exponent + 2)
    return cents % step_cents == 0
