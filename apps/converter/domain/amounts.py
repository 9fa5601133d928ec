"""
Amount parsing.

Turns user supplied text into a Decimal amount. Two policies exist:

- strict: blank text defaults to 1.0, anything else must be a plain signed
  decimal such as "12.50", "-3" or "+5". Exponents and digit separators are
  rejected.
- legacy: text without any ASCII letter defaults to 1.0, anything else goes
  through a float parse. Kept for deployments that depend on the old defaults.
"""

import re
import string
from decimal import Decimal, InvalidOperation

from apps.converter.domain.exceptions import InvalidAmount


DEFAULT_AMOUNT = Decimal("1.0")

STRICT = "strict"
LEGACY = "legacy"
POLICIES = (STRICT, LEGACY)

_ASCII_LETTERS = frozenset(string.ascii_letters)

# Optional sign, digits, optional fraction. No exponents, no underscores.
_PLAIN_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")

# Amounts are sent to the service in plain notation, so the magnitude is bounded.
MAX_EXPONENT = 30


def parse_amount(text: str | None, policy: str = STRICT) -> Decimal:
    """
    Parse user input into an amount.

    Args:
        text: Raw form/query value (None is treated as blank)
        policy: STRICT or LEGACY

    Returns:
        Finite Decimal amount

    Raises:
        InvalidAmount: text is not a number and is not defaulted, or its
            magnitude is beyond 1E+30 or below 1E-30
        ValueError: unknown policy

    Example:
        >>> parse_amount("12.50")
        Decimal('12.50')
        >>> parse_amount("")
        Decimal('1.0')
    """
    if policy == STRICT:
        return _parse_strict(text or "")
    if policy == LEGACY:
        return _parse_legacy(text or "")
    raise ValueError(f"Unknown amount policy '{policy}', expected one of {POLICIES}")


def _check_range(text: str, amount: Decimal) -> Decimal:
    if not amount.is_finite():
        raise InvalidAmount(text)
    if amount and abs(amount.adjusted()) > MAX_EXPONENT:
        raise InvalidAmount(text, f"Invalid amount: {text!r} is out of range")
    return amount


def _parse_strict(text: str) -> Decimal:
    cleaned = text.strip()
    if not cleaned:
        return DEFAULT_AMOUNT

    if not _PLAIN_DECIMAL.fullmatch(cleaned):
        raise InvalidAmount(text)

    try:
        amount = Decimal(cleaned)
    except InvalidOperation:
        raise InvalidAmount(text)

    return _check_range(text, amount)


def _parse_legacy(text: str) -> Decimal:
    if not any(char in _ASCII_LETTERS for char in text):
        return DEFAULT_AMOUNT

    try:
        value = float(text)
    except ValueError:
        raise InvalidAmount(text)

    # str() gives the shortest repr, so 0.1 stays 0.1 instead of its binary expansion
    return _check_range(text, Decimal(str(value)))
