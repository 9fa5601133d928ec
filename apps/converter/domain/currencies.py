"""
Currency registry.
Codes are opaque tokens: validation is left to the conversion service.
"""

from typing import Tuple

from apps.converter.domain.models import Currency


MAIN_CURRENCY_CODES: Tuple[str, ...] = ("USD", "CAD", "CNY", "EUR", "GBP", "JPY")


def new_currency(code: str) -> Currency:
    return Currency(code=code)


_MAIN_CURRENCIES: Tuple[Currency, ...] = tuple(new_currency(code) for code in MAIN_CURRENCY_CODES)


def main_currencies() -> Tuple[Currency, ...]:
    """
    The six most traded currencies, used as batch conversion targets.

    Returns:
        The same ordered tuple on every call
    """
    return _MAIN_CURRENCIES
