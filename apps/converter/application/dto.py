"""
Data Transfer Objects for the application layer.
DTOs decouple the HTML form, the JSON API and the CLI from the domain services.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from apps.converter.domain.models import Currency


ALL_CURRENCIES_FLAG = "all"


@dataclass(frozen=True)
class ConversionInputDTO:
    """Validated conversion input, whatever surface it came from."""
    source: Currency
    amount: Decimal
    target: Optional[Currency] = None
    all_currencies: bool = False
