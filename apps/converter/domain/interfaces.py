from abc import ABC, abstractmethod
from decimal import Decimal

from apps.converter.domain.models import Currency


class BaseConversionClient(ABC):
    @abstractmethod
    def convert(self, source: Currency, target: Currency, amount: Decimal) -> bytes:
        """Return the raw service payload, or raise ConversionUnavailable."""
