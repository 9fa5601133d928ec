"""
Mock client for development and tests.
Produces deterministic payloads without any network access.
"""

from decimal import Decimal

from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.domain.interfaces import BaseConversionClient
from apps.converter.domain.models import Currency


class MockClient(BaseConversionClient):
    """
    Mock client that converts with a fixed rate table.
    Useful for:
    - Running the site without reaching the external API
    - Tests that need realistic payloads
    """

    # Base rates relative to USD (approximate real-world values)
    BASE_RATES = {
        "USD": Decimal("1.0"),
        "CAD": Decimal("1.36"),
        "CNY": Decimal("7.24"),
        "EUR": Decimal("0.92"),
        "GBP": Decimal("0.79"),
        "JPY": Decimal("151.6"),
    }

    def convert(self, source: Currency, target: Currency, amount: Decimal) -> bytes:
        source_rate = self.BASE_RATES.get(source.code)
        target_rate = self.BASE_RATES.get(target.code)

        if source_rate is None or target_rate is None:
            raise ConversionUnavailable(source.code, target.code, "unsupported currency pair")

        converted = (amount * target_rate / source_rate).quantize(Decimal("0.01"))
        return f"{format(amount, 'f')} {source.code} = {converted} {target.code}".encode("utf-8")
