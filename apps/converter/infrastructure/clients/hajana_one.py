import logging
from decimal import Decimal

import requests
from django.conf import settings

from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.domain.interfaces import BaseConversionClient
from apps.converter.domain.models import Currency


logger = logging.getLogger(__name__)


class HajanaOneClient(BaseConversionClient):
    """
    HajanaOne currency API client.
    One GET per source/target pair; the response body is passed through unparsed.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = base_url or settings.CONVERSION_API_URL
        self.timeout = timeout if timeout is not None else settings.CONVERSION_API_TIMEOUT

    def convert(self, source: Currency, target: Currency, amount: Decimal) -> bytes:
        """
        Fetch a conversion from the HajanaOne API.

        Args:
            source: Currency the amount is expressed in (e.g. USD)
            target: Desired currency (e.g. EUR)
            amount: Amount to convert

        Returns:
            Raw response body

        Raises:
            ConversionUnavailable: network error, timeout or non-success status
        """
        # Format: http://www.hajanaone.com/currency-api.php?amount=100&from=USD&to=EUR
        params = {
            "amount": format(amount, "f"),
            "from": source.code,
            "to": target.code,
        }

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.Timeout:
            raise ConversionUnavailable(source.code, target.code, f"timed out after {self.timeout}s")
        except requests.exceptions.HTTPError as e:
            raise ConversionUnavailable(source.code, target.code, f"HTTP error: {e}")
        except requests.exceptions.RequestException as e:
            raise ConversionUnavailable(source.code, target.code, f"request failed: {e}")

        logger.debug("HajanaOne answered %s for %s/%s", response.status_code, source, target)
        return response.content
