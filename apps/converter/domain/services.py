"""
Domain services - Core conversion logic.
Fans one source/amount out to many targets and keeps per-target failures as data.
"""

import asyncio
import logging
from decimal import Decimal
from typing import List, Optional, Sequence, cast

from apps.converter.domain.currencies import main_currencies
from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.domain.interfaces import BaseConversionClient
from apps.converter.domain.models import (
    ConversionBatch,
    ConversionRequest,
    ConversionResult,
    Currency,
)


logger = logging.getLogger(__name__)


class ConversionAggregator:
    """
    Turns one user request into a single conversion or a full batch.

    Batch strategy:
    1. Build one request per target currency
    2. Run every client call concurrently in worker threads
    3. Record success or failure in the target's own slot
    4. Return once every target has been attempted
    """

    def __init__(self, client: BaseConversionClient):
        self.client = client

    def convert_one(self, source: Currency, target: Currency, amount: Decimal) -> ConversionResult:
        """
        Convert an amount between two currencies.

        Args:
            source: Currency the amount is expressed in
            target: Desired currency
            amount: Amount to convert

        Returns:
            ConversionResult whose outcome mirrors the client call

        Example:
            >>> result = aggregator.convert_one(new_currency("USD"), new_currency("CAD"), Decimal("50"))
            >>> if result.succeeded:
            ...     print(result.text)
        """
        request = ConversionRequest(source=source, target=target, amount=amount)
        return self._run(request)

    def convert_all(
        self,
        source: Currency,
        amount: Decimal,
        targets: Optional[Sequence[Currency]] = None
    ) -> ConversionBatch:
        """
        Convert an amount into every target currency concurrently.

        Runs its own event loop with asyncio.run, so it must be called from
        synchronous code; calling it inside a running loop raises RuntimeError.

        Args:
            source: Currency the amount is expressed in
            amount: Amount to convert
            targets: Target currencies (defaults to the main currencies)

        Returns:
            ConversionBatch with one result per target, in target order
        """
        if targets is None:
            targets = main_currencies()

        requests = [ConversionRequest(source=source, target=target, amount=amount) for target in targets]
        results = asyncio.run(self._gather(requests))

        batch = ConversionBatch(source=source, amount=amount, results=tuple(results))
        logger.info(
            "Batch %s %s: %d/%d conversions succeeded",
            amount, source, len(batch) - len(batch.failures), len(batch)
        )
        return batch

    async def _gather(self, requests: List[ConversionRequest]) -> List[ConversionResult]:
        results: List[Optional[ConversionResult]] = [None] * len(requests)

        async def fill(index: int, request: ConversionRequest) -> None:
            results[index] = await asyncio.to_thread(self._run, request)

        await asyncio.gather(*(fill(i, request) for i, request in enumerate(requests)))
        return cast(List[ConversionResult], results)

    def _run(self, request: ConversionRequest) -> ConversionResult:
        pair = f"{request.source}/{request.target}"
        try:
            payload = self.client.convert(request.source, request.target, request.amount)
        except ConversionUnavailable as e:
            logger.warning("Conversion %s failed: %s", pair, e.reason)
            return ConversionResult.failure(request, e.reason)
        except Exception as e:
            logger.exception("Unexpected error converting %s", pair)
            return ConversionResult.failure(request, f"Unexpected error: {e}")

        logger.debug("Conversion %s returned %d bytes", pair, len(payload))
        return ConversionResult.success(request, payload)
