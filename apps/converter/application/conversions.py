"""
Application entry points shared by the web pages, the JSON API and the CLI.
"""

import logging
from typing import Optional, Union

from django.conf import settings

from apps.converter.application.dto import ALL_CURRENCIES_FLAG, ConversionInputDTO
from apps.converter.domain.amounts import parse_amount
from apps.converter.domain.currencies import new_currency
from apps.converter.domain.models import ConversionBatch, ConversionResult
from apps.converter.domain.services import ConversionAggregator
from apps.converter.infrastructure.clients.registry import get_configured_client


logger = logging.getLogger(__name__)


class MissingField(ValueError):
    """Raised when a required input field is absent or blank."""

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} is required")


def get_aggregator() -> ConversionAggregator:
    return ConversionAggregator(get_configured_client())


def build_conversion_input(
    amount_text: Optional[str],
    source_code: Optional[str],
    target_code: Optional[str] = None,
    all_currencies: Union[bool, str, None] = False,
    source_field: str = "source_currency",
    target_field: str = "exchanged_currency",
) -> ConversionInputDTO:
    """
    Validate raw input into a ConversionInputDTO.

    The target is only required in single mode. all_currencies accepts either a
    bool or the raw form value, where only "all" selects batch mode.

    Raises:
        MissingField: source (or target in single mode) is missing
        InvalidAmount: amount text is not a number under the configured policy
    """
    if isinstance(all_currencies, str):
        all_currencies = all_currencies == ALL_CURRENCIES_FLAG
    all_currencies = bool(all_currencies)

    source_code = (source_code or "").strip()
    target_code = (target_code or "").strip()

    if not source_code:
        raise MissingField(source_field)
    if not all_currencies and not target_code:
        raise MissingField(target_field)

    amount = parse_amount(amount_text, policy=settings.CONVERTER_AMOUNT_POLICY)

    return ConversionInputDTO(
        source=new_currency(source_code),
        amount=amount,
        target=None if all_currencies else new_currency(target_code),
        all_currencies=all_currencies,
    )


def run_conversion(
    conversion: ConversionInputDTO,
    aggregator: Optional[ConversionAggregator] = None
) -> Union[ConversionResult, ConversionBatch]:
    """Dispatch to single or batch mode."""
    if aggregator is None:
        aggregator = get_aggregator()

    if conversion.all_currencies:
        logger.info("Converting %s %s into all main currencies", conversion.amount, conversion.source)
        return aggregator.convert_all(conversion.source, conversion.amount)

    logger.info("Converting %s %s into %s", conversion.amount, conversion.source, conversion.target)
    return aggregator.convert_one(conversion.source, conversion.target, conversion.amount)
