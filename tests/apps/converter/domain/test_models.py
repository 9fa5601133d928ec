import pytest
from dataclasses import FrozenInstanceError
from decimal import Decimal

from apps.converter.domain.currencies import new_currency
from apps.converter.domain.models import (
    ConversionBatch,
    ConversionOutcome,
    ConversionRequest,
    ConversionResult,
    Currency,
)


@pytest.fixture
def request_usd_cad():
    return ConversionRequest(source=new_currency("USD"), target=new_currency("CAD"), amount=Decimal("50"))


class TestValueObjects:
    """Tests for domain value objects."""

    def test_currency_is_immutable(self):
        currency = new_currency("USD")

        with pytest.raises(FrozenInstanceError):
            currency.code = "EUR"

    def test_currency_rejects_empty_code(self):
        with pytest.raises(ValueError):
            Currency(code="")

    def test_request_rejects_float_amount(self):
        with pytest.raises(TypeError):
            ConversionRequest(source=new_currency("USD"), target=new_currency("CAD"), amount=50.0)

    def test_request_rejects_non_finite_amount(self):
        with pytest.raises(ValueError):
            ConversionRequest(source=new_currency("USD"), target=new_currency("CAD"), amount=Decimal("NaN"))

    def test_request_rejects_out_of_range_amount(self):
        with pytest.raises(ValueError, match="out of range"):
            ConversionRequest(source=new_currency("USD"), target=new_currency("CAD"), amount=Decimal("1E+50000000"))

    def test_success_result(self, request_usd_cad):
        result = ConversionResult.success(request_usd_cad, b"50 USD = 68 CAD")

        assert result.succeeded
        assert result.outcome is ConversionOutcome.SUCCESS
        assert result.target == new_currency("CAD")
        assert result.text == "50 USD = 68 CAD"
        assert result.reason is None

    def test_failure_result(self, request_usd_cad):
        result = ConversionResult.failure(request_usd_cad, "timed out after 10s")

        assert not result.succeeded
        assert result.outcome is ConversionOutcome.FAILURE
        assert result.payload is None
        assert result.text == ""

    def test_result_text_replaces_invalid_utf8(self, request_usd_cad):
        result = ConversionResult.success(request_usd_cad, b"\xff50")

        assert result.text == "�50"

    def test_failure_needs_reason(self, request_usd_cad):
        with pytest.raises(ValueError):
            ConversionResult(request=request_usd_cad, outcome=ConversionOutcome.FAILURE)

    def test_batch_helpers(self, request_usd_cad):
        eur_request = ConversionRequest(source=new_currency("USD"), target=new_currency("EUR"), amount=Decimal("50"))
        batch = ConversionBatch(
            source=new_currency("USD"),
            amount=Decimal("50"),
            results=(
                ConversionResult.success(request_usd_cad, b"ok"),
                ConversionResult.failure(eur_request, "HTTP error"),
            ),
        )

        assert len(batch) == 2
        assert batch.targets == (new_currency("CAD"), new_currency("EUR"))
        assert [result.target.code for result in batch.failures] == ["EUR"]
