import pytest
from decimal import Decimal

from apps.converter.domain.currencies import main_currencies, new_currency
from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.infrastructure.clients.mock import MockClient


@pytest.fixture
def client():
    return MockClient()


def test_mock_covers_main_currencies(client):
    for target in main_currencies():
        assert client.convert(new_currency("USD"), target, Decimal("1"))


def test_mock_payload(client):
    payload = client.convert(new_currency("USD"), new_currency("EUR"), Decimal("100"))

    assert payload == b"100 USD = 92.00 EUR"


def test_mock_is_deterministic(client):
    first = client.convert(new_currency("GBP"), new_currency("JPY"), Decimal("3.5"))
    second = client.convert(new_currency("GBP"), new_currency("JPY"), Decimal("3.5"))

    assert first == second


def test_mock_unsupported_pair(client):
    with pytest.raises(ConversionUnavailable, match="unsupported currency pair"):
        client.convert(new_currency("USD"), new_currency("XXX"), Decimal("1"))
