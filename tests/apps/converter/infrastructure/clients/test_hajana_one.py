import pytest
import requests
from unittest.mock import Mock
from decimal import Decimal

from apps.converter.domain.currencies import new_currency
from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.infrastructure.clients.hajana_one import HajanaOneClient


@pytest.fixture
def client():
    return HajanaOneClient(base_url="http://converter.test/currency-api.php", timeout=5)


@pytest.fixture
def mock_requests_get(mocker):
    return mocker.patch("requests.get")


def test_convert_success(client, mock_requests_get):
    """
    Test that convert returns the raw body and sends amount/from/to parameters.
    """
    mock_response = Mock()
    mock_response.content = b"<p>100 USD = 135.50 CAD</p>"
    mock_response.status_code = 200
    mock_response.raise_for_status.return_value = None
    mock_requests_get.return_value = mock_response

    payload = client.convert(new_currency("USD"), new_currency("CAD"), Decimal("100"))

    assert payload == b"<p>100 USD = 135.50 CAD</p>"
    mock_requests_get.assert_called_once_with(
        "http://converter.test/currency-api.php",
        params={"amount": "100", "from": "USD", "to": "CAD"},
        timeout=5,
    )


def test_convert_formats_amount_without_exponent(client, mock_requests_get):
    mock_requests_get.return_value = Mock(content=b"ok", status_code=200)

    client.convert(new_currency("USD"), new_currency("CAD"), Decimal("1E+2"))

    params = mock_requests_get.call_args.kwargs["params"]
    assert params["amount"] == "100"


def test_convert_timeout(client, mock_requests_get):
    mock_requests_get.side_effect = requests.exceptions.Timeout()

    with pytest.raises(ConversionUnavailable) as exc_info:
        client.convert(new_currency("USD"), new_currency("CAD"), Decimal("1"))

    assert exc_info.value.source == "USD"
    assert exc_info.value.target == "CAD"
    assert "timed out" in exc_info.value.reason


def test_convert_http_error(client, mock_requests_get):
    """
    Test that a non-success status is reported as ConversionUnavailable.
    """
    mock_response = Mock()
    mock_response.raise_for_status.side_effect = requests.exceptions.HTTPError("503 Server Error")
    mock_requests_get.return_value = mock_response

    with pytest.raises(ConversionUnavailable, match="503"):
        client.convert(new_currency("USD"), new_currency("EUR"), Decimal("1"))


def test_convert_connection_error(client, mock_requests_get):
    mock_requests_get.side_effect = requests.exceptions.ConnectionError("Name or service not known")

    with pytest.raises(ConversionUnavailable, match="request failed"):
        client.convert(new_currency("USD"), new_currency("EUR"), Decimal("1"))


def test_defaults_come_from_settings(settings):
    settings.CONVERSION_API_URL = "http://configured.test/api"
    settings.CONVERSION_API_TIMEOUT = 2.5

    client = HajanaOneClient()

    assert client.base_url == "http://configured.test/api"
    assert client.timeout == 2.5
