import pytest

from apps.converter.domain.exceptions import ConversionUnavailable
from apps.converter.infrastructure.clients.mock import MockClient


class FlakyMockClient(MockClient):
    """MockClient that fails for selected targets."""

    def __init__(self, failing=()):
        self.failing = set(failing)

    def convert(self, source, target, amount):
        if target.code in self.failing:
            raise ConversionUnavailable(source.code, target.code, "HTTP error: 500 Server Error")
        return super().convert(source, target, amount)


@pytest.fixture
def use_client(mocker):
    """Route every conversion through the given client instead of the network."""
    def _use(client):
        mocker.patch(
            "apps.converter.application.conversions.get_configured_client",
            return_value=client,
        )
        return client
    return _use


@pytest.fixture
def mock_client(use_client):
    return use_client(MockClient())


@pytest.fixture
def eur_down_client(use_client):
    return use_client(FlakyMockClient(failing={"EUR"}))
