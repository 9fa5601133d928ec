"""
Client Registry - Maps client names to adapter classes.
The CONVERTER_CLIENT setting picks which one serves requests.
"""

import logging

from django.conf import settings
from django.core.exceptions import ImproperlyConfigured

from apps.converter.domain.interfaces import BaseConversionClient
from apps.converter.infrastructure.clients.hajana_one import HajanaOneClient
from apps.converter.infrastructure.clients.mock import MockClient


logger = logging.getLogger(__name__)

HAJANA_ONE = "hajana_one"
MOCK = "mock"

CLIENT_REGISTRY: dict[str, type[BaseConversionClient]] = {
    HAJANA_ONE: HajanaOneClient,
    MOCK: MockClient,
}


def get_client_instance(client_name: str) -> BaseConversionClient | None:
    """
    Get an instance of a client by its name.

    Args:
        client_name: A key of CLIENT_REGISTRY

    Returns:
        Instance of the client adapter, or None if not found
    """
    client_class = CLIENT_REGISTRY.get(client_name)

    if client_class is None:
        logger.error("Conversion client '%s' not found in registry", client_name)
        return None

    return client_class()


def get_configured_client() -> BaseConversionClient:
    """
    Instantiate the client named by settings.CONVERTER_CLIENT.

    Raises:
        ImproperlyConfigured: the setting names an unknown client
    """
    client = get_client_instance(settings.CONVERTER_CLIENT)
    if client is None:
        raise ImproperlyConfigured(
            f"CONVERTER_CLIENT must be one of {sorted(CLIENT_REGISTRY)}, got '{settings.CONVERTER_CLIENT}'"
        )
    return client
