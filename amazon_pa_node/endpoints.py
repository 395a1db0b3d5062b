"""Marketplace hosts and endpoint constants for PA-API 5.0.

Every marketplace is served from its own host, and requests are signed
for the AWS region of the marketplace's locale group.
"""

from enum import StrEnum
from typing import NamedTuple

from .exceptions import ConfigurationError


class Marketplace(StrEnum):
    """Marketplaces supported by the Product Advertising API.

    Each member can be used directly as a string since StrEnum inherits from str.
    """

    UNITED_STATES = "www.amazon.com"
    CANADA = "www.amazon.ca"
    MEXICO = "www.amazon.com.mx"
    BRAZIL = "www.amazon.com.br"
    UNITED_KINGDOM = "www.amazon.co.uk"
    GERMANY = "www.amazon.de"
    FRANCE = "www.amazon.fr"
    ITALY = "www.amazon.it"
    SPAIN = "www.amazon.es"
    NETHERLANDS = "www.amazon.nl"
    SWEDEN = "www.amazon.se"
    POLAND = "www.amazon.pl"
    TURKEY = "www.amazon.com.tr"
    UNITED_ARAB_EMIRATES = "www.amazon.ae"
    SAUDI_ARABIA = "www.amazon.sa"
    EGYPT = "www.amazon.eg"
    BELGIUM = "www.amazon.com.be"
    INDIA = "www.amazon.in"
    JAPAN = "www.amazon.co.jp"
    AUSTRALIA = "www.amazon.com.au"
    SINGAPORE = "www.amazon.sg"


class Locale(NamedTuple):
    host: str
    region: str


_NORTH_AMERICA = "us-east-1"
_EUROPE = "eu-west-1"
_FAR_EAST = "us-west-2"

_REGIONS: dict[Marketplace, str] = {
    Marketplace.UNITED_STATES: _NORTH_AMERICA,
    Marketplace.CANADA: _NORTH_AMERICA,
    Marketplace.MEXICO: _NORTH_AMERICA,
    Marketplace.BRAZIL: _NORTH_AMERICA,
    Marketplace.UNITED_KINGDOM: _EUROPE,
    Marketplace.GERMANY: _EUROPE,
    Marketplace.FRANCE: _EUROPE,
    Marketplace.ITALY: _EUROPE,
    Marketplace.SPAIN: _EUROPE,
    Marketplace.NETHERLANDS: _EUROPE,
    Marketplace.SWEDEN: _EUROPE,
    Marketplace.POLAND: _EUROPE,
    Marketplace.TURKEY: _EUROPE,
    Marketplace.UNITED_ARAB_EMIRATES: _EUROPE,
    Marketplace.SAUDI_ARABIA: _EUROPE,
    Marketplace.EGYPT: _EUROPE,
    Marketplace.BELGIUM: _EUROPE,
    Marketplace.INDIA: _EUROPE,
    Marketplace.JAPAN: _FAR_EAST,
    Marketplace.AUSTRALIA: _FAR_EAST,
    Marketplace.SINGAPORE: _FAR_EAST,
}


def get_locale(marketplace: str) -> Locale:
    """Get the API host and signing region for a marketplace.

    Args:
        marketplace: Marketplace domain, e.g. "www.amazon.de".

    Returns:
        Locale with the webservices host and AWS region.

    Raises:
        ConfigurationError: If the marketplace is not served by PA-API.

    Example:
        >>> get_locale("www.amazon.co.uk")
        Locale(host='webservices.amazon.co.uk', region='eu-west-1')
    """
    try:
        member = Marketplace(marketplace.strip().lower())
    except ValueError:
        raise ConfigurationError(f"Unsupported marketplace: {marketplace!r}") from None
    host = member.value.replace("www.", "webservices.", 1)
    return Locale(host=host, region=_REGIONS[member])


class Endpoints:
    """Endpoint paths for PA-API 5.0 operations."""

    SEARCH_ITEMS = "/paapi5/searchitems"
    GET_ITEMS = "/paapi5/getitems"
    GET_BROWSE_NODES = "/paapi5/getbrowsenodes"

    TARGET_PREFIX = "com.amazon.paapi5.v1.ProductAdvertisingAPIv1"
    SERVICE = "ProductAdvertisingAPI"
