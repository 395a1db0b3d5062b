"""Credentials and shared request parameters."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Self

from .endpoints import Marketplace

DEFAULT_MARKETPLACE = Marketplace.UNITED_STATES.value


@dataclass
class Credentials:
    """PA-API credential set as stored by the host runtime.

    Attributes:
        access_key: PA-API access key.
        secret_key: PA-API secret key.
        partner_tag: Default Associates tag, may be overridden per run.
        marketplace: Marketplace domain, e.g. "www.amazon.com".
    """

    access_key: str
    secret_key: str
    partner_tag: str = ""
    marketplace: str = DEFAULT_MARKETPLACE

    def __repr__(self) -> str:
        return (
            f"Credentials(access_key={self.access_key!r}, secret_key='***', "
            f"partner_tag={self.partner_tag!r}, marketplace={self.marketplace!r})"
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> Self:
        """Build credentials from the host's camelCase credential record."""
        return cls(
            access_key=str(data.get("accessKey") or ""),
            secret_key=str(data.get("secretKey") or ""),
            partner_tag=str(data.get("partnerTag") or ""),
            marketplace=str(data.get("marketplace") or DEFAULT_MARKETPLACE),
        )

    @classmethod
    def from_env(cls) -> Self:
        """Build credentials from AMAZON_PAAPI_* environment variables."""
        return cls(
            access_key=os.getenv("AMAZON_PAAPI_ACCESS_KEY", ""),
            secret_key=os.getenv("AMAZON_PAAPI_SECRET_KEY", ""),
            partner_tag=os.getenv("AMAZON_PAAPI_PARTNER_TAG", ""),
            marketplace=os.getenv("AMAZON_PAAPI_MARKETPLACE", DEFAULT_MARKETPLACE),
        )


@dataclass(frozen=True)
class CommonParameters:
    """Authentication parameters shared by every call in a run."""

    PARTNER_TYPE = "Associates"

    access_key: str
    secret_key: str
    partner_tag: str
    marketplace: str

    def __repr__(self) -> str:
        return (
            f"CommonParameters(access_key={self.access_key!r}, secret_key='***', "
            f"partner_tag={self.partner_tag!r}, marketplace={self.marketplace!r})"
        )

    def as_dict(self) -> dict[str, str]:
        return {
            "AccessKey": self.access_key,
            "SecretKey": self.secret_key,
            "PartnerTag": self.partner_tag,
            "Marketplace": self.marketplace,
            "PartnerType": self.PARTNER_TYPE,
        }

    def payload_fields(self) -> dict[str, str]:
        """Fields that go into every request body."""
        return {
            "PartnerTag": self.partner_tag,
            "PartnerType": self.PARTNER_TYPE,
            "Marketplace": self.marketplace,
        }
