"""Async client for the Product Advertising API 5.0."""

import logging
from dataclasses import dataclass, field
from typing import Any, Self

import httpx
from httpx_auth import AWS4Auth

from .config import CommonParameters
from .endpoints import Endpoints, Locale, get_locale
from .exceptions import PAAPIAuthError, PAAPIError, PAAPIRateLimitError
from .types import APIResponse, RequestParameters

logger = logging.getLogger(__name__)


@dataclass
class ProductAdvertisingClient:
    """Async client for PA-API operations.

    Features:
    - Async context manager
    - AWS Signature V4 via httpx-auth
    - Host and signing region resolved from the marketplace
    - HTTP errors mapped to PAAPIError subclasses

    Usage:
        async with ProductAdvertisingClient(common) as client:
            response = await client.search_items({"Keywords": "socks"})

    Attributes:
        common: Shared authentication parameters.
        timeout: Request timeout in seconds.
    """

    common: CommonParameters
    timeout: float = 30.0

    locale: Locale = field(init=False)
    _client: httpx.AsyncClient = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.locale = get_locale(self.common.marketplace)

    @property
    def base_url(self) -> str:
        return f"https://{self.locale.host}"

    async def __aenter__(self) -> Self:
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            auth=AWS4Auth(
                access_id=self.common.access_key,
                secret_key=self.common.secret_key,
                region=self.locale.region,
                service=Endpoints.SERVICE,
            ),
            timeout=self.timeout,
        )
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self._client.aclose()

    def _safe_json(self, response: httpx.Response) -> dict[str, Any]:
        """Safely parse JSON response, return empty dict on failure."""
        try:
            data = response.json()
        except Exception:
            return {}
        return data if isinstance(data, dict) else {}

    def _raise_for_status(self, response: httpx.Response) -> None:
        """Raise exception for non-2xx status codes."""
        status = response.status_code

        if 200 <= status < 300:
            return

        response_data = self._safe_json(response)
        errors = response_data.get("Errors") or [{}]
        first = errors[0] if isinstance(errors[0], dict) else {}
        message = first.get("Message") or f"HTTP {status}"
        code = first.get("Code")

        if status in (401, 403):
            raise PAAPIAuthError(
                message, status_code=status, code=code, response_data=response_data
            )

        if status == 429:
            retry_after = response.headers.get("Retry-After")
            raise PAAPIRateLimitError(
                message,
                status_code=status,
                code=code,
                retry_after=float(retry_after) if retry_after else None,
                response_data=response_data,
            )

        raise PAAPIError(message, status_code=status, code=code, response_data=response_data)

    async def _request(
        self,
        operation: str,
        endpoint: str,
        params: RequestParameters,
    ) -> APIResponse:
        """Sign and send one operation, return the response envelope."""
        payload = {**params, **self.common.payload_fields()}
        headers = {
            "content-encoding": "amz-1.0",
            "content-type": "application/json; charset=utf-8",
            "x-amz-target": f"{Endpoints.TARGET_PREFIX}.{operation}",
        }
        logger.debug("POST %s%s %s", self.base_url, endpoint, params)

        try:
            response = await self._client.post(endpoint, json=payload, headers=headers)
        except (httpx.TimeoutException, httpx.NetworkError) as e:
            raise PAAPIError(f"Network error: {e}") from e

        self._raise_for_status(response)
        return {"status": response.status_code, "body": self._safe_json(response)}

    async def search_items(self, params: RequestParameters) -> APIResponse:
        """Search the catalog by keywords and optional SearchIndex."""
        return await self._request("SearchItems", Endpoints.SEARCH_ITEMS, params)

    async def get_items(self, params: RequestParameters) -> APIResponse:
        """Look up items by ASIN."""
        return await self._request("GetItems", Endpoints.GET_ITEMS, params)

    async def get_browse_nodes(self, params: RequestParameters) -> APIResponse:
        """Look up browse nodes by id."""
        return await self._request("GetBrowseNodes", Endpoints.GET_BROWSE_NODES, params)
