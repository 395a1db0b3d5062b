"""Call-per-request helpers: ``search_items(common, params)`` and friends.

Each helper opens a client for a single call, so callers that only need
one request per item do not manage the connection lifecycle.
"""

from .client import ProductAdvertisingClient
from .config import CommonParameters
from .types import APIResponse, RequestParameters


async def search_items(common: CommonParameters, params: RequestParameters) -> APIResponse:
    async with ProductAdvertisingClient(common) as client:
        return await client.search_items(params)


async def get_items(common: CommonParameters, params: RequestParameters) -> APIResponse:
    async with ProductAdvertisingClient(common) as client:
        return await client.get_items(params)


async def get_browse_nodes(common: CommonParameters, params: RequestParameters) -> APIResponse:
    async with ProductAdvertisingClient(common) as client:
        return await client.get_browse_nodes(params)
