"""Tests for ProductAdvertisingClient and the call-per-request helpers."""

import json

import httpx
import pytest
import respx

from amazon_pa_node import (
    CommonParameters,
    ConfigurationError,
    PAAPIAuthError,
    PAAPIError,
    PAAPIRateLimitError,
    ProductAdvertisingClient,
)
from amazon_pa_node import paapi

BASE_URL = "https://webservices.amazon.com"


def _error_body(code: str, message: str) -> dict:
    return {
        "__type": f"com.amazon.paapi5#{code}",
        "Errors": [{"Code": code, "Message": message}],
    }


class TestRequests:
    @pytest.mark.asyncio
    @respx.mock
    async def test_search_items_success(self, common: CommonParameters) -> None:
        body = {"SearchResult": {"Items": [{"ASIN": "X1"}]}}
        route = respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            return_value=httpx.Response(200, json=body)
        )

        async with ProductAdvertisingClient(common) as client:
            result = await client.search_items({"Keywords": "socks"})

        assert result == {"status": 200, "body": body}
        assert route.called

    @pytest.mark.asyncio
    @respx.mock
    async def test_payload_carries_partner_fields(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/getitems").mock(
            return_value=httpx.Response(200, json={"ItemsResult": {"Items": []}})
        )

        async with ProductAdvertisingClient(common) as client:
            await client.get_items({"ItemIds": ["B001", "B002"], "Resources": ["ItemInfo.Title"]})

        request = route.calls.last.request
        assert json.loads(request.content) == {
            "ItemIds": ["B001", "B002"],
            "Resources": ["ItemInfo.Title"],
            "PartnerTag": "default-20",
            "PartnerType": "Associates",
            "Marketplace": "www.amazon.com",
        }

    @pytest.mark.asyncio
    @respx.mock
    async def test_request_is_signed(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/getbrowsenodes").mock(
            return_value=httpx.Response(200, json={"BrowseNodesResult": {}})
        )

        async with ProductAdvertisingClient(common) as client:
            await client.get_browse_nodes({"BrowseNodeIds": ["283155"]})

        request = route.calls.last.request
        assert request.headers["x-amz-target"] == (
            "com.amazon.paapi5.v1.ProductAdvertisingAPIv1.GetBrowseNodes"
        )
        assert request.headers["content-encoding"] == "amz-1.0"
        authorization = request.headers["authorization"]
        assert authorization.startswith("AWS4-HMAC-SHA256")
        assert "AKIDEXAMPLE/" in authorization
        assert "/us-east-1/ProductAdvertisingAPI/aws4_request" in authorization

    @pytest.mark.asyncio
    @respx.mock
    async def test_marketplace_selects_host(self) -> None:
        route = respx.post("https://webservices.amazon.de/paapi5/searchitems").mock(
            return_value=httpx.Response(200, json={})
        )
        common = CommonParameters("AKIDEXAMPLE", "secret", "tag-21", "www.amazon.de")

        async with ProductAdvertisingClient(common) as client:
            await client.search_items({"Keywords": "socken"})

        assert route.called
        assert "/eu-west-1/" in route.calls.last.request.headers["authorization"]

    def test_unsupported_marketplace(self) -> None:
        common = CommonParameters("AKIDEXAMPLE", "secret", "tag", "www.example.com")
        with pytest.raises(ConfigurationError):
            ProductAdvertisingClient(common)


class TestErrorHandling:
    @pytest.mark.asyncio
    @respx.mock
    async def test_auth_error_401(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            return_value=httpx.Response(
                401, json=_error_body("InvalidSignature", "The request signature is invalid.")
            )
        )

        async with ProductAdvertisingClient(common) as client:
            with pytest.raises(PAAPIAuthError) as exc_info:
                await client.search_items({"Keywords": "socks"})

        assert exc_info.value.status_code == 401
        assert exc_info.value.code == "InvalidSignature"
        assert exc_info.value.message == "The request signature is invalid."
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_auth_error_403(self, common: CommonParameters) -> None:
        respx.post(f"{BASE_URL}/paapi5/getitems").mock(
            return_value=httpx.Response(
                403, json=_error_body("AccessDeniedAwsUsers", "Not registered as an Associate.")
            )
        )

        async with ProductAdvertisingClient(common) as client:
            with pytest.raises(PAAPIAuthError) as exc_info:
                await client.get_items({"ItemIds": ["B001"]})

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    @respx.mock
    async def test_rate_limit_429_no_retry(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            return_value=httpx.Response(
                429,
                json=_error_body("TooManyRequests", "The request was denied due to request throttling."),
                headers={"Retry-After": "1"},
            )
        )

        async with ProductAdvertisingClient(common) as client:
            with pytest.raises(PAAPIRateLimitError) as exc_info:
                await client.search_items({"Keywords": "socks"})

        assert exc_info.value.retry_after == 1.0
        assert exc_info.value.code == "TooManyRequests"
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_server_error_no_retry(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            return_value=httpx.Response(500, text="oops")
        )

        async with ProductAdvertisingClient(common) as client:
            with pytest.raises(PAAPIError) as exc_info:
                await client.search_items({"Keywords": "socks"})

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "HTTP 500"
        assert route.call_count == 1

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_error(self, common: CommonParameters) -> None:
        respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            side_effect=httpx.ConnectError("connection refused")
        )

        async with ProductAdvertisingClient(common) as client:
            with pytest.raises(PAAPIError) as exc_info:
                await client.search_items({"Keywords": "socks"})

        assert exc_info.value.message == "Network error: connection refused"
        assert isinstance(exc_info.value.__cause__, httpx.ConnectError)


class TestHelpers:
    @pytest.mark.asyncio
    @respx.mock
    async def test_get_items_helper(self, common: CommonParameters) -> None:
        body = {"ItemsResult": {"Items": [{"ASIN": "B001"}]}}
        respx.post(f"{BASE_URL}/paapi5/getitems").mock(
            return_value=httpx.Response(200, json=body)
        )

        result = await paapi.get_items(common, {"ItemIds": ["B001"]})

        assert result == {"status": 200, "body": body}

    @pytest.mark.asyncio
    @respx.mock
    async def test_search_items_helper_raises(self, common: CommonParameters) -> None:
        respx.post(f"{BASE_URL}/paapi5/searchitems").mock(
            return_value=httpx.Response(400, json=_error_body("InvalidParameterValue", "Bad keywords"))
        )

        with pytest.raises(PAAPIError, match="Bad keywords"):
            await paapi.search_items(common, {"Keywords": ""})

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_browse_nodes_helper(self, common: CommonParameters) -> None:
        route = respx.post(f"{BASE_URL}/paapi5/getbrowsenodes").mock(
            return_value=httpx.Response(200, json={"BrowseNodesResult": {"BrowseNodes": []}})
        )

        result = await paapi.get_browse_nodes(common, {"BrowseNodeIds": ["1", "2"]})

        assert result["body"] == {"BrowseNodesResult": {"BrowseNodes": []}}
        assert json.loads(route.calls.last.request.content)["BrowseNodeIds"] == ["1", "2"]
