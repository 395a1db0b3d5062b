"""Pytest configuration and fixtures."""

from typing import Any

import pytest

from amazon_pa_node import CommonParameters, Credentials, StaticExecutionContext


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: integration tests against the real PA-API")


class FakeCatalogAPI:
    """Records calls and replays canned responses (or raises them)."""

    def __init__(self, responses: dict[str, Any] | None = None) -> None:
        self.responses = responses or {}
        self.calls: list[tuple[str, CommonParameters, dict[str, Any]]] = []

    async def _call(self, name: str, common: CommonParameters, params: dict[str, Any]) -> Any:
        self.calls.append((name, common, params))
        result = self.responses.get(name, {"body": {}})
        if isinstance(result, BaseException):
            raise result
        if isinstance(result, list):
            return result.pop(0)
        return result

    async def search_items(self, common, params):
        return await self._call("search_items", common, params)

    async def get_items(self, common, params):
        return await self._call("get_items", common, params)

    async def get_browse_nodes(self, common, params):
        return await self._call("get_browse_nodes", common, params)


@pytest.fixture
def credentials() -> Credentials:
    return Credentials(
        access_key="AKIDEXAMPLE",
        secret_key="secret",
        partner_tag="default-20",
        marketplace="www.amazon.com",
    )


@pytest.fixture
def common() -> CommonParameters:
    return CommonParameters(
        access_key="AKIDEXAMPLE",
        secret_key="secret",
        partner_tag="default-20",
        marketplace="www.amazon.com",
    )


@pytest.fixture
def make_context(credentials):
    def _make(
        count: int = 1,
        item_parameters: list[dict[str, Any]] | None = None,
        creds: Credentials | None = None,
        **parameters: Any,
    ) -> StaticExecutionContext:
        return StaticExecutionContext(
            items=[{"json": {}} for _ in range(count)],
            parameters=parameters,
            item_parameters=item_parameters or [],
            credentials={"amazonPaApi": creds or credentials},
        )

    return _make


@pytest.fixture
def make_api():
    return FakeCatalogAPI
