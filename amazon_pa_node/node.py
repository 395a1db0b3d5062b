"""The Amazon PA-API workflow node."""

import logging
from types import ModuleType
from typing import Any, Protocol

from . import paapi
from .config import CommonParameters, Credentials
from .context import ExecutionContext
from .description import CREDENTIALS_NAME, NODE_DESCRIPTION
from .endpoints import get_locale
from .exceptions import ConfigurationError, ExternalCallError, ValidationError
from .operations import (
    ALL_CATEGORIES,
    Operation,
    build_get_browse_nodes_request,
    build_get_items_request,
    build_search_items_request,
    extract_search_results,
)
from .types import APIResponse, NodeItem, NodeOutput, RequestParameters

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Failed to execute Amazon PA API operation"


class CatalogAPI(Protocol):
    """The three catalog calls the node depends on."""

    async def search_items(self, common: CommonParameters, params: RequestParameters) -> APIResponse:
        ...

    async def get_items(self, common: CommonParameters, params: RequestParameters) -> APIResponse:
        ...

    async def get_browse_nodes(self, common: CommonParameters, params: RequestParameters) -> APIResponse:
        ...


def _failure_message(cause: str) -> str:
    if cause:
        return f"{FAILURE_PREFIX}: {cause}"
    return f"{FAILURE_PREFIX} due to an unknown error."


def resolve_common_parameters(context: ExecutionContext, credentials: Credentials) -> CommonParameters:
    """Combine credentials with the partner tag chosen for this run.

    The ``partnerTag`` parameter of the first item wins over the tag stored
    with the credentials. Evaluated once per run, before any item is processed.

    Raises:
        ConfigurationError: If neither source provides a partner tag, or the
            marketplace is not served by PA-API.
    """
    partner_tag = context.get_node_parameter("partnerTag", 0, "") or credentials.partner_tag
    if not partner_tag:
        raise ConfigurationError(
            "PartnerTag is required but was not provided in both the request and credentials."
        )
    get_locale(credentials.marketplace)
    return CommonParameters(
        access_key=credentials.access_key,
        secret_key=credentials.secret_key,
        partner_tag=partner_tag,
        marketplace=credentials.marketplace,
    )


class AmazonPANode:
    """Runs one PA-API operation per input item.

    Items are processed strictly in order and each call is awaited before
    the next item starts. The first failure aborts the whole run; no
    partial output is returned.

    Usage:
        node = AmazonPANode()
        output = await node.execute(context)

    Attributes:
        api: Object exposing search_items/get_items/get_browse_nodes
            coroutines. Defaults to the ``paapi`` module.
    """

    description = NODE_DESCRIPTION

    def __init__(self, api: CatalogAPI | ModuleType | None = None) -> None:
        self.api: Any = api if api is not None else paapi

    async def execute(self, context: ExecutionContext) -> NodeOutput:
        items = context.get_input_data()
        credentials = await context.get_credentials(CREDENTIALS_NAME)
        common = resolve_common_parameters(context, credentials)
        logger.info(
            "Running %d item(s) against %s with partner tag %s",
            len(items),
            common.marketplace,
            common.partner_tag,
        )

        return_data: list[NodeItem] = []
        for index in range(len(items)):
            operation_name = ""
            try:
                operation_name = context.get_node_parameter("operation", index)
                operation = Operation.parse(operation_name)
                payload = await self._run_operation(context, index, operation, common)
            except (ValidationError, ConfigurationError) as exc:
                logger.error("Item %d (%s) rejected: %s", index, operation_name, exc.message)
                raise type(exc)(_failure_message(exc.message), item_index=index) from exc
            except Exception as exc:
                logger.error("Item %d (%s) failed: %r", index, operation_name, exc)
                raise ExternalCallError(
                    _failure_message(str(exc)),
                    item_index=index,
                    operation=operation_name,
                ) from exc
            return_data.append({"json": payload})

        return [return_data]

    async def _run_operation(
        self,
        context: ExecutionContext,
        index: int,
        operation: Operation,
        common: CommonParameters,
    ) -> dict[str, Any]:
        logger.info("Item %d: %s", index, operation)

        match operation:
            case Operation.GET_ITEMS:
                params = build_get_items_request(context.get_node_parameter("itemIds", index, ""))
                logger.debug("GetItems request parameters: %s", params)
                response = await self.api.get_items(common, params)
                logger.debug("GetItems response: %s", response)
                return response

            case Operation.SEARCH_ITEMS:
                params = build_search_items_request(
                    context.get_node_parameter("keywords", index, ""),
                    context.get_node_parameter("searchIndex", index, ALL_CATEGORIES),
                )
                logger.debug("SearchItems request parameters: %s", params)
                response = await self.api.search_items(common, params)
                logger.debug("SearchItems response: %s", response)
                return {"results": extract_search_results(response)}

            case Operation.GET_BROWSE_NODES:
                params = build_get_browse_nodes_request(
                    context.get_node_parameter("browseNodeIds", index, "")
                )
                logger.debug("GetBrowseNodes request parameters: %s", params)
                response = await self.api.get_browse_nodes(common, params)
                logger.debug("GetBrowseNodes response: %s", response)
                return response
