"""Example usage of the Amazon PA-API node."""

import asyncio

from amazon_pa_node import (
    AmazonPANode,
    Credentials,
    NodeError,
    Operation,
    ProductAdvertisingClient,
    SearchIndex,
    StaticExecutionContext,
)
from amazon_pa_node.node import resolve_common_parameters


async def main() -> None:
    """Example: search, then look up the ASINs that came back."""
    credentials = Credentials(
        access_key="your-access-key",
        secret_key="your-secret-key",
        partner_tag="yourtag-20",
        marketplace="www.amazon.com",
    )
    node = AmazonPANode()

    try:
        # Node mode - one operation per input item
        search = StaticExecutionContext(
            parameters={
                "operation": Operation.SEARCH_ITEMS,
                "keywords": "wool socks",
                "searchIndex": SearchIndex.APPAREL,
            },
            credentials={"amazonPaApi": credentials},
        )
        [results] = await node.execute(search)
        found = results[0]["json"]["results"]
        print(f"Found {len(found)} items")

        asins = ",".join(item["ASIN"] for item in found[:3])
        if asins:
            lookup = StaticExecutionContext(
                parameters={"operation": Operation.GET_ITEMS, "itemIds": asins},
                credentials={"amazonPaApi": credentials},
            )
            [items] = await node.execute(lookup)
            print(f"GetItems status: {items[0]['json']['status']}")

        # Client mode - several calls over one connection
        common = resolve_common_parameters(search, credentials)
        async with ProductAdvertisingClient(common) as client:
            nodes = await client.get_browse_nodes({"BrowseNodeIds": ["283155"]})
            print(f"Browse nodes: {nodes['body']}")

    except NodeError as e:
        print(f"Node error: {e}")


if __name__ == "__main__":
    asyncio.run(main())
