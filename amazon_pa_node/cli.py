"""Command-line runner for the node."""

import argparse
import asyncio
import json
import sys

from .config import Credentials
from .context import StaticExecutionContext
from .description import CREDENTIALS_NAME
from .exceptions import NodeError
from .log import setup_logging
from .node import AmazonPANode
from .operations import ALL_CATEGORIES, Operation


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="amazon-pa-node",
        description="Run an Amazon PA-API operation. Credentials are read from AMAZON_PAAPI_* variables.",
    )
    p.add_argument(
        "--operation",
        choices=[op.value for op in Operation],
        default=Operation.SEARCH_ITEMS.value,
    )
    p.add_argument("--keywords", default="", help="Keywords (searchItems)")
    p.add_argument("--search-index", default=ALL_CATEGORIES, help="Category (searchItems)")
    p.add_argument("--item-ids", default="", help="Comma-separated ASINs (getItems)")
    p.add_argument("--browse-node-ids", default="", help="Comma-separated browse node ids (getBrowseNodes)")
    p.add_argument("--partner-tag", default="", help="Overrides AMAZON_PAAPI_PARTNER_TAG")
    p.add_argument("--items", type=int, default=1, help="Number of input items to run")
    p.add_argument("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ERROR)")
    return p


def build_context(args: argparse.Namespace, credentials: Credentials) -> StaticExecutionContext:
    return StaticExecutionContext(
        items=[{"json": {}} for _ in range(max(args.items, 0))],
        parameters={
            "operation": args.operation,
            "partnerTag": args.partner_tag,
            "keywords": args.keywords,
            "searchIndex": args.search_index,
            "itemIds": args.item_ids,
            "browseNodeIds": args.browse_node_ids,
        },
        credentials={CREDENTIALS_NAME: credentials},
    )


def run_cli(argv: list[str] | None = None, node: AmazonPANode | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.log_level)

    context = build_context(args, Credentials.from_env())
    node = node or AmazonPANode()
    try:
        output = asyncio.run(node.execute(context))
    except NodeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(output, indent=2, ensure_ascii=False))
    return 0


def main() -> int:
    return run_cli(sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
