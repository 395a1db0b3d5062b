"""Operations and request construction for the PA-API node."""

from enum import StrEnum
from typing import Self

from .exceptions import ValidationError
from .types import APIItemsList, APIResponse, RequestParameters


class Operation(StrEnum):
    """Operations the node can run for an item."""

    SEARCH_ITEMS = "searchItems"
    GET_ITEMS = "getItems"
    GET_BROWSE_NODES = "getBrowseNodes"

    @classmethod
    def parse(cls, value: str) -> Self:
        """Resolve an operation name, failing on anything unknown."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unsupported operation: {value!r}") from None


class SearchIndex(StrEnum):
    """Categories offered for narrowing a search."""

    ALL = "All"
    BOOKS = "Books"
    TOYS_AND_GAMES = "ToysAndGames"
    ELECTRONICS = "Electronics"
    HEALTH_PERSONAL_CARE = "HealthPersonalCare"
    BEAUTY = "Beauty"
    APPAREL = "Apparel"


# Sentinel meaning "search every category"
ALL_CATEGORIES = SearchIndex.ALL.value

GET_ITEMS_RESOURCES = [
    "ItemInfo.Title",
    "Offers.Listings.Price",
    "Images.Primary.Small",
    "Images.Primary.Medium",
    "Images.Primary.Large",
]


def split_ids(raw: str | None, label: str = "IDs") -> list[str]:
    """Split a comma-separated identifier string, keeping order.

    Args:
        raw: Value such as "B001,B002".
        label: Name used in the error message.

    Returns:
        Identifiers with surrounding whitespace removed. Duplicates are kept.

    Raises:
        ValidationError: If no identifier is present.

    Example:
        >>> split_ids("B001, B002")
        ['B001', 'B002']
    """
    ids = [part.strip() for part in (raw or "").split(",")]
    ids = [part for part in ids if part]
    if not ids:
        raise ValidationError(f"{label} are required but were not provided.")
    return ids


def build_search_items_request(keywords: str, search_index: str = ALL_CATEGORIES) -> RequestParameters:
    params: RequestParameters = {"Keywords": keywords}
    # "All" means no category filter at all
    if search_index and search_index != ALL_CATEGORIES:
        params["SearchIndex"] = search_index
    return params


def build_get_items_request(item_ids: str | None) -> RequestParameters:
    return {
        "ItemIds": split_ids(item_ids, "Item IDs"),
        "Resources": list(GET_ITEMS_RESOURCES),
    }


def build_get_browse_nodes_request(browse_node_ids: str | None) -> RequestParameters:
    return {"BrowseNodeIds": split_ids(browse_node_ids, "Browse Node IDs")}


def extract_search_results(response: APIResponse | None) -> APIItemsList:
    """Return body.SearchResult.Items from a SearchItems response, or []."""
    body = (response or {}).get("body") or {}
    search_result = body.get("SearchResult") or {}
    return search_result.get("Items") or []
