"""Declarative node metadata used by hosts to render and default parameters."""

from dataclasses import dataclass, field
from typing import Any

from .operations import Operation, SearchIndex

CREDENTIALS_NAME = "amazonPaApi"


@dataclass(frozen=True)
class NodeProperty:
    """One user-facing node parameter.

    Attributes:
        name: Parameter key used for lookups.
        display_name: Label shown by the host.
        type: Host widget type ("string" or "options").
        default: Value used when the parameter is not set.
        description: Help text.
        options: (label, value) pairs for "options" parameters.
        show_for_operations: Operations the parameter is shown for; empty means always.
    """

    name: str
    display_name: str
    type: str
    default: Any
    description: str = ""
    options: tuple[tuple[str, str], ...] = ()
    show_for_operations: tuple[Operation, ...] = field(default_factory=tuple)

    def is_visible_for(self, operation: Operation) -> bool:
        return not self.show_for_operations or operation in self.show_for_operations


PROPERTIES: tuple[NodeProperty, ...] = (
    NodeProperty(
        name="operation",
        display_name="Operation",
        type="options",
        default=Operation.SEARCH_ITEMS.value,
        options=(
            ("Search Items", Operation.SEARCH_ITEMS.value),
            ("Get Items", Operation.GET_ITEMS.value),
            ("Get Browse Nodes", Operation.GET_BROWSE_NODES.value),
        ),
    ),
    NodeProperty(
        name="partnerTag",
        display_name="Partner Tag",
        type="string",
        default="",
        description="Amazon Partner Tag (overrides default if set)",
    ),
    NodeProperty(
        name="itemIds",
        display_name="Item IDs (for Get Items)",
        type="string",
        default="",
        description="Comma-separated list of ASINs for items",
        show_for_operations=(Operation.GET_ITEMS,),
    ),
    NodeProperty(
        name="keywords",
        display_name="Keywords (for Search Items)",
        type="string",
        default="",
        description="Keywords to search for items on Amazon",
        show_for_operations=(Operation.SEARCH_ITEMS,),
    ),
    NodeProperty(
        name="searchIndex",
        display_name="Category (Search Index)",
        type="options",
        default=SearchIndex.ALL.value,
        description="Select a single category to refine your search (SearchIndex).",
        options=(
            ("All", SearchIndex.ALL.value),
            ("Books", SearchIndex.BOOKS.value),
            ("Toys & Games", SearchIndex.TOYS_AND_GAMES.value),
            ("Electronics", SearchIndex.ELECTRONICS.value),
            ("Health & Personal Care", SearchIndex.HEALTH_PERSONAL_CARE.value),
            ("Beauty", SearchIndex.BEAUTY.value),
            ("Clothing & Accessories", SearchIndex.APPAREL.value),
        ),
        show_for_operations=(Operation.SEARCH_ITEMS,),
    ),
    NodeProperty(
        name="browseNodeIds",
        display_name="Browse Node IDs (for Get Browse Nodes)",
        type="string",
        default="",
        description="Comma-separated list of Browse Node IDs",
        show_for_operations=(Operation.GET_BROWSE_NODES,),
    ),
)

_BY_NAME: dict[str, NodeProperty] = {prop.name: prop for prop in PROPERTIES}

NODE_DESCRIPTION: dict[str, Any] = {
    "displayName": "Amazon PA API Advanced",
    "name": "amazonPaApiAdv",
    "group": ["transform"],
    "version": 1,
    "description": "Advanced Amazon Product Advertising API Integration",
    "defaults": {"name": "Amazon PA API", "color": "#FF9900"},
    "inputs": ["main"],
    "outputs": ["main"],
    "credentials": [{"name": CREDENTIALS_NAME, "required": True}],
    "properties": PROPERTIES,
}


def get_property(name: str) -> NodeProperty:
    """Look up a declared property; KeyError if the node has no such parameter."""
    return _BY_NAME[name]


def property_default(name: str) -> Any:
    return get_property(name).default


def visible_properties(operation: Operation | str) -> list[NodeProperty]:
    """Properties the host shows once ``operation`` is selected."""
    op = Operation.parse(operation)
    return [prop for prop in PROPERTIES if prop.is_visible_for(op)]
