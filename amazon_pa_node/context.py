"""Host runtime seam: input items, parameter lookup and credentials."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Protocol

from .config import Credentials
from .description import property_default
from .exceptions import ConfigurationError
from .types import NodeItem

_MISSING: Any = object()


class ExecutionContext(Protocol):
    """What the node needs from the workflow runtime.

    Parameters are read-only and resolved per item index, so the same
    node can be configured differently for each item.
    """

    def get_input_data(self) -> list[NodeItem]:
        ...

    def get_node_parameter(self, name: str, index: int, default: Any = _MISSING) -> Any:
        ...

    async def get_credentials(self, name: str) -> Credentials:
        ...


@dataclass
class StaticExecutionContext:
    """In-process ExecutionContext backed by plain dicts.

    Lookup order for a parameter: per-item override, node-level value,
    the caller's default, then the property default declared by the node.

    Attributes:
        items: Input items, each shaped {"json": {...}}.
        parameters: Node-level parameter values.
        item_parameters: Per-item overrides, aligned with ``items``.
        credentials: Named credential sets.
    """

    items: list[NodeItem] = field(default_factory=lambda: [{"json": {}}])
    parameters: dict[str, Any] = field(default_factory=dict)
    item_parameters: list[dict[str, Any]] = field(default_factory=list)
    credentials: dict[str, Credentials | Mapping[str, Any]] = field(default_factory=dict)

    def get_input_data(self) -> list[NodeItem]:
        return list(self.items)

    def get_node_parameter(self, name: str, index: int, default: Any = _MISSING) -> Any:
        if index < len(self.item_parameters) and name in self.item_parameters[index]:
            return self.item_parameters[index][name]
        if name in self.parameters:
            return self.parameters[name]
        if default is not _MISSING:
            return default
        try:
            return property_default(name)
        except KeyError:
            raise KeyError(f"Unknown node parameter: {name!r}") from None

    async def get_credentials(self, name: str) -> Credentials:
        try:
            found = self.credentials[name]
        except KeyError:
            raise ConfigurationError(f"No credentials found for {name!r}") from None
        if isinstance(found, Credentials):
            return found
        return Credentials.from_mapping(found)
