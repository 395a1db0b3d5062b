"""Type definitions for the Amazon PA-API node."""

from typing import Any

# Generic type aliases for API payloads
RequestParameters = dict[str, Any]
APIResponse = dict[str, Any]
APIItem = dict[str, Any]
APIItemsList = list[APIItem]

# Host runtime shapes: one item is {"json": {...}}, a run returns a list of batches
NodeItem = dict[str, Any]
NodeOutput = list[list[NodeItem]]
