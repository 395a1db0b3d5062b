"""Amazon PA-API node - workflow node for the Product Advertising API 5.0."""

from .client import ProductAdvertisingClient
from .config import CommonParameters, Credentials
from .context import ExecutionContext, StaticExecutionContext
from .description import NODE_DESCRIPTION, NodeProperty
from .endpoints import Endpoints, Locale, Marketplace, get_locale
from .exceptions import (
    ConfigurationError,
    ExternalCallError,
    NodeError,
    PAAPIAuthError,
    PAAPIError,
    PAAPIRateLimitError,
    ValidationError,
)
from .node import AmazonPANode
from .operations import Operation, SearchIndex
from .types import APIResponse, NodeItem, NodeOutput, RequestParameters

__all__ = [
    # Node
    "AmazonPANode",
    "NODE_DESCRIPTION",
    "NodeProperty",
    "Operation",
    "SearchIndex",
    # Host seam
    "ExecutionContext",
    "StaticExecutionContext",
    "Credentials",
    "CommonParameters",
    # Client
    "ProductAdvertisingClient",
    "Marketplace",
    "Locale",
    "Endpoints",
    "get_locale",
    # Exceptions
    "NodeError",
    "ConfigurationError",
    "ValidationError",
    "ExternalCallError",
    "PAAPIError",
    "PAAPIAuthError",
    "PAAPIRateLimitError",
    # Types
    "APIResponse",
    "RequestParameters",
    "NodeItem",
    "NodeOutput",
]

__version__ = "0.1.0"
