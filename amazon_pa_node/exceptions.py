"""Exceptions for the Amazon PA-API node."""

from typing import Any


class PAAPIError(Exception):
    """Base exception for Product Advertising API errors."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        code: str | None = None,
        response_data: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.code = code
        self.response_data = response_data or {}

    def __str__(self) -> str:
        if self.status_code:
            return f"[{self.status_code}] {self.message}"
        return self.message


class PAAPIAuthError(PAAPIError):
    """Authentication error.

    Raised when:
    - Access key or signature is rejected (401)
    - Partner tag is not linked to the access key (403)
    """

    pass


class PAAPIRateLimitError(PAAPIError):
    """Request throttled by the API (429)."""

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        retry_after: float | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class NodeError(Exception):
    """Base exception for node execution failures."""

    def __init__(self, message: str, item_index: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.item_index = item_index

    def __str__(self) -> str:
        if self.item_index is not None:
            return f"[item {self.item_index}] {self.message}"
        return self.message


class ConfigurationError(NodeError):
    """Credentials or node settings are unusable (e.g. no partner tag)."""

    pass


class ValidationError(NodeError):
    """A required per-item parameter is missing or malformed."""

    pass


class ExternalCallError(NodeError):
    """The catalog API call for an item failed."""

    def __init__(
        self,
        message: str,
        item_index: int | None = None,
        operation: str | None = None,
    ) -> None:
        super().__init__(message, item_index=item_index)
        self.operation = operation
