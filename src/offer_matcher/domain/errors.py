"""Exception hierarchy for offer matching errors.

All errors inherit from TradingError, allowing code to catch broad
categories of errors. Each error type includes relevant context for
debugging and logging.

Error categories:
- ExchangeError: Issues with exchange connectivity or API
  - ExchangeConnectionError: Endpoint unreachable
  - FetchError: Offer retrieval failed
- TradeError: Trade rejected or offer unknown
- ConfigurationError: Invalid configuration

Command handlers do not catch any of these; they propagate to whoever
invoked the command.
"""

from __future__ import annotations

from typing import Any


class TradingError(Exception):
    """Base exception for all trading-related errors."""

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        """Initialize with message and optional context.

        Args:
            message: Human-readable error description
            context: Additional structured data for logging/debugging
        """
        super().__init__(message)
        self.context = context or {}


class ExchangeError(TradingError):
    """Error related to exchange connectivity or API."""

    def __init__(
        self,
        message: str,
        exchange: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with message and exchange name.

        Args:
            message: Human-readable error description
            exchange: Name of the exchange client (e.g., "mock", "http")
            context: Additional structured data
        """
        super().__init__(message, context)
        self.exchange = exchange


class ExchangeConnectionError(ExchangeError):
    """Exchange endpoint is unreachable.

    Raised when:
    - The endpoint address is empty or unknown
    - The transport cannot reach the endpoint
    - The endpoint answers the status probe with an error
    """

    def __init__(
        self,
        message: str,
        url: str | None = None,
        exchange: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with the endpoint that failed.

        Args:
            message: Human-readable error description
            url: The endpoint address
            exchange: Name of the exchange client
            context: Additional structured data
        """
        super().__init__(message, exchange, context)
        self.url = url


class FetchError(ExchangeError):
    """Offer retrieval failed.

    Raised on transport or protocol issues while listing offers,
    including malformed offer payloads.
    """


class TradeError(TradingError):
    """Trade was rejected.

    Raised when:
    - The offer id is unknown to the exchange
    - The market rejects the request
    - The exchange reports a fill that cannot be right
    """

    def __init__(
        self,
        message: str,
        offer_id: int | None = None,
        reason: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with offer id and rejection reason.

        Args:
            message: Human-readable error description
            offer_id: The offer the trade targeted
            reason: Exchange-specific rejection reason
            context: Additional structured data
        """
        super().__init__(message, context)
        self.offer_id = offer_id
        self.reason = reason


class ConfigurationError(TradingError):
    """Invalid configuration."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        context: dict[str, Any] | None = None,
    ) -> None:
        """Initialize with field information.

        Args:
            message: Human-readable error description
            field: Name of the configuration field with the issue
            context: Additional structured data
        """
        super().__init__(message, context)
        self.field = field
