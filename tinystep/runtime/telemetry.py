"""Structured logging for pagination.

This module provides telemetry hooks for paginated endpoints, emitting
structured logs with the page index, item counts and fetch latency.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_page_fetched(
    *,
    endpoint_id: str,
    page_index: int,
    items: int,
    has_next: bool,
    latency_ms: float | None = None,
) -> None:
    """Log a successfully fetched page.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page
        items: Number of items on the page
        has_next: Whether the page carries a cursor to a further page
        latency_ms: Fetch latency in milliseconds (optional)
    """
    logger.debug(
        "page_fetched",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "items": items,
            "has_next": has_next,
            "latency_ms": latency_ms,
        },
    )


def log_page_error(
    *,
    endpoint_id: str,
    page_index: int,
    error_type: str,
    error_message: str,
) -> None:
    """Log a failed page fetch. The paginator stops after this.

    Args:
        endpoint_id: Endpoint identifier
        page_index: Zero-based index of the page that failed
        error_type: Type of error (e.g., "ProviderError", "UnknownVariantTag")
        error_message: Error message
    """
    logger.error(
        "page_error",
        extra={
            "endpoint_id": endpoint_id,
            "page_index": page_index,
            "error_type": error_type,
            "error_message": error_message,
        },
    )


def log_pagination_complete(
    *,
    endpoint_id: str,
    pages_fetched: int,
    items_yielded: int,
) -> None:
    """Log the end of a fully consumed paginated sequence."""
    logger.debug(
        "pagination_complete",
        extra={
            "endpoint_id": endpoint_id,
            "pages_fetched": pages_fetched,
            "items_yielded": items_yielded,
        },
    )
