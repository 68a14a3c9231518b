"""Provisioners endpoint definition and adapter.

``/provisioners`` is cursor paginated: every page carries a ``nextCursor``
that is passed back as the ``cursor`` query parameter, and an empty cursor
marks the last page.
"""

from __future__ import annotations

from typing import Any

from ...core.exceptions import DecodeError
from ...models import ProvisionersPage, decode_provisioner_list
from ...runtime.rest import ResponseAdapter, RestEndpointSpec
from ...utils.kinds import json_kind

ITEMS_FIELD = "provisioners"
CURSOR_FIELD = "nextCursor"


def build_query(params: dict[str, Any]) -> dict[str, Any]:
    """Only send ``cursor`` past the first page."""
    cursor = params.get("cursor")
    return {"cursor": cursor} if cursor else {}


# Endpoint specification
SPEC = RestEndpointSpec(
    id="provisioners",
    method="GET",
    build_path=lambda _: "/provisioners",
    build_query=build_query,
)


class Adapter(ResponseAdapter):
    """Adapter for parsing a provisioners page."""

    def parse(self, response: Any, params: dict[str, Any]) -> ProvisionersPage:
        """Parse a ``/provisioners`` response.

        Args:
            response: Raw JSON response
            params: Request parameters (unused)

        Returns:
            ProvisionersPage with decoded provisioners in server order

        Raises:
            DecodeError: If the page or any provisioner on it is malformed.
                The whole page is rejected.
        """
        if not isinstance(response, dict):
            raise DecodeError(
                f"invalid type: {json_kind(response)}, expected a provisioners page object"
            )

        provisioners = decode_provisioner_list(response.get(ITEMS_FIELD))

        if CURSOR_FIELD not in response:
            raise DecodeError(f"missing field `{CURSOR_FIELD}` in provisioners page")
        next_cursor = response[CURSOR_FIELD]
        if not isinstance(next_cursor, str):
            raise DecodeError(
                f"invalid type: {json_kind(next_cursor)}, expected a string `{CURSOR_FIELD}`"
            )

        return ProvisionersPage(provisioners=provisioners, next_cursor=next_cursor)
