"""Root certificate endpoint definition and adapter.

Returns the PEM root certificate whose SHA-256 fingerprint is given. The
certificate is returned as-is; it is not checked against the fingerprint.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ...models import RootResponse
from ...runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the ``/root/{fingerprint}`` path."""
    return f"/root/{quote(params['fingerprint'], safe='')}"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="root",
    method="GET",
    build_path=build_path,
)

Adapter = ModelAdapter(RootResponse)
