"""Version endpoint definition and adapter."""

from __future__ import annotations

from ...models import VersionResponse
from ...runtime.rest import ModelAdapter, RestEndpointSpec

# Endpoint specification
SPEC = RestEndpointSpec(
    id="version",
    method="GET",
    build_path=lambda _: "/version",
)

Adapter = ModelAdapter(VersionResponse)
