"""Health endpoint definition and adapter."""

from __future__ import annotations

from ...models import HealthResponse
from ...runtime.rest import ModelAdapter, RestEndpointSpec

# Endpoint specification
SPEC = RestEndpointSpec(
    id="health",
    method="GET",
    build_path=lambda _: "/health",
)

Adapter = ModelAdapter(HealthResponse)
