"""Hosted authority lookup on the smallstep hosted API.

This endpoint lives on ``HOSTED_API_URL`` rather than on an authority, so
the path it builds is absolute.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ...constants import DEFAULT_HOSTED_AUTHORITY, HOSTED_API_URL
from ...models import HostedAuthorityResponse
from ...runtime.rest import ModelAdapter, RestEndpointSpec


def build_path(params: dict[str, Any]) -> str:
    """Build the absolute hosted-authority URL.

    Examples:
        >>> build_path({"team": "bluestone"})
        'https://api.smallstep.com/v1/teams/bluestone/authorities/ssh'
        >>> build_path({"team": "bluestone", "authority": "certs"})
        'https://api.smallstep.com/v1/teams/bluestone/authorities/certs'
    """
    team = quote(params["team"], safe="")
    authority = quote(params.get("authority") or DEFAULT_HOSTED_AUTHORITY, safe="")
    return f"{HOSTED_API_URL}/v1/teams/{team}/authorities/{authority}"


# Endpoint specification
SPEC = RestEndpointSpec(
    id="hosted_authority",
    method="GET",
    build_path=build_path,
)

Adapter = ModelAdapter(HostedAuthorityResponse)
