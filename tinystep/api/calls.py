"""Public call functions for the authority endpoints.

Each function takes a ``TinystepClient`` and runs one endpoint through the
client's runner. Every blocking function has an ``_async`` twin that runs
on the caller's event loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from ..constants import DEFAULT_HOSTED_AUTHORITY, HOSTED_API_URL
from ..models import (
    HealthResponse,
    HostedAuthorityResponse,
    Provisioner,
    ProvisionersPage,
    RootResponse,
    VersionResponse,
)
from ..runtime.pagination import AsyncPaginator, Paginator
from ..runtime.rest import RestRunner, RESTTransport, SyncRestRunner, SyncRESTTransport
from .endpoints import health as health_endpoint
from .endpoints import hosted as hosted_endpoint
from .endpoints import provisioners as provisioners_endpoint
from .endpoints import root as root_endpoint
from .endpoints import version as version_endpoint

if TYPE_CHECKING:
    from ..client import TinystepClient

_PROVISIONERS_ADAPTER = provisioners_endpoint.Adapter()


def health(client: TinystepClient) -> HealthResponse:
    """``GET /health``."""
    return client.run(spec=health_endpoint.SPEC, adapter=health_endpoint.Adapter)


async def health_async(client: TinystepClient) -> HealthResponse:
    return await client.run_async(spec=health_endpoint.SPEC, adapter=health_endpoint.Adapter)


def version(client: TinystepClient) -> VersionResponse:
    """``GET /version``."""
    return client.run(spec=version_endpoint.SPEC, adapter=version_endpoint.Adapter)


async def version_async(client: TinystepClient) -> VersionResponse:
    return await client.run_async(spec=version_endpoint.SPEC, adapter=version_endpoint.Adapter)


def provisioners_raw(client: TinystepClient, cursor: Optional[str] = None) -> ProvisionersPage:
    """Fetch one page of ``/provisioners``.

    Args:
        client: Configured client
        cursor: ``next_cursor`` of the previous page; ``None`` or ``""``
            for the first page

    Raises:
        ProviderError: If the request fails
        DecodeError: If the page or any provisioner on it is malformed
    """
    return client.run(
        spec=provisioners_endpoint.SPEC,
        adapter=_PROVISIONERS_ADAPTER,
        params={"cursor": cursor},
    )


async def provisioners_raw_async(
    client: TinystepClient, cursor: Optional[str] = None
) -> ProvisionersPage:
    return await client.run_async(
        spec=provisioners_endpoint.SPEC,
        adapter=_PROVISIONERS_ADAPTER,
        params={"cursor": cursor},
    )


class ProvisionersFetcher:
    """Page fetcher for ``/provisioners`` bound to a client."""

    def __init__(self, client: TinystepClient) -> None:
        self._client = client

    def __call__(self, cursor: Optional[str]) -> ProvisionersPage:
        return provisioners_raw(self._client, cursor)


class AsyncProvisionersFetcher:
    """Async page fetcher for ``/provisioners`` bound to a client."""

    def __init__(self, client: TinystepClient) -> None:
        self._client = client

    async def __call__(self, cursor: Optional[str]) -> ProvisionersPage:
        return await provisioners_raw_async(self._client, cursor)


def provisioners(client: TinystepClient) -> Paginator[Provisioner]:
    """Iterate every provisioner, fetching pages lazily.

    Example:
        >>> for provisioner in provisioners(client):  # doctest: +SKIP
        ...     print(provisioner.type, provisioner.name)
    """
    return Paginator(ProvisionersFetcher(client), endpoint_id=provisioners_endpoint.SPEC.id)


def provisioners_async(client: TinystepClient) -> AsyncPaginator[Provisioner]:
    """Async form of :func:`provisioners`. Call ``aclose()`` to stop early."""
    return AsyncPaginator(
        AsyncProvisionersFetcher(client), endpoint_id=provisioners_endpoint.SPEC.id
    )


def for_fingerprint(client: TinystepClient, fingerprint: str) -> RootResponse:
    """``GET /root/{fingerprint}``. The returned PEM is not verified."""
    return client.run(
        spec=root_endpoint.SPEC,
        adapter=root_endpoint.Adapter,
        params={"fingerprint": fingerprint},
    )


async def for_fingerprint_async(client: TinystepClient, fingerprint: str) -> RootResponse:
    return await client.run_async(
        spec=root_endpoint.SPEC,
        adapter=root_endpoint.Adapter,
        params={"fingerprint": fingerprint},
    )


def hosted_authority(
    team: str,
    authority: str = DEFAULT_HOSTED_AUTHORITY,
    *,
    transport: SyncRESTTransport | None = None,
) -> HostedAuthorityResponse:
    """Look up the URL and root fingerprint of a hosted authority.

    Args:
        team: Team slug
        authority: Authority name within the team
        transport: Transport to use; a short-lived one is created if omitted
    """
    owned = transport is None
    t = transport or SyncRESTTransport(HOSTED_API_URL)
    try:
        return SyncRestRunner(t).run(
            spec=hosted_endpoint.SPEC,
            adapter=hosted_endpoint.Adapter,
            params={"team": team, "authority": authority},
        )
    finally:
        if owned:
            t.close()


async def hosted_authority_async(
    team: str,
    authority: str = DEFAULT_HOSTED_AUTHORITY,
    *,
    transport: RESTTransport | None = None,
) -> HostedAuthorityResponse:
    owned = transport is None
    t = transport or RESTTransport(HOSTED_API_URL)
    try:
        return await RestRunner(t).run(
            spec=hosted_endpoint.SPEC,
            adapter=hosted_endpoint.Adapter,
            params={"team": team, "authority": authority},
        )
    finally:
        if owned:
            await t.close()
