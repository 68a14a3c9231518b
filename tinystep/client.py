"""Client for a smallstep certificate authority.

``TinystepClient`` binds a ``ClientConfig`` to a blocking transport and an
async transport over the same base URL. The endpoint functions in
``tinystep.api`` run through it, and the raw ``get``/``post``/``put``/
``delete`` methods reach any other path on the authority.

Both transports open their connections lazily, so an async-only caller
never creates a ``requests`` session and vice versa.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from . import api
from .config import ClientConfig
from .constants import DEFAULT_HOSTED_AUTHORITY
from .models import HealthResponse, Provisioner, RootResponse, VersionResponse
from .runtime.pagination import AsyncPaginator, Paginator
from .runtime.rest import (
    ResponseAdapter,
    RestEndpointSpec,
    RestRunner,
    RESTTransport,
    SyncRestRunner,
    SyncRESTTransport,
)

logger = logging.getLogger(__name__)


class TinystepClient:
    """Typed client for one certificate authority.

    Example:
        >>> with TinystepClient.from_ca_file("https://ca.internal:9000", "root_ca.crt") as ca:  # doctest: +SKIP
        ...     for provisioner in ca.provisioners():
        ...         print(provisioner.name)
    """

    def __init__(
        self,
        config: ClientConfig,
        *,
        transport: SyncRESTTransport | None = None,
        async_transport: RESTTransport | None = None,
    ) -> None:
        """Initialize client.

        Args:
            config: Authority URL, trust and timeout settings
            transport: Blocking transport; built from ``config`` if omitted
            async_transport: Async transport; built from ``config`` if omitted
        """
        self._config = config
        self._transport = transport or SyncRESTTransport(
            config.base_url,
            timeout=config.timeout,
            ca_bundle=config.ca_bundle,
            headers=config.headers,
        )
        self._async_transport = async_transport or RESTTransport(
            config.base_url,
            timeout=config.timeout,
            ca_bundle=config.ca_bundle,
            headers=config.headers,
        )
        self._runner = SyncRestRunner(self._transport)
        self._async_runner = RestRunner(self._async_transport)
        self._remote_version: VersionResponse | None = None

    @classmethod
    def from_ca_file(
        cls, base_url: str, ca_file: str | Path, *, timeout: float | None = None
    ) -> TinystepClient:
        """Create a client trusting ``ca_file`` and fetch the remote version.

        Raises:
            ConfigurationError: If ``base_url`` or ``timeout`` is invalid
            ProviderError: If ``/version`` cannot be reached
        """
        kwargs: dict[str, Any] = {"base_url": base_url, "ca_bundle": Path(ca_file)}
        if timeout is not None:
            kwargs["timeout"] = timeout
        client = cls(ClientConfig(**kwargs))
        client.refresh_version()
        return client

    @classmethod
    def from_hosted(
        cls,
        team: str,
        authority: str = DEFAULT_HOSTED_AUTHORITY,
        *,
        ca_bundle: str | Path | None = None,
    ) -> TinystepClient:
        """Create a client for a smallstep hosted authority.

        The authority URL is looked up on the hosted API. ``ca_bundle`` is
        the root certificate to trust; the fingerprint returned by the
        lookup is logged but not checked against it.
        """
        hosted = api.hosted_authority(team, authority)
        logger.debug(
            "hosted_authority_resolved",
            extra={
                "team": team,
                "authority": authority,
                "url": hosted.url,
                "fingerprint": hosted.fingerprint,
            },
        )
        config = ClientConfig(
            base_url=hosted.url,
            ca_bundle=Path(ca_bundle) if ca_bundle is not None else None,
        )
        client = cls(config)
        client.refresh_version()
        return client

    @property
    def config(self) -> ClientConfig:
        return self._config

    @property
    def base_url(self) -> str:
        return self._config.base_url

    @property
    def ca_bundle(self) -> Path | None:
        return self._config.ca_bundle

    @property
    def remote_version(self) -> VersionResponse | None:
        """Last ``/version`` response, if one was fetched."""
        return self._remote_version

    def construct_url(self, path: str) -> str:
        """Join ``path`` onto the base URL.

        Examples:
            >>> TinystepClient(ClientConfig("https://ca.internal/")).construct_url("health")
            'https://ca.internal/health'
        """
        if not path.startswith("/"):
            path = "/" + path
        return f"{self._config.base_url}{path}"

    def refresh_version(self) -> VersionResponse:
        self._remote_version = api.version(self)
        return self._remote_version

    async def refresh_version_async(self) -> VersionResponse:
        self._remote_version = await api.version_async(self)
        return self._remote_version

    # --- endpoint runners ---------------------------------------------------

    def run(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return self._runner.run(spec=spec, adapter=adapter, params=params or {})

    async def run_async(
        self,
        *,
        spec: RestEndpointSpec,
        adapter: ResponseAdapter,
        params: dict[str, Any] | None = None,
    ) -> Any:
        return await self._async_runner.run(spec=spec, adapter=adapter, params=params or {})

    # --- convenience --------------------------------------------------------

    def health(self) -> HealthResponse:
        return api.health(self)

    def version(self) -> VersionResponse:
        return api.version(self)

    def provisioners(self) -> Paginator[Provisioner]:
        return api.provisioners(self)

    def provisioners_async(self) -> AsyncPaginator[Provisioner]:
        return api.provisioners_async(self)

    def for_fingerprint(self, fingerprint: str) -> RootResponse:
        return api.for_fingerprint(self, fingerprint)

    # --- raw requests -------------------------------------------------------

    def get(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return self._transport.get(path, params=params)

    def post(self, path: str, json_body: Any | None = None) -> Any:
        return self._transport.post(path, json_body=json_body)

    def put(self, path: str, json_body: Any | None = None) -> Any:
        return self._transport.put(path, json_body=json_body)

    def delete(self, path: str) -> Any:
        return self._transport.delete(path)

    async def get_async(self, path: str, params: dict[str, Any] | None = None) -> Any:
        return await self._async_transport.get(path, params=params)

    async def post_async(self, path: str, json_body: Any | None = None) -> Any:
        return await self._async_transport.post(path, json_body=json_body)

    async def put_async(self, path: str, json_body: Any | None = None) -> Any:
        return await self._async_transport.put(path, json_body=json_body)

    async def delete_async(self, path: str) -> Any:
        return await self._async_transport.delete(path)

    # --- lifecycle ----------------------------------------------------------

    def close(self) -> None:
        self._transport.close()

    async def aclose(self) -> None:
        await self._async_transport.close()

    def __enter__(self) -> TinystepClient:
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    async def __aenter__(self) -> TinystepClient:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
