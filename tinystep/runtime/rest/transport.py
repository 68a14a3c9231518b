"""REST transports: path-level request methods over an HTTP client."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from .http_client import HTTPClient, SyncHTTPClient


class RESTTransport:
    """Async transport bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        ca_bundle: Path | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = HTTPClient(
            base_url=base_url, timeout=timeout, ca_bundle=ca_bundle, headers=headers
        )

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    async def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.get(path, params=params, headers=headers)

    async def post(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.post(path, json=json_body, headers=headers)

    async def put(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.put(path, json=json_body, headers=headers)

    async def delete(self, path: str, headers: dict[str, str] | None = None) -> Any:
        return await self._http.delete(path, headers=headers)

    async def close(self) -> None:
        await self._http.close()


class SyncRESTTransport:
    """Blocking transport bound to one base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = 30.0,
        ca_bundle: Path | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self._http = SyncHTTPClient(
            base_url=base_url, timeout=timeout, ca_bundle=ca_bundle, headers=headers
        )

    @property
    def base_url(self) -> str | None:
        return self._http.base_url

    def get(
        self,
        path: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return self._http.get(path, params=params, headers=headers)

    def post(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return self._http.post(path, json=json_body, headers=headers)

    def put(
        self,
        path: str,
        json_body: Any | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return self._http.put(path, json=json_body, headers=headers)

    def delete(self, path: str, headers: dict[str, str] | None = None) -> Any:
        return self._http.delete(path, headers=headers)

    def close(self) -> None:
        self._http.close()
