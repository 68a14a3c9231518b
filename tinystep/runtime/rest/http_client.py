"""HTTP client helpers.

``HTTPClient`` wraps an ``aiohttp.ClientSession`` for the async API and
``SyncHTTPClient`` wraps a ``requests.Session`` for the blocking API. Both
resolve relative URLs against ``base_url``, trust the configured CA bundle,
decode JSON bodies, and turn HTTP and connection failures into
``ProviderError``. Neither retries.
"""

from __future__ import annotations

import logging
import ssl
from pathlib import Path
from typing import Any, Dict, Optional

import aiohttp
import requests

from ...core.exceptions import DecodeError, ProviderError

logger = logging.getLogger(__name__)


def _resolve_url(base_url: Optional[str], url: str) -> str:
    # If base_url is set and url is relative, combine them
    if base_url and not url.startswith("http"):
        return f"{base_url}{url}"
    return url


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        ca_bundle: Optional[Path] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self.ca_bundle = ca_bundle
        self.headers = dict(headers or {})
        self._ssl_context: Optional[ssl.SSLContext] = None
        self._session: Optional[aiohttp.ClientSession] = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout, headers=self.headers)
        return self._session

    @property
    def ssl_context(self) -> Optional[ssl.SSLContext]:
        """SSL context trusting ``ca_bundle``, or None for system defaults."""
        if self.ca_bundle is not None and self._ssl_context is None:
            self._ssl_context = ssl.create_default_context(cafile=str(self.ca_bundle))
        return self._ssl_context

    async def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body."""
        url = _resolve_url(self.base_url, url)
        kwargs: Dict[str, Any] = {"params": params, "json": json, "headers": headers}
        if self.ssl_context is not None:
            kwargs["ssl"] = self.ssl_context

        logger.debug("http_request", extra={"method": method, "url": url})
        try:
            async with self.session.request(method, url, **kwargs) as response:
                if response.status >= 400:
                    body = await response.text()
                    raise ProviderError(
                        f"{method} {url} failed with status {response.status}: {body}",
                        status_code=response.status,
                    )
                try:
                    return await response.json(content_type=None)
                except ValueError as exc:
                    raise DecodeError(f"{method} {url} returned invalid JSON: {exc}") from exc
        except aiohttp.ClientError as exc:
            raise ProviderError(f"{method} {url} failed: {exc}") from exc

    async def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST request."""
        return await self.request("POST", url, json=json, headers=headers)

    async def put(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """PUT request."""
        return await self.request("PUT", url, json=json, headers=headers)

    async def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, headers=headers)

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> "HTTPClient":
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


class SyncHTTPClient:
    """Blocking HTTP client wrapper."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: float = 30.0,
        ca_bundle: Optional[Path] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> None:
        self.base_url = base_url
        self.timeout = timeout
        self.ca_bundle = ca_bundle
        self.headers = dict(headers or {})
        self._session: Optional[requests.Session] = None

    @property
    def session(self) -> requests.Session:
        """Get or create session."""
        if self._session is None:
            self._session = requests.Session()
            self._session.headers.update(self.headers)
            if self.ca_bundle is not None:
                self._session.verify = str(self.ca_bundle)
        return self._session

    def request(
        self,
        method: str,
        url: str,
        *,
        params: Optional[Dict[str, Any]] = None,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """Send a request and return the decoded JSON body."""
        url = _resolve_url(self.base_url, url)
        logger.debug("http_request", extra={"method": method, "url": url})
        try:
            response = self.session.request(
                method, url, params=params, json=json, headers=headers, timeout=self.timeout
            )
        except requests.RequestException as exc:
            raise ProviderError(f"{method} {url} failed: {exc}") from exc

        if response.status_code >= 400:
            raise ProviderError(
                f"{method} {url} failed with status {response.status_code}: {response.text}",
                status_code=response.status_code,
            )
        try:
            return response.json()
        except ValueError as exc:
            raise DecodeError(f"{method} {url} returned invalid JSON: {exc}") from exc

    def get(
        self,
        url: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """GET request."""
        return self.request("GET", url, params=params, headers=headers)

    def post(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """POST request."""
        return self.request("POST", url, json=json, headers=headers)

    def put(
        self,
        url: str,
        json: Optional[Any] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> Any:
        """PUT request."""
        return self.request("PUT", url, json=json, headers=headers)

    def delete(self, url: str, headers: Optional[Dict[str, str]] = None) -> Any:
        """DELETE request."""
        return self.request("DELETE", url, headers=headers)

    def close(self) -> None:
        """Close session."""
        if self._session is not None:
            self._session.close()
            self._session = None

    def __enter__(self) -> "SyncHTTPClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
