"""REST request runner using endpoint specs and response adapters."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ...core.exceptions import DecodeError
from .transport import RESTTransport, SyncRESTTransport

_METHODS = ("GET", "POST", "PUT", "DELETE")


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    method: str  # "GET" | "POST" | "PUT" | "DELETE"
    build_path: Callable[[dict[str, Any]], str]
    build_query: Callable[[dict[str, Any]], dict[str, Any]] | None = None
    build_body: Callable[[dict[str, Any]], Any] | None = None
    build_headers: Callable[[dict[str, Any]], dict[str, str]] | None = None

    def __post_init__(self) -> None:
        if self.method.upper() not in _METHODS:
            raise ValueError(f"Unsupported HTTP method for endpoint {self.id}: {self.method}")


class ResponseAdapter:
    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        return response


class ModelAdapter(ResponseAdapter):
    """Validate a response body against a pydantic model."""

    def __init__(self, model: type[BaseModel]) -> None:
        self.model = model

    def parse(self, response: Any, params: dict[str, Any]) -> Any:
        try:
            return self.model.model_validate(response)
        except PydanticValidationError as exc:
            raise DecodeError(f"invalid {self.model.__name__}: {exc}") from exc


@dataclass(frozen=True)
class _Request:
    method: str
    path: str
    query: dict[str, Any] | None
    body: Any | None
    headers: dict[str, str] | None


def _build(spec: RestEndpointSpec, params: dict[str, Any]) -> _Request:
    return _Request(
        method=spec.method.upper(),
        path=spec.build_path(params),
        query=spec.build_query(params) if spec.build_query else None,
        body=spec.build_body(params) if spec.build_body else None,
        headers=spec.build_headers(params) if spec.build_headers else None,
    )


class RestRunner:
    def __init__(self, transport: RESTTransport) -> None:
        self._t = transport

    async def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        req = _build(spec, params)

        if req.method == "GET":
            data = await self._t.get(req.path, params=req.query, headers=req.headers)
        elif req.method == "POST":
            data = await self._t.post(req.path, json_body=req.body, headers=req.headers)
        elif req.method == "PUT":
            data = await self._t.put(req.path, json_body=req.body, headers=req.headers)
        else:
            data = await self._t.delete(req.path, headers=req.headers)

        return adapter.parse(data, params)


class SyncRestRunner:
    def __init__(self, transport: SyncRESTTransport) -> None:
        self._t = transport

    def run(
        self, *, spec: RestEndpointSpec, adapter: ResponseAdapter, params: dict[str, Any]
    ) -> Any:
        req = _build(spec, params)

        if req.method == "GET":
            data = self._t.get(req.path, params=req.query, headers=req.headers)
        elif req.method == "POST":
            data = self._t.post(req.path, json_body=req.body, headers=req.headers)
        elif req.method == "PUT":
            data = self._t.put(req.path, json_body=req.body, headers=req.headers)
        else:
            data = self._t.delete(req.path, headers=req.headers)

        return adapter.parse(data, params)
