"""REST runtime abstractions."""

from .http_client import HTTPClient, SyncHTTPClient
from .runner import ModelAdapter, ResponseAdapter, RestEndpointSpec, RestRunner, SyncRestRunner
from .transport import RESTTransport, SyncRESTTransport

__all__ = [
    "HTTPClient",
    "SyncHTTPClient",
    "RESTTransport",
    "SyncRESTTransport",
    "RestRunner",
    "SyncRestRunner",
    "RestEndpointSpec",
    "ResponseAdapter",
    "ModelAdapter",
]
