"""tinystep - typed client for a smallstep certificate authority."""

from . import api
from .client import TinystepClient
from .config import ClientConfig
from .constants import VERSION
from .core import (
    ConfigurationError,
    DecodeError,
    Duration,
    DurationError,
    DurationOverflow,
    InvalidDurationLiteral,
    MissingOrNonStringTag,
    NotAnArray,
    NotAnObject,
    ProviderError,
    ProvisionerType,
    TinystepError,
    UnknownVariantTag,
    VariantShapeError,
    parse_duration,
    parse_optional_duration,
)
from .models import (
    ACMEProvisioner,
    AWSProvisioner,
    AzureProvisioner,
    GCPProvisioner,
    HealthResponse,
    HostedAuthorityResponse,
    JWKProvisioner,
    K8sSAProvisioner,
    OIDCProvisioner,
    Provisioner,
    ProvisionersPage,
    RootResponse,
    SSHPOPProvisioner,
    VersionResponse,
    X5CProvisioner,
    decode_provisioner_list,
)
from .runtime import AsyncPaginator, Paginator

__version__ = VERSION

__all__ = [
    "ACMEProvisioner",
    "AWSProvisioner",
    "AsyncPaginator",
    "AzureProvisioner",
    "ClientConfig",
    "ConfigurationError",
    "DecodeError",
    "Duration",
    "DurationError",
    "DurationOverflow",
    "GCPProvisioner",
    "HealthResponse",
    "HostedAuthorityResponse",
    "InvalidDurationLiteral",
    "JWKProvisioner",
    "K8sSAProvisioner",
    "MissingOrNonStringTag",
    "NotAnArray",
    "NotAnObject",
    "OIDCProvisioner",
    "Paginator",
    "ProviderError",
    "Provisioner",
    "ProvisionerType",
    "ProvisionersPage",
    "RootResponse",
    "SSHPOPProvisioner",
    "TinystepClient",
    "TinystepError",
    "UnknownVariantTag",
    "VariantShapeError",
    "VersionResponse",
    "X5CProvisioner",
    "__version__",
    "api",
    "decode_provisioner_list",
    "parse_duration",
    "parse_optional_duration",
]
