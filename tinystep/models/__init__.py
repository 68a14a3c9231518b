"""Response models for a smallstep certificate authority.

Architecture:
    This module exports all Pydantic v2 models used throughout the library.
    All models are immutable (frozen=True) so decoded pages can be shared
    without copying.

Model Categories:
    - Provisioners: the nine tagged provisioner shapes and their nested
      claims, options and raw JWK
    - Pages: ProvisionersPage
    - Responses: HealthResponse, VersionResponse, RootResponse,
      HostedAuthorityResponse
"""

from .claims import JoseRawWebKey, ProvisionerClaims, ProvisionerInnerOptions, ProvisionerOptions
from .decoder import decode_provisioner, decode_provisioner_list
from .page import ProvisionersPage
from .provisioner import (
    PROVISIONER_MODELS,
    ACMEProvisioner,
    AWSProvisioner,
    AzureProvisioner,
    GCPProvisioner,
    JWKProvisioner,
    K8sSAProvisioner,
    OIDCProvisioner,
    Provisioner,
    SSHPOPProvisioner,
    X5CProvisioner,
)
from .responses import HealthResponse, HostedAuthorityResponse, RootResponse, VersionResponse

__all__ = [
    "ACMEProvisioner",
    "AWSProvisioner",
    "AzureProvisioner",
    "GCPProvisioner",
    "HealthResponse",
    "HostedAuthorityResponse",
    "JWKProvisioner",
    "JoseRawWebKey",
    "K8sSAProvisioner",
    "OIDCProvisioner",
    "PROVISIONER_MODELS",
    "Provisioner",
    "ProvisionerClaims",
    "ProvisionerInnerOptions",
    "ProvisionerOptions",
    "ProvisionersPage",
    "RootResponse",
    "SSHPOPProvisioner",
    "VersionResponse",
    "X5CProvisioner",
    "decode_provisioner",
    "decode_provisioner_list",
]
