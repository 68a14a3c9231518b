"""Provisioner models, one per ``type`` discriminator.

Architecture:
    A provisioner list from ``/provisioners`` is polymorphic: every object
    carries a string ``type`` and a shape that depends on it. Each shape is a
    frozen model whose ``type`` field is pinned to its tag with ``Literal``,
    and ``PROVISIONER_MODELS`` maps every ``ProvisionerType`` to exactly one
    model. There is no catch-all model for unknown tags.

See Also:
    - decode_provisioner_list: Strict decoder built on PROVISIONER_MODELS
    - https://smallstep.com/docs/step-ca/configuration
"""

from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.duration import OptionalGoDuration
from ..core.enums import ProvisionerType
from .claims import JoseRawWebKey, ProvisionerClaims, ProvisionerOptions


class _ProvisionerBase(BaseModel):
    name: str
    claims: Optional[ProvisionerClaims] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    @property
    def provisioner_type(self) -> ProvisionerType:
        return ProvisionerType(self.type)  # type: ignore[attr-defined]


class JWKProvisioner(_ProvisionerBase):
    """Authenticates token requests signed with a JSON Web Key."""

    type: Literal["JWK"] = "JWK"
    key: JoseRawWebKey
    # JWE-encrypted private key, when the server stores one
    encrypted_key: Optional[str] = Field(None, alias="encryptedKey")


class OIDCProvisioner(_ProvisionerBase):
    """Authenticates users through an OAuth2/OpenID Connect identity provider.

    The client secret is not confidential for smallstep: the identity
    provider restricts where it may be used from.
    """

    type: Literal["OIDC"] = "OIDC"
    client_id: str = Field(..., alias="clientID")
    client_secret: str = Field(..., alias="clientSecret")
    configuration_endpoint: str = Field(..., alias="configurationEndpoint")
    # Only used by Azure AD
    tenant_id: Optional[str] = Field(None, alias="tenantID")
    admins: Optional[list[str]] = None
    domains: Optional[list[str]] = None
    groups: Optional[list[str]] = None
    # ":port" or "host:port"
    listen_address: Optional[str] = Field(None, alias="listenAddress")
    options: Optional[ProvisionerOptions] = None


class GCPProvisioner(_ProvisionerBase):
    """Authenticates Google Cloud instances by their instance identity token."""

    type: Literal["GCP"] = "GCP"
    service_accounts: list[str] = Field(default_factory=list, alias="serviceAccounts")
    project_ids: list[str] = Field(default_factory=list, alias="projectIDs")
    disable_custom_sans: bool = Field(False, alias="disableCustomSANs")
    disable_trust_on_first_use: bool = Field(False, alias="disableTrustOnFirstUse")
    instance_age: OptionalGoDuration = Field(None, alias="instanceAge")


class AWSProvisioner(_ProvisionerBase):
    """Authenticates EC2 instances by their instance identity document."""

    type: Literal["AWS"] = "AWS"
    # Empty means every account is allowed
    accounts: list[str] = Field(default_factory=list)
    disable_custom_sans: bool = Field(False, alias="disableCustomSANs")
    disable_trust_on_first_use: bool = Field(False, alias="disableTrustOnFirstUse")
    instance_age: OptionalGoDuration = Field(None, alias="instanceAge")


class AzureProvisioner(_ProvisionerBase):
    """Authenticates Azure virtual machines by their managed identity token."""

    type: Literal["Azure"] = "Azure"
    tenant_id: str = Field(..., alias="tenantId")
    resource_groups: list[str] = Field(default_factory=list, alias="resourceGroups")
    # Server default is https://management.azure.com/
    audience: Optional[str] = None
    disable_custom_sans: bool = Field(False, alias="disableCustomSANs")
    disable_trust_on_first_use: bool = Field(False, alias="disableTrustOnFirstUse")


class ACMEProvisioner(_ProvisionerBase):
    """Issues certificates over the ACME protocol."""

    type: Literal["ACME"] = "ACME"


class X5CProvisioner(_ProvisionerBase):
    """Authenticates tokens signed by a key with an X.509 certificate chain."""

    type: Literal["X5C"] = "X5C"
    # Base64 encoded root certificates
    roots: str


class K8sSAProvisioner(_ProvisionerBase):
    """Authenticates Kubernetes service account tokens."""

    type: Literal["K8sSA"] = "K8sSA"
    # Base64 encoded public keys
    public_keys: Optional[str] = Field(None, alias="publicKeys")


class SSHPOPProvisioner(_ProvisionerBase):
    """Authenticates with an existing SSH certificate (proof of possession)."""

    type: Literal["SSHPOP"] = "SSHPOP"


Provisioner = Annotated[
    Union[
        JWKProvisioner,
        OIDCProvisioner,
        GCPProvisioner,
        AWSProvisioner,
        AzureProvisioner,
        ACMEProvisioner,
        X5CProvisioner,
        K8sSAProvisioner,
        SSHPOPProvisioner,
    ],
    Field(discriminator="type"),
]

PROVISIONER_MODELS: dict[ProvisionerType, type[_ProvisionerBase]] = {
    ProvisionerType.JWK: JWKProvisioner,
    ProvisionerType.OIDC: OIDCProvisioner,
    ProvisionerType.GCP: GCPProvisioner,
    ProvisionerType.AWS: AWSProvisioner,
    ProvisionerType.AZURE: AzureProvisioner,
    ProvisionerType.ACME: ACMEProvisioner,
    ProvisionerType.X5C: X5CProvisioner,
    ProvisionerType.K8SSA: K8sSAProvisioner,
    ProvisionerType.SSHPOP: SSHPOPProvisioner,
}
