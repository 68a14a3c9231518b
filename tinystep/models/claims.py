"""Nested provisioner configuration models: claims, options and raw JWKs."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..core.duration import OptionalGoDuration


class ProvisionerClaims(BaseModel):
    """Per-provisioner overrides of certificate lifetimes and features.

    Every duration is optional and degrades to ``None`` when the server sends
    a value that does not parse.
    """

    min_tls_cert_duration: OptionalGoDuration = Field(None, alias="minTLSCertDuration")
    max_tls_cert_duration: OptionalGoDuration = Field(None, alias="maxTLSCertDuration")
    default_tls_cert_duration: OptionalGoDuration = Field(None, alias="defaultTLSCertDuration")
    # Absent means renewals are allowed
    disable_renewal: Optional[bool] = Field(None, alias="disableRenewal")
    min_user_ssh_cert_duration: OptionalGoDuration = Field(None, alias="minUserSSHCertDuration")
    max_user_ssh_cert_duration: OptionalGoDuration = Field(None, alias="maxUserSSHCertDuration")
    default_user_ssh_cert_duration: OptionalGoDuration = Field(
        None, alias="defaultUserSSHCertDuration"
    )
    min_host_ssh_cert_duration: OptionalGoDuration = Field(None, alias="minHostSSHCertDuration")
    max_host_ssh_cert_duration: OptionalGoDuration = Field(None, alias="maxHostSSHCertDuration")
    default_host_ssh_cert_duration: OptionalGoDuration = Field(
        None, alias="defaultHostSSHCertDuration"
    )
    enable_ssh_ca: Optional[bool] = Field(None, alias="enableSSHCA")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProvisionerInnerOptions(BaseModel):
    """Template settings for one certificate kind."""

    template: Optional[str] = None
    template_file: Optional[str] = Field(None, alias="templateFile")
    template_data: Optional[Any] = Field(None, alias="templateData")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class ProvisionerOptions(BaseModel):
    """Certificate creation options, split by certificate kind."""

    ssh: Optional[ProvisionerInnerOptions] = None
    x509: Optional[ProvisionerInnerOptions] = None

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class JoseRawWebKey(BaseModel):
    """Raw JSON Web Key members (RFC 7517) as sent by the server.

    Values are not interpreted; hand them to a JOSE library before use.
    """

    use: Optional[str] = None
    kty: Optional[str] = None
    kid: Optional[str] = None
    crv: Optional[str] = None
    alg: Optional[str] = None
    k: Optional[str] = None
    x: Optional[str] = None
    y: Optional[str] = None
    n: Optional[str] = None
    e: Optional[str] = None
    d: Optional[str] = None
    p: Optional[str] = None
    q: Optional[str] = None
    dp: Optional[str] = None
    dq: Optional[str] = None
    qi: Optional[str] = None
    x5c: Optional[list[str]] = None
    x5u: Optional[str] = None
    x5t: Optional[str] = None
    x5t_sha256: Optional[str] = Field(None, alias="x5t#S256")

    model_config = ConfigDict(frozen=True, populate_by_name=True)
