"""Plain response models for the non-paginated endpoints."""

from pydantic import BaseModel, ConfigDict, Field


class HealthResponse(BaseModel):
    """``GET /health``. A responding server always reports ``"ok"``."""

    status: str

    model_config = ConfigDict(frozen=True)

    @property
    def is_ok(self) -> bool:
        return self.status == "ok"


class VersionResponse(BaseModel):
    """``GET /version``."""

    version: str
    require_client_authentication: bool = Field(..., alias="requireClientAuthentication")

    model_config = ConfigDict(frozen=True, populate_by_name=True)


class RootResponse(BaseModel):
    """``GET /root/{fingerprint}``: the PEM encoded root certificate."""

    ca: str

    model_config = ConfigDict(frozen=True)


class HostedAuthorityResponse(BaseModel):
    """Hosted authority lookup on the smallstep hosted API."""

    fingerprint: str
    url: str

    model_config = ConfigDict(frozen=True)
