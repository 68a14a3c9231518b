"""Public API: one call function per authority endpoint."""

from .calls import (
    AsyncProvisionersFetcher,
    ProvisionersFetcher,
    for_fingerprint,
    for_fingerprint_async,
    health,
    health_async,
    hosted_authority,
    hosted_authority_async,
    provisioners,
    provisioners_async,
    provisioners_raw,
    provisioners_raw_async,
    version,
    version_async,
)

__all__ = [
    "AsyncProvisionersFetcher",
    "ProvisionersFetcher",
    "for_fingerprint",
    "for_fingerprint_async",
    "health",
    "health_async",
    "hosted_authority",
    "hosted_authority_async",
    "provisioners",
    "provisioners_async",
    "provisioners_raw",
    "provisioners_raw_async",
    "version",
    "version_async",
]
