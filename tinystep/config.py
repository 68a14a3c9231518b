"""Client configuration."""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_TIMEOUT, ENV_CA_BUNDLE, ENV_CA_URL, ENV_TIMEOUT, USER_AGENT
from .core.exceptions import ConfigurationError


@dataclass(frozen=True)
class ClientConfig:
    """Where and how to reach a certificate authority.

    Attributes:
        base_url: Authority URL, e.g. ``https://ca.internal:9000``. A trailing
            slash is stripped.
        ca_bundle: PEM file of the authority's root certificate, trusted for
            TLS. ``None`` uses the system trust store.
        timeout: Total timeout per request, in seconds
        user_agent: ``User-Agent`` header sent with every request
    """

    base_url: str
    ca_bundle: Path | None = None
    timeout: float = DEFAULT_TIMEOUT
    user_agent: str = USER_AGENT

    def __post_init__(self) -> None:
        """Validate and normalise configuration."""
        if not self.base_url:
            raise ConfigurationError("base_url must be a non-empty URL")
        if not self.base_url.startswith(("http://", "https://")):
            raise ConfigurationError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.timeout <= 0:
            raise ConfigurationError(f"timeout must be positive, got {self.timeout}")
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.ca_bundle is not None:
            object.__setattr__(self, "ca_bundle", Path(self.ca_bundle))

    @property
    def headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent}

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ClientConfig:
        """Build configuration from ``TINYSTEP_*`` environment variables.

        Raises:
            ConfigurationError: If ``TINYSTEP_CA_URL`` is unset or a value is
                malformed.
        """
        env = os.environ if environ is None else environ
        base_url = env.get(ENV_CA_URL)
        if not base_url:
            raise ConfigurationError(f"{ENV_CA_URL} is not set")

        ca_bundle = env.get(ENV_CA_BUNDLE) or None
        raw_timeout = env.get(ENV_TIMEOUT)
        try:
            timeout = float(raw_timeout) if raw_timeout else DEFAULT_TIMEOUT
        except ValueError:
            raise ConfigurationError(f"{ENV_TIMEOUT} must be a number, got {raw_timeout!r}") from None

        return cls(
            base_url=base_url,
            ca_bundle=Path(ca_bundle) if ca_bundle else None,
            timeout=timeout,
        )
