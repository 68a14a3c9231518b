"""Core enumerations.

Key Types:
    - ProvisionerType: The closed set of provisioner ``type`` discriminators
      a smallstep server can return.

See Also:
    - decode_provisioner_list: Dispatches on ProvisionerType
    - PROVISIONER_MODELS: Maps every ProvisionerType to its model
"""

from enum import Enum


class ProvisionerType(str, Enum):
    """Provisioner kinds, valued by their wire discriminator.

    Each member names one method of proving identity to the certificate
    authority. See https://smallstep.com/docs/step-ca/configuration
    """

    JWK = "JWK"
    OIDC = "OIDC"
    GCP = "GCP"
    AWS = "AWS"
    AZURE = "Azure"
    ACME = "ACME"
    X5C = "X5C"
    K8SSA = "K8sSA"
    SSHPOP = "SSHPOP"

    @classmethod
    def tags(cls) -> tuple[str, ...]:
        """Wire values of every member, in declaration order."""
        return tuple(member.value for member in cls)

    @classmethod
    def from_tag(cls, tag: str) -> "ProvisionerType":
        """Resolve a wire discriminator.

        Raises:
            ValueError: If ``tag`` is not a known discriminator. Matching is
                case-sensitive.
        """
        return cls(tag)
