"""Unit tests for the provisioner list decoder."""

import pytest
from pydantic import ValidationError

from tinystep.core import (
    Duration,
    MissingOrNonStringTag,
    NotAnArray,
    NotAnObject,
    ProvisionerType,
    UnknownVariantTag,
    VariantShapeError,
)
from tinystep.models import (
    ACMEProvisioner,
    AWSProvisioner,
    AzureProvisioner,
    GCPProvisioner,
    JWKProvisioner,
    K8sSAProvisioner,
    OIDCProvisioner,
    SSHPOPProvisioner,
    X5CProvisioner,
    decode_provisioner,
    decode_provisioner_list,
)

JWK = {
    "type": "JWK",
    "name": "admin@example.com",
    "key": {
        "use": "sig",
        "kty": "EC",
        "kid": "nq9jN7cA8Ha-RGwmVs4AhBJ6YN3R9R_uK9Py2wlYT7Y",
        "crv": "P-256",
        "alg": "ES256",
        "x": "zyEbAlGYmVo6Cz8Z6mhuhJdMOlHMbHVwyfP6ShZaO2g",
        "y": "Hl9L-2M0EK5kx9X-6gQ7vKh-hlp9ovEYL5pQgB2Aeqs",
    },
    "encryptedKey": "eyJhbGciOiJQQkVTMi1IUzI1NitBMTI4S1ciLCJlbmMiOiJBMTI4R0NNIn0",
}

ALL_VARIANTS = [
    JWK,
    {
        "type": "OIDC",
        "name": "Google",
        "clientID": "1087160488420.apps.googleusercontent.com",
        "clientSecret": "udTrOT3gzrO7W9fDPgZQLfYJ",
        "configurationEndpoint": "https://accounts.google.com/.well-known/openid-configuration",
        "domains": ["example.com"],
        "listenAddress": ":10000",
    },
    {"type": "GCP", "name": "Google Cloud", "projectIDs": ["project-a"]},
    {"type": "AWS", "name": "Amazon", "accounts": ["123456789"], "instanceAge": "1h"},
    {"type": "Azure", "name": "Azure", "tenantId": "b17c217c-84db-43f0-babd-e06a71083cda"},
    {"type": "ACME", "name": "acme"},
    {"type": "X5C", "name": "x5c", "roots": "LS0tLS1CRUdJTi..."},
    {"type": "K8sSA", "name": "kubernetes", "publicKeys": "LS0tLS1CRUdJTi..."},
    {"type": "SSHPOP", "name": "sshpop"},
]


class TestDecodeProvisionerList:
    """Test decoding well-formed lists."""

    def test_every_variant_in_order(self):
        result = decode_provisioner_list(ALL_VARIANTS)

        assert [type(p) for p in result] == [
            JWKProvisioner,
            OIDCProvisioner,
            GCPProvisioner,
            AWSProvisioner,
            AzureProvisioner,
            ACMEProvisioner,
            X5CProvisioner,
            K8sSAProvisioner,
            SSHPOPProvisioner,
        ]
        assert [p.provisioner_type for p in result] == list(ProvisionerType)

    def test_empty_list(self):
        assert decode_provisioner_list([]) == []

    def test_jwk_fields(self):
        jwk = decode_provisioner(JWK)
        assert jwk.name == "admin@example.com"
        assert jwk.key.crv == "P-256"
        assert jwk.encrypted_key.startswith("eyJ")

    def test_jwk_thumbprint_alias(self):
        element = dict(JWK, key={"kty": "EC", "x5t#S256": "thumb"})
        assert decode_provisioner(element).key.x5t_sha256 == "thumb"

    def test_cloud_defaults(self):
        gcp = decode_provisioner({"type": "GCP", "name": "gcp"})
        assert gcp.service_accounts == []
        assert gcp.disable_custom_sans is False
        assert gcp.disable_trust_on_first_use is False
        assert gcp.instance_age is None

    def test_instance_age_is_parsed(self):
        aws = decode_provisioner(ALL_VARIANTS[3])
        assert aws.instance_age == Duration.of(hours=1)

    def test_claims_durations_degrade_to_none(self):
        element = {
            "type": "ACME",
            "name": "acme",
            "claims": {
                "minTLSCertDuration": "5m",
                "maxTLSCertDuration": "bogus",
                "disableRenewal": True,
            },
        }
        claims = decode_provisioner(element).claims
        assert claims.min_tls_cert_duration == Duration.of(minutes=5)
        assert claims.max_tls_cert_duration is None
        assert claims.default_tls_cert_duration is None
        assert claims.disable_renewal is True

    def test_unknown_fields_are_ignored(self):
        acme = decode_provisioner({"type": "ACME", "name": "acme", "forceCN": True})
        assert acme.name == "acme"


class TestDecodeProvisionerListErrors:
    """Test the ordered rejection rules."""

    @pytest.mark.parametrize(
        "value,kind",
        [({}, "object"), ("[]", "string"), (None, "null"), (3, "integer")],
    )
    def test_not_an_array(self, value, kind):
        with pytest.raises(NotAnArray) as exc_info:
            decode_provisioner_list(value)
        assert exc_info.value.found == kind

    def test_element_not_an_object(self):
        with pytest.raises(NotAnObject) as exc_info:
            decode_provisioner_list([JWK, 5])
        assert exc_info.value.index == 1
        assert exc_info.value.found == "integer"

    def test_missing_tag(self):
        with pytest.raises(MissingOrNonStringTag) as exc_info:
            decode_provisioner_list([{"name": "anonymous"}])
        assert exc_info.value.found == "missing"

    @pytest.mark.parametrize("tag,kind", [(7, "integer"), (None, "null"), (["JWK"], "array")])
    def test_non_string_tag(self, tag, kind):
        with pytest.raises(MissingOrNonStringTag) as exc_info:
            decode_provisioner_list([{"type": tag, "name": "x"}])
        assert exc_info.value.found == kind

    def test_unknown_tag(self):
        with pytest.raises(UnknownVariantTag) as exc_info:
            decode_provisioner_list([JWK, {"type": "SCEP", "name": "scep"}])
        assert exc_info.value.tag == "SCEP"
        assert exc_info.value.expected == ProvisionerType.tags()

    def test_tags_are_case_sensitive(self):
        with pytest.raises(UnknownVariantTag):
            decode_provisioner_list([{"type": "jwk", "name": "x"}])

    def test_variant_shape_error_chains_validation_error(self):
        with pytest.raises(VariantShapeError) as exc_info:
            decode_provisioner_list([JWK, {"type": "X5C", "name": "x5c"}])
        error = exc_info.value
        assert (error.index, error.tag) == (1, "X5C")
        assert isinstance(error.__cause__, ValidationError)
        assert error.cause is error.__cause__

    def test_first_failure_wins(self):
        with pytest.raises(UnknownVariantTag):
            decode_provisioner_list([{"type": "SCEP"}, "not an object"])

    def test_tag_checked_before_shape(self):
        # no name and no type: the missing tag is reported, not the missing name
        with pytest.raises(MissingOrNonStringTag):
            decode_provisioner({})
