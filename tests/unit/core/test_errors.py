"""Unit tests for the exception hierarchy and ProvisionerType."""

import pytest

from tinystep.core import (
    ConfigurationError,
    DecodeError,
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
)


def test_provider_error_with_status_code():
    """ProviderError keeps the HTTP status."""
    error = ProviderError("boom", status_code=502)
    assert str(error) == "boom"
    assert error.status_code == 502
    assert isinstance(error, TinystepError)


@pytest.mark.parametrize(
    "error,parent",
    [
        (ConfigurationError("x"), TinystepError),
        (InvalidDurationLiteral("x", fragment="y"), DurationError),
        (DurationOverflow("x"), DurationError),
        (NotAnArray("object"), DecodeError),
        (NotAnObject(0, "string"), DecodeError),
        (MissingOrNonStringTag(0, "missing"), DecodeError),
        (UnknownVariantTag("SCEP", ProvisionerType.tags()), DecodeError),
        (VariantShapeError(0, "JWK", ValueError("bad")), DecodeError),
    ],
)
def test_hierarchy(error, parent):
    assert isinstance(error, parent)
    assert isinstance(error, TinystepError)


def test_unknown_variant_lists_every_legal_tag():
    error = UnknownVariantTag("SCEP", ProvisionerType.tags())
    assert error.tag == "SCEP"
    for tag in ("JWK", "OIDC", "GCP", "AWS", "Azure", "ACME", "X5C", "K8sSA", "SSHPOP"):
        assert f"`{tag}`" in str(error)


def test_positional_errors_carry_index_and_kind():
    error = NotAnObject(3, "integer")
    assert (error.index, error.found) == (3, "integer")
    assert "index 3" in str(error)


class TestProvisionerType:
    """Test the closed set of provisioner tags."""

    def test_tags_in_declaration_order(self):
        assert ProvisionerType.tags() == (
            "JWK",
            "OIDC",
            "GCP",
            "AWS",
            "Azure",
            "ACME",
            "X5C",
            "K8sSA",
            "SSHPOP",
        )

    def test_from_tag(self):
        assert ProvisionerType.from_tag("K8sSA") is ProvisionerType.K8SSA
        assert ProvisionerType.from_tag("Azure") == "Azure"

    @pytest.mark.parametrize("tag", ["jwk", "AZURE", "SCEP", ""])
    def test_from_tag_is_case_sensitive_and_closed(self, tag):
        with pytest.raises(ValueError):
            ProvisionerType.from_tag(tag)
