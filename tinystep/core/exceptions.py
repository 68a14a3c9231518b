"""Custom exception hierarchy."""

from __future__ import annotations

from collections.abc import Sequence


class TinystepError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(TinystepError):
    """Client configuration is missing or invalid."""

    pass


class ProviderError(TinystepError):
    """Error from the certificate authority or the transport reaching it."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class DurationError(TinystepError):
    """A duration literal could not be turned into a Duration."""

    pass


class InvalidDurationLiteral(DurationError):
    """Literal has a disallowed character, malformed numeral, or unknown unit."""

    def __init__(self, message: str, fragment: str = "") -> None:
        super().__init__(message)
        self.fragment = fragment


class DurationOverflow(DurationError):
    """Accumulated duration exceeds the representable range."""

    pass


class DecodeError(TinystepError):
    """A response payload did not have the expected shape."""

    pass


class NotAnArray(DecodeError):
    """Expected a JSON array."""

    def __init__(self, found: str) -> None:
        super().__init__(f"invalid type: {found}, expected an array of provisioner objects")
        self.found = found


class NotAnObject(DecodeError):
    """Array element is not a JSON object."""

    def __init__(self, index: int, found: str) -> None:
        super().__init__(
            f"invalid type at index {index}: {found}, expected a provisioner object"
        )
        self.index = index
        self.found = found


class MissingOrNonStringTag(DecodeError):
    """Object has no string ``type`` discriminator."""

    def __init__(self, index: int, found: str) -> None:
        super().__init__(
            f"invalid type at index {index}: {found}, "
            "expected a string `type` that identifies this provisioner"
        )
        self.index = index
        self.found = found


class UnknownVariantTag(DecodeError):
    """Discriminator is not one of the known provisioner types."""

    def __init__(self, tag: str, expected: Sequence[str]) -> None:
        legal = ", ".join(f"`{name}`" for name in expected)
        super().__init__(f"unknown variant `{tag}`, expected one of {legal}")
        self.tag = tag
        self.expected = tuple(expected)


class VariantShapeError(DecodeError):
    """Tagged object failed to decode into its provisioner shape.

    The underlying error (usually a pydantic ``ValidationError``) is kept on
    ``cause`` and chained as ``__cause__`` by the decoder.
    """

    def __init__(self, index: int, tag: str, cause: Exception) -> None:
        super().__init__(f"invalid {tag} provisioner at index {index}: {cause}")
        self.index = index
        self.tag = tag
        self.cause = cause
