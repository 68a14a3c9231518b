"""Core components."""

from .duration import (
    Duration,
    GoDuration,
    OptionalGoDuration,
    parse_duration,
    parse_optional_duration,
)
from .enums import ProvisionerType
from .exceptions import (
    ConfigurationError,
    DecodeError,
    DurationError,
    DurationOverflow,
    InvalidDurationLiteral,
    MissingOrNonStringTag,
    NotAnArray,
    NotAnObject,
    ProviderError,
    TinystepError,
    UnknownVariantTag,
    VariantShapeError,
)

__all__ = [
    "ConfigurationError",
    "DecodeError",
    "Duration",
    "DurationError",
    "DurationOverflow",
    "GoDuration",
    "InvalidDurationLiteral",
    "MissingOrNonStringTag",
    "NotAnArray",
    "NotAnObject",
    "OptionalGoDuration",
    "ProviderError",
    "ProvisionerType",
    "TinystepError",
    "UnknownVariantTag",
    "VariantShapeError",
    "parse_duration",
    "parse_optional_duration",
]
