"""Go-style duration literals.

Architecture:
    smallstep servers serialise ``time.Duration`` values as compact literals
    such as ``"2h45m"``, ``"-1.5h"`` or ``"+300ms"``. This module parses them
    into an immutable, signed, nanosecond-resolution ``Duration``.

Design Decisions:
    - Single nanosecond count bounded to signed 64 bits, the same range as
      Go's ``time.Duration``. Exceeding it raises ``DurationOverflow``.
    - Decimal arithmetic: Fractional components are converted exactly and
      rounded half-up in the unit's base resolution (``h``/``m``/``s`` to
      whole seconds, ``ms`` to milliseconds, ``us`` to microseconds, ``ns``
      to nanoseconds).
    - ``parse_optional_duration`` is a thin adapter over ``parse_duration``
      so the grammar lives in one place.

See Also:
    - ProvisionerClaims: Uses OptionalGoDuration for every claim duration
"""

from __future__ import annotations

import re
from datetime import timedelta
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Annotated, Any, Optional

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from ..utils.kinds import json_kind
from .exceptions import DurationError, DurationOverflow, InvalidDurationLiteral

NANOS_PER_MICROSECOND = 1_000
NANOS_PER_MILLISECOND = 1_000_000
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_MINUTE = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR = 60 * NANOS_PER_MINUTE

MAX_NANOS = 2**63 - 1
MIN_NANOS = -(2**63)

# unit -> (multiplier into the rounding resolution, nanoseconds per resolution step)
_UNITS: dict[str, tuple[int, int]] = {
    "h": (3600, NANOS_PER_SECOND),
    "m": (60, NANOS_PER_SECOND),
    "s": (1, NANOS_PER_SECOND),
    "ms": (1, NANOS_PER_MILLISECOND),
    "us": (1, NANOS_PER_MICROSECOND),
    "µs": (1, NANOS_PER_MICROSECOND),  # micro sign
    "μs": (1, NANOS_PER_MICROSECOND),  # greek small letter mu
    "ns": (1, 1),
}

_NUMBER_RUN = re.compile(r"[0-9.]*")
_UNIT_RUN = re.compile(r"[^0-9.]*")
_VALID_NUMBER = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)")


def _trunc_div(value: int, divisor: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(value) // divisor
    return -quotient if value < 0 else quotient


def _format_fraction(value: int, scale: int) -> str:
    whole, frac = divmod(value, scale)
    if not frac:
        return str(whole)
    width = len(str(scale)) - 1
    return f"{whole}.{str(frac).rjust(width, '0').rstrip('0')}"


class Duration(BaseModel):
    """Signed elapsed time with nanosecond resolution."""

    nanoseconds: int = Field(0, ge=MIN_NANOS, le=MAX_NANOS)

    model_config = ConfigDict(frozen=True)

    @classmethod
    def of(
        cls,
        *,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
        milliseconds: int = 0,
        microseconds: int = 0,
        nanoseconds: int = 0,
    ) -> Duration:
        """Build a duration from whole unit counts."""
        total = (
            hours * NANOS_PER_HOUR
            + minutes * NANOS_PER_MINUTE
            + seconds * NANOS_PER_SECOND
            + milliseconds * NANOS_PER_MILLISECOND
            + microseconds * NANOS_PER_MICROSECOND
            + nanoseconds
        )
        if not MIN_NANOS <= total <= MAX_NANOS:
            raise DurationOverflow(f"duration of {total}ns is out of range")
        return cls(nanoseconds=total)

    def num_seconds(self) -> int:
        """Whole seconds, truncated toward zero."""
        return _trunc_div(self.nanoseconds, NANOS_PER_SECOND)

    def num_milliseconds(self) -> int:
        """Whole milliseconds, truncated toward zero."""
        return _trunc_div(self.nanoseconds, NANOS_PER_MILLISECOND)

    def num_microseconds(self) -> int:
        """Whole microseconds, truncated toward zero."""
        return _trunc_div(self.nanoseconds, NANOS_PER_MICROSECOND)

    def total_seconds(self) -> float:
        return self.nanoseconds / NANOS_PER_SECOND

    def to_timedelta(self) -> timedelta:
        """Convert to ``timedelta``; sub-microsecond precision is truncated."""
        return timedelta(microseconds=self.num_microseconds())

    def __neg__(self) -> Duration:
        if self.nanoseconds == MIN_NANOS:
            raise DurationOverflow("cannot negate the minimum duration")
        return Duration(nanoseconds=-self.nanoseconds)

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        total = self.nanoseconds + other.nanoseconds
        if not MIN_NANOS <= total <= MAX_NANOS:
            raise DurationOverflow("overflow adding durations")
        return Duration(nanoseconds=total)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds < other.nanoseconds

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds <= other.nanoseconds

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds > other.nanoseconds

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        return self.nanoseconds >= other.nanoseconds

    def __str__(self) -> str:
        """Render in Go's ``time.Duration.String`` format, e.g. ``2h45m0s``."""
        ns = self.nanoseconds
        if ns == 0:
            return "0s"
        sign = "-" if ns < 0 else ""
        ns = abs(ns)
        if ns < NANOS_PER_MICROSECOND:
            return f"{sign}{ns}ns"
        if ns < NANOS_PER_MILLISECOND:
            return f"{sign}{_format_fraction(ns, NANOS_PER_MICROSECOND)}µs"
        if ns < NANOS_PER_SECOND:
            return f"{sign}{_format_fraction(ns, NANOS_PER_MILLISECOND)}ms"

        hours, rest = divmod(ns, NANOS_PER_HOUR)
        minutes, rest = divmod(rest, NANOS_PER_MINUTE)
        out = sign
        if hours:
            out += f"{hours}h"
        if hours or minutes:
            out += f"{minutes}m"
        return f"{out}{_format_fraction(rest, NANOS_PER_SECOND)}s"


def parse_duration(text: Any) -> Duration:
    """Parse a Go-style duration literal.

    Args:
        text: Literal such as ``"2h45m"``, ``"-1.5h"`` or ``"+300ms"``. An
            optional sign is followed by one or more ``<number><unit>``
            pairs, with units ``h``, ``m``, ``s``, ``ms``, ``us`` (or ``µs``,
            ``μs``) and ``ns``. Units may repeat and appear in any order.

    Returns:
        The summed duration, negated when the literal starts with ``-``.

    Raises:
        InvalidDurationLiteral: If ``text`` is not a string or does not match
            the grammar. ``fragment`` holds the offending part.
        DurationOverflow: If the running total leaves the signed 64-bit
            nanosecond range.

    Examples:
        >>> parse_duration("2h45m").num_seconds()
        9900
        >>> parse_duration("-1.5h").num_seconds()
        -5400
        >>> parse_duration("+300ms").num_milliseconds()
        300
    """
    if not isinstance(text, str):
        raise InvalidDurationLiteral(
            f"invalid type: {json_kind(text)}, expected a string duration",
            fragment=repr(text),
        )

    body = text
    negative = False
    if body[:1] in ("+", "-"):
        negative = body[0] == "-"
        body = body[1:]
    if not body:
        raise InvalidDurationLiteral(f"invalid duration `{text}`", fragment=text)

    # -MIN_NANOS is one past MAX_NANOS, so a negative literal can reach MIN_NANOS
    limit = -MIN_NANOS if negative else MAX_NANOS
    total = 0
    pos = 0
    while pos < len(body):
        number_match = _NUMBER_RUN.match(body, pos)
        number = number_match.group()
        pos = number_match.end()
        unit_match = _UNIT_RUN.match(body, pos)
        unit = unit_match.group()
        pos = unit_match.end()

        fragment = number + unit
        if not _VALID_NUMBER.fullmatch(number):
            raise InvalidDurationLiteral(
                f"invalid time duration: `{fragment}` in `{text}`", fragment=fragment
            )
        if not unit:
            raise InvalidDurationLiteral(
                f"missing unit in duration: `{fragment}` in `{text}`", fragment=fragment
            )
        if unit not in _UNITS:
            raise InvalidDurationLiteral(
                f"unknown unit `{unit}` in duration `{text}`, "
                "isn't `h`, `m`, `s`, `ms`, `us`, `ns`",
                fragment=unit,
            )

        multiplier, step = _UNITS[unit]
        with localcontext() as ctx:
            ctx.prec = len(number) + 8
            steps = (Decimal(number) * multiplier).to_integral_value(rounding=ROUND_HALF_UP)
        total += int(steps) * step
        if total > limit:
            raise DurationOverflow(f"overflow time in duration `{text}`")

    return Duration(nanoseconds=-total if negative else total)


def parse_optional_duration(value: Any) -> Optional[Duration]:
    """Parse a duration literal, mapping absence and every failure to ``None``.

    Callers that need to know why a literal was rejected must use
    ``parse_duration`` instead.
    """
    if value is None:
        return None
    try:
        return parse_duration(value)
    except DurationError:
        return None


def _validate_duration(value: Any) -> Any:
    if isinstance(value, Duration):
        return value
    try:
        return parse_duration(value)
    except DurationError as exc:
        # pydantic only wraps ValueError into a ValidationError
        raise ValueError(str(exc)) from exc


def _validate_optional_duration(value: Any) -> Any:
    if isinstance(value, Duration):
        return value
    return parse_optional_duration(value)


GoDuration = Annotated[Duration, BeforeValidator(_validate_duration)]
"""Model field type for a required duration literal."""

OptionalGoDuration = Annotated[Optional[Duration], BeforeValidator(_validate_optional_duration)]
"""Model field type for a duration literal that degrades to ``None``."""
