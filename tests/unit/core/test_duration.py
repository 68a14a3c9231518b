"""Unit tests for Go-style duration literal parsing."""

from datetime import timedelta

import pytest
from pydantic import BaseModel, ValidationError

from tinystep.core import (
    Duration,
    DurationOverflow,
    GoDuration,
    InvalidDurationLiteral,
    OptionalGoDuration,
    parse_duration,
    parse_optional_duration,
)
from tinystep.core.duration import MAX_NANOS, MIN_NANOS

SECOND = 1_000_000_000


class TestParseDuration:
    """Test parse_duration on valid literals."""

    def test_signed_fractional_hours(self):
        assert parse_duration("-1.5h").nanoseconds == -5400 * SECOND

    def test_compound_literal(self):
        assert parse_duration("2h45m") == Duration.of(hours=2, minutes=45)
        assert parse_duration("2h45m").num_seconds() == 9900

    def test_explicit_plus_sign(self):
        assert parse_duration("+300ms").num_milliseconds() == 300

    def test_ms_is_milliseconds_not_minutes(self):
        assert parse_duration("1ms").nanoseconds == 1_000_000
        assert parse_duration("1m").nanoseconds == 60 * SECOND

    def test_repeated_units_accumulate(self):
        assert parse_duration("1h1h") == Duration.of(hours=2)

    def test_units_in_any_order(self):
        assert parse_duration("30s1m") == Duration.of(seconds=90)

    @pytest.mark.parametrize("literal", ["1us", "1µs", "1μs"])
    def test_microsecond_spellings(self, literal):
        assert parse_duration(literal).nanoseconds == 1_000

    def test_nanoseconds(self):
        assert parse_duration("10ns").nanoseconds == 10

    def test_fraction_rounds_to_unit_resolution(self):
        # seconds-based units round to whole seconds
        assert parse_duration("1.0006s") == Duration.of(seconds=1)
        assert parse_duration("1.5ms") == Duration.of(milliseconds=2)
        assert parse_duration("1.5us") == Duration.of(microseconds=2)

    def test_half_rounds_up(self):
        assert parse_duration("2.5s").num_seconds() == 3
        assert parse_duration("0.5s").num_seconds() == 1

    def test_sign_applies_after_rounding(self):
        assert parse_duration("-2.5s").num_seconds() == -3

    @pytest.mark.parametrize("literal,seconds", [(".5h", 1800), ("1.h", 3600), ("0s", 0)])
    def test_number_forms(self, literal, seconds):
        assert parse_duration(literal).num_seconds() == seconds

    def test_maximum_is_representable(self):
        assert parse_duration(f"{MAX_NANOS}ns").nanoseconds == MAX_NANOS


class TestParseDurationErrors:
    """Test parse_duration on rejected literals."""

    @pytest.mark.parametrize("literal", ["", "+", "-"])
    def test_empty_literal(self, literal):
        with pytest.raises(InvalidDurationLiteral):
            parse_duration(literal)

    def test_unit_without_number(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration("h")
        assert exc_info.value.fragment == "h"

    def test_number_without_unit(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration("5")
        assert exc_info.value.fragment == "5"

    def test_trailing_number_without_unit(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration("1h30")
        assert exc_info.value.fragment == "30"

    def test_unknown_unit(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration("7bogus")
        assert exc_info.value.fragment == "bogus"
        assert "bogus" in str(exc_info.value)

    def test_bare_u_is_unknown(self):
        with pytest.raises(InvalidDurationLiteral):
            parse_duration("1u")

    def test_malformed_number(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration("1..5s")
        assert exc_info.value.fragment == "1..5s"

    def test_double_sign(self):
        with pytest.raises(InvalidDurationLiteral):
            parse_duration("+-1h")

    def test_whitespace_is_rejected(self):
        with pytest.raises(InvalidDurationLiteral):
            parse_duration("1h 30m")

    def test_non_string_names_json_kind(self):
        with pytest.raises(InvalidDurationLiteral) as exc_info:
            parse_duration(5)
        assert "integer" in str(exc_info.value)

    def test_overflow(self):
        parse_duration("2562047h")
        with pytest.raises(DurationOverflow):
            parse_duration("2562048h")

    def test_minimum_is_representable(self):
        assert parse_duration(f"-{-MIN_NANOS}ns").nanoseconds == MIN_NANOS

    def test_negative_overflow_by_one_nanosecond(self):
        with pytest.raises(DurationOverflow):
            parse_duration(f"-{-MIN_NANOS + 1}ns")

    def test_overflow_by_one_nanosecond(self):
        with pytest.raises(DurationOverflow):
            parse_duration(f"{MAX_NANOS + 1}ns")

    def test_overflow_from_accumulation(self):
        with pytest.raises(DurationOverflow):
            parse_duration("2000000h2000000h")


class TestParseOptionalDuration:
    """Test parse_optional_duration never raises."""

    def test_absent(self):
        assert parse_optional_duration(None) is None

    @pytest.mark.parametrize("value", ["bogus", "5", "", 42, "2562048h"])
    def test_failures_become_none(self, value):
        assert parse_optional_duration(value) is None

    def test_valid(self):
        assert parse_optional_duration("5m") == Duration.of(minutes=5)


class TestDuration:
    """Test Duration arithmetic and rendering."""

    def test_accessors_truncate_toward_zero(self):
        d = Duration(nanoseconds=-1_500_000_000)
        assert d.num_seconds() == -1
        assert d.num_milliseconds() == -1500
        assert d.total_seconds() == -1.5

    def test_to_timedelta(self):
        d = Duration.of(seconds=1, nanoseconds=1500)
        assert d.to_timedelta() == timedelta(seconds=1, microseconds=1)

    def test_negation_and_addition(self):
        d = parse_duration("1h")
        assert -d == parse_duration("-1h")
        assert d + parse_duration("30m") == parse_duration("1.5h")

    def test_negating_minimum_overflows(self):
        with pytest.raises(DurationOverflow):
            -Duration(nanoseconds=MIN_NANOS)

    def test_addition_overflows(self):
        with pytest.raises(DurationOverflow):
            Duration(nanoseconds=MAX_NANOS) + Duration(nanoseconds=1)

    def test_ordering(self):
        assert parse_duration("1m") < parse_duration("1h")
        assert parse_duration("60m") >= parse_duration("1h")
        assert sorted([parse_duration("1h"), parse_duration("1s")])[0] == parse_duration("1s")

    def test_frozen_and_hashable(self):
        d = parse_duration("1s")
        with pytest.raises(ValidationError):
            d.nanoseconds = 5
        assert len({d, parse_duration("1000ms")}) == 1

    @pytest.mark.parametrize(
        "literal,rendered",
        [
            ("0s", "0s"),
            ("2h45m", "2h45m0s"),
            ("-1.5h", "-1h30m0s"),
            ("300ms", "300ms"),
            ("1500ns", "1.5µs"),
            ("90s", "1m30s"),
            ("1.25s", "1s"),
            ("12ns", "12ns"),
        ],
    )
    def test_str_matches_go_format(self, literal, rendered):
        assert str(parse_duration(literal)) == rendered


class TestDurationFields:
    """Test GoDuration and OptionalGoDuration as model fields."""

    class Strict(BaseModel):
        value: GoDuration

    class Lenient(BaseModel):
        value: OptionalGoDuration = None

    def test_strict_field_parses(self):
        assert self.Strict(value="1h").value == Duration.of(hours=1)

    def test_strict_field_reports_cause(self):
        with pytest.raises(ValidationError) as exc_info:
            self.Strict(value="7bogus")
        assert "bogus" in str(exc_info.value)

    def test_lenient_field_degrades(self):
        assert self.Lenient(value="7bogus").value is None
        assert self.Lenient().value is None
        assert self.Lenient(value="2m").value == Duration.of(minutes=2)
