import io
import json
import os
from datetime import date, datetime, time, timezone

import pytest

from chronoformat import (
    RFC2822,
    RFC3339,
    Date,
    FormatComponentRange,
    InsufficientTypeInformation,
    InvalidFormatComponent,
    Iso8601,
    Iso8601Config,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
    WriteError,
    format,
    format_into,
    metadata,
    parse_description,
    parse_owned,
    parse_strftime,
)
from chronoformat.description import component as c
from chronoformat.description.modifier import Padding
from chronoformat.description.well_known import DateKind, OffsetPrecision, TimePrecision

BASE_TESTS = os.path.join(os.path.dirname(__file__), "fixtures")
with open(os.path.join(BASE_TESTS, "descriptions.json"), "r") as f:
    descriptions = json.load(fp=f)

VALUE = OffsetDateTime(Date(2021, 1, 2), Time(3, 4, 5, 123456789), UtcOffset.from_hms(1, 2))


class TestDescriptionFormatting:
    @pytest.mark.parametrize(
        "description,expected",
        [(description, expected) for description, expected in descriptions.items()],
    )
    def test_format(self, description, expected):
        assert format(VALUE, parse_description(description)) == expected
        assert VALUE.format(parse_description(description)) == expected

    @pytest.mark.parametrize(
        "component,width",
        [
            (c.Day, 2),
            (c.MonthNumerical, 2),
            (c.Ordinal, 3),
            (c.Hour24, 2),
            (c.Minute, 2),
            (c.Second, 2),
            (c.WeekNumberIso, 2),
        ],
    )
    @pytest.mark.parametrize("padding", [Padding.ZERO, Padding.SPACE])
    def test_padding_width(self, component, width, padding):
        value = OffsetDateTime(Date(2021, 1, 4), Time(1, 2, 3), UtcOffset.UTC)
        assert len(format(value, [component(padding=padding)])) == width

    def test_no_padding(self):
        value = PrimitiveDateTime(Date(2021, 1, 4), Time(1, 2, 3))
        assert format(value, parse_description("[day padding:none]/[hour padding:none]")) == "4/1"

    def test_optional_and_first(self):
        description = parse_owned("[hour][optional [:[minute]]][first [ x] [ y]]")
        assert format(Time(3, 4), description) == "03:04 x"

    @pytest.mark.parametrize(
        "year,description,expected",
        [
            (-1, "[year]", "-0001"),
            (12345, "[year]", "+12345"),
            (-12345, "[year repr:century]", "-123"),
            (12345, "[year repr:last_two]", "45"),
            (2021, "[year padding:none repr:century]", "20"),
        ],
    )
    def test_year(self, year, description, expected):
        assert format(Date(year, 1, 1), parse_description(description)) == expected

    def test_year_out_of_standard_range(self):
        with pytest.raises(FormatComponentRange) as e:
            format(Date(10000, 1, 1), parse_description("[year range:standard]"))
        assert e.value.name == "year"
        assert e.value.is_conditional

    def test_insufficient_type_information(self):
        with pytest.raises(InsufficientTypeInformation):
            format(Date(2021, 1, 2), parse_description("[hour]"))
        with pytest.raises(InsufficientTypeInformation):
            format(Time(1, 2), parse_description("[offset_hour]"))

    def test_negative_unix_timestamp(self):
        value = OffsetDateTime.from_unix_timestamp_nanos(-1)
        assert format(value, parse_description("[unix_timestamp]")) == "-1"

    def test_utc_date_time_has_offset(self):
        value = UtcDateTime(Date(2021, 1, 2), Time(3, 4, 5))
        assert format(value, parse_description("[offset_hour sign:mandatory]")) == "+00"

    def test_standard_library_values(self):
        description = parse_description("[year]-[month]-[day]")
        assert format(date(2021, 1, 2), description) == "2021-01-02"
        assert format(time(3, 4, 5, 6), parse_description("[subsecond]")) == "000006"
        aware = datetime(2021, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        assert format(aware, RFC3339) == "2021-01-02T03:04:05Z"
        with pytest.raises(InsufficientTypeInformation):
            format(datetime(2021, 1, 2, 3, 4, 5), RFC3339)


class TestFormatInto:
    def test_bytes_written(self):
        output = io.BytesIO()
        assert format_into(output, VALUE, parse_description("[year]-[month]")) == 7
        assert output.getvalue() == b"2021-01"

    def test_write_error(self):
        class BrokenWriter:
            def write(self, data):
                raise OSError("disk full")

        with pytest.raises(WriteError) as e:
            format_into(BrokenWriter(), VALUE, parse_description("[year]"))
        assert isinstance(e.value.__cause__, OSError)


class TestWellKnownFormatting:
    def test_rfc3339(self):
        assert format(VALUE, RFC3339) == "2021-01-02T03:04:05.123456789+01:02"
        value = OffsetDateTime(Date(1985, 4, 12), Time(23, 20, 50, 520_000_000))
        assert format(value, RFC3339) == "1985-04-12T23:20:50.52Z"

    @pytest.mark.parametrize(
        "value,name",
        [
            (OffsetDateTime(Date(10000, 1, 1), Time()), "year"),
            (OffsetDateTime(Date(-1, 1, 1), Time()), "year"),
            (OffsetDateTime(Date(2021, 1, 1), Time(), UtcOffset(90_000)), "offset_hour"),
            (OffsetDateTime(Date(2021, 1, 1), Time(), UtcOffset(61)), "offset_second"),
        ],
    )
    def test_rfc3339_invalid(self, value, name):
        with pytest.raises(InvalidFormatComponent) as e:
            format(value, RFC3339)
        assert e.value.name == name

    def test_rfc2822(self):
        assert format(VALUE, RFC2822) == "Sat, 02 Jan 2021 03:04:05 +0102"
        value = OffsetDateTime(Date(2021, 1, 2), Time(3, 4, 5), UtcOffset.from_hms(-6, -7))
        assert format(value, RFC2822) == "Sat, 02 Jan 2021 03:04:05 -0607"

    def test_rfc2822_invalid(self):
        with pytest.raises(InvalidFormatComponent) as e:
            format(OffsetDateTime(Date(1899, 12, 31), Time()), RFC2822)
        assert e.value.name == "year"

    def test_rfc2822_needs_offset(self):
        with pytest.raises(InsufficientTypeInformation):
            format(PrimitiveDateTime(Date(2021, 1, 2), Time()), RFC2822)

    @pytest.mark.parametrize(
        "config,expected",
        [
            (Iso8601Config(), "2021-01-02T03:04:05.123456789+01:02"),
            (
                Iso8601Config(use_separators=False, decimal_digits=3),
                "20210102T030405.123+0102",
            ),
            (
                Iso8601Config(date_kind=DateKind.WEEK, decimal_digits=None),
                "2020-W53-6T03:04:05+01:02",
            ),
            (
                Iso8601Config(
                    date_kind=DateKind.ORDINAL,
                    time_precision=TimePrecision.MINUTE,
                    decimal_digits=None,
                ),
                "2021-002T03:04+01:02",
            ),
            (
                Iso8601Config(time_precision=TimePrecision.HOUR, decimal_digits=2),
                "2021-01-02T03.06+01:02",
            ),
            (
                Iso8601Config(year_is_six_digits=True, decimal_digits=None),
                "+002021-01-02T03:04:05+01:02",
            ),
        ],
    )
    def test_iso8601(self, config, expected):
        assert format(VALUE, Iso8601(config=config)) == expected

    def test_iso8601_presets(self):
        value = UtcDateTime(Date(2021, 1, 2), Time(3, 4, 5))
        assert format(value, Iso8601.DATE) == "2021-01-02"
        assert format(value, Iso8601.TIME) == "T03:04:05.000000000"
        assert format(value, Iso8601.TIME_OFFSET) == "T03:04:05.000000000Z"
        assert format(value, Iso8601.OFFSET) == "+00:00"

    def test_iso8601_offset_precision(self):
        config = Iso8601Config(offset_precision=OffsetPrecision.HOUR, decimal_digits=None)
        with pytest.raises(InvalidFormatComponent) as e:
            format(VALUE, Iso8601(config=config))
        assert e.value.name == "offset_minute"

    def test_iso8601_insufficient_type_information(self):
        with pytest.raises(InsufficientTypeInformation):
            format(Date(2021, 1, 2), Iso8601.DEFAULT)

    def test_iso8601_decimal_digits_validated(self):
        with pytest.raises(ValueError):
            Iso8601Config(decimal_digits=10)


class TestRoundTrip:
    @pytest.mark.parametrize(
        "description",
        [
            RFC3339,
            Iso8601.DEFAULT,
            parse_description(
                "[year]-[month]-[day]T[hour]:[minute]:[second].[subsecond digits:9]"
                "[offset_hour sign:mandatory]:[offset_minute]:[offset_second]"
            ),
            parse_description("[unix_timestamp precision:nanosecond]"),
        ],
    )
    def test_offset_date_time(self, description):
        assert OffsetDateTime.parse(format(VALUE, description), description) == VALUE

    def test_strftime(self):
        description = parse_strftime("%Y-%m-%d %H:%M:%S %z")
        value = OffsetDateTime(Date(2021, 1, 2), Time(3, 4, 5), UtcOffset.from_hms(-1, -30))
        assert OffsetDateTime.parse(format(value, description), description) == value


class TestMetadata:
    def test_well_known(self):
        assert metadata(RFC3339).max_bytes_needed == 35
        assert metadata(RFC2822).max_bytes_needed == 31
        assert metadata(Iso8601.DEFAULT).max_bytes_needed == 35

    def test_description(self):
        result = metadata(parse_description("[year]-[month]-[day]"))
        assert result.max_bytes_needed == 13
        assert not result.guaranteed_utf8

    def test_strftime_is_utf8(self):
        result = metadata(parse_strftime("%Y-%m-%d"))
        assert result.max_bytes_needed == 13
        assert result.guaranteed_utf8

    def test_first_counts_first_alternative(self):
        assert metadata(parse_owned("[first [abc] [abcdef]]")).max_bytes_needed == 3

    def test_unix_timestamp(self):
        assert metadata([c.UnixTimestampSecond()]).max_bytes_needed == 15

    @pytest.mark.parametrize(
        "description",
        [RFC3339, RFC2822, Iso8601.DEFAULT, parse_strftime("%c %z"), parse_description("[unix_timestamp]")],
    )
    def test_output_fits(self, description):
        assert len(format(VALUE, description).encode()) <= metadata(description).max_bytes_needed
