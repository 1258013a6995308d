import json
import os

import pytest
from dateutil.parser import isoparse

from chronoformat import (
    ComponentRange,
    Date,
    Iso8601,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
    parse,
)
from chronoformat.description.well_known import Rfc2822, Rfc3339
from chronoformat.parsing import rfc2822 as rfc2822_parser

BASE_TESTS = os.path.join(os.path.dirname(__file__), "fixtures")
with open(os.path.join(BASE_TESTS, "rfc3339.json"), "r") as f:
    rfc3339 = json.load(fp=f)
with open(os.path.join(BASE_TESTS, "rfc2822.json"), "r") as f:
    rfc2822 = json.load(fp=f)
with open(os.path.join(BASE_TESTS, "iso8601.json"), "r") as f:
    iso8601 = json.load(fp=f)


def check_fields(value, test):
    assert value.date == Date(*test["date"])
    assert value.time == Time(*test["time"])
    assert value.offset == UtcOffset(test["offset"])


class TestRfc3339:
    @pytest.mark.parametrize("abnf", [True, False])
    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in rfc3339["positive"].items()],
    )
    def test_valid(self, abnf, test_name, test):
        value = OffsetDateTime.parse(test["text"], Rfc3339(abnf=abnf))
        check_fields(value, test)

    @pytest.mark.parametrize("abnf", [True, False])
    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in rfc3339["negative"].items()],
    )
    def test_invalid(self, abnf, test_name, test):
        with pytest.raises(ValueError):
            OffsetDateTime.parse(test, Rfc3339(abnf=abnf))

    @pytest.mark.parametrize("abnf", [True, False])
    def test_month_out_of_range(self, abnf):
        with pytest.raises(ComponentRange) as e:
            OffsetDateTime.parse("2021-13-01T00:00:00Z", Rfc3339(abnf=abnf))
        assert e.value.name == "month"

    @pytest.mark.parametrize("abnf", [True, False])
    def test_leap_second_outside_month_end(self, abnf):
        with pytest.raises(ComponentRange) as e:
            OffsetDateTime.parse("2021-01-02T23:59:60Z", Rfc3339(abnf=abnf))
        assert e.value.name == "second"
        assert e.value.is_conditional

    def test_leap_second_in_utc(self):
        value = UtcDateTime.parse("2021-12-31T23:59:60Z", Rfc3339())
        assert value.date == Date(2021, 12, 31)
        assert value.time == Time(23, 59, 59, 999_999_999)

    def test_any_separator_without_abnf(self):
        value = OffsetDateTime.parse("2021-01-02 03:04:05Z", Rfc3339())
        assert value.time == Time(3, 4, 5)
        with pytest.raises(ValueError):
            OffsetDateTime.parse("2021-01-02 03:04:05Z", Rfc3339(abnf=True))

    def test_fields(self):
        parsed = parse(Rfc3339(), "2021-01-02T03:04:05-01:30")
        assert parsed.offset_hour == -1
        assert parsed.offset_minute == -30
        assert parsed.offset_is_negative is True
        assert parsed.leap_second_allowed is True

    @pytest.mark.parametrize(
        "text",
        [
            "2021-01-02T03:04:05.123456+01:02",
            "1996-12-19T16:39:57-08:00",
            "2021-01-02T03:04:05Z",
        ],
    )
    def test_matches_dateutil(self, text):
        value = OffsetDateTime.parse(text, Rfc3339())
        assert value == OffsetDateTime.from_py_datetime(isoparse(text))


class TestRfc2822:
    @pytest.mark.parametrize("abnf", [True, False])
    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in rfc2822["positive"].items()],
    )
    def test_valid(self, abnf, test_name, test):
        value = OffsetDateTime.parse(test["text"], Rfc2822(abnf=abnf))
        check_fields(value, test)

    @pytest.mark.parametrize("abnf", [True, False])
    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in rfc2822["negative"].items()],
    )
    def test_invalid(self, abnf, test_name, test):
        with pytest.raises(ValueError):
            OffsetDateTime.parse(test, Rfc2822(abnf=abnf))

    def test_same_instant_as_rfc3339(self):
        rfc2822_value = OffsetDateTime.parse("Sat, 02 Jan 2021 03:04:05 +0607", Rfc2822())
        rfc3339_value = OffsetDateTime.parse("2021-01-02T03:04:05+06:07", Rfc3339())
        assert rfc2822_value == rfc3339_value
        assert rfc2822_value.offset == UtcOffset.from_hms(6, 7)

    @pytest.mark.parametrize("text,year", [("02 Jan 21 03:04 +0000", 2021), ("02 Jan 99 03:04 +0000", 1999)])
    def test_two_digit_year(self, text, year):
        assert OffsetDateTime.parse(text, Rfc2822()).date.year == year
        with pytest.raises(ValueError):
            OffsetDateTime.parse(text, Rfc2822(abnf=True))

    def test_folding_whitespace(self):
        value = OffsetDateTime.parse("Sat, 02 Jan 2021\r\n 03:04:05 +0000", Rfc2822())
        assert value.time == Time(3, 4, 5)

    def test_nested_comment(self):
        text = "Sat, 02 Jan 2021 03:04:05 +0000 (a (nested) comment)"
        assert OffsetDateTime.parse(text, Rfc2822()).offset == UtcOffset.UTC

    def test_trailing_backslash_in_comment(self):
        assert rfc2822_parser._quoted_pair(b"\\", 0) is None
        assert rfc2822_parser._quoted_pair(b"\\)", 0).pos == 2
        assert rfc2822_parser.comment(b"(a\\", 0) is None
        with pytest.raises(ValueError):
            OffsetDateTime.parse("Sat, 02 Jan 2021 03:04:05 +0000 (a\\", Rfc2822())


class TestIso8601:
    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in iso8601["positive"].items()],
    )
    def test_valid(self, test_name, test):
        value = OffsetDateTime.parse(test["text"], Iso8601.PARSING)
        check_fields(value, test)

    @pytest.mark.parametrize(
        "test_name,test",
        [(test_name, test) for test_name, test in iso8601["negative"].items()],
    )
    def test_invalid(self, test_name, test):
        with pytest.raises(ValueError):
            OffsetDateTime.parse(test, Iso8601.PARSING)

    def test_date_only(self):
        assert Date.parse("2021-01-02", Iso8601.DEFAULT) == Date(2021, 1, 2)
        assert Date.parse("20210102", Iso8601.DEFAULT) == Date(2021, 1, 2)

    def test_time_only(self):
        assert Time.parse("03:04:05", Iso8601.DEFAULT) == Time(3, 4, 5)
        assert Time.parse("T0304", Iso8601.DEFAULT) == Time(3, 4)

    def test_offset_only(self):
        assert UtcOffset.parse("+01:30", Iso8601.DEFAULT) == UtcOffset(5_400)
        assert UtcOffset.parse("Z", Iso8601.DEFAULT) == UtcOffset.UTC

    def test_date_time_without_offset(self):
        value = PrimitiveDateTime.parse("2021-01-02T03:04:05", Iso8601.DEFAULT)
        assert value == PrimitiveDateTime(Date(2021, 1, 2), Time(3, 4, 5))

    def test_offset_requires_time_after_date(self):
        with pytest.raises(ValueError):
            parse(Iso8601.DEFAULT, "2021-01-02Z")

    def test_leap_second(self):
        value = UtcDateTime.parse("2016-12-31T23:59:60Z", Iso8601.DEFAULT)
        assert value.time == Time(23, 59, 59, 999_999_999)

    @pytest.mark.parametrize(
        "text",
        [
            "2021-01-02T03:04:05.123456+01:02",
            "20210102T030405Z",
            "2021-W01-6T03:04:05Z",
            "2021-002T03:04:05-05:00",
        ],
    )
    def test_matches_dateutil(self, text):
        value = OffsetDateTime.parse(text, Iso8601.PARSING)
        assert value == OffsetDateTime.from_py_datetime(isoparse(text))
