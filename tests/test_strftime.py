import pytest

from chronoformat import (
    Date,
    Expected,
    InvalidComponentName,
    NotSupported,
    OffsetDateTime,
    Time,
    UtcOffset,
    format,
    parse_strftime,
    parse_strftime_owned,
)
from chronoformat.description import component as c
from chronoformat.description.items import Compound, StringLiteral
from chronoformat.description.modifier import Padding

VALUE = OffsetDateTime(Date(2021, 1, 2), Time(3, 4, 5, 123456789), UtcOffset.from_hms(1, 2))


class TestStrftimeParsing:
    def test_calendar_date(self):
        assert parse_strftime("%Y-%m-%d") == [
            c.CalendarYearFullExtendedRange(),
            StringLiteral("-"),
            c.MonthNumerical(),
            StringLiteral("-"),
            c.Day(),
        ]

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("%-d", c.Day(padding=Padding.NONE)),
            ("%_H", c.Hour24(padding=Padding.SPACE)),
            ("%0e", c.Day(padding=Padding.ZERO)),
            ("%e", c.Day(padding=Padding.SPACE)),
            ("%k", c.Hour24(padding=Padding.SPACE)),
            ("%w", c.WeekdaySunday(one_indexed=False)),
            ("%u", c.WeekdayMonday()),
            ("%P", c.Period(is_uppercase=False)),
            ("%s", c.UnixTimestampSecond()),
            ("%%", StringLiteral("%")),
        ],
    )
    def test_directives(self, text, expected):
        assert parse_strftime(text) == [expected]

    def test_non_ascii_literal(self):
        assert parse_strftime("é%Y") == [StringLiteral("é"), c.CalendarYearFullExtendedRange()]

    def test_owned(self):
        assert parse_strftime_owned("%H") == c.Hour24()
        assert parse_strftime_owned("%H:%M") == Compound(
            [c.Hour24(), StringLiteral(":"), c.Minute()]
        )

    @pytest.mark.parametrize(
        "text,error",
        [
            ("%", Expected),
            ("abc%-", Expected),
            ("%Q", InvalidComponentName),
            ("%Ey", InvalidComponentName),
            ("%Z", NotSupported),
            ("%Oy", NotSupported),
        ],
    )
    def test_invalid(self, text, error):
        with pytest.raises(error):
            parse_strftime(text)

    def test_error_index(self):
        with pytest.raises(InvalidComponentName) as e:
            parse_strftime("ab%Q")
        assert e.value.index == 3


class TestStrftimeFormatting:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("%a %b %e %H:%M:%S %Y", "Sat Jan  2 03:04:05 2021"),
            ("%c", "Sat Jan  2 03:04:05 2021"),
            ("%D", "01/02/21"),
            ("%F", "2021-01-02"),
            ("%T", "03:04:05"),
            ("%r", "03:04:05 AM"),
            ("%R", "03:04"),
            ("%A %B", "Saturday January"),
            ("%w %u", "6 6"),
            ("%j", "002"),
            ("%-j", "2"),
            ("%U %W %V", "00 00 53"),
            ("%G-W%V-%u", "2020-W53-6"),
            ("%g", "20"),
            ("%C", "20"),
            ("%I %p %P", "03 AM am"),
            ("%l", " 3"),
            ("%z", "+0102"),
            ("%s", "1609552925"),
            ("%n%t%%", "\n\t%"),
        ],
    )
    def test_format(self, text, expected):
        assert format(VALUE, parse_strftime(text)) == expected
