from datetime import date, datetime, timedelta, timezone

import pytest
from dateutil.parser import isoparse

from chronoformat import (
    ComponentRange,
    Date,
    Month,
    OffsetDateTime,
    PrimitiveDateTime,
    Time,
    UtcDateTime,
    UtcOffset,
    Weekday,
)


class TestDate:
    @pytest.mark.parametrize(
        "value",
        [date(2021, 1, 2), date(2020, 2, 29), date(1, 1, 1), date(9999, 12, 31), date(2000, 12, 31)],
    )
    def test_matches_standard_library(self, value):
        ours = Date.from_py_date(value)
        iso_year, iso_week, iso_weekday = value.isocalendar()
        assert ours.py_date() == value
        assert ours.ordinal == value.timetuple().tm_yday
        assert ours.weekday.value == value.isoweekday()
        assert (ours.iso_year, ours.iso_week, ours.weekday.value) == (iso_year, iso_week, iso_weekday)
        assert ours.sunday_based_week == int(value.strftime("%U"))
        assert ours.monday_based_week == int(value.strftime("%W"))

    def test_week_dates(self):
        assert Date.from_iso_week_date(2020, 53, Weekday.SATURDAY) == Date(2021, 1, 2)
        assert Date.from_iso_week_date(2021, 1, Weekday.MONDAY) == Date(2021, 1, 4)
        assert Date.from_ordinal_date(2020, 366) == Date(2020, 12, 31)

    def test_extended_years(self):
        value = Date(-999_999, 1, 1)
        assert value.year == -999_999
        assert str(Date(12_345, 6, 7)) == "+12345-06-07"
        assert Date.from_day_number(value.to_day_number()) == value

    @pytest.mark.parametrize(
        "args,name,conditional",
        [
            ((2021, 13, 1), "month", False),
            ((2021, 2, 29), "day", True),
            ((1_000_000, 1, 1), "year", False),
        ],
    )
    def test_range(self, args, name, conditional):
        with pytest.raises(ComponentRange) as e:
            Date(*args)
        assert e.value.name == name
        assert e.value.is_conditional is conditional

    def test_ordinal_range_is_conditional(self):
        with pytest.raises(ComponentRange) as e:
            Date.from_ordinal_date(2021, 366)
        assert e.value.is_conditional

    def test_names(self):
        assert Month.SEPTEMBER.long_name == "September"
        assert Month.SEPTEMBER.short_name == "Sep"
        assert Weekday.THURSDAY.short_name == "Thu"
        assert Weekday.from_sunday(0) is Weekday.SUNDAY
        assert Weekday.SUNDAY.number_days_from_monday() == 6


class TestTime:
    def test_nanoseconds(self):
        value = Time(23, 59, 59, 999_999_999)
        assert Time.from_nanos_since_midnight(value.nanos_since_midnight()) == value
        assert str(value) == "23:59:59.999999999"

    def test_second_sixty_is_rejected(self):
        with pytest.raises(ComponentRange) as e:
            Time(23, 59, 60)
        assert e.value.name == "second"


class TestUtcOffset:
    def test_sign_follows_largest_part(self):
        assert UtcOffset.from_hms(1, 2).whole_seconds == 3_720
        assert UtcOffset.from_hms(-1, 2).whole_seconds == -3_720
        assert UtcOffset.from_hms(0, -30).as_hms() == (0, -30, 0)

    def test_standard_library(self):
        offset = UtcOffset.from_py_timezone(timezone(timedelta(hours=-5)))
        assert offset.whole_seconds == -18_000
        assert offset.py_timezone() == timezone(timedelta(hours=-5))


class TestDateTimes:
    def test_offset_conversion(self):
        value = OffsetDateTime(Date(2021, 1, 1), Time(0, 30), UtcOffset.from_hms(1))
        utc = value.to_utc()
        assert utc == UtcDateTime(Date(2020, 12, 31), Time(23, 30))
        assert utc.to_offset(UtcOffset.from_hms(1)) == value

    def test_unix_timestamp(self):
        value = OffsetDateTime.from_unix_timestamp(1_609_552_925)
        assert value.date == Date(2021, 1, 2)
        assert value.time == Time(2, 2, 5)
        assert value.unix_timestamp() == 1_609_552_925

    def test_leap_second_stand_in(self):
        value = OffsetDateTime(Date(2016, 12, 31), Time(15, 59, 59, 999_999_999), UtcOffset(-28_800))
        assert value.is_valid_leap_second_stand_in()
        value = OffsetDateTime(Date(2016, 12, 30), Time(23, 59, 59, 999_999_999))
        assert not value.is_valid_leap_second_stand_in()

    @pytest.mark.parametrize(
        "text",
        ["2021-01-02T03:04:05.123456+01:02", "1969-07-20T20:17:40Z", "2000-02-29T00:00:00-12:00"],
    )
    def test_dateutil_round_trip(self, text):
        parsed = isoparse(text)
        value = OffsetDateTime.from_py_datetime(parsed)
        assert value.py_datetime() == parsed
        assert value.unix_timestamp() == int(parsed.timestamp() // 1)

    def test_primitive_date_time(self):
        naive = datetime(2021, 1, 2, 3, 4, 5)
        value = PrimitiveDateTime.from_py_datetime(naive)
        assert value.py_datetime() == naive
        assert value.assume_utc().py_datetime() == naive.replace(tzinfo=timezone.utc)

    def test_naive_datetime_rejected(self):
        with pytest.raises(ValueError):
            OffsetDateTime.from_py_datetime(datetime(2021, 1, 2))
