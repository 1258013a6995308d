import pytest

from chronoformat import (
    Expected,
    InvalidComponentName,
    InvalidModifier,
    MissingComponentName,
    MissingRequiredModifier,
    NotSupported,
    UnclosedOpeningBracket,
    parse_description,
    parse_owned,
)
from chronoformat.description import component as c
from chronoformat.description.items import Compound, First, Literal, Optional
from chronoformat.description.modifier import Padding, SubsecondDigits, TrailingInput


class TestDescriptionParsing:
    def test_calendar_date(self):
        assert parse_description("[year]-[month]-[day]") == [
            c.CalendarYearFullExtendedRange(),
            Literal(b"-"),
            c.MonthNumerical(),
            Literal(b"-"),
            c.Day(),
        ]

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[day padding:space]", c.Day(padding=Padding.SPACE)),
            ("[DAY PADDING:NONE]", c.Day(padding=Padding.NONE)),
            ("[ hour repr:12 ]", c.Hour12()),
            ("[month repr:short case_sensitive:false]", c.MonthShort(case_sensitive=False)),
            ("[weekday repr:monday one_indexed:false]", c.WeekdayMonday(one_indexed=False)),
            ("[week_number repr:sunday]", c.WeekNumberSunday()),
            ("[period case:lower]", c.Period(is_uppercase=False)),
            ("[subsecond digits:3]", c.Subsecond(digits=SubsecondDigits.THREE)),
            ("[offset_hour sign:mandatory]", c.OffsetHour(sign_is_mandatory=True)),
            ("[ignore count:2]", c.Ignore(count=2)),
            ("[end trailing_input:discard]", c.End(trailing_input=TrailingInput.DISCARD)),
            ("[unix_timestamp precision:microsecond]", c.UnixTimestampMicrosecond()),
            (
                "[year repr:century sign:mandatory]",
                c.CalendarYearCenturyExtendedRange(sign_is_mandatory=True),
            ),
            ("[year base:iso_week range:standard]", c.IsoYearFullStandardRange()),
            ("[year repr:last_two base:iso_week]", c.IsoYearLastTwo()),
        ],
    )
    def test_component_modifiers(self, text, expected):
        assert parse_description(text) == [expected]

    def test_escaped_bracket(self):
        assert parse_description("[[[day]") == [Literal(b"["), c.Day()]

    def test_parsing_is_deterministic(self):
        text = "[year]-[month repr:short] [optional [[hour]]]"
        first, second = parse_owned(text), parse_owned(text)
        assert first == second
        assert hash(first) == hash(second)

    def test_missing_required_modifier(self):
        with pytest.raises(MissingRequiredModifier) as e:
            parse_description("[ignore]")
        assert e.value.name == "count"
        assert e.value.index == 1

    @pytest.mark.parametrize(
        "text,error",
        [
            ("[foo]", InvalidComponentName),
            ("[day padding:foo]", InvalidModifier),
            ("[day foo:zero]", InvalidModifier),
            ("[day padding]", InvalidModifier),
            ("[day padding:]", InvalidModifier),
            ("[ignore count:0]", InvalidModifier),
            ("[ ]", MissingComponentName),
            ("[day", UnclosedOpeningBracket),
            ("[day padding:zero", UnclosedOpeningBracket),
            ("[", UnclosedOpeningBracket),
            ("[optional [[year]]]", NotSupported),
            ("[first [a] [b]]", NotSupported),
        ],
    )
    def test_invalid_description(self, text, error):
        with pytest.raises(error):
            parse_description(text)

    def test_error_index(self):
        with pytest.raises(InvalidComponentName) as e:
            parse_description("abc[foo]")
        assert e.value.index == 4
        assert e.value.name == "foo"

    @pytest.mark.parametrize("digit", ["\u00b2", "\u0663"])
    def test_count_must_be_ascii_digits(self, digit):
        with pytest.raises(InvalidModifier) as e:
            parse_description(f"[ignore count:{digit}]")
        assert e.value.value == digit
        assert e.value.index == 14


class TestOwnedDescriptionParsing:
    def test_single_item_is_not_wrapped(self):
        assert parse_owned("[day]") == c.Day()

    def test_optional(self):
        assert parse_owned("[optional [:[second]]]") == Optional(
            Compound([Literal(b":"), c.Second()])
        )

    def test_first(self):
        assert parse_owned("[first [a] [b]]") == First([Literal(b"a"), Literal(b"b")])

    def test_nested_optional_in_sequence(self):
        assert parse_owned("[hour][optional [[minute]]]") == Compound(
            [c.Hour24(), Optional(c.Minute())]
        )

    @pytest.mark.parametrize(
        "text,error",
        [
            ("[optional [x] extra]", Expected),
            ("[first x]", Expected),
            ("[first]", Expected),
            ("[optional [x]", UnclosedOpeningBracket),
            ("[first [x]", UnclosedOpeningBracket),
        ],
    )
    def test_invalid_nesting(self, text, error):
        with pytest.raises(error):
            parse_owned(text)
