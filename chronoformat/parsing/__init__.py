"""Parsing text into calendar values."""

# flake8: noqa: F401
from .parsable import (
    parse,
    parse_date,
    parse_into,
    parse_offset,
    parse_offset_date_time,
    parse_primitive_date_time,
    parse_time,
    parse_utc_date_time,
)
from .parsed import Parsed
