"""Format descriptions: the bracketed language, strftime strings and well-known formats."""

# flake8: noqa: F401
from .items import Compound, First, FormatItem, Literal, Optional, StringLiteral
from .parse import parse_description, parse_owned
from .strftime import parse_strftime, parse_strftime_owned
from .well_known import (
    RFC2822,
    RFC3339,
    DateKind,
    FormattedComponents,
    Iso8601,
    Iso8601Config,
    OffsetPrecision,
    Rfc2822,
    Rfc3339,
    TimePrecision,
)
