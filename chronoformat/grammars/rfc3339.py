"""Internet timestamp ABNF definition, RFC 3339 section 5.6."""

from typing import ClassVar, List

from abnf.grammars.misc import load_grammar_rules
from abnf.parser import Rule as _Rule

from . import rfc5234


@load_grammar_rules(
    [
        # RFC 5234
        ("DIGIT", rfc5234.Rule("DIGIT")),
    ]
)
class Rule(_Rule):
    """Rules for `date-time`.

    Field ranges are left to the caller so that an out of range month or hour
    is reported as a range error rather than a syntax error. Quoted strings
    are case-insensitive, which makes `t` and `z` valid as RFC 3339 allows.
    """

    grammar: ClassVar[List] = [
        'date-time = full-date "T" full-time',
        'full-date = date-fullyear "-" date-month "-" date-mday',
        "full-time = partial-time time-offset",
        'partial-time = time-hour ":" time-minute ":" time-second [ time-secfrac ]',
        'time-offset = "Z" / time-numoffset',
        'time-numoffset = ( "+" / "-" ) time-hour ":" time-minute',
        "date-fullyear = 4DIGIT",
        "date-month = 2DIGIT \
        ; 01-12",
        "date-mday = 2DIGIT \
        ; 01-28, 01-29, 01-30, 01-31 based on month/year",
        "time-hour = 2DIGIT \
        ; 00-23",
        "time-minute = 2DIGIT \
        ; 00-59",
        "time-second = 2DIGIT \
        ; 00-58, 00-59, 00-60 based on leap second rules",
        'time-secfrac = "." 1*DIGIT',
    ]
