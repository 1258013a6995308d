"""Internet message date ABNF definition."""

from typing import ClassVar, List

from abnf.grammars.misc import load_grammar_rules
from abnf.parser import Rule as _Rule

from . import rfc5234


@load_grammar_rules(
    [
        # RFC 5234
        ("CRLF", rfc5234.Rule("CRLF")),
        ("DIGIT", rfc5234.Rule("DIGIT")),
        ("VCHAR", rfc5234.Rule("VCHAR")),
        ("WSP", rfc5234.Rule("WSP")),
    ]
)
class Rule(_Rule):
    """Rules from RFC 2822 section 3.3 and the whitespace rules it depends on."""

    grammar: ClassVar[List] = [
        "date-time = [ day-of-week \",\" ] date FWS time [ CFWS ]",
        "day-of-week = [ FWS ] day-name",
        'day-name = "Mon" / "Tue" / "Wed" / "Thu" / "Fri" / "Sat" / "Sun"',
        "date = day month year",
        "day = [ FWS ] 1*2DIGIT",
        "month = FWS month-name FWS",
        'month-name = "Jan" / "Feb" / "Mar" / "Apr" / "May" / "Jun" / '
        '"Jul" / "Aug" / "Sep" / "Oct" / "Nov" / "Dec"',
        "year = 4DIGIT",
        "time = time-of-day FWS zone",
        'time-of-day = hour ":" minute [ ":" second ]',
        "hour = 2DIGIT",
        "minute = 2DIGIT",
        "second = 2DIGIT",
        'zone = ( ( "+" / "-" ) zone-hour zone-minute ) / obs-zone',
        "zone-hour = 2DIGIT",
        "zone-minute = 2DIGIT",
        'obs-zone = "UT" / "GMT" / "EST" / "EDT" / "CST" / "CDT" / "MST" / "MDT" / "PST" / '
        '"PDT" / %d65-73 / %d75-90 / %d97-105 / %d107-122',
        "FWS = ( [ *WSP CRLF ] 1*WSP )",
        "CFWS = *( [ FWS ] comment ) ( ( [ FWS ] comment ) / FWS )",
        'comment = "(" *( [ FWS ] ccontent ) [ FWS ] ")"',
        "ccontent = ctext / quoted-pair / comment",
        "ctext = %d33-39 / %d42-91 / %d93-126",
        "quoted-pair = %x5C ( VCHAR / WSP )",
    ]
