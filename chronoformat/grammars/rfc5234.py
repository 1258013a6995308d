"""Primitive ABNF definition."""

from typing import ClassVar, List

from abnf.grammars.misc import load_grammar_rules
from abnf.parser import Rule as _Rule


@load_grammar_rules()
class Rule(_Rule):
    """Core rules from RFC 5234 used by the date-time grammars."""

    grammar: ClassVar[List] = [
        "ALPHA          =  %x41-5A / %x61-7A   ; A-Z / a-z",
        "CR             =  %x0D",
        "LF             =  %x0A",
        "CRLF           =  CR LF",
        "DIGIT          =  %x30-39 \
        ; 0-9",
        "HTAB           =  %x09",
        "SP             =  %x20",
        "VCHAR          =  %x21-7E",
        "WSP            =  SP / HTAB",
    ]
