"""Whitespace, comment and zone rules from RFC 2822."""

from typing import Optional

from .combinator import ParsedItem, ascii_char, one_or_more, zero_or_more

_COMMENT_DEPTH_LIMIT = 32

_ZONES = {
    b"gmt": 0,
    b"est": -5,
    b"edt": -4,
    b"cst": -6,
    b"cdt": -5,
    b"mst": -7,
    b"mdt": -6,
    b"pst": -8,
    b"pdt": -7,
}

_open_paren = ascii_char(b"(")
_close_paren = ascii_char(b")")
_backslash = ascii_char(b"\\")


def _wsp(data: bytes, pos: int) -> Optional[ParsedItem]:
    if data[pos:pos + 1] in (b" ", b"\t"):
        return ParsedItem(pos + 1, None)
    return None


_some_wsp = one_or_more(_wsp)


def fws(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Consume folding whitespace: runs of spaces and tabs, possibly across CRLF."""
    if data[pos:pos + 2] == b"\r\n":
        return _some_wsp(data, pos + 2)
    item = _some_wsp(data, pos)
    if item is None:
        return None
    pos = item.pos
    while data[pos:pos + 2] == b"\r\n":
        item = _some_wsp(data, pos + 2)
        if item is None:
            return None
        pos = item.pos
    return ParsedItem(pos, None)


_any_fws = zero_or_more(fws)


def cfws(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Consume any non-empty mix of folding whitespace and comments."""
    return one_or_more(_fws_or_comment)(data, pos)


def _fws_or_comment(data: bytes, pos: int) -> Optional[ParsedItem]:
    return fws(data, pos) or comment(data, pos)


def comment(data: bytes, pos: int, depth: int = 1) -> Optional[ParsedItem]:
    """Consume a parenthesized comment, which may nest up to a fixed depth."""
    if depth == _COMMENT_DEPTH_LIMIT:
        return None
    item = _open_paren(data, pos)
    if item is None:
        return None
    pos = _any_fws(data, item.pos).pos
    while True:
        item = _ccontent(data, pos, depth + 1)
        if item is None:
            break
        pos = _any_fws(data, item.pos).pos
    return _close_paren(data, pos)


def _ccontent(data: bytes, pos: int, depth: int) -> Optional[ParsedItem]:
    return _ctext(data, pos) or _quoted_pair(data, pos) or comment(data, pos, depth)


def _ctext(data: bytes, pos: int) -> Optional[ParsedItem]:
    if pos >= len(data):
        return None
    byte = data[pos]
    # no-ws-ctl, then printable characters other than parentheses and backslash
    if 1 <= byte <= 8 or 11 <= byte <= 12 or 14 <= byte <= 31 or byte == 127:
        return ParsedItem(pos + 1, None)
    if 33 <= byte <= 39 or 42 <= byte <= 91 or 93 <= byte <= 126:
        return ParsedItem(pos + 1, None)
    return None


def _quoted_pair(data: bytes, pos: int) -> Optional[ParsedItem]:
    item = _backslash(data, pos)
    if item is None:
        return None
    pos = _text(data, item.pos)
    if pos == item.pos:
        return None
    return ParsedItem(pos, None)


def _text(data: bytes, pos: int) -> int:
    if pos < len(data):
        byte = data[pos]
        if 1 <= byte <= 9 or 11 <= byte <= 12 or 14 <= byte <= 127:
            return pos + 1
    # obs-text; a `)` is left for the comment to close on.
    pos = _skip_line_breaks(data, pos)
    while pos < len(data) and data[pos] != ord(")") and _is_obs_char(data[pos]):
        pos = _skip_line_breaks(data, pos + 1)
    return pos


def _is_obs_char(byte: int) -> bool:
    return 0 <= byte <= 9 or 11 <= byte <= 12 or 14 <= byte <= 127


def _skip_line_breaks(data: bytes, pos: int) -> int:
    while data[pos:pos + 1] == b"\n":
        pos += 1
    while data[pos:pos + 1] == b"\r":
        pos += 1
    return pos


def zone_literal(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Consume an obsolete zone name, returning its offset in whole hours."""
    name = data[pos:pos + 3].lower()
    if name in _ZONES:
        return ParsedItem(pos + 3, _ZONES[name])
    if data[pos:pos + 2].lower() == b"ut":
        return ParsedItem(pos + 2, 0)
    letter = data[pos:pos + 1]
    if letter.isalpha() and letter.lower() != b"j":
        # Military zones are treated as UTC.
        return ParsedItem(pos + 1, 0)
    return None
