"""Low-level parser combinators over bytes.

Every parser takes the input and a position and returns a `ParsedItem` holding
the position after the match, or None. A parser that fails never commits any
progress, so alternatives can be retried from the same position.
"""

from typing import Any, Callable, Iterable, NamedTuple, Optional, Tuple

from ..description.modifier import Padding


class ParsedItem(NamedTuple):
    """The position after a successful match and the value it produced."""

    pos: int
    value: Any


Parser = Callable[[bytes, int], Optional[ParsedItem]]

_ZERO = ord("0")


def sign(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Consume `+` or `-`, returning 1 or -1."""
    head = data[pos:pos + 1]
    if head == b"-":
        return ParsedItem(pos + 1, -1)
    if head == b"+":
        return ParsedItem(pos + 1, 1)
    return None


def ascii_char(char: bytes) -> Parser:
    """Build a parser for exactly one given ASCII character."""

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        if data[pos:pos + 1] == char:
            return ParsedItem(pos + 1, None)
        return None

    return parse


def any_digit(data: bytes, pos: int) -> Optional[ParsedItem]:
    """Consume one ASCII digit, returning its numeric value."""
    if pos < len(data) and 0x30 <= data[pos] <= 0x39:
        return ParsedItem(pos + 1, data[pos] - _ZERO)
    return None


def _fixed_width(width: int) -> Parser:
    weights = tuple(10 ** exponent for exponent in reversed(range(width)))

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        chunk = data[pos:pos + width]
        if len(chunk) != width:
            return None
        value = 0
        for byte, weight in zip(chunk, weights):
            digit = byte - _ZERO
            if not 0 <= digit <= 9:
                return None
            value += digit * weight
        return ParsedItem(pos + width, value)

    return parse


# Decoders for the fixed widths used by the calendar fields.
_EXACTLY_N_DIGITS = {width: _fixed_width(width) for width in range(1, 10)}


def exactly_n_digits(n: int) -> Parser:
    """Get the parser for exactly `n` digits."""
    if n in _EXACTLY_N_DIGITS:
        return _EXACTLY_N_DIGITS[n]
    return n_to_m_digits(n, n)


def n_to_m_digits(n: int, m: int) -> Parser:
    """Build a parser for between `n` and `m` digits; later digits are left unread."""

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        end = pos
        while end < len(data) and end - pos < m and 0x30 <= data[end] <= 0x39:
            end += 1
        count = end - pos
        if count < n:
            return None
        return ParsedItem(end, int(data[pos:end]))

    return parse


def n_to_m_digits_padded(n: int, m: int, padding: Padding) -> Parser:
    """Build a parser for between `n` and `m` digits with the given padding.

    Space padding accepts up to `n - 1` leading spaces in place of digits, zero
    padding requires at least `n` digits, and no padding accepts from one digit.
    """
    if padding is Padding.NONE:
        return n_to_m_digits(1, m)
    if padding is Padding.ZERO:
        return n_to_m_digits(n, m)

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        start = pos
        while pos - start < n - 1 and data[pos:pos + 1] == b" ":
            pos += 1
        width = pos - start
        return n_to_m_digits(n - width, m - width)(data, pos)

    return parse


def exactly_n_digits_padded(n: int, padding: Padding) -> Parser:
    """Build a parser for a field `n` characters wide with the given padding."""
    return n_to_m_digits_padded(n, n, padding)


one_or_two_digits = n_to_m_digits(1, 2)


def first_match(options: Iterable[Tuple[bytes, Any]], case_sensitive: bool) -> Parser:
    """Build a parser that consumes the first of the literal options present."""
    if case_sensitive:
        table = tuple(options)
    else:
        table = tuple((expected.lower(), value) for expected, value in options)

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        for expected, value in table:
            head = data[pos:pos + len(expected)]
            if not case_sensitive:
                head = head.lower()
            if head == expected:
                return ParsedItem(pos + len(expected), value)
        return None

    return parse


def zero_or_more(parser: Parser) -> Callable[[bytes, int], ParsedItem]:
    """Apply the parser as many times as it matches."""

    def parse(data: bytes, pos: int) -> ParsedItem:
        item = parser(data, pos)
        while item is not None and item.pos > pos:
            pos = item.pos
            item = parser(data, pos)
        return ParsedItem(pos, None)

    return parse


def one_or_more(parser: Parser) -> Parser:
    """Apply the parser at least once and then as many times as it matches."""
    repeat = zero_or_more(parser)

    def parse(data: bytes, pos: int) -> Optional[ParsedItem]:
        item = parser(data, pos)
        if item is None:
            return None
        return repeat(data, item.pos)

    return parse


def opt(parser: Parser) -> Callable[[bytes, int], ParsedItem]:
    """Apply the parser if it matches; otherwise produce None without consuming."""

    def parse(data: bytes, pos: int) -> ParsedItem:
        item = parser(data, pos)
        return ParsedItem(pos, None) if item is None else item

    return parse
