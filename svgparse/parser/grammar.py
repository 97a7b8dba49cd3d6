"""Grammar primitives: XML character classes and composite consumers.

Character tables follow XML 1.0 (https://www.w3.org/TR/REC-xml/) literally;
numbers follow the SVG number grammar. Each ``consume_*`` function advances the
cursor and returns whether the construct matched; combine them with
``Cursor.capture`` to get the matched text.
"""

from __future__ import annotations

import math

from svgparse.parser.cursor import Cursor
from svgparse.parser.error import ParseError

# https://www.w3.org/TR/REC-xml/#NT-S
WHITESPACE = "\x20\x09\x0d\x0a"

# https://www.w3.org/TR/REC-xml/#NT-Char
_CHAR_RANGES = (
    (0x9, 0x9),
    (0xA, 0xA),
    (0xD, 0xD),
    (0x20, 0xD7FF),
    (0xE000, 0xFFFD),
    (0x10000, 0x10FFFF),
)

# https://www.w3.org/TR/REC-xml/#NT-NameStartChar
_NAME_START_RANGES = (
    (ord(":"), ord(":")),
    (ord("A"), ord("Z")),
    (ord("_"), ord("_")),
    (ord("a"), ord("z")),
    (0xC0, 0xD6),
    (0xD8, 0xF6),
    (0xF8, 0x2FF),
    (0x370, 0x37D),
    (0x37F, 0x1FFF),
    (0x200C, 0x200D),
    (0x2070, 0x218F),
    (0x2C00, 0x2FEF),
    (0x3001, 0xD7FF),
    (0xF900, 0xFDCF),
    (0xFDF0, 0xFFFD),
    (0x10000, 0xEFFFF),
)

# https://www.w3.org/TR/REC-xml/#NT-NameChar (in addition to NameStartChar)
_NAME_RANGES = (
    (ord("-"), ord("-")),
    (ord("."), ord(".")),
    (ord("0"), ord("9")),
    (0xB7, 0xB7),
    (0x0300, 0x036F),
    (0x203F, 0x2040),
)


def _in_ranges(char: str, ranges: tuple[tuple[int, int], ...]) -> bool:
    code = ord(char)
    return any(low <= code <= high for low, high in ranges)


# ── Predicates ────────────────────────────────────────────────────────────


def is_whitespace(char: str) -> bool:
    return char in WHITESPACE


def is_char(char: str) -> bool:
    return _in_ranges(char, _CHAR_RANGES)


def is_name_start_char(char: str) -> bool:
    return _in_ranges(char, _NAME_START_RANGES)


def is_name_char(char: str) -> bool:
    return is_name_start_char(char) or _in_ranges(char, _NAME_RANGES)


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_hex_digit(char: str) -> bool:
    return is_digit(char) or "a" <= char <= "f" or "A" <= char <= "F"


# ── Lexical consumers ─────────────────────────────────────────────────────


def consume_whitespace(cursor: Cursor) -> bool:
    return cursor.consume_any(WHITESPACE)


def consume_digits(cursor: Cursor) -> bool:
    return cursor.consume_while(is_digit)


def consume_hex_digits(cursor: Cursor) -> bool:
    return cursor.consume_while(is_hex_digit)


def consume_sign(cursor: Cursor) -> bool:
    return cursor.consume_char("+") or cursor.consume_char("-")


def consume_name(cursor: Cursor) -> bool:
    """Name ::= NameStartChar (NameChar)*"""
    if not cursor.consume_if(is_name_start_char):
        return False
    cursor.consume_while(is_name_char)
    return True


def consume_number(cursor: Cursor) -> bool:
    """Consume an SVG number: sign? (digits ('.' digits)? | '.' digits) exponent?

    A dot must be followed by at least one digit, so "1." and "1.e2" fail.
    """
    consume_sign(cursor)
    if consume_digits(cursor):
        if cursor.consume_char(".") and not consume_digits(cursor):
            return False
    elif not cursor.consume_char(".") or not consume_digits(cursor):
        return False
    if not cursor.consume_char("e") and not cursor.consume_char("E"):
        return True
    consume_sign(cursor)
    return consume_digits(cursor)


def read_number(cursor: Cursor) -> float | None:
    """Skip whitespace and read a number, or return None if none starts here."""
    consume_whitespace(cursor)
    position = cursor.position()
    text = cursor.capture(consume_number)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        raise ParseError(f"failed to parse a number '{text}'", *position) from None
    # Literals outside the float range overflow to inf
    if not math.isfinite(value):
        raise ParseError(f"failed to parse a number '{text}'", *position)
    return value


def read_flag(cursor: Cursor) -> float:
    """Skip whitespace and read an elliptical-arc flag: exactly '0' or '1'."""
    consume_whitespace(cursor)
    position = cursor.position()
    char = cursor.advance()
    if char == "0":
        return 0.0
    if char == "1":
        return 1.0
    raise ParseError("failed to parse a flag", *position)


# ── Markup consumers ──────────────────────────────────────────────────────


def consume_equality(cursor: Cursor) -> bool:
    """Eq ::= S? '=' S?"""
    consume_whitespace(cursor)
    consumed = cursor.consume_char("=")
    consume_whitespace(cursor)
    return consumed


def consume_reference(cursor: Cursor) -> bool:
    """Reference ::= '&' Name ';' | '&#' [0-9]+ ';' | '&#x' [0-9a-fA-F]+ ';'"""
    if not cursor.consume_char("&"):
        return False
    if cursor.consume_char("#"):
        if cursor.consume_char("x"):
            matched = consume_hex_digits(cursor)
        else:
            matched = consume_digits(cursor)
    else:
        matched = consume_name(cursor)
    return matched and cursor.consume_char(";")


def consume_attribute_value(cursor: Cursor) -> bool:
    """AttValue ::= '"' ([^<&"] | Reference)* '"' | "'" ([^<&'] | Reference)* "'" """
    if cursor.consume_char("'"):
        quote = "'"
    elif cursor.consume_char('"'):
        quote = '"'
    else:
        return False
    stops = "<&" + quote
    while True:
        cursor.consume_until_any(stops)
        if cursor.peek() != "&":
            break
        if not consume_reference(cursor):
            return False
    return cursor.consume_char(quote)


def consume_attribute(cursor: Cursor) -> bool:
    """Attribute ::= Name Eq AttValue"""
    return consume_name(cursor) and consume_equality(cursor) and consume_attribute_value(cursor)


def consume_comment_body(cursor: Cursor) -> bool:
    """Consume Chars up to (not including) the first '--'."""
    while True:
        char = cursor.peek()
        if char is None:
            break
        if char == "-":
            following = cursor.peek_many(2)[1:]
            if following and following != "-" and is_char(following):
                cursor.advance()
                continue
            break
        if not cursor.consume_if(is_char):
            break
    return True


def consume_comment(cursor: Cursor) -> bool:
    """Comment ::= '<!--' ((Char - '-') | ('-' (Char - '-')))* '-->'"""
    if not all(cursor.consume_char(c) for c in "<!--"):
        return False
    consume_comment_body(cursor)
    return all(cursor.consume_char(c) for c in "-->")


def consume_declaration(cursor: Cursor) -> bool:
    return (
        cursor.consume_char("<")
        and cursor.consume_char("!")
        and cursor.consume_until_char(">")
        and cursor.consume_char(">")
    )


def consume_instruction(cursor: Cursor) -> bool:
    return (
        cursor.consume_char("<")
        and cursor.consume_char("?")
        and cursor.consume_until_char(">")
        and cursor.consume_char(">")
    )


def consume_tag(cursor: Cursor) -> bool:
    return cursor.consume_char("<") and cursor.consume_until_char(">") and cursor.consume_char(">")
