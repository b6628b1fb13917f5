"""Value grammar routines.

```
key        := IDENT "=" value
value      := scalar | array | tuple | table
array      := "[" (scalar ("," scalar)*)? "]"     -- homogeneous
tuple      := "(" (value ("," value)*)? ")"
table      := "{" (key ("," key)*)? "}"
scalar     := STRING | INTEGER | UNSIGNED | FLOAT
```
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from parsecfg.diagnostics import (
    PARSER_ARRAY_KIND_MISMATCH,
    PARSER_DUPLICATE_NAME,
    PARSER_INVALID_NAME,
    PARSER_MISSING_CLOSING_DELIMITER,
    PARSER_NOT_ENOUGH_TOKENS,
    PARSER_TRAILING_SEPARATOR,
    PARSER_UNEXPECTED_EOF,
)
from parsecfg.errors import ParseError
from parsecfg.lexer.tokens import Token, TokenKind
from parsecfg.model import (
    FloatArray,
    FloatValue,
    IntegerArray,
    IntegerValue,
    Key,
    StringArray,
    StringValue,
    TableValue,
    TupleValue,
    UnsignedArray,
    UnsignedValue,
    Value,
)
from parsecfg.names import names_equal
from parsecfg.parser.parser import Parser
from parsecfg.text import TextRange

_SCALARS: Final = {
    TokenKind.STRING: StringValue,
    TokenKind.INTEGER: IntegerValue,
    TokenKind.UNSIGNED: UnsignedValue,
    TokenKind.FLOAT: FloatValue,
}

_ARRAYS: Final = {
    TokenKind.STRING: StringArray,
    TokenKind.INTEGER: IntegerArray,
    TokenKind.UNSIGNED: UnsignedArray,
    TokenKind.FLOAT: FloatArray,
}

_KIND_NAMES: Final[dict[TokenKind, str]] = {
    TokenKind.STRING: "string",
    TokenKind.INTEGER: "integer",
    TokenKind.UNSIGNED: "unsigned integer",
    TokenKind.FLOAT: "float",
}


def parse_value(parser: Parser) -> Value:
    """Parse exactly one value and leave the stream right after it."""
    token = parser.peek()
    if token is None:
        raise parser.error(
            PARSER_UNEXPECTED_EOF,
            parser.stream.end_range,
            "Unexpected end of tokens: expected a value but the input is empty.",
        )

    scalar = _SCALARS.get(token.kind)
    if scalar is not None:
        parser.bump()
        return scalar(token.value)

    match token.kind:
        case TokenKind.LBRACKET:
            return parse_array(parser)
        case TokenKind.LPAREN:
            return parse_tuple(parser)
        case TokenKind.LBRACE:
            return parse_table(parser)
        case _:
            raise parser.unexpected(token, "a string, number, array, tuple or table")


def parse_array(parser: Parser) -> Value:
    opening = parser.expect(TokenKind.LBRACKET)
    with parser.nested(opening):
        first = parser.peek()
        if first is None:
            raise _missing_close(parser, opening, "Array", "square bracket")
        if first.kind == TokenKind.RBRACKET:
            parser.bump()
            return StringArray(())
        if not first.kind.is_scalar:
            raise parser.unexpected(first, "value or close bracket")

        element_kind = first.kind
        element_name = _KIND_NAMES[element_kind]
        array_type = _ARRAYS[element_kind]
        items: list[str | int | float] = []
        ready = True
        last_separator: Token | None = None

        while True:
            token = parser.peek()
            if token is None:
                raise _missing_close(parser, opening, array_type.__name__, "square bracket")

            if token.kind == TokenKind.RBRACKET:
                if ready and last_separator is not None:
                    _trailing_separator(parser, last_separator, "close bracket")
                parser.bump()
                break

            if token.kind == TokenKind.SEPARATOR:
                if ready:
                    raise parser.unexpected(token, f"{element_name} or close bracket")
                parser.bump()
                ready = True
                last_separator = token
                continue

            if token.kind == element_kind:
                if not ready:
                    raise parser.unexpected(token, "separator or close bracket")
                parser.bump()
                items.append(token.value)
                ready = False
                continue

            if token.kind.is_scalar:
                raise parser.error(
                    PARSER_ARRAY_KIND_MISMATCH,
                    token.range,
                    f"Array of {element_name} values cannot contain {token.describe()} "
                    f"({_KIND_NAMES[token.kind]}).",
                )

            raise parser.unexpected(token, f"{element_name}, separator or close bracket")

    return array_type(tuple(items))


def parse_tuple(parser: Parser) -> TupleValue:
    opening = parser.expect(TokenKind.LPAREN)
    items: list[Value] = []
    with parser.nested(opening):
        for _ in _delimited(parser, opening, TokenKind.RPAREN, "Tuple", "parenthesis"):
            items.append(parse_value(parser))
    return TupleValue(tuple(items))


def parse_table(parser: Parser) -> TableValue:
    opening = parser.expect(TokenKind.LBRACE)
    keys: list[Key] = []
    with parser.nested(opening):
        for start in _delimited(parser, opening, TokenKind.RBRACE, "Table", "brace"):
            key = parse_key(parser)
            check_key(parser, key, keys, start, "Table")
            keys.append(key)
    return TableValue(tuple(keys))


def parse_key(parser: Parser) -> Key:
    """`IDENT "=" value`. Name validity is left to the caller."""
    if len(parser.stream) < 3:
        raise parser.error(
            PARSER_NOT_ENOUGH_TOKENS,
            _range_of(parser.peek()) or parser.stream.end_range,
        )

    name = parser.expect(TokenKind.IDENTIFIER)
    parser.expect(TokenKind.EQUALS)
    value = parse_value(parser)
    return Key(str(name.value), value)


def check_key(parser: Parser, key: Key, existing: list[Key], start: Token, container: str) -> None:
    """Reject invalid names and case-insensitive duplicates within one container."""
    if not key.is_valid:
        raise parser.error(
            PARSER_INVALID_NAME,
            start.range,
            f"Parsed key {key.name!r} is invalid in {container}.",
        )
    for other in existing:
        if names_equal(other.name, key.name):
            raise parser.error(
                PARSER_DUPLICATE_NAME,
                start.range,
                f"A key with the name {other.name!r} already exists in {container}.",
            )


def is_section_header(parser: Parser) -> bool:
    return (
        parser.nth(0) == TokenKind.LBRACKET
        and parser.nth(1) == TokenKind.IDENTIFIER
        and parser.nth(2) == TokenKind.RBRACKET
    )


def parse_section_header(parser: Parser) -> Token:
    """Consume `[ IDENT ]` and return the identifier token."""
    parser.expect(TokenKind.LBRACKET)
    name = parser.expect(TokenKind.IDENTIFIER)
    parser.expect(TokenKind.RBRACKET)
    return name


def _delimited(
    parser: Parser,
    opening: Token,
    close: TokenKind,
    construct: str,
    delimiter: str,
) -> Iterator[Token]:
    """Yield once per element position between `opening` and `close`.

    The caller parses the element at each yield; this drives the
    element/separator alternation and consumes the closing token.
    """
    ready = True
    last_separator: Token | None = None
    while True:
        token = parser.peek()
        if token is None:
            raise _missing_close(parser, opening, construct, delimiter)

        if token.kind == close:
            if ready and last_separator is not None:
                _trailing_separator(parser, last_separator, f"close {delimiter}")
            parser.bump()
            return

        if not ready:
            if token.kind == TokenKind.SEPARATOR:
                parser.bump()
                ready = True
                last_separator = token
                continue
            raise parser.unexpected(token, f"comma or close {delimiter}")

        if token.kind == TokenKind.SEPARATOR:
            raise parser.unexpected(token, f"{construct.lower()} element or close {delimiter}")

        yield token
        ready = False


def _trailing_separator(parser: Parser, separator: Token, expected: str) -> None:
    if parser.options.allow_trailing_separator:
        return
    raise parser.error(
        PARSER_TRAILING_SEPARATOR,
        separator.range,
        f"Separator must be followed by another element, not a {expected}.",
    )


def _missing_close(parser: Parser, opening: Token, construct: str, delimiter: str) -> ParseError:
    return parser.error(
        PARSER_MISSING_CLOSING_DELIMITER,
        opening.range.cover(parser.stream.end_range),
        f"{construct} missing closing {delimiter}.",
    )


def _range_of(token: Token | None) -> TextRange | None:
    return token.range if token is not None else None
