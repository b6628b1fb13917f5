"""Lexer."""

from __future__ import annotations

from enum import Enum
import math

from parsecfg.diagnostics import (
    LEXER_INVALID_ENCODING,
    LEXER_INVALID_NUMBER,
    LEXER_MULTIPLE_DECIMAL_POINTS,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
)
from parsecfg.errors import LexError
from parsecfg.lexer.token_stream import TokenStream
from parsecfg.lexer.tokens import (
    COMMENT_CHAR,
    OPERATORS,
    PUNCTUATION,
    WHITESPACE,
    Token,
    TokenKind,
)
from parsecfg.options import ParserOptions
from parsecfg.text import TextRange
from parsecfg.utils import logger

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


class NumberType(Enum):
    INTEGER = "integer"
    UNSIGNED = "unsigned"
    FLOAT = "float"


_SUFFIXES: dict[str, NumberType] = {
    "i": NumberType.INTEGER,
    "I": NumberType.INTEGER,
    "u": NumberType.UNSIGNED,
    "U": NumberType.UNSIGNED,
    "f": NumberType.FLOAT,
    "F": NumberType.FLOAT,
}


class Lexer:
    """Single-pass lexer that drops whitespace and comments."""

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        self._source = source
        self._options = options or ParserOptions()
        self._position = 0
        self._tokens: list[Token] = []

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    def lex(self) -> list[Token]:
        """Scan the whole source. Raises LexError on the first malformed construct."""
        if not self._source.isascii():
            raise LexError.from_spec(LEXER_INVALID_ENCODING, _first_non_ascii(self._source))

        self._position = 0
        self._tokens = []
        while not self.is_eof:
            self._lex_token()
        return self._tokens

    def tokenize(self) -> TokenStream:
        tokens = self.lex()
        logger.debug("Lexed %d tokens from %d characters", len(tokens), len(self._source))
        return TokenStream(tokens)

    def _lex_token(self) -> None:
        ch = self._current_char()

        if ch in WHITESPACE:
            self._advance(1)
            return

        if ch == COMMENT_CHAR:
            self._lex_comment()
            return

        if ch.isdigit() or (ch == "." and self._peek_char().isdigit()):
            self._lex_number()
            return

        if ch.isalpha() or ch == "_":
            self._lex_identifier()
            return

        if ch == '"':
            self._lex_string()
            return

        kind = PUNCTUATION.get(ch)
        if kind is None and self._options.recognize_operators:
            kind = OPERATORS.get(ch)
        if kind is not None:
            self._push(kind, self._position, self._position + 1)
            self._advance(1)
            return

        raise LexError.from_spec(
            LEXER_UNRECOGNIZED_CHARACTER,
            TextRange.at(self._position, 1),
            f"Unrecognised token: {ch!r}.",
        )

    def _lex_comment(self) -> None:
        # The terminating newline belongs to the comment.
        end = self._source.find("\n", self._position + 1)
        self._position = len(self._source) if end == -1 else end + 1

    def _lex_number(self) -> None:
        start = self._position
        leading_dot = self._current_char() == "."
        saw_dot = leading_dot
        self._advance(1)

        number_type: NumberType | None = None
        while not self.is_eof:
            ch = self._current_char()
            if ch == ".":
                if saw_dot:
                    raise LexError.from_spec(
                        LEXER_MULTIPLE_DECIMAL_POINTS,
                        TextRange.new(start, self._position + 1),
                        f"Number has multiple decimal points: {self._source[start : self._position + 1]!r}.",
                    )
                saw_dot = True
                self._advance(1)
                continue
            if not ch.isdigit():
                number_type = _SUFFIXES.get(ch)
                break
            self._advance(1)

        digits_end = self._position
        text = self._source[start:digits_end]
        if leading_dot:
            text = "0" + text

        if number_type is not None:
            self._advance(1)
        else:
            number_type = NumberType.FLOAT if saw_dot else NumberType.INTEGER

        token_range = TextRange.new(start, self._position)
        value = _convert_number(text, number_type, saw_dot, token_range)
        match number_type:
            case NumberType.INTEGER:
                kind = TokenKind.INTEGER
            case NumberType.UNSIGNED:
                kind = TokenKind.UNSIGNED
            case NumberType.FLOAT:
                kind = TokenKind.FLOAT
        self._tokens.append(Token(kind, token_range, value))

    def _lex_identifier(self) -> None:
        start = self._position
        self._advance(1)
        while not self.is_eof:
            ch = self._current_char()
            if ch.isalnum() or ch == "_":
                self._advance(1)
                continue
            break
        self._push(TokenKind.IDENTIFIER, start, self._position, self._source[start : self._position])

    def _lex_string(self) -> None:
        start = self._position
        end = self._source.find('"', start + 1)
        if end == -1:
            raise LexError.from_spec(
                LEXER_UNTERMINATED_STRING,
                TextRange.new(start, len(self._source)),
            )

        text = self._source[start + 1 : end]
        self._position = end + 1

        previous = self._tokens[-1] if self._tokens else None
        if previous is not None and previous.kind == TokenKind.STRING:
            # Adjacent literals join into one token, whatever separates them.
            self._tokens[-1] = Token(
                TokenKind.STRING,
                previous.range.cover(TextRange.new(start, self._position)),
                f"{previous.value}{text}",
            )
            return

        self._push(TokenKind.STRING, start, self._position, text)

    def _push(self, kind: TokenKind, start: int, end: int, value: str | None = None) -> None:
        self._tokens.append(Token(kind, TextRange.new(start, end), value))

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self, steps: int) -> None:
        self._position += steps


def _convert_number(text: str, number_type: NumberType, saw_dot: bool, token_range: TextRange) -> int | float:
    try:
        if number_type == NumberType.FLOAT or saw_dot:
            as_float = float(text)
            if not math.isfinite(as_float):
                raise ValueError("value out of range")
            if number_type == NumberType.FLOAT:
                return as_float
            value = math.trunc(as_float)
        else:
            value = int(text)
    except ValueError as exc:
        raise LexError.from_spec(
            LEXER_INVALID_NUMBER,
            token_range,
            f"Failed parsing {number_type.value} {text!r}: {exc}.",
        ) from exc

    low, high = (I64_MIN, I64_MAX) if number_type == NumberType.INTEGER else (0, U64_MAX)
    if not low <= value <= high:
        raise LexError.from_spec(
            LEXER_INVALID_NUMBER,
            token_range,
            f"Failed parsing {number_type.value} {text!r}: number too large to fit in target type.",
        )
    return value


def _first_non_ascii(source: str) -> TextRange:
    for index, ch in enumerate(source):
        if not ch.isascii():
            return TextRange.at(index, 1)
    return TextRange.empty(0)


def tokenize(source: str, options: ParserOptions | None = None) -> TokenStream:
    """Convert `source` into a token stream.

    Comments and whitespace are dropped. Raises LexError on malformed text; no
    partial stream is ever returned.
    """
    return Lexer(source, options).tokenize()


def dump_tokens(tokens: TokenStream | list[Token], source: str | None = None) -> None:
    """Print token list with kind, range and value for debugging."""
    for i, tok in enumerate(tokens):
        text = "" if source is None else repr(source[tok.range.start : tok.range.end])
        print(f"{i:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} value={tok.value!r} {text}")
