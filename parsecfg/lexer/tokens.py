"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from typing import Final

from parsecfg.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Identifiers / literals
    # -------------------------
    IDENTIFIER = 20
    STRING = 21  # quoted string, adjacent literals merged
    INTEGER = 22  # i64
    UNSIGNED = 23  # u64
    FLOAT = 24  # f64

    # -------------------------
    # Structure
    # -------------------------
    EQUALS = 30  # =
    SEPARATOR = 31  # ,

    # -------------------------
    # Operators (lexed, never consumed by the grammar)
    # -------------------------
    PLUS = 50  # +
    MINUS = 51  # -
    STAR = 52  # *
    SLASH = 53  # /
    PERCENT = 54  # %

    LBRACE = 60  # {
    RBRACE = 61  # }
    LBRACKET = 62  # [
    RBRACKET = 63  # ]
    LPAREN = 64  # (
    RPAREN = 65  # )

    @property
    def is_scalar(self) -> bool:
        return self in SCALAR_KINDS

    @property
    def is_operator(self) -> bool:
        return self in OPERATOR_KINDS


SCALAR_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.STRING,
        TokenKind.INTEGER,
        TokenKind.UNSIGNED,
        TokenKind.FLOAT,
    }
)

OPERATOR_KINDS: Final[frozenset[TokenKind]] = frozenset(
    {
        TokenKind.PLUS,
        TokenKind.MINUS,
        TokenKind.STAR,
        TokenKind.SLASH,
        TokenKind.PERCENT,
    }
)

PUNCTUATION: Final[dict[str, TokenKind]] = {
    "=": TokenKind.EQUALS,
    ",": TokenKind.SEPARATOR,
    "[": TokenKind.LBRACKET,
    "]": TokenKind.RBRACKET,
    "{": TokenKind.LBRACE,
    "}": TokenKind.RBRACE,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

OPERATORS: Final[dict[str, TokenKind]] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "%": TokenKind.PERCENT,
}

_KIND_TEXT: Final[dict[TokenKind, str]] = {
    kind: text for text, kind in (PUNCTUATION | OPERATORS).items()
}

COMMENT_CHAR: Final[str] = "#"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexed token.

    `value` holds the identifier/string text or the parsed number; it is
    None for punctuation and operators.
    """

    kind: TokenKind
    range: TextRange
    value: str | int | float | None = None

    def describe(self) -> str:
        """Source-like rendering used in error messages."""
        match self.kind:
            case TokenKind.IDENTIFIER:
                return str(self.value)
            case TokenKind.STRING:
                return f'"{self.value}"'
            case TokenKind.INTEGER | TokenKind.FLOAT:
                return str(self.value)
            case TokenKind.UNSIGNED:
                return f"{self.value}u"
            case _:
                return _KIND_TEXT[self.kind]

# ASCII separators \x1c-\x1f are not whitespace here.
WHITESPACE: Final[frozenset[str]] = frozenset(" \t\n\r\x0b\x0c")
