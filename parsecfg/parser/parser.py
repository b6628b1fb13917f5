"""Recursive-descent parser state."""

from collections.abc import Iterator
from contextlib import contextmanager

from parsecfg.diagnostics import (
    PARSER_NESTING_TOO_DEEP,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from parsecfg.errors import ParseError
from parsecfg.lexer.token_stream import TokenStream
from parsecfg.lexer.tokens import Token, TokenKind
from parsecfg.options import ParserOptions
from parsecfg.text import TextRange


class Parser:
    """Cursor over a token stream shared by every grammar routine of one parse."""

    def __init__(self, stream: TokenStream, options: ParserOptions | None = None) -> None:
        self._stream = stream
        self._options = options or ParserOptions()
        self._depth = 0

    @property
    def stream(self) -> TokenStream:
        return self._stream

    @property
    def options(self) -> ParserOptions:
        return self._options

    @property
    def is_empty(self) -> bool:
        return self._stream.is_empty

    def peek(self) -> Token | None:
        return self._stream.peek()

    def nth(self, n: int) -> TokenKind | None:
        return self._stream.nth_kind(n)

    def bump(self) -> Token:
        token = self._stream.pop()
        if token is None:
            raise self.error(PARSER_UNEXPECTED_EOF, self._stream.end_range)
        return token

    def expect(self, kind: TokenKind, message: str | None = None) -> Token:
        return self._stream.expect(kind, message)

    def error(
        self,
        spec: DiagnosticSpec,
        range: TextRange | None = None,
        message: str | None = None,
    ) -> ParseError:
        return ParseError(spec.diagnostic(range=range, message=message))

    def unexpected(self, token: Token, expected: str) -> ParseError:
        return self.error(
            PARSER_UNEXPECTED_TOKEN,
            token.range,
            f"Unexpected token: {token.describe()}. Expected {expected}.",
        )

    @contextmanager
    def nested(self, opening: Token) -> Iterator[None]:
        if self._depth >= self._options.max_depth:
            raise self.error(
                PARSER_NESTING_TOO_DEEP,
                opening.range,
                f"Values are nested more than {self._options.max_depth} levels deep.",
            )
        self._depth += 1
        try:
            yield
        finally:
            self._depth -= 1
