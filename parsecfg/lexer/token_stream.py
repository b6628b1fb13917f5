"""Front-poppable token queue consumed by the parser."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from parsecfg.diagnostics import PARSER_EXPECTED_TOKEN, PARSER_UNEXPECTED_EOF
from parsecfg.errors import ParseError
from parsecfg.lexer.tokens import Token, TokenKind
from parsecfg.text import TextRange


class TokenStream:
    """Ordered token queue with one token of lookahead and n-ahead peeking.

    Consumption is strictly left to right; `push_front` exists only for
    callers that need to hand a token back before it was interpreted.
    """

    def __init__(self, tokens: Iterable[Token] = ()) -> None:
        self._tokens: deque[Token] = deque(tokens)
        self._last_range = TextRange.empty(0)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[Token]:
        return iter(self._tokens)

    def __repr__(self) -> str:
        return f"TokenStream({list(self._tokens)!r})"

    @property
    def is_empty(self) -> bool:
        return not self._tokens

    @property
    def end_range(self) -> TextRange:
        """Empty range just past the last consumed token, for end-of-input errors."""
        return TextRange.empty(self._last_range.end)

    def peek(self) -> Token | None:
        if not self._tokens:
            return None
        return self._tokens[0]

    def nth(self, n: int) -> Token | None:
        if n < 0 or n >= len(self._tokens):
            return None
        return self._tokens[n]

    def nth_kind(self, n: int) -> TokenKind | None:
        token = self.nth(n)
        return token.kind if token is not None else None

    def peek_to(self, count: int) -> list[Token]:
        count = min(max(count, 0), len(self._tokens))
        return [self._tokens[i] for i in range(count)]

    def at(self, kind: TokenKind) -> bool:
        return bool(self._tokens) and self._tokens[0].kind == kind

    def check(self, *kinds: TokenKind) -> bool:
        return bool(self._tokens) and self._tokens[0].kind in kinds

    def pop(self) -> Token | None:
        if not self._tokens:
            return None
        token = self._tokens.popleft()
        self._last_range = token.range
        return token

    def push_front(self, token: Token) -> None:
        self._tokens.appendleft(token)

    def eat(self, kind: TokenKind) -> bool:
        if self.at(kind):
            self.pop()
            return True
        return False

    def expect(self, kind: TokenKind, message: str | None = None) -> Token:
        """Pop the next token if it has `kind`, else raise ParseError."""
        token = self.peek()
        if token is None:
            raise ParseError.from_spec(
                PARSER_UNEXPECTED_EOF,
                self.end_range,
                message or f"Expected {kind.name} but there are no tokens left.",
            )
        if token.kind != kind:
            raise ParseError.from_spec(
                PARSER_EXPECTED_TOKEN,
                token.range,
                message or f"Unexpected token: {token.describe()}. Expected {kind.name}.",
            )
        self.pop()
        return token

    def clear(self) -> None:
        self._tokens.clear()
