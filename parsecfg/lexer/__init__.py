"""Lexer."""

from parsecfg.lexer.lexer import Lexer, NumberType, dump_tokens, tokenize
from parsecfg.lexer.token_stream import TokenStream
from parsecfg.lexer.tokens import (
    COMMENT_CHAR,
    OPERATOR_KINDS,
    SCALAR_KINDS,
    Token,
    TokenKind,
)

__all__ = [
    "COMMENT_CHAR",
    "OPERATOR_KINDS",
    "SCALAR_KINDS",
    "Lexer",
    "NumberType",
    "Token",
    "TokenKind",
    "TokenStream",
    "dump_tokens",
    "tokenize",
]
