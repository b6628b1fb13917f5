"""High-level parse entrypoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from parsecfg.lexer import TokenStream, tokenize
from parsecfg.model import Key, Value
from parsecfg.options import ParseMode, ParserOptions, resolve_options
from parsecfg.parser import grammar
from parsecfg.parser.parser import Parser

if TYPE_CHECKING:
    from parsecfg.document import Document


def _stream_for(source: TokenStream | str, options: ParserOptions) -> TokenStream:
    if isinstance(source, str):
        return tokenize(source, options)
    return source


def parse_value(
    source: TokenStream | str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Value:
    """Parse one value from a token stream (consumed in place) or from text."""
    resolved_options = resolve_options(options=options, mode=mode)
    return grammar.parse_value(Parser(_stream_for(source, resolved_options), resolved_options))


def parse_key(
    source: TokenStream | str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Key:
    """Parse `name = value` from a token stream (consumed in place) or from text."""
    resolved_options = resolve_options(options=options, mode=mode)
    return grammar.parse_key(Parser(_stream_for(source, resolved_options), resolved_options))


def parse_document(
    text: str,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    from parsecfg.document import Document

    return Document.parse(text, options=options, mode=mode)
