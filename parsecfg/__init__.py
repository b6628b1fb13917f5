"""Parser and renderer for a small sectioned configuration format."""

from parsecfg.document import Document, Section, load
from parsecfg.errors import CfgError, LexError, ParseError
from parsecfg.format import format_document, format_key, format_section, format_value
from parsecfg.lexer import Token, TokenKind, TokenStream, tokenize
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
from parsecfg.names import is_valid_name, sanitize_name
from parsecfg.options import ParseMode, ParserOptions
from parsecfg.parser import parse_document, parse_key, parse_value

__version__ = "0.1.0"

__all__ = [
    "CfgError",
    "Document",
    "FloatArray",
    "FloatValue",
    "IntegerArray",
    "IntegerValue",
    "Key",
    "LexError",
    "ParseError",
    "ParseMode",
    "ParserOptions",
    "Section",
    "StringArray",
    "StringValue",
    "TableValue",
    "Token",
    "TokenKind",
    "TokenStream",
    "TupleValue",
    "UnsignedArray",
    "UnsignedValue",
    "Value",
    "format_document",
    "format_key",
    "format_section",
    "format_value",
    "is_valid_name",
    "load",
    "parse_document",
    "parse_key",
    "parse_value",
    "sanitize_name",
    "tokenize",
]
