"""Diagnostics."""

from parsecfg.diagnostics.codes import (
    IO_READ_FAILED,
    LEXER_INVALID_ENCODING,
    LEXER_INVALID_NUMBER,
    LEXER_MULTIPLE_DECIMAL_POINTS,
    LEXER_UNRECOGNIZED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    PARSER_ARRAY_KIND_MISMATCH,
    PARSER_DUPLICATE_NAME,
    PARSER_EXPECTED_TOKEN,
    PARSER_INVALID_NAME,
    PARSER_MISSING_CLOSING_DELIMITER,
    PARSER_MISSING_SECTION_HEADER,
    PARSER_NESTING_TOO_DEEP,
    PARSER_NOT_ENOUGH_TOKENS,
    PARSER_TRAILING_SEPARATOR,
    PARSER_UNEXPECTED_EOF,
    PARSER_UNEXPECTED_TOKEN,
    DiagnosticSpec,
)
from parsecfg.diagnostics.diagnostic import Diagnostic, Severity

__all__ = [
    "IO_READ_FAILED",
    "LEXER_INVALID_ENCODING",
    "LEXER_INVALID_NUMBER",
    "LEXER_MULTIPLE_DECIMAL_POINTS",
    "LEXER_UNRECOGNIZED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "PARSER_ARRAY_KIND_MISMATCH",
    "PARSER_DUPLICATE_NAME",
    "PARSER_EXPECTED_TOKEN",
    "PARSER_INVALID_NAME",
    "PARSER_MISSING_CLOSING_DELIMITER",
    "PARSER_MISSING_SECTION_HEADER",
    "PARSER_NESTING_TOO_DEEP",
    "PARSER_NOT_ENOUGH_TOKENS",
    "PARSER_TRAILING_SEPARATOR",
    "PARSER_UNEXPECTED_EOF",
    "PARSER_UNEXPECTED_TOKEN",
    "Diagnostic",
    "DiagnosticSpec",
    "Severity",
]
