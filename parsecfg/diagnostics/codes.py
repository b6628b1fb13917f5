"""Diagnostic codes and messages."""

from dataclasses import dataclass
from typing import Final

from parsecfg.diagnostics.diagnostic import Diagnostic, Severity
from parsecfg.text import TextRange


@dataclass(frozen=True, slots=True)
class DiagnosticSpec:
    code: str
    message: str
    hint: str | None = None
    severity: Severity = "error"
    category: str | None = None

    def diagnostic(self, range: TextRange | None = None, message: str | None = None) -> Diagnostic:
        """Build a diagnostic from this spec, optionally overriding the message."""
        return Diagnostic(
            code=self.code,
            message=message if message is not None else self.message,
            range=range,
            severity=self.severity,
            hint=self.hint,
            category=self.category,
        )


LEXER_INVALID_ENCODING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_ENCODING",
    message="Unable to tokenize text containing multi-byte characters.",
    hint="Only ASCII source text is supported.",
    category="lexer",
)

LEXER_UNTERMINATED_STRING: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNTERMINATED_STRING",
    message="String has no ending quote.",
    hint="Close the string with a double quote.",
    category="lexer",
)

LEXER_MULTIPLE_DECIMAL_POINTS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_MULTIPLE_DECIMAL_POINTS",
    message="Number has multiple decimal points.",
    category="lexer",
)

LEXER_INVALID_NUMBER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_INVALID_NUMBER",
    message="Failed parsing number.",
    hint="Integers must fit in 64 bits; unsigned literals take a `u` suffix.",
    category="lexer",
)

LEXER_UNRECOGNIZED_CHARACTER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="LEXER_UNRECOGNIZED_CHARACTER",
    message="Unrecognised token.",
    category="lexer",
)

PARSER_UNEXPECTED_EOF: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_EOF",
    message="Unexpected end of tokens.",
    category="parser",
)

PARSER_UNEXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_UNEXPECTED_TOKEN",
    message="Unexpected token.",
    category="parser",
)

PARSER_EXPECTED_TOKEN: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_EXPECTED_TOKEN",
    message="Expected token.",
    category="parser",
)

PARSER_NOT_ENOUGH_TOKENS: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NOT_ENOUGH_TOKENS",
    message="Not enough tokens left to load Key.",
    hint="A key needs a name, `=` and a value.",
    category="parser",
)

PARSER_ARRAY_KIND_MISMATCH: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_ARRAY_KIND_MISMATCH",
    message="Array elements must all have the same type.",
    hint="Use a tuple `( ... )` to mix value types.",
    category="parser",
)

PARSER_MISSING_CLOSING_DELIMITER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_CLOSING_DELIMITER",
    message="Missing closing delimiter.",
    category="parser",
)

PARSER_TRAILING_SEPARATOR: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_TRAILING_SEPARATOR",
    message="Separator must be followed by another element.",
    hint="Remove the trailing comma or parse in permissive mode.",
    category="parser",
)

PARSER_DUPLICATE_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_DUPLICATE_NAME",
    message="Duplicate name.",
    hint="Names are compared case-insensitively.",
    category="parser",
)

PARSER_INVALID_NAME: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_INVALID_NAME",
    message="Invalid name.",
    category="parser",
)

PARSER_MISSING_SECTION_HEADER: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_MISSING_SECTION_HEADER",
    message="Section header not found.",
    hint="Start the document with a header like `[Section]`.",
    category="parser",
)

PARSER_NESTING_TOO_DEEP: Final[DiagnosticSpec] = DiagnosticSpec(
    code="PARSER_NESTING_TOO_DEEP",
    message="Values are nested too deeply.",
    category="parser",
)

IO_READ_FAILED: Final[DiagnosticSpec] = DiagnosticSpec(
    code="IO_READ_FAILED",
    message="Cannot read document from file.",
    category="io",
)
