"""Exceptions raised by the tokenizer, the parser and the document loader."""

from __future__ import annotations

from parsecfg.diagnostics import Diagnostic, DiagnosticSpec
from parsecfg.text import TextRange, line_column


class CfgError(Exception):
    """Base error. Carries the diagnostic that describes the failure."""

    def __init__(self, diagnostic: Diagnostic) -> None:
        super().__init__(diagnostic.message)
        self.diagnostic = diagnostic

    @classmethod
    def from_spec(
        cls,
        spec: DiagnosticSpec,
        range: TextRange | None = None,
        message: str | None = None,
    ) -> CfgError:
        return cls(spec.diagnostic(range=range, message=message))

    @property
    def code(self) -> str:
        return self.diagnostic.code

    @property
    def range(self) -> TextRange | None:
        return self.diagnostic.range

    def line_column(self, text: str) -> tuple[int, int] | None:
        """1-based line and column of the error in `text`, if the error has a range."""
        if self.diagnostic.range is None:
            return None
        return line_column(text, self.diagnostic.range.start)

    def get_context(self, text: str, span: int = 40) -> str:
        """Returns a pretty string pinpointing the error in the text,
        with span amount of context characters around it.
        """
        if self.diagnostic.range is None:
            return ""
        pos = self.diagnostic.range.start
        start = max(pos - span, 0)
        end = pos + span
        before = text[start:pos].rsplit("\n", 1)[-1]
        after = text[pos:end].split("\n", 1)[0]
        return before + after + "\n" + " " * len(before.expandtabs()) + "^\n"

    def __str__(self) -> str:
        if self.diagnostic.range is None:
            return self.diagnostic.message
        return f"{self.diagnostic.message} (at offset {self.diagnostic.range.start})"


class LexError(CfgError):
    """Malformed source text."""


class ParseError(CfgError):
    """Token stream does not follow the grammar."""
