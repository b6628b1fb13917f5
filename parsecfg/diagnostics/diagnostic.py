"""Diagnostics core types."""

from dataclasses import dataclass
from typing import Literal

from parsecfg.text import TextRange

Severity = Literal["error", "warning"]


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the lexer and parser."""

    code: str
    message: str
    range: TextRange | None = None
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
