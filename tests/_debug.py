"""Shared debug printers for lexer/parser/document tests."""

from __future__ import annotations

import os

from parsecfg.diagnostics import Diagnostic
from parsecfg.lexer import Token
from parsecfg.text import slice_text_range


def _flag(name: str) -> bool:
    return os.getenv(name, "0").lower() in {"1", "true", "yes", "on"}


PRINT_TOKENS = _flag("PRINT_TOKENS")
PRINT_SOURCE = _flag("PRINT_SOURCE")
PRINT_DIAGNOSTICS = _flag("PRINT_DIAGNOSTICS")
PRINT_RENDERED = _flag("PRINT_RENDERED")


def debug_print_source(test_name: str, source: str) -> None:
    if not PRINT_SOURCE:
        return
    print(f"\n===== {test_name} SOURCE =====")
    print(source)


def debug_dump_tokens(test_name: str, source: str, tokens: list[Token]) -> None:
    if not PRINT_TOKENS:
        return
    debug_print_source(test_name, source)
    print(f"\n===== {test_name} TOKENS =====")
    for index, tok in enumerate(tokens):
        text = slice_text_range(source, tok.range)
        print(f"{index:03d} {tok.kind.name:<12} range={tok.range.as_tuple()} value={tok.value!r} text={text!r}")


def debug_dump_diagnostic(test_name: str, diagnostic: Diagnostic, source: str | None = None) -> None:
    if not PRINT_DIAGNOSTICS:
        return
    if source is not None:
        debug_print_source(test_name, source)
    print(f"===== {test_name} DIAGNOSTIC =====")
    print(diagnostic)


def debug_print_rendered(test_name: str, rendered: str) -> None:
    if not PRINT_RENDERED:
        return
    print(f"\n===== {test_name} RENDERED =====")
    print(rendered)
