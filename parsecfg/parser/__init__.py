"""Parser infrastructure (parser state + value grammar + entrypoints)."""

from parsecfg.parser.entry import parse_document, parse_key, parse_value
from parsecfg.parser.grammar import is_section_header, parse_section_header
from parsecfg.parser.parser import Parser

__all__ = [
    "Parser",
    "is_section_header",
    "parse_document",
    "parse_key",
    "parse_section_header",
    "parse_value",
]
