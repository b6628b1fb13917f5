"""Render value trees, sections and documents back to source text.

The output re-parses to an equal tree; comments and original spacing are
not preserved.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import TYPE_CHECKING

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

if TYPE_CHECKING:
    from parsecfg.document import Document, Section

INDENT = "\t"


def format_value(value: Value, depth: int = 0) -> str:
    match value:
        case StringValue(text):
            return _format_string(text)
        case IntegerValue(number):
            return _format_integer(number)
        case UnsignedValue(number):
            return f"{number}u"
        case FloatValue(number):
            return _format_float(number)
        case StringArray(items):
            return _format_array(_format_string(item) for item in items)
        case IntegerArray(items):
            return _format_array(_format_integer(item) for item in items)
        case UnsignedArray(items):
            return _format_array(f"{item}u" for item in items)
        case FloatArray(items):
            return _format_array(_format_float(item) for item in items)
        case TupleValue(items):
            return "(" + ", ".join(format_value(item, depth) for item in items) + ")"
        case TableValue(keys):
            if not keys:
                return "{}"
            inner = INDENT * (depth + 1)
            body = ",\n".join(inner + format_key(key, depth + 1) for key in keys)
            return "{\n" + body + "\n" + INDENT * depth + "}"
        case _:
            raise TypeError(f"Cannot format {type(value).__name__}")


def format_key(key: Key, depth: int = 0) -> str:
    return f"{key.name} = {format_value(key.value, depth)}"


def format_section(section: Section) -> str:
    lines = [f"[{section.name}]"]
    lines.extend(format_key(key) for key in section)
    return "\n".join(lines)


def format_document(document: Document) -> str:
    if document.is_empty:
        return ""
    return "\n\n".join(format_section(section) for section in document) + "\n"


def _format_array(items: Iterable[str]) -> str:
    return "[" + ", ".join(items) + "]"


def _format_string(text: str) -> str:
    if '"' in text:
        raise ValueError(f"String {text!r} contains a double quote and has no textual form")
    return f'"{text}"'


def _format_integer(number: int) -> str:
    if number < 0:
        raise ValueError(f"Negative integer {number} has no textual form")
    return str(number)


def _format_float(number: float) -> str:
    if number < 0:
        raise ValueError(f"Negative float {number} has no textual form")
    text = repr(abs(number))
    if "e" in text:
        text = format(Decimal(text), "f")
    if "." not in text:
        text += ".0"
    return text
