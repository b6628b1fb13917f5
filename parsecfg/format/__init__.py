"""Rendering back to source text."""

from parsecfg.format.render import (
    format_document,
    format_key,
    format_section,
    format_value,
)

__all__ = [
    "format_document",
    "format_key",
    "format_section",
    "format_value",
]
