"""Source offsets and ranges."""

from parsecfg.text.text import TextRange, line_column, slice_text_range

__all__ = [
    "TextRange",
    "line_column",
    "slice_text_range",
]
