"""Identifier validation and sanitization for key and section names."""

from __future__ import annotations


def _is_name_start(ch: str) -> bool:
    return ch == "_" or (ch.isascii() and ch.isalpha())


def _is_name_char(ch: str) -> bool:
    return _is_name_start(ch) or (ch.isascii() and ch.isdigit())


def is_valid_name(name: str) -> bool:
    """True if `name` is non-empty, starts with a letter or `_` and continues
    with letters, digits or `_` (ASCII, any case)."""
    if not name:
        return False
    return _is_name_start(name[0]) and all(_is_name_char(ch) for ch in name[1:])


def sanitize_name(name: str, replacement: str = "_") -> str:
    """Return `name` with every invalid character replaced by `replacement`.

    Surrounding whitespace is trimmed and an empty result becomes
    `replacement` alone. A leading digit is kept but prefixed with `_`.
    The result does not change when sanitized again.
    """
    if len(replacement) != 1 or replacement.isspace() or replacement.isdigit():
        raise ValueError(f"Replacement must be one non-space, non-digit character, got {replacement!r}")

    trimmed = name.strip()
    if not trimmed:
        return replacement

    result = "".join(ch if _is_name_char(ch) else replacement for ch in trimmed)
    if result[0].isascii() and result[0].isdigit():
        result = "_" + result
    return result


def names_equal(left: str, right: str) -> bool:
    """Case-insensitive name comparison used for lookups and duplicate checks."""
    return left.lower() == right.lower()
