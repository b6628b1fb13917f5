"""Typed value tree produced by the parser."""

from __future__ import annotations

from dataclasses import dataclass, field
import math
from typing import ClassVar, TypeAlias

from parsecfg.names import is_valid_name, names_equal, sanitize_name

I64_MIN = -(2**63)
I64_MAX = 2**63 - 1
U64_MAX = 2**64 - 1


def _check_integer(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not I64_MIN <= value <= I64_MAX:
        raise ValueError(f"Integer {value} does not fit in 64 bits")


def _check_unsigned(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"Expected int, got {type(value).__name__}")
    if not 0 <= value <= U64_MAX:
        raise ValueError(f"Unsigned {value} does not fit in 64 bits")


def _check_float(value: float) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f"Expected float, got {type(value).__name__}")
    if not math.isfinite(value):
        raise ValueError(f"Float {value} is not finite")


class _Rendered:
    __slots__ = ()

    def __str__(self) -> str:
        from parsecfg.format import format_value

        return format_value(self)


@dataclass(frozen=True, slots=True)
class StringValue(_Rendered):
    value: str

    kind: ClassVar[str] = "string"


@dataclass(frozen=True, slots=True)
class IntegerValue(_Rendered):
    """Signed 64-bit integer."""

    value: int

    kind: ClassVar[str] = "integer"

    def __post_init__(self) -> None:
        _check_integer(self.value)


@dataclass(frozen=True, slots=True)
class UnsignedValue(_Rendered):
    """Unsigned 64-bit integer."""

    value: int

    kind: ClassVar[str] = "unsigned"

    def __post_init__(self) -> None:
        _check_unsigned(self.value)


@dataclass(frozen=True, slots=True)
class FloatValue(_Rendered):
    value: float

    kind: ClassVar[str] = "float"

    def __post_init__(self) -> None:
        _check_float(self.value)
        object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True, slots=True)
class StringArray(_Rendered):
    items: tuple[str, ...] = ()

    kind: ClassVar[str] = "string"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class IntegerArray(_Rendered):
    items: tuple[int, ...] = ()

    kind: ClassVar[str] = "integer"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        for item in self.items:
            _check_integer(item)


@dataclass(frozen=True, slots=True)
class UnsignedArray(_Rendered):
    items: tuple[int, ...] = ()

    kind: ClassVar[str] = "unsigned"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        for item in self.items:
            _check_unsigned(item)


@dataclass(frozen=True, slots=True)
class FloatArray(_Rendered):
    items: tuple[float, ...] = ()

    kind: ClassVar[str] = "float"

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))
        for item in self.items:
            _check_float(item)
        object.__setattr__(self, "items", tuple(float(item) for item in self.items))


@dataclass(frozen=True, slots=True)
class TupleValue(_Rendered):
    """Heterogeneous ordered list of values; may nest."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))


@dataclass(frozen=True, slots=True)
class TableValue(_Rendered):
    """Ordered keys with case-insensitively unique names.

    The key tuple is fixed but the keys themselves are mutable, so names are
    only checked for uniqueness at construction. Tables compare by value and
    are not hashable.
    """

    keys: tuple[Key, ...] = ()

    __hash__ = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        keys = tuple(self.keys)
        seen: set[str] = set()
        for key in keys:
            folded = key.name.lower()
            if folded in seen:
                raise ValueError(f"Duplicate key {key.name!r} in table")
            seen.add(folded)
        object.__setattr__(self, "keys", keys)

    def __len__(self) -> int:
        return len(self.keys)

    def get(self, name: str) -> Key | None:
        for key in self.keys:
            if names_equal(key.name, name):
                return key
        return None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.get(name) is not None


@dataclass(slots=True)
class Key:
    """A named value. The name is sanitized on construction and rename."""

    name: str = "_"
    value: Value = field(default_factory=lambda: StringValue(""))

    def __post_init__(self) -> None:
        self.name = sanitize_name(self.name)

    def rename(self, name: str, replacement: str = "_") -> None:
        self.name = sanitize_name(name, replacement)

    @property
    def is_valid(self) -> bool:
        return is_valid_name(self.name)

    def __str__(self) -> str:
        from parsecfg.format import format_key

        return format_key(self)


ScalarValue: TypeAlias = StringValue | IntegerValue | UnsignedValue | FloatValue
ArrayValue: TypeAlias = StringArray | IntegerArray | UnsignedArray | FloatArray
Value: TypeAlias = ScalarValue | ArrayValue | TupleValue | TableValue


__all__ = [
    "ArrayValue",
    "FloatArray",
    "FloatValue",
    "IntegerArray",
    "IntegerValue",
    "Key",
    "ScalarValue",
    "StringArray",
    "StringValue",
    "TableValue",
    "TupleValue",
    "UnsignedArray",
    "UnsignedValue",
    "Value",
]
