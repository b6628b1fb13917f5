"""Value tree model."""

from parsecfg.model.model import (
    ArrayValue,
    FloatArray,
    FloatValue,
    IntegerArray,
    IntegerValue,
    Key,
    ScalarValue,
    StringArray,
    StringValue,
    TableValue,
    TupleValue,
    UnsignedArray,
    UnsignedValue,
    Value,
)

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
