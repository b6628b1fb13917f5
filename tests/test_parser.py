import pytest

from parsecfg import (
    FloatArray,
    FloatValue,
    IntegerArray,
    IntegerValue,
    Key,
    ParseError,
    ParseMode,
    ParserOptions,
    StringArray,
    StringValue,
    TableValue,
    TupleValue,
    UnsignedArray,
    UnsignedValue,
    parse_key,
    parse_value,
)
from parsecfg.lexer import TokenKind, tokenize
from parsecfg.text import TextRange
from tests._debug import debug_dump_diagnostic


def parse_error(text: str, options: ParserOptions | None = None) -> ParseError:
    with pytest.raises(ParseError) as info:
        parse_value(text, options)
    debug_dump_diagnostic("parse_error", info.value.diagnostic, text)
    return info.value


PERMISSIVE = ParserOptions.for_mode(ParseMode.PERMISSIVE)


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("500", IntegerValue(500)),
        ("0.67", FloatValue(0.67)),
        ("400i", IntegerValue(400)),
        ("300u", UnsignedValue(300)),
        ("200f", FloatValue(200.0)),
        (".5", FloatValue(0.5)),
        ('"Ban" "ana"', StringValue("Banana")),
    ],
)
def test_scalars(text: str, expected):
    assert parse_value(text) == expected


def test_parse_value_consumes_exactly_one_value():
    stream = tokenize("1 [2] x")

    assert parse_value(stream) == IntegerValue(1)
    assert parse_value(stream) == IntegerArray((2,))
    assert len(stream) == 1
    assert stream.nth_kind(0) == TokenKind.IDENTIFIER


def test_empty_input():
    error = parse_error("")

    assert error.code == "PARSER_UNEXPECTED_EOF"


def test_value_cannot_start_with_identifier_or_operator():
    assert parse_error("abc").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("-5").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("]").code == "PARSER_UNEXPECTED_TOKEN"


def test_homogeneous_arrays():
    assert parse_value("[1, 2, 3]") == IntegerArray((1, 2, 3))
    assert parse_value("[1u, 2u]") == UnsignedArray((1, 2))
    assert parse_value("[1.5, .5, 2f]") == FloatArray((1.5, 0.5, 2.0))
    assert parse_value('["a" "b", "c"]') == StringArray(("ab", "c"))


def test_empty_array_is_string_array():
    assert parse_value("[]") == StringArray(())


def test_array_kind_mismatch():
    error = parse_error("[1, 2.5]")

    assert error.code == "PARSER_ARRAY_KIND_MISMATCH"
    assert error.range == TextRange(4, 7)


def test_array_rejects_nested_values():
    assert parse_error("[(1)]").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("[1, [2]]").code == "PARSER_UNEXPECTED_TOKEN"


def test_array_separator_discipline():
    assert parse_error("[1 2]").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("[1, , 2]").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("[,1]").code == "PARSER_UNEXPECTED_TOKEN"


def test_array_trailing_separator():
    error = parse_error("[1,]")

    assert error.code == "PARSER_TRAILING_SEPARATOR"
    assert error.range == TextRange(2, 3)
    assert parse_value("[1,]", PERMISSIVE) == IntegerArray((1,))


def test_array_missing_close():
    error = parse_error("[1, 2")

    assert error.code == "PARSER_MISSING_CLOSING_DELIMITER"
    assert error.range == TextRange(0, 5)
    assert parse_error("[").code == "PARSER_MISSING_CLOSING_DELIMITER"


def test_heterogeneous_tuple():
    assert parse_value('("x", 4f)') == TupleValue((StringValue("x"), FloatValue(4.0)))


def test_nested_tuple():
    value = parse_value("((1), [2u], {a = 3})")

    assert value == TupleValue(
        (
            TupleValue((IntegerValue(1),)),
            UnsignedArray((2,)),
            TableValue((Key("a", IntegerValue(3)),)),
        )
    )


def test_empty_tuple():
    assert parse_value("()") == TupleValue(())


def test_tuple_errors():
    assert parse_error("(1 2)").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("(,)").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("(1,)").code == "PARSER_TRAILING_SEPARATOR"
    assert parse_error("(1").code == "PARSER_MISSING_CLOSING_DELIMITER"
    assert parse_value("(1,)", PERMISSIVE) == TupleValue((IntegerValue(1),))


def test_table_keeps_insertion_order():
    value = parse_value("{b = 2, a = 1}")

    assert isinstance(value, TableValue)
    assert [key.name for key in value.keys] == ["b", "a"]
    assert value.get("A") == Key("a", IntegerValue(1))
    assert "B" in value
    assert len(value) == 2


def test_table_duplicate_names():
    error = parse_error("{a=1, a=2}")

    assert error.code == "PARSER_DUPLICATE_NAME"
    assert error.range == TextRange(6, 7)
    assert parse_error("{Width=1, WIDTH=2}").code == "PARSER_DUPLICATE_NAME"


def test_same_name_in_nested_tables_is_allowed():
    value = parse_value("{a = {a = 1}}")

    assert value == TableValue((Key("a", TableValue((Key("a", IntegerValue(1)),))),))


def test_empty_table():
    assert parse_value("{}") == TableValue(())


def test_table_errors():
    assert parse_error("{a 1}").code == "PARSER_EXPECTED_TOKEN"
    assert parse_error("{a = 1 b = 2}").code == "PARSER_UNEXPECTED_TOKEN"
    assert parse_error("{a = 1,}").code == "PARSER_TRAILING_SEPARATOR"
    assert parse_error("{a = 1").code == "PARSER_MISSING_CLOSING_DELIMITER"
    assert parse_value("{a = 1,}", PERMISSIVE) == TableValue((Key("a", IntegerValue(1)),))


def test_nesting_limit():
    options = ParserOptions(max_depth=2)

    assert parse_value("((1))", options) == TupleValue((TupleValue((IntegerValue(1),)),))
    assert parse_error("(((1)))", options).code == "PARSER_NESTING_TOO_DEEP"
    assert parse_error("(" * 200 + ")" * 200).code == "PARSER_NESTING_TOO_DEEP"


def test_parse_key():
    assert parse_key("Width = 800u") == Key("Width", UnsignedValue(800))


def test_parse_key_leaves_following_tokens():
    stream = tokenize("a = 1 b = 2")

    assert parse_key(stream) == Key("a", IntegerValue(1))
    assert parse_key(stream) == Key("b", IntegerValue(2))
    assert stream.is_empty


def test_parse_key_errors():
    with pytest.raises(ParseError) as info:
        parse_key("a =")
    assert info.value.code == "PARSER_NOT_ENOUGH_TOKENS"

    with pytest.raises(ParseError) as info:
        parse_key("= = 1")
    assert info.value.code == "PARSER_EXPECTED_TOKEN"

    with pytest.raises(ParseError) as info:
        parse_key("a b 1")
    assert info.value.code == "PARSER_EXPECTED_TOKEN"


def test_options_and_mode_are_exclusive():
    with pytest.raises(ValueError, match="either options or mode"):
        parse_value("1", ParserOptions(), mode=ParseMode.STRICT)


def test_mode_shortcut():
    assert parse_value("[1,]", mode=ParseMode.PERMISSIVE) == IntegerArray((1,))
