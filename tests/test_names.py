import pytest

from parsecfg.names import is_valid_name, names_equal, sanitize_name

NAME_SAMPLES = (
    "",
    "   ",
    "Width",
    "  padded  ",
    "my key",
    "9lives",
    "123",
    "a-b.c",
    "café",
    "__init__",
    "\ttab\tname\n",
    "-",
    "_9",
    "x y z 1 2 3",
)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Width", "Width"),
        ("  padded  ", "padded"),
        ("", "_"),
        ("   ", "_"),
        ("my key", "my_key"),
        ("9lives", "_9lives"),
        ("a-b.c", "a_b_c"),
        ("café", "caf_"),
        ("Width2", "Width2"),
    ],
)
def test_sanitize_name(name: str, expected: str):
    assert sanitize_name(name) == expected


def test_sanitize_with_custom_replacement():
    assert sanitize_name("my key", "x") == "myxkey"
    assert sanitize_name("", "x") == "x"
    assert sanitize_name("a b", "-") == "a-b"


@pytest.mark.parametrize("replacement", ["", "ab", " ", "\t", "1"])
def test_sanitize_rejects_bad_replacement(replacement: str):
    with pytest.raises(ValueError):
        sanitize_name("name", replacement)


@pytest.mark.parametrize("name", NAME_SAMPLES)
@pytest.mark.parametrize("replacement", ["_", "x", "-"])
def test_sanitize_is_idempotent(name: str, replacement: str):
    once = sanitize_name(name, replacement)

    assert sanitize_name(once, replacement) == once


@pytest.mark.parametrize("name", NAME_SAMPLES)
def test_default_sanitize_produces_valid_names(name: str):
    assert is_valid_name(sanitize_name(name))


@pytest.mark.parametrize(
    ("name", "valid"),
    [
        ("", False),
        ("_", True),
        ("a1", True),
        ("A_b", True),
        ("1a", False),
        ("a b", False),
        ("a-b", False),
        ("café", False),
    ],
)
def test_is_valid_name(name: str, valid: bool):
    assert is_valid_name(name) is valid


def test_names_equal_ignores_case():
    assert names_equal("Width", "WIDTH")
    assert not names_equal("Width", "Height")
