"""Centralized cfg source cases used across lexer/parser/document tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap


@dataclass(frozen=True, slots=True)
class CfgCase:
    name: str
    source: str
    strict_should_parse: bool = True
    error_code: str | None = None


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


WINDOW_SOURCE = "[Size]\nWidth = 800u\nHeight = 600u\n[Position]\nX = 20\nY = 40"


DOCUMENT_CASES: tuple[CfgCase, ...] = (
    CfgCase(name="window_layout", source=WINDOW_SOURCE),
    CfgCase(name="empty_document", source=""),
    CfgCase(name="comments_only", source="# nothing here\n# still nothing\n"),
    CfgCase(name="empty_section", source="[Empty]\n"),
    CfgCase(
        name="every_value_kind",
        source=_dedent(
            """
            # Player profile
            [Player]
            Name = "Ada" " Lovelace"   # merged string
            Level = 42
            Gold = 1000u
            Speed = .75
            Tags = ["hero", "mage"]
            Scores = [10, 20, 30]
            Spawn = ("town", 4f, [1u, 2u])
            Stats = {
                Strength = 5,
                Inner = { Depth = 1.5 }
            }
            """
        ),
    ),
    CfgCase(
        name="keys_before_header",
        source="Width = 1\n[Size]\n",
        strict_should_parse=False,
        error_code="PARSER_MISSING_SECTION_HEADER",
    ),
    CfgCase(
        name="duplicate_section",
        source="[Size]\nW = 1\n[size]\nH = 2\n",
        strict_should_parse=False,
        error_code="PARSER_DUPLICATE_NAME",
    ),
    CfgCase(
        name="duplicate_key",
        source="[Size]\nW = 1\nw = 2\n",
        strict_should_parse=False,
        error_code="PARSER_DUPLICATE_NAME",
    ),
    CfgCase(
        name="trailing_comma_in_array",
        source="[A]\nX = [1, 2,]\n",
        strict_should_parse=False,
        error_code="PARSER_TRAILING_SEPARATOR",
    ),
    CfgCase(
        name="unterminated_string",
        source='[A]\nX = "open\n',
        strict_should_parse=False,
        error_code="LEXER_UNTERMINATED_STRING",
    ),
    CfgCase(
        name="negative_number",
        source="[A]\nX = -5\n",
        strict_should_parse=False,
        error_code="PARSER_UNEXPECTED_TOKEN",
    ),
    CfgCase(
        name="missing_value",
        source="[A]\nX =\n",
        strict_should_parse=False,
        error_code="PARSER_NOT_ENOUGH_TOKENS",
    ),
)


def cases_by_name() -> dict[str, CfgCase]:
    return {case.name: case for case in DOCUMENT_CASES}


def case_id(case: CfgCase) -> str:
    return case.name
