"""Sections and documents: ordered, uniquely-named collections over parsed keys."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from parsecfg.diagnostics import (
    IO_READ_FAILED,
    PARSER_DUPLICATE_NAME,
    PARSER_INVALID_NAME,
    PARSER_MISSING_SECTION_HEADER,
)
from parsecfg.errors import CfgError
from parsecfg.lexer import TokenStream, tokenize
from parsecfg.model import Key
from parsecfg.names import is_valid_name, names_equal, sanitize_name
from parsecfg.options import ParseMode, ParserOptions, resolve_options
from parsecfg.parser import grammar
from parsecfg.parser.parser import Parser
from parsecfg.utils import logger


class Section:
    """A named section containing an ordered collection of keys."""

    __slots__ = ("_name", "_keys")

    def __init__(self, name: str = "", keys: Iterable[Key] = ()) -> None:
        self._name = sanitize_name(name)
        self._keys: list[Key] = list(keys)

    @classmethod
    def from_stream(cls, stream: TokenStream, options: ParserOptions | None = None) -> Section:
        """Parse `[name]` followed by keys, up to the next header or the end of the stream."""
        return cls._parse(Parser(stream, options))

    @classmethod
    def _parse(cls, parser: Parser) -> Section:
        if not grammar.is_section_header(parser):
            token = parser.peek()
            raise parser.error(
                PARSER_MISSING_SECTION_HEADER,
                token.range if token is not None else parser.stream.end_range,
                "Failed loading section: Section header not found.",
            )

        header = grammar.parse_section_header(parser)
        section_name = str(header.value)
        keys: list[Key] = []
        while not parser.is_empty and not grammar.is_section_header(parser):
            start = parser.peek()
            key = grammar.parse_key(parser)
            grammar.check_key(parser, key, keys, start, f"section {section_name!r}")
            keys.append(key)

        return cls(section_name, keys)

    @property
    def name(self) -> str:
        return self._name

    def rename(self, name: str, replacement: str = "_") -> None:
        """Renames the section. The name is sanitized, see `sanitize_name`."""
        self._name = sanitize_name(name, replacement)

    @property
    def is_valid(self) -> bool:
        return is_valid_name(self._name)

    @property
    def is_empty(self) -> bool:
        return not self._keys

    @property
    def keys(self) -> tuple[Key, ...]:
        return tuple(self._keys)

    def __len__(self) -> int:
        return len(self._keys)

    def __iter__(self) -> Iterator[Key]:
        return iter(self._keys)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.index_of(name) is not None

    def __getitem__(self, name: str) -> Key:
        key = self.get(name)
        if key is None:
            raise KeyError(name)
        return key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Section):
            return NotImplemented
        return self._name == other._name and self._keys == other._keys

    def __repr__(self) -> str:
        return f"Section(name={self._name!r}, keys={self._keys!r})"

    def __str__(self) -> str:
        from parsecfg.format import format_section

        return format_section(self)

    def index_of(self, name: str) -> int | None:
        for index, key in enumerate(self._keys):
            if names_equal(key.name, name):
                return index
        return None

    def contains(self, name: str) -> bool:
        return self.index_of(name) is not None

    def get(self, name: str) -> Key | None:
        index = self.index_of(name)
        return self._keys[index] if index is not None else None

    def get_at(self, index: int) -> Key | None:
        if 0 <= index < len(self._keys):
            return self._keys[index]
        return None

    def push(self, key: Key) -> bool:
        """Append `key`. Returns False if it is invalid or its name is taken."""
        if not key.is_valid or self.contains(key.name):
            return False
        self._keys.append(key)
        return True

    def insert(self, index: int, key: Key) -> bool:
        """Insert `key` at `index` (0..len). Returns False if out of range, invalid or taken."""
        if not 0 <= index <= len(self._keys) or not key.is_valid or self.contains(key.name):
            return False
        self._keys.insert(index, key)
        return True

    def remove(self, name: str) -> bool:
        index = self.index_of(name)
        if index is None:
            return False
        del self._keys[index]
        return True

    def remove_at(self, index: int) -> None:
        if 0 <= index < len(self._keys):
            del self._keys[index]

    def clear(self) -> None:
        self._keys.clear()


class Document:
    """A cfg document containing an ordered collection of sections."""

    __slots__ = ("_sections",)

    def __init__(self, sections: Iterable[Section] = ()) -> None:
        self._sections: list[Section] = list(sections)

    @classmethod
    def from_stream(cls, stream: TokenStream, options: ParserOptions | None = None) -> Document:
        """Parse sections until the stream is exhausted."""
        parser = Parser(stream, options)
        sections: list[Section] = []
        while not parser.is_empty:
            start = parser.peek()
            section = Section._parse(parser)
            if not section.is_valid:
                raise parser.error(
                    PARSER_INVALID_NAME,
                    start.range,
                    f"Cannot parse Document from tokens: The section {section.name!r} is invalid.",
                )
            for other in sections:
                if names_equal(other.name, section.name):
                    raise parser.error(
                        PARSER_DUPLICATE_NAME,
                        start.range,
                        f"Cannot parse Document from tokens: A section with the name {other.name!r} already exists.",
                    )
            sections.append(section)

        logger.debug("Parsed document with %d sections", len(sections))
        return cls(sections)

    @classmethod
    def parse(
        cls,
        text: str,
        options: ParserOptions | None = None,
        *,
        mode: ParseMode | None = None,
    ) -> Document:
        """Tokenize and parse `text`."""
        resolved_options = resolve_options(options=options, mode=mode)
        return cls.from_stream(tokenize(text, resolved_options), resolved_options)

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        options: ParserOptions | None = None,
        *,
        mode: ParseMode | None = None,
    ) -> Document:
        """Read a UTF-8 file and parse it. Read failures become CfgError."""
        logger.debug("Loading document from %s", path)
        return cls.parse(read_source(path), options=options, mode=mode)

    def save(self, path: str | Path) -> None:
        Path(path).write_text(str(self), encoding="utf-8")

    @property
    def sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def is_empty(self) -> bool:
        return not self._sections

    def __len__(self) -> int:
        return len(self._sections)

    def __iter__(self) -> Iterator[Section]:
        return iter(self._sections)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.index_of(name) is not None

    def __getitem__(self, name: str) -> Section:
        section = self.get(name)
        if section is None:
            raise KeyError(name)
        return section

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._sections == other._sections

    def __repr__(self) -> str:
        return f"Document(sections={self._sections!r})"

    def __str__(self) -> str:
        from parsecfg.format import format_document

        return format_document(self)

    def index_of(self, name: str) -> int | None:
        for index, section in enumerate(self._sections):
            if names_equal(section.name, name):
                return index
        return None

    def contains(self, name: str) -> bool:
        return self.index_of(name) is not None

    def get(self, name: str) -> Section | None:
        index = self.index_of(name)
        return self._sections[index] if index is not None else None

    def get_at(self, index: int) -> Section | None:
        if 0 <= index < len(self._sections):
            return self._sections[index]
        return None

    def push(self, section: Section) -> bool:
        """Append `section`. Returns False if it is invalid or its name is taken."""
        if not section.is_valid or self.contains(section.name):
            return False
        self._sections.append(section)
        return True

    def insert(self, index: int, section: Section) -> bool:
        """Insert `section` at `index` (0..len). Returns False if out of range, invalid or taken."""
        if not 0 <= index <= len(self._sections) or not section.is_valid or self.contains(section.name):
            return False
        self._sections.insert(index, section)
        return True

    def remove(self, name: str) -> bool:
        index = self.index_of(name)
        if index is None:
            return False
        del self._sections[index]
        return True

    def remove_at(self, index: int) -> None:
        if 0 <= index < len(self._sections):
            del self._sections[index]

    def clear(self) -> None:
        self._sections.clear()


def read_source(path: str | Path) -> str:
    """Read a UTF-8 file, raising CfgError (IO_READ_FAILED) when it cannot be read."""
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CfgError.from_spec(
            IO_READ_FAILED,
            message=f"Cannot read document from file {str(path)!r}: {exc}",
        ) from exc


def load(
    path: str | Path,
    options: ParserOptions | None = None,
    *,
    mode: ParseMode | None = None,
) -> Document:
    return Document.from_file(path, options=options, mode=mode)
