"""Languages, token classes, token data structures, and character helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Language(Enum):
    PLAINTEXT = "plaintext"
    JSON = "json"
    YAML = "yaml"
    TOML = "toml"
    SQL = "sql"
    RUST = "rust"
    PYTHON = "python"
    JAVASCRIPT = "javascript"
    TYPESCRIPT = "typescript"
    DART = "dart"
    MARKDOWN = "markdown"
    SHELL = "shell"

    @property
    def label(self) -> str:
        """Badge text shown above a rendered code block."""
        return self.value.upper()


class TokenClass(Enum):
    STRING = "string"
    COMMENT = "comment"
    KEYWORD = "keyword"
    TYPE = "type"
    NUMBER = "number"
    FUNCTION_CALL = "function_call"
    IDENTIFIER = "identifier"  # also plain, unclassified text
    PUNCTUATION = "punctuation"
    WHITESPACE = "whitespace"
    PROPERTY = "property"
    OPERATOR = "operator"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based character offset."""

    line: int
    column: int
    offset: int


@dataclass(frozen=True, slots=True)
class Span:
    """Source range from start to end position (end exclusive)."""

    start: Position
    end: Position


@dataclass(frozen=True, slots=True)
class Token:
    """A classified slice of the input, carrying its exact source text."""

    type: TokenClass
    text: str
    span: Span


class TokenBuilder:
    """Accumulate tokens left to right, tracking line and column.

    Every scanner hands its slices to ``emit`` in source order, so the span of
    each token starts exactly where the previous one ended.
    """

    def __init__(self, merge_whitespace: bool = False) -> None:
        self._tokens: list[Token] = []
        self._line = 1
        self._col = 1
        self._offset = 0
        self._merge_ws = merge_whitespace

    def _current_pos(self) -> Position:
        return Position(self._line, self._col, self._offset)

    def emit(self, tt: TokenClass, text: str) -> None:
        if not text:
            return
        start = self._current_pos()
        newlines = text.count("\n")
        if newlines:
            self._line += newlines
            self._col = len(text) - text.rfind("\n")
        else:
            self._col += len(text)
        self._offset += len(text)

        if (
            self._merge_ws
            and tt is TokenClass.WHITESPACE
            and self._tokens
            and self._tokens[-1].type is TokenClass.WHITESPACE
        ):
            prev = self._tokens.pop()
            start = prev.span.start
            text = prev.text + text
        self._tokens.append(Token(tt, text, Span(start, self._current_pos())))

    @property
    def tokens(self) -> list[Token]:
        return self._tokens


# ASCII-only classes; Unicode letters are never word characters.
_WORD_CHARS = frozenset("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_")
_WS_CHARS = frozenset(" \t\n\r\f\v")


def is_word_char(ch: str) -> bool:
    """Return True if ch is an ASCII letter, digit, or underscore."""
    return ch in _WORD_CHARS


def is_space_char(ch: str) -> bool:
    """Return True if ch is ASCII whitespace."""
    return ch in _WS_CHARS


def plain_class(text: str) -> TokenClass:
    """Class for unscanned text: whitespace if it is all whitespace, else identifier."""
    if text and all(ch in _WS_CHARS for ch in text):
        return TokenClass.WHITESPACE
    return TokenClass.IDENTIFIER
