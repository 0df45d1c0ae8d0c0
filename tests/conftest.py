"""Shared test fixtures and helpers."""

from __future__ import annotations

import pytest

from codelex.lexer import highlight
from codelex.tokens import Language, Token, TokenClass


@pytest.fixture
def lex():
    """Return a helper that tokenizes source and checks it covers the input."""

    def _lex(source: str, language: Language) -> list[Token]:
        tokens = highlight(source, language)
        assert_covers(tokens, source)
        return tokens

    return _lex


def assert_covers(tokens: list[Token], source: str) -> None:
    """Assert the tokens reproduce source exactly, with contiguous spans."""
    assert "".join(t.text for t in tokens) == source
    offset = 0
    for tok in tokens:
        assert tok.text, "empty token emitted"
        assert tok.span.start.offset == offset
        offset += len(tok.text)
        assert tok.span.end.offset == offset
    for prev, nxt in zip(tokens, tokens[1:]):
        assert prev.span.end == nxt.span.start


def assert_types(tokens: list[Token], expected: list[TokenClass]) -> None:
    """Assert that the token classes match the expected list."""
    actual = [t.type for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def assert_texts(tokens: list[Token], expected: list[str]) -> None:
    """Assert that the token texts match the expected list."""
    actual = [t.text for t in tokens]
    assert actual == expected, f"Expected {expected}, got {actual}"


def pairs(tokens: list[Token]) -> list[tuple[TokenClass, str]]:
    """(class, text) for every non-whitespace token."""
    return [(t.type, t.text) for t in tokens if t.type is not TokenClass.WHITESPACE]


def find_tokens(tokens: list[Token], tt: TokenClass) -> list[Token]:
    """Return all tokens of the given class."""
    return [t for t in tokens if t.type == tt]
