"""Token stream dumps for --debug and --format tokens."""

from __future__ import annotations

import sys
from typing import TextIO

from codelex.tokens import Language, Token


def format_token(tok: Token) -> str:
    """One line per token: class, start line:column, and the repr of its text."""
    start = tok.span.start
    return f"{tok.type.value}\t{start.line}:{start.column}\t{tok.text!r}"


def dump_tokens(
    tokens: list[Token],
    language: Language | None = None,
    *,
    file: TextIO = sys.stderr,
) -> None:
    """Print a human-readable token listing to *file*."""
    if language is not None:
        file.write(f"language: {language.value}\n")
    file.write(f"tokens: {len(tokens)}\n")
    for tok in tokens:
        file.write(format_token(tok))
        file.write("\n")
