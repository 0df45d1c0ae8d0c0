"""Multi-language syntax tokenizer for highlighted code blocks."""

from __future__ import annotations

from codelex.detect import detect_language
from codelex.lexer import highlight
from codelex.styles import StyleDescriptor, style_for
from codelex.tokens import Language, Token, TokenClass

__version__ = "0.1.0"

__all__ = [
    "Language",
    "StyleDescriptor",
    "Token",
    "TokenClass",
    "detect_language",
    "highlight",
    "highlight_block",
    "style_for",
]


def highlight_block(text: str, hint: str | None = None) -> tuple[Language, list[Token]]:
    """Detect the language of a code block and tokenize it."""
    language = detect_language(text, hint)
    return language, highlight(text, language)
