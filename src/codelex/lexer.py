"""Syntax lexer: converts source text into a flat, classified token stream."""

from __future__ import annotations

import re
from collections.abc import Callable
from dataclasses import dataclass

from codelex.rules import RULES, LanguageRuleSet
from codelex.structural import scan_json, scan_plain, scan_toml, scan_yaml
from codelex.tokens import Language, Token, TokenBuilder, TokenClass, is_space_char, is_word_char

_WORD = re.compile(r"[A-Za-z0-9_]+")
# Atomic so that `1.5x` is not cut back to the number `1`.
_NUMBER = re.compile(r"(?>[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?)(?![A-Za-z0-9_])")
_CALL = re.compile(r"[A-Za-z0-9_]+(?=\()")
_SPACE = re.compile(r"[ \t\n\r\f\v]+")

# Closed strings may span lines; a backslash escapes any following character.
_CLOSED_STRINGS = {
    q: re.compile(rf"{q}(?:[^{q}\\]|\\.)*{q}", re.DOTALL) for q in ("'", '"', "`")
}


# ----------------------------------------------------------------------
# Matchers: (lexer, pos) -> end offset, or pos when nothing matched
# ----------------------------------------------------------------------


def _match_string(lexer: Lexer, pos: int) -> int:
    source = lexer.source
    quote = source[pos]
    if quote not in _CLOSED_STRINGS:
        return pos
    end = lexer.closed_string_end(quote, pos)
    if end is not None:
        return end

    # Unterminated: template literals run to the end, plain quotes to end of line
    if quote == "`":
        return len(source)
    eol = source.find("\n", pos)
    return len(source) if eol == -1 else eol


def _match_comment(lexer: Lexer, pos: int) -> int:
    source, rules = lexer.source, lexer.rules
    if source.startswith(rules.comment_marker, pos):
        eol = source.find("\n", pos)
        return len(source) if eol == -1 else eol
    if rules.block_comments and source.startswith("/*", pos):
        close = source.find("*/", pos + 2)
        return len(source) if close == -1 else close + 2
    return pos


def _match_keyword(lexer: Lexer, pos: int) -> int:
    m = _WORD.match(lexer.source, pos)
    if m and lexer.rules.is_keyword(m.group()):
        return m.end()
    return pos


def _match_type(lexer: Lexer, pos: int) -> int:
    m = _WORD.match(lexer.source, pos)
    if m and lexer.rules.is_type(m.group()):
        return m.end()
    return pos


def _match_regex(pattern: re.Pattern[str]) -> Callable[[Lexer, int], int]:
    def match(lexer: Lexer, pos: int) -> int:
        m = pattern.match(lexer.source, pos)
        return m.end() if m else pos

    return match


def _match_punctuation(lexer: Lexer, pos: int) -> int:
    ch = lexer.source[pos]
    if is_word_char(ch) or is_space_char(ch):
        return pos
    return pos + 1


@dataclass(frozen=True, slots=True)
class ScanRule:
    """One alternative of the generic scan: a matcher and the class it yields."""

    token_class: TokenClass
    match: Callable[[Lexer, int], int]


# Priority order: the first rule producing a non-empty span wins.
GENERIC_RULES: tuple[ScanRule, ...] = (
    ScanRule(TokenClass.STRING, _match_string),
    ScanRule(TokenClass.COMMENT, _match_comment),
    ScanRule(TokenClass.KEYWORD, _match_keyword),
    ScanRule(TokenClass.TYPE, _match_type),
    ScanRule(TokenClass.NUMBER, _match_regex(_NUMBER)),
    ScanRule(TokenClass.FUNCTION_CALL, _match_regex(_CALL)),
    ScanRule(TokenClass.IDENTIFIER, _match_regex(_WORD)),
    ScanRule(TokenClass.PUNCTUATION, _match_punctuation),
    ScanRule(TokenClass.WHITESPACE, _match_regex(_SPACE)),
)


class Lexer:
    """Tokenize code with the generic priority scan, driven by a rule set."""

    def __init__(
        self,
        source: str,
        rules: LanguageRuleSet,
        scan_rules: tuple[ScanRule, ...] = GENERIC_RULES,
    ) -> None:
        self.source = source
        self.rules = rules
        self._scan_rules = scan_rules
        self._pos = 0
        self._builder = TokenBuilder()
        # First offset, per quote, from which no string of that quote closes
        self._unclosed: dict[str, int] = {}

    def tokenize(self) -> list[Token]:
        """Tokenize the full source and return the token list."""
        while self._pos < len(self.source):
            self._lex_one()
        return self._builder.tokens

    def closed_string_end(self, quote: str, pos: int) -> int | None:
        """End offset of the closed *quote* string starting at *pos*, or None.

        Once a string fails to close, every later opening of the same quote
        fails as well: a quote in between was either escaped inside the
        failed string or would have closed it. Later attempts are answered
        without rescanning to the end of the source.
        """
        unclosed = self._unclosed.get(quote)
        if unclosed is not None and pos >= unclosed:
            return None
        m = _CLOSED_STRINGS[quote].match(self.source, pos)
        if m:
            return m.end()
        self._unclosed[quote] = pos
        return None

    def _lex_one(self) -> None:
        start = self._pos
        for rule in self._scan_rules:
            end = rule.match(self, start)
            if end > start:
                self._emit(rule.token_class, end)
                return
        # No rule applies: take one character so the scan always advances
        self._emit(TokenClass.IDENTIFIER, start + 1)

    def _emit(self, tt: TokenClass, end: int) -> None:
        self._builder.emit(tt, self.source[self._pos : end])
        self._pos = end


_STRUCTURAL: dict[Language, Callable[[str], list[Token]]] = {
    Language.JSON: scan_json,
    Language.YAML: scan_yaml,
    Language.TOML: scan_toml,
}


def highlight(text: str, language: Language) -> list[Token]:
    """Split *text* into classified tokens whose texts concatenate back to *text*.

    Never raises: unknown languages, plaintext and markdown come back as a
    single plain token, and malformed strings or comments are cut at the end
    of the line or of the input.
    """
    if not text:
        return []
    scanner = _STRUCTURAL.get(language)
    if scanner is not None:
        return scanner(text)
    rules = RULES.get(language)
    if rules is None:
        return scan_plain(text)
    return Lexer(text, rules).tokenize()
