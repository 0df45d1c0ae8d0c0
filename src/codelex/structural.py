"""Structural scans for data formats: JSON in one pass, YAML and TOML by line.

The line scans do not track state across lines, so multi-line strings and
flow collections that span lines are classified line by line.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from codelex.tokens import Token, TokenBuilder, TokenClass, plain_class

_JSON_STRING = r'"(?:[^"\\]|\\.)*"'
_JSON_SCALARS = (
    r"|(?P<number>-?\d+(?:\.\d+)?(?:[eE][+-]?\d+)?)"
    r"|(?P<keyword>\b(?:true|false|null)\b)"
    r"|(?P<punctuation>[{}\[\],:])"
    r"|(?P<whitespace>\s+)"
    # A quote no string alternative accepted: it never closes
    r'|(?P<quote>")'
)

_JSON = re.compile(
    rf"(?P<property>{_JSON_STRING}(?=\s*:))|(?P<string>{_JSON_STRING})" + _JSON_SCALARS,
    re.ASCII | re.DOTALL,
)
# Used past the first unclosed quote, where no later quote can close either.
_JSON_UNCLOSED = re.compile(_JSON_SCALARS[1:], re.ASCII | re.DOTALL)

_YAML_NUMBER = re.compile(r"-?\d+\.?\d*", re.ASCII)
_YAML_KEYWORDS = frozenset({"true", "false", "null"})


def scan_plain(text: str) -> list[Token]:
    """The whole text as one unclassified token."""
    out = TokenBuilder()
    out.emit(plain_class(text), text)
    return out.tokens


def scan_json(text: str) -> list[Token]:
    out = TokenBuilder()
    pattern = _JSON
    pos = 0
    last = 0  # end of the last classified token; anything after it is plain
    while True:
        m = pattern.search(text, pos)
        if m is None:
            break
        pos = m.end()
        if m.lastgroup == "quote":
            pattern = _JSON_UNCLOSED
            continue
        if m.start() > last:
            out.emit(TokenClass.IDENTIFIER, text[last : m.start()])
        out.emit(TokenClass(m.lastgroup), m.group())
        last = pos
    if last < len(text):
        out.emit(TokenClass.IDENTIFIER, text[last:])
    return out.tokens


# ----------------------------------------------------------------------
# Line scans
# ----------------------------------------------------------------------


def _split_ws(text: str) -> tuple[str, str, str]:
    """Split text into (leading whitespace, core, trailing whitespace)."""
    core = text.strip()
    if not core:
        return text, "", ""
    lead = text[: len(text) - len(text.lstrip())]
    trail = text[len(text.rstrip()) :]
    return lead, core, trail


def _emit_padded(out: TokenBuilder, text: str, tt: TokenClass) -> None:
    lead, core, trail = _split_ws(text)
    out.emit(TokenClass.WHITESPACE, lead)
    out.emit(tt, core)
    out.emit(TokenClass.WHITESPACE, trail)


def _scan_lines(text: str, scan_line: Callable[[TokenBuilder, str], None]) -> list[Token]:
    out = TokenBuilder(merge_whitespace=True)
    for i, line in enumerate(text.split("\n")):
        if i:
            out.emit(TokenClass.WHITESPACE, "\n")
        scan_line(out, line)
    return out.tokens


def _yaml_value_class(value: str) -> TokenClass:
    v = value.strip()
    if v.startswith(('"', "'")):
        return TokenClass.STRING
    if _YAML_NUMBER.fullmatch(v):
        return TokenClass.NUMBER
    if v in _YAML_KEYWORDS:
        return TokenClass.KEYWORD
    return TokenClass.STRING


def _scan_yaml_line(out: TokenBuilder, line: str) -> None:
    if line.lstrip().startswith("#"):
        out.emit(TokenClass.COMMENT, line)
    elif ":" in line:
        key, _, value = line.partition(":")
        _emit_padded(out, key, TokenClass.PROPERTY)
        out.emit(TokenClass.PUNCTUATION, ":")
        _emit_padded(out, value, _yaml_value_class(value))
    else:
        # list items and bare scalars
        _emit_padded(out, line, TokenClass.IDENTIFIER)


def _scan_toml_line(out: TokenBuilder, line: str) -> None:
    stripped = line.lstrip()
    if stripped.startswith("#"):
        out.emit(TokenClass.COMMENT, line)
    elif stripped.startswith("["):
        _emit_padded(out, line, TokenClass.TYPE)
    elif "=" in line:
        key, _, value = line.partition("=")
        _emit_padded(out, key, TokenClass.PROPERTY)
        out.emit(TokenClass.OPERATOR, "=")
        _emit_padded(out, value, TokenClass.STRING)
    else:
        _emit_padded(out, line, TokenClass.IDENTIFIER)


def scan_yaml(text: str) -> list[Token]:
    return _scan_lines(text, _scan_yaml_line)


def scan_toml(text: str) -> list[Token]:
    return _scan_lines(text, _scan_toml_line)
