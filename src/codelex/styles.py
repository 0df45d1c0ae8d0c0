"""Token-class to style mapping and the built-in colour themes."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, replace
from types import MappingProxyType

from codelex.errors import ThemeError
from codelex.tokens import TokenClass

_COLOR = re.compile(r"#[0-9A-Fa-f]{6}")


@dataclass(frozen=True, slots=True)
class StyleDescriptor:
    """Foreground colour, and optionally a background, as ``#RRGGBB``."""

    foreground: str
    background: str | None = None


@dataclass(frozen=True, slots=True)
class Theme:
    """A named class→style table plus the colours of the surrounding block."""

    name: str
    styles: Mapping[TokenClass, StyleDescriptor]
    background: str
    foreground: str
    gutter: str = "#858585"

    def style_for(self, token_class: TokenClass) -> StyleDescriptor:
        return self.styles[token_class]

    def with_overrides(self, colors: Mapping[str, object]) -> Theme:
        """Return a copy with foreground colours replaced per token-class name."""
        styles = dict(self.styles)
        for name, value in colors.items():
            try:
                tc = TokenClass(name)
            except ValueError:
                raise ThemeError(f"unknown token class '{name}' in theme colors") from None
            if not isinstance(value, str) or not _COLOR.fullmatch(value):
                raise ThemeError(f"invalid colour for '{name}' (expected #RRGGBB): {value!r}")
            styles[tc] = replace(styles[tc], foreground=value)
        return replace(self, styles=MappingProxyType(styles))


def _table(colors: dict[TokenClass, str]) -> Mapping[TokenClass, StyleDescriptor]:
    return MappingProxyType({tc: StyleDescriptor(c) for tc, c in colors.items()})


# Monokai, the code-block palette
MONOKAI = Theme(
    name="monokai",
    styles=_table(
        {
            TokenClass.KEYWORD: "#F92672",
            TokenClass.STRING: "#E6DB74",
            TokenClass.NUMBER: "#AE81FF",
            TokenClass.COMMENT: "#75715E",
            TokenClass.FUNCTION_CALL: "#A6E22E",
            TokenClass.TYPE: "#66D9EF",
            TokenClass.IDENTIFIER: "#F8F8F2",
            TokenClass.OPERATOR: "#F92672",
            TokenClass.PUNCTUATION: "#F8F8F2",
            TokenClass.PROPERTY: "#FD971F",
            TokenClass.WHITESPACE: "#F8F8F2",
        }
    ),
    background="#1E1E1E",
    foreground="#F8F8F2",
    gutter="#75715E",
)

# VS Code Dark+, the notes-editor palette
DARK_PLUS = Theme(
    name="dark-plus",
    styles=_table(
        {
            TokenClass.KEYWORD: "#C586C0",
            TokenClass.STRING: "#CE9178",
            TokenClass.NUMBER: "#B5CEA8",
            TokenClass.COMMENT: "#6A9955",
            TokenClass.FUNCTION_CALL: "#DCDCAA",
            TokenClass.TYPE: "#4EC9B0",
            TokenClass.IDENTIFIER: "#9CDCFE",
            TokenClass.OPERATOR: "#D4D4D4",
            TokenClass.PUNCTUATION: "#D4D4D4",
            TokenClass.PROPERTY: "#9CDCFE",
            TokenClass.WHITESPACE: "#D4D4D4",
        }
    ),
    background="#1E1E1E",
    foreground="#D4D4D4",
)

THEMES: Mapping[str, Theme] = MappingProxyType({t.name: t for t in (MONOKAI, DARK_PLUS)})

DEFAULT_THEME = MONOKAI


def get_theme(name: str) -> Theme:
    """Look up a built-in theme by name."""
    try:
        return THEMES[name]
    except KeyError:
        known = ", ".join(sorted(THEMES))
        raise ThemeError(f"unknown theme '{name}' (available: {known})") from None


def style_for(token_class: TokenClass, theme: Theme | None = None) -> StyleDescriptor:
    """Style used to paint tokens of *token_class*."""
    return (theme or DEFAULT_THEME).styles[token_class]
