"""HTML renderer: paints a token stream as a highlighted code block."""

from __future__ import annotations

from codelex.styles import DEFAULT_THEME, StyleDescriptor, Theme
from codelex.tokens import Language, Token, TokenClass

_BLOCK_CSS = """\
.codelex { border-radius: 8px; overflow: auto; font-family: "JetBrains Mono", Menlo, Monaco, monospace; font-size: 13px; line-height: 1.5; }
.codelex-header { padding: 6px 12px; font-size: 10px; font-weight: 600; letter-spacing: 0.5px; }
.codelex-body { display: flex; padding: 12px; }
.codelex pre { margin: 0; }
.codelex-gutter { padding-right: 16px; text-align: right; user-select: none; }
"""


def render_document(blocks: list[str], title: str | None = None) -> str:
    """Wrap rendered code blocks in a complete HTML document."""
    parts: list[str] = ["<!DOCTYPE html>\n", "<html>\n", "<head>\n"]
    parts.append('<meta charset="utf-8">\n')
    if title:
        parts.append(f"<title>{_escape_html(title)}</title>\n")
    parts.append(f"<style>\n{_BLOCK_CSS}</style>\n")
    parts.append("</head>\n")
    parts.append("<body>\n")
    for block in blocks:
        parts.append(block)
        parts.append("\n")
    parts.append("</body>\n")
    parts.append("</html>\n")
    return "".join(parts)


def render_block(
    tokens: list[Token],
    theme: Theme = DEFAULT_THEME,
    language: Language | None = None,
    line_numbers: bool = True,
) -> str:
    """Render tokens as a ``<div class="codelex">`` block.

    Token text is reproduced verbatim (only HTML-escaped), so copying the
    block yields the original source and the gutter lines up with it.
    """
    source = "".join(t.text for t in tokens)
    block_style = _css(StyleDescriptor(theme.foreground, theme.background))
    parts: list[str] = [f'<div class="codelex" style="{_escape_attr(block_style)}">']
    if language is not None:
        parts.append(
            f'<div class="codelex-header" style="color:{theme.gutter}">'
            f"{_escape_html(language.label)}</div>"
        )
    parts.append('<div class="codelex-body">')
    if line_numbers:
        count = source.count("\n") + 1
        numbers = "\n".join(str(i) for i in range(1, count + 1))
        parts.append(f'<pre class="codelex-gutter" style="color:{theme.gutter}">{numbers}</pre>')
    parts.append('<pre class="codelex-code"><code>')
    parts.append(render_tokens(tokens, theme))
    parts.append("</code></pre></div></div>")
    return "".join(parts)


def render_tokens(tokens: list[Token], theme: Theme = DEFAULT_THEME) -> str:
    """Render tokens as inline ``<span>`` elements, whitespace left bare."""
    parts: list[str] = []
    for tok in tokens:
        text = _escape_html(tok.text)
        if tok.type is TokenClass.WHITESPACE:
            parts.append(text)
            continue
        style = _css(theme.style_for(tok.type))
        parts.append(f'<span class="tok-{tok.type.value}" style="{_escape_attr(style)}">{text}</span>')
    return "".join(parts)


def _css(style: StyleDescriptor) -> str:
    if style.background:
        return f"color:{style.foreground};background-color:{style.background}"
    return f"color:{style.foreground}"


# ---------------------------------------------------------------------------
# HTML escaping
# ---------------------------------------------------------------------------


def _escape_html(text: str) -> str:
    """Escape text for HTML body content. Also encodes non-ASCII as entities."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ord(ch) > 0x7F:
            result.append(f"&#x{ord(ch):X};")
        else:
            result.append(ch)
    return "".join(result)


def _escape_attr(text: str) -> str:
    """Escape text for HTML attribute values."""
    result: list[str] = []
    for ch in text:
        if ch == "&":
            result.append("&amp;")
        elif ch == "<":
            result.append("&lt;")
        elif ch == ">":
            result.append("&gt;")
        elif ch == '"':
            result.append("&quot;")
        else:
            result.append(ch)
    return "".join(result)
