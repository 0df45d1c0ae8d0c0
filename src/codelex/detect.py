"""Language detection from an optional hint and content heuristics."""

from __future__ import annotations

import re

from codelex.tokens import Language

# Checked in order; the first alias group containing the hint wins.
_HINT_ALIASES: tuple[tuple[tuple[str, ...], Language], ...] = (
    (("json",), Language.JSON),
    (("yaml", "yml"), Language.YAML),
    (("toml",), Language.TOML),
    (("sql",), Language.SQL),
    (("rust", "rs"), Language.RUST),
    (("python", "py"), Language.PYTHON),
    (("javascript", "js"), Language.JAVASCRIPT),
    (("typescript", "ts"), Language.TYPESCRIPT),
    (("dart",), Language.DART),
    (("markdown", "md"), Language.MARKDOWN),
    (("shell", "bash", "sh"), Language.SHELL),
)

# `fn name(` is a Rust definition even without a `->` return type.
_RUST_FN_DEF = re.compile(r"\bfn\s+[A-Za-z_]\w*\s*[(<]", re.ASCII)


def language_from_hint(hint: str | None) -> Language | None:
    """Resolve a fence/file-type hint such as ``"rs"`` or ``"Bash"``."""
    if hint is None:
        return None
    h = hint.strip().lower()
    for aliases, language in _HINT_ALIASES:
        if h in aliases:
            return language
    return None


def detect_language(text: str, hint: str | None = None) -> Language:
    """Pick a language for *text*.

    A recognized *hint* always wins, even for empty text. An unknown hint is
    ignored and the content heuristics below decide, first match wins.
    """
    language = language_from_hint(hint)
    if language is not None:
        return language

    if text.lstrip().startswith(("{", "[")):
        return Language.JSON
    if "SELECT " in text or "INSERT " in text or "CREATE TABLE" in text:
        return Language.SQL
    if "fn " in text and ("->" in text or _RUST_FN_DEF.search(text)):
        return Language.RUST
    if "def " in text or "import " in text:
        return Language.PYTHON
    if "function " in text or "const " in text or "=>" in text:
        return Language.JAVASCRIPT
    return Language.PLAINTEXT
