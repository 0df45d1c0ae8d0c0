"""Test language detection: hint aliases, fallthrough, and content heuristics."""

from __future__ import annotations

import pytest

from codelex.detect import detect_language, language_from_hint
from codelex.tokens import Language


class TestHints:
    @pytest.mark.parametrize(
        "hint, expected",
        [
            ("json", Language.JSON),
            ("yaml", Language.YAML),
            ("yml", Language.YAML),
            ("toml", Language.TOML),
            ("sql", Language.SQL),
            ("rust", Language.RUST),
            ("rs", Language.RUST),
            ("python", Language.PYTHON),
            ("py", Language.PYTHON),
            ("javascript", Language.JAVASCRIPT),
            ("js", Language.JAVASCRIPT),
            ("typescript", Language.TYPESCRIPT),
            ("ts", Language.TYPESCRIPT),
            ("dart", Language.DART),
            ("markdown", Language.MARKDOWN),
            ("md", Language.MARKDOWN),
            ("shell", Language.SHELL),
            ("bash", Language.SHELL),
            ("sh", Language.SHELL),
        ],
    )
    def test_alias(self, hint, expected):
        assert detect_language("", hint) == expected

    def test_hint_is_case_insensitive(self):
        assert detect_language("", "RS") == Language.RUST
        assert detect_language("", "Python") == Language.PYTHON

    def test_hint_surrounding_whitespace(self):
        assert detect_language("", " sql\n") == Language.SQL

    def test_alias_beats_empty_content(self):
        assert detect_language("", "rs") == Language.RUST

    def test_hint_beats_content(self):
        assert detect_language("SELECT * FROM t", "python") == Language.PYTHON

    def test_unknown_hint_falls_through(self):
        assert detect_language("SELECT * FROM t", "cobol") == Language.SQL

    def test_unknown_hint_on_empty_text(self):
        assert detect_language("", "cobol") == Language.PLAINTEXT

    def test_language_from_hint(self):
        assert language_from_hint("yml") == Language.YAML
        assert language_from_hint("cobol") is None
        assert language_from_hint(None) is None


class TestHeuristics:
    def test_json_object(self):
        assert detect_language('  {"a": 1}') == Language.JSON

    def test_json_array(self):
        assert detect_language("\n[1, 2]") == Language.JSON

    @pytest.mark.parametrize(
        "text", ["SELECT id FROM t", "INSERT INTO t VALUES (1)", "CREATE TABLE t (id int)"]
    )
    def test_sql(self, text):
        assert detect_language(text) == Language.SQL

    def test_lowercase_sql_is_not_detected(self):
        assert detect_language("select id from t") == Language.PLAINTEXT

    def test_rust_with_return_type(self):
        assert detect_language("fn add(a: i32) -> i32 { a }") == Language.RUST

    def test_rust_main_without_arrow(self):
        assert detect_language("fn main() { let x = 1; }") == Language.RUST

    @pytest.mark.parametrize("text", ["def f():\n    pass", "import os"])
    def test_python(self, text):
        assert detect_language(text) == Language.PYTHON

    @pytest.mark.parametrize(
        "text", ["function f() {}", "const x = 1;", "xs.map(x => x * 2)"]
    )
    def test_javascript(self, text):
        assert detect_language(text) == Language.JAVASCRIPT

    def test_plaintext(self):
        assert detect_language("just some words") == Language.PLAINTEXT

    def test_empty(self):
        assert detect_language("") == Language.PLAINTEXT


class TestHeuristicOrder:
    def test_json_before_everything(self):
        assert detect_language('{"q": "SELECT * FROM t"}') == Language.JSON

    def test_sql_before_rust(self):
        assert detect_language("SELECT 1; -- fn f() -> x") == Language.SQL

    def test_rust_before_python(self):
        assert detect_language("fn f() -> u8 { 0 } // def ") == Language.RUST

    def test_python_before_javascript(self):
        assert detect_language("import React from 'react';\nconst x = 1;") == Language.PYTHON
