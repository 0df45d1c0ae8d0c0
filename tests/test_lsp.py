"""Tests for the LSP server: semantic token encoding."""

from __future__ import annotations

import pytest
from lsprotocol.types import TextDocumentItem, TextDocumentSyncKind
from pygls.lsp.server import LanguageServer
from pygls.workspace import Workspace

from codelex.lexer import highlight
from codelex.lsp import LEGEND, TOKEN_TYPES, _semantic_tokens, semantic_tokens_data
from codelex.tokens import Language


@pytest.fixture
def lsp_env():
    """Create a LanguageServer with an initialized workspace."""
    ls = LanguageServer("test", "v0", text_document_sync_kind=TextDocumentSyncKind.Full)
    ws = Workspace(None)
    ls.protocol._workspace = ws

    def put(source: str, language_id: str, uri: str = "file:///test.txt") -> None:
        ws.put_text_document(
            TextDocumentItem(uri=uri, language_id=language_id, version=0, text=source)
        )

    return ls, put


class TestLegend:
    def test_token_types(self) -> None:
        assert LEGEND.token_types == TOKEN_TYPES
        assert TOKEN_TYPES[:5] == ["string", "comment", "keyword", "type", "number"]
        assert LEGEND.token_modifiers == []


# ---------------------------------------------------------------------------
# Relative encoding
# ---------------------------------------------------------------------------


class TestEncoding:
    def test_single_line(self) -> None:
        data = semantic_tokens_data(highlight("SELECT 1", Language.SQL))
        assert data == [0, 0, 6, 2, 0, 0, 7, 1, 4, 0]

    def test_new_line_resets_column(self) -> None:
        data = semantic_tokens_data(highlight("x\n  y", Language.PYTHON))
        assert data == [0, 0, 1, 6, 0, 1, 2, 1, 6, 0]

    def test_multiline_token_split_per_line(self) -> None:
        data = semantic_tokens_data(highlight("/* a\nbc */", Language.JAVASCRIPT))
        assert data == [0, 0, 4, 1, 0, 1, 0, 5, 1, 0]

    def test_utf16_lengths(self) -> None:
        data = semantic_tokens_data(highlight("'😀' x", Language.PYTHON))
        assert data == [0, 0, 4, 0, 0, 0, 5, 1, 6, 0]

    def test_punctuation_and_whitespace_skipped(self) -> None:
        assert semantic_tokens_data(highlight("{ } ;", Language.RUST)) == []

    def test_empty(self) -> None:
        assert semantic_tokens_data([]) == []


# ---------------------------------------------------------------------------
# Open documents
# ---------------------------------------------------------------------------


class TestDocuments:
    def test_language_id_is_hint(self, lsp_env) -> None:
        ls, put = lsp_env
        put("SELECT 1", "sql")
        result = _semantic_tokens(ls, "file:///test.txt")
        assert result.data == [0, 0, 6, 2, 0, 0, 7, 1, 4, 0]

    def test_unknown_language_id_detects(self, lsp_env) -> None:
        ls, put = lsp_env
        put("def f(): pass", "plaintext")
        result = _semantic_tokens(ls, "file:///test.txt")
        assert result.data == [0, 0, 3, 2, 0, 0, 4, 1, 5, 0, 0, 5, 4, 2, 0]
