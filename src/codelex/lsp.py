"""Minimal LSP server for codelex: semantic tokens only."""

from __future__ import annotations

from lsprotocol.types import (
    TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL,
    SemanticTokens,
    SemanticTokensLegend,
    SemanticTokensParams,
    TextDocumentSyncKind,
)
from pygls.lsp.server import LanguageServer

from codelex import __version__
from codelex.detect import detect_language
from codelex.lexer import highlight
from codelex.tokens import Token, TokenClass

# Standard LSP token type names; whitespace and punctuation are not reported.
TOKEN_TYPES = [
    "string",
    "comment",
    "keyword",
    "type",
    "number",
    "function",
    "variable",
    "property",
    "operator",
]

_TYPE_INDEX: dict[TokenClass, int] = {
    TokenClass.STRING: 0,
    TokenClass.COMMENT: 1,
    TokenClass.KEYWORD: 2,
    TokenClass.TYPE: 3,
    TokenClass.NUMBER: 4,
    TokenClass.FUNCTION_CALL: 5,
    TokenClass.IDENTIFIER: 6,
    TokenClass.PROPERTY: 7,
    TokenClass.OPERATOR: 8,
}

LEGEND = SemanticTokensLegend(token_types=TOKEN_TYPES, token_modifiers=[])

server = LanguageServer("codelex-lsp", __version__, text_document_sync_kind=TextDocumentSyncKind.Full)


def _utf16_len(text: str) -> int:
    return len(text.encode("utf-16-le")) // 2


def semantic_tokens_data(tokens: list[Token]) -> list[int]:
    """Encode tokens as LSP relative semantic-token integers.

    Tokens spanning several lines are reported once per line. Columns and
    lengths are in UTF-16 code units.
    """
    data: list[int] = []
    line = 0
    col = 0
    prev_line = 0
    prev_col = 0
    for tok in tokens:
        type_index = _TYPE_INDEX.get(tok.type)
        for i, piece in enumerate(tok.text.split("\n")):
            if i:
                line += 1
                col = 0
            length = _utf16_len(piece.rstrip("\r"))
            if type_index is not None and length:
                delta_line = line - prev_line
                delta_start = col - prev_col if delta_line == 0 else col
                data.extend((delta_line, delta_start, length, type_index, 0))
                prev_line = line
                prev_col = col
            col += _utf16_len(piece)
    return data


def _semantic_tokens(ls: LanguageServer, uri: str) -> SemanticTokens:
    """Tokenize an open document, using its language id as the hint."""
    doc = ls.workspace.get_text_document(uri)
    language = detect_language(doc.source, doc.language_id)
    return SemanticTokens(data=semantic_tokens_data(highlight(doc.source, language)))


@server.feature(TEXT_DOCUMENT_SEMANTIC_TOKENS_FULL, LEGEND)
def semantic_tokens_full(ls: LanguageServer, params: SemanticTokensParams) -> SemanticTokens:
    return _semantic_tokens(ls, params.text_document.uri)


def main() -> None:
    server.start_io()
