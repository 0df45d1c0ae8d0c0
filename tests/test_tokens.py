"""Test token positions and the token builder."""

from codelex.tokens import Language, Position, TokenBuilder, TokenClass, plain_class

WS = TokenClass.WHITESPACE
ID = TokenClass.IDENTIFIER


class TestBuilder:
    def test_positions(self):
        b = TokenBuilder()
        b.emit(ID, "ab")
        b.emit(WS, "\n ")
        b.emit(ID, "c")
        a, ws, c = b.tokens
        assert a.span.start == Position(1, 1, 0)
        assert a.span.end == Position(1, 3, 2)
        assert ws.span.end == Position(2, 2, 4)
        assert c.span.start == Position(2, 2, 4)

    def test_empty_text_skipped(self):
        b = TokenBuilder()
        b.emit(ID, "")
        assert b.tokens == []

    def test_whitespace_not_merged_by_default(self):
        b = TokenBuilder()
        b.emit(WS, " ")
        b.emit(WS, "\n")
        assert len(b.tokens) == 2

    def test_merge_whitespace(self):
        b = TokenBuilder(merge_whitespace=True)
        b.emit(ID, "a")
        b.emit(WS, " ")
        b.emit(WS, "\n")
        assert [t.text for t in b.tokens] == ["a", " \n"]
        merged = b.tokens[-1]
        assert merged.span.start == Position(1, 2, 1)
        assert merged.span.end == Position(2, 1, 3)


class TestHelpers:
    def test_plain_class(self):
        assert plain_class(" \t\n") is WS
        assert plain_class("a b") is ID
        assert plain_class("") is ID

    def test_language_label(self):
        assert Language.SQL.label == "SQL"
        assert Language.TYPESCRIPT.label == "TYPESCRIPT"
