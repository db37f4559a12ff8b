"""Unit tests for the statement tokenizer."""
import pytest
from sqlsyntax.validators.lexer import SQLLexer, Token, tokenize


def values(tokens):
    return [token.value for token in tokens]


class TestSQLLexer:
    """Test suite for SQLLexer."""

    @pytest.mark.parametrize("text", ["", " ", "\t\t", "\r\n", "  \n \t \r  ", "\v\f"])
    def test_whitespace_only_input_has_no_tokens(self, text):
        assert tokenize(text) == []

    def test_words_split_on_whitespace(self):
        tokens = tokenize("SELECT  a\tFROM\nt\r\n;")

        assert values(tokens) == ["SELECT", "a", "FROM", "t", ";"]

    def test_punctuation_splits_without_spaces(self):
        tokens = tokenize("foo(bar,baz);")

        assert values(tokens) == ["foo", "(", "bar", ",", "baz", ")", ";"]

    def test_every_punctuation_character_is_its_own_token(self):
        tokens = tokenize("a.b=c,(d);")

        assert values(tokens) == ["a", ".", "b", "=", "c", ",", "(", "d", ")", ";"]

    def test_repeated_punctuation_is_not_merged(self):
        assert values(tokenize("((;;")) == ["(", "(", ";", ";"]

    def test_other_symbols_stay_inside_words(self):
        tokens = tokenize("x>=1 'it''s' *")

        assert values(tokens) == ["x>", "=", "1", "'it''s'", "*"]

    def test_case_is_preserved(self):
        assert values(tokenize("SeLeCt Foo")) == ["SeLeCt", "Foo"]

    def test_trailing_word_is_flushed(self):
        assert values(tokenize("DELETE FROM t")) == ["DELETE", "FROM", "t"]

    def test_token_positions(self):
        tokens = tokenize("  ab (c);")

        assert tokens == [
            Token(value="ab", position=2),
            Token(value="(", position=5),
            Token(value="c", position=6),
            Token(value=")", position=7),
            Token(value=";", position=8),
        ]

    def test_tokens_are_immutable(self):
        token = tokenize("t")[0]

        with pytest.raises(AttributeError):
            token.value = "u"

    @pytest.mark.parametrize("text", [
        "CREATE TABLE t ( a , b ) ;",
        "update  t set x=1 where y.z = 2;",
        "\tINSERT INTO t\nVALUES(1,2);  ",
        "",
    ])
    def test_tokens_reconstruct_non_whitespace_text(self, text):
        joined = "".join(values(tokenize(text)))

        assert joined == "".join(text.split())

    def test_tokenize_is_idempotent(self):
        text = "SELECT a FROM t JOIN u ;"

        assert tokenize(text) == tokenize(text)

    def test_lexer_can_be_reused(self):
        lexer = SQLLexer("DELETE FROM t;")

        first = lexer.tokenize()
        second = lexer.tokenize()

        assert first == second
        assert len(second) == 4

    def test_no_empty_tokens(self):
        tokens = tokenize(" ( ,  ) ; . = ")

        assert all(token.value for token in tokens)
        assert values(tokens) == ["(", ",", ")", ";", ".", "="]
