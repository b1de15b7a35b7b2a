"""Unit tests for PostgREST value quoting and percent-encoding."""

from __future__ import annotations

import pytest

from pgrest_filters.filters.quoting import (
    decode,
    encode,
    encode_value,
    needs_quotes,
    quote_value,
    split_top_level,
    unquote_value,
    unwrap_parens,
)


class TestPercentEncoding:
    def test_colon_and_space_are_encoded(self) -> None:
        assert encode("2021-01-02T00:00") == "2021-01-02T00%3A00"
        assert encode("a b") == "a%20b"

    def test_unreserved_characters_pass_through(self) -> None:
        assert encode("1.5-x_y~") == "1.5-x_y~"

    def test_decode(self) -> None:
        assert decode("a%2Cb") == "a,b"


class TestQuoting:
    @pytest.mark.parametrize("value", ["plain", "a b", "1.5", "x:y"])
    def test_top_level_values_stay_bare(self, value: str) -> None:
        assert not needs_quotes(value, nested=False)

    def test_top_level_quoted_looking_value_is_quoted(self) -> None:
        assert quote_value('"hi"') == '"\\"hi\\""'

    @pytest.mark.parametrize("value", ["a,b", "(x)", 'say "hi"', "back\\slash", " pad", ""])
    def test_nested_reserved_values_are_quoted(self, value: str) -> None:
        assert needs_quotes(value, nested=True)
        assert unquote_value(quote_value(value, nested=True)) == value

    def test_nested_plain_value_stays_bare(self) -> None:
        assert quote_value("books", nested=True) == "books"

    def test_unquote_leaves_bare_tokens(self) -> None:
        assert unquote_value("abc") == "abc"
        assert unquote_value('"') == '"'

    def test_encode_value_quotes_then_encodes(self) -> None:
        assert encode_value("a,b", nested=True) == "%22a%2Cb%22"


class TestSplitTopLevel:
    def test_respects_quotes_and_parentheses(self) -> None:
        assert split_top_level('a,"b,c",(d,e)') == ["a", '"b,c"', "(d,e)"]

    def test_escaped_quote_does_not_close(self) -> None:
        assert split_top_level('"a\\",b",c') == ['"a\\",b"', "c"]

    def test_empty_input(self) -> None:
        assert split_top_level("") == []

    def test_keeps_empty_items(self) -> None:
        assert split_top_level("a,,b") == ["a", "", "b"]


class TestUnwrapParens:
    def test_inside(self) -> None:
        assert unwrap_parens("(a,b)") == "a,b"

    def test_not_wrapped(self) -> None:
        assert unwrap_parens("a,b") is None
        assert unwrap_parens("(") is None
