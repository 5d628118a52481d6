"""Tests for talkshell.http.query — query string parsing."""

import pytest

from talkshell.http.query import QueryParams, parse_query_params, split_url


class TestParseQueryParams:
    def test_single_pair(self) -> None:
        q = parse_query_params("/home?hi=everyone")
        assert dict(q) == {"hi": "everyone"}

    def test_no_query_is_empty(self) -> None:
        q = parse_query_params("/home")
        assert len(q) == 0
        assert dict(q) == {}

    def test_bare_query(self) -> None:
        q = parse_query_params("?a=1&b=2")
        assert dict(q) == {"a": "1", "b": "2"}

    def test_percent_and_plus_decoding(self) -> None:
        q = parse_query_params("/home?name=Leeds%20Digi&q=a+b&emoji=%E2%9C%93")
        assert q["name"] == "Leeds Digi"
        assert q["q"] == "a b"
        assert q["emoji"] == "✓"

    def test_repeated_keys_last_wins(self) -> None:
        q = parse_query_params("/?x=first&x=second")
        assert q["x"] == "second"
        assert q.get("x") == "second"
        assert q.get_list("x") == ["first", "second"]

    def test_fragment_ignored(self) -> None:
        q = parse_query_params("/talk/1?ref=home#details")
        assert dict(q) == {"ref": "home"}

    def test_blank_value_preserved(self) -> None:
        q = parse_query_params("/?flag=")
        assert q["flag"] == ""

    @pytest.mark.parametrize(
        "url",
        ["/?%zz=1", "/?=novalue", "/?&&&", "/?a=%E2%28", "/?;;=;"],
    )
    def test_malformed_never_raises(self, url: str) -> None:
        q = parse_query_params(url)
        assert isinstance(q, QueryParams)

    def test_pair_without_key_dropped(self) -> None:
        q = parse_query_params("/?=orphan&ok=1")
        assert dict(q) == {"ok": "1"}

    def test_invalid_utf8_replaced(self) -> None:
        q = parse_query_params("/?a=%E2%28")
        assert "�" in q["a"]


class TestQueryParams:
    def test_missing_key_raises(self) -> None:
        q = QueryParams("q=hello")
        with pytest.raises(KeyError):
            q["missing"]

    def test_get_with_default(self) -> None:
        q = QueryParams("q=hello")
        assert q.get("missing") is None
        assert q.get("missing", "fallback") == "fallback"

    def test_immutable(self) -> None:
        q = QueryParams("a=1")
        with pytest.raises(AttributeError):
            q._data = {}  # type: ignore[misc]

    def test_equality_with_mapping(self) -> None:
        assert QueryParams("a=1&b=2") == {"a": "1", "b": "2"}
        assert QueryParams("a=1") == QueryParams("a=1")

    def test_raw(self) -> None:
        assert QueryParams("a=%201").raw == "a=%201"

    def test_repr(self) -> None:
        assert repr(QueryParams("a=1")) == "QueryParams({'a': '1'})"


class TestSplitUrl:
    def test_path_and_query(self) -> None:
        assert split_url("/talk/3?ref=home#top") == ("/talk/3", "ref=home")

    def test_path_only(self) -> None:
        assert split_url("/home") == ("/home", "")
