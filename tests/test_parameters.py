"""Tests for fluri.parameters — the shared multi-map and QueryString."""

import dataclasses

import pytest

from fluri.encoding import NoopEncoder, PercentEncoder
from fluri.parameters import QueryString
from fluri.path import MatrixParams


class TestQueryStringLookup:
    def test_params_returns_all_in_order(self) -> None:
        q = QueryString((("a", "1"), ("b", "x"), ("a", "2")))
        assert q.params("a") == ["1", "2"]
        assert q.params("missing") == []

    def test_param_returns_first(self) -> None:
        q = QueryString((("a", "1"), ("a", "2")))
        assert q.param("a") == "1"
        assert q.param("missing") is None

    def test_list_input_stored_as_tuple(self) -> None:
        q = QueryString([("a", "1")])  # type: ignore[arg-type]
        assert q.parameters == (("a", "1"),)

    def test_len_and_bool(self) -> None:
        assert len(QueryString((("a", "1"), ("b", "2")))) == 2
        assert not QueryString()


class TestAdd:
    def test_add_appends(self) -> None:
        q = QueryString((("a", "1"),)).add(("a", "2"))
        assert q.parameters == (("a", "1"), ("a", "2"))

    def test_add_param_stringifies(self) -> None:
        q = QueryString().add_param("page", 3)
        assert q.parameters == (("page", "3"),)

    def test_add_params(self) -> None:
        q = QueryString((("a", "1"),)).add_params([("b", "2"), ("c", "3")])
        assert q.parameters == (("a", "1"), ("b", "2"), ("c", "3"))

    def test_original_unchanged(self) -> None:
        original = QueryString((("a", "1"),))
        original.add(("b", "2"))
        assert original.parameters == (("a", "1"),)


class TestReplaceAndRemove:
    def test_replace_all_moves_to_end(self) -> None:
        q = QueryString((("k", "1"), ("k", "2"), ("j", "x")))
        assert q.replace_all("k", "9").parameters == (("j", "x"), ("k", "9"))

    def test_replace_all_with_none_removes(self) -> None:
        q = QueryString((("k", "1"), ("j", "x")))
        assert q.replace_all("k", None).parameters == (("j", "x"),)

    def test_replace_all_missing_key_appends(self) -> None:
        q = QueryString((("j", "x"),))
        assert q.replace_all("k", 1).parameters == (("j", "x"), ("k", "1"))

    def test_remove_all_preserves_order(self) -> None:
        q = QueryString((("a", "1"), ("k", "1"), ("b", "2"), ("k", "2"), ("c", "3")))
        assert q.remove_all("k").parameters == (("a", "1"), ("b", "2"), ("c", "3"))

    def test_remove_all_missing_key(self) -> None:
        q = QueryString((("a", "1"),))
        assert q.remove_all("k") == q


class TestEncoding:
    def test_params_encoded(self) -> None:
        q = QueryString((("a b", "c&d"), ("e", "")))
        assert q.params_encoded(PercentEncoder()) == "a%20b=c%26d&e="

    def test_params_raw(self) -> None:
        q = QueryString((("a b", "c&d"),))
        assert q.params_raw() == "a b=c&d"

    def test_encoded_adds_question_mark(self) -> None:
        q = QueryString((("a", "1"), ("b", "2")))
        assert q.encoded() == "?a=1&b=2"

    def test_empty_encodes_to_empty_string(self) -> None:
        assert QueryString().encoded() == ""
        assert QueryString().params_encoded(NoopEncoder()) == ""

    def test_charset(self) -> None:
        q = QueryString((("q", "é"),))
        assert q.encoded(PercentEncoder(), "ISO-8859-1") == "?q=%E9"

    def test_matrix_params_use_semicolon(self) -> None:
        m = MatrixParams("p", (("a", "1"), ("b", "2")))
        assert m.params_encoded() == "a=1;b=2"


class TestImmutability:
    def test_frozen(self) -> None:
        q = QueryString()
        with pytest.raises(dataclasses.FrozenInstanceError):
            q.parameters = (("a", "1"),)  # type: ignore[misc]

    def test_hashable(self) -> None:
        assert hash(QueryString((("a", "1"),))) == hash(QueryString((("a", "1"),)))
