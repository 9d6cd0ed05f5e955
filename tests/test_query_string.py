import pytest

from scratchweb.query_string import QueryString


@pytest.fixture
def sample():
    return QueryString.parse("a=1&b=2&c&d=&e===&d=7&d=abc")


def test_single_values(sample):
    assert sample.get("a") == "1"
    assert sample.get("b") == "2"


def test_key_without_equals_has_empty_value(sample):
    assert sample.get("c") == ""


def test_repeated_key_collects_in_order(sample):
    assert sample.get("d") == ["", "7", "abc"]


def test_only_first_equals_splits(sample):
    assert sample.get("e") == "=="


def test_missing_key(sample):
    assert sample.get("zzz") is None
    assert "zzz" not in sample


def test_key_count(sample):
    assert len(sample) == 5


def test_two_occurrences_become_list():
    qs = QueryString.parse("x=first&x=second")
    assert qs.get("x") == ["first", "second"]


def test_empty_text_gives_empty_key():
    qs = QueryString.parse("")
    assert qs.data == {"": ""}