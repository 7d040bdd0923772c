"""Tests for genre flag decoding."""

from models.category import CATEGORY_COUNT, CategorySet, decode_categories


def test_decode_sets_known_codes_and_ignores_unknown():
    genres = decode_categories("3,17,34,99")
    assert genres.codes() == [3, 17, 34]
    assert len(genres) == 3


def test_duplicates_are_idempotent():
    assert decode_categories("5,5,5") == decode_categories("5")


def test_garbage_tokens_are_ignored():
    genres = decode_categories(",0,-1,abc, 4,04,35,2")
    assert genres.codes() == [2]


def test_empty_list_sets_nothing():
    genres = decode_categories("")
    assert genres == CategorySet()
    assert genres.to_dict() == {}


def test_all_codes():
    packed = ",".join(str(code) for code in range(1, CATEGORY_COUNT + 1))
    genres = decode_categories(packed)
    assert genres.codes() == list(range(1, CATEGORY_COUNT + 1))
    assert genres.is_set(1)
    assert genres.is_set(34)


def test_is_set_out_of_range():
    genres = decode_categories("1,34")
    assert not genres.is_set(0)
    assert not genres.is_set(35)


def test_to_dict_renders_set_flags_only():
    assert decode_categories("3,17").to_dict() == {"genre3": "1", "genre17": "1"}
