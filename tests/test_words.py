import pytest

from cubed.words import split, strtrim, substr


def test_split_drops_repeated_separators():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_simple_list():
    assert split("220,100,0", ",") == ["220", "100", "0"]


def test_split_empty_and_separator_only():
    assert split("", " ") == []
    assert split(",,,", ",") == []


@pytest.mark.parametrize("text", ["a,b,c", "one", "north,south,east,west"])
def test_split_round_trip(text):
    assert ",".join(split(text, ",")) == text


def test_split_words_never_contain_separator():
    for word in split(" a  bb   ccc ", " "):
        assert word
        assert " " not in word


def test_strtrim_removes_set_from_both_ends():
    assert strtrim("  xx abc xx  ", " x") == "abc"


def test_strtrim_everything_trimmed():
    assert strtrim("xxx", "x") == ""


def test_strtrim_empty_set_keeps_string():
    assert strtrim("abc", "") == "abc"


def test_strtrim_result_edges_not_in_set():
    result = strtrim("\t\n value \n", " \t\n")
    assert result == "value"
    assert result[0] not in " \t\n"
    assert result[-1] not in " \t\n"


def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_past_end():
    assert substr("hello world", 6, 100) == "world"


def test_substr_start_at_or_past_end():
    assert substr("abc", len("abc"), 2) == ""
    assert substr("abc", 10, 2) == ""


def test_substr_pieces_reassemble():
    text = "cub3d map"
    assert substr(text, 0, 4) + substr(text, 4, len(text)) == text


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)
    with pytest.raises(ValueError):
        substr("abc", 0, -2)