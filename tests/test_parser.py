import io

import pytest

from fdfview.parser import read_grid, read_lines, split_words, to_grid


def test_split_words_drops_empty_pieces():
    assert split_words("  a  b ", " ") == ["a", "b"]


def test_split_words_only_separators():
    assert split_words("    ", " ") == []


def test_split_words_no_separator_present():
    assert split_words("abc", ",") == ["abc"]


def test_split_words_rejects_empty_separator():
    with pytest.raises(ValueError):
        split_words("a b", "")


def test_split_words_rejects_long_separator():
    with pytest.raises(ValueError):
        split_words("a b", "ab")


def test_read_lines_strips_newlines():
    assert list(read_lines(io.StringIO("a\nb\n"))) == ["a", "b"]


def test_read_lines_keeps_unterminated_last_line():
    assert list(read_lines(io.StringIO("a\nb"))) == ["a", "b"]


def test_read_lines_empty_stream():
    assert list(read_lines(io.StringIO(""))) == []


def test_read_lines_keeps_blank_lines():
    assert list(read_lines(io.StringIO("a\n\nb\n"))) == ["a", "", "b"]


def test_to_grid_skips_blank_lines():
    assert to_grid("0 1\n\n2 3\n") == [["0", "1"], ["2", "3"]]


def test_to_grid_tabs_are_not_separators():
    assert to_grid("0\t1 2") == [["0\t1", "2"]]


def test_to_grid_empty_text():
    assert to_grid("") == []


def test_read_grid_round_trip():
    rows = [["0", "0", "10"], ["5", "-3", "0"]]
    text = "\n".join(" ".join(row) for row in rows)
    assert read_grid(io.StringIO(text)) == rows


def test_read_grid_irregular_spacing():
    assert read_grid(io.StringIO("  1   2\n3  4  \n\n")) == [["1", "2"], ["3", "4"]]