import pytest

from solong.wordtab import str_str, str_str_quoted, str_to_wordtab


def test_wordtab_splits_xpm_header():
    assert str_to_wordtab("50 50 5 1") == ["50", "50", "5", "1"]


def test_wordtab_collapses_spaces_and_tabs():
    words = str_to_wordtab("  c \t #FF0000\t\t none ")
    assert words == ["c", "#FF0000", "none"]


def test_wordtab_keeps_newlines_inside_words():
    words = str_to_wordtab("a\nb c")
    assert words == ["a\nb", "c"]


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_wordtab_blank_input_gives_no_words(text):
    assert str_to_wordtab(text) == []


@pytest.mark.parametrize("text", ["x y", " alpha\tbeta  gamma ", "one"])
def test_wordtab_join_round_trip(text):
    words = str_to_wordtab(text)
    assert " ".join(words) == " ".join(text.split())
    assert all(" " not in w and "\t" not in w for w in words)


@pytest.mark.parametrize(
    "text, find",
    [("static char *x[]", "char"), ("abcabc", "ca"), ("hello", "zz"), ("ab", "abc")],
)
def test_str_str_matches_find(text, find):
    assert str_str(text, find) == text.find(find)


def test_str_str_rejects_empty_needle():
    with pytest.raises(ValueError):
        str_str("abc", "")


def test_quoted_search_skips_quoted_text():
    text = '"/* inside */" /* outside */'
    assert str_str_quoted(text, "/*") == text.rindex("/*")


def test_quoted_search_without_quotes_behaves_like_find():
    text = "int x; // comment"
    assert str_str_quoted(text, "//") == text.find("//")


def test_quoted_search_only_quoted_matches_gives_minus_one():
    assert str_str_quoted('"a // b"', "//") == -1


def test_quoted_search_rejects_empty_needle():
    with pytest.raises(ValueError):
        str_str_quoted("abc", "")