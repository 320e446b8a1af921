import pytest

from solong.colors import color_names, lookup_color


def test_pinned_values_from_table():
    assert lookup_color("snow") == 0xFFFAFA
    assert lookup_color("white") == 0xFFFFFF
    assert lookup_color("black") == 0x0
    assert lookup_color("lightgoldenrodyellow") == 0xFAFAD2


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_first_entry_wins_for_duplicates():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light goldenrod") == 0xFAFAD2


@pytest.mark.parametrize("name", ["SNOW", "Snow", "sNoW"])
def test_lookup_is_case_insensitive(name):
    assert lookup_color(name) == lookup_color("snow")


def test_unknown_name_raises():
    with pytest.raises(KeyError):
        lookup_color("not a colour")


def test_names_are_unique_and_in_order():
    names = color_names()
    assert len(names) == len(set(names))
    assert names[0] == "snow"
    assert names[-1] == "none"


def test_every_name_resolves_within_range():
    for name in color_names():
        value = lookup_color(name)
        assert value == -1 or 0 <= value <= 0xFFFFFF


def test_gray_and_grey_agree():
    for n in range(101):
        assert lookup_color(f"gray{n}") == lookup_color(f"grey{n}")


def test_numbered_variant_one_matches_base_where_listed():
    for base in ("snow", "bisque", "red", "gold", "orange"):
        assert lookup_color(f"{base}1") == lookup_color(base)