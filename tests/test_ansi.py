import pytest

from fixed8.ansi import Style, paint


def test_red_sequence_matches_definition():
    assert paint("", "RED") == "\001\033[0;31m\002\001\033[0m\002"


def test_reset_aliases_share_one_member():
    assert Style("\001\033[0m\002") is Style.RESET
    for alias in ("CRESET", "COLOR_RESET", "NC"):
        assert paint("x", alias) == paint("x", Style.RESET)


def test_paint_wraps_text_with_style_and_reset():
    result = paint("hello", Style.GRN)
    assert result.startswith(Style.GRN.value)
    assert result.endswith(Style.RESET.value)
    assert result[len(Style.GRN.value):-len(Style.RESET.value)] == "hello"


def test_paint_accepts_style_name():
    assert paint("x", "BLUHB") == paint("x", Style.BLUHB)


def test_paint_converts_non_string_text():
    assert paint(42, Style.CYN) == Style.CYN.value + "42" + Style.RESET.value


def test_paint_rejects_unknown_name():
    with pytest.raises(ValueError):
        paint("x", "NOT_A_STYLE")


def test_str_of_style_is_its_sequence():
    assert str(Style.BHWHT) == "\001\033[1;97m\002"
    assert paint("", Style.BHWHT).startswith(str(Style.BHWHT))


@pytest.mark.parametrize("style", list(Style))
def test_every_style_is_escape_sequence(style):
    result = paint("t", style)
    assert result.startswith("\001\033[")
    assert "m\002t\001" in result