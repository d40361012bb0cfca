import io

import pytest

from zombiesurvival.menu import MenuChoice, parse_choice, show_menu


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1", MenuChoice.NEW_GAME),
        ("2\n", MenuChoice.LOAD_GAME),
        ("  3", MenuChoice.OPTIONS),
        ("4\n", MenuChoice.EXIT),
        ("+1", MenuChoice.NEW_GAME),
        ("2x", MenuChoice.LOAD_GAME),
    ],
)
def test_parse_choice_reads_leading_number(text, expected):
    assert parse_choice(text) is expected


@pytest.mark.parametrize("text", ["", "abc", "0", "5", "-1", "\n"])
def test_parse_choice_rejects_unknown(text):
    assert parse_choice(text) is None


def test_show_menu_prints_and_reads():
    out = io.StringIO()
    choice = show_menu(io.StringIO("1\n"), out)
    assert choice is MenuChoice.NEW_GAME
    text = out.getvalue()
    assert "ZOMBIE SURVIVAL" in text
    assert text.endswith("GAME START? : ")
    assert "4. Exit" in text


def test_show_menu_exit_choice():
    assert show_menu(io.StringIO("4\n"), io.StringIO()) is MenuChoice.EXIT


def test_show_menu_end_of_input():
    assert show_menu(io.StringIO(""), io.StringIO()) is None


def test_show_menu_reads_only_one_line():
    stdin = io.StringIO("1\n4\n")
    show_menu(stdin, io.StringIO())
    assert stdin.readline() == "4\n"