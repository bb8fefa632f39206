"""Tests for key parsing helpers."""

import readchar

from rich_select.keys import Key, KeyEvent, is_control, is_enter, is_escape, parse_key


class TestParseKey:
    def test_arrows(self):
        assert parse_key(readchar.key.UP) == KeyEvent(Key.UP)
        assert parse_key(readchar.key.DOWN) == KeyEvent(Key.DOWN)

    def test_paging(self):
        assert parse_key(readchar.key.PAGE_UP).key == Key.PAGE_UP
        assert parse_key(readchar.key.PAGE_DOWN).key == Key.PAGE_DOWN

    def test_home_end_variants(self):
        assert parse_key(readchar.key.HOME).key == Key.HOME
        assert parse_key(readchar.key.END).key == Key.END
        assert parse_key("\x1b[1~").key == Key.HOME
        assert parse_key("\x1bOF").key == Key.END

    def test_backspace_variants(self):
        for raw in (readchar.key.BACKSPACE, "\x7f", "\b"):
            assert parse_key(raw).key == Key.BACKSPACE

    def test_printable_character(self):
        event = parse_key("j")
        assert event == KeyEvent(Key.OTHER, "j")
        assert event.is_text_input

    def test_vim_keys(self):
        assert parse_key("j", vim_keys=True) == KeyEvent(Key.DOWN)
        assert parse_key("k", vim_keys=True) == KeyEvent(Key.UP)
        assert parse_key("x", vim_keys=True) == KeyEvent(Key.OTHER, "x")

    def test_unknown_sequence_has_no_char(self):
        event = parse_key("\x1b[15~")
        assert event == KeyEvent(Key.OTHER)
        assert not event.is_text_input


class TestKeyEvent:
    def test_control_characters_are_not_text(self):
        assert not KeyEvent(Key.OTHER, "\r").is_text_input
        assert not KeyEvent(Key.OTHER, "\x03").is_text_input

    def test_navigation_has_no_text(self):
        assert not KeyEvent(Key.UP).is_text_input


class TestPredicates:
    def test_is_control(self):
        assert is_control("\x00")
        assert is_control("\x7f")
        assert not is_control("a")
        assert not is_control(" ")

    def test_is_enter(self):
        assert is_enter("\r")
        assert is_enter("\n")
        assert not is_enter("e")

    def test_is_escape(self):
        assert is_escape("\x1b")
        assert not is_escape("q")
